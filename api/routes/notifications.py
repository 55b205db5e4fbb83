"""Notification endpoints."""
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict

from config import get_settings
from api.dependencies import get_actor, get_notifications
from models import Actor
from services import NotificationService

router = APIRouter()
settings = get_settings()


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    body: str
    is_read: bool
    load_id: Optional[str]
    created_at: Optional[datetime]


@router.get("/notifications", response_model=List[NotificationResponse])
async def list_notifications(
    unread_only: bool = False,
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    actor: Actor = Depends(get_actor),
    notifications: NotificationService = Depends(get_notifications)
):
    """List the caller's notifications, newest first."""
    return notifications.list_for_user(actor.id, unread_only, skip, limit)


@router.get("/notifications/unread-count")
async def unread_count(
    actor: Actor = Depends(get_actor),
    notifications: NotificationService = Depends(get_notifications)
):
    """Number of unread notifications."""
    return {"unread": notifications.unread_count(actor.id)}


@router.post("/notifications/read")
async def mark_all_read(
    actor: Actor = Depends(get_actor),
    notifications: NotificationService = Depends(get_notifications)
):
    """Mark all of the caller's notifications as read."""
    return {"updated": notifications.mark_all_read(actor.id)}
