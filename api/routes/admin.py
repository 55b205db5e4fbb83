"""Admin dashboard endpoints."""
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from config import get_settings
from api.dependencies import get_actor, get_lifecycle
from api.routes.loads import LoadResponse
from metrics import MetricsCollector
from models import Actor, get_db
from services import LoadLifecycleManager, UserService

router = APIRouter()
settings = get_settings()


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    full_name: str
    email: Optional[str]
    phone: Optional[str]
    role: Optional[str]
    created_at: Optional[datetime]


@router.get("/stats")
async def marketplace_stats(actor: Actor = Depends(get_actor), db: Session = Depends(get_db)):
    """Platform totals for the admin dashboard."""
    return MetricsCollector(db).get_marketplace_metrics(actor).to_dict()


@router.get("/users", response_model=List[UserResponse])
async def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    actor: Actor = Depends(get_actor),
    db: Session = Depends(get_db)
):
    """List all users with their roles."""
    return UserService(db).list_users(actor, skip, limit)


@router.get("/loads", response_model=List[LoadResponse])
async def list_all_loads(
    skip: int = Query(0, ge=0),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    actor: Actor = Depends(get_actor),
    lifecycle: LoadLifecycleManager = Depends(get_lifecycle)
):
    """List every load."""
    return lifecycle.list_all_loads(actor, skip, limit)
