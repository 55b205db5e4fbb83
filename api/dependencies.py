"""Request dependencies."""
from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from exceptions import UserNotFoundError
from logging_config import bind_context
from models import Actor, get_db
from services import FleetService, LoadLifecycleManager, NotificationService, UserService


async def get_actor(
    x_user_id: Optional[str] = Header(None),
    db: Session = Depends(get_db)
) -> Actor:
    """
    Resolve the caller from the X-User-Id header.

    The authentication gateway in front of the API verifies the session and
    forwards the user id; the role is read from the profile store.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")

    try:
        actor = UserService(db).get_actor(x_user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=401, detail="Unknown user")

    bind_context(user_id=actor.id, role=actor.role.value)
    return actor


def get_lifecycle(db: Session = Depends(get_db)) -> LoadLifecycleManager:
    return LoadLifecycleManager(db)


def get_notifications(db: Session = Depends(get_db)) -> NotificationService:
    return NotificationService(db)


def get_fleet(db: Session = Depends(get_db)) -> FleetService:
    return FleetService(db)
