"""Liveness and database connectivity probe."""
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import get_settings
from logging_config import get_logger
from models import get_db

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health")
async def health_check(db: Session = Depends(get_db)):
    """Report whether the load store answers queries."""
    try:
        db.execute(text("SELECT 1"))
        database = "healthy"
    except SQLAlchemyError as e:
        logger.error("Database health check failed", error=str(e))
        database = "unreachable"

    return {
        "status": "healthy" if database == "healthy" else "degraded",
        "database": database,
        "env": get_settings().app_env,
    }
