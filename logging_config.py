"""Structured logging for the marketplace core."""
import logging
import sys
from typing import Any, Optional

import structlog
from config import get_settings

SERVICE_NAME = "sas-transport"


def add_service_context(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Stamp every event with the service name and environment."""
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("env", get_settings().app_env)
    return event_dict


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Configure structlog on top of the standard library logger.

    Production renders one JSON object per line; every other environment
    uses the colored console renderer.

    Args:
        log_level: Override for the LOG_LEVEL setting
    """
    settings = get_settings()
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    # SQL echo and access logs duplicate the request log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        add_service_context,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.is_production:
        renderer = [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for a module; pass __name__."""
    return structlog.get_logger(name)


def bind_context(**context: Any) -> None:
    """
    Bind fields to every log event of the current request.

    The request middleware binds request_id, method and path; the actor
    dependency adds user_id and role.
    """
    structlog.contextvars.bind_contextvars(**context)


def clear_context() -> None:
    """Drop all request-bound fields."""
    structlog.contextvars.clear_contextvars()
