"""FastAPI main application."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import get_settings
from exceptions import ConfigurationError
from logging_config import get_logger, setup_logging
from models import init_db
from api.middleware import setup_middleware
from api.routes import admin, fleet, health, loads, notifications

setup_logging()
logger = get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan events."""
    logger.info("Starting SAS Transport API")

    problems = settings.validate_required_settings()
    for problem in problems:
        logger.warning("Configuration problem", problem=problem)
    if problems and settings.is_production:
        raise ConfigurationError("; ".join(problems))

    try:
        init_db()
        logger.info("Database initialized")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))

    yield

    logger.info("Shutting down SAS Transport API")


app = FastAPI(
    title="SAS Transport",
    description="Freight load marketplace for shippers, drivers and admins",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_middleware(app)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )


app.include_router(health.router, tags=["Health"])
app.include_router(loads.router, prefix="/api", tags=["Loads"])
app.include_router(notifications.router, prefix="/api", tags=["Notifications"])
app.include_router(fleet.router, prefix="/api", tags=["Fleet"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "SAS Transport",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
