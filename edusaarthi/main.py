"""
Edusaarthi Automation Service - Main Application
FastAPI host for the scheduled task engine
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.database import engine, Base
from .core.exceptions.handlers import register_exception_handlers
from .core.logging import configure_logging, get_logger
from .features.scheduler.dependencies import build_scheduler, get_scheduler, set_scheduler

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle

    Startup:
        - logging setup
        - table creation (dev + debug only)
        - scheduler start

    Shutdown:
        - scheduler stop
        - database connections closed
    """
    configure_logging()
    logger.info(
        f"{settings.app_title} starting",
        version=settings.app_version,
        environment=settings.app_env,
        debug=settings.debug,
    )

    try:
        async with engine.begin() as conn:
            # migrations are managed outside this service in production
            if settings.app_env == "dev" and settings.debug:
                await conn.run_sync(Base.metadata.create_all)
                logger.info("Database tables created (development mode)")
    except Exception as e:
        logger.warning(f"Database connection failed: {e}")

    if settings.scheduler_enabled:
        try:
            scheduler = build_scheduler()
            scheduler.start()
            set_scheduler(scheduler)
        except Exception as e:
            logger.error(f"Scheduler failed to start: {e}", exc_info=True)
    else:
        logger.info("Scheduler disabled by configuration")

    yield

    logger.info(f"{settings.app_title} shutting down")

    scheduler = get_scheduler()
    if scheduler:
        try:
            await scheduler.stop()
        except Exception as e:
            logger.warning(f"Scheduler stop error: {e}")
        set_scheduler(None)

    await engine.dispose()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.app_title,
    description=settings.app_description,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
)

register_exception_handlers(app)


# ==================== Health Check ====================


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint

    Returns:
        dict: service status and scheduler state
    """
    scheduler = get_scheduler()
    return {
        "status": "ok",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
        "scheduler_running": bool(scheduler and scheduler.is_running),
    }


@app.head("/health", tags=["Health"])
async def health_check_head():
    return JSONResponse(content={"status": "ok"})
