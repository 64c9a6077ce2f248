"""
Database Session Management
Async SQLAlchemy engine and session factory
"""

from typing import Any, Dict
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from ..config import settings


def _engine_options(url: str) -> Dict[str, Any]:
    """Pool options per backend (SQLite does not accept pool sizing)"""
    if url.startswith("sqlite"):
        return {}
    if settings.app_env == "testing":
        return {"poolclass": NullPool, "pool_pre_ping": True}
    return {
        "pool_pre_ping": True,  # connection health check
        "pool_size": 10,
        "max_overflow": 20,
    }


engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,  # SQL echo in development
    **_engine_options(settings.database_url),
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

