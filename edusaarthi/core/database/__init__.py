"""
Database Module
Async SQLAlchemy setup
"""

from .session import AsyncSessionLocal, engine
from .base import Base

__all__ = ["AsyncSessionLocal", "engine", "Base"]
