"""
Activity Service
Records activity entries in their own unit of work
"""

import logging
import uuid
from typing import Optional, Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from edusaarthi.core.database.session import AsyncSessionLocal
from .models import Activity
from .repository import ActivityRepository

logger = logging.getLogger(__name__)


class ActivityService:
    """
    Activity recorder used by the task executor

    Each call commits on its own session so the record survives any later
    failure of the calling pipeline.
    """

    def __init__(self, session_factory: Optional[async_sessionmaker[AsyncSession]] = None):
        self.session_factory = session_factory or AsyncSessionLocal

    async def create_activity(
        self,
        user_id: uuid.UUID,
        title: str,
        description: str,
        type: str,
        file_name: Optional[str] = None,
        file_path: Optional[str] = None,
        content: Optional[Any] = None,
    ) -> Activity:
        async with self.session_factory() as session:
            repo = ActivityRepository(session)
            activity = await repo.create_activity(
                user_id=user_id,
                title=title,
                description=description,
                type=type,
                file_name=file_name,
                file_path=file_path,
                content=content,
            )
            await session.commit()

        logger.info(f"Activity {activity.id} created for user {user_id} ({type})")
        return activity
