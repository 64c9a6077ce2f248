"""
Activity Repository
"""

import uuid
from typing import Optional, Any, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Activity
from edusaarthi.domain.repositories.base import AbstractRepository


class ActivityRepository(AbstractRepository[Activity]):
    """Activity Repository"""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Activity)

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
        """
        Create an activity entry

        Args:
            user_id: owner UUID
            title: short title shown in the feed
            description: one line description
            type: activity type (task type for generated content)
            file_name: source document display name
            file_path: source document path
            content: generated content (JSON serialisable)

        Returns:
            Activity: created entity
        """
        return await self.create(
            user_id=user_id,
            title=title,
            description=description,
            type=type,
            file_name=file_name,
            file_path=file_path,
            content=content,
        )

    async def get_user_activities(
        self, user_id: uuid.UUID, skip: int = 0, limit: int = 50
    ) -> List[Activity]:
        """Most recent activities of a user"""
        query = (
            select(Activity)
            .where(Activity.user_id == user_id)
            .order_by(Activity.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())
