"""Resource API - User Service (read only)."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.models.user import User
from resource_api.schemas.user import UserRow
from resource_api.services.base import translate_db_errors


class UserService:

    async def list_users(self, db: AsyncSession) -> List[UserRow]:
        with translate_db_errors("list_users"):
            result = await db.execute(select(User))
            users = result.scalars().all()
        return [UserRow.model_validate(u) for u in users]


user_service = UserService()
