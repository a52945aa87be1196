"""Resource API - User Route Handlers (GET /users)."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.database import get_db_session
from resource_api.schemas.user import UserRow
from resource_api.services.user_service import user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserRow], summary="List all users")
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserRow]:
    return await user_service.list_users(db)
