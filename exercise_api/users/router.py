"""FastAPI router for user registration."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_api.database import get_db

from .schemas import UserCreate, UserCreated
from .service import register_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserCreated, status_code=201)
async def create_user_endpoint(
    user_create: UserCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserCreated:
    """Register a new user.

    Args:
        user_create: Registration data.
        db: Database session.

    Returns:
        The generated user ID and a confirmation message.
    """
    user = await register_user(db, user_create)
    return UserCreated(id=user.id)
