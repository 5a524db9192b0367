"""Repository layer for users."""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from .models import User
from .schemas import UserCreate


async def create_user(db: AsyncSession, user_create: UserCreate) -> User:
    """Insert a new user row.

    Args:
        db: Database session.
        user_create: Registration data.

    Returns:
        The created User instance.
    """
    user = User(
        id=str(uuid.uuid4()),
        name=user_create.name,
        age=user_create.age,
        sex=user_create.sex,
        description=user_create.description,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user
