"""Service layer for user registration."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from .exceptions import UserCreateError
from .models import User
from .repository import create_user
from .schemas import UserCreate

logger = get_logger("users")


async def register_user(db: AsyncSession, user_create: UserCreate) -> User:
    """Register a user and persist it.

    Args:
        db: Database session.
        user_create: Registration data.

    Returns:
        The created User instance.

    Raises:
        UserCreateError: If the insert or commit fails.
    """
    try:
        user = await create_user(db, user_create)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("user_create_failed", error=str(e))
        raise UserCreateError(reason=str(e)) from e

    logger.info("user_created", user_id=user.id)
    return user
