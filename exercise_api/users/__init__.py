"""Users module - create-only user registration."""

from .models import User
from .schemas import UserCreate, UserCreated, UserSex
from .exceptions import UserCreateError
from .service import register_user
from .router import router


__all__ = [
    "User",
    "UserCreate",
    "UserCreated",
    "UserSex",
    "UserCreateError",
    "register_user",
    "router",
]
