"""Pydantic schemas for user registration."""

from enum import IntEnum

from pydantic import BaseModel, Field, StrictInt, StrictStr


class UserSex(IntEnum):
    """Numeric sex codes used by the registration form."""
    UNKNOWN = 0
    MALE = 1
    FEMALE = 2
    OTHER = 9


class UserCreate(BaseModel):
    """Schema for registering a user. Missing fields default to zero values."""
    name: StrictStr = Field("", description="Display name")
    age: StrictInt = Field(0, description="Age in years")
    sex: StrictInt = Field(UserSex.UNKNOWN, description="0=unknown, 1=male, 2=female, 9=other")
    description: StrictStr = Field("", description="Free-form profile text")


class UserCreated(BaseModel):
    """Response returned after a user row has been inserted."""
    id: str
    message: str = "User created successfully"
