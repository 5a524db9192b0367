"""Tests for the users module."""

import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from exercise_api.main import app
from exercise_api.database import get_db
from exercise_api.users import UserCreate, UserCreateError, UserSex, register_user
from exercise_api.users.models import User
from exercise_api.users.repository import create_user

client = TestClient(app)


def make_db_mock() -> AsyncMock:
    db_mock = AsyncMock()
    db_mock.add = MagicMock()
    return db_mock


class TestUserCreate:
    """Tests for the registration schema."""

    def test_defaults(self):
        user = UserCreate()
        assert user.name == ""
        assert user.age == 0
        assert user.sex == UserSex.UNKNOWN
        assert user.description == ""

    def test_string_age_rejected(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            UserCreate(name="Taro", age="20")


class TestUsersRepository:
    """Tests for user repository functions."""

    @pytest.mark.asyncio
    async def test_create_user(self):
        """Creating a user assigns a UUID and commits."""
        db_mock = make_db_mock()
        user_create = UserCreate(name="Taro", age=20, sex=UserSex.MALE, description="hi")

        user = await create_user(db_mock, user_create)

        assert isinstance(user, User)
        assert str(uuid.UUID(user.id)) == user.id
        assert user.name == "Taro"
        assert user.age == 20
        assert user.sex == 1
        assert user.description == "hi"

        db_mock.add.assert_called_once_with(user)
        db_mock.commit.assert_awaited_once()
        db_mock.refresh.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_ids_are_unique(self):
        db_mock = make_db_mock()
        first = await create_user(db_mock, UserCreate(name="a"))
        second = await create_user(db_mock, UserCreate(name="b"))
        assert first.id != second.id


class TestUsersService:
    """Tests for user registration logic."""

    @pytest.mark.asyncio
    async def test_register_user(self):
        db_mock = make_db_mock()
        created = User(id=str(uuid.uuid4()), name="Taro", age=20, sex=1, description="")

        with patch("exercise_api.users.service.create_user", new_callable=AsyncMock) as mock_create:
            mock_create.return_value = created
            result = await register_user(db_mock, UserCreate(name="Taro", age=20, sex=1))

        assert result is created
        db_mock.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_user_database_error(self):
        """Database errors roll back and surface as UserCreateError."""
        db_mock = make_db_mock()
        db_mock.commit.side_effect = SQLAlchemyError("connection lost")

        with pytest.raises(UserCreateError) as exc_info:
            await register_user(db_mock, UserCreate(name="Taro"))

        assert exc_info.value.code == "USER_CREATE_FAILED"
        assert exc_info.value.message == "Server error: could not create user"
        assert "connection lost" in exc_info.value.reason
        db_mock.rollback.assert_awaited_once()


class TestUsersEndpoint:
    """Tests for POST /users."""

    @pytest.fixture
    def db_mock(self):
        db_mock = make_db_mock()

        async def override_get_db():
            yield db_mock

        app.dependency_overrides[get_db] = override_get_db
        yield db_mock
        del app.dependency_overrides[get_db]

    def test_create_user(self, db_mock):
        response = client.post(
            "/users",
            json={"name": "Taro", "age": 20, "sex": 1, "description": "hello"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User created successfully"
        uuid.UUID(body["id"])

        added = db_mock.add.call_args[0][0]
        assert added.id == body["id"]
        assert added.name == "Taro"

    def test_create_user_database_error(self, db_mock):
        db_mock.commit.side_effect = OperationalError("INSERT", {}, Exception("down"))

        response = client.post("/users", json={"name": "Taro", "age": 20, "sex": 1})

        assert response.status_code == 500
        assert response.json() == {
            "error": "USER_CREATE_FAILED",
            "message": "Server error: could not create user",
        }

    def test_create_user_invalid_body(self, db_mock):
        response = client.post("/users", json={"name": "Taro", "age": "twenty"})
        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_REQUEST_BODY"
        db_mock.add.assert_not_called()

    def test_get_not_allowed(self, db_mock):
        response = client.get("/users")
        assert response.status_code == 405
