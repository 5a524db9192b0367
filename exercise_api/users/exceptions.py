"""Exceptions raised by the users module."""

from exercise_api.exceptions import ExerciseAPIError


class UserCreateError(ExerciseAPIError):
    """Raised when the users table rejects an insert.

    Attributes:
        reason: Description of the underlying database failure.
    """

    status_code = 500

    def __init__(self, reason: str = ""):
        super().__init__(
            message="Server error: could not create user",
            code="USER_CREATE_FAILED"
        )
        self.reason = reason
