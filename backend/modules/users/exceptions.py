"""
Users module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when an identity record does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class DuplicateEmailError(ConflictError):
    """Raised when an email is already registered."""

    def __init__(self, message: str = "Email already exists"):
        super().__init__(message, code="DUPLICATE_EMAIL")


class InvalidPasswordError(ValidationError):
    """Raised when a password change cannot be applied."""

    def __init__(self, message: str = "Invalid old password"):
        super().__init__(message, code="INVALID_PASSWORD")

