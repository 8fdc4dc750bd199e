"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API error
handler, which turns them into 401/403/400 responses. Library errors (PyJWT,
argon2) never leave this module; they are normalized into this taxonomy.
"""

from shared.exceptions import AuthenticationError, AuthorizationError, ValidationError


class NotAuthenticatedError(AuthenticationError):
    """Raised when no access token is provided."""

    def __init__(self, message: str = "Please login to access this resource"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, wrongly signed or otherwise unusable."""

    def __init__(self, message: str = "Invalid authentication token", code: str = "INVALID_TOKEN"):
        super().__init__(message, code=code)


class ExpiredTokenError(InvalidTokenError):
    """Raised when a token's signature is valid but it has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class SessionNotFoundError(AuthenticationError):
    """Raised when a valid access token has no session cache entry."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, code="SESSION_NOT_FOUND")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    Used for both unknown emails and wrong passwords so that responses do
    not reveal which accounts exist.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class ForbiddenError(AuthorizationError):
    """Raised when the authenticated user's role is not allowed."""

    def __init__(self, role: str):
        super().__init__(
            f"Role: {role} is not allowed to access this resource",
            code="FORBIDDEN",
            details={"role": role},
        )


class InvalidActivationCodeError(ValidationError):
    """Raised when the submitted activation code does not match the token."""

    def __init__(self, message: str = "Invalid activation code"):
        super().__init__(message, code="INVALID_ACTIVATION_CODE")
