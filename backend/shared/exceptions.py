"""
Base exception classes for the LearnHub backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to one HTTP status code, so choosing the
right base is what decides the response a client sees.
"""

from typing import Optional, Any


class LearnHubError(Exception):
    """
    Base exception for all LearnHub errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(LearnHubError):
    """Resource not found."""

    pass


class ValidationError(LearnHubError):
    """Input validation failed."""

    pass


class ConflictError(LearnHubError):
    """Resource conflicts with existing state (e.g. unique key taken)."""

    pass


class AuthenticationError(LearnHubError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(LearnHubError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConfigurationError(LearnHubError):
    """Server is missing required configuration."""

    pass


class ExternalServiceError(LearnHubError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
