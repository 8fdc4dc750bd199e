"""
Shared infrastructure for LearnHub backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- cache: Key-value cache (Redis or in-process)
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .cache import IKeyValueCache, RedisCache, InMemoryCache, get_cache, reset_cache
from .exceptions import (
    LearnHubError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ExternalServiceError,
)
from .models import User, UserPublic, UserRole, Avatar, EnrolledCourse

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "IKeyValueCache",
    "RedisCache",
    "InMemoryCache",
    "get_cache",
    "reset_cache",
    "LearnHubError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "ExternalServiceError",
    "User",
    "UserPublic",
    "UserRole",
    "Avatar",
    "EnrolledCourse",
]
