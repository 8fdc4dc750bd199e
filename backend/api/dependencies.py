"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Infrastructure (settings, cache, repositories, mailer) can be passed in
explicitly; tests use that to run the real services against in-memory
collaborators.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from shared.cache import IKeyValueCache
    from modules.auth.interfaces import IAuthService
    from modules.auth.mailer import IActivationMailer
    from modules.auth.session_cache import SessionCache
    from modules.courses.interfaces import ICourseService
    from modules.courses.repository import CourseRepository
    from modules.orders.interfaces import IOrderService
    from modules.orders.repository import OrderRepository
    from modules.users.interfaces import IUserRepository, IUserService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: "IKeyValueCache | None" = None,
        user_repository: "IUserRepository | None" = None,
        course_repository: "CourseRepository | None" = None,
        order_repository: "OrderRepository | None" = None,
        mailer: "IActivationMailer | None" = None,
    ) -> None:
        self._settings = settings
        self._cache = cache
        self._user_repository = user_repository
        self._course_repository = course_repository
        self._order_repository = order_repository
        self._mailer = mailer
        self._sessions: "SessionCache | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._course_service: "ICourseService | None" = None
        self._order_service: "IOrderService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def cache(self) -> "IKeyValueCache":
        """Get the shared key-value cache."""
        if self._cache is None:
            from shared.cache import get_cache
            self._cache = get_cache()
        return self._cache

    @property
    def sessions(self) -> "SessionCache":
        """Get the session cache port."""
        if self._sessions is None:
            from modules.auth.session_cache import SessionCache
            self._sessions = SessionCache(self.cache)
        return self._sessions

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the credential store."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def course_repository(self) -> "CourseRepository":
        if self._course_repository is None:
            from modules.courses.repository import CourseRepository
            from shared.database import get_supabase_client
            self._course_repository = CourseRepository(get_supabase_client())
        return self._course_repository

    @property
    def order_repository(self) -> "OrderRepository":
        if self._order_repository is None:
            from modules.orders.repository import OrderRepository
            from shared.database import get_supabase_client
            self._order_repository = OrderRepository(get_supabase_client())
        return self._order_repository

    @property
    def mailer(self) -> "IActivationMailer":
        if self._mailer is None:
            from modules.auth.mailer import ActivationMailer
            self._mailer = ActivationMailer(self.settings)
        return self._mailer

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                settings=self.settings,
                users=self.user_repository,
                sessions=self.sessions,
                mailer=self.mailer,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                users=self.user_repository,
                sessions=self.sessions,
            )
        return self._user_service

    @property
    def courses(self) -> "ICourseService":
        """Get the course service instance."""
        if self._course_service is None:
            from modules.courses.service import CourseService
            self._course_service = CourseService(
                repository=self.course_repository,
                cache=self.cache,
                cache_ttl=self.settings.course_cache_ttl,
            )
        return self._course_service

    @property
    def orders(self) -> "IOrderService":
        """Get the order service instance."""
        if self._order_service is None:
            from modules.orders.service import OrderService
            self._order_service = OrderService(
                orders=self.order_repository,
                users=self.user_repository,
                sessions=self.sessions,
                courses=self.courses,
            )
        return self._order_service

    def reset(self) -> None:
        """
        Reset all cached services.

        Explicitly injected infrastructure is kept; only the services built
        on top of it are recreated.
        """
        self._sessions = None
        self._auth_service = None
        self._user_service = None
        self._course_service = None
        self._order_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a pre-wired container (used by tests)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_course_service() -> "ICourseService":
    """FastAPI dependency for course service."""
    return get_container().courses


def get_order_service() -> "IOrderService":
    """FastAPI dependency for order service."""
    return get_container().orders


def get_app_settings() -> Settings:
    """FastAPI dependency for the settings the services were built with."""
    return get_container().settings
