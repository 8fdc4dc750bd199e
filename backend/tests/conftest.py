"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
test settings with fixed secrets, an in-memory key-value cache, an in-memory
credential store and a fully wired app running against them.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, reset_container, set_container
from shared.cache import InMemoryCache, reset_cache
from shared.config import Settings
from shared.models import User
from modules.auth.passwords import hash_password
from modules.auth.service import AuthService
from modules.auth.session_cache import SessionCache
from modules.auth.tokens import TokenIssuer
from modules.orders.exceptions import CourseAlreadyPurchasedError
from modules.orders.models import Order
from modules.users.exceptions import DuplicateEmailError, UserNotFoundError


TEST_ACTIVATION_SECRET = "test-activation-secret"
TEST_ACCESS_SECRET = "test-access-secret"
TEST_REFRESH_SECRET = "test-refresh-secret"
TEST_PASSWORD = "correct-horse"


class InMemoryUserRepository:
    """
    Credential store fake with the same contract as UserRepository.

    Email uniqueness is enforced on create/update, and password hashes are
    only returned when asked for.
    """

    def __init__(self) -> None:
        self._rows: dict[str, User] = {}

    def _public(self, user: User, include_password: bool) -> User:
        return user if include_password else user.model_copy(update={"password": None})

    def _email_taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        return any(
            u.email.lower() == email.lower() and u.id != exclude_id
            for u in self._rows.values()
        )

    def get_by_id(self, user_id: str, include_password: bool = False) -> Optional[User]:
        user = self._rows.get(user_id)
        return self._public(user, include_password) if user else None

    def get_by_email(self, email: str, include_password: bool = False) -> Optional[User]:
        for user in self._rows.values():
            if user.email.lower() == email.lower():
                return self._public(user, include_password)
        return None

    def email_exists(self, email: str) -> bool:
        return self._email_taken(email)

    def create(self, data: dict[str, Any]) -> User:
        if self._email_taken(data["email"]):
            raise DuplicateEmailError()
        now = datetime.now(timezone.utc)
        user = User(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **{**data, "email": data["email"].lower()},
        )
        self._rows[user.id] = user
        return self._public(user, include_password=False)

    def update(self, user_id: str, data: dict[str, Any]) -> User:
        user = self._rows.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        if "email" in data and self._email_taken(data["email"], exclude_id=user_id):
            raise DuplicateEmailError()
        merged = {**user.model_dump(), **data, "updated_at": datetime.now(timezone.utc)}
        updated = User.model_validate(merged)
        self._rows[user_id] = updated
        return self._public(updated, include_password=False)

    def list_all(self) -> list[User]:
        users = sorted(self._rows.values(), key=lambda u: u.created_at, reverse=True)
        return [self._public(u, include_password=False) for u in users]

    def delete(self, user_id: str) -> bool:
        return self._rows.pop(user_id, None) is not None

    def __len__(self) -> int:
        return len(self._rows)


class InMemoryOrderRepository:
    """Order store fake; one order per (user, course) like the unique index."""

    def __init__(self) -> None:
        self.orders: list[Order] = []

    def create(self, data: dict[str, Any]) -> Order:
        if any(
            o.user_id == data["user_id"] and o.course_id == data["course_id"]
            for o in self.orders
        ):
            raise CourseAlreadyPurchasedError(data["course_id"])
        order = Order(
            id=str(uuid.uuid4()), created_at=datetime.now(timezone.utc), **data
        )
        self.orders.append(order)
        return order


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and cache singletons around each test."""
    reset_container()
    reset_cache()
    yield
    reset_container()
    reset_cache()


@pytest.fixture
def settings() -> Settings:
    """Settings with fixed secrets and no external backends."""
    return Settings(
        _env_file=None,
        activation_secret=TEST_ACTIVATION_SECRET,
        access_token_secret=TEST_ACCESS_SECRET,
        refresh_token_secret=TEST_REFRESH_SECRET,
        access_token_expire=300,
        refresh_token_expire=1200,
        redis_url="",
        supabase_url="",
        supabase_service_role_key="",
        node_env="development",
    )


@pytest.fixture
def kv_cache() -> InMemoryCache:
    return InMemoryCache()


@pytest.fixture
def sessions(kv_cache: InMemoryCache) -> SessionCache:
    return SessionCache(kv_cache)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def course_repo() -> MagicMock:
    return MagicMock()


@pytest.fixture
def order_repo() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def mailer() -> AsyncMock:
    """Mailer double; the sent code is in send_activation_code.call_args."""
    return AsyncMock()


@pytest.fixture
def token_issuer(settings: Settings) -> TokenIssuer:
    return TokenIssuer(settings)


@pytest.fixture
def auth_service(settings, user_repo, sessions, mailer) -> AuthService:
    return AuthService(settings=settings, users=user_repo, sessions=sessions, mailer=mailer)


@pytest.fixture
def create_user(user_repo: InMemoryUserRepository):
    """Factory that stores an activated user with a known password."""

    def _create(
        email: str = "test@example.com",
        name: str = "Test User",
        password: Optional[str] = TEST_PASSWORD,
        role: str = "user",
        courses: Optional[list[dict]] = None,
    ) -> User:
        data: dict[str, Any] = {
            "name": name,
            "email": email,
            "role": role,
            "is_verified": True,
            "courses": courses or [],
        }
        if password is not None:
            data["password"] = hash_password(password)
        return user_repo.create(data)

    return _create


@pytest.fixture
def container(
    settings, kv_cache, user_repo, course_repo, order_repo, mailer
) -> ServiceContainer:
    container = ServiceContainer(
        settings=settings,
        cache=kv_cache,
        user_repository=user_repo,
        course_repository=course_repo,
        order_repository=order_repo,
        mailer=mailer,
    )
    set_container(container)
    return container


@pytest.fixture
def app(container: ServiceContainer):
    """Create a fresh app wired to the test container."""
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def login(client: TestClient, create_user):
    """Create a user and log in; the client keeps the session cookies."""

    def _login(email: str = "test@example.com", role: str = "user", **kwargs) -> dict:
        create_user(email=email, role=role, **kwargs)
        response = client.post(
            "/api/v1/login", json={"email": email, "password": TEST_PASSWORD}
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _login
