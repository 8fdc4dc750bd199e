"""Tests for the API error mapping."""

import pytest

from shared.exceptions import (
    ConfigurationError,
    ExternalServiceError,
    LearnHubError,
)
from modules.auth.exceptions import (
    ExpiredTokenError,
    ForbiddenError,
    InvalidActivationCodeError,
    InvalidCredentialsError,
    NotAuthenticatedError,
)
from modules.courses.exceptions import CourseNotFoundError
from modules.users.exceptions import DuplicateEmailError
from api.errors import status_for


class TestStatusFor:
    @pytest.mark.parametrize(
        "error,status_code",
        [
            (NotAuthenticatedError(), 401),
            (ExpiredTokenError(), 401),
            (InvalidCredentialsError(), 401),
            (ForbiddenError("user"), 403),
            (CourseNotFoundError("c1"), 404),
            (DuplicateEmailError(), 409),
            (InvalidActivationCodeError(), 400),
            (ExternalServiceError("down", service="smtp"), 502),
            (ConfigurationError("missing"), 500),
            (LearnHubError("unknown"), 500),
        ],
    )
    def test_maps_error_to_status(self, error, status_code):
        assert status_for(error) == status_code


class TestErrorResponses:
    def test_missing_secret_is_a_server_error(self, client, create_user, settings, kv_cache, user_repo, course_repo, mailer):
        from api.dependencies import ServiceContainer, set_container

        set_container(
            ServiceContainer(
                settings=settings.model_copy(update={"access_token_secret": ""}),
                cache=kv_cache,
                user_repository=user_repo,
                course_repository=course_repo,
                mailer=mailer,
            )
        )
        create_user()

        response = client.post(
            "/api/v1/login", json={"email": "test@example.com", "password": "correct-horse"}
        )

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "AUTH_NOT_CONFIGURED",
            "message": "Server authentication not configured",
            "details": {},
        }

    def test_mail_failure_is_bad_gateway(self, client, mailer):
        mailer.send_activation_code.side_effect = ExternalServiceError(
            "Failed to send activation email", service="smtp", code="EMAIL_DELIVERY_FAILED"
        )
        response = client.post(
            "/api/v1/registration",
            json={"name": "Ada", "email": "ada@example.com", "password": "secret1"},
        )
        assert response.status_code == 502
        assert response.json()["details"]["service"] == "smtp"
