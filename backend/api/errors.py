"""
API error handling.

Maps the LearnHubError hierarchy to HTTP status codes and renders a single
JSON error shape:

    {"success": false, "error": "<CODE>", "message": "...", "details": {...}}
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    ExternalServiceError,
    LearnHubError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching base wins
_STATUS_BY_BASE: list[tuple[type[LearnHubError], int]] = [
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (ValidationError, 400),
    (ExternalServiceError, 502),
    (ConfigurationError, 500),
]


def status_for(exc: LearnHubError) -> int:
    for base, status_code in _STATUS_BY_BASE:
        if isinstance(exc, base):
            return status_code
    return 500


def register_exception_handlers(app: FastAPI) -> None:
    """Install the LearnHubError handler on the app."""

    @app.exception_handler(LearnHubError)
    async def handle_learnhub_error(request: Request, exc: LearnHubError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
        else:
            logger.debug(f"{exc.code} on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status_code,
            content={"success": False, **exc.to_dict()},
        )
