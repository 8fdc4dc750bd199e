"""
Supabase client factory.

The credential store and the course catalog both live in Supabase. The
backend connects with the service-role key only: access control is enforced
by the session and role gates, not by row level security.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import get_settings
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the process-wide service-role client, creating it on first use.

    Raises:
        ConfigurationError: SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise ConfigurationError(
                "Supabase configuration missing: set SUPABASE_URL and "
                "SUPABASE_SERVICE_ROLE_KEY",
                code="STORE_NOT_CONFIGURED",
            )
        logger.info("Connecting to Supabase credential store")
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """Drop the cached client so the next call reconnects."""
    global _service_client
    _service_client = None
