"""
Session cache port.

Maps an identity id to a full snapshot of its record (password hash
included). Entries are overwritten, never merged, and carry no TTL; a
missing entry is what revokes an otherwise valid access token.
"""

import logging
from typing import Optional

from shared.cache import IKeyValueCache
from shared.models import User

logger = logging.getLogger(__name__)


class SessionCache:
    """Typed get/set/delete of session snapshots over a key-value cache."""

    def __init__(self, cache: IKeyValueCache):
        self._cache = cache

    async def get(self, user_id: str) -> Optional[User]:
        raw = await self._cache.get(user_id)
        if raw is None:
            return None
        try:
            return User.model_validate_json(raw)
        except ValueError:
            logger.warning(f"Discarding unreadable session entry for user {user_id}")
            await self._cache.delete(user_id)
            return None

    async def set(self, user: User) -> None:
        await self._cache.set(user.id, user.model_dump_json())

    async def delete(self, user_id: str) -> None:
        await self._cache.delete(user_id)
