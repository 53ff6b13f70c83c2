import json
import time
from typing import Any, Dict, Optional, Tuple


class MemoryStore:
    """
    In-process session store.

    Data is held as JSON text so that saved sessions are detached from the
    caller's dicts and non-JSON data fails the same way it would in Redis.
    Expired entries are dropped when read and swept on every write.
    Only suitable for a single worker process.
    """

    def __init__(self):
        self._sessions: Dict[str, Tuple[Optional[float], str]] = {}

    async def get(self, session_id: str) -> Optional[Dict[str, Any]]:
        entry = self._sessions.get(session_id)
        if entry is None:
            return None

        expires_at, payload = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self._sessions[session_id]
            return None

        return json.loads(payload)

    async def set(self, session_id: str, data: Dict[str, Any], expires: int) -> None:
        now = time.monotonic()
        self._purge_expired(now)
        expires_at = now + expires if expires > 0 else None
        self._sessions[session_id] = (expires_at, json.dumps(data))

    async def remove(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

    def _purge_expired(self, now: float) -> None:
        """Drop every entry whose expiry has passed, read or not."""
        expired = [
            session_id
            for session_id, (expires_at, _) in self._sessions.items()
            if expires_at is not None and now >= expires_at
        ]
        for session_id in expired:
            del self._sessions[session_id]


class RedisStore:
    def __init__(self, redis_client, key_prefix: str = "session:"):
        """
        Initialize Redis-backed store.

        Args:
            redis_client: Async Redis client (decode_responses=True)
            key_prefix: Prefix for session keys
        """
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _key(self, session_id: str) -> str:
        return f"{self.key_prefix}{session_id}"

    async def get(self, session_id: str) -> Optional[Dict[str, Any]]:
        """
        Get session data.

        Args:
            session_id: Session identifier

        Returns:
            Session data dict or None if not found
        """
        data = await self.redis.get(self._key(session_id))

        if data:
            return json.loads(data)
        return None

    async def set(self, session_id: str, data: Dict[str, Any], expires: int) -> None:
        """
        Store session data.

        Uses SETEX so Redis handles expiry; an expiry of 0 stores the key
        without a TTL.
        """
        payload = json.dumps(data)
        if expires > 0:
            await self.redis.setex(self._key(session_id), expires, payload)
        else:
            await self.redis.set(self._key(session_id), payload)

    async def remove(self, session_id: str) -> None:
        await self.redis.delete(self._key(session_id))
