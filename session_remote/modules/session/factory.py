"""
Session Manager Factory following Black Box Design principles.

This factory:
- Constructs the session manager based on configuration
- Wires the store and cookie settings together
- Returns only the manager (hiding the store implementation)
"""

import logging
from typing import Any, Optional

from .manager import CookieSettings, SessionManager
from .store import MemoryStore, RedisStore
from ...config.provider import ManagerConfig

logger = logging.getLogger(__name__)


class ManagerFactory:
    """
    Factory for building the session manager.

    This is the composition root that:
    - Creates the configured store
    - Wires it into a SessionManager
    - Returns only the public interface
    """

    @staticmethod
    def build(config: ManagerConfig, redis_client: Optional[Any] = None) -> SessionManager:
        """
        Build a session manager.

        Args:
            config: Manager configuration
            redis_client: Async Redis client, required for the redis store

        Returns:
            SessionManager wired to the configured store

        Raises:
            ValueError: If the store is unknown or Redis is missing
        """
        if config.store == "redis":
            if redis_client is None:
                raise ValueError("The redis session store requires a Redis client")
            logger.info("Building session manager with Redis store")
            store = RedisStore(redis_client)
        elif config.store == "memory":
            logger.info("Building session manager with in-memory store")
            store = MemoryStore()
        else:
            raise ValueError(f"Unknown session store: {config.store}")

        cookie = CookieSettings(
            name=config.cookie_name,
            domain=config.cookie_domain,
            path=config.cookie_path,
            secure=config.cookie_secure,
            http_only=config.cookie_http_only,
            samesite=config.cookie_samesite,
        )

        return SessionManager(store, cookie=cookie, expires=config.expires)
