import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, Callable, Dict, Optional

from .interfaces import SessionStore

logger = logging.getLogger(__name__)


def generate_session_id() -> str:
    """Generate a new session id (40 hex characters)."""
    return secrets.token_hex(20)


@dataclass
class CookieSettings:
    """Attributes applied to the session cookie."""

    name: str = "session"
    domain: Optional[str] = None
    path: Optional[str] = "/"
    secure: bool = True
    http_only: bool = True
    samesite: Optional[str] = "lax"


class Session:
    """
    Handle on one session for the duration of a request.

    The data dict may be read and replaced freely; nothing reaches the
    store until save() is called.
    """

    def __init__(
        self,
        manager: "SessionManager",
        session_id: str,
        data: Optional[Dict[str, Any]] = None,
        is_new: bool = True,
    ):
        self.manager = manager
        self.id = session_id
        self.data: Dict[str, Any] = data if data is not None else {}
        self.is_new = is_new
        self.is_deleted = False

    async def save(self) -> None:
        """Persist the data dict using the manager's expiry."""
        await self.manager.store.set(self.id, self.data, self.manager.expires)
        self.is_new = False
        self.is_deleted = False

    async def delete(self) -> None:
        """Remove the session from the store and clear its data."""
        await self.manager.store.remove(self.id)
        self.data = {}
        self.is_deleted = True

    def cookie_attributes(self) -> Dict[str, Any]:
        """
        Compute the cookie attributes for this session.

        Returns:
            Dict with value, expires, domain, path, secure, httponly and
            samesite. A deleted session gets an expiry in the past so the
            browser drops the cookie.
        """
        cookie = self.manager.cookie
        now = datetime.now(UTC)

        if self.is_deleted:
            expires = now - timedelta(days=1)
        elif self.manager.expires > 0:
            expires = now + timedelta(seconds=self.manager.expires)
        else:
            expires = None

        return {
            "value": self.id,
            "expires": expires,
            "domain": cookie.domain,
            "path": cookie.path,
            "secure": cookie.secure,
            "httponly": cookie.http_only,
            "samesite": cookie.samesite,
        }


class SessionManager:
    session_class = Session

    def __init__(
        self,
        store: SessionStore,
        cookie: Optional[CookieSettings] = None,
        expires: int = 3600,
        id_factory: Callable[[], str] = generate_session_id,
    ):
        """
        Initialize session manager.

        Args:
            store: Session store (MemoryStore, RedisStore, ...)
            cookie: Session cookie attributes
            expires: Session lifetime in seconds, 0 for no expiry
            id_factory: Callable generating new session ids
        """
        self.store = store
        self.cookie = cookie or CookieSettings()
        self.expires = expires
        self.id_factory = id_factory

    @property
    def cookie_name(self) -> str:
        return self.cookie.name

    async def lookup_or_create(self, session_id: Optional[str]) -> Session:
        """
        Get the session for an id supplied by a client.

        Args:
            session_id: Id from the client's cookie, or None

        Returns:
            The stored session, or a new session with a freshly generated id
            when no id was supplied or the id is unknown (expired, deleted or
            never issued). Client-chosen ids are never adopted.
        """
        if session_id:
            data = await self.store.get(session_id)
            if data is not None:
                return self.session_class(self, session_id, data, is_new=False)
            logger.debug("Unknown session id supplied, issuing a new session")

        return self.session_class(self, self.id_factory(), {}, is_new=True)

    async def load(self, session_id: str) -> Session:
        """
        Get the session for an id previously issued by this manager.

        If the store has no record the session starts out empty under the
        given id and is created by the next save().
        """
        data = await self.store.get(session_id)
        if data is None:
            return self.session_class(self, session_id, {}, is_new=True)
        return self.session_class(self, session_id, data, is_new=False)
