"""Session manager interfaces following Black Box Design principles."""
from typing import Any, Dict, Optional, Protocol, Type


class SessionStore(Protocol):
    """Protocol for session stores - allows swappable backends."""

    async def get(self, session_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the stored data for a session.

        Returns:
            Data dict, or None if the session is unknown or expired
        """
        ...

    async def set(self, session_id: str, data: Dict[str, Any], expires: int) -> None:
        """Store data for a session, expiring after `expires` seconds (0 = never)."""
        ...

    async def remove(self, session_id: str) -> None:
        """Remove a session from the store."""
        ...


class SessionState(Protocol):
    """Protocol for the per-request session handle."""

    id: str
    data: Dict[str, Any]

    async def save(self) -> None:
        ...

    async def delete(self) -> None:
        ...

    def cookie_attributes(self) -> Dict[str, Any]:
        ...


class CookieSessionManager(Protocol):
    """Protocol for the session managers RemoteService can drive."""

    cookie_name: str
    session_class: Type[SessionState]

    async def lookup_or_create(self, session_id: Optional[str]) -> SessionState:
        """Return the session for an id, or a new session if absent or unknown."""
        ...

    async def load(self, session_id: str) -> SessionState:
        """Return the session for an id."""
        ...
