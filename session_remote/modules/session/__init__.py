"""
Session Module - Black Box Interface

Purpose: Manage session records and their cookies
Interface: lookup_or_create(), load(), Session.save(), Session.cookie_attributes()
Hidden: Session storage, id generation, expiry

Replaceable with any session backend (database, in-memory, distributed cache).
"""

from .factory import ManagerFactory
from .interfaces import CookieSessionManager, SessionState, SessionStore
from .manager import CookieSettings, Session, SessionManager, generate_session_id
from .store import MemoryStore, RedisStore

__all__ = [
    "SessionManager",
    "Session",
    "CookieSettings",
    "ManagerFactory",
    "MemoryStore",
    "RedisStore",
    "SessionStore",
    "SessionState",
    "CookieSessionManager",
    "generate_session_id",
]
