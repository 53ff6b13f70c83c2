"""
Identity Module - Black Box Interface

Purpose: Derive a session id from the headers a caller received
Interface: resolve_session_id(), parse_cookie(), bake_cookie()
Hidden: Cookie syntax, header matching rules

Whether a missing id is an error is left to the session manager.
"""

from .cookies import bake_cookie, parse_cookie
from .resolver import flatten_headers, header_pairs, resolve_session_id

__all__ = [
    "resolve_session_id",
    "header_pairs",
    "flatten_headers",
    "parse_cookie",
    "bake_cookie",
]
