from typing import List, Optional, Sequence, Tuple

from .cookies import parse_cookie


def header_pairs(headers: Sequence[str]) -> List[Tuple[str, str]]:
    """Split a flat [name, value, name, value, ...] list into pairs."""
    return list(zip(headers[0::2], headers[1::2]))


def flatten_headers(pairs: Sequence[Tuple[str, str]]) -> List[str]:
    """Inverse of header_pairs()."""
    flat: List[str] = []
    for name, value in pairs:
        flat.extend((name, value))
    return flat


def resolve_session_id(headers: Sequence[str], cookie_name: str) -> Optional[str]:
    """
    Find the session id in a flat header list.

    Args:
        headers: Alternating header names and values
        cookie_name: Name of the session cookie

    Returns:
        The cookie value, or None if no session cookie was supplied

    Logic:
    1. Collect every Cookie header (names are case-insensitive)
    2. Join them in order and parse as one cookie string
    3. Pick the session cookie; the last occurrence wins
    """
    values = [value for name, value in header_pairs(headers) if name.lower() == "cookie"]
    if not values:
        return None

    cookies = parse_cookie("; ".join(values))
    return cookies.get(cookie_name) or None
