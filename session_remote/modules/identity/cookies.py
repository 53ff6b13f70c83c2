"""Cookie header parsing and Set-Cookie rendering."""

import http.cookies
from datetime import datetime
from email.utils import format_datetime
from typing import Any, Dict, Mapping, Optional

from starlette.requests import cookie_parser

SAMESITE_VALUES = ("strict", "lax", "none")


def parse_cookie(header: Optional[str]) -> Dict[str, str]:
    """
    Parse a Cookie header into a name -> value dict.

    Later pairs with the same name override earlier ones.
    """
    if not header:
        return {}
    return cookie_parser(header)


def bake_cookie(name: str, attributes: Mapping[str, Any]) -> str:
    """
    Render a Set-Cookie header value.

    Args:
        name: Cookie name
        attributes: Cookie attributes; "value" is required, and "expires",
            "max_age", "domain", "path", "secure", "httponly", "samesite"
            are optional. None values are skipped.

    Returns:
        The header value, e.g. "session=abc; Domain=.example.com; Path=/"
    """
    cookie: http.cookies.BaseCookie = http.cookies.SimpleCookie()
    cookie[name] = attributes["value"]

    expires = attributes.get("expires")
    if expires is not None:
        if isinstance(expires, datetime):
            expires = format_datetime(expires, usegmt=True)
        cookie[name]["expires"] = expires

    max_age = attributes.get("max_age")
    if max_age is not None:
        cookie[name]["max-age"] = max_age

    if attributes.get("domain") is not None:
        cookie[name]["domain"] = attributes["domain"]
    if attributes.get("path") is not None:
        cookie[name]["path"] = attributes["path"]
    if attributes.get("secure"):
        cookie[name]["secure"] = True
    if attributes.get("httponly"):
        cookie[name]["httponly"] = True

    samesite = attributes.get("samesite")
    if samesite is not None:
        if samesite.lower() not in SAMESITE_VALUES:
            raise ValueError(f"Invalid samesite value: {samesite}")
        cookie[name]["samesite"] = samesite

    return cookie.output(header="").strip()
