"""
Unit tests for session id resolution and cookie rendering.
"""

from datetime import UTC, datetime

import pytest

from session_remote.modules.identity import (
    bake_cookie,
    flatten_headers,
    header_pairs,
    parse_cookie,
    resolve_session_id,
)


class TestResolveSessionId:
    def test_no_headers(self):
        assert resolve_session_id([], "session") is None

    def test_no_cookie_header(self):
        assert resolve_session_id(["Accept-Language", "en-us"], "session") is None

    def test_session_cookie(self):
        headers = [
            "Accept-Language", "en-us",
            "Cookie", "session=4f29abc0917cb119a86c8b15e70503a4380667bf",
        ]

        assert resolve_session_id(headers, "session") == "4f29abc0917cb119a86c8b15e70503a4380667bf"

    @pytest.mark.parametrize("name", ["cookie", "COOKIE", "CoOkIe"])
    def test_header_name_is_case_insensitive(self, name):
        assert resolve_session_id([name, "session=abc"], "session") == "abc"

    def test_among_other_cookies(self):
        headers = ["Cookie", "theme=dark; session=abc; lang=en"]

        assert resolve_session_id(headers, "session") == "abc"

    def test_custom_cookie_name(self):
        headers = ["Cookie", "session=abc; sid=xyz"]

        assert resolve_session_id(headers, "sid") == "xyz"

    def test_other_cookies_only(self):
        assert resolve_session_id(["Cookie", "theme=dark"], "session") is None

    def test_repeated_cookie_headers_last_wins(self):
        headers = ["Cookie", "session=first", "Cookie", "theme=dark; session=second"]

        assert resolve_session_id(headers, "session") == "second"

    def test_empty_value(self):
        assert resolve_session_id(["Cookie", "session="], "session") is None

    def test_cookie_as_header_value_is_ignored(self):
        assert resolve_session_id(["X-Note", "Cookie", "Accept", "*/*"], "session") is None


def test_header_pairs_round_trip():
    flat = ["Cookie", "a=1", "Accept", "*/*"]

    assert header_pairs(flat) == [("Cookie", "a=1"), ("Accept", "*/*")]
    assert flatten_headers(header_pairs(flat)) == flat


def test_parse_cookie():
    assert parse_cookie(None) == {}
    assert parse_cookie("") == {}
    assert parse_cookie("a=1; b=2") == {"a": "1", "b": "2"}


class TestBakeCookie:
    def test_value_only(self):
        assert bake_cookie("session", {"value": "abc"}) == "session=abc"

    def test_all_attributes(self):
        cookie = bake_cookie(
            "session",
            {
                "value": "abc",
                "expires": datetime(2030, 1, 2, 3, 4, 5, tzinfo=UTC),
                "domain": ".example.com",
                "path": "/",
                "secure": True,
                "httponly": True,
                "samesite": "lax",
            },
        )

        assert cookie.startswith("session=abc; ")
        assert "expires=Wed, 02 Jan 2030 03:04:05 GMT" in cookie
        assert "Domain=.example.com" in cookie
        assert "Path=/" in cookie
        assert "Secure" in cookie
        assert "HttpOnly" in cookie
        assert "SameSite=lax" in cookie

    def test_none_and_false_are_skipped(self):
        cookie = bake_cookie(
            "session",
            {
                "value": "abc",
                "expires": None,
                "domain": None,
                "path": None,
                "secure": False,
                "httponly": False,
                "samesite": None,
            },
        )

        assert cookie == "session=abc"

    def test_max_age(self):
        assert "Max-Age=60" in bake_cookie("session", {"value": "abc", "max_age": 60})

    def test_invalid_samesite(self):
        with pytest.raises(ValueError, match="samesite"):
            bake_cookie("session", {"value": "abc", "samesite": "sometimes"})

    def test_parses_back(self):
        cookie = bake_cookie("session", {"value": "abc", "path": "/"})

        assert parse_cookie(cookie)["session"] == "abc"
