"""
Tests for RemoteClient against the real app over an in-process transport.
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from session_remote.main import create_app
from session_remote.modules.client import RemoteClient, RemoteServiceError
from session_remote.modules.schema import BeginResponse


@pytest.fixture
def remote(service):
    transport = httpx.ASGITransport(app=create_app(service))
    return RemoteClient("http://session-remote/", transport=transport)


@pytest.mark.asyncio
async def test_begin_new_session(remote):
    result = await remote.begin([("Accept", "*/*")])

    assert isinstance(result, BeginResponse)
    assert result.id
    assert result.data == {}


@pytest.mark.asyncio
async def test_round_trip(remote):
    state = await remote.begin([])
    state.data["visits"] = 1

    headers = await remote.finish(state.id, state.data)

    assert len(headers) == 1
    name, value = headers[0]
    assert name == "Set-Cookie"
    assert f"session={state.id}" in value

    cookie = value.split(";")[0]
    again = await remote.begin(["Cookie", cookie])

    assert again.id == state.id
    assert again.data == {"visits": 1}


@pytest.mark.asyncio
async def test_server_error(manager, service):
    manager.lookup_or_create = AsyncMock(side_effect=RuntimeError("boom"))
    remote = RemoteClient(
        "http://session-remote", transport=httpx.ASGITransport(app=create_app(service))
    )

    with pytest.raises(RemoteServiceError) as exc_info:
        await remote.begin([])

    assert exc_info.value.status_code == 500
    assert exc_info.value.body == "Internal Server Error"


@pytest.mark.asyncio
async def test_client_error_surfaces_message(remote):
    with pytest.raises(RemoteServiceError) as exc_info:
        await remote.begin(["Cookie"])

    assert exc_info.value.status_code == 400
    assert "even number of values" in exc_info.value.body


def test_base_url_is_normalised():
    assert RemoteClient("http://example.com/remote/").base_url == "http://example.com/remote"
