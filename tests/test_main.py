"""
Tests for application wiring: building services from configuration.
"""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from session_remote.config.provider import APIConfig, ManagerConfig, ServiceConfig
from session_remote.main import (
    build_remote_service,
    build_states_service,
    create_app,
    create_states_app,
    get_redis_client,
    run,
)
from session_remote.modules.service import RemoteService
from session_remote.modules.session import MemoryStore, RedisStore
from session_remote.modules.states import StatesService


class StaticConfigProvider:
    """Config provider returning fixed values."""

    def __init__(self, manager_config=None, validate_res=False):
        self.manager_config = manager_config or ManagerConfig()
        self.validate_res = validate_res

    def get_api_config(self):
        return APIConfig(port=9090, host="127.0.0.1", debug=False, log_level="WARNING")

    def get_manager_config(self):
        return self.manager_config

    def get_service_config(self):
        return ServiceConfig(validate_res=self.validate_res)


def test_lifespan_builds_service():
    app = create_app(provider=StaticConfigProvider(ManagerConfig(cookie_name="sid")))

    with TestClient(app) as client:
        assert isinstance(app.state.service, RemoteService)
        session_id = client.post("/begin", json={"headers": []}).json()["id"]
        response = client.post("/finish", json={"id": session_id, "data": {"a": 1}})

        assert response.json()["headers"][1].startswith(f"sid={session_id};")


def test_service_not_initialized():
    client = TestClient(create_app(provider=StaticConfigProvider()))

    response = client.post("/begin", json={"headers": []})

    assert response.status_code == 503


def test_build_remote_service_memory():
    service, redis_client = build_remote_service(StaticConfigProvider(validate_res=True))

    assert redis_client is None
    assert service.validate_res is True
    assert isinstance(service.manager.store, MemoryStore)


def test_build_remote_service_redis():
    provider = StaticConfigProvider(ManagerConfig(store="redis", redis_password="pw"))
    fake_client = MagicMock()

    with patch("session_remote.main.redis.from_url", return_value=fake_client) as from_url:
        service, redis_client = build_remote_service(provider)

    assert redis_client is fake_client
    assert isinstance(service.manager.store, RedisStore)
    from_url.assert_called_once_with(
        "redis://localhost:6379/0", password="pw", encoding="utf-8", decode_responses=True
    )


def test_build_states_service():
    with patch("session_remote.main.logger") as mock_logger:
        service, redis_client = build_states_service(StaticConfigProvider())

    assert isinstance(service, StatesService)
    assert redis_client is None
    mock_logger.warning.assert_called_once()


def test_states_lifespan():
    app = create_states_app(provider=StaticConfigProvider())

    with TestClient(app) as client:
        assert client.put("/states/abc", json={"a": 1}).status_code == 204
        assert client.get("/states/abc").json() == {"a": 1}


def test_get_redis_client():
    with patch("session_remote.main.redis.from_url") as from_url:
        get_redis_client(ManagerConfig(redis_host="cache", redis_port=6380, redis_db=3))

    assert from_url.call_args[0][0] == "redis://cache:6380/3"


def test_run_uses_api_config():
    with patch("session_remote.main.config_provider", StaticConfigProvider()), patch(
        "session_remote.main.uvicorn.run"
    ) as uvicorn_run:
        run()

    args, kwargs = uvicorn_run.call_args
    assert args == ("session_remote.main:app",)
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9090
    assert kwargs["log_level"] == "warning"
    assert kwargs["log_config"]["loggers"]["session_remote"]["level"] == "WARNING"
