#!/usr/bin/env python3
"""
Session Remote - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Initializes modules
3. Exposes the services over HTTP

All business logic is in the modules, following black box principles.
The HTTP layer forwards method, path and body to a service and relays
whatever response the service produces.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Callable, Optional, Tuple

import redis.asyncio as redis
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from session_remote import __version__
from session_remote.config.provider import ConfigProvider, EnvConfigProvider, ManagerConfig
from session_remote.logging_config import get_logging_config
from session_remote.modules.service import JsonService, RemoteService
from session_remote.modules.session import ManagerFactory
from session_remote.modules.states import StatesService

logger = logging.getLogger(__name__)

# Configuration provider (centralized config access)
config_provider: ConfigProvider = EnvConfigProvider()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

ServiceBuilder = Callable[[ConfigProvider], Tuple[JsonService, Optional[redis.Redis]]]


def get_redis_client(manager_config: ManagerConfig) -> redis.Redis:
    """Create Redis client from configuration."""
    return redis.from_url(
        manager_config.redis_url,
        password=manager_config.redis_password,  # Passed separately to avoid URL encoding issues
        encoding="utf-8",
        decode_responses=True,
    )


def build_remote_service(provider: ConfigProvider) -> Tuple[RemoteService, Optional[redis.Redis]]:
    """Build the begin/finish service from configuration."""
    manager_config = provider.get_manager_config()
    service_config = provider.get_service_config()

    redis_client = get_redis_client(manager_config) if manager_config.store == "redis" else None
    service = RemoteService(
        manager_config,
        validate_res=service_config.validate_res,
        redis_client=redis_client,
    )
    return service, redis_client


def build_states_service(provider: ConfigProvider) -> Tuple[StatesService, Optional[redis.Redis]]:
    """Build the states REST service from configuration."""
    manager_config = provider.get_manager_config()
    service_config = provider.get_service_config()

    if manager_config.store == "memory":
        logger.warning("States API is using a private in-memory store; use redis to share sessions")

    redis_client = get_redis_client(manager_config) if manager_config.store == "redis" else None
    manager = ManagerFactory.build(manager_config, redis_client)
    return StatesService(manager, validate_res=service_config.validate_res), redis_client


async def forward_request(request: Request) -> Response:
    """Hand the request to the app's service and relay its response."""
    service: Optional[JsonService] = request.app.state.service
    if service is None:
        return PlainTextResponse("Service not initialized", status_code=503)

    result = await service.call(request.method, request.url.path, await request.body())
    return Response(content=result.body, status_code=result.status, headers=dict(result.headers))


def _create_app(
    title: str,
    description: str,
    service: Optional[JsonService],
    builder: ServiceBuilder,
    provider: Optional[ConfigProvider],
) -> FastAPI:
    provider = provider or config_provider

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifecycle - build the service unless one was given.
        """
        redis_client: Optional[Any] = None

        if app.state.service is None:
            logger.info(f"Starting {title}...")
            app.state.service, redis_client = builder(provider)
            logger.info(f"{title} started successfully")

        yield

        if redis_client is not None:
            await redis_client.aclose()
            logger.info(f"{title} shutdown complete")

    # Docs and OpenAPI routes are disabled: every path outside the
    # service's own routes must be a 404
    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.service = service
    app.add_api_route("/{path:path}", forward_request, methods=ALL_METHODS)
    return app


def create_app(
    service: Optional[RemoteService] = None, provider: Optional[ConfigProvider] = None
) -> FastAPI:
    """
    Create the begin/finish application.

    Args:
        service: Prebuilt service; built from configuration at startup if omitted
        provider: Configuration provider, environment-based if omitted
    """
    return _create_app(
        "Session Remote",
        "Borrow and return server-side sessions over HTTP",
        service,
        build_remote_service,
        provider,
    )


def create_states_app(
    service: Optional[StatesService] = None, provider: Optional[ConfigProvider] = None
) -> FastAPI:
    """Create the states REST application (see create_app)."""
    return _create_app(
        "Session Remote States",
        "REST access to session states",
        service,
        build_states_service,
        provider,
    )


app = create_app()
states_app = create_states_app()


def run(target: str = "session_remote.main:app") -> None:
    """Run an application with uvicorn using environment configuration."""
    api_config = config_provider.get_api_config()
    uvicorn.run(
        target,
        host=api_config.host,
        port=api_config.port,
        log_level=api_config.log_level.lower(),
        reload=api_config.debug,
        log_config=get_logging_config(api_config.log_level),
    )


if __name__ == "__main__":
    run()
