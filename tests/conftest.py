"""
Shared pytest fixtures for Session Remote tests.

This module provides common fixtures including:
- In-memory session manager wired with test cookie settings
- RemoteService instances
- FastAPI test client for the begin/finish app
- Redis mock for store tests
"""

import os
import sys
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from session_remote.main import create_app
from session_remote.modules.service import RemoteService
from session_remote.modules.session import CookieSettings, MemoryStore, SessionManager


@pytest.fixture
def store():
    """Empty in-memory session store."""
    return MemoryStore()


@pytest.fixture
def manager(store):
    """Session manager with a recognisable cookie setup."""
    return SessionManager(
        store,
        cookie=CookieSettings(name="session", domain=".example.com", path="/"),
        expires=3600,
    )


@pytest.fixture
def service(manager):
    """RemoteService with response validation off (the default)."""
    return RemoteService(manager)


@pytest.fixture
def client(service):
    """TestClient for the begin/finish app."""
    return TestClient(create_app(service))


@pytest.fixture
def mock_redis():
    """Create a mock Redis client."""
    redis = AsyncMock()
    redis.get = AsyncMock(return_value=None)
    redis.set = AsyncMock()
    redis.setex = AsyncMock()
    redis.delete = AsyncMock()
    redis.aclose = AsyncMock()
    return redis
