"""Shared test fixtures and configuration."""
import os
from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("ULTRAVOX_API_KEY", "test-key")
os.environ.setdefault("ULTRAVOX_API_URL", "https://ultravox.test/api/calls")

from app.main import app
from app.core.config import Settings
from app.core.dependencies import get_ultravox_client
from app.services.agent.profile import BASE_SYSTEM_PROMPT
from app.services.agent.prompt import SessionConfigBuilder
from app.services.telephony.responder import CallControlResponder
from app.services.ultravox.client import UltravoxClient
from app.services.ultravox.models import SessionDefaults


TEST_API_URL = "https://ultravox.test/api/calls"
TEST_JOIN_URL = "wss://example/session/abc"


@pytest.fixture
def test_settings():
    """Override settings for testing."""
    return Settings(
        _env_file=None,
        ultravox_api_key="test-key",
        ultravox_api_url=TEST_API_URL,
        disconnect_poll_interval=0.01,
    )


@pytest.fixture
def config_builder():
    """Builder with the built-in script and default provider parameters."""
    return SessionConfigBuilder(base_prompt=BASE_SYSTEM_PROMPT, defaults=SessionDefaults())


@pytest.fixture
def responder():
    """TwiML responder with default labels."""
    return CallControlResponder()


@pytest.fixture
def ultravox_requests() -> List[httpx.Request]:
    """Requests received by the stub Ultravox provider."""
    return []


@pytest.fixture
def make_ultravox_client(ultravox_requests) -> Callable[..., UltravoxClient]:
    """
    Build an UltravoxClient whose transport is a stub provider.

    The handler receives each request and returns the httpx.Response (or
    raises an httpx exception) the provider should produce.
    """
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> UltravoxClient:
        def _record(request: httpx.Request) -> httpx.Response:
            ultravox_requests.append(request)
            return handler(request)

        return UltravoxClient(
            api_key="test-key",
            api_url=TEST_API_URL,
            timeout=5.0,
            transport=httpx.MockTransport(_record),
        )
    return _make


@pytest.fixture
def join_url_handler():
    """Stub provider handler that echoes a known join URL."""
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, json={"callId": "call-123", "joinUrl": TEST_JOIN_URL})
    return _handler


@pytest.fixture
def test_client(monkeypatch, test_settings, make_ultravox_client):
    """
    Create FastAPI test client.

    Returns a function taking the stub provider handler, so each test decides
    how Ultravox answers.
    """
    monkeypatch.setattr("app.api.webhooks.voice.settings", test_settings)

    def _client(handler) -> TestClient:
        app.dependency_overrides[get_ultravox_client] = lambda: make_ultravox_client(handler)
        return TestClient(app)

    yield _client

    # Clear overrides
    app.dependency_overrides.clear()
