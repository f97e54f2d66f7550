"""Pytest configuration and shared fixtures for agent-directory tests.

This module provides common fixtures used across all test modules,
including test app creation, async client setup and a fake network of
remote agents served through httpx.MockTransport.
"""

from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from agent_directory import create_app
from agent_directory.config import AgentDirectorySettings
from agent_directory.proxy import create_proxy_fetch


class FakeAgentNetwork:
    """Serves agent card documents for a set of fake agents.

    URLs are stored in the normalized form httpx sends them in (for
    example with a lowercased host), so lookups match the request URL.

    Attributes:
        documents: Card document URL -> JSON body served with status 200
        failures: URL -> status code or exception returned instead
        requests: Every request received, in order
    """

    def __init__(self) -> None:
        self.documents: dict[str, Any] = {}
        self.failures: dict[str, int | Exception] = {}
        self.requests: list[httpx.Request] = []

    @staticmethod
    def normalize(url: str) -> str:
        return str(httpx.URL(url))

    def add_document(self, url: str, document: Any) -> None:
        """Serve a raw JSON body at a URL."""
        self.documents[self.normalize(url)] = document

    def add_agent(
        self,
        base_url: str,
        name: str,
        path: str = "/.well-known/agent-card.json",
        **fields: Any,
    ) -> dict[str, Any]:
        """Serve a card for an agent and return the served document."""
        document = {"url": base_url, "name": name, **fields}
        self.add_document(base_url.rstrip("/") + path, document)
        return document

    def fail(self, url: str, failure: int | Exception) -> None:
        """Make requests to a URL fail with a status code or exception."""
        self.failures[self.normalize(url)] = failure

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = self.normalize(str(request.url))

        failure = self.failures.get(url)
        if isinstance(failure, Exception):
            raise failure
        if failure is not None:
            return httpx.Response(failure)

        if url in self.documents:
            return httpx.Response(200, json=self.documents[url])
        return httpx.Response(404, json={"detail": "Not Found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def agent_network() -> FakeAgentNetwork:
    """Create an empty fake agent network."""
    return FakeAgentNetwork()


@pytest_asyncio.fixture
async def agent_http_client(agent_network):
    """Create an httpx client routed to the fake agent network."""
    async with httpx.AsyncClient(transport=agent_network.transport) as client:
        yield client


@pytest.fixture
def fetch(agent_http_client):
    """Create a proxy fetch function backed by the fake agent network."""
    return create_proxy_fetch(client=agent_http_client)


@pytest.fixture
def test_settings():
    """Create test settings with no default agents.

    Returns:
        AgentDirectorySettings: Settings instance configured for testing.
    """
    return AgentDirectorySettings(
        host="127.0.0.1",
        port=8000,
        default_agent_urls="",
        custom_headers={},
        resolve_timeout_seconds=5.0,
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
