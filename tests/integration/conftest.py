"""Pytest configuration for integration tests.

This module routes the app's outbound agent requests to the fake agent
network so API tests never touch the real network.
"""

from unittest.mock import patch

import httpx
import pytest


@pytest.fixture(autouse=True)
def mock_agent_http_client(agent_network):
    """Patch the app's AsyncClient to use the fake agent network.

    The lifespan creates its shared client through this patched class, so
    every agent card request made by the app is served by agent_network.
    """
    real_client_class = httpx.AsyncClient

    with patch("agent_directory.app.AsyncClient") as mock_client_class:
        mock_client_class.side_effect = lambda **kwargs: real_client_class(
            transport=agent_network.transport, **kwargs
        )
        yield mock_client_class
