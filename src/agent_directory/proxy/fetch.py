"""Header-injecting wrapper around outbound HTTP requests.

``create_proxy_fetch`` returns a coroutine function with the signature of
``httpx.AsyncClient.request`` that merges a fixed set of headers (for example
auth tokens) into every request sent to a remote agent.

Adapter headers act as defaults: a header passed explicitly to a single call
wins over the adapter header of the same name. Header names are compared
case-insensitively.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx

logger = logging.getLogger(__name__)

FetchFunction = Callable[..., Awaitable[httpx.Response]]
"""``async (method, url, **kwargs) -> httpx.Response``"""


def merge_headers(
    defaults: Mapping[str, str] | None,
    overrides: Any = None,
) -> httpx.Headers:
    """Merge per-call headers over adapter defaults.

    Args:
        defaults: Adapter-level headers
        overrides: Headers passed to a single call (any httpx headers type)

    Returns:
        httpx.Headers: The merged headers
    """
    merged = httpx.Headers(dict(defaults or {}))
    if overrides is not None:
        for name, value in httpx.Headers(overrides).multi_items():
            merged[name] = value
    return merged


def create_proxy_fetch(
    custom_headers: Mapping[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> FetchFunction:
    """Create a fetch function that injects custom headers into each request.

    Args:
        custom_headers: Headers added to every request, e.g.
            ``{"Authorization": "Bearer ..."}``
        client: Optional shared AsyncClient. When omitted a short-lived
            client is opened for each request.

    Returns:
        FetchFunction: ``async (method, url, **kwargs) -> httpx.Response``

    Example:
        >>> fetch = create_proxy_fetch({"Authorization": "Bearer token"})
        >>> response = await fetch("GET", "https://agent.example/.well-known/agent.json")
    """
    default_headers = dict(custom_headers or {})
    logger.debug(f"Proxy fetch created with headers: {sorted(default_headers)}")

    async def proxy_fetch(method: str, url: str, **kwargs: Any) -> httpx.Response:
        kwargs["headers"] = merge_headers(default_headers, kwargs.get("headers"))

        if client is not None:
            return await client.request(method, url, **kwargs)

        async with httpx.AsyncClient() as session:
            return await session.request(method, url, **kwargs)

    return proxy_fetch
