"""Registration of the default agent URLs at startup.

The default URLs come from a single comma-separated configuration value.
Each URL is resolved and registered in its own asyncio task; a failure for
one URL is recorded in its outcome and never affects the others.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass

from agent_directory.agents.types import AgentCard

logger = logging.getLogger(__name__)

RegisterFunction = Callable[[str], Awaitable[AgentCard | None]]


@dataclass(frozen=True)
class BootstrapOutcome:
    """Result of registering one default agent URL.

    Attributes:
        url: The default URL that was attempted
        card: The registered card, if registration succeeded
        error: The failure, if registration failed
    """

    url: str
    card: AgentCard | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_agent_urls(value: str | None, delimiter: str = ",") -> list[str]:
    """Split a delimiter-separated URL list, dropping empty entries.

    Example:
        >>> parse_agent_urls(" https://a.example , ,https://b.example")
        ['https://a.example', 'https://b.example']
    """
    if not value:
        return []
    return [url.strip() for url in value.split(delimiter) if url.strip()]


async def _attempt(url: str, register_fn: RegisterFunction) -> BootstrapOutcome:
    try:
        card = await register_fn(url)
    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.warning(f"Default agent {url} could not be registered: {e}")
        return BootstrapOutcome(url=url, error=e)
    return BootstrapOutcome(url=url, card=card)


async def load_defaults(
    urls: Iterable[str],
    register_fn: RegisterFunction,
) -> list[BootstrapOutcome]:
    """Register every default URL concurrently.

    Args:
        urls: Default agent URLs
        register_fn: Coroutine function resolving and registering one URL

    Returns:
        list[BootstrapOutcome]: One outcome per URL, in input order
    """
    url_list = list(urls)
    if not url_list:
        logger.debug("No default agent URLs configured")
        return []

    logger.info(f"Registering {len(url_list)} default agent(s)")
    outcomes = await asyncio.gather(
        *(asyncio.create_task(_attempt(url, register_fn)) for url in url_list)
    )

    failed = sum(1 for outcome in outcomes if not outcome.ok)
    logger.info(
        f"Default agents registered: {len(outcomes) - failed} ok, {failed} failed"
    )
    return list(outcomes)
