"""Resolve an agent URL into a client handle and agent card.

Discovery follows the A2A convention: when the URL already points at a JSON
document it is fetched as the card; otherwise the well-known card paths are
probed in order against the URL. The first 2xx response is parsed into an
AgentCard. A 404 moves on to the next path, any other failure stops
discovery.

Every failure (network error, non-2xx status, malformed document, timeout)
is raised as ResolutionFailed carrying the upstream message. The resolver
never retries.
"""

import asyncio
import logging
from collections.abc import Sequence

import httpx

from agent_directory.agents.client import AgentClient
from agent_directory.agents.types import ResolvedAgent
from agent_directory.errors import InvalidInput, ResolutionFailed
from agent_directory.proxy import FetchFunction

logger = logging.getLogger(__name__)

WELL_KNOWN_CARD_PATHS: tuple[str, ...] = (
    "/.well-known/agent-card.json",
    "/.well-known/agent.json",
)
"""Card paths probed in order when the URL is not itself a card document."""


def normalize_agent_url(url: str) -> str:
    """Trim an agent URL.

    Raises:
        InvalidInput: If the URL is empty after trimming
    """
    normalized = (url or "").strip()
    if not normalized:
        raise InvalidInput("Agent URL is empty")
    return normalized


def candidate_card_urls(url: str, card_paths: Sequence[str]) -> list[str]:
    """List the card document URLs to try for an agent URL, in order."""
    if httpx.URL(url).path.endswith(".json"):
        return [url]
    base = url.rstrip("/")
    return [base + path for path in card_paths]


def fallback_card_url(url: str) -> str:
    """URL assigned to a card whose document has no ``url`` field."""
    parsed = httpx.URL(url)
    if parsed.path.endswith(".json"):
        return f"{parsed.scheme}://{parsed.netloc.decode('ascii')}/"
    return url


def _describe_status_error(error: httpx.HTTPStatusError) -> str:
    response = error.response
    return (
        f"Failed to fetch agent card from {error.request.url}: "
        f"HTTP {response.status_code} {response.reason_phrase}".rstrip()
    )


async def _discover(
    url: str,
    fetch_fn: FetchFunction,
    card_paths: Sequence[str],
) -> ResolvedAgent:
    candidates = candidate_card_urls(url, card_paths)
    base_url = fallback_card_url(url)

    for index, card_url in enumerate(candidates):
        client = AgentClient(card_url, fetch_fn, base_url=base_url)
        try:
            card = await client.get_agent_card()
        except httpx.HTTPStatusError as e:
            is_last = index == len(candidates) - 1
            if e.response.status_code == 404 and not is_last:
                logger.debug(f"No agent card at {card_url}, trying next path")
                continue
            raise
        return ResolvedAgent(client=client, card=card)

    # Only reachable with an empty card_paths sequence
    raise ResolutionFailed(url, f"No agent card paths to probe for {url}")


async def resolve(
    url: str,
    fetch_fn: FetchFunction,
    *,
    timeout: float | None = None,
    card_paths: Sequence[str] = WELL_KNOWN_CARD_PATHS,
) -> ResolvedAgent:
    """Discover an agent and fetch its card.

    Args:
        url: Agent base URL or card document URL
        fetch_fn: Fetch function used for all requests
        timeout: Optional bound in seconds on the whole discovery
        card_paths: Well-known paths to probe under a base URL

    Returns:
        ResolvedAgent: Client handle and parsed card

    Raises:
        InvalidInput: If the URL is empty after trimming
        ResolutionFailed: If discovery or parsing fails for any reason

    Example:
        >>> resolved = await resolve("https://agent.example", fetch)
        >>> resolved.card.name
        'Agent A'
    """
    normalized = normalize_agent_url(url)

    try:
        resolved = await asyncio.wait_for(
            _discover(normalized, fetch_fn, card_paths), timeout=timeout
        )
    except ResolutionFailed:
        raise
    except asyncio.TimeoutError:
        raise ResolutionFailed(
            normalized,
            f"Timed out after {timeout}s fetching agent card from {normalized}",
        )
    except httpx.HTTPStatusError as e:
        raise ResolutionFailed(normalized, _describe_status_error(e)) from e
    except Exception as e:
        raise ResolutionFailed(normalized, str(e) or e.__class__.__name__) from e

    logger.info(f"Resolved agent '{resolved.card.name}' at {resolved.card.url}")
    return resolved
