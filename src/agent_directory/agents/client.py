"""Client handle bound to a single remote agent.

An AgentClient is created by the resolver for the card document it found
and is used to fetch and parse that agent's card. It holds no connection
state of its own; all requests go through the fetch function it was given,
so proxy headers apply to every call.
"""

import logging
from typing import Any

import httpx

from agent_directory.agents.types import AgentCard
from agent_directory.proxy import FetchFunction

logger = logging.getLogger(__name__)


class AgentClient:
    """Async client for a remote agent's self-description.

    Attributes:
        card_url: URL of the agent card document
        base_url: URL used for the card when the document carries none
        _fetch: Fetch function used for every request
        _card: Last card fetched through this client
    """

    def __init__(
        self,
        card_url: str,
        fetch: FetchFunction,
        base_url: str | None = None,
    ) -> None:
        """Initialize the agent client.

        Args:
            card_url: URL of the agent card document
            fetch: Fetch function used for requests (see create_proxy_fetch)
            base_url: Fallback card URL, defaults to card_url
        """
        self.card_url = card_url
        self.base_url = base_url or card_url
        self._fetch = fetch
        self._card: AgentCard | None = None

    @property
    def card(self) -> AgentCard | None:
        """The last card fetched by this client, if any."""
        return self._card

    async def fetch_card_document(self) -> dict[str, Any]:
        """Fetch the raw agent card document.

        Returns:
            dict: The decoded JSON object

        Raises:
            httpx.HTTPStatusError: If the response status is not 2xx
            httpx.HTTPError: If the request fails
            ValueError: If the body is not a JSON object
        """
        logger.debug(f"Fetching agent card from {self.card_url}")
        response = await self._fetch(
            "GET", self.card_url, headers={"Accept": "application/json"}
        )
        response.raise_for_status()

        document = response.json()
        if not isinstance(document, dict):
            raise ValueError(
                f"Agent card at {self.card_url} is not a JSON object"
            )
        return document

    async def get_agent_card(self) -> AgentCard:
        """Fetch and parse the agent card.

        A document without a ``url`` field gets this client's base_url.

        Returns:
            AgentCard: The parsed card

        Raises:
            httpx.HTTPError: If the request fails or the status is not 2xx
            ValueError: If the document is not a valid agent card
        """
        document = await self.fetch_card_document()

        if not document.get("url"):
            document = {**document, "url": self.base_url}

        card = AgentCard.model_validate(document)
        self._card = card
        logger.debug(f"Fetched agent card '{card.name}' for {card.url}")
        return card
