"""Agent directory operations exposed to the host application.

AgentDirectoryService combines the resolver, the directory store, the
bootstrap loader and the notifier into the operations a UI needs:
- Reading the agents and the active agent
- Adding an agent by URL
- Changing the active agent
- Registering the configured default agents once at startup
"""

import logging
from collections.abc import Sequence

from agent_directory.agents import (
    WELL_KNOWN_CARD_PATHS,
    AgentCard,
    AgentClient,
    resolve,
)
from agent_directory.directory.bootstrap import BootstrapOutcome, load_defaults
from agent_directory.directory.store import AgentDirectory
from agent_directory.errors import InvalidInput, ResolutionFailed
from agent_directory.notifications import (
    Notifier,
    agent_added_message,
    agent_failed_message,
)
from agent_directory.proxy import FetchFunction

logger = logging.getLogger(__name__)


class AgentDirectoryService:
    """Session-scoped agent directory with discovery and notifications.

    Attributes:
        directory: The underlying AgentDirectory
        notifier: Sink for success/error messages
        resolve_timeout: Bound in seconds on each resolution attempt
        card_paths: Well-known card paths probed during discovery
        default_agent_urls: URLs registered by initialize()
    """

    def __init__(
        self,
        fetch: FetchFunction,
        directory: AgentDirectory | None = None,
        notifier: Notifier | None = None,
        *,
        resolve_timeout: float | None = None,
        card_paths: Sequence[str] = WELL_KNOWN_CARD_PATHS,
        default_agent_urls: Sequence[str] = (),
    ) -> None:
        self._fetch = fetch
        self.directory = directory if directory is not None else AgentDirectory()
        self.notifier = notifier if notifier is not None else Notifier()
        self.resolve_timeout = resolve_timeout
        self.card_paths = tuple(card_paths)
        self.default_agent_urls = list(default_agent_urls)
        self._clients: dict[str, AgentClient] = {}
        self._initialized = False

    @property
    def agents(self) -> list[AgentCard]:
        return self.directory.list_all()

    @property
    def active_agent(self) -> AgentCard | None:
        return self.directory.get_active()

    @property
    def initialized(self) -> bool:
        return self._initialized

    def get_client(self, url: str) -> AgentClient | None:
        """Return the client handle from the latest registration of a url."""
        return self._clients.get(url)

    def set_active_agent(self, card: AgentCard | None) -> None:
        self.directory.set_active(card)

    async def add_agent_by_url(self, url: str) -> AgentCard | None:
        """Resolve an agent URL and register its card.

        Empty or whitespace-only input is ignored without notification.
        On failure an error notification is emitted and the error is
        re-raised so the caller can update its own state.

        Args:
            url: Agent base URL or card document URL

        Returns:
            AgentCard | None: The registered card, or None for empty input

        Raises:
            ResolutionFailed: If the agent card could not be fetched
        """
        try:
            resolved = await resolve(
                url,
                self._fetch,
                timeout=self.resolve_timeout,
                card_paths=self.card_paths,
            )
        except InvalidInput:
            logger.debug("Ignoring empty agent URL")
            return None
        except ResolutionFailed as e:
            self.notifier.notify(agent_failed_message(e.message), "error")
            raise

        card = resolved.card
        self.directory.register(card)
        self._clients[card.url] = resolved.client
        self.notifier.notify(agent_added_message(card.name), "success")
        return card

    async def initialize(self) -> list[BootstrapOutcome]:
        """Register the default agent URLs.

        Must be called once per session.

        Returns:
            list[BootstrapOutcome]: One outcome per default URL

        Raises:
            RuntimeError: If called more than once
        """
        if self._initialized:
            raise RuntimeError("Agent directory already initialized")
        self._initialized = True

        return await load_defaults(self.default_agent_urls, self.add_agent_by_url)
