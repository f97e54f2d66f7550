"""In-memory directory of agent cards.

This module provides the AgentDirectory class which holds:
- The ordered list of known agent cards, unique by card url
- The active selection, a card from that list or None

``register`` is the only operation that adds cards. It contains no await
point, so concurrent resolution tasks finishing in any order still apply
their registrations one at a time on the event loop.
"""

import logging
from collections.abc import Callable

from agent_directory.agents.types import AgentCard
from agent_directory.errors import DirectoryInvariantViolation

logger = logging.getLogger(__name__)

DirectoryListener = Callable[["AgentDirectory"], None]


class AgentDirectory:
    """Ordered collection of agent cards with a single active selection.

    New urls are appended. A card whose url is already known replaces the
    existing entry in place. There is no remove operation.
    """

    def __init__(self) -> None:
        self._cards: list[AgentCard] = []
        self._index: dict[str, int] = {}
        self._active: AgentCard | None = None
        self._listeners: list[DirectoryListener] = []

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, url: object) -> bool:
        return url in self._index

    def register(self, card: AgentCard) -> None:
        """Add or replace a card and make it the active selection.

        Args:
            card: The card to register
        """
        position = self._index.get(card.url)
        if position is None:
            self._index[card.url] = len(self._cards)
            self._cards.append(card)
            logger.info(f"Registered agent '{card.name}' at {card.url}")
        else:
            self._cards[position] = card
            logger.info(
                f"Replaced agent at {card.url} (position {position}) with '{card.name}'"
            )

        self._active = card
        self._notify()

    def list_all(self) -> list[AgentCard]:
        """Return a snapshot of all cards in directory order."""
        return list(self._cards)

    def get(self, url: str) -> AgentCard | None:
        """Return the current card for a url, or None if unknown."""
        position = self._index.get(url)
        return None if position is None else self._cards[position]

    def get_active(self) -> AgentCard | None:
        """Return the active card, or None if no agent is selected."""
        return self._active

    def set_active(self, card: AgentCard | None) -> None:
        """Change the active selection.

        The selection is resolved by url, so passing a superseded card for
        a known url selects the directory's current card for that url.

        Args:
            card: Card to select, or None to clear the selection

        Raises:
            DirectoryInvariantViolation: If the card's url is not registered
        """
        if card is None:
            self._active = None
            logger.debug("Cleared active agent")
            self._notify()
            return

        current = self.get(card.url)
        if current is None:
            raise DirectoryInvariantViolation(
                f"Agent {card.url} is not registered",
            )

        self._active = current
        logger.debug(f"Active agent set to {current.url}")
        self._notify()

    def subscribe(self, listener: DirectoryListener) -> Callable[[], None]:
        """Register a callback invoked after every committed change.

        Args:
            listener: Called with this directory after each change

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.warning(f"Directory listener {listener!r} failed: {e}")
