"""User-facing notifications emitted by the directory.

The directory only produces notification messages; rendering them (toasts,
log lines, ...) is up to the host. The default Notifier logs every message
and keeps a bounded history the HTTP layer can expose.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

logger = logging.getLogger(__name__)

NotificationLevel = Literal["success", "error"]


@dataclass(frozen=True)
class Notification:
    """A single user-facing message."""

    message: str
    level: NotificationLevel
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


def agent_added_message(name: str) -> str:
    return f"Added {name}"


def agent_failed_message(error_message: str) -> str:
    return f"Failed to fetch agent card: {error_message}"


class Notifier:
    """Collects notifications and logs them.

    Attributes:
        history_size: Maximum number of notifications kept
    """

    def __init__(self, history_size: int = 50) -> None:
        self.history_size = history_size
        self._history: deque[Notification] = deque(maxlen=history_size)

    def notify(self, message: str, level: NotificationLevel) -> Notification:
        notification = Notification(message=message, level=level)
        self._history.append(notification)

        if level == "error":
            logger.warning(message)
        else:
            logger.info(message)
        return notification

    def history(self) -> list[Notification]:
        """Return kept notifications, oldest first."""
        return list(self._history)
