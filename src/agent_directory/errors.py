"""Error types raised by the agent directory.

All errors derive from AgentDirectoryError and carry a human-readable
message suitable for display.
"""


class AgentDirectoryError(Exception):
    """Base class for agent directory errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(AgentDirectoryError):
    """An agent URL was empty or whitespace only."""


class ResolutionFailed(AgentDirectoryError):
    """Discovering or fetching an agent card failed.

    Attributes:
        url: The URL that was being resolved
        message: The upstream failure text, suitable for display
    """

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url


class DirectoryInvariantViolation(AgentDirectoryError):
    """A directory operation would break the directory's invariants."""
