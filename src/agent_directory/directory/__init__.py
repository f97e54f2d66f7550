"""Agent directory state and startup registration.

This package provides the in-memory AgentDirectory, the bootstrap loader for
default agent URLs, and the AgentDirectoryService used by the host.
"""

from agent_directory.directory.bootstrap import (
    BootstrapOutcome,
    load_defaults,
    parse_agent_urls,
)
from agent_directory.directory.service import AgentDirectoryService
from agent_directory.directory.store import AgentDirectory

__all__ = [
    "AgentDirectory",
    "AgentDirectoryService",
    "BootstrapOutcome",
    "load_defaults",
    "parse_agent_urls",
]
