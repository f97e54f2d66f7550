"""Remote agent discovery.

This package provides the AgentCard model, the AgentClient handle and the
resolver that turns an agent URL into both.
"""

from agent_directory.agents.client import AgentClient
from agent_directory.agents.resolver import (
    WELL_KNOWN_CARD_PATHS,
    normalize_agent_url,
    resolve,
)
from agent_directory.agents.types import AgentCard, ResolvedAgent

__all__ = [
    "AgentCard",
    "AgentClient",
    "ResolvedAgent",
    "WELL_KNOWN_CARD_PATHS",
    "normalize_agent_url",
    "resolve",
]
