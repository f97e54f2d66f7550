"""Type definitions for remote agents.

This module contains the AgentCard model describing a remote agent and the
ResolvedAgent pair returned by the resolver.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from agent_directory.agents.client import AgentClient


class AgentCard(BaseModel):
    """Self-description document of a remote agent.

    Only ``url`` and ``name`` are interpreted by the directory. Every other
    field of the document (description, version, capabilities, skills, ...)
    is kept as an extra field and passed through verbatim.

    Cards are frozen: a re-registration produces a new card that supersedes
    the old one by ``url``.

    Attributes:
        url: Canonical URL of the agent, unique within a directory
        name: Human-readable agent name
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    url: str = Field(..., min_length=1, description="Canonical agent URL")
    name: str = Field(..., min_length=1, description="Human-readable agent name")

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Protocol-specific fields other than url and name."""
        return dict(self.model_extra or {})


@dataclass(frozen=True)
class ResolvedAgent:
    """Result of resolving an agent URL.

    Attributes:
        client: Handle bound to the agent's origin
        card: The parsed agent card
    """

    client: "AgentClient"
    card: AgentCard
