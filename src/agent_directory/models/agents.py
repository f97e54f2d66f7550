"""Pydantic models for agent API requests and responses."""

from typing import Any

from pydantic import BaseModel, Field


class AddAgentRequest(BaseModel):
    """Request body for adding an agent by URL."""

    url: str = Field(..., description="Agent base URL or agent card URL")


class SetActiveAgentRequest(BaseModel):
    """Request body for changing the active agent."""

    url: str | None = Field(
        None, description="URL of a registered agent, or null to clear"
    )


class AgentListResponse(BaseModel):
    """Response for listing agents."""

    agents: list[dict[str, Any]] = Field(
        default_factory=list, description="Agent cards in directory order"
    )
    active_agent_url: str | None = Field(
        None, description="URL of the active agent, if any"
    )


class NotificationResponse(BaseModel):
    """A single notification."""

    message: str
    level: str
    timestamp: str


class NotificationListResponse(BaseModel):
    """Response for listing notifications."""

    notifications: list[NotificationResponse] = Field(default_factory=list)
