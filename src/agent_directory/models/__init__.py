"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from agent_directory.models.agents import (
    AddAgentRequest,
    AgentListResponse,
    NotificationListResponse,
    NotificationResponse,
    SetActiveAgentRequest,
)
from agent_directory.models.health import HealthResponse

__all__ = [
    "AddAgentRequest",
    "AgentListResponse",
    "HealthResponse",
    "NotificationListResponse",
    "NotificationResponse",
    "SetActiveAgentRequest",
]
