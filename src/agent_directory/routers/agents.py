"""Agents router for the agent directory.

This module provides REST API endpoints for:
- Listing registered agents
- Adding an agent by URL
- Reading and changing the active agent
- Listing recent notifications
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Response, status

from agent_directory.dependencies import get_directory_service
from agent_directory.directory import AgentDirectoryService
from agent_directory.errors import DirectoryInvariantViolation, ResolutionFailed
from agent_directory.models.agents import (
    AddAgentRequest,
    AgentListResponse,
    NotificationListResponse,
    NotificationResponse,
    SetActiveAgentRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["agents"])

DirectoryService = Annotated[AgentDirectoryService, Depends(get_directory_service)]


@router.get("/agents", response_model=AgentListResponse, summary="List agents")
async def list_agents(service: DirectoryService) -> AgentListResponse:
    """List all registered agent cards in directory order."""
    active = service.active_agent
    return AgentListResponse(
        agents=[card.model_dump() for card in service.agents],
        active_agent_url=active.url if active else None,
    )


@router.post(
    "/agents",
    status_code=status.HTTP_201_CREATED,
    response_model=None,
    summary="Add an agent by URL",
)
async def add_agent(
    request: AddAgentRequest,
    service: DirectoryService,
) -> dict[str, Any] | Response:
    """Fetch an agent's card and register it as the active agent.

    An empty or whitespace-only URL is ignored: nothing is registered, no
    notification is emitted and the response is 204 with no body.

    Args:
        request: The agent URL to add
        service: Injected AgentDirectoryService

    Returns:
        The registered agent card, or an empty 204 response for an empty URL

    Raises:
        HTTPException: 502 if the agent card could not be fetched
    """
    try:
        card = await service.add_agent_by_url(request.url)
    except ResolutionFailed as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to fetch agent card: {e.message}",
        )

    if card is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return card.model_dump()


@router.get("/agents/active", summary="Get the active agent")
async def get_active_agent(service: DirectoryService) -> dict[str, Any] | None:
    """Return the active agent card, or null if none is selected."""
    active = service.active_agent
    return active.model_dump() if active else None


@router.put("/agents/active", summary="Set the active agent")
async def set_active_agent(
    request: SetActiveAgentRequest,
    service: DirectoryService,
) -> dict[str, Any] | None:
    """Select a registered agent by URL, or clear the selection with null.

    Raises:
        HTTPException: 404 if no agent is registered under the URL
    """
    if request.url is None:
        service.set_active_agent(None)
        return None

    card = service.directory.get(request.url)
    if card is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Agent '{request.url}' not found",
        )

    try:
        service.set_active_agent(card)
    except DirectoryInvariantViolation as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return card.model_dump()


@router.get(
    "/notifications",
    response_model=NotificationListResponse,
    summary="List recent notifications",
)
async def list_notifications(service: DirectoryService) -> NotificationListResponse:
    """Return recent success and error notifications, oldest first."""
    return NotificationListResponse(
        notifications=[
            NotificationResponse(
                message=n.message, level=n.level, timestamp=n.timestamp
            )
            for n in service.notifier.history()
        ]
    )
