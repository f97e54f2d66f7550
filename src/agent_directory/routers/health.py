"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from agent_directory.models.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint.

    Returns the current health status and version of the agent-directory
    server, plus the directory size and bootstrap state once started.

    Args:
        request: The FastAPI request object.

    Returns:
        HealthResponse: Health status and version information.
    """
    agent_count = None
    bootstrap_complete = None

    service = getattr(request.app.state, "directory_service", None)
    if service is not None:
        agent_count = len(service.directory)

    task = getattr(request.app.state, "bootstrap_task", None)
    if task is not None:
        bootstrap_complete = task.done()
        logger.debug(f"Bootstrap complete: {bootstrap_complete}")

    return HealthResponse(
        status="ok",
        version="0.1.0",
        agent_count=agent_count,
        bootstrap_complete=bootstrap_complete,
    )
