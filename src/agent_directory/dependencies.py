"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
multiple routers to inject common dependencies like settings and services.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from agent_directory.config import AgentDirectorySettings
from agent_directory.directory import AgentDirectoryService


@lru_cache
def get_settings() -> AgentDirectorySettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the AGENT_DIRECTORY_ prefix.

    Returns:
        AgentDirectorySettings: The application configuration settings.
    """
    return AgentDirectorySettings()


def get_directory_service(request: Request) -> AgentDirectoryService:
    """Get the agent directory service from app state.

    The service is created once during application startup and lives for
    the whole server session.

    Args:
        request: The FastAPI request object.

    Returns:
        AgentDirectoryService: The directory service instance.

    Raises:
        HTTPException: If the service is not initialized (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "directory_service"):
        raise HTTPException(
            status_code=503,
            detail="Agent directory not initialized",
        )
    return request.app.state.directory_service
