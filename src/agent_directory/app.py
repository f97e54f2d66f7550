"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup/shutdown
and router registration.
"""

import asyncio
import logging
from contextlib import asynccontextmanager, suppress
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from httpx import AsyncClient

from agent_directory.config import AgentDirectorySettings
from agent_directory.directory import AgentDirectoryService
from agent_directory.notifications import Notifier
from agent_directory.proxy import create_proxy_fetch
from agent_directory.routers import agents, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    Startup opens the shared HTTP client used for all agent requests, creates
    the directory service and starts registering the default agents in the
    background. Shutdown cancels an unfinished bootstrap and closes the client.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: AgentDirectorySettings = app.state.settings

    http_client = AsyncClient(follow_redirects=True)
    app.state.http_client = http_client

    fetch = create_proxy_fetch(settings.custom_headers, client=http_client)
    service = AgentDirectoryService(
        fetch,
        notifier=Notifier(history_size=settings.notification_history_size),
        resolve_timeout=settings.resolve_timeout_seconds,
        card_paths=settings.agent_card_paths,
        default_agent_urls=settings.parsed_default_agent_urls,
    )
    app.state.directory_service = service
    logger.info(
        f"Agent directory started with {len(service.default_agent_urls)} default agent(s)"
    )

    bootstrap_task = asyncio.create_task(service.initialize())
    app.state.bootstrap_task = bootstrap_task

    yield

    if not bootstrap_task.done():
        bootstrap_task.cancel()
        with suppress(asyncio.CancelledError):
            await bootstrap_task
        logger.info("Default agent registration cancelled")

    await http_client.aclose()
    logger.info("HTTP client closed")


def create_app(settings: AgentDirectorySettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional AgentDirectorySettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from agent_directory.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="agent-directory",
        description="Directory server for discovering and selecting A2A agents",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store settings in app.state for lifespan access
    app.state.settings = settings

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(agents.router)

    return app
