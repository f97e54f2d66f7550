"""FastAPI routers for API endpoints.

This package contains all route handlers organized by resource type.
"""

from agent_directory.routers import agents, health

__all__ = [
    "agents",
    "health",
]
