"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "error").
        version: The version of agent-directory.
        agent_count: Number of agents in the directory.
        bootstrap_complete: Whether default agent registration has finished.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of agent-directory")
    agent_count: int | None = Field(
        default=None,
        description="Number of registered agents",
    )
    bootstrap_complete: bool | None = Field(
        default=None,
        description="Whether default agents have finished registering",
    )
