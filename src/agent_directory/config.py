"""Configuration module for agent-directory using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from agent_directory.agents.resolver import WELL_KNOWN_CARD_PATHS
from agent_directory.directory.bootstrap import parse_agent_urls


class AgentDirectorySettings(BaseSettings):
    """Main configuration settings for agent-directory.

    All settings can be overridden via environment variables with the
    AGENT_DIRECTORY_ prefix. For example, AGENT_DIRECTORY_DEFAULT_AGENT_URLS
    will override the default_agent_urls setting. Mapping and list settings
    are read from the environment as JSON.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Default agents (comma-separated base URLs)
    default_agent_urls: str = ""

    # Outbound requests
    custom_headers: dict[str, str] = Field(default_factory=dict)
    resolve_timeout_seconds: float = 10.0
    agent_card_paths: list[str] = Field(
        default_factory=lambda: list(WELL_KNOWN_CARD_PATHS)
    )

    # Notifications
    notification_history_size: int = 50

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="AGENT_DIRECTORY_")

    @property
    def parsed_default_agent_urls(self) -> list[str]:
        """Get the default agent URLs as a list, empty entries removed."""
        return parse_agent_urls(self.default_agent_urls)
