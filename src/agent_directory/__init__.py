"""agent-directory: in-memory directory of remote A2A agents.

This package discovers agent endpoints, caches their agent cards, tracks the
active agent for a session and registers a configured set of default agents
at startup. A FastAPI app exposes the directory over HTTP.
"""

from agent_directory.app import create_app

__version__ = "0.1.0"

__all__ = ["create_app", "__version__"]
