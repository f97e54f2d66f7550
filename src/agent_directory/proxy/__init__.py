"""Outbound request helpers for talking to remote agents."""

from agent_directory.proxy.fetch import FetchFunction, create_proxy_fetch, merge_headers

__all__ = ["FetchFunction", "create_proxy_fetch", "merge_headers"]
