"""MCP stdio server entrypoint for dashboard-writer.

The server runs over standard input/output using the Model Context Protocol
and registers the dashboard tools so clients can keep the dependency
dashboard issue up to date.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .config import Config
from .constants import MCP_TRANSPORT
from .telemetry import configure_logging
from .tools import dashboard_tools


def build_tools_dispatch() -> dict[str, Callable[..., Awaitable[dict[str, Any]]]]:
    """Return a mapping from tool names to coroutine functions."""
    return {
        "dashboard_ensure_issue": dashboard_tools.dashboard_ensure_issue,
        "dashboard_ensure_issue_closing": dashboard_tools.dashboard_ensure_issue_closing,
        "dashboard_find_issue": dashboard_tools.dashboard_find_issue,
        "dashboard_get_issue": dashboard_tools.dashboard_get_issue,
    }


def build_server() -> FastMCP:
    mcp = FastMCP("dashboard-writer")
    dispatch = build_tools_dispatch()
    for name, func in dispatch.items():
        mcp.add_tool(func, name=name)
    logging.getLogger(__name__).info("Registered %d tools", len(dispatch))
    return mcp


def main() -> None:
    """Entrypoint for the dashboard-writer MCP server."""
    # stdout carries the MCP protocol
    config = Config.load_from_env()
    configure_logging(config.log_level)
    logger = logging.getLogger(__name__)
    logger.info("Starting dashboard-writer MCP server")

    mcp = build_server()
    mcp.run(transport=MCP_TRANSPORT)


if __name__ == "__main__":
    main()
