"""Tool module exports for dashboard-writer.

Usage:

    from dashboard_writer.tools import dashboard_tools
    await dashboard_tools.dashboard_ensure_issue(...)

The server imports these modules and registers their functions as MCP tools.
"""

from . import dashboard_tools  # noqa: F401

__all__ = ["dashboard_tools"]
