"""Shared writer instance for dashboard-writer.

Hosts that prefer module-level calls use ``init(config)`` once per run and
then the functions below, which all delegate to a single ``DashboardWriter``.
The MCP tools go through ``get_writer(lazy=True)`` so the server initializes
itself from the environment on first use.
"""

from __future__ import annotations

from .config import Config
from .dashboard import DashboardWriter, EnsureIssueResult, Issue

WRITER: DashboardWriter | None = None


def init(config: Config) -> DashboardWriter:
    """Validate ``config`` and install the shared writer.

    Raises ``ConfigurationError`` if the dashboard URL or repository is missing
    and ``RuntimeError`` if a writer is already installed; call ``aclose()``
    before initializing again.
    """
    global WRITER
    if WRITER is not None:
        raise RuntimeError("dashboard writer is already initialized; call aclose() first")
    WRITER = DashboardWriter.from_config(config)
    return WRITER


async def aclose() -> None:
    """Close the shared writer's HTTP client and uninstall it."""
    global WRITER
    if WRITER is None:
        return
    writer, WRITER = WRITER, None
    await writer.aclose()


def get_writer(*, lazy: bool = False) -> DashboardWriter:
    """Return the shared writer.

    With ``lazy=True`` a missing writer is created from ``Config.load_from_env``;
    otherwise calling this before ``init`` raises ``RuntimeError``.
    """
    if WRITER is None:
        if lazy:
            return init(Config.load_from_env())
        raise RuntimeError("dashboard writer is not initialized; call init() first")
    return WRITER


async def ensure_issue(
    *,
    title: str,
    body: str,
    reuse_title: str | None = None,
) -> EnsureIssueResult | None:
    return await get_writer().ensure_issue(title=title, body=body, reuse_title=reuse_title)


async def ensure_issue_closing(title: str) -> None:
    await get_writer().ensure_issue_closing(title)


async def find_issue(title: str) -> Issue | None:
    return await get_writer().find_issue(title)


async def get_issue(number: int, use_cache: bool = True) -> Issue | None:
    return await get_writer().get_issue(number, use_cache=use_cache)
