"""Dashboard tool implementations.

Wraps the shared ``DashboardWriter`` so MCP clients can create, update, close
and read dashboard issues.  Every tool returns a JSON-serializable dictionary.
The writer is initialized from the environment on first use.
"""

from __future__ import annotations

from ..dashboard import EnsureIssueConfig, Issue, IssueLookup
from ..state import get_writer


def _issue_to_dict(issue: Issue | None) -> dict[str, object] | None:
    if issue is None:
        return None
    return {"number": issue.number, "body": issue.body}


def _lookup_to_dict(lookup: IssueLookup) -> dict[str, object]:
    result: dict[str, object] = {
        "status": lookup.status.value,
        "issue": _issue_to_dict(lookup.issue),
    }
    if lookup.error is not None:
        result["error"] = str(lookup.error)
    return result


async def dashboard_ensure_issue(
    title: str,
    body: str,
    reuse_title: str | None = None,
) -> dict[str, object]:
    """Create or update the dashboard issue titled ``title``.

    ``reuse_title`` names an older title to migrate from.  The returned
    ``action`` is one of created, updated, unchanged, disabled or failed.
    """
    writer = get_writer(lazy=True)
    result = await writer.reconcile_issue(
        EnsureIssueConfig(title=title, body=body, reuse_title=reuse_title)
    )
    payload: dict[str, object] = {"action": result.action.value}
    if result.error is not None:
        payload["error"] = str(result.error)
    return payload


async def dashboard_ensure_issue_closing(title: str) -> dict[str, object]:
    """Close every issue titled ``title``.

    Errors from the tracker are raised to the client.
    """
    writer = get_writer(lazy=True)
    await writer.ensure_issue_closing(title)
    closed = [issue.id for issue in writer.issue_list if issue.title == title]
    return {"closed": closed}


async def dashboard_find_issue(title: str) -> dict[str, object]:
    """Find the first issue titled ``title`` and return its body."""
    writer = get_writer(lazy=True)
    return _lookup_to_dict(await writer.lookup_issue_by_title(title))


async def dashboard_get_issue(number: int, use_cache: bool = True) -> dict[str, object]:
    """Fetch issue ``number``; ``use_cache`` allows a previously fetched copy."""
    writer = get_writer(lazy=True)
    return _lookup_to_dict(await writer.lookup_issue(number, use_cache=use_cache))
