"""Data types shared by the dashboard writer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class IssueSummary:
    """Minimal view of a remote issue, enough for title lookup."""

    id: int
    title: str


@dataclass(frozen=True)
class Issue:
    number: int
    body: str | None


@dataclass(frozen=True)
class EnsureIssueConfig:
    """Desired state of a dashboard issue.

    ``reuse_title`` is an older title that is matched when no issue carries
    ``title``, so a renamed dashboard is updated in place instead of duplicated.
    """

    title: str
    body: str
    reuse_title: str | None = None


class EnsureIssueResult(str, Enum):
    CREATED = "created"
    UPDATED = "updated"


class ReconcileAction(str, Enum):
    """What ``DashboardWriter.reconcile_issue`` did."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    DISABLED = "disabled"
    FAILED = "failed"


@dataclass(frozen=True)
class ReconcileResult:
    action: ReconcileAction
    error: Exception | None = None

    def to_ensure_result(self) -> EnsureIssueResult | None:
        if self.action is ReconcileAction.CREATED:
            return EnsureIssueResult.CREATED
        if self.action is ReconcileAction.UPDATED:
            return EnsureIssueResult.UPDATED
        return None


class LookupStatus(str, Enum):
    FOUND = "found"
    MISSING = "missing"
    ERROR = "error"


@dataclass(frozen=True)
class IssueLookup:
    """Outcome of fetching an issue; ``issue`` is set only when ``status`` is FOUND."""

    status: LookupStatus
    issue: Issue | None = None
    error: Exception | None = None

    @classmethod
    def found(cls, issue: Issue) -> IssueLookup:
        return cls(status=LookupStatus.FOUND, issue=issue)

    @classmethod
    def missing(cls) -> IssueLookup:
        return cls(status=LookupStatus.MISSING)

    @classmethod
    def failed(cls, error: Exception) -> IssueLookup:
        return cls(status=LookupStatus.ERROR, error=error)
