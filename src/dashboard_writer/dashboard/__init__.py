"""Dependency dashboard issue reconciliation."""

from .models import (
    EnsureIssueConfig,
    EnsureIssueResult,
    Issue,
    IssueLookup,
    IssueSummary,
    LookupStatus,
    ReconcileAction,
    ReconcileResult,
)
from .writer import DashboardWriter

__all__ = [
    "DashboardWriter",
    "EnsureIssueConfig",
    "EnsureIssueResult",
    "Issue",
    "IssueLookup",
    "IssueSummary",
    "LookupStatus",
    "ReconcileAction",
    "ReconcileResult",
]
