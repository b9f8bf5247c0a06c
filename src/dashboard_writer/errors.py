"""Exception types and well-known error messages."""

from __future__ import annotations

SELF_HOSTED_DASHBOARD_URL_UNAVAILABLE = "self-hosted-dashboard-url-unavailable"
REPOSITORY_UNAVAILABLE = "Repository is null"

# Prefix of the tracker's error message when the issues feature is turned off
# for a repository.
ISSUES_DISABLED_MESSAGE = "Issues are disabled for this repo"


class DashboardWriterError(Exception):
    """Base class for errors raised by dashboard-writer."""


class ConfigurationError(DashboardWriterError):
    """Raised when the dashboard URL or repository is missing at init time."""


class TransportError(DashboardWriterError):
    """Raised when a request to the tracker fails.

    ``status_code`` is ``None`` when the failure happened before a response was
    received (connection errors, timeouts).
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MalformedResponseError(DashboardWriterError):
    """Raised when the tracker returns a body of an unexpected shape."""
