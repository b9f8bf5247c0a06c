"""Configuration loading for dashboard-writer.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.

Variables:
- DEPENDENCY_DASHBOARD_URL (base URL of the self-hosted tracker API)
- REPOSITORY (repository path on the tracker, e.g. ``group/project``)
- HTTP_TIMEOUT_S (default: 10)
- LOG_LEVEL (default: 'INFO')

Missing values are not rejected here; `DashboardWriter.from_config` raises
`ConfigurationError` so programmatic configs fail the same way.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_LOG_LEVEL, HTTP_TIMEOUT_S


@dataclass
class Config:
    """Configuration values loaded from the environment."""

    dependency_dashboard_url: str | None
    repository: str | None
    http_timeout_s: float = HTTP_TIMEOUT_S
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        The `.env` file in the working directory is loaded if present.
        """
        load_dotenv(find_dotenv(usecwd=True))

        dashboard_url = os.getenv("DEPENDENCY_DASHBOARD_URL") or None
        repository = os.getenv("REPOSITORY") or None

        timeout_str = os.getenv("HTTP_TIMEOUT_S")
        try:
            http_timeout_s = float(timeout_str) if timeout_str else HTTP_TIMEOUT_S
        except ValueError as exc:
            raise ValueError(f"HTTP_TIMEOUT_S must be a number, got {timeout_str!r}") from exc

        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)

        return cls(
            dependency_dashboard_url=dashboard_url,
            repository=repository,
            http_timeout_s=http_timeout_s,
            log_level=log_level,
        )
