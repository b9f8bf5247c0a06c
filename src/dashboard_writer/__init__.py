"""Top-level package for dashboard-writer.

This package maintains a single "dependency dashboard" issue in a
self-hosted issue tracker: it creates or updates the issue by title, closes
issues matching a title and fetches issues by number or title.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
