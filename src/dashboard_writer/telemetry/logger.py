"""Logging setup for dashboard-writer."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging to stderr.

    stdout stays free for the MCP stdio transport.  ``httpx`` request lines are
    kept at WARNING unless the requested level is DEBUG.
    """
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT, stream=sys.stderr, force=True)
    if numeric > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
