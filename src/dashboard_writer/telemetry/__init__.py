"""Logging utilities."""

from .logger import LOG_FORMAT, configure_logging

__all__ = ["LOG_FORMAT", "configure_logging"]
