"""Logging configuration for the package and its command-line interface."""

from __future__ import annotations

from .config import configure_logging, setup_logging
from .formatters import JSONFormatter

__all__ = ["JSONFormatter", "configure_logging", "setup_logging"]
