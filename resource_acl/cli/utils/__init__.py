"""CLI helpers."""

from .formatters import error, info, success

__all__ = ["error", "info", "success"]
