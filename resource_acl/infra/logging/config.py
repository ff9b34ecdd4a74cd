"""Logging configuration setup.

Configures the root logger through ``logging.config.dictConfig``; package
loggers (``logging.getLogger(__name__)``) propagate to it. Output is either
human-readable text or JSON Lines.
"""

from __future__ import annotations

import logging
import logging.config
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False

if TYPE_CHECKING:
    from resource_acl.core.settings.logs import LoggingSettings


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from resource_acl.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    log_config: dict[str, Any] = settings_obj.to_logging_kwargs()
    if configure_kwargs:
        log_config = {**log_config, **configure_kwargs}

    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    console_enabled: bool = True,
    include_function_name: bool = False,
    capture_warnings: bool = True,
    **kwargs: Any,
) -> None:
    """Configure the root logger with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Enable JSONL (JSON Lines) structured logging.
        console_enabled: Enable console/stderr logging.
        include_function_name: Include function name in records.
        capture_warnings: Forward Python warnings to logging system.
        **kwargs: Unused settings, reported at debug level.

    Example:
        from resource_acl.core.settings import get_logging_settings
        log_settings = get_logging_settings()
        configure_logging(**log_settings.to_logging_kwargs())
    """
    if capture_warnings:
        logging.captureWarnings(True)

    formatter = "json" if json_logs else "text"
    handlers: dict[str, Any] = {}
    if console_enabled:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": log_level.upper(),
            "formatter": formatter,
            "stream": "ext://sys.stderr",
        }

    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _build_formatters_config(include_function_name),
        "handlers": handlers,
        "root": {
            "level": log_level.upper(),
            "handlers": list(handlers),
        },
    }
    logging.config.dictConfig(logging_config)

    if kwargs:
        logger.debug("Unused logging kwargs supplied: %s", ", ".join(sorted(kwargs.keys())))


def _build_formatters_config(include_function_name: bool) -> dict[str, Any]:
    """Build formatters configuration for dictConfig.

    Args:
        include_function_name: Include function name.

    Returns:
        Formatters configuration dict.
    """
    fmt_keys = {
        "level": "levelname",
        "logger": "name",
        "message": "message",
    }
    format_parts = ["%(asctime)s", "%(levelname)s", "%(name)s"]
    if include_function_name:
        fmt_keys["function"] = "funcName"
        format_parts.append("%(funcName)s")
    format_parts.append("%(message)s")

    return {
        "json": {
            "()": "resource_acl.infra.logging.formatters.JSONFormatter",
            "fmt_keys": fmt_keys,
            "static": {"service": "resource-acl"},
        },
        "text": {
            "format": " - ".join(format_parts),
        },
    }
