"""Configuration commands."""

import json

import click

from resource_acl.core.settings import get_access_control_settings, get_logging_settings


@click.group(name="config")
def config() -> None:
    """Configuration commands."""


@config.command()
def show() -> None:
    """Display the effective access control and logging settings."""
    access = get_access_control_settings()
    logs = get_logging_settings()
    config_dict = {
        "access_control": {
            "default_permissions": list(access.default_permissions),
            "admin_roles": list(access.admin_roles),
            "switch_admin_access": access.switch_admin_access,
            "return_null": access.return_null,
        },
        "logging": {
            "level": logs.level,
            "json_logs": logs.json_logs,
        },
    }
    click.echo(json.dumps(config_dict, indent=2))
