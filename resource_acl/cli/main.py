"""Main CLI entry point for resource-acl commands."""

import click

from resource_acl.cli.commands import acl, config
from resource_acl.infra.logging.config import setup_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="resource-acl")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """resource-acl - evaluate and normalize per-resource access control lists.

    \b
    Command Groups:
      acl     Check permissions, normalize documents, print defaults
      config  Show the effective settings

    \b
    Quick Start:
      resource-acl acl check document.json read --user bob
      resource-acl acl normalize document.json
      resource-acl acl default alice
    """
    ctx.ensure_object(dict)
    setup_logging()


cli.add_command(acl.acl)
cli.add_command(config.config)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
