"""Access control list commands."""

from pathlib import Path
import sys

import click
from pydantic import ValidationError

from resource_acl.cli.utils import error, info, success
from resource_acl.core.acl import (
    AccessControlList,
    AccessController,
    create_acl_mapper,
    entity_factory,
)
from resource_acl.core.settings import get_access_control_settings


def _load_access_control_list(path: Path) -> AccessControlList:
    """Read an access control list JSON document."""
    try:
        return AccessControlList.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise click.BadParameter(
            f"{path} could not be read as UTF-8 text: {exc}",
            param_hint="ACL_FILE",
        ) from exc
    except ValidationError as exc:
        raise click.BadParameter(
            f"{path} is not a valid access control list:\n{exc}",
            param_hint="ACL_FILE",
        ) from exc


def _echo_json(acl: AccessControlList) -> None:
    click.echo(acl.model_dump_json(indent=2))


@click.group(name="acl")
def acl() -> None:
    """Evaluate and normalize access control lists."""


@acl.command()
@click.argument("acl_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("permissions", nargs=-1, required=True)
@click.option("--user", "-u", default=None, help="User identifier")
@click.option("--role", "-r", "roles", multiple=True, help="Role name (repeatable)")
@click.option("--group", "-g", "groups", multiple=True, help="Group name (repeatable)")
@click.option(
    "--all",
    "require_all",
    is_flag=True,
    default=False,
    help="Require every permission instead of any of them",
)
def check(
    acl_file: Path,
    permissions: tuple[str, ...],
    user: str | None,
    roles: tuple[str, ...],
    groups: tuple[str, ...],
    require_all: bool,
) -> None:
    """Check whether a principal holds PERMISSIONS on ACL_FILE.

    Exits with 0 when access is granted and 1 when it is denied.
    """
    controller = AccessController.from_access_control_list(_load_access_control_list(acl_file))
    if require_all:
        granted = controller.has_all_permissions(user, roles, groups, permissions)
    else:
        granted = controller.has_any_permission(user, roles, groups, permissions)

    mode = "all of" if require_all else "any of"
    if granted:
        success(f"Granted: {mode} {', '.join(permissions)}")
        return
    error(f"Denied: {mode} {', '.join(permissions)}")
    sys.exit(1)


@acl.command()
@click.argument("acl_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--admin-switch/--no-admin-switch",
    default=None,
    help="Override whether admin roles are stripped (default: from settings)",
)
def normalize(acl_file: Path, admin_switch: bool | None) -> None:
    """Print ACL_FILE with default entries added and admin roles stripped.

    The document is mapped to an entity and back, so the output is sorted
    and stable.
    """
    settings = get_access_control_settings()
    if admin_switch is not None:
        settings = settings.model_copy(update={"switch_admin_access": admin_switch})
    mapper = create_acl_mapper(entity_factory(), settings)

    source = _load_access_control_list(acl_file)
    entity = mapper.map_to_acl(source)
    info(f"Normalized {len(entity.entry_map())} entries of {acl_file}")
    _echo_json(mapper.map_to_access_control_list(entity))


@acl.command()
@click.argument("owner")
def default(owner: str) -> None:
    """Print the access control list of a new resource owned by OWNER."""
    mapper = create_acl_mapper(entity_factory())
    _echo_json(mapper.default_access_control_list(owner))
