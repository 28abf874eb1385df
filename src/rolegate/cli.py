"""Command line: resolve, check, config."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from rolegate.auth.filters import dedupe
from rolegate.auth.permissions import any_match, has_one, missing_permissions, resolve
from rolegate.catalog import CatalogError, RoleCatalog, load_catalog, load_user
from rolegate.config import Config
from rolegate.models.user import User

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(package_name="rolegate")
@click.option("--config", "config_path", type=click.Path(), default=None, help="Config file")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override the configured log level",
)
@click.pass_context
def main(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """Resolve and check role-based permissions."""
    config = Config.load(Path(config_path).expanduser() if config_path else None)
    if log_level:
        config.log_level = log_level
    level = config.log_level.upper()
    if level not in _LOG_LEVELS:
        click.echo(
            f"Error: Unknown log level '{config.log_level}'. Choose from {', '.join(_LOG_LEVELS)}.",
            err=True,
        )
        sys.exit(1)
    logging.basicConfig(level=level)
    ctx.obj = config


def _load_inputs(config: Config, user_file: str, catalog: str | None) -> tuple[User, RoleCatalog]:
    catalog_path = Path(catalog).expanduser() if catalog else config.catalog_path
    if catalog_path is None:
        click.echo("Error: No role catalog given. Use --catalog or set ROLEGATE_CATALOG.", err=True)
        sys.exit(1)

    try:
        return load_user(user_file), load_catalog(catalog_path)
    except CatalogError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command(name="resolve")
@click.argument("user_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--catalog", type=click.Path(), default=None, help="Role catalog file")
@click.option("--unique", is_flag=True, help="Drop repeated permissions")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON list")
@click.pass_obj
def resolve_cmd(
    config: Config, user_file: str, catalog: str | None, unique: bool, as_json: bool
) -> None:
    """Show the effective permissions of a user."""
    user, roles = _load_inputs(config, user_file, catalog)
    permissions = list(resolve(user, roles, dedupe if unique else None))

    if as_json:
        click.echo(json.dumps(permissions))
        return

    table = Table(title=f"Permissions for {user.id or user_file}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Permission", style="cyan")
    for i, permission in enumerate(permissions, start=1):
        table.add_row(str(i), permission)

    console = Console()
    console.print(table)
    if not permissions:
        console.print("[yellow]No permissions granted[/yellow]")


@main.command()
@click.argument("user_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("permissions", nargs=-1, required=True)
@click.option("--catalog", type=click.Path(), default=None, help="Role catalog file")
@click.option(
    "--mode",
    type=click.Choice(["one", "all", "any"]),
    default="all",
    help="How the requested permissions combine",
)
@click.pass_obj
def check(
    config: Config, user_file: str, permissions: tuple[str, ...], catalog: str | None, mode: str
) -> None:
    """Check a user against one or more permissions.

    Exits 0 when allowed and 2 when denied.
    """
    if mode == "one" and len(permissions) != 1:
        click.echo("Error: --mode one takes exactly one permission.", err=True)
        sys.exit(1)

    user, roles = _load_inputs(config, user_file, catalog)
    missing: list[str] = []

    if mode == "one":
        allowed = has_one(user, permissions[0], roles)
    elif mode == "any":
        allowed = any_match(user, permissions, roles)
    else:
        missing = missing_permissions(user, permissions, roles)
        allowed = not missing

    if allowed:
        click.echo("allowed")
        return

    click.echo("denied")
    if missing:
        click.echo(f"missing: {', '.join(missing)}")
    sys.exit(2)


@main.command(name="config")
@click.option("--catalog", type=click.Path(), default=None, help="Default role catalog file")
@click.option(
    "--level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Default log level",
)
@click.pass_obj
def config_cmd(config: Config, catalog: str | None, level: str | None) -> None:
    """Show the configuration, or update and save it."""
    if catalog is None and level is None:
        click.echo(f"config_path: {config.config_path}")
        click.echo(f"log_level: {config.log_level}")
        click.echo(f"catalog_path: {config.catalog_path or ''}")
        return

    if catalog is not None:
        config.catalog_path = Path(catalog).expanduser().resolve()
    if level is not None:
        config.log_level = level.upper()
    config.save()
    click.echo(f"Saved config to {config.config_path}")


if __name__ == "__main__":
    main()
