"""
nvmg command line interface.

Usage:
    nvmg install 18.17.1
    nvmg install --lts
    nvmg ls
    nvmg ls-remote
    nvmg version-remote lts/hydrogen
    nvmg uninstall v18.17.1
    nvmg remove 18   (alias: delete)

Thin wrappers over the use cases; this module owns printing and exit codes,
the core never exits the process.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from nvmg import __version__
from nvmg.domain.exceptions import (
    DownloadError,
    ExtractError,
    NvmgConfigError,
    NvmgError,
    PlacementError,
    ReleaseIndexError,
    ResolutionError,
)
from nvmg.factories import create_installer, create_resolver, load_settings
from nvmg.usecases.version_store import VersionStore

# Exit codes per error family; checked in order, first match wins
EXIT_CODES: tuple[tuple[type[NvmgError], int], ...] = (
    (NvmgConfigError, 1),
    (ResolutionError, 2),
    (DownloadError, 3),
    (ReleaseIndexError, 3),
    (ExtractError, 4),
    (PlacementError, 5),
)
GENERIC_EXIT_CODE = 1


def exit_code_for(error: NvmgError) -> int:
    """Map an nvmg error to a process exit code."""
    for error_type, code in EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return GENERIC_EXIT_CODE


def _fail(ctx: click.Context, error: NvmgError) -> None:
    click.secho(f"Error: {error}", fg="red", err=True)
    ctx.exit(exit_code_for(error))


@click.group()
@click.version_option(version=__version__, prog_name="nvmg")
@click.option(
    "--home",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Managed root for installed versions (default: $NVMG_DIR or ~/.nvmg).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a YAML config file (default: $NVMG_CONFIG).",
)
@click.option("--verbose", "-v", is_flag=True, help="Show install progress.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(
    ctx: click.Context,
    home: Path | None,
    config_path: Path | None,
    verbose: bool,
    debug: bool,
) -> None:
    """Node Version Manager: install and manage Node.js releases."""
    ctx.ensure_object(dict)

    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        ctx.obj["settings"] = load_settings(
            os.environ, config_path=config_path, home_override=home
        )
    except NvmgError as e:
        _fail(ctx, e)


@cli.command()
@click.argument("version", required=False)
@click.option("--lts", is_flag=True, help="Install the newest long-term support release.")
@click.pass_context
def install(ctx: click.Context, version: str | None, lts: bool) -> None:
    """Download and install a Node.js VERSION."""
    if lts and version:
        raise click.UsageError("Give either a VERSION or --lts, not both.")
    if not lts and not version:
        raise click.UsageError("Missing VERSION (or use --lts).")
    specifier = "lts/*" if lts else str(version)

    settings = ctx.obj["settings"]
    factory = ctx.obj.get("installer_factory", create_installer)
    installer = factory(settings)

    click.echo(f"Installing {specifier} for {installer.target} into {settings.home}")
    try:
        result = installer.install(specifier, settings.home)
    except NvmgError as e:
        _fail(ctx, e)
        return

    click.secho(f"Installed {result.version}", fg="green")
    click.echo(f"  From: {result.descriptor.url}")
    click.echo(f"  Location: {result.destination}")


@cli.command()
@click.argument("version")
@click.pass_context
def uninstall(ctx: click.Context, version: str) -> None:
    """Remove an installed Node.js VERSION."""
    settings = ctx.obj["settings"]
    factory = ctx.obj.get("resolver_factory", create_resolver)
    store = VersionStore(settings.home)
    try:
        resolved = factory(settings).resolve(version)
        removed = store.uninstall(resolved)
    except NvmgError as e:
        _fail(ctx, e)
        return
    click.echo(f"Uninstalled {resolved} from {removed}")


# Aliases for uninstall
cli.add_command(uninstall, name="remove")
cli.add_command(uninstall, name="delete")


@cli.command(name="ls")
@click.pass_context
def list_installed(ctx: click.Context) -> None:
    """List installed versions."""
    store = VersionStore(ctx.obj["settings"].home)
    versions = store.installed()
    if not versions:
        click.echo("No versions installed.")
        return
    for version in versions:
        click.echo(str(version))


@cli.command(name="ls-remote")
@click.pass_context
def list_remote(ctx: click.Context) -> None:
    """List versions available for install."""
    settings = ctx.obj["settings"]
    factory = ctx.obj.get("resolver_factory", create_resolver)
    try:
        versions = factory(settings).remote_versions()
    except NvmgError as e:
        _fail(ctx, e)
        return

    store = VersionStore(settings.home)
    for version in versions:
        marker = " *" if store.is_installed(version) else ""
        click.echo(f"{version}{marker}")


@cli.command(name="version-remote")
@click.argument("version")
@click.pass_context
def version_remote(ctx: click.Context, version: str) -> None:
    """Resolve VERSION to a single remote version."""
    factory = ctx.obj.get("resolver_factory", create_resolver)
    try:
        resolved = factory(ctx.obj["settings"]).resolve(version)
    except NvmgError as e:
        _fail(ctx, e)
        return
    click.echo(str(resolved))


def main() -> None:
    """Console script entry point."""
    cli(obj={})
