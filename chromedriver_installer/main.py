"""
chromedriver-installer — CLI entrypoint.

Usage:
    chromedriver-installer --help
    chromedriver-installer install /tmp/chromedriver
    chromedriver-installer resolve --json
    chromedriver-installer path /tmp/chromedriver
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from chromedriver_installer import __version__
from chromedriver_installer.core.config.loader import ConfigError, load_settings
from chromedriver_installer.core.models.platform import PlatformDescriptor
from chromedriver_installer.core.models.settings import InstallerSettings
from chromedriver_installer.core.observability.logging_config import setup_logging
from chromedriver_installer.core.services.driver_install import (
    InstallerError,
    detect_platform,
    ensure_installed,
    install_and_register,
    installed_binary,
    resolve_archive,
)
from chromedriver_installer.core.services.driver_install.domain.download_helpers import (
    build_download_url,
)


@click.group()
@click.version_option(version=__version__, prog_name="chromedriver-installer")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--progress/--no-progress",
    default=None,
    help="Show download progress (default: with --verbose or --debug).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to chromedriver.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    progress: bool | None,
    config_path: str | None,
) -> None:
    """ChromeDriver installer — download and unpack the pinned driver."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("CDI_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("CDI_LOG_FILE"),
        log_file_level=os.environ.get("CDI_LOG_FILE_LEVEL"),
        show_progress=progress,
    )


def _settings(ctx: click.Context) -> InstallerSettings:
    try:
        return load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("root", type=click.Path(file_okay=False))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--register/--no-register",
    default=False,
    help="Also record the path in the process-wide driver registry.",
)
@click.pass_context
def install(ctx: click.Context, root: str, as_json: bool, register: bool) -> None:
    """Install ChromeDriver into ROOT unless it is already there."""
    settings = _settings(ctx)
    platform = detect_platform()

    installer = install_and_register if register else ensure_installed
    try:
        path = installer(root, platform=platform, settings=settings)
    except (InstallerError, OSError) as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        archive = resolve_archive(platform)
        click.echo(json.dumps({
            "path": path,
            "archive": archive.archive_name,
            "version": settings.version,
        }, indent=2))
        return

    if not ctx.obj.get("quiet"):
        click.secho("✅ ChromeDriver ready", fg="green", err=True)
    click.echo(path)


@cli.command()
@click.option("--os-name", default=None, help="Override the detected OS name.")
@click.option("--data-model", default=None, help="Override the pointer width (32/64).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(
    ctx: click.Context,
    os_name: str | None,
    data_model: str | None,
    as_json: bool,
) -> None:
    """Show which archive would be downloaded for this platform."""
    settings = _settings(ctx)
    host = detect_platform()
    platform = PlatformDescriptor(
        os_name=os_name if os_name is not None else host.os_name,
        data_model=data_model if data_model is not None else host.data_model,
    )

    try:
        archive = resolve_archive(platform)
    except InstallerError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    url = build_download_url(settings.base_url, settings.version, archive.archive_name)

    if as_json:
        click.echo(json.dumps({**archive.to_dict(), "url": url}, indent=2))
        return

    click.echo(f"Archive: {archive.archive_name} ({archive.archive_format.value})")
    click.echo(f"Binary:  {archive.binary_name}")
    click.echo(f"URL:     {url}")


@cli.command()
@click.argument("root", type=click.Path(file_okay=False))
def path(root: str) -> None:
    """Print the installed binary path, or exit 1 if it is missing."""
    try:
        found = installed_binary(root)
    except InstallerError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if found is None:
        click.secho(f"ChromeDriver not installed in {root}", fg="yellow", err=True)
        sys.exit(1)
    click.echo(found)


if __name__ == "__main__":
    cli()
