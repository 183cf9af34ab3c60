"""
Shared helpers for CLI commands — settings, prompts, output.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from kubectl_installer.core.models.backup import Backup
from kubectl_installer.core.models.settings import InstallerSettings
from kubectl_installer.core.services.kubectl.domain.download_helpers import _fmt_size


def get_settings(ctx: click.Context) -> InstallerSettings:
    """Load settings once per invocation (lazily, so --help never fails)."""
    from kubectl_installer.core.config.loader import ConfigError, load_settings

    root = ctx.find_root()
    root.ensure_object(dict)
    settings = root.obj.get("settings")
    if settings is None:
        config_path: Path | None = root.obj.get("config_path")
        try:
            settings = load_settings(config_path)
        except ConfigError as e:
            fail(str(e))
        root.obj["settings"] = settings
    return settings


def fail(message: str) -> None:
    """Print an error and exit 1."""
    click.secho(f"❌ {message}", fg="red")
    sys.exit(1)


def is_quiet(ctx: click.Context) -> bool:
    """Whether the global --quiet flag was given."""
    obj = ctx.find_root().obj or {}
    return bool(obj.get("quiet"))


def progress(message: str) -> None:
    click.echo(f"   {message}")


def ask_sudo_password(ask: bool) -> str:
    if not ask:
        return ""
    return click.prompt("Sudo password", hide_input=True, default="", show_default=False)


def echo_backups(backups: list[Backup]) -> None:
    """Print backups as ``[index] path`` lines, newest first."""
    for b in backups:
        stamp = b.created_at.strftime("%Y-%m-%d %H:%M:%S")
        click.echo(f"  [{b.index}] {b.path}  ({stamp}, {_fmt_size(b.size_bytes)})")


def prompt_selector(backups: list[Backup]) -> str | None:
    """Interactive selector: show the listing and read an index."""
    click.secho("Available backups:", fg="cyan", bold=True)
    echo_backups(backups)
    try:
        return click.prompt(
            "Enter the number of the backup to restore",
            default="",
            show_default=False,
        )
    except click.Abort:
        return None
