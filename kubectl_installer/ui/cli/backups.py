"""
CLI commands for kubectl backups — list and rollback.

Thin wrappers over ``kubectl_installer.core.services.kubectl``.
"""

from __future__ import annotations

import json
import sys

import click

from kubectl_installer.ui.cli.helpers import (
    ask_sudo_password,
    echo_backups,
    fail,
    get_settings,
    prompt_selector,
)


@click.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_backups_cmd(ctx: click.Context, as_json: bool) -> None:
    """List kubectl backups, newest first."""
    from kubectl_installer.core.services.kubectl import get_backups

    settings = get_settings(ctx)
    result = get_backups(settings)

    if as_json:
        click.echo(json.dumps(
            {
                "backup_dir": settings.backup_dir,
                "backups": [b.to_dict() for b in result["backups"]],
                **({"error": result["error"]} if not result["ok"] else {}),
            },
            indent=2,
        ))
        if not result["ok"]:
            sys.exit(1)
        return

    if not result["ok"]:
        fail(result["error"])

    backups = result["backups"]
    click.secho(
        f"📦 kubectl backups in {settings.backup_dir} ({len(backups)}):",
        fg="cyan", bold=True,
    )
    echo_backups(backups)


@click.command("rollback")
@click.option("--index", "-i", "index", default=None,
              help="Backup index to restore (skips the prompt).")
@click.option("--ask-password", is_flag=True, help="Prompt for the sudo password up front.")
@click.pass_context
def rollback_cmd(ctx: click.Context, index: str | None, ask_password: bool) -> None:
    """Roll kubectl back to a previous backup (interactive)."""
    from kubectl_installer.core.services.kubectl import rollback

    settings = get_settings(ctx)
    sudo_password = ask_sudo_password(ask_password)

    selector = prompt_selector if index is None else (lambda _backups: index)
    result = rollback(settings, selector, sudo_password=sudo_password)

    if not result["ok"]:
        fail(result["error"])

    click.echo(f"   Restored backup: {result['restored']}")
    click.secho(f"✅ {result['message']}", fg="green", bold=True)
