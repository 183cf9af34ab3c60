"""
CLI command for installing kubectl.

Thin wrapper over ``kubectl_installer.core.services.kubectl``.
"""

from __future__ import annotations

import json
import sys

import click

from kubectl_installer.ui.cli.helpers import (
    ask_sudo_password,
    fail,
    get_settings,
    is_quiet,
    progress,
    prompt_selector,
)


@click.command()
@click.argument("version", required=False)
@click.option("--yes", "-y", "assume_yes", is_flag=True,
              help="On a failed install, restore this run's backup without asking.")
@click.option("--skip-deps", is_flag=True, help="Do not install curl via the package manager.")
@click.option("--no-checksum", is_flag=True, help="Skip SHA-256 verification of the download.")
@click.option("--ask-password", is_flag=True, help="Prompt for the sudo password up front.")
@click.option("--json-output", "--json", "as_json", is_flag=True,
              help="Output as JSON (a failed install rolls back without asking).")
@click.pass_context
def install(
    ctx: click.Context,
    version: str | None,
    assume_yes: bool,
    skip_deps: bool,
    no_checksum: bool,
    ask_password: bool,
    as_json: bool,
) -> None:
    """Install kubectl VERSION (default: latest stable).

    VERSION is a release tag such as v1.29.3, or a channel:
    stable, latest, stable-1.29.

    Examples:

        kubectl-installer install

        kubectl-installer install v1.29.3 --yes
    """
    from kubectl_installer.core.services.kubectl import install_kubectl, prefer_backup, rollback

    settings = get_settings(ctx)
    quiet = is_quiet(ctx)
    sudo_password = ask_sudo_password(ask_password)

    result = install_kubectl(
        settings,
        version,
        skip_deps=skip_deps,
        verify_checksum=False if no_checksum else None,
        sudo_password=sudo_password,
        progress=None if as_json or quiet else progress,
    )

    if as_json:
        if result.get("verify_failed"):
            result["rollback"] = rollback(
                settings,
                prefer_backup(result.get("backup_path")),
                sudo_password=sudo_password,
            )
        click.echo(json.dumps(result, indent=2, default=str))
        if not result["ok"]:
            sys.exit(1)
        return

    if result["ok"]:
        click.secho(f"✅ {result['message']}", fg="green", bold=True)
        if result.get("backup_path") and not quiet:
            click.echo(f"   Previous binary kept at {result['backup_path']}")
        return

    if not result.get("verify_failed"):
        fail(result["error"])

    # ── Verification failed: roll back ──
    click.secho("❌ kubectl installation failed. Rolling back...", fg="red")
    if result.get("detail"):
        click.echo(f"   {result['detail']}")

    selector = prefer_backup(result.get("backup_path")) if assume_yes else prompt_selector
    restored = rollback(settings, selector, sudo_password=sudo_password)
    if not restored["ok"]:
        fail(restored["error"])

    click.secho(f"↩️  Restored {restored['restored']}", fg="yellow")
    sys.exit(1)
