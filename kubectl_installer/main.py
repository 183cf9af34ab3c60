"""
kubectl-installer — CLI entrypoint.

Usage:
    kubectl-installer [VERSION]      Install a specific kubectl version (e.g. v1.29.3)
    kubectl-installer                Install the latest stable kubectl
    kubectl-installer rollback       Roll back interactively to a previous version
    kubectl-installer list           List available kubectl backups
    kubectl-installer status         Show platform, active kubectl and backups
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from kubectl_installer import __version__
from kubectl_installer.core.observability.logging_config import resolve_level, setup_logging


class InstallerGroup(click.Group):
    """Command group where a bare VERSION (or nothing) means ``install``.

    ``kubectl-installer v1.29.3`` is routed to ``install v1.29.3``.  Usage
    errors exit with status 1 rather than click's default 2.
    """

    default_command = "install"

    def resolve_command(
        self, ctx: click.Context, args: list[str],
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            return self.default_command, self.get_command(ctx, self.default_command), args
        return super().resolve_command(ctx, args)

    def main(self, *args, standalone_mode: bool = True, **kwargs):  # type: ignore[override]
        if not standalone_mode:
            return super().main(*args, standalone_mode=False, **kwargs)
        try:
            rv = super().main(*args, standalone_mode=False, **kwargs)
        except click.UsageError as e:
            e.show()
            sys.exit(1)
        except click.ClickException as e:
            e.show()
            sys.exit(e.exit_code)
        except click.Abort:
            click.echo("Aborted!", err=True)
            sys.exit(1)
        sys.exit(rv if isinstance(rv, int) else 0)


@click.group(cls=InstallerGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="kubectl-installer")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to config.yml (default: $KCI_CONFIG or ~/.config/kubectl-installer/config.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """kubectl-installer — install, back up and roll back kubectl."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    log_file = os.environ.get("KCI_LOG_FILE")
    try:
        setup_logging(
            level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
            log_file=log_file,
            log_file_level=os.environ.get("KCI_LOG_FILE_LEVEL"),
        )
    except OSError as e:
        click.secho(f"❌ Cannot open log file {log_file}: {e.strerror or e}", fg="red")
        sys.exit(1)

    if ctx.invoked_subcommand is None:
        ctx.invoke(install)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, as_json: bool) -> None:
    """Show platform, active kubectl and backups."""
    from kubectl_installer.core.use_cases.status import get_status
    from kubectl_installer.ui.cli.helpers import echo_backups, get_settings

    result = get_status(get_settings(ctx))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.secho("\n🧭 Platform", fg="cyan", bold=True)
    if result.platform:
        name = result.platform.pretty_name or result.platform.distro
        click.echo(f"   {name} — {result.platform.machine} → {result.platform.arch}")
        click.echo(f"   Package manager: {result.platform.package_manager}")
    else:
        click.secho(f"   ⚠️  {result.platform_error}", fg="yellow")

    click.secho("\n☸️  kubectl", fg="cyan", bold=True)
    if result.installed:
        click.echo(f"   {result.kubectl_path} ({result.kubectl_version or 'unknown'})")
    else:
        click.echo("   not installed")
    click.echo(f"   Install target: {result.target_path}")

    click.secho(f"\n📦 Backups: {len(result.backups)}", fg="cyan", bold=True)
    echo_backups(result.backups)
    click.echo()


from kubectl_installer.ui.cli.backups import list_backups_cmd, rollback_cmd  # noqa: E402
from kubectl_installer.ui.cli.install import install  # noqa: E402

cli.add_command(install)
cli.add_command(rollback_cmd)
cli.add_command(list_backups_cmd)


if __name__ == "__main__":
    cli()
