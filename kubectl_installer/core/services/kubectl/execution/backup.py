"""
L4 Execution — Backup, install and restore of the kubectl binary.

Creates timestamped backups before an install overwrites kubectl,
moves freshly downloaded binaries into place, and copies a chosen
backup back over the active binary.  Backups are never removed.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from kubectl_installer.core.models.backup import Backup
from kubectl_installer.core.models.settings import InstallerSettings
from kubectl_installer.core.services.kubectl.data.constants import VERIFY_COMMAND
from kubectl_installer.core.services.kubectl.domain.backups import _backup_filename
from kubectl_installer.core.services.kubectl.execution.subprocess_runner import (
    _needs_sudo,
    _run_subprocess,
)

logger = logging.getLogger(__name__)


def _ensure_dir(directory: str, *, sudo_password: str = "") -> dict[str, Any]:
    if Path(directory).is_dir():
        return {"ok": True}
    return _run_subprocess(
        ["mkdir", "-p", directory],
        needs_sudo=_needs_sudo(directory),
        sudo_password=sudo_password,
        timeout=15,
    )


def create_backup(
    source: str,
    settings: InstallerSettings,
    *,
    now: datetime | None = None,
    sudo_password: str = "",
) -> dict[str, Any]:
    """Copy the current kubectl to ``<backup_dir>/kubectl.backup.<ts>``.

    Uses ``cp -p`` so the backup keeps the original mode and mtime.  An
    existing backup is never overwritten: a same-second name gets a
    ``.1``, ``.2``, ... suffix.

    Returns:
        ``{"ok": True, "backup_path": "..."}`` or error dict.
    """
    prepared = _ensure_dir(settings.backup_dir, sudo_password=sudo_password)
    if not prepared["ok"]:
        return {"ok": False, "error": f"Cannot create backup directory: {prepared['error']}"}

    when = now or datetime.now()
    seq = 0
    target = Path(settings.backup_dir) / _backup_filename(settings.binary_name, when)
    while target.exists():
        seq += 1
        target = Path(settings.backup_dir) / _backup_filename(settings.binary_name, when, seq)
    dest = str(target)

    result = _run_subprocess(
        ["cp", "-p", source, dest],
        needs_sudo=_needs_sudo(settings.backup_dir),
        sudo_password=sudo_password,
        timeout=30,
    )
    if not result["ok"]:
        return {"ok": False, "error": f"Backup of {source} failed: {result['error']}"}

    logger.info("Backed up %s → %s", source, dest)
    return {"ok": True, "backup_path": dest}


def install_binary(
    downloaded: Path,
    settings: InstallerSettings,
    *,
    sudo_password: str = "",
) -> dict[str, Any]:
    """Make ``downloaded`` executable and move it to the active binary path."""
    try:
        downloaded.chmod(0o755)
    except OSError as exc:
        return {"ok": False, "error": f"Cannot chmod {downloaded}: {exc}"}

    prepared = _ensure_dir(settings.install_dir, sudo_password=sudo_password)
    if not prepared["ok"]:
        return {"ok": False, "error": f"Cannot create install directory: {prepared['error']}"}

    target = settings.target_path
    result = _run_subprocess(
        ["mv", "-f", str(downloaded), target],
        needs_sudo=_needs_sudo(settings.install_dir),
        sudo_password=sudo_password,
        timeout=30,
    )
    if not result["ok"]:
        return {"ok": False, "error": f"Cannot install {target}: {result['error']}"}

    logger.info("Installed %s", target)
    return {"ok": True, "path": target}


def restore_backup(
    backup: Backup,
    settings: InstallerSettings,
    *,
    sudo_password: str = "",
) -> dict[str, Any]:
    """Copy ``backup`` over the active binary and mark it executable.

    The backup file itself is left in place.
    """
    target = settings.target_path
    needs_sudo = _needs_sudo(settings.install_dir)

    for cmd in (["cp", "-p", backup.path, target], ["chmod", "+x", target]):
        result = _run_subprocess(
            cmd,
            needs_sudo=needs_sudo,
            sudo_password=sudo_password,
            timeout=30,
        )
        if not result["ok"]:
            return {"ok": False, "error": f"Restore of {backup.path} failed: {result['error']}"}

    logger.info("Restored %s → %s", backup.path, target)
    return {"ok": True, "restored": backup.path, "path": target}


def verify_installation(binary: str) -> dict[str, Any]:
    """Run ``kubectl version --client`` against the installed binary."""
    result = _run_subprocess([binary, *VERIFY_COMMAND], timeout=30)
    if not result["ok"]:
        return {
            "ok": False,
            "error": f"Verification failed: {result['error']}",
            "stderr": result.get("stderr", ""),
        }
    return {"ok": True, "output": result["stdout"].strip()}
