"""
L5 Orchestration — Rollback to a previous backup.

Shared by the ``rollback`` command and by the install command when a
freshly installed binary fails verification.  The choice of backup is
delegated to a selector callable so the interactive prompt can be
replaced (``--yes``, tests).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from kubectl_installer.core.models.backup import Backup
from kubectl_installer.core.models.settings import InstallerSettings
from kubectl_installer.core.services.kubectl.detection.backups import list_backups
from kubectl_installer.core.services.kubectl.domain.backups import _parse_selection
from kubectl_installer.core.services.kubectl.execution.backup import restore_backup

logger = logging.getLogger(__name__)

# Receives the newest-first backups, returns the raw user choice.
Selector = Callable[[list[Backup]], str | None]


def get_backups(settings: InstallerSettings) -> dict[str, Any]:
    """List backups newest first.

    Returns:
        ``{"ok": True, "backups": [Backup, ...]}`` or
        ``{"ok": False, "error": "No kubectl backups found."}``.
    """
    backups = list_backups(settings.backup_dir, settings.binary_name)
    if not backups:
        return {"ok": False, "error": "No kubectl backups found.", "backups": []}
    return {"ok": True, "backups": backups}


def select_backup(backups: list[Backup], choice: str | None) -> dict[str, Any]:
    """Validate ``choice`` against the listing."""
    index = _parse_selection(choice, len(backups))
    if index is None:
        return {"ok": False, "error": "Invalid choice.", "choice": choice}
    return {"ok": True, "backup": backups[index]}


def prefer_backup(path: str | None) -> Selector:
    """Non-interactive selector: pick ``path`` if listed, else the newest."""

    def _select(backups: list[Backup]) -> str:
        for backup in backups:
            if path is not None and backup.path == path:
                return str(backup.index)
        return "0"

    return _select


def rollback(
    settings: InstallerSettings,
    selector: Selector,
    *,
    sudo_password: str = "",
) -> dict[str, Any]:
    """List backups, ask ``selector`` which to use, and restore it.

    Returns:
        ``{"ok": True, "restored": "...", "path": "..."}`` or error dict.
    """
    listed = get_backups(settings)
    if not listed["ok"]:
        return listed

    backups = listed["backups"]
    chosen = select_backup(backups, selector(backups))
    if not chosen["ok"]:
        return chosen

    backup = chosen["backup"]
    logger.info("Restoring backup: %s", backup.path)
    return rollback_to(backup, settings, sudo_password=sudo_password)


def rollback_to(
    backup: Backup,
    settings: InstallerSettings,
    *,
    sudo_password: str = "",
) -> dict[str, Any]:
    """Restore a specific backup over the active binary."""
    result = restore_backup(backup, settings, sudo_password=sudo_password)
    if result["ok"]:
        result["message"] = "kubectl has been rolled back to the selected backup."
    return result
