"""
L3 Detection — Backup discovery.

Scans the backup directory for ``kubectl.backup.*`` files.  Read-only.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from kubectl_installer.core.models.backup import Backup
from kubectl_installer.core.services.kubectl.domain.backups import (
    _backup_glob,
    _parse_backup_timestamp,
    _sort_newest_first,
)

logger = logging.getLogger(__name__)


def list_backups(backup_dir: str, binary_name: str = "kubectl") -> list[Backup]:
    """List backups newest first.

    The creation time comes from the timestamp in the filename; files
    whose suffix is not a valid timestamp fall back to their mtime.

    Returns:
        Backups with ``index`` set to their position (0 = newest).
        Empty if the directory is missing or holds no backups.
    """
    directory = Path(backup_dir)
    if not directory.is_dir():
        logger.debug("Backup directory does not exist: %s", directory)
        return []

    found: list[Backup] = []
    for path in directory.glob(_backup_glob(binary_name)):
        if not path.is_file():
            continue
        try:
            stat = path.stat()
        except OSError as exc:
            logger.warning("Cannot stat backup %s: %s", path, exc)
            continue
        created = _parse_backup_timestamp(path.name, binary_name)
        if created is None:
            created = datetime.fromtimestamp(stat.st_mtime)
        found.append(Backup(path=str(path), created_at=created, size_bytes=stat.st_size))

    logger.debug("Found %d backup(s) in %s", len(found), directory)
    return _sort_newest_first(found)
