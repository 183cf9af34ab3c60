"""
L1 Domain — Backup naming, ordering and selection (pure).

Backups are named ``<binary>.backup.<YYYYmmddHHMMSS>[.N]``; ``.N`` only
appears when several backups are made within the same second.  Listings are
newest first; the index shown to the user is the position in that list.
No I/O, no subprocess.
"""

from __future__ import annotations

from datetime import datetime

from kubectl_installer.core.models.backup import Backup
from kubectl_installer.core.services.kubectl.data.constants import (
    BACKUP_SUFFIX,
    BACKUP_TIMESTAMP_FORMAT,
)


def _backup_filename(binary_name: str, when: datetime, seq: int = 0) -> str:
    """Build the backup filename for an install happening at ``when``.

    ``seq`` > 0 appends ``.<seq>`` so a second backup taken in the same
    second does not overwrite the first.
    """
    name = f"{binary_name}{BACKUP_SUFFIX}{when.strftime(BACKUP_TIMESTAMP_FORMAT)}"
    return f"{name}.{seq}" if seq else name


def _backup_glob(binary_name: str) -> str:
    """Glob pattern matching every backup of ``binary_name``."""
    return f"{binary_name}{BACKUP_SUFFIX}*"


def _parse_backup_timestamp(filename: str, binary_name: str) -> datetime | None:
    """Extract the creation time embedded in a backup filename.

    Returns None when the name is not a backup of ``binary_name`` or the
    suffix is not a valid timestamp.
    """
    prefix = f"{binary_name}{BACKUP_SUFFIX}"
    if not filename.startswith(prefix):
        return None
    stamp, _, seq = filename[len(prefix):].partition(".")
    if seq and not seq.isdigit():
        return None
    try:
        return datetime.strptime(stamp, BACKUP_TIMESTAMP_FORMAT)
    except ValueError:
        return None


def _backup_sequence(filename: str) -> int:
    """Same-second sequence number of a backup filename (0 when absent)."""
    _, _, seq = filename.rpartition(BACKUP_SUFFIX)[2].partition(".")
    return int(seq) if seq.isdigit() else 0


def _sort_newest_first(backups: list[Backup]) -> list[Backup]:
    """Order backups newest first and renumber their indexes.

    Ties on ``created_at`` are broken by the same-second sequence number
    and then by path (descending) so the listing is stable across runs.
    """
    ordered = sorted(
        backups,
        key=lambda b: (b.created_at, _backup_sequence(b.filename), b.path),
        reverse=True,
    )
    return [b.model_copy(update={"index": i}) for i, b in enumerate(ordered)]


def _parse_selection(choice: str | None, count: int) -> int | None:
    """Validate the user's backup choice.

    Accepts only a non-negative integer written with digits and strictly
    less than ``count``.

    Returns:
        The selected index, or None if the choice is invalid.
    """
    if choice is None:
        return None
    choice = choice.strip()
    if not choice.isdigit() or not choice.isascii():
        return None
    index = int(choice)
    if index >= count:
        return None
    return index
