"""
Backup model — a timestamped copy of a previously installed kubectl.

Backups live beside the active binary as ``kubectl.backup.<YYYYmmddHHMMSS>``.
They are created by install, read by rollback and list, and never deleted
by the installer.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class Backup(BaseModel):
    """One backup file on disk."""

    index: int = 0                  # position in the newest-first listing
    path: str
    created_at: datetime
    size_bytes: int = 0

    @property
    def filename(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "path": self.path,
            "filename": self.filename,
            "created_at": self.created_at.isoformat(),
            "size_bytes": self.size_bytes,
        }
