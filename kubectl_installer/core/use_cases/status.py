"""
Status use case — platform, active kubectl and backups in one view.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kubectl_installer.core.models.backup import Backup
from kubectl_installer.core.models.platform import Platform
from kubectl_installer.core.models.settings import InstallerSettings
from kubectl_installer.core.services.kubectl.detection.backups import list_backups
from kubectl_installer.core.services.kubectl.detection.platform import detect_platform
from kubectl_installer.core.services.kubectl.detection.tool_version import (
    find_kubectl,
    get_kubectl_version,
)


@dataclass
class StatusResult:
    """What is installed and what could be restored."""

    platform: Platform | None = None
    platform_error: str | None = None
    kubectl_path: str | None = None
    kubectl_version: str | None = None
    target_path: str = ""
    backup_dir: str = ""
    backups: list[Backup] = field(default_factory=list)

    @property
    def installed(self) -> bool:
        return self.kubectl_path is not None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "platform": self.platform.model_dump() if self.platform else None,
            "platform_error": self.platform_error,
            "kubectl": {
                "installed": self.installed,
                "path": self.kubectl_path,
                "version": self.kubectl_version,
                "target_path": self.target_path,
            },
            "backups": {
                "dir": self.backup_dir,
                "total": len(self.backups),
                "items": [b.to_dict() for b in self.backups],
            },
        }


def get_status(settings: InstallerSettings, machine: str | None = None) -> StatusResult:
    """Collect installer status.  Read-only and never fatal."""
    result = StatusResult(target_path=settings.target_path, backup_dir=settings.backup_dir)

    detected = detect_platform(settings.os_release_path, machine=machine)
    if detected["ok"]:
        result.platform = detected["platform"]
    else:
        result.platform_error = detected["error"]

    result.kubectl_path = find_kubectl(settings.binary_name)
    if result.kubectl_path:
        result.kubectl_version = get_kubectl_version(result.kubectl_path)

    result.backups = list_backups(settings.backup_dir, settings.binary_name)
    return result
