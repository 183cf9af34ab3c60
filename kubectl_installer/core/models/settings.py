"""
Settings model — where kubectl lives and where it comes from.

Loaded from the optional config.yml (see ``core.config.loader``) with
environment overrides applied on top.  Every field has a default, so an
empty or absent config file yields a working installer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InstallerSettings(BaseModel):
    """Installer configuration."""

    model_config = ConfigDict(extra="forbid")

    install_dir: str = "/usr/local/bin"
    backup_dir: str = "/usr/local/bin"
    binary_name: str = "kubectl"
    release_url: str = "https://dl.k8s.io/release"
    os_release_path: str = "/etc/os-release"

    verify_checksum: bool = True
    download_timeout: int = Field(default=300, gt=0)
    package_timeout: int = Field(default=600, gt=0)

    @property
    def target_path(self) -> str:
        """Absolute path of the active binary."""
        return f"{self.install_dir.rstrip('/')}/{self.binary_name}"
