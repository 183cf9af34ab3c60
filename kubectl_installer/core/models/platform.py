"""
Platform model — the detected distribution and CPU architecture.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Platform(BaseModel):
    """Result of OS and architecture detection."""

    distro: str                     # os-release ID (ubuntu, fedora, ...)
    distro_like: list[str] = Field(default_factory=list)
    pretty_name: str = ""
    machine: str                    # raw ``uname -m``
    arch: str                       # download architecture (amd64, arm64, arm)
    package_manager: str = ""       # apt, yum, dnf, zypper

    @property
    def label(self) -> str:
        """Human label used in success messages, e.g. ``ubuntu (amd64)``."""
        return f"{self.distro} ({self.arch})"
