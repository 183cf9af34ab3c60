"""
Domain models — Pydantic types for the installer.

All models are re-exported here for convenient access:

    from kubectl_installer.core.models import Backup, InstallerSettings, Platform
"""

from kubectl_installer.core.models.backup import Backup
from kubectl_installer.core.models.platform import Platform
from kubectl_installer.core.models.settings import InstallerSettings

__all__ = [
    "Backup",
    "InstallerSettings",
    "Platform",
]
