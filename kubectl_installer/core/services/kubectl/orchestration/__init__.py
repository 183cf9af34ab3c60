"""
L5 Orchestration — Top-level workflows (install, rollback).
"""

from kubectl_installer.core.services.kubectl.orchestration.installer import (  # noqa: F401
    install_kubectl,
)
from kubectl_installer.core.services.kubectl.orchestration.recovery import (  # noqa: F401
    get_backups,
    prefer_backup,
    rollback,
    rollback_to,
    select_backup,
)
