"""
L4 Execution — Dependency installation via the native package manager.
"""

from __future__ import annotations

import logging
from typing import Any

from kubectl_installer.core.models.platform import Platform
from kubectl_installer.core.services.kubectl.data.constants import (
    PACKAGE_INSTALL_COMMANDS,
    REQUIRED_PACKAGES,
)
from kubectl_installer.core.services.kubectl.detection.system_deps import check_system_deps
from kubectl_installer.core.services.kubectl.execution.subprocess_runner import _run_subprocess

logger = logging.getLogger(__name__)


def _install_commands(pkg_manager: str, packages: list[str]) -> list[list[str]]:
    """Expand the package manager's command templates for ``packages``."""
    templates = PACKAGE_INSTALL_COMMANDS.get(pkg_manager, [])
    commands: list[list[str]] = []
    for template in templates:
        if "{pkg}" in template:
            idx = template.index("{pkg}")
            commands.append(template[:idx] + packages + template[idx + 1:])
        else:
            commands.append(list(template))
    return commands


def install_dependencies(
    platform: Platform,
    *,
    sudo_password: str = "",
    timeout: int = 600,
) -> dict[str, Any]:
    """Install the packages the installer shells out to (curl).

    Packages that are already present are not reinstalled.

    Returns:
        ``{"ok": True, "installed": [...], "already_present": [...]}``
        or ``{"ok": False, "error": "..."}``.
    """
    pm = platform.package_manager
    if pm not in PACKAGE_INSTALL_COMMANDS:
        return {"ok": False, "error": f"Unsupported Linux distribution: {platform.distro}"}

    status = check_system_deps(REQUIRED_PACKAGES, pm)
    missing = status["missing"]
    if not missing:
        logger.info("Dependencies already present: %s", ", ".join(status["installed"]))
        return {"ok": True, "installed": [], "already_present": status["installed"]}

    for cmd in _install_commands(pm, missing):
        logger.info("Installing dependencies: %s", " ".join(cmd))
        result = _run_subprocess(
            cmd,
            needs_sudo=True,
            sudo_password=sudo_password,
            timeout=timeout,
        )
        if not result["ok"]:
            return {
                "ok": False,
                "error": f"Failed to install {', '.join(missing)} with {pm}: {result['error']}",
                "stderr": result.get("stderr", ""),
            }

    return {"ok": True, "installed": missing, "already_present": status["installed"]}
