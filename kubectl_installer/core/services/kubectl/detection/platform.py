"""
L3 Detection — Distribution and CPU architecture.

Read-only probes: reads os-release and ``uname -m``.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path
from typing import Any

from kubectl_installer.core.models.platform import Platform
from kubectl_installer.core.services.kubectl.domain.platform import (
    _map_arch,
    _package_manager_for,
    _parse_os_release,
)

logger = logging.getLogger(__name__)


def _read_os_release(path: str) -> dict[str, str] | None:
    """Read and parse the os-release file, or None if unreadable."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (FileNotFoundError, OSError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None
    return _parse_os_release(content)


def detect_platform(
    os_release_path: str = "/etc/os-release",
    machine: str | None = None,
) -> dict[str, Any]:
    """Detect the Linux distribution, architecture and package manager.

    Args:
        os_release_path: Location of the os-release file.
        machine: Override for ``uname -m`` (defaults to ``platform.machine()``).

    Returns:
        ``{"ok": True, "platform": Platform}`` or
        ``{"ok": False, "error": "..."}`` for an unreadable os-release,
        an unsupported architecture or an unsupported distribution.
    """
    fields = _read_os_release(os_release_path)
    if fields is None or not fields.get("ID"):
        return {"ok": False, "error": "Cannot detect OS."}

    distro = fields["ID"].lower()

    machine = machine if machine is not None else platform.machine()
    arch = _map_arch(machine)
    if arch is None:
        return {
            "ok": False,
            "error": f"Unsupported architecture: {machine}",
            "distro": distro,
        }

    pm = _package_manager_for(distro)
    if pm is None:
        return {
            "ok": False,
            "error": f"Unsupported Linux distribution: {distro}",
            "arch": arch,
        }

    detected = Platform(
        distro=distro,
        distro_like=fields.get("ID_LIKE", "").split(),
        pretty_name=fields.get("PRETTY_NAME", ""),
        machine=machine,
        arch=arch,
        package_manager=pm,
    )
    logger.info("Detected OS: %s, architecture: %s (%s)", distro, arch, machine)
    return {"ok": True, "platform": detected}
