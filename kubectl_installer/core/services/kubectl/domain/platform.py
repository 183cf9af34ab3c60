"""
L1 Domain — Platform resolution (pure).

Parses os-release content and maps machine/distro names to the
download architecture and the package manager.
No I/O, no subprocess.
"""

from __future__ import annotations

import shlex

from kubectl_installer.core.services.kubectl.data.constants import (
    ARCH_MAP,
    DISTRO_PACKAGE_MANAGERS,
    DISTRO_PREFIX_PACKAGE_MANAGERS,
)


def _parse_os_release(content: str) -> dict[str, str]:
    """Parse ``/etc/os-release`` text into a ``KEY -> value`` dict.

    Values follow shell quoting rules, so ``ID="rhel"`` and ``ID=rhel``
    both yield ``rhel``.  Comments and malformed lines are skipped.
    """
    fields: dict[str, str] = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, raw = line.split("=", 1)
        try:
            parts = shlex.split(raw)
        except ValueError:
            parts = [raw.strip().strip("\"'")]
        fields[key.strip()] = parts[0] if parts else ""
    return fields


def _map_arch(machine: str) -> str | None:
    """Map ``uname -m`` output to a download architecture, or None."""
    return ARCH_MAP.get(machine)


def _package_manager_for(distro: str) -> str | None:
    """Return the package manager for an os-release ``ID``, or None.

    >>> _package_manager_for("opensuse-leap")
    'zypper'
    """
    distro = distro.lower()
    pm = DISTRO_PACKAGE_MANAGERS.get(distro)
    if pm:
        return pm
    for prefix, prefix_pm in DISTRO_PREFIX_PACKAGE_MANAGERS.items():
        if distro.startswith(prefix):
            return prefix_pm
    return None
