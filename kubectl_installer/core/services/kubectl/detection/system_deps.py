"""
L3 Detection — System dependency checking.

Read-only probes for package/binary availability.
Uses subprocess for package manager queries.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)


def _is_pkg_installed(pkg: str, pkg_manager: str) -> bool:
    """Check if a single system package is installed.

    Uses the appropriate checker for the given package manager:
      apt    → dpkg-query -W -f='${Status}' PKG
      yum    → rpm -q PKG
      dnf    → rpm -q PKG
      zypper → rpm -q PKG

    Returns:
        True if installed, False if not installed or the check failed.
    """
    try:
        if pkg_manager == "apt":
            r = subprocess.run(
                ["dpkg-query", "-W", "-f=${Status}", pkg],
                capture_output=True, text=True, timeout=10,
            )
            return "install ok installed" in r.stdout

        if pkg_manager in ("dnf", "yum", "zypper"):
            r = subprocess.run(
                ["rpm", "-q", pkg],
                capture_output=True, timeout=10,
            )
            return r.returncode == 0

    except FileNotFoundError:
        logger.warning(
            "Package checker not found for pm=%s (checking %s)",
            pkg_manager, pkg,
        )
    except subprocess.TimeoutExpired:
        logger.warning("Timeout checking package %s with pm=%s", pkg, pkg_manager)
    except OSError as exc:
        logger.warning("OS error checking package %s with pm=%s: %s", pkg, pkg_manager, exc)

    return False


def check_system_deps(
    binaries: dict[str, str],
    pkg_manager: str,
) -> dict[str, list[str]]:
    """Check which required packages still need installing.

    A package counts as present when its binary is already on PATH
    or the package manager reports it installed.

    Args:
        binaries: ``{binary: package}`` mapping, e.g. ``{"curl": "curl"}``.
        pkg_manager: apt, yum, dnf or zypper.

    Returns:
        ``{"missing": ["pkg1", ...], "installed": ["pkg2", ...]}``
    """
    missing: list[str] = []
    installed: list[str] = []
    for binary, pkg in binaries.items():
        if shutil.which(binary) or _is_pkg_installed(pkg, pkg_manager):
            installed.append(pkg)
        else:
            missing.append(pkg)
    return {"missing": missing, "installed": installed}
