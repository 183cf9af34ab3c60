"""
L5 Orchestration — The install workflow.

detect platform → validate version → install curl → resolve version →
back up current kubectl → download (+ checksum) → move into place → verify.

The workflow never prompts.  When verification fails it reports
``verify_failed`` together with the backup it made, and the caller
decides how to roll back (see ``orchestration.recovery``).
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from kubectl_installer.core.models.settings import InstallerSettings
from kubectl_installer.core.services.kubectl.detection.platform import detect_platform
from kubectl_installer.core.services.kubectl.detection.tool_version import (
    find_kubectl,
    get_kubectl_version,
)
from kubectl_installer.core.services.kubectl.domain.download_helpers import _binary_url
from kubectl_installer.core.services.kubectl.domain.version import _parse_version_arg
from kubectl_installer.core.services.kubectl.execution.backup import (
    create_backup,
    install_binary,
    verify_installation,
)
from kubectl_installer.core.services.kubectl.execution.dependencies import install_dependencies
from kubectl_installer.core.services.kubectl.execution.download import (
    download_file,
    resolve_version,
    verify_download,
)

logger = logging.getLogger(__name__)

ProgressFn = Callable[[str], None]


def install_kubectl(
    settings: InstallerSettings,
    version: str | None = None,
    *,
    skip_deps: bool = False,
    verify_checksum: bool | None = None,
    sudo_password: str = "",
    progress: ProgressFn | None = None,
    now: datetime | None = None,
    machine: str | None = None,
) -> dict[str, Any]:
    """Install ``version`` of kubectl (latest stable when None).

    Args:
        settings: Installer settings (paths, release URL, timeouts).
        version: Release tag, channel name, or None for latest stable.
        skip_deps: Skip the package-manager step.  The distribution is
            still detected and must be supported.
        verify_checksum: Override ``settings.verify_checksum``.
        sudo_password: Piped to sudo for privileged steps.
        progress: Called with a one-line message before each step.
        now: Timestamp used for the backup name (defaults to now).
        machine: Override for ``uname -m``.

    Returns:
        ``{"ok": True, "version": ..., "platform": ..., "backup_path": ...}``
        on success.  On failure ``{"ok": False, "error": ..., "stage": ...}``;
        a failed post-install check additionally carries
        ``"verify_failed": True``.
    """
    say = progress or logger.info
    check_sums = settings.verify_checksum if verify_checksum is None else verify_checksum

    # ── 1. Platform ──
    say("Detecting OS and architecture...")
    detected = detect_platform(settings.os_release_path, machine=machine)
    if not detected["ok"]:
        return {**detected, "stage": "detect"}
    platform = detected["platform"]
    say(f"Detected OS: {platform.distro}")
    say(f"Detected Architecture: {platform.arch}")

    # Malformed versions are rejected before anything touches the system
    parsed = _parse_version_arg(version)
    if not parsed["ok"]:
        return {**parsed, "stage": "version"}

    # ── 2. Dependencies ──
    if skip_deps:
        say("Skipping dependency installation.")
    else:
        say(f"Installing dependencies with {platform.package_manager}...")
        deps = install_dependencies(
            platform,
            sudo_password=sudo_password,
            timeout=settings.package_timeout,
        )
        if not deps["ok"]:
            return {**deps, "stage": "dependencies"}

    # ── 3. Version ──
    if version is None:
        say("No version provided. Fetching latest stable version...")
    resolved = resolve_version(version, release_url=settings.release_url)
    if not resolved["ok"]:
        return {**resolved, "stage": "version"}
    target_version = resolved["version"]
    if version is not None:
        say(f"Installing specified version: {target_version}")

    # ── 4. Backup ──
    backup_path: str | None = None
    previous_version: str | None = None
    current = find_kubectl(settings.binary_name)
    if current:
        previous_version = get_kubectl_version(current)
        backup = create_backup(current, settings, now=now, sudo_password=sudo_password)
        if not backup["ok"]:
            return {**backup, "stage": "backup"}
        backup_path = backup["backup_path"]
        say(
            f"Found existing kubectl ({previous_version or 'unknown'}). "
            f"Backed up to {backup_path}"
        )
    else:
        say("No existing kubectl found. Fresh install.")

    # ── 5. Download + install ──
    url = _binary_url(settings.release_url, target_version, platform.arch, settings.binary_name)
    say(f"Downloading kubectl {target_version} for {platform.arch}...")
    with tempfile.TemporaryDirectory(prefix="kubectl-installer-") as tmp:
        downloaded = Path(tmp) / settings.binary_name
        fetched = download_file(url, downloaded, timeout=settings.download_timeout)
        if not fetched["ok"]:
            return {**fetched, "stage": "download", "backup_path": backup_path}

        if check_sums:
            checked = verify_download(downloaded, url)
            if not checked["ok"]:
                return {**checked, "stage": "checksum", "backup_path": backup_path}

        placed = install_binary(downloaded, settings, sudo_password=sudo_password)
        if not placed["ok"]:
            return {**placed, "stage": "install", "backup_path": backup_path}

    # ── 6. Verify ──
    say("Verifying kubectl installation...")
    verified = verify_installation(settings.target_path)
    if not verified["ok"]:
        logger.error("kubectl %s failed verification: %s", target_version, verified["error"])
        return {
            "ok": False,
            "error": "kubectl installation failed.",
            "detail": verified["error"],
            "stage": "verify",
            "verify_failed": True,
            "version": target_version,
            "backup_path": backup_path,
        }

    return {
        "ok": True,
        "version": target_version,
        "previous_version": previous_version,
        "platform": platform.model_dump(),
        "path": settings.target_path,
        "backup_path": backup_path,
        "verify_output": verified["output"],
        "message": (
            f"kubectl {target_version} installed successfully on {platform.label}!"
        ),
    }
