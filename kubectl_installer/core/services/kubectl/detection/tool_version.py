"""
L3 Detection — Installed kubectl lookup.

Read-only probes: PATH lookup and ``kubectl version --client`` parsing.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess

from kubectl_installer.core.services.kubectl.data.constants import (
    VERSION_COMMAND,
    VERSION_PATTERN,
)

logger = logging.getLogger(__name__)


def find_kubectl(binary_name: str = "kubectl") -> str | None:
    """Return the path of the kubectl found on PATH, or None."""
    return shutil.which(binary_name)


def get_kubectl_version(binary: str) -> str | None:
    """Get the client version of the kubectl at ``binary``.

    Returns:
        Version tag (e.g. ``"v1.29.3"``) or ``None`` if the binary is
        missing, fails, or prints nothing recognisable.
    """
    try:
        result = subprocess.run(
            [binary, *VERSION_COMMAND],
            capture_output=True, text=True, timeout=10,
        )
    except (subprocess.TimeoutExpired, OSError) as exc:
        logger.debug("Version probe failed for %s: %s", binary, exc)
        return None

    output = (result.stdout or "") + (result.stderr or "")
    match = re.search(VERSION_PATTERN, output)
    if match:
        return f"v{match.group(1)}"
    return None
