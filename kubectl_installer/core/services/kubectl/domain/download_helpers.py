"""
L1 Domain — Download URL building and size formatting (pure).

No I/O, no subprocess.

Note: checksum verification is NOT here — it reads files.
It lives in L4 (execution/download.py).
"""

from __future__ import annotations

from kubectl_installer.core.services.kubectl.data.constants import DOWNLOAD_OS


def _channel_url(release_url: str, channel: str) -> str:
    """URL of the text file naming the current release of ``channel``."""
    return f"{release_url.rstrip('/')}/{channel}.txt"


def _binary_url(release_url: str, version: str, arch: str, binary_name: str = "kubectl") -> str:
    """URL of the kubectl binary for ``version`` and ``arch``."""
    return f"{release_url.rstrip('/')}/{version}/bin/{DOWNLOAD_OS}/{arch}/{binary_name}"


def _checksum_url(binary_url: str) -> str:
    """URL of the published SHA-256 for a binary URL."""
    return f"{binary_url}.sha256"


def _fmt_size(n: int | float) -> str:
    """Format byte count to human-readable string."""
    for unit in ("B", "KB", "MB", "GB"):
        if n < 1024:
            return f"{n:.1f} {unit}"
        n /= 1024
    return f"{n:.1f} TB"
