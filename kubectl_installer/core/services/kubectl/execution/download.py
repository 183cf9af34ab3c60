"""
L4 Execution — Release lookup, binary download and checksum verification.

All network access goes through curl (installed by ``install_dependencies``).
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Any

from kubectl_installer.core.services.kubectl.domain.download_helpers import (
    _channel_url,
    _checksum_url,
    _fmt_size,
)
from kubectl_installer.core.services.kubectl.domain.version import (
    _is_release_tag,
    _parse_version_arg,
)
from kubectl_installer.core.services.kubectl.execution.subprocess_runner import _run_subprocess

logger = logging.getLogger(__name__)

_CURL = ["curl", "-fsSL", "--retry", "2"]


def _fetch_text(url: str, *, timeout: int = 30) -> dict[str, Any]:
    """GET ``url`` and return its body stripped of whitespace."""
    result = _run_subprocess([*_CURL, url], timeout=timeout)
    if not result["ok"]:
        return {"ok": False, "error": f"Failed to fetch {url}: {result['error']}"}
    return {"ok": True, "text": result["stdout"].strip()}


def resolve_version(
    version_arg: str | None,
    *,
    release_url: str,
    timeout: int = 30,
) -> dict[str, Any]:
    """Resolve the VERSION argument to a concrete release tag.

    No argument (or ``stable``/``latest``) → ``<release_url>/stable.txt``;
    ``stable-1.29`` → ``<release_url>/stable-1.29.txt``; a tag is used as-is.

    Returns:
        ``{"ok": True, "version": "v1.29.3", "source": "argument"|"channel"}``
        or error dict.
    """
    parsed = _parse_version_arg(version_arg)
    if not parsed["ok"]:
        return parsed

    if "version" in parsed:
        return {"ok": True, "version": parsed["version"], "source": "argument"}

    channel = parsed["channel"]
    fetched = _fetch_text(_channel_url(release_url, channel), timeout=timeout)
    if not fetched["ok"]:
        return fetched

    version = fetched["text"]
    if not _is_release_tag(version):
        return {
            "ok": False,
            "error": f"Unexpected response for release channel '{channel}': {version[:80]!r}",
        }
    logger.info("Release channel %s → %s", channel, version)
    return {"ok": True, "version": version, "source": "channel", "channel": channel}


def download_file(url: str, dest: Path, *, timeout: int = 300) -> dict[str, Any]:
    """Download ``url`` to ``dest`` (following redirects)."""
    result = _run_subprocess([*_CURL, "-o", str(dest), url], timeout=timeout)
    if not result["ok"]:
        return {"ok": False, "error": f"Download failed for {url}: {result['error']}"}
    size = dest.stat().st_size if dest.exists() else 0
    logger.info("Downloaded %s (%s)", url, _fmt_size(size))
    return {"ok": True, "path": str(dest), "size_bytes": size}


def _verify_checksum(path: Path, expected_sha256: str) -> bool:
    """Whether the SHA-256 of ``path`` equals the hex digest ``expected_sha256``."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest() == expected_sha256.strip().lower()


def verify_download(path: Path, binary_url: str, *, timeout: int = 30) -> dict[str, Any]:
    """Check ``path`` against the SHA-256 published next to ``binary_url``.

    The ``.sha256`` file holds the bare hex digest, optionally followed by
    a filename.
    """
    fetched = _fetch_text(_checksum_url(binary_url), timeout=timeout)
    if not fetched["ok"]:
        return fetched

    parts = fetched["text"].split()
    if not parts:
        return {"ok": False, "error": f"Empty checksum file for {binary_url}"}

    digest = parts[0]
    if not _verify_checksum(path, digest):
        return {"ok": False, "error": f"Checksum mismatch for {binary_url}"}
    logger.info("Checksum OK (sha256:%s…)", digest[:12])
    return {"ok": True, "sha256": digest}
