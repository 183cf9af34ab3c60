"""
L1 Domain — Version argument handling (pure).

Turns the user's VERSION argument into either a concrete release tag
or a release channel that must be looked up.
No I/O, no subprocess.
"""

from __future__ import annotations

import re

from kubectl_installer.core.services.kubectl.data.constants import RELEASE_CHANNELS

# v1.29.3, 1.29.3, v1.30.0-rc.1, v1.31.0-alpha.2+abc
_VERSION_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)(-[0-9A-Za-z.-]+)?(\+[0-9A-Za-z.-]+)?$")
_CHANNEL_RE = re.compile(r"^(stable|latest)-(\d+)(?:\.(\d+))?$")


def _parse_version_arg(value: str | None) -> dict:
    """Classify a VERSION argument.

    Returns one of::

        {"ok": True, "channel": "stable"}            # no argument / stable / latest
        {"ok": True, "channel": "stable-1.29"}       # minor-pinned channel
        {"ok": True, "version": "v1.29.3"}           # concrete tag
        {"ok": False, "error": "..."}
    """
    if value is None or not value.strip():
        return {"ok": True, "channel": "stable"}

    value = value.strip()

    if value in RELEASE_CHANNELS:
        return {"ok": True, "channel": RELEASE_CHANNELS[value]}

    m = _CHANNEL_RE.match(value)
    if m:
        kind, major, minor = m.groups()
        suffix = f"{major}.{minor}" if minor is not None else major
        return {"ok": True, "channel": f"{kind}-{suffix}"}

    if _VERSION_RE.match(value):
        return {"ok": True, "version": value if value.startswith("v") else f"v{value}"}

    return {
        "ok": False,
        "error": (
            f"Invalid kubectl version: {value!r}. "
            "Expected a release tag like v1.29.3, or stable / stable-1.29."
        ),
    }


def _is_release_tag(text: str) -> bool:
    """Whether ``text`` looks like a kubectl release tag (``v1.29.3``)."""
    return bool(text.startswith("v") and _VERSION_RE.match(text))
