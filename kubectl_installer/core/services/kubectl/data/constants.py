"""
L0 Data — Module-level constants for the kubectl installer.

Pure data. No logic. No imports beyond stdlib.
"""

from __future__ import annotations

# ``uname -m`` → architecture segment of the dl.k8s.io download path.
# kubectl publishes a single ``arm`` build for both ARMv6 and ARMv7.
ARCH_MAP: dict[str, str] = {
    "x86_64": "amd64",
    "aarch64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
}

# Only Linux builds are fetched; detection relies on /etc/os-release.
DOWNLOAD_OS = "linux"

# os-release ID → package manager.  IDs matched by prefix live in
# DISTRO_PREFIX_PACKAGE_MANAGERS (opensuse-leap, opensuse-tumbleweed, ...).
DISTRO_PACKAGE_MANAGERS: dict[str, str] = {
    "ubuntu": "apt",
    "debian": "apt",
    "centos": "yum",
    "rhel": "yum",
    "fedora": "dnf",
    "sles": "zypper",
}

DISTRO_PREFIX_PACKAGE_MANAGERS: dict[str, str] = {
    "opensuse": "zypper",
}

# Commands that install a package, per package manager.  A manager may need
# several commands (apt refreshes its index first).  ``{pkg}`` is replaced.
PACKAGE_INSTALL_COMMANDS: dict[str, list[list[str]]] = {
    "apt": [
        ["apt-get", "update", "-y"],
        ["apt-get", "install", "-y", "{pkg}"],
    ],
    "yum": [["yum", "install", "-y", "{pkg}"]],
    "dnf": [["dnf", "install", "-y", "{pkg}"]],
    "zypper": [["zypper", "install", "-y", "{pkg}"]],
}

# Binaries the installer shells out to, and the package that provides them.
REQUIRED_PACKAGES: dict[str, str] = {
    "curl": "curl",
}

# Channel names accepted in place of an explicit version.
# ``stable-1.29`` style channels are matched by pattern in domain/version.py.
RELEASE_CHANNELS: dict[str, str] = {
    "stable": "stable",
    "latest": "stable",
}

BACKUP_SUFFIX = ".backup."
BACKUP_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

# Client-only version probe.  ``--short`` was removed in kubectl 1.28.
VERSION_COMMAND: list[str] = ["version", "--client=true"]
VERSION_PATTERN = r"v(\d+\.\d+\.\d+)"
VERIFY_COMMAND: list[str] = ["version", "--client"]
