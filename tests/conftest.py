"""
Shared test fixtures and configuration.
"""

import os
import textwrap
from datetime import datetime
from pathlib import Path

import pytest

from kubectl_installer.core.models.settings import InstallerSettings

UBUNTU_OS_RELEASE = textwrap.dedent("""\
    PRETTY_NAME="Ubuntu 22.04.4 LTS"
    NAME="Ubuntu"
    VERSION_ID="22.04"
    ID=ubuntu
    ID_LIKE=debian
""")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep the developer's own config and env overrides out of tests."""
    for var in ("KCI_CONFIG", "KCI_INSTALL_DIR", "KCI_BACKUP_DIR", "KCI_RELEASE_URL",
                "KCI_LOG_LEVEL", "KCI_LOG_FILE", "KCI_LOG_FILE_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def os_release(tmp_path: Path) -> Path:
    """Return an Ubuntu os-release file."""
    path = tmp_path / "os-release"
    path.write_text(UBUNTU_OS_RELEASE)
    return path


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """Return a writable stand-in for /usr/local/bin."""
    d = tmp_path / "bin"
    d.mkdir()
    return d


@pytest.fixture
def settings(bin_dir: Path, os_release: Path) -> InstallerSettings:
    """Settings pointing at temporary directories."""
    return InstallerSettings(
        install_dir=str(bin_dir),
        backup_dir=str(bin_dir),
        os_release_path=str(os_release),
    )


@pytest.fixture
def config_file(tmp_path: Path, bin_dir: Path, os_release: Path, monkeypatch) -> Path:
    """Write a config.yml for the temp dirs and point KCI_CONFIG at it."""
    path = tmp_path / "config.yml"
    path.write_text(textwrap.dedent(f"""\
        install_dir: {bin_dir}
        backup_dir: {bin_dir}
        os_release_path: {os_release}
    """))
    monkeypatch.setenv("KCI_CONFIG", str(path))
    return path


@pytest.fixture
def make_backup():
    """Return a factory creating ``kubectl.backup.<stamp>`` with a matching mtime."""

    def _make(directory: Path, stamp: str, content: bytes = b"#!/bin/sh\n") -> Path:
        path = directory / f"kubectl.backup.{stamp}"
        path.write_bytes(content)
        path.chmod(0o755)
        ts = datetime.strptime(stamp, "%Y%m%d%H%M%S").timestamp()
        os.utime(path, (ts, ts))
        return path

    return _make
