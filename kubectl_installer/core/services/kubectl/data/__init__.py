"""
L0 Data — constants for the kubectl installer.

Pure data, no logic.
"""

from kubectl_installer.core.services.kubectl.data.constants import (  # noqa: F401
    ARCH_MAP,
    BACKUP_SUFFIX,
    BACKUP_TIMESTAMP_FORMAT,
    DISTRO_PACKAGE_MANAGERS,
    DISTRO_PREFIX_PACKAGE_MANAGERS,
    DOWNLOAD_OS,
    PACKAGE_INSTALL_COMMANDS,
    RELEASE_CHANNELS,
    REQUIRED_PACKAGES,
    VERIFY_COMMAND,
    VERSION_COMMAND,
    VERSION_PATTERN,
)
