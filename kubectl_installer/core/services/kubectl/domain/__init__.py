"""
L1 Domain — ``__init__.py`` re-exports all pure domain functions.

These functions have NO subprocess calls, NO filesystem access,
NO network calls. Pure input→output.
"""

from kubectl_installer.core.services.kubectl.domain.backups import (  # noqa: F401
    _backup_filename,
    _backup_glob,
    _parse_backup_timestamp,
    _parse_selection,
    _sort_newest_first,
)
from kubectl_installer.core.services.kubectl.domain.download_helpers import (  # noqa: F401
    _binary_url,
    _channel_url,
    _checksum_url,
    _fmt_size,
)
from kubectl_installer.core.services.kubectl.domain.platform import (  # noqa: F401
    _map_arch,
    _package_manager_for,
    _parse_os_release,
)
from kubectl_installer.core.services.kubectl.domain.version import (  # noqa: F401
    _is_release_tag,
    _parse_version_arg,
)
