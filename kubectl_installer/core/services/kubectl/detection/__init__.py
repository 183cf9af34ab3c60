"""
L3 Detection — ``__init__.py`` re-exports all detection functions.

These functions READ system state but never WRITE.
Subprocess calls, file reads, env var reads — all read-only.
"""

from kubectl_installer.core.services.kubectl.detection.backups import (  # noqa: F401
    list_backups,
)
from kubectl_installer.core.services.kubectl.detection.platform import (  # noqa: F401
    detect_platform,
)
from kubectl_installer.core.services.kubectl.detection.system_deps import (  # noqa: F401
    _is_pkg_installed,
    check_system_deps,
)
from kubectl_installer.core.services.kubectl.detection.tool_version import (  # noqa: F401
    find_kubectl,
    get_kubectl_version,
)
