"""
L4 Execution — ``__init__.py`` re-exports all execution functions.

These functions WRITE: they run package managers, download files and
move binaries.  Every subprocess goes through ``_run_subprocess``.
"""

from kubectl_installer.core.services.kubectl.execution.backup import (  # noqa: F401
    create_backup,
    install_binary,
    restore_backup,
    verify_installation,
)
from kubectl_installer.core.services.kubectl.execution.dependencies import (  # noqa: F401
    _install_commands,
    install_dependencies,
)
from kubectl_installer.core.services.kubectl.execution.download import (  # noqa: F401
    _verify_checksum,
    download_file,
    resolve_version,
    verify_download,
)
from kubectl_installer.core.services.kubectl.execution.subprocess_runner import (  # noqa: F401
    _needs_sudo,
    _run_subprocess,
)
