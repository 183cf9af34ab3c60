"""
kubectl install service — package re-exports.

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → domain → detection → execution →
orchestration)::

    from kubectl_installer.core.services.kubectl import install_kubectl
"""

# ── L3: Detection ──
from kubectl_installer.core.services.kubectl.detection.backups import (  # noqa: F401
    list_backups,
)
from kubectl_installer.core.services.kubectl.detection.platform import (  # noqa: F401
    detect_platform,
)
from kubectl_installer.core.services.kubectl.detection.tool_version import (  # noqa: F401
    find_kubectl,
    get_kubectl_version,
)

# ── L4: Execution ──
from kubectl_installer.core.services.kubectl.execution.dependencies import (  # noqa: F401
    install_dependencies,
)
from kubectl_installer.core.services.kubectl.execution.download import (  # noqa: F401
    resolve_version,
)

# ── L5: Orchestration ──
from kubectl_installer.core.services.kubectl.orchestration.installer import (  # noqa: F401
    install_kubectl,
)
from kubectl_installer.core.services.kubectl.orchestration.recovery import (  # noqa: F401
    get_backups,
    prefer_backup,
    rollback,
    rollback_to,
    select_backup,
)
