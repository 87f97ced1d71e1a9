"""
Driver installation service — package re-exports.

    from chromedriver_installer.core.services.driver_install import ensure_installed

Each symbol lives in its single-responsibility module inside the
appropriate layer (domain → resolver → detection → execution →
orchestration).
"""

# ── L1: Domain ──
from chromedriver_installer.core.services.driver_install.domain.errors import (  # noqa: F401
    DownloadError,
    ExtractionError,
    InstallerError,
    UnsupportedPlatformError,
)

# ── L2: Resolver ──
from chromedriver_installer.core.services.driver_install.resolver.platform_resolution import (  # noqa: F401
    archive_for,
    resolve_archive,
    resolve_target,
)

# ── L3: Detection ──
from chromedriver_installer.core.services.driver_install.detection.host_platform import (  # noqa: F401
    detect_platform,
)

# ── L4: Execution ──
from chromedriver_installer.core.services.driver_install.execution.download import (  # noqa: F401
    download_archive,
)
from chromedriver_installer.core.services.driver_install.execution.extract import (  # noqa: F401
    extract_archive,
)

# ── L5: Orchestration ──
from chromedriver_installer.core.services.driver_install.orchestration.orchestrator import (  # noqa: F401
    ensure_installed,
    install_and_register,
    installed_binary,
)
