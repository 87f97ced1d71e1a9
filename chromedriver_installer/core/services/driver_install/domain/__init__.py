"""
L1 Domain — ``__init__.py`` re-exports pure domain helpers.

No I/O, no network, no filesystem.
"""

from chromedriver_installer.core.services.driver_install.domain.download_helpers import (  # noqa: F401
    _fmt_size,
    build_download_url,
)
from chromedriver_installer.core.services.driver_install.domain.errors import (  # noqa: F401
    DownloadError,
    ExtractionError,
    InstallerError,
    UnsupportedPlatformError,
)
