"""
chromedriver-installer — make sure a ChromeDriver binary is on disk.

    from chromedriver_installer import ensure_installed

    path = ensure_installed("/tmp/chromedriver")
"""

__version__ = "0.1.0"

from chromedriver_installer.core.services.driver_install import (  # noqa: E402, F401
    DownloadError,
    ExtractionError,
    InstallerError,
    UnsupportedPlatformError,
    detect_platform,
    ensure_installed,
    install_and_register,
    installed_binary,
    resolve_archive,
)
