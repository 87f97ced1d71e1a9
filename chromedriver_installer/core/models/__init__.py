"""
Domain models — Pydantic types for the installer.

    from chromedriver_installer.core.models import ArchiveDescriptor, PlatformDescriptor
"""

from chromedriver_installer.core.models.archive import ArchiveDescriptor, ArchiveFormat
from chromedriver_installer.core.models.platform import (
    Bitness,
    OSFamily,
    PlatformDescriptor,
    PlatformTarget,
)
from chromedriver_installer.core.models.settings import InstallerSettings

__all__ = [
    # archive.py
    "ArchiveDescriptor",
    "ArchiveFormat",
    # platform.py
    "Bitness",
    "OSFamily",
    "PlatformDescriptor",
    "PlatformTarget",
    # settings.py
    "InstallerSettings",
]
