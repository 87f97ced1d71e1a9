"""
L2 Resolver — Platform → archive mapping (pure).

Turns a ``PlatformDescriptor`` into the archive to download and the
binary it contains.  No ambient reads: the caller supplies the
descriptor (see ``detection.host_platform`` for the host adapter).

Mapping::

    ("Linux", "64")   → chromedriver_linux64.zip  / chromedriver
    ("Linux", "32")   → chromedriver_linux32.zip  / chromedriver
    ("Windows 10", *) → chromedriver_win32.zip    / chromedriver.exe
    ("Mac OS X", *)   → chromedriver_mac64.zip    / chromedriver
"""

from __future__ import annotations

import logging

from chromedriver_installer.core.models.archive import ArchiveDescriptor
from chromedriver_installer.core.models.platform import (
    Bitness,
    OSFamily,
    PlatformDescriptor,
    PlatformTarget,
)
from chromedriver_installer.core.services.driver_install.domain.errors import (
    UnsupportedPlatformError,
)

logger = logging.getLogger(__name__)

ARCHIVE_PREFIX = "chromedriver_"
BINARY_NAME = "chromedriver"

# Windows and macOS each publish a single build regardless of host width.
_VARIANTS: dict[tuple[OSFamily, Bitness], str] = {
    (OSFamily.LINUX, Bitness.B32): "linux32",
    (OSFamily.LINUX, Bitness.B64): "linux64",
    (OSFamily.WINDOWS, Bitness.B32): "win32",
    (OSFamily.MACOS, Bitness.B64): "mac64",
}


def resolve_target(descriptor: PlatformDescriptor) -> PlatformTarget:
    """Normalize raw host facts into a ``PlatformTarget``.

    Raises:
        UnsupportedPlatformError: If the OS name matches no family.
    """
    os_name = descriptor.os_name.lower()

    if "nux" in os_name:
        bitness = Bitness.B32 if descriptor.data_model.strip() == "32" else Bitness.B64
        return PlatformTarget(os_family=OSFamily.LINUX, bitness=bitness)
    if os_name.startswith("windows"):
        return PlatformTarget(os_family=OSFamily.WINDOWS, bitness=Bitness.B32)
    if "mac" in os_name or "darwin" in os_name:
        return PlatformTarget(os_family=OSFamily.MACOS, bitness=Bitness.B64)

    raise UnsupportedPlatformError(descriptor.os_name)


def archive_for(target: PlatformTarget) -> ArchiveDescriptor:
    """Archive and binary names for a resolved target."""
    variant = _VARIANTS.get((target.os_family, target.bitness))
    if variant is None:
        raise UnsupportedPlatformError(
            f"{target.os_family.value}/{int(target.bitness)}"
        )

    binary = BINARY_NAME
    if target.os_family is OSFamily.WINDOWS:
        binary += ".exe"

    return ArchiveDescriptor(
        archive_name=f"{ARCHIVE_PREFIX}{variant}.zip",
        binary_name=binary,
    )


def resolve_archive(descriptor: PlatformDescriptor) -> ArchiveDescriptor:
    """``PlatformDescriptor`` → ``ArchiveDescriptor`` in one step."""
    target = resolve_target(descriptor)
    archive = archive_for(target)
    logger.debug(
        "Resolved %r/%s → %s (%s)",
        descriptor.os_name, descriptor.data_model,
        archive.archive_name, archive.binary_name,
    )
    return archive
