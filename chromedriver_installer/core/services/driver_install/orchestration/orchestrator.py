"""
L5 Orchestration — ensure a ChromeDriver binary is installed.

    resolve → check → fetch → extract → finalize → return

The check is an existence test only: a binary already present under
the installation root is returned as-is, with no network call and no
version or integrity check.  The check and the fetch/extract/finalize
steps run under an in-process lock keyed on the installation root, so a
thread never returns a binary another thread is still writing.
Separate processes sharing a root are not coordinated.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional

from chromedriver_installer.core.context import register_driver_path
from chromedriver_installer.core.models.archive import ArchiveDescriptor
from chromedriver_installer.core.models.platform import PlatformDescriptor
from chromedriver_installer.core.models.settings import InstallerSettings
from chromedriver_installer.core.services.driver_install.detection.host_platform import (
    detect_platform,
)
from chromedriver_installer.core.services.driver_install.domain.download_helpers import (
    build_download_url,
)
from chromedriver_installer.core.services.driver_install.domain.errors import (
    ExtractionError,
)
from chromedriver_installer.core.services.driver_install.execution.download import (
    download_archive,
)
from chromedriver_installer.core.services.driver_install.execution.extract import (
    extract_archive,
)
from chromedriver_installer.core.services.driver_install.execution.permissions import (
    make_executable,
)
from chromedriver_installer.core.services.driver_install.resolver.platform_resolution import (
    resolve_archive,
)

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, Path, float], object]
"""``fetch(url, dest, timeout)`` — writes the archive body to ``dest``."""

# ── Thread safety ───────────────────────────────────────────────
# Per-root lock around check + install: a caller never sees a binary
# another thread is still extracting or chmod-ing.  Entries are
# reference-counted and dropped once no caller holds or waits on them.
_root_locks: dict[str, list] = {}  # key → [lock, users]
_root_locks_guard = threading.Lock()


@contextmanager
def _root_lock(root: Path) -> Iterator[None]:
    """Hold the lock for an installation root."""
    key = str(root)
    with _root_locks_guard:
        entry = _root_locks.setdefault(key, [threading.Lock(), 0])
        entry[1] += 1
    try:
        with entry[0]:
            yield
    finally:
        with _root_locks_guard:
            entry[1] -= 1
            if entry[1] == 0:
                del _root_locks[key]


def _resolve(platform: Optional[PlatformDescriptor]) -> ArchiveDescriptor:
    return resolve_archive(platform if platform is not None else detect_platform())


def installed_binary(
    installation_root: str | Path,
    *,
    platform: Optional[PlatformDescriptor] = None,
) -> Optional[str]:
    """Absolute path of the binary if it is already present, else None.

    Read-only: no network access, nothing is created.
    """
    archive = _resolve(platform)
    bin_path = Path(installation_root).absolute() / archive.binary_name
    return str(bin_path) if bin_path.exists() else None


def ensure_installed(
    installation_root: str | Path,
    *,
    platform: Optional[PlatformDescriptor] = None,
    settings: Optional[InstallerSettings] = None,
    fetch: Optional[Fetcher] = None,
    on_installed: Optional[Callable[[str], None]] = None,
) -> str:
    """Ensure ChromeDriver is installed under ``installation_root``.

    Args:
        installation_root: Directory to install into.  Created if absent.
        platform: Host description.  Defaults to ``detect_platform()``.
        settings: Pinned version, base URL and timeout.
        fetch: Downloader, ``fetch(url, dest, timeout)``.  Defaults to
            ``download_archive``.
        on_installed: Called with the resolved path before returning,
            on both the fresh-install and the already-present path.

    Returns:
        Absolute path to the driver binary.

    Raises:
        UnsupportedPlatformError: The platform has no published build.
        DownloadError: The archive URL did not answer 200.
        ExtractionError: The archive is corrupt or lacks the binary.
        OSError: Filesystem failure while writing.
    """
    settings = settings or InstallerSettings()
    fetch = fetch or download_archive

    # ── 1. Resolve ──
    archive = _resolve(platform)

    root = Path(installation_root).absolute()
    bin_path = root / archive.binary_name

    # ── 2. Check ──
    with _root_lock(root):
        if bin_path.exists():
            logger.debug("ChromeDriver already present at %s", bin_path)
        else:
            _install(root, bin_path, archive, settings, fetch)

    # ── 6. Return ──
    resolved = str(bin_path)
    if on_installed is not None:
        on_installed(resolved)
    return resolved


def _install(
    root: Path,
    bin_path: Path,
    archive: ArchiveDescriptor,
    settings: InstallerSettings,
    fetch: Fetcher,
) -> None:
    # ── 3. Fetch ──
    root.mkdir(parents=True, exist_ok=True)
    archive_path = root / archive.archive_name
    archive_path.unlink(missing_ok=True)

    url = build_download_url(settings.base_url, settings.version, archive.archive_name)
    logger.info("Installing ChromeDriver %s into %s", settings.version, root)
    fetch(url, archive_path, settings.timeout)

    # ── 4. Extract ──
    with open(archive_path, "rb") as f:
        extract_archive(archive.archive_format, f, root)

    if not bin_path.exists():
        raise ExtractionError(
            f"{archive.archive_name} did not contain {archive.binary_name}"
        )

    # ── 5. Finalize ──
    make_executable(bin_path)
    logger.info("ChromeDriver ready at %s", bin_path)


def install_and_register(
    installation_root: str | Path,
    *,
    platform: Optional[PlatformDescriptor] = None,
    settings: Optional[InstallerSettings] = None,
    fetch: Optional[Fetcher] = None,
) -> str:
    """``ensure_installed`` plus registration in the process-wide registry.

    The path is stored under ``settings.registry_key``
    (``webdriver.chrome.driver`` by default).
    """
    settings = settings or InstallerSettings()
    return ensure_installed(
        installation_root,
        platform=platform,
        settings=settings,
        fetch=fetch,
        on_installed=lambda path: register_driver_path(path, settings.registry_key),
    )
