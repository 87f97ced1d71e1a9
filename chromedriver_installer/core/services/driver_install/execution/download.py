"""
L4 Execution — Archive download.

Single HTTP GET, body streamed to disk.  Anything but a 200 is a hard
failure; nothing is retried here.
"""

from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.request
from pathlib import Path

from chromedriver_installer.core.models.settings import DEFAULT_TIMEOUT
from chromedriver_installer.core.services.driver_install.domain.download_helpers import (
    _fmt_size,
)
from chromedriver_installer.core.services.driver_install.domain.errors import (
    DownloadError,
)

logger = logging.getLogger(__name__)
# Per-chunk progress lines; silenced separately by setup_logging(show_progress=False).
progress_logger = logging.getLogger(f"{__name__}.progress")

_CHUNK_SIZE = 8192


def download_archive(
    url: str,
    dest: Path,
    timeout: float = DEFAULT_TIMEOUT,
) -> int:
    """Fetch ``url`` and write the response body to ``dest``.

    The parent directory of ``dest`` must exist.  A partially written
    file is removed when the transfer fails.

    Args:
        url: Fully built archive URL.
        dest: Target file (overwritten).
        timeout: Socket timeout in seconds, applied to connect and reads.

    Returns:
        Number of bytes written.

    Raises:
        DownloadError: Non-200 status or transport failure.
        OSError: ``dest`` could not be written.
    """
    req = urllib.request.Request(url)

    logger.info("Downloading %s", url)
    try:
        resp = urllib.request.urlopen(req, timeout=timeout)
    except urllib.error.HTTPError as e:
        e.close()
        raise DownloadError(url, e.code) from e
    except urllib.error.URLError as e:
        raise DownloadError(url, None, str(e.reason)) from e
    except (TimeoutError, ConnectionError) as e:
        raise DownloadError(url, None, str(e) or type(e).__name__) from e

    try:
        with resp:
            status = resp.getcode()
            if status != 200:
                raise DownloadError(url, status)
            written = _stream_to_file(resp, dest, url)
    except Exception:
        dest.unlink(missing_ok=True)
        raise

    logger.info("Downloaded %s to %s", _fmt_size(written), dest)
    return written


def _stream_to_file(resp, dest: Path, url: str) -> int:
    total = _content_length(resp)
    downloaded = 0
    last_progress = -1

    with open(dest, "wb") as f:
        while True:
            try:
                chunk = resp.read(_CHUNK_SIZE)
            except (TimeoutError, ConnectionError, http.client.HTTPException) as e:
                raise DownloadError(url, None, f"transfer interrupted: {e}") from e
            if not chunk:
                break
            f.write(chunk)
            downloaded += len(chunk)

            # Progress tracking (log every 5%)
            if total > 0:
                pct = int(downloaded * 100 / total)
                if pct >= last_progress + 5:
                    last_progress = pct
                    progress_logger.info(
                        "Download progress: %d%% (%s / %s)",
                        pct, _fmt_size(downloaded), _fmt_size(total),
                    )

    return downloaded


def _content_length(resp) -> int:
    """Declared body size, or 0 when absent or unparseable."""
    raw = resp.headers.get("Content-Length")
    try:
        return max(int(raw), 0) if raw else 0
    except ValueError:
        logger.debug("Ignoring bad Content-Length %r", raw)
        return 0
