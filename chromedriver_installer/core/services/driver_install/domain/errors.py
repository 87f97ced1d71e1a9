"""
L1 Domain — Installer error taxonomy.

None of these are retried internally.  Filesystem failures are not
wrapped: they surface as the built-in ``OSError``.
"""

from __future__ import annotations


class InstallerError(Exception):
    """Base class for installer failures."""


class UnsupportedPlatformError(InstallerError):
    """The host OS matches none of the supported families."""

    def __init__(self, os_name: str):
        self.os_name = os_name
        super().__init__(f"Unsupported OS: {os_name!r}")


class DownloadError(InstallerError):
    """The archive could not be fetched.

    ``status_code`` is None when no HTTP response was received
    (DNS failure, refused connection, timeout).
    """

    def __init__(self, url: str, status_code: int | None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            msg = f"URL[{url}] could not be fetched: {reason or 'no response'}"
        else:
            msg = f"URL[{url}] returns code [{status_code}]."
        super().__init__(msg)


class ExtractionError(InstallerError):
    """The archive is malformed or has an unexpected layout."""
