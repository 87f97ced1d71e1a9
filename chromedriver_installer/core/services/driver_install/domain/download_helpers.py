"""
L1 Domain — Download helpers (pure).

Size formatting and URL construction.
No I/O.
"""

from __future__ import annotations


def _fmt_size(n: int | float) -> str:
    """Format byte count to human-readable string."""
    for unit in ("B", "KB", "MB", "GB"):
        if n < 1024:
            return f"{n:.1f} {unit}"
        n /= 1024
    return f"{n:.1f} TB"


def build_download_url(base_url: str, version: str, archive_name: str) -> str:
    """``<base_url>/<version>/<archive_name>``."""
    return f"{base_url.rstrip('/')}/{version}/{archive_name}"
