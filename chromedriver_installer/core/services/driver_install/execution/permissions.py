"""
L4 Execution — Executable bit.

Best-effort: a failure is logged as a warning and reported through the
return value, never raised.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def make_executable(path: Path) -> bool:
    """Add execute permission for user, group and other.

    Returns:
        True if ``path`` is executable afterwards.
    """
    try:
        mode = path.stat().st_mode
        path.chmod(mode | _EXEC_BITS)
    except OSError as e:
        logger.warning("Could not mark %s as executable: %s", path, e)
        return False

    if not os.access(path, os.X_OK):
        logger.warning("%s is still not executable after chmod", path)
        return False
    return True
