"""
Driver registry — process-wide hand-off of the installed driver path.

The installer core only *returns* the path.  Collaborators that launch
browser sessions in the same process look it up here instead of having
the path threaded through every call:

    - Installer:  install_and_register(root)  → register_driver_path(path)
    - Launcher:   get_driver_path()           → "/opt/drivers/chromedriver"

Design notes:
    - Module-level singleton (not a class).
    - Keys follow the ``webdriver.chrome.driver`` convention so several
      driver kinds can coexist.
    - Thread-safe for reads (Python GIL + simple dict assignment).
"""

from __future__ import annotations

from typing import Optional

from chromedriver_installer.core.models.settings import DEFAULT_REGISTRY_KEY

_driver_paths: dict[str, str] = {}


def register_driver_path(path: str, key: str = DEFAULT_REGISTRY_KEY) -> None:
    """Record the driver path for the current process."""
    _driver_paths[key] = path


def get_driver_path(key: str = DEFAULT_REGISTRY_KEY) -> Optional[str]:
    """Return the registered driver path, or None if not yet set."""
    return _driver_paths.get(key)


def clear_driver_paths() -> None:
    _driver_paths.clear()
