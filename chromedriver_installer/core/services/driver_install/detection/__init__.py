"""
L3 Detection — ``__init__.py`` re-exports read-only host detection.
"""

from chromedriver_installer.core.services.driver_install.detection.host_platform import (  # noqa: F401
    detect_platform,
)
