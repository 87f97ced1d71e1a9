"""
L3 Detection — Host platform description.

Read-only adapter that turns the running interpreter's view of the
host into a ``PlatformDescriptor``.  This is the only place the
installer sniffs the environment.
"""

from __future__ import annotations

import platform
import sys

from chromedriver_installer.core.models.platform import PlatformDescriptor


def _data_model() -> str:
    """Pointer width of the running interpreter: ``"32"`` or ``"64"``."""
    return "64" if sys.maxsize > 2**32 else "32"


def detect_platform() -> PlatformDescriptor:
    """Describe the current host.

    ``platform.system()`` reports ``Linux``, ``Windows`` or ``Darwin``;
    an empty string (undeterminable) falls through to the resolver,
    which rejects it.
    """
    return PlatformDescriptor(
        os_name=platform.system(),
        data_model=_data_model(),
    )
