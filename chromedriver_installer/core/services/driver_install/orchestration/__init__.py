"""
L5 Orchestration — ``__init__.py`` re-exports top-level coordinators.

These are the entry points that external code calls.
"""

from chromedriver_installer.core.services.driver_install.orchestration.orchestrator import (  # noqa: F401
    ensure_installed,
    install_and_register,
    installed_binary,
)
