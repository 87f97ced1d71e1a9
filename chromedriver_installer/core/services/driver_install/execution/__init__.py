"""
L4 Execution — ``__init__.py`` re-exports all execution functions.

These functions WRITE to the system: network downloads, archive
extraction, permission changes.
"""

from chromedriver_installer.core.services.driver_install.execution.download import (  # noqa: F401
    download_archive,
)
from chromedriver_installer.core.services.driver_install.execution.extract import (  # noqa: F401
    extract_archive,
)
from chromedriver_installer.core.services.driver_install.execution.permissions import (  # noqa: F401
    make_executable,
)
