"""
L2 Resolver — ``__init__.py`` re-exports resolver functions.

Pure functions: host facts in, archive names out.
"""

from chromedriver_installer.core.services.driver_install.resolver.platform_resolution import (  # noqa: F401
    archive_for,
    resolve_archive,
    resolve_target,
)
