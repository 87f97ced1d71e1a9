"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from chromedriver_installer.core.context import clear_driver_paths
from tests.archives import DRIVER_BYTES, build_zip


@pytest.fixture(autouse=True)
def _clean_registry():
    """Each test starts with an empty driver registry."""
    clear_driver_paths()
    yield
    clear_driver_paths()


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Installation root that does not exist yet."""
    return tmp_path / "drivers" / "chrome"


@pytest.fixture
def driver_zip() -> bytes:
    """A ChromeDriver-like zip: the binary at the archive root."""
    return build_zip({"chromedriver": DRIVER_BYTES})


@pytest.fixture
def isolated_tmpdir(tmp_path: Path, monkeypatch) -> Path:
    """Point ``tempfile`` at an empty directory so leftovers are visible."""
    import tempfile

    d = tmp_path / "tmp"
    d.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(d))
    return d


@pytest.fixture(autouse=True)
def _reset_installer_loggers():
    """Undo logger levels set by CLI runs."""
    import logging

    from chromedriver_installer.core.observability.logging_config import (
        PACKAGE_LOGGER,
        PROGRESS_LOGGER,
    )

    yield
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.NOTSET)
    logging.getLogger(PROGRESS_LOGGER).setLevel(logging.NOTSET)
