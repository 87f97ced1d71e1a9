"""
Logging configuration for the ``chromedriver-installer`` CLI.

Only the CLI calls ``setup_logging``; library callers of
``ensure_installed`` keep whatever logging they already have.

The installer's own loggers (``chromedriver_installer.*``) follow the
requested level.  Everything else stays at WARNING unless the level is
DEBUG.  Download progress lines come from a dedicated child logger and
are shown only when the level is INFO or lower (``--verbose``), unless
``show_progress`` says otherwise.

Levels are resolved in precedence order:
    CLI flag  >  CDI_LOG_LEVEL env var  >  WARNING (default)

Optional file output via CDI_LOG_FILE / CDI_LOG_FILE_LEVEL env vars.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "chromedriver_installer"
PROGRESS_LOGGER = (
    "chromedriver_installer.core.services.driver_install.execution.download.progress"
)

# WARNING and above: the message alone ("Could not mark … as executable")
_FMT_MINIMAL = "%(levelname)s: %(message)s"

# INFO: install steps with a clock
_FMT_VERBOSE = "%(asctime)s %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

# DEBUG and file output: logger name and line
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    show_progress: bool | None = None,
) -> None:
    """Configure logging for a CLI run.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Level for the log file.  Defaults to ``level``.
        show_progress: Emit per-chunk download progress.  ``None`` shows it
            whenever the installer logs at INFO or lower.
    """
    console_level = _parse_level(level)
    file_level = _parse_level(log_file_level) if log_file_level else console_level
    package_level = min(console_level, file_level) if log_file else console_level

    if console_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT_DEBUG
    elif console_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_VERBOSE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    # Foreign loggers only get through at DEBUG
    root.setLevel(package_level if package_level <= logging.DEBUG
                  else max(package_level, logging.WARNING))
    logging.getLogger(PACKAGE_LOGGER).setLevel(package_level)

    if show_progress is None:
        show_progress = package_level <= logging.INFO
    logging.getLogger(PROGRESS_LOGGER).setLevel(
        logging.NOTSET if show_progress else logging.WARNING
    )

    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
