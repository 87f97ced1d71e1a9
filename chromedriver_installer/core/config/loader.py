"""
Configuration loader — reads chromedriver.yml into InstallerSettings.

The file is optional: without one, the built-in defaults (pinned
version, storage host, 60 s timeout) apply.  Environment variables
override file values:

    CDI_VERSION   pinned ChromeDriver version
    CDI_BASE_URL  download host
    CDI_TIMEOUT   HTTP timeout in seconds
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from chromedriver_installer.core.models.settings import InstallerSettings

logger = logging.getLogger(__name__)

CONFIG_FILE = "chromedriver.yml"

_ENV_OVERRIDES = {
    "CDI_VERSION": "version",
    "CDI_BASE_URL": "base_url",
    "CDI_TIMEOUT": "timeout",
}


class ConfigError(Exception):
    """Raised when installer configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for chromedriver.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to chromedriver.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> InstallerSettings:
    """Load and validate installer settings.

    Args:
        path: Explicit path to chromedriver.yml.  If None, searches upward
            and falls back to defaults when nothing is found.
        env: Environment mapping for overrides (default: ``os.environ``).

    Returns:
        Validated InstallerSettings.

    Raises:
        ConfigError: If an explicit file is missing, or any file or
            override is invalid.
    """
    env = os.environ if env is None else env

    if path is None:
        path = find_config_file()
        data = _read_yaml(path) if path is not None else {}
    else:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        data = _read_yaml(path)

    for var, field in _ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            logger.debug("Override %s from %s", field, var)
            data[field] = value

    try:
        settings = InstallerSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid installer configuration: {e}") from e

    logger.debug("Settings: version=%s base_url=%s", settings.version, settings.base_url)
    return settings


def _read_yaml(path: Path) -> dict:
    logger.debug("Loading installer config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "chromedriver" key or be flat
    if "chromedriver" in data:
        data = data["chromedriver"] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping under 'chromedriver' in {path}")

    return dict(data)
