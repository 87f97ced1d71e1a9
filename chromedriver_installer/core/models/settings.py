"""
Installer settings — the pinned version and where to fetch it from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_VERSION = "85.0.4183.38"
DEFAULT_BASE_URL = "https://chromedriver.storage.googleapis.com"
DEFAULT_TIMEOUT = 60.0
DEFAULT_REGISTRY_KEY = "webdriver.chrome.driver"


class InstallerSettings(BaseModel):
    """Settings consumed by the orchestrator.

    Exactly one pinned version is ever requested; there is no
    version resolution.
    """

    model_config = ConfigDict(frozen=True)

    version: str = DEFAULT_VERSION
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    registry_key: str = DEFAULT_REGISTRY_KEY

    @field_validator("version")
    @classmethod
    def _version_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("version must not be empty")
        return v

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v
