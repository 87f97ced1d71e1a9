"""
Platform models — raw host facts and the resolved install target.

``PlatformDescriptor`` is what the host reports (an OS name string and
a pointer width).  ``PlatformTarget`` is the normalized family/bitness
pair that selects an archive.
"""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict


class OSFamily(str, Enum):
    """Operating system families with a published ChromeDriver build."""

    LINUX = "linux"
    WINDOWS = "windows"
    MACOS = "macos"


class Bitness(IntEnum):
    B32 = 32
    B64 = 64


class PlatformDescriptor(BaseModel):
    """Host facts as reported by the environment.

    ``os_name`` is free-form ("Linux", "Windows 10", "Mac OS X", "Darwin").
    ``data_model`` is the pointer width as a string ("32" or "64").
    """

    model_config = ConfigDict(frozen=True)

    os_name: str
    data_model: str = "64"


class PlatformTarget(BaseModel):
    """Normalized platform used to pick the archive."""

    model_config = ConfigDict(frozen=True)

    os_family: OSFamily
    bitness: Bitness
