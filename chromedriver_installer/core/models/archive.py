"""
Archive model — which file to download and which binary it contains.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

TAR_BZ2_SUFFIX = "tar.bz2"


class ArchiveFormat(str, Enum):
    ZIP = "zip"
    TAR_BZ2 = "tar.bz2"


class ArchiveDescriptor(BaseModel):
    """Archive file name plus the binary file name found inside it.

    The format is derived from the archive name, so it can never
    disagree with the suffix.
    """

    model_config = ConfigDict(frozen=True)

    archive_name: str
    binary_name: str

    @property
    def archive_format(self) -> ArchiveFormat:
        if self.archive_name.endswith(TAR_BZ2_SUFFIX):
            return ArchiveFormat.TAR_BZ2
        return ArchiveFormat.ZIP

    def to_dict(self) -> dict[str, str]:
        return {
            "archive_name": self.archive_name,
            "binary_name": self.binary_name,
            "archive_format": self.archive_format.value,
        }
