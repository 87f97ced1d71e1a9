"""
L4 Execution — Archive extraction.

Writes the file tree of a zip or bzip2-compressed tar under a
destination root.  Malformed data raises ``ExtractionError``;
filesystem failures propagate as ``OSError``.  There is no cleanup of
a partially extracted tree.

zip:
    Directory entries are created with parents.  File entries are
    copied byte-for-byte and never create their own parent
    directories, so a file whose directory entry is missing fails.

tar.bz2:
    The bzip2 stream is fully decompressed into a temp file first,
    then read as tar.  The temp file is always removed.
"""

from __future__ import annotations

import bz2
import logging
import os
import shutil
import tarfile
import tempfile
import zipfile
import zlib
from pathlib import Path
from typing import BinaryIO

from chromedriver_installer.core.models.archive import ArchiveFormat
from chromedriver_installer.core.services.driver_install.domain.errors import (
    ExtractionError,
)

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


def extract_archive(
    fmt: ArchiveFormat | str,
    source: BinaryIO,
    dest_root: Path,
) -> None:
    """Extract ``source`` under ``dest_root``.

    Args:
        fmt: Archive format tag.
        source: Readable binary stream.  The caller owns and closes it;
            zip needs it to be seekable.
        dest_root: Destination directory.

    Raises:
        ExtractionError: Unknown format, malformed data, or an entry
            that would land outside ``dest_root``.
        OSError: A directory or file could not be written.
    """
    try:
        fmt = ArchiveFormat(fmt)
    except ValueError as e:
        raise ExtractionError(f"Unknown archive format: {fmt!r}") from e

    dest_root = Path(dest_root)
    if fmt is ArchiveFormat.TAR_BZ2:
        _extract_tar_bz2(source, dest_root)
    else:
        _extract_zip(source, dest_root)


def _entry_path(root: Path, name: str) -> Path:
    """Destination for an archive entry, refusing anything outside ``root``."""
    base = root.resolve()
    target = (base / name).resolve()
    if target != base and base not in target.parents:
        raise ExtractionError(f"Archive entry escapes destination: {name!r}")
    return target


# ── zip ──────────────────────────────────────────────────────────


def _extract_zip(source: BinaryIO, root: Path) -> None:
    try:
        zf = zipfile.ZipFile(source)
    except (zipfile.BadZipFile, EOFError) as e:
        raise ExtractionError(f"Invalid zip archive: {e}") from e

    with zf:
        for info in zf.infolist():
            target = _entry_path(root, info.filename)
            if info.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue

            try:
                src = zf.open(info)
            except (zipfile.BadZipFile, NotImplementedError) as e:
                raise ExtractionError(f"Cannot read zip entry {info.filename!r}: {e}") from e

            with src, open(target, "wb") as out:
                try:
                    shutil.copyfileobj(src, out, _CHUNK_SIZE)
                except (zipfile.BadZipFile, zlib.error, EOFError) as e:
                    raise ExtractionError(
                        f"Corrupt zip entry {info.filename!r}: {e}"
                    ) from e
            logger.debug("Extracted %s (%d bytes)", target, info.file_size)


# ── tar.bz2 ──────────────────────────────────────────────────────


def _extract_tar_bz2(source: BinaryIO, root: Path) -> None:
    fd, tmp_name = tempfile.mkstemp(prefix="driver", suffix="tar")
    tmp_tar = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as out:
            _decompress_bz2(source, out)
        logger.debug("Decompressed bzip2 stream to %s", tmp_tar)

        root.mkdir(parents=True, exist_ok=True)
        try:
            with tarfile.open(tmp_tar, "r:") as tf:
                for member in tf:
                    _extract_tar_member(tf, member, root)
        except tarfile.TarError as e:
            raise ExtractionError(f"Invalid tar archive: {e}") from e
    finally:
        tmp_tar.unlink(missing_ok=True)


def _decompress_bz2(source: BinaryIO, out: BinaryIO) -> None:
    with bz2.BZ2File(source, "rb") as bz:
        while True:
            try:
                chunk = bz.read(_CHUNK_SIZE)
            except (OSError, EOFError) as e:
                raise ExtractionError(f"Invalid bzip2 stream: {e}") from e
            if not chunk:
                break
            out.write(chunk)


def _extract_tar_member(tf: tarfile.TarFile, member: tarfile.TarInfo, root: Path) -> None:
    target = _entry_path(root, member.name)

    if member.isdir():
        target.mkdir(parents=True, exist_ok=True)
        return
    if not member.isreg():
        logger.debug("Skipping non-regular tar member %s", member.name)
        return

    src = tf.extractfile(member)
    if src is None:
        raise ExtractionError(f"Cannot read tar member {member.name!r}")
    with src, open(target, "wb") as out:
        shutil.copyfileobj(src, out, _CHUNK_SIZE)
    logger.debug("Extracted %s (%d bytes)", target, member.size)
