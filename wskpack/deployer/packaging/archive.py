"""Zip archive builders for action artifacts.

Two independent entry points:

- ``create_folder_zip``: packs a whole directory tree (or a single file),
  rooting every entry under the directory's base name.
- ``create_files_zip``: packs an explicit list of files flat at the archive
  root.

Both overwrite the destination and abort on the first I/O error.  The
archive is closed on failure, so whatever was written before the error stays
on disk; callers own the cleanup.

Modification times outside the zip range are clamped (anything before 1980
is stored as 1980-01-01 00:00:00).
"""

from __future__ import annotations

import shutil
import stat
import zipfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from loguru import logger


def create_folder_zip(src: str | Path, dest: str | Path) -> Path:
    """Zip ``src`` into ``dest``.

    When ``src`` is a directory the layout inside the archive is::

        {basename(src)}/
        {basename(src)}/sub/
        {basename(src)}/sub/file

    Directories are stored with a trailing ``/`` and no compression; files
    are deflated.  When ``src`` is a single file it is stored under its base
    name.

    Raises
    ------
    OSError:
        Destination cannot be created, ``src`` cannot be stat'ed, or any
        entry cannot be read.
    """
    src = Path(src)
    dest = Path(dest)

    with zipfile.ZipFile(dest, "w") as zf:
        basedir = None
        if stat.S_ISDIR(src.stat().st_mode):
            basedir = src.name or src.resolve().name

        count = 0
        for path in _walk(src):
            arcname = _arcname(src, path, basedir)
            _write_entry(zf, path, arcname)
            count += 1

    logger.info("Archive created: {} ({} entries from {})", dest, count, src)
    return dest


def create_files_zip(dest: str | Path, files: Iterable[str | Path]) -> Path:
    """Zip each of ``files`` into ``dest`` at the archive root.

    Entries are named by the file's base name and keep the file's metadata;
    no compression is forced.  Names are not sanitised, so ``files`` must be
    trusted input.
    """
    dest = Path(dest)

    with zipfile.ZipFile(dest, "w") as zf:
        for name in files:
            path = Path(name)
            info = zipfile.ZipInfo.from_file(path, arcname=path.name, strict_timestamps=False)
            with path.open("rb") as fsrc, zf.open(info, "w") as fdst:
                shutil.copyfileobj(fsrc, fdst)
            logger.debug("Archive {}: added {}", dest, info.filename)

    logger.info("Archive created: {}", dest)
    return dest


# -- Helpers -------------------------------------------------------------------


def _walk(root: Path) -> Iterator[Path]:
    """Yield ``root`` then its descendants, depth first in lexical order.

    Symlinked directories are yielded but not descended into.
    """
    yield root
    if root.is_dir() and not root.is_symlink():
        for child in sorted(root.iterdir(), key=lambda p: p.name):
            yield from _walk(child)


def _arcname(src: Path, path: Path, basedir: str | None) -> str:
    if basedir is None:
        return path.name
    rel = path.relative_to(src)
    if rel == Path("."):
        return basedir
    return f"{basedir}/{rel.as_posix()}"


def _write_entry(zf: zipfile.ZipFile, path: Path, arcname: str) -> None:
    info = zipfile.ZipInfo.from_file(path, arcname=arcname, strict_timestamps=False)

    if info.is_dir():
        # from_file already appended the trailing slash.
        zf.mkdir(info)
    else:
        info.compress_type = zipfile.ZIP_DEFLATED
        with path.open("rb") as fsrc, zf.open(info, "w") as fdst:
            shutil.copyfileobj(fsrc, fdst)

    logger.debug("Archive {}: added {}", zf.filename, info.filename)
