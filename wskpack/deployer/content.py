"""Artifact content loading.

The resolver only needs the raw bytes of an artifact.  ``ContentLoader`` is
the seam; ``LocalContentReader`` is the filesystem implementation used by
default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


class ContentReadError(OSError):
    """Artifact content could not be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Unable to read artifact '{path}': {reason}")
        self.path = str(path)


@runtime_checkable
class ContentLoader(Protocol):
    def read_local(self, path: str | Path) -> bytes:
        """Return the full contents of ``path``.  Raises ``ContentReadError``."""
        ...


class LocalContentReader:
    """Reads artifacts from the local filesystem."""

    def read_local(self, path: str | Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as exc:
            raise ContentReadError(path, exc.strerror or str(exc)) from exc
