"""In-memory ZIP archive accessor with tolerant path lookup."""

from __future__ import annotations

import asyncio
import io
import logging
import lzma
import struct
import threading
import zipfile
import zlib

from rostercheck.core.exceptions import ArchiveCorrupt

_LOG = logging.getLogger(__name__)

# What reading a damaged entry can raise out of zipfile.
ENTRY_READ_ERRORS = (
    zipfile.BadZipFile, zlib.error, lzma.LZMAError, struct.error, OSError, EOFError,
    ValueError, NotImplementedError, RuntimeError,
)


def normalize_path(path: str) -> str:
    """Canonical logical path: forward slashes, no leading ``./`` or ``/``."""
    p = path.replace("\\", "/")
    while p.startswith("./"):
        p = p[2:]
    return p.lstrip("/")


class Archive:
    """Read-only handle over a decoded ZIP container held in memory.

    Entries are addressed by logical path. A missing entry is reported as
    ``None``, never raised, so callers can fall through to alternate paths.
    """

    def __init__(self, zf: zipfile.ZipFile) -> None:
        self._zf = zf
        self._lock = threading.Lock()
        self._index: dict[str, zipfile.ZipInfo] = {}
        for info in zf.infolist():
            if info.is_dir():
                continue
            self._index.setdefault(normalize_path(info.filename), info)

    @classmethod
    def open(cls, data: bytes) -> Archive:
        if not data:
            raise ArchiveCorrupt("Archive is empty")
        try:
            zf = zipfile.ZipFile(io.BytesIO(data), "r")
        except (zipfile.BadZipFile, zipfile.LargeZipFile, struct.error,
                NotImplementedError, OSError, EOFError, ValueError) as exc:
            raise ArchiveCorrupt(f"Archive could not be opened: {exc}") from exc
        return cls(zf)

    def names(self) -> list[str]:
        return sorted(self._index)

    def __contains__(self, path: str) -> bool:
        return normalize_path(path) in self._index

    def read_bytes(self, path: str) -> bytes | None:
        info = self._index.get(normalize_path(path))
        if info is None:
            return None
        with self._lock:
            return self._zf.read(info)

    async def aread_bytes(self, path: str) -> bytes | None:
        return await asyncio.to_thread(self.read_bytes, path)

    def read_text(self, *paths: str, encoding: str = "utf-8-sig") -> str | None:
        """Return the text of the first of ``paths`` that resolves."""
        for path in paths:
            raw = self.read_bytes(path)
            if raw is None:
                continue
            if path != paths[0]:
                _LOG.debug("Resolved %s via fallback path %s", paths[0], path)
            return raw.decode(encoding)
        return None

    async def aread_text(self, *paths: str, encoding: str = "utf-8-sig") -> str | None:
        return await asyncio.to_thread(self.read_text, *paths, encoding=encoding)

    def close(self) -> None:
        self._zf.close()
