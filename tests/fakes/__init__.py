"""Shared test doubles and archive builders."""

from __future__ import annotations

import io
import json
import threading
import time
import zipfile
from typing import Any

from rostercheck.core.exceptions import SessionStoreError
from rostercheck.persistence.memory_backend import MemoryArchiveStore


def make_zip(files: dict[str, Any]) -> bytes:
    """ZIP bytes from ``{path: content}``; dicts and lists are JSON-encoded."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for path, content in files.items():
            if isinstance(content, (dict, list)):
                content = json.dumps(content)
            zf.writestr(path, content)
    return buf.getvalue()


def roster_zip(
    metadata: Any | None,
    attendance: dict[tuple[int, int], Any] | None = None,
    *,
    root: str = "",
    timestamp: str | None = None,
) -> bytes:
    """Build a roster archive.

    ``attendance`` maps ``(day, slot)`` to either a list of entries or raw
    entry content (str/bytes/dict) written as-is.
    """
    files: dict[str, Any] = {}
    if metadata is not None:
        files[f"{root}metadata.json"] = metadata
    for (day, slot), value in (attendance or {}).items():
        content = {"entries": value} if isinstance(value, list) else value
        files[f"{root}attendance/day-{day}/slot-{slot}.json"] = content
    if timestamp is not None:
        files[f"{root}last_modified.txt"] = timestamp
    return make_zip(files)


class FailingArchiveStore(MemoryArchiveStore):
    """IArchiveStore whose writes always fail."""

    def save(self, data: bytes, name: str) -> None:
        raise SessionStoreError("store is read-only")


class BrokenArchiveStore(MemoryArchiveStore):
    """IArchiveStore whose every operation fails."""

    def save(self, data: bytes, name: str) -> None:
        raise SessionStoreError("store unavailable")

    def load(self) -> tuple[bytes, str] | None:
        raise SessionStoreError("store unavailable")

    def clear(self) -> None:
        raise SessionStoreError("store unavailable")


class SlowArchiveStore(MemoryArchiveStore):
    """IArchiveStore whose writes take a while; ``started`` is set once a save begins."""

    def __init__(self, delay: float = 0.2) -> None:
        super().__init__()
        self.delay = delay
        self.started = threading.Event()

    def save(self, data: bytes, name: str) -> None:
        self.started.set()
        time.sleep(self.delay)
        super().save(data, name)


__all__ = [
    "BrokenArchiveStore",
    "FailingArchiveStore",
    "MemoryArchiveStore",
    "SlowArchiveStore",
    "make_zip",
    "roster_zip",
]
