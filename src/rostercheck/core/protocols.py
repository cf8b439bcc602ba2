"""Protocol interfaces for rostercheck abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Persistence: Archive Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IArchiveStore(Protocol):
    """Durable key/value slots holding the last imported archive and its name."""

    def save(self, data: bytes, name: str) -> None: ...

    def load(self) -> tuple[bytes, str] | None: ...

    def clear(self) -> None: ...


# ---------------------------------------------------------------------------
# Archive access
# ---------------------------------------------------------------------------

@runtime_checkable
class IArchiveReader(Protocol):
    """Read-only lookup of archive entries by logical path."""

    def read_bytes(self, path: str) -> bytes | None: ...

    def read_text(self, *paths: str, encoding: str = "utf-8-sig") -> str | None: ...

    async def aread_text(self, *paths: str, encoding: str = "utf-8-sig") -> str | None: ...
