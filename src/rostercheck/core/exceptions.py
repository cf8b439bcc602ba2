"""rostercheck exception hierarchy."""

from __future__ import annotations


class RosterCheckError(Exception):
    """Base exception for all rostercheck errors."""


class ImportFailed(RosterCheckError):
    """An import attempt could not produce a verification report."""


class ArchiveCorrupt(ImportFailed):
    """The uploaded bytes are not a readable archive."""

    def __init__(self, message: str = "Archive could not be opened") -> None:
        super().__init__(message)


class MetadataMalformed(ImportFailed):
    """The metadata document exists but cannot be decoded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Metadata document {path!r} is malformed: {reason}")


class ImportSuperseded(RosterCheckError):
    """A newer import started while this one was still running."""

    def __init__(self, generation: int, latest: int) -> None:
        self.generation = generation
        self.latest = latest
        super().__init__(f"Import run {generation} superseded by run {latest}")


class SessionStoreError(RosterCheckError):
    """Persisted session store operation failed."""
