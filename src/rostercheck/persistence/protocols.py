"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from rostercheck.core.protocols import IArchiveStore

__all__ = ["IArchiveStore"]
