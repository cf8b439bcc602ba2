"""Import session: persists the raw archive and rebuilds the report on restore.

The store is injected, so the pipeline stays a pure function of archive bytes.
A restore always re-runs the full pipeline; no report is ever cached in the store.
"""

from __future__ import annotations

import asyncio
import logging

from rostercheck.core.config import AppSettings
from rostercheck.core.exceptions import ImportFailed, ImportSuperseded, SessionStoreError
from rostercheck.core.protocols import IArchiveStore
from rostercheck.models.report import ImportState
from rostercheck.verification.pipeline import inspect_import

_LOG = logging.getLogger(__name__)


class ImportSession:
    """Holds the current import for one wizard session.

    Only the most recently started run may publish its result. A run that
    finishes after a newer one began raises ``ImportSuperseded`` and leaves both
    the current state and the persisted archive alone.
    """

    def __init__(self, *, store: IArchiveStore, settings: AppSettings | None = None) -> None:
        self._store = store
        self._settings = settings or AppSettings()
        self._current: ImportState | None = None
        self._generation = 0
        # Store writes and clears run one at a time; each rechecks the generation.
        self._store_lock = asyncio.Lock()

    @property
    def current(self) -> ImportState | None:
        return self._current

    async def _run(self, data: bytes, file_name: str) -> tuple[int, ImportState]:
        self._generation += 1
        generation = self._generation
        report, stamp = await inspect_import(data, self._settings)
        if generation != self._generation:
            _LOG.info("Discarding result of superseded import run %d (%s)", generation, file_name)
            raise ImportSuperseded(generation, self._generation)
        return generation, ImportState(file_name=file_name, last_updated=stamp, report=report)

    async def import_archive(self, data: bytes, file_name: str) -> ImportState:
        """Verify an uploaded archive, publish its state and persist the raw bytes.

        Raises:
            ArchiveCorrupt, MetadataMalformed: prior state is left untouched.
            ImportSuperseded: a newer import started before this one finished.
        """
        generation, state = await self._run(data, file_name)
        self._current = state
        await self._persist(generation, data, file_name)
        _LOG.info("Imported %s (%d slots, %d faculty)", file_name,
                  state.report.slots_count, state.report.faculty_count)
        return state

    async def _persist(self, generation: int, data: bytes, file_name: str) -> None:
        async with self._store_lock:
            if generation != self._generation:
                _LOG.info("Skipping persistence of superseded import %s", file_name)
                return
            try:
                await asyncio.to_thread(self._store.save, data, file_name)
            except Exception as exc:
                _LOG.warning("Failed to persist archive %s: %s", file_name, exc)

    async def restore(self) -> ImportState | None:
        """Rebuild the session from the persisted archive, if there is one."""
        try:
            persisted = await asyncio.to_thread(self._store.load)
        except SessionStoreError as exc:
            _LOG.warning("Failed to read persisted archive: %s", exc)
            return None
        if persisted is None:
            return None

        data, name = persisted
        file_name = name or self._settings.session.default_file_name
        try:
            _, state = await self._run(data, file_name)
        except ImportFailed as exc:
            _LOG.warning("Failed to restore archive %s from storage: %s", file_name, exc)
            return None
        except ImportSuperseded:
            return None

        self._current = state
        _LOG.info("Restored %s from storage", file_name)
        return state

    async def reset(self) -> None:
        """Forget the current import and its persisted archive.

        Waits for any in-flight store write, so a save that started before the
        reset cannot outlive it.
        """
        self._generation += 1
        self._current = None
        async with self._store_lock:
            try:
                await asyncio.to_thread(self._store.clear)
            except SessionStoreError as exc:
                _LOG.warning("Failed to clear persisted archive: %s", exc)
