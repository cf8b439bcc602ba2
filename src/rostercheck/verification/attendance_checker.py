"""Per-slot attendance presence check.

Each declared slot is checked as an independent task that yields a tagged
``SlotOutcome``. Failures are folded into the outcome rather than raised, so one
corrupt attendance entry never blocks verification of the other slots. Results
are gathered back in declaration order.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Sequence

from pydantic import ValidationError

from rostercheck.core.config import AppSettings
from rostercheck.core.protocols import IArchiveReader
from rostercheck.models.report import SlotOutcome, SlotRef
from rostercheck.models.roster import AttendanceRecord, SlotDeclaration

_LOG = logging.getLogger(__name__)


def attendance_paths(slot: SlotDeclaration, settings: AppSettings) -> list[str]:
    """Candidate entry paths for one slot, primary first."""
    return [t.format(day=slot.day, slot=slot.slot) for t in settings.archive.attendance_paths]


def decode_attendance(text: str) -> AttendanceRecord:
    """Decode an attendance entry. Raises ``ValueError`` on a bad document."""
    doc = json.loads(text)
    if not isinstance(doc, dict):
        raise ValueError(f"expected a JSON object, got {type(doc).__name__}")
    try:
        return AttendanceRecord.model_validate(doc)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc


async def check_slot(archive: IArchiveReader, slot: SlotDeclaration, settings: AppSettings) -> SlotOutcome:
    paths = attendance_paths(slot, settings)
    try:
        text = await archive.aread_text(*paths)
        if text is None:
            return SlotOutcome.MISSING
        record = decode_attendance(text)
    except Exception as exc:
        _LOG.warning("Attendance for d%s-s%s unreadable, counting as missing: %s",
                     slot.day, slot.slot, exc)
        return SlotOutcome.ERROR
    return SlotOutcome.PRESENT if record.is_present else SlotOutcome.MISSING


async def check_attendance(
    archive: IArchiveReader,
    slots: Sequence[SlotDeclaration],
    settings: AppSettings | None = None,
) -> list[SlotRef]:
    """Return the declared slots whose attendance is absent, empty or unreadable."""
    settings = settings or AppSettings()
    sem = asyncio.Semaphore(max(1, settings.archive.max_concurrency))

    async def _bounded(slot: SlotDeclaration) -> SlotOutcome:
        async with sem:
            return await check_slot(archive, slot, settings)

    outcomes = await asyncio.gather(*(_bounded(s) for s in slots))

    missing = [
        SlotRef(day=s.day, slot=s.slot)
        for s, outcome in zip(slots, outcomes)
        if outcome is not SlotOutcome.PRESENT
    ]
    if missing:
        _LOG.info("%d of %d slots missing attendance", len(missing), len(slots))
    return missing
