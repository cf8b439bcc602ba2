"""Pure aggregation of checker outputs into a ``VerificationReport``."""

from __future__ import annotations

from collections.abc import Sequence

from rostercheck.models.report import MissingSubjectInfo, SlotRef, VerificationReport
from rostercheck.models.roster import FacultyRecord, RosterMetadata


def build_report(
    metadata: RosterMetadata,
    attendance_missing: Sequence[SlotRef],
    subject_missing: Sequence[MissingSubjectInfo],
    faculty: Sequence[FacultyRecord],
) -> VerificationReport:
    slots_count = len(metadata.slots)
    return VerificationReport(
        slots_found=slots_count > 0,
        slots_count=slots_count,
        faculty_count=len(faculty),
        missing_attendance_slots=tuple(attendance_missing),
        missing_subject_info_slots=tuple(subject_missing),
        faculty=tuple(faculty),
    )
