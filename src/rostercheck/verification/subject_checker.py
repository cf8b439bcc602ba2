"""Subject assignment completeness per duty slot."""

from __future__ import annotations

from collections.abc import Sequence

from rostercheck.models.report import MissingSubjectInfo, SubjectField
from rostercheck.models.roster import SlotDeclaration, is_blank


def missing_subject_fields(slot: SlotDeclaration) -> frozenset[SubjectField]:
    missing = set()
    if is_blank(slot.subject_code):
        missing.add(SubjectField.SUBJECT_CODE)
    if is_blank(slot.subject_names):
        missing.add(SubjectField.SUBJECT_NAMES)
    return frozenset(missing)


def check_subjects(slots: Sequence[SlotDeclaration]) -> list[MissingSubjectInfo]:
    """List every slot lacking a subject code or subject names, in declaration order."""
    out: list[MissingSubjectInfo] = []
    for slot in slots:
        missing = missing_subject_fields(slot)
        if missing:
            out.append(MissingSubjectInfo(day=slot.day, slot=slot.slot, missing=missing))
    return out
