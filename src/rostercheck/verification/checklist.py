"""Itemized checklist rendering of a ``VerificationReport``.

Long lists are shown as a bounded preview plus a remainder count, e.g.
``Missing attendance for slots: d1-s2, d1-s3, d2-s1 and 4 more``.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rostercheck.models.report import VerificationReport


class CheckStatus(StrEnum):
    PENDING = "pending"
    OK = "ok"
    ERROR = "error"


class ChecklistItem(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    key: str
    label: str
    status: CheckStatus


class Checklist(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    items: list[ChecklistItem] = Field(default_factory=list)
    details: list[str] = Field(default_factory=list)
    complete: bool = False


def preview(labels: Sequence[str], limit: int = 3) -> str:
    """Join the first ``limit`` labels and append ``and N more`` for the rest."""
    shown = ", ".join(labels[:limit])
    rest = len(labels) - limit
    return f"{shown} and {rest} more" if rest > 0 else shown


def _status(ok: bool) -> CheckStatus:
    return CheckStatus.OK if ok else CheckStatus.ERROR


def pending_checklist() -> Checklist:
    """Checklist shown before any archive has been imported."""
    return Checklist(items=[
        ChecklistItem(key="slots", label="Slots found: Pending", status=CheckStatus.PENDING),
        ChecklistItem(key="faculty", label="Faculty entries: Pending", status=CheckStatus.PENDING),
        ChecklistItem(key="attendance", label="Attendance present for all slots: Pending",
                      status=CheckStatus.PENDING),
        ChecklistItem(key="subjects", label="Subject info complete: Pending", status=CheckStatus.PENDING),
    ])


def build_checklist(report: VerificationReport, preview_limit: int = 3) -> Checklist:
    n_att = len(report.missing_attendance_slots)
    n_sub = len(report.missing_subject_info_slots)
    items = [
        ChecklistItem(key="slots", label=f"Slots found: {report.slots_count}",
                      status=_status(report.slots_found)),
        ChecklistItem(key="faculty", label=f"Faculty entries: {report.faculty_count}",
                      status=_status(report.faculty_found)),
        ChecklistItem(key="attendance", label=f"Attendance present for all slots: {n_att} missing",
                      status=_status(report.attendance_complete)),
        ChecklistItem(key="subjects", label=f"Subject info complete: {n_sub} issues",
                      status=_status(report.subject_info_complete)),
    ]

    details: list[str] = []
    if n_att:
        labels = [s.label for s in report.missing_attendance_slots]
        details.append(f"Missing attendance for slots: {preview(labels, preview_limit)}")
    if n_sub:
        labels = [s.label for s in report.missing_subject_info_slots]
        details.append(f"Slots with missing subject info: {preview(labels, preview_limit)}")
    if report.faculty:
        names = [f.faculty_name for f in report.faculty]
        details.append(f"Faculty sample: {preview(names, preview_limit)}")

    return Checklist(items=items, details=details, complete=report.is_complete)


def render_text(checklist: Checklist) -> str:
    marks = {CheckStatus.OK: "[x]", CheckStatus.ERROR: "[!]", CheckStatus.PENDING: "[ ]"}
    lines = [f"{marks[item.status]} {item.label}" for item in checklist.items]
    lines.extend(f"    {line}" for line in checklist.details)
    return "\n".join(lines)
