"""Verification report models consumed by the wizard shell."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer
from pydantic.alias_generators import to_camel

from rostercheck.models.roster import FacultyRecord

_REPORT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SubjectField(StrEnum):
    SUBJECT_CODE = "subjectCode"
    SUBJECT_NAMES = "subjectNames"


class SlotOutcome(StrEnum):
    PRESENT = "PRESENT"
    MISSING = "MISSING"
    ERROR = "ERROR"


class SlotRef(BaseModel):
    """A ``(day, slot)`` natural key."""

    model_config = _REPORT_CONFIG

    day: int
    slot: int

    @property
    def label(self) -> str:
        return f"d{self.day}-s{self.slot}"


class MissingSubjectInfo(BaseModel):
    """A slot whose subject assignment is incomplete, with exactly what is absent."""

    model_config = _REPORT_CONFIG

    day: int
    slot: int
    missing: frozenset[SubjectField]

    @field_serializer("missing")
    def _serialize_missing(self, missing: frozenset[SubjectField]) -> list[str]:
        return [f.value for f in SubjectField if f in missing]

    @property
    def label(self) -> str:
        fields = ",".join(f.value for f in SubjectField if f in self.missing)
        return f"d{self.day}-s{self.slot}({fields})"


class VerificationReport(BaseModel):
    """Immutable, fully-enumerated completeness summary of one import."""

    model_config = _REPORT_CONFIG

    slots_found: bool = False
    slots_count: int = 0
    faculty_count: int = 0
    missing_attendance_slots: tuple[SlotRef, ...] = ()
    missing_subject_info_slots: tuple[MissingSubjectInfo, ...] = ()
    faculty: tuple[FacultyRecord, ...] = ()

    @computed_field
    @property
    def faculty_found(self) -> bool:
        return self.faculty_count > 0

    @computed_field
    @property
    def attendance_complete(self) -> bool:
        return not self.missing_attendance_slots

    @computed_field
    @property
    def subject_info_complete(self) -> bool:
        return not self.missing_subject_info_slots

    @computed_field
    @property
    def is_complete(self) -> bool:
        """True when the import phase may hand over to the next wizard phase."""
        return (
            self.slots_found and self.faculty_found
            and self.attendance_complete and self.subject_info_complete
        )


class ImportState(BaseModel):
    """What the session exposes to the UI after an import or restore."""

    model_config = _REPORT_CONFIG

    file_name: str
    last_updated: Optional[str] = None
    report: VerificationReport = Field(default_factory=VerificationReport)

    @computed_field
    @property
    def can_proceed(self) -> bool:
        return self.report.is_complete
