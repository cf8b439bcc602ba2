"""Roster metadata models: the canonical shape of an imported archive.

Legacy field names are resolved here, at the parser boundary, through
``AliasChoices`` and before-validators. Nothing downstream of these models knows that ``dutySlots``,
``facultyList`` or a singular ``subjectName`` ever existed.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

_LOG = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    """None, a whitespace-only string, or a list holding nothing but blanks."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list):
        return all(is_blank(v) for v in value)
    return False


def _subject_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _subject_names(value: Any) -> str | list[str] | None:
    if isinstance(value, list):
        return [t for t in (_subject_text(v) for v in value) if t is not None]
    return _subject_text(value)


class SlotDeclaration(BaseModel):
    """One declared duty slot from the metadata document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    day: int
    slot: int
    subject_code: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("subjectCode", "subject_code"),
        serialization_alias="subjectCode",
    )
    subject_names: Optional[Union[str, list[str]]] = Field(
        default=None,
        validation_alias=AliasChoices("subjectNames", "subject_names"),
        serialization_alias="subjectNames",
    )

    @model_validator(mode="before")
    @classmethod
    def _canonical_subjects(cls, data: Any) -> Any:
        """Coerce subject values; unusable ones become None and read as missing.

        A blank ``subjectNames`` falls back to the legacy ``subjectName``.
        """
        if not isinstance(data, dict):
            return data
        out = {k: v for k, v in data.items() if k not in ("subject_code", "subject_names", "subjectName")}
        names = _subject_names(data.get("subjectNames", data.get("subject_names")))
        if is_blank(names):
            legacy = _subject_names(data.get("subjectName"))
            if not is_blank(legacy):
                names = legacy
        out["subjectCode"] = _subject_text(data.get("subjectCode", data.get("subject_code")))
        out["subjectNames"] = names
        return out


class RosterMetadata(BaseModel):
    """Decoded top-level metadata document.

    ``faculty`` stays untyped: raw entries are handed to the faculty normalizer,
    which never rejects anything.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    slots: list[SlotDeclaration] = Field(
        default_factory=list,
        validation_alias=AliasChoices("slots", "dutySlots"),
    )
    faculty: list[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("faculty", "facultyList"),
    )

    @field_validator("slots", mode="before")
    @classmethod
    def _object_slots_only(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        kept = [s for s in v if isinstance(s, dict)]
        if len(kept) != len(v):
            _LOG.warning("Skipping %d slot declaration(s) that are not objects", len(v) - len(kept))
        return kept


class AttendanceRecord(BaseModel):
    """Attendance entries recorded against one duty slot."""

    model_config = ConfigDict(extra="ignore")

    entries: list[Any] = Field(default_factory=list)

    @property
    def is_present(self) -> bool:
        return len(self.entries) > 0


class FacultyRecord(BaseModel):
    """Canonical faculty roster entry. Every field has a blank default."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    s_no: int
    faculty_name: str = ""
    faculty_id: str = ""
    designation: str = ""
    department: str = ""
    phone_no: str = ""
