"""Map raw faculty entries to canonical ``FacultyRecord``s. Never fails."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from rostercheck.models.roster import FacultyRecord

_STRING_FIELDS = {
    "faculty_name": "facultyName",
    "faculty_id": "facultyId",
    "designation": "designation",
    "department": "department",
    "phone_no": "phoneNo",
}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _as_serial(value: Any, position: int) -> int:
    """Raw ``sNo`` if it is an integral number, else the 1-based position."""
    if isinstance(value, bool) or value is None:
        return position
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) and value.is_integer() else position
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return position
        return int(number) if math.isfinite(number) and number.is_integer() else position
    return position


def normalize_entry(raw: Any, position: int) -> FacultyRecord:
    if not isinstance(raw, Mapping):
        return FacultyRecord(s_no=position)
    fields = {attr: _as_text(raw.get(key)) for attr, key in _STRING_FIELDS.items()}
    return FacultyRecord(s_no=_as_serial(raw.get("sNo"), position), **fields)


def normalize_faculty(raw: Sequence[Any]) -> list[FacultyRecord]:
    """One record per input entry, in input order."""
    return [normalize_entry(entry, i) for i, entry in enumerate(raw, start=1)]
