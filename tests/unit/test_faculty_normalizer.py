"""Tests for faculty roster normalization."""

from __future__ import annotations

from rostercheck.models.roster import FacultyRecord
from rostercheck.verification.faculty_normalizer import normalize_faculty


def test_fully_populated_entry():
    [record] = normalize_faculty([{
        "sNo": 7, "facultyName": " A. Rao ", "facultyId": "F001", "designation": "Professor",
        "department": "CSE", "phoneNo": "9000000001",
    }])
    assert record == FacultyRecord(
        s_no=7, faculty_name="A. Rao", faculty_id="F001", designation="Professor",
        department="CSE", phone_no="9000000001",
    )


def test_missing_fields_default_blank_and_position():
    records = normalize_faculty([{"facultyName": "A"}, {"facultyName": "B"}])
    assert records[1] == FacultyRecord(s_no=2, faculty_name="B")
    assert records[0].faculty_id == ""


def test_non_numeric_serial_falls_back_to_position():
    records = normalize_faculty([{"sNo": "x"}, {"sNo": True}, {"sNo": 2.5}, {"sNo": None}])
    assert [r.s_no for r in records] == [1, 2, 3, 4]


def test_numeric_serial_strings_and_floats():
    records = normalize_faculty([{"sNo": "12"}, {"sNo": 4.0}, {"sNo": " 9 "}])
    assert [r.s_no for r in records] == [12, 4, 9]


def test_non_mapping_entries_yield_blank_records():
    records = normalize_faculty(["oops", None, 42, {"facultyName": "Z"}])
    assert len(records) == 4
    assert records[0] == FacultyRecord(s_no=1)
    assert records[3].faculty_name == "Z"


def test_non_string_values_stringified():
    [record] = normalize_faculty([{"phoneNo": 9876543210, "facultyId": 12.0, "department": ["x"]}])
    assert record.phone_no == "9876543210"
    assert record.faculty_id == "12"
    assert record.department == ""


def test_serializes_camel_case():
    dumped = FacultyRecord(s_no=1, faculty_name="A").model_dump(by_alias=True)
    assert dumped == {
        "sNo": 1, "facultyName": "A", "facultyId": "", "designation": "",
        "department": "", "phoneNo": "",
    }


def test_length_preserved():
    raw = [{}] * 25
    assert len(normalize_faculty(raw)) == 25
