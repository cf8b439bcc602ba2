"""Tests for the sample archive script."""

from __future__ import annotations

import sys
from pathlib import Path

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from build_sample_archive import SAMPLE_FACULTY, build_archive, build_slots  # noqa: E402

from rostercheck.verification.pipeline import verify_import_sync  # noqa: E402


class TestBuildSlots:
    def test_declares_every_day_slot_pair(self):
        slots = build_slots(2, 3)
        assert [(s["day"], s["slot"]) for s in slots] == [
            (1, 1), (1, 2), (1, 3), (2, 1), (2, 2), (2, 3),
        ]

    def test_legacy_subject_name(self):
        assert "subjectName" in build_slots(1, 1, legacy=True)[0]


class TestBuildArchive:
    def test_sample_archive_verifies_clean(self):
        report = verify_import_sync(build_archive(build_slots(2, 2), SAMPLE_FACULTY))
        assert report.is_complete
        assert report.faculty_count == len(SAMPLE_FACULTY)
        assert report.faculty[2].s_no == 3

    def test_legacy_internal_layout(self):
        data = build_archive(build_slots(1, 2, legacy=True), SAMPLE_FACULTY, internal=True, legacy=True)
        assert verify_import_sync(data).is_complete

    def test_skipped_attendance_reported(self):
        data = build_archive(build_slots(1, 2), SAMPLE_FACULTY, skip_attendance={(1, 2)})
        report = verify_import_sync(data)
        assert [(m.day, m.slot) for m in report.missing_attendance_slots] == [(1, 2)]
