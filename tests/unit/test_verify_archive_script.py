"""Tests for the verify_archive command-line script."""

from __future__ import annotations

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from verify_archive import main  # noqa: E402

from tests.fakes import roster_zip  # noqa: E402

META = {
    "slots": [{"day": 1, "slot": 1, "subjectCode": "A", "subjectNames": "B"}],
    "faculty": [{"facultyName": "A"}],
}


def test_complete_archive_exits_zero(tmp_path, capsys):
    path = tmp_path / "final.zip"
    path.write_bytes(roster_zip(META, {(1, 1): [{"id": 1}]}))
    assert main([str(path)]) == 0
    assert "[x] Slots found: 1" in capsys.readouterr().out


def test_incomplete_archive_exits_one(tmp_path, capsys):
    path = tmp_path / "final.zip"
    path.write_bytes(roster_zip(META))
    assert main([str(path), "--json"]) == 1
    out = json.loads(capsys.readouterr().out)
    assert out["missingAttendanceSlots"] == [{"day": 1, "slot": 1}]


def test_corrupt_archive_exits_two(tmp_path, capsys):
    path = tmp_path / "bad.zip"
    path.write_bytes(b"nope")
    assert main([str(path)]) == 2
    assert "Import failed" in capsys.readouterr().err
