"""Write a sample roster archive for local testing of the import phase.

Usage:
    python scripts/build_sample_archive.py --output sample.zip --days 2 --slots 3
"""

from __future__ import annotations

import argparse
import io
import json
import zipfile
from pathlib import Path
from typing import Any

SAMPLE_FACULTY: list[dict[str, Any]] = [
    {"sNo": 1, "facultyName": "A. Rao", "facultyId": "F001", "designation": "Professor",
     "department": "CSE", "phoneNo": "9000000001"},
    {"sNo": 2, "facultyName": "B. Iyer", "facultyId": "F002", "designation": "Associate Professor",
     "department": "ECE", "phoneNo": "9000000002"},
    {"facultyName": "C. Das", "department": "MECH"},
]


def build_slots(days: int, slots: int, *, legacy: bool = False) -> list[dict[str, Any]]:
    """Declare every (day, slot) pair with a subject assignment."""
    name_field = "subjectName" if legacy else "subjectNames"
    return [
        {"day": d, "slot": s, "subjectCode": f"SUB{d}{s:02d}", name_field: f"Subject {d}.{s}"}
        for d in range(1, days + 1)
        for s in range(1, slots + 1)
    ]


def build_archive(
    slots: list[dict[str, Any]],
    faculty: list[dict[str, Any]],
    *,
    skip_attendance: set[tuple[int, int]] | None = None,
    internal: bool = False,
    legacy: bool = False,
    timestamp: str | None = "2024-05-01T10:00:00Z",
) -> bytes:
    """Return ZIP bytes with metadata, per-slot attendance and a timestamp."""
    root = "internal/" if internal else ""
    skip = skip_attendance or set()
    meta = {"dutySlots": slots, "facultyList": faculty} if legacy else {"slots": slots, "faculty": faculty}
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        zf.writestr(f"{root}metadata.json", json.dumps(meta, indent=2))
        for slot in slots:
            key = (slot["day"], slot["slot"])
            if key in skip:
                continue
            entries = [{"facultyId": f.get("facultyId", ""), "status": "present"} for f in faculty[:2]]
            zf.writestr(f"{root}attendance/day-{key[0]}/slot-{key[1]}.json", json.dumps({"entries": entries}))
        if timestamp:
            zf.writestr(f"{root}last_modified.txt", timestamp)
    return buf.getvalue()


def main() -> None:
    parser = argparse.ArgumentParser(description="Build a sample roster archive")
    parser.add_argument("--output", default="sample.zip", help="Output ZIP path")
    parser.add_argument("--days", type=int, default=2, help="Number of exam days")
    parser.add_argument("--slots", type=int, default=2, help="Slots per day")
    parser.add_argument("--legacy", action="store_true", help="Use legacy field names")
    parser.add_argument("--internal", action="store_true", help="Nest entries under internal/")
    args = parser.parse_args()

    slots = build_slots(args.days, args.slots, legacy=args.legacy)
    data = build_archive(slots, SAMPLE_FACULTY, internal=args.internal, legacy=args.legacy)
    Path(args.output).write_bytes(data)
    print(f"Wrote {len(slots)} slots and {len(SAMPLE_FACULTY)} faculty to {args.output}")


if __name__ == "__main__":
    main()
