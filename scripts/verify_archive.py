"""Verify a roster archive on disk and print its checklist.

Usage:
    python scripts/verify_archive.py path/to/final.zip [--json]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rostercheck.core.config import AppSettings
from rostercheck.core.exceptions import ImportFailed
from rostercheck.core.logging import configure_logging
from rostercheck.verification.checklist import build_checklist, render_text
from rostercheck.verification.pipeline import verify_import_sync


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Verify a roster archive")
    parser.add_argument("archive", help="Path to the ZIP archive")
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    args = parser.parse_args(argv)

    settings = AppSettings()
    configure_logging(settings.log_level)

    try:
        report = verify_import_sync(Path(args.archive).read_bytes(), settings)
    except ImportFailed as exc:
        print(f"Import failed: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(report.model_dump(by_alias=True, mode="json"), indent=2))
    else:
        print(render_text(build_checklist(report, preview_limit=settings.preview_limit)))
    return 0 if report.is_complete else 1


if __name__ == "__main__":
    sys.exit(main())
