"""Import-verification pipeline: the single entry point the wizard calls.

Archive -> metadata -> {attendance, subjects, faculty} -> report. The pipeline
is a pure function of the archive bytes; persistence lives in the session layer.
"""

from __future__ import annotations

import asyncio
import logging

from rostercheck.archive.accessor import Archive
from rostercheck.core.config import AppSettings
from rostercheck.models.report import VerificationReport
from rostercheck.verification.attendance_checker import check_attendance
from rostercheck.verification.faculty_normalizer import normalize_faculty
from rostercheck.verification.metadata_parser import parse_metadata, read_timestamp
from rostercheck.verification.report_builder import build_report
from rostercheck.verification.subject_checker import check_subjects

_LOG = logging.getLogger(__name__)


async def verify_archive(archive: Archive, settings: AppSettings | None = None) -> VerificationReport:
    settings = settings or AppSettings()
    metadata = await parse_metadata(archive, settings)

    subject_missing = check_subjects(metadata.slots)
    attendance_missing = await check_attendance(archive, metadata.slots, settings)
    faculty = normalize_faculty(metadata.faculty)

    report = build_report(metadata, attendance_missing, subject_missing, faculty)
    _LOG.info(
        "Verified archive: %d slots, %d faculty, %d missing attendance, %d missing subject info",
        report.slots_count, report.faculty_count,
        len(report.missing_attendance_slots), len(report.missing_subject_info_slots),
    )
    return report


async def inspect_import(
    raw: bytes, settings: AppSettings | None = None
) -> tuple[VerificationReport, str | None]:
    """Verify ``raw`` and also return the archive's last-modified stamp."""
    settings = settings or AppSettings()
    archive = Archive.open(raw)
    try:
        report = await verify_archive(archive, settings)
        return report, await read_timestamp(archive, settings)
    finally:
        archive.close()


async def verify_import(raw: bytes, settings: AppSettings | None = None) -> VerificationReport:
    """Verify raw archive bytes.

    Raises:
        ArchiveCorrupt: the bytes are not a readable archive.
        MetadataMalformed: the metadata document is present but undecodable.
    """
    report, _ = await inspect_import(raw, settings)
    return report


def verify_import_sync(raw: bytes, settings: AppSettings | None = None) -> VerificationReport:
    """Blocking wrapper around ``verify_import`` for scripts."""
    return asyncio.run(verify_import(raw, settings))
