"""Locate and decode the roster metadata document."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from rostercheck.archive.accessor import ENTRY_READ_ERRORS, Archive
from rostercheck.core.config import AppSettings
from rostercheck.core.exceptions import MetadataMalformed
from rostercheck.models.roster import RosterMetadata

_LOG = logging.getLogger(__name__)


async def _locate(archive: Archive, paths: list[str]) -> tuple[str, bytes] | None:
    for path in paths:
        try:
            raw = await archive.aread_bytes(path)
        except ENTRY_READ_ERRORS as exc:
            raise MetadataMalformed(path, f"entry unreadable: {exc}") from exc
        if raw is not None:
            return path, raw
    return None


def decode_metadata(path: str, raw: bytes) -> RosterMetadata:
    """Decode one metadata document. Raises ``MetadataMalformed``."""
    try:
        doc = json.loads(raw.decode("utf-8-sig"))
    except UnicodeDecodeError as exc:
        raise MetadataMalformed(path, f"not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise MetadataMalformed(path, f"invalid JSON: {exc}") from exc

    if not isinstance(doc, dict):
        raise MetadataMalformed(path, f"expected a JSON object, got {type(doc).__name__}")

    # An explicit null for a sequence counts as absent.
    doc = {k: v for k, v in doc.items() if v is not None}
    try:
        return RosterMetadata.model_validate(doc)
    except ValidationError as exc:
        raise MetadataMalformed(path, f"{exc.error_count()} schema error(s): {exc}") from exc


async def parse_metadata(archive: Archive, settings: AppSettings | None = None) -> RosterMetadata:
    """Decode the metadata document into the canonical ``RosterMetadata`` shape.

    An archive without a metadata document yields an empty roster, which is a
    valid outcome. A document that is present but cannot be decoded raises
    ``MetadataMalformed``.
    """
    settings = settings or AppSettings()
    found = await _locate(archive, settings.archive.metadata_paths)
    if found is None:
        _LOG.info("No metadata document at %s", settings.archive.metadata_paths)
        return RosterMetadata()

    path, raw = found
    meta = decode_metadata(path, raw)
    _LOG.debug("Parsed %s: %d slots, %d faculty", path, len(meta.slots), len(meta.faculty))
    return meta


async def read_timestamp(archive: Archive, settings: AppSettings | None = None) -> str | None:
    """Return the optional plain-text last-modified stamp, stripped."""
    settings = settings or AppSettings()
    try:
        text = await archive.aread_text(*settings.archive.timestamp_paths)
    except ENTRY_READ_ERRORS as exc:
        _LOG.warning("Ignoring unreadable timestamp entry: %s", exc)
        return None
    if text is None:
        return None
    return text.strip() or None
