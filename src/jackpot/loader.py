"""Verification record loading.

A record arrives either as a path to a JSON file or as the JSON text
itself. A readable file always wins; anything else is parsed as inline
JSON.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from jackpot.errors import RecordLoadError, RoundDataError
from jackpot.models.round import RoundRecord

logger = logging.getLogger("jackpot.loader")


def parse_record(text: str, origin: str = "JSON string") -> RoundRecord:
    """Parse a JSON document into a RoundRecord."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordLoadError(f"Failed to parse {origin}: {exc}") from exc
    return RoundRecord.from_dict(data)


def load_record_file(path: Path) -> RoundRecord:
    """Read and parse a JSON record file."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise RecordLoadError(f"File {path} is not valid UTF-8: {exc}") from exc
    return parse_record(text, origin=f"JSON from file {path}")


def load_record(source: str) -> RoundRecord:
    """Load a record from a file path, falling back to inline JSON."""
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise RecordLoadError(f"File {path} is not valid UTF-8: {exc}") from exc
    except (OSError, ValueError) as exc:
        # Not a path (or not a readable UTF-8 file): treat as the payload.
        logger.debug("source is not a readable file (%s); parsing inline", exc)
        return parse_record(source)

    record = parse_record(text, origin=f"JSON from file {path}")
    logger.debug("loaded round %s from %s", record.round_id, path)
    return record


def ensure_verifiable(record: RoundRecord) -> RoundRecord:
    """Reject records the operator flagged as failed."""
    if not record.success:
        raise RoundDataError(
            f"Verification data contains error: {record.error or 'unknown error'}"
        )
    return record
