"""Shared loader for the JSON files exported by the order store."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from osr.domain.exceptions import DataIntegrityError

logger = logging.getLogger(__name__)


def load_records(file_path: Path) -> list[dict]:
    """Return the list of records in *file_path*.

    A missing file is an empty store.  Floats are parsed as Decimal so
    amounts keep the precision they were written with.
    """
    if not file_path.exists():
        logger.debug("%s does not exist, treating as empty", file_path)
        return []
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"), parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise DataIntegrityError(f"{file_path.name} is not valid JSON: {exc}") from exc
    if not isinstance(raw, list):
        raise DataIntegrityError(f"{file_path.name} must contain a JSON list")
    if not all(isinstance(record, dict) for record in raw):
        raise DataIntegrityError(f"{file_path.name} must contain only JSON objects")
    logger.debug("Loaded %d records from %s", len(raw), file_path)
    return raw


def required(record: dict, key: str, source: str) -> object:
    try:
        return record[key]
    except (KeyError, TypeError) as exc:
        raise DataIntegrityError(f"{source}: record is missing '{key}'") from exc


def text(value: object, default: str = "") -> str:
    """Optional text field; missing, null or empty gives *default*."""
    if value is None or value == "":
        return default
    return str(value)
