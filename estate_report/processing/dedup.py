"""Composite-key deduplication of merged listing rows."""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence, Set

from estate_report.core.config import DEDUP_COLUMNS
from estate_report.core.models import DedupResult, Record
from estate_report.core.utils import is_blank

logger = logging.getLogger(__name__)

NULL_TOKEN = "NULL"
KEY_SEPARATOR = "|"


def normalize_value(value: Any) -> str:
    """Map a cell to its key token.

    None, missing and empty strings all become ``NULL``. Numbers are rendered
    the way the export parser prints them, so ``1000``, ``1000.0`` and the
    string ``"1000"`` share one token.
    """

    if is_blank(value):
        return NULL_TOKEN
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def composite_key(record: Record, key_columns: Sequence[str] = DEDUP_COLUMNS) -> str:
    """Join the normalized key-column values of ``record`` with ``|``."""

    return KEY_SEPARATOR.join(normalize_value(record.get(column)) for column in key_columns)


def dedupe(records: Iterable[Record], key_columns: Sequence[str] = DEDUP_COLUMNS) -> DedupResult:
    """Drop every record whose composite key was already seen earlier.

    Single pass and stable: the first occurrence of each key survives.
    """

    if not key_columns:
        raise ValueError("key_columns must name at least one column")

    seen: Set[str] = set()
    unique: List[Record] = []
    original_count = 0

    for record in records:
        original_count += 1
        key = composite_key(record, key_columns)
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)

    result = DedupResult(original_count=original_count, final_count=len(unique), records=unique)
    logger.info(
        "Deduplicated %d records to %d (%d duplicates removed)",
        result.original_count,
        result.final_count,
        result.duplicate_count,
    )
    return result
