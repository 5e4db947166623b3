"""Threshold filtering and ranking of deduplicated listings."""
from __future__ import annotations

import logging
import math
import re
from typing import Any, Iterable, List, Sequence

from estate_report.core.config import CITY, PROVINCE
from estate_report.core.models import RankedSelection, Record
from estate_report.core.utils import is_blank

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def to_number(value: Any) -> float:
    """Parse the leading number of ``value``, falling back to 0.0 instead of raising.

    Trailing text is ignored, so ``"1500만원"`` is 1500 and ``"1,500"`` is 1.
    Infinite or NaN results count as 0.0 as well.
    """

    if is_blank(value) or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    else:
        match = _LEADING_NUMBER.match(str(value))
        if match is None:
            return 0.0
        number = float(match.group(1))
    if not math.isfinite(number):
        return 0.0
    return number


def filter_by_threshold(records: Iterable[Record], field: str, threshold: float) -> List[Record]:
    return [record for record in records if to_number(record.get(field)) >= threshold]


def rank_descending(records: Iterable[Record], field: str) -> List[Record]:
    # sorted() is stable, so ties keep their first-seen order.
    return sorted(records, key=lambda record: to_number(record.get(field)), reverse=True)


def distinct_values(records: Iterable[Record], field: str) -> List[str]:
    """Return the sorted distinct non-blank values of ``field``."""

    values = {str(record.get(field)) for record in records if not is_blank(record.get(field))}
    return sorted(values)


def select_top(
    records: Sequence[Record],
    threshold_field: str,
    threshold: float,
    sort_field: str,
    limit: int = 100,
) -> RankedSelection:
    """Keep records at or above ``threshold``, rank them and cap the list."""

    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    matched = rank_descending(filter_by_threshold(records, threshold_field, threshold), sort_field)
    selection = RankedSelection(
        records=matched[:limit],
        matched_count=len(matched),
        limit=limit,
        provinces=distinct_values(matched, PROVINCE),
        cities=distinct_values(matched, CITY),
    )
    logger.info(
        "%d of %d records have %s >= %s; showing %d",
        selection.matched_count,
        len(records),
        threshold_field,
        threshold,
        selection.shown_count,
    )
    return selection
