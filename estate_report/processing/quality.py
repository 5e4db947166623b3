"""Completeness figures for the identifying listing fields."""
from __future__ import annotations

from typing import Iterable, Sequence

from estate_report.core.config import CITY, COMPLEX_CODE, COMPLEX_NAME, PROVINCE
from estate_report.core.models import QualityStats, Record
from estate_report.core.utils import is_blank

UNKNOWN_REGION = "알 수 없음"


def score(records: Sequence[Record]) -> QualityStats:
    """Count how many records carry a complex code and a complex name."""

    with_code = sum(1 for record in records if not is_blank(record.get(COMPLEX_CODE)))
    with_name = sum(1 for record in records if not is_blank(record.get(COMPLEX_NAME)))
    total = len(records)
    return QualityStats(
        total=total,
        with_complex_code=with_code,
        without_complex_code=total - with_code,
        with_complex_name=with_name,
        without_complex_name=total - with_name,
    )


def region_label(record: Record) -> str:
    province = record.get(PROVINCE)
    city = record.get(CITY)
    if is_blank(province) or is_blank(city):
        return UNKNOWN_REGION
    return f"{province} {city}"


def count_regions(records: Iterable[Record]) -> int:
    """Number of distinct province/city pairs; incomplete pairs count once."""

    return len({region_label(record) for record in records})
