"""Cell formatting for the listing table of the HTML report."""
from __future__ import annotations

import html
from typing import Any, List, Optional, Sequence

from estate_report.core.config import (
    CITY,
    COMPLEX_CODE,
    COMPLEX_NAME,
    PRICE_DIFF,
    PROVINCE,
    SALE_PRICE,
    SUPPLY_AREA,
    TOWN,
    PipelineConfig,
)
from estate_report.core.models import Record
from estate_report.core.utils import is_blank

REGION_COLUMNS = {PROVINCE, CITY, TOWN}


def _text(value: Any) -> str:
    if is_blank(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return html.escape(str(value))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_manwon(value: Any) -> str:
    """Format an amount in 만원 with thousands separators."""

    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.1f}"
    return f"{int(value):,}"


def visible_columns(records: Sequence[Record], config: PipelineConfig) -> List[str]:
    """Display columns that actually exist in the data.

    The first deduplicated record defines the available columns, mirroring
    how the export tools write one header for the whole file.
    """

    if not records:
        return []
    first = records[0]
    return [column for column in config.display_columns if column in first]


def link_for(record: Record, config: PipelineConfig) -> Optional[str]:
    """Return the listing link for a record, or None when it is not linkable."""

    if config.link_field is None:
        return None
    code = record.get(config.link_field)
    if is_blank(code):
        return None
    if isinstance(code, float) and code.is_integer():
        code = int(code)
    return config.link_template.format(code=code)


def format_cell(record: Record, column: str, config: PipelineConfig) -> str:
    """Return the HTML fragment for one table cell."""

    value = record.get(column)

    if column == COMPLEX_NAME and not is_blank(value):
        url = link_for(record, config)
        if url:
            return (
                f'<a class="complex-link" href="{html.escape(url)}" target="_blank" '
                f'rel="noopener">{_text(value)}</a>'
            )
        if config.link_field is not None:
            return f'<span class="muted">{_text(value)}</span> <span class="badge">링크없음</span>'
        return _text(value)

    if column == COMPLEX_CODE:
        if is_blank(value):
            return '<span class="missing">없음</span>'
        return f'<span class="present">{_text(value)}</span>'

    if column == PRICE_DIFF and _is_number(value):
        return f'<span class="diff">+{_format_manwon(value)}만원</span>'

    if column == SALE_PRICE and _is_number(value):
        return f'<span class="price">{_format_manwon(value)}만원</span>'

    if column == SUPPLY_AREA:
        return f'<span class="area">{_text(value)}</span>'

    if column in REGION_COLUMNS:
        return f'<span class="region">{_text(value)}</span>'

    return _text(value)


def record_to_cells(record: Record, columns: Sequence[str], config: PipelineConfig) -> List[str]:
    return [format_cell(record, column, config) for column in columns]
