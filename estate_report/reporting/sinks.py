"""Sinks for writing the report and the deduplicated dataset to disk."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, Iterable, List

from openpyxl import Workbook


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def collect_headers(rows: Iterable[Dict[str, Any]]) -> List[str]:
    """Union of row keys in first-seen order."""

    headers: Dict[str, None] = {}
    for row in rows:
        for key in row:
            headers.setdefault(key, None)
    return list(headers)


def _cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def write_text(content: str, output_path: Path) -> None:
    ensure_output_dir(output_path)
    output_path.write_text(content, encoding="utf-8")


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write rows to a CSV file using the union of their keys as headers."""

    rows = list(rows)
    ensure_output_dir(output_path)
    if not rows:
        return

    headers = collect_headers(rows)
    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=headers)
        writer.writeheader()
        for row in rows:
            writer.writerow({header: _cell(row.get(header)) for header in headers})


def write_excel(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write rows to an Excel workbook using openpyxl."""

    rows = list(rows)
    if not rows:
        return

    ensure_output_dir(output_path)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "deduplicated_listings"
    headers = collect_headers(rows)
    sheet.append(headers)
    for row in rows:
        sheet.append([_cell(row.get(header)) for header in headers])
    workbook.save(output_path)
