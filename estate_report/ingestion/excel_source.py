"""Reader for Excel (.xlsx) listing exports."""
from __future__ import annotations

import zipfile
from pathlib import Path
from typing import List

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from estate_report.core.models import Record
from estate_report.ingestion.common import (
    SourceReadError,
    clean_header,
    is_empty_row,
    row_to_record,
)


def parse_xlsx(path: Path) -> List[Record]:
    """Parse the first worksheet of a workbook; the first row is the header."""

    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (OSError, InvalidFileException, zipfile.BadZipFile, KeyError) as exc:
        raise SourceReadError(path, str(exc)) from exc

    try:
        sheet = workbook.worksheets[0]
        rows = [row for row in sheet.iter_rows(values_only=True) if not is_empty_row(row)]
    except (SyntaxError, ValueError, KeyError, zipfile.BadZipFile) as exc:
        # openpyxl parses sheet XML lazily in read-only mode
        raise SourceReadError(path, f"unreadable worksheet: {exc}") from exc
    finally:
        workbook.close()

    if not rows:
        return []

    header = clean_header(rows[0])
    if not any(header):
        raise SourceReadError(path, "missing header row")

    return [row_to_record(header, row) for row in rows[1:]]
