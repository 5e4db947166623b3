"""Reader for CSV listing exports."""
from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import List

from estate_report.core.models import Record
from estate_report.ingestion.common import (
    SourceReadError,
    clean_header,
    read_text,
    row_to_record,
)


def parse_csv(path: Path) -> List[Record]:
    """Parse a CSV export into typed row records."""

    try:
        content = read_text(path)
        rows = list(csv.reader(io.StringIO(content, newline="")))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise SourceReadError(path, str(exc)) from exc

    # Only truly empty lines are skipped; ",," still counts as a row of blanks.
    non_empty = [row for row in rows if row]
    if not non_empty:
        return []

    header = clean_header(non_empty[0])
    if not any(header):
        raise SourceReadError(path, "missing header row")

    return [row_to_record(header, row) for row in non_empty[1:]]
