"""Shared helpers for turning raw export cells into typed record values."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Iterable, List, Optional

_INT_RE = re.compile(r"^\s*-?\d+\s*$")
_FLOAT_RE = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$")
# Larger magnitudes lose precision as floats, so such cells stay text.
_MAX_SAFE_INTEGER = 2 ** 53


class SourceReadError(Exception):
    """A single export file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path.name}: {reason}")
        self.path = path
        self.reason = reason


def read_text(path: Path) -> str:
    """Read UTF-8 text from disk, dropping a leading byte-order mark.

    Spreadsheet tools commonly prepend a BOM to CSV exports, which would
    otherwise end up glued to the first header name.
    """

    return path.read_text(encoding="utf-8-sig")


def coerce_cell(raw: Any) -> Any:
    """Convert a text cell into None, bool, int or float where it looks like one.

    Non-string values (cells that already carry a type, e.g. from a workbook)
    pass through untouched apart from empty strings becoming None.
    """

    if raw is None:
        return None
    if not isinstance(raw, str):
        return raw
    if raw == "":
        return None
    if raw in ("true", "TRUE"):
        return True
    if raw in ("false", "FALSE"):
        return False
    if not _FLOAT_RE.match(raw):
        return raw
    number = float(raw)
    if not -_MAX_SAFE_INTEGER < number < _MAX_SAFE_INTEGER:
        return raw
    return int(raw) if _INT_RE.match(raw) else number


def clean_header(cells: Iterable[Any]) -> List[Optional[str]]:
    """Normalize header cells; blank headers become None and are ignored later."""

    header: List[Optional[str]] = []
    for cell in cells:
        name = "" if cell is None else str(cell).strip()
        header.append(name or None)
    return header


def row_to_record(header: List[Optional[str]], cells: Iterable[Any]) -> dict:
    """Zip a data row onto the header, typing each cell.

    Short rows simply lack the trailing columns; cells beyond the header are
    dropped.
    """

    return {
        name: coerce_cell(value)
        for name, value in zip(header, cells)
        if name is not None
    }


def is_empty_row(cells: Iterable[Any]) -> bool:
    return all(cell is None or str(cell).strip() == "" for cell in cells)
