"""Pytest configuration to make the local package importable without installation."""
import csv
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from estate_report.cli import main as cli_main
from estate_report.core.config import (
    CITY,
    COMPLEX_CODE,
    COMPLEX_NAME,
    DEDUP_COLUMNS,
    PRICE_DIFF,
    PROVINCE,
    SALE_PRICE,
)


def make_listing(**overrides: Any) -> Dict[str, Any]:
    """Return a fully populated listing row with optional field overrides."""

    row: Dict[str, Any] = {column: None for column in DEDUP_COLUMNS}
    row.update(
        {
            PRICE_DIFF: 1500,
            COMPLEX_NAME: "래미안",
            PROVINCE: "서울특별시",
            CITY: "강남구",
            "네이버_읍면동": "대치동",
            "네이버_공급면적": 84.9,
            SALE_PRICE: 150000,
            "네이버_층정보": "5/15",
            "네이버_확인일자": "2024-01-05",
            "KB_하위평균": 140000,
            "KB_일반평균": 148000,
            COMPLEX_CODE: 8928,
        }
    )
    row.update(overrides)
    return row


def write_export(path: Path, rows: List[Dict[str, Any]], headers: List[str] | None = None) -> Path:
    """Write rows as a CSV export the way the listing tools produce them."""

    headers = headers or list(DEDUP_COLUMNS)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=headers, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow({key: "" if row.get(key) is None else row.get(key) for key in headers})
    return path


@pytest.fixture
def listing():
    """Factory for listing rows."""

    return make_listing


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data directory with two non-overlapping exports (3 + 2 rows)."""

    directory = tmp_path / "data"
    write_export(
        directory / "a_export.csv",
        [
            make_listing(**{PRICE_DIFF: 3000, COMPLEX_CODE: 1}),
            make_listing(**{PRICE_DIFF: 1200, COMPLEX_CODE: 2, CITY: "서초구"}),
            make_listing(**{PRICE_DIFF: 500, COMPLEX_CODE: 3}),
        ],
    )
    write_export(
        directory / "b_export.csv",
        [
            make_listing(**{PRICE_DIFF: 2000, COMPLEX_CODE: None, PROVINCE: "경기도", CITY: "성남시"}),
            make_listing(**{PRICE_DIFF: 999, COMPLEX_CODE: 5}),
        ],
    )
    return directory


@pytest.fixture
def run_cli(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Helper to invoke the CLI with custom arguments inside tests."""

    monkeypatch.chdir(tmp_path)
    for key in ("ESTATE_THRESHOLD", "ESTATE_DISPLAY_LIMIT", "ESTATE_LINK_FIELD", "ESTATE_KEY_COLUMNS"):
        monkeypatch.delenv(key, raising=False)

    def _run(args: list[str]) -> None:
        cli_main(args)

    return _run
