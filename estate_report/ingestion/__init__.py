"""Data ingestion package for reading listing export files."""
from estate_report.ingestion.common import SourceReadError, coerce_cell
from estate_report.ingestion.csv_source import parse_csv
from estate_report.ingestion.excel_source import parse_xlsx
from estate_report.ingestion.loader import discover_files, load_records

__all__ = [
    "SourceReadError",
    "coerce_cell",
    "discover_files",
    "load_records",
    "parse_csv",
    "parse_xlsx",
]
