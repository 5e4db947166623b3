"""Discover export files in a data directory and merge their rows."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from estate_report.core.config import DEFAULT_FILE_PATTERNS, PROCESSED_AT, SOURCE_FILE
from estate_report.core.models import FileStat, Record, SourceBatch
from estate_report.ingestion.common import SourceReadError
from estate_report.ingestion.csv_source import parse_csv
from estate_report.ingestion.excel_source import parse_xlsx

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

Parser = Callable[[Path], List[Record]]

PARSERS: Dict[str, Parser] = {
    ".csv": parse_csv,
    ".xlsx": parse_xlsx,
}


def discover_files(data_dir: Path, patterns: Iterable[str] = DEFAULT_FILE_PATTERNS) -> List[Path]:
    """Return the export files under ``data_dir`` sorted by file name."""

    found: Dict[str, Path] = {}
    for pattern in patterns:
        for path in data_dir.glob(pattern):
            if path.is_file():
                found[path.name] = path
    return [found[name] for name in sorted(found)]


def _parser_for(path: Path) -> Parser:
    parser = PARSERS.get(path.suffix.lower())
    if parser is None:
        raise SourceReadError(path, f"unsupported file type {path.suffix!r}")
    return parser


def load_records(
    data_dir: Path,
    patterns: Iterable[str] = DEFAULT_FILE_PATTERNS,
    clock: Optional[Callable[[], datetime]] = None,
) -> SourceBatch:
    """Parse every export file under ``data_dir`` into one ordered batch.

    Files are merged in file-name order. A file that cannot be read is logged
    and skipped; a missing directory yields an empty batch.
    """

    now = clock or datetime.now
    batch = SourceBatch()

    if not data_dir.is_dir():
        logger.warning("Data directory %s does not exist; nothing to load", data_dir)
        return batch

    files = discover_files(data_dir, patterns)
    logger.info("Found %d export files in %s", len(files), data_dir)

    for path in files:
        try:
            rows = _parser_for(path)(path)
        except SourceReadError as exc:
            logger.exception("Failed to read %s", path)
            batch.alerts.append(f"Failed to read {path.name}: {exc.reason}")
            continue
        except Exception as exc:
            logger.exception("Unexpected error while reading %s", path)
            batch.alerts.append(f"Failed to read {path.name}: {exc}")
            continue

        processed_at = now().strftime(TIMESTAMP_FORMAT)
        batch.records.extend(
            {**row, SOURCE_FILE: path.name, PROCESSED_AT: processed_at} for row in rows
        )
        batch.file_stats.append(FileStat(path.name, len(rows), processed_at))
        logger.info("Loaded %d rows from %s", len(rows), path.name)

    logger.info("Loaded %d records from %d files", len(batch.records), len(batch.file_stats))
    return batch
