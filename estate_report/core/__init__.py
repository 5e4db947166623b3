"""Core building blocks for the estate_report package."""
from estate_report.core.config import DEDUP_COLUMNS, PipelineConfig
from estate_report.core.logging import configure_logging
from estate_report.core.models import (
    DedupResult,
    FileStat,
    QualityStats,
    RankedSelection,
    Record,
    SourceBatch,
)

__all__ = [
    "DEDUP_COLUMNS",
    "PipelineConfig",
    "configure_logging",
    "DedupResult",
    "FileStat",
    "QualityStats",
    "RankedSelection",
    "Record",
    "SourceBatch",
]
