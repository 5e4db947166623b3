"""Merge, deduplicate and rank real-estate listing exports into a report."""
from estate_report.core import (
    DEDUP_COLUMNS,
    DedupResult,
    FileStat,
    PipelineConfig,
    QualityStats,
    RankedSelection,
    configure_logging,
)
from estate_report.ingestion import load_records
from estate_report.processing import (
    build_report_context,
    dedupe,
    run_pipeline,
    score,
    select_top,
)
from estate_report.reporting import render_report, write_csv, write_excel

__all__ = [
    "DEDUP_COLUMNS",
    "DedupResult",
    "FileStat",
    "PipelineConfig",
    "QualityStats",
    "RankedSelection",
    "build_report_context",
    "configure_logging",
    "dedupe",
    "load_records",
    "render_report",
    "run_pipeline",
    "score",
    "select_top",
    "write_csv",
    "write_excel",
]
