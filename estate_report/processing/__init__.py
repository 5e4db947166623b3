"""Deduplication, ranking and quality scoring of merged listings."""
from estate_report.processing.dedup import composite_key, dedupe, normalize_value
from estate_report.processing.pipeline import build_report_context, run_pipeline
from estate_report.processing.quality import count_regions, score
from estate_report.processing.ranking import distinct_values, select_top, to_number

__all__ = [
    "build_report_context",
    "composite_key",
    "count_regions",
    "dedupe",
    "distinct_values",
    "normalize_value",
    "run_pipeline",
    "score",
    "select_top",
    "to_number",
]
