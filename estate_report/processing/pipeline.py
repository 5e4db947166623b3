"""Pipeline orchestration: load, deduplicate, rank, score and report."""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from estate_report.core.config import PipelineConfig
from estate_report.core.models import ReportContext, SourceBatch
from estate_report.ingestion.loader import TIMESTAMP_FORMAT, load_records
from estate_report.processing.dedup import dedupe
from estate_report.processing.quality import count_regions, score
from estate_report.processing.ranking import select_top
from estate_report.reporting.renderer import render_report
from estate_report.reporting.sinks import write_csv, write_excel, write_text

logger = logging.getLogger(__name__)

EXPORT_SINKS = ("csv", "excel", "none")


def build_report_context(
    batch: SourceBatch,
    config: PipelineConfig,
    generated_at: Optional[str] = None,
) -> ReportContext:
    """Run the in-memory stages over an ingested batch."""

    dedup = dedupe(batch.records, config.key_columns)
    selection = select_top(
        dedup.records,
        threshold_field=config.threshold_field,
        threshold=config.threshold,
        sort_field=config.sort_field,
        limit=config.limit,
    )
    quality = score(dedup.records)
    return ReportContext(
        dedup=dedup,
        selection=selection,
        file_stats=list(batch.file_stats),
        quality=quality,
        region_count=count_regions(dedup.records),
        generated_at=generated_at or datetime.now().strftime(TIMESTAMP_FORMAT),
        config=config,
        alerts=list(batch.alerts),
    )


def run_pipeline(
    data_dir: Path,
    output_path: Path,
    export_path: Path | None = None,
    config: PipelineConfig | None = None,
    sink: str = "csv",
    excel_path: Path | None = None,
) -> Path:
    """Load exports from ``data_dir``, write the HTML report and the export."""

    if sink not in EXPORT_SINKS:
        raise ValueError(f"Unknown sink {sink!r}; expected one of {', '.join(EXPORT_SINKS)}")

    config = config or PipelineConfig()
    logger.info("Pipeline starting for data dir %s", data_dir)

    batch = load_records(data_dir, config.file_patterns)
    if batch.alerts:
        logger.warning("Encountered %d ingestion alerts during loading", len(batch.alerts))
        for alert in batch.alerts:
            logger.warning("Alert: %s", alert)

    context = build_report_context(batch, config)
    logger.info(
        "Quality: %d/%d records with complex code, %d with complex name",
        context.quality.with_complex_code,
        context.quality.total,
        context.quality.with_complex_name,
    )

    write_text(render_report(context), output_path)
    logger.info("Wrote HTML report to %s", output_path)

    records = context.dedup.records
    if sink == "none" or export_path is None:
        return output_path
    if not records:
        logger.info("No records to export; skipping %s", export_path)
        return output_path

    write_csv(records, export_path)
    logger.info("Wrote %d deduplicated rows to %s", len(records), export_path)
    if sink == "excel":
        excel_target = excel_path or export_path.with_suffix(".xlsx")
        write_excel(records, excel_target)
        logger.info("Wrote Excel output to %s", excel_target)
    return output_path
