"""Data models shared by the ingestion, processing and reporting stages."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from estate_report.core.config import PipelineConfig

# A raw listing row: header name -> parsed cell value.
Record = Dict[str, Any]


@dataclass(frozen=True)
class FileStat:
    """Rows contributed by one source file, counted before deduplication."""

    file_name: str
    row_count: int
    processed_at: str


@dataclass
class SourceBatch:
    """Everything a single ingestion pass produced."""

    records: List[Record] = field(default_factory=list)
    file_stats: List[FileStat] = field(default_factory=list)
    alerts: List[str] = field(default_factory=list)


@dataclass
class DedupResult:
    """Outcome of composite-key deduplication."""

    original_count: int
    final_count: int
    records: List[Record] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        return self.original_count - self.final_count


@dataclass
class RankedSelection:
    """Top listings after threshold filtering, sorting and truncation.

    ``matched_count`` is the number of records that passed the filter before
    truncation, so a consumer can report "N matched, M shown".
    ``provinces`` and ``cities`` hold the distinct values over the same
    pre-truncation set.
    """

    records: List[Record]
    matched_count: int
    limit: int
    provinces: List[str] = field(default_factory=list)
    cities: List[str] = field(default_factory=list)

    @property
    def shown_count(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class QualityStats:
    """Presence/absence counts of the identifying fields."""

    total: int = 0
    with_complex_code: int = 0
    without_complex_code: int = 0
    with_complex_name: int = 0
    without_complex_name: int = 0

    @property
    def linkable(self) -> int:
        return self.with_complex_code

    def percent(self, count: int) -> float:
        """Return ``count`` as a percentage of the total (0.0 when empty)."""

        if not self.total:
            return 0.0
        return count / self.total * 100


@dataclass
class ReportContext:
    """Everything the report renderer needs for one run."""

    dedup: DedupResult
    selection: RankedSelection
    file_stats: List[FileStat]
    quality: QualityStats
    region_count: int
    generated_at: str
    config: PipelineConfig
    alerts: List[str] = field(default_factory=list)
