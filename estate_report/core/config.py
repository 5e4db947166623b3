"""Column names and run configuration for the listing report pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from estate_report.core.utils import get_config_value, split_list

PRICE_DIFF = "가격차이_만원"
COMPLEX_NAME = "네이버_단지명"
PROVINCE = "네이버_시도"
CITY = "네이버_시군구"
TOWN = "네이버_읍면동"
SUPPLY_AREA = "네이버_공급면적"
SALE_PRICE = "네이버_매매가"
FLOOR_INFO = "네이버_층정보"
VERIFIED_DATE = "네이버_확인일자"
KB_LOWER_AVG = "KB_하위평균"
KB_GENERAL_AVG = "KB_일반평균"
COMPLEX_CODE = "네이버_단지코드"

SOURCE_FILE = "소스파일"
PROCESSED_AT = "처리일시"

DEDUP_COLUMNS: Tuple[str, ...] = (
    PRICE_DIFF,
    COMPLEX_NAME,
    PROVINCE,
    CITY,
    TOWN,
    SUPPLY_AREA,
    SALE_PRICE,
    FLOOR_INFO,
    VERIFIED_DATE,
    KB_LOWER_AVG,
    KB_GENERAL_AVG,
    COMPLEX_CODE,
)

DEFAULT_LINK_TEMPLATE = "https://new.land.naver.com/complexes/{code}"
DEFAULT_FILE_PATTERNS: Tuple[str, ...] = ("*.csv", "*.xlsx")


def _get_float(key: str, default: float) -> float:
    raw = get_config_value(key)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be a number, got {raw!r}") from exc


def _get_int(key: str, default: int) -> int:
    raw = get_config_value(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc


def _get_columns(key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    items = split_list(get_config_value(key))
    return tuple(items) if items else default


@dataclass(frozen=True)
class PipelineConfig:
    """Knobs that used to be hard-coded in each copy of the report script.

    ``link_field`` names the column whose presence makes a complex name
    clickable; ``None`` turns links off entirely.
    """

    key_columns: Tuple[str, ...] = DEDUP_COLUMNS
    display_columns: Tuple[str, ...] = DEDUP_COLUMNS
    threshold_field: str = PRICE_DIFF
    threshold: float = 1000
    sort_field: str = PRICE_DIFF
    limit: int = 100
    link_field: Optional[str] = COMPLEX_CODE
    link_template: str = DEFAULT_LINK_TEMPLATE
    file_patterns: Tuple[str, ...] = field(default=DEFAULT_FILE_PATTERNS)

    def __post_init__(self) -> None:
        if not self.key_columns:
            raise ValueError("key_columns must name at least one column")
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        """Build a config from ``ESTATE_*`` environment variables."""

        link_raw = get_config_value("ESTATE_LINK_FIELD", COMPLEX_CODE)
        link_field = None if link_raw.lower() in {"", "none"} else link_raw
        return cls(
            key_columns=_get_columns("ESTATE_KEY_COLUMNS", DEDUP_COLUMNS),
            display_columns=_get_columns("ESTATE_DISPLAY_COLUMNS", DEDUP_COLUMNS),
            threshold=_get_float("ESTATE_THRESHOLD", 1000),
            limit=_get_int("ESTATE_DISPLAY_LIMIT", 100),
            link_field=link_field,
            link_template=get_config_value("ESTATE_LINK_TEMPLATE") or DEFAULT_LINK_TEMPLATE,
            file_patterns=_get_columns("ESTATE_FILE_PATTERNS", DEFAULT_FILE_PATTERNS),
        )

    def with_overrides(self, **overrides) -> "PipelineConfig":
        """Return a copy with every non-None override applied."""

        updates = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **updates)
