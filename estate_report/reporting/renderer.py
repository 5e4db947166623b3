"""Static HTML rendering of the listing report."""
from __future__ import annotations

import html
from typing import List

from estate_report.core.config import CITY, PROVINCE
from estate_report.core.models import FileStat, QualityStats, RankedSelection, ReportContext
from estate_report.reporting.templates import record_to_cells, visible_columns

_STYLE = """
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: 'Segoe UI', 'Apple SD Gothic Neo', sans-serif; background: #f4f5fb; padding: 20px; line-height: 1.6; }
.container { background: #fff; border-radius: 16px; padding: 24px; max-width: 1400px; margin: 0 auto; }
h1 { color: #667eea; text-align: center; margin-bottom: 24px; }
h2 { color: #764ba2; margin: 24px 0 12px; }
.banner { background: #28a745; color: #fff; padding: 16px; border-radius: 12px; text-align: center; }
.stats-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(220px, 1fr)); gap: 16px; margin: 24px 0; }
.stat-card { background: #667eea; color: #fff; padding: 20px; border-radius: 12px; text-align: center; }
.stat-card h3 { font-size: 2em; }
.panel { background: #f8f9fa; border: 1px solid #dee2e6; border-radius: 10px; padding: 16px; margin: 16px 0; }
.quality-item { display: flex; justify-content: space-between; padding: 6px 0; border-bottom: 1px solid #e9ecef; }
.quality-good { color: #28a745; font-weight: 600; }
.quality-warning { color: #e0a800; font-weight: 600; }
.quality-bad { color: #dc3545; font-weight: 600; }
table { width: 100%; border-collapse: collapse; font-size: 13px; }
th { background: #667eea; color: #fff; padding: 8px; text-align: left; white-space: nowrap; }
td { border: 1px solid #eee; padding: 6px; white-space: nowrap; }
tr:nth-child(even) td { background: #f8f9fa; }
.table-wrap { overflow-x: auto; max-height: 600px; border: 1px solid #ddd; border-radius: 10px; }
.complex-link { color: #667eea; font-weight: 600; text-decoration: none; }
.muted { color: #6c757d; font-weight: 600; }
.badge { color: #dc3545; font-size: 10px; background: #f8d7da; padding: 2px 4px; border-radius: 3px; }
.present { color: #28a745; font-size: 11px; font-weight: 600; }
.missing { color: #dc3545; font-size: 11px; font-weight: 600; }
.diff { color: #f39c12; font-weight: bold; }
.price { color: #e74c3c; font-weight: bold; }
.area { color: #3498db; font-weight: 600; }
.region { color: #27ae60; font-weight: 600; }
.options li { display: inline-block; margin: 2px 8px 2px 0; }
.status { text-align: center; margin-top: 12px; color: #6c757d; font-weight: 600; }
.file-item { padding: 8px; margin: 4px 0; background: #fff; border-left: 4px solid #667eea; }
.alerts { color: #dc3545; }
"""


def _esc(value: object) -> str:
    return html.escape(str(value))


def _summary_cards(context: ReportContext) -> str:
    cards = [
        (f"{context.dedup.final_count:,}", "총 매물 수 (중복 제거 후)"),
        (f"{len(context.file_stats):,}", "처리된 파일 수"),
        (f"{context.region_count:,}", "고유 지역 수"),
        (f"{context.dedup.duplicate_count:,}", "제거된 중복 수"),
    ]
    body = "".join(
        f'<div class="stat-card"><h3>{value}</h3><p>{label}</p></div>' for value, label in cards
    )
    return f'<div class="stats-grid">{body}</div>'


def _quality_panel(quality: QualityStats) -> str:
    if not quality.total:
        return ""

    def item(label: str, count: int, css: str, suffix: str | None = None) -> str:
        detail = suffix if suffix is not None else f"({quality.percent(count):.1f}%)"
        return (
            f'<div class="quality-item"><span>{label}</span>'
            f'<span class="{css}">{count:,}개 {detail}</span></div>'
        )

    items = [
        item(
            "단지코드 보유 매물",
            quality.with_complex_code,
            "quality-good" if quality.with_complex_code else "quality-bad",
        ),
        item(
            "단지코드 없는 매물",
            quality.without_complex_code,
            "quality-warning" if quality.without_complex_code else "quality-good",
        ),
        item(
            "단지명 보유 매물",
            quality.with_complex_name,
            "quality-good" if quality.with_complex_name else "quality-bad",
        ),
        item(
            "링크 연결 가능 매물",
            quality.linkable,
            "quality-good" if quality.linkable else "quality-bad",
            suffix="(단지코드 보유)",
        ),
    ]
    return f'<div class="panel"><h3>데이터 품질 현황</h3>{"".join(items)}</div>'


def _option_list(label: str, values: List[str]) -> str:
    options = "".join(f"<li>{_esc(value)}</li>" for value in values)
    return f"<div><strong>{label}:</strong><ul class=\"options\">{options}</ul></div>"


def _listing_table(context: ReportContext) -> str:
    selection: RankedSelection = context.selection
    columns = visible_columns(context.dedup.records, context.config)
    if not columns:
        return ""

    header = "".join(f"<th>{_esc(column)}</th>" for column in columns)
    rows = []
    for record in selection.records:
        cells = "".join(
            f"<td>{cell}</td>" for cell in record_to_cells(record, columns, context.config)
        )
        rows.append(
            f'<tr data-sido="{_esc(record.get(PROVINCE) or "")}" '
            f'data-sigungu="{_esc(record.get(CITY) or "")}">{cells}</tr>'
        )

    dedup = context.dedup
    return (
        "<h2>부동산 매물 데이터</h2>"
        '<div class="panel"><h3>중복 제거 결과</h3>'
        f"<p>원본 데이터: {dedup.original_count:,}개 → 중복 제거 후: {dedup.final_count:,}개 "
        f"({dedup.duplicate_count:,}개 중복 제거)</p>"
        f"<p>중복 제거 기준: {_esc(', '.join(context.config.key_columns))}</p></div>"
        '<div class="panel"><h3>지역 목록</h3>'
        f"{_option_list('시도', selection.provinces)}"
        f"{_option_list('시군구', selection.cities)}</div>"
        '<div class="table-wrap"><table id="dataTable">'
        f"<thead><tr>{header}</tr></thead>"
        f"<tbody>{''.join(rows)}</tbody></table></div>"
        f'<div class="status">총 {selection.matched_count:,}개 매물 중 '
        f"{selection.shown_count:,}개 표시</div>"
    )


def _file_section(file_stats: List[FileStat]) -> str:
    if not file_stats:
        return (
            '<div class="panel"><h3>CSV 파일 대기 중</h3>'
            "<p>data/ 폴더에 CSV 파일을 업로드하면 자동으로 처리됩니다.</p></div>"
        )
    items = "".join(
        f'<div class="file-item"><strong>{_esc(stat.file_name)}</strong><br>'
        f"{stat.row_count:,}개 행 처리 ({_esc(stat.processed_at)})</div>"
        for stat in file_stats
    )
    return f'<div class="panel"><h3>파일 처리 현황</h3>{items}</div>'


def _alerts_section(alerts: List[str]) -> str:
    if not alerts:
        return ""
    items = "".join(f"<li>{_esc(alert)}</li>" for alert in alerts)
    return f'<div class="panel alerts"><h3>처리 오류</h3><ul>{items}</ul></div>'


def render_report(context: ReportContext) -> str:
    """Render the full report document for ``context``."""

    dedup = context.dedup
    generated_at = _esc(context.generated_at)
    return f"""<!DOCTYPE html>
<html lang="ko">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>부동산 데이터 대시보드 - {generated_at}</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="container">
<h1>부동산 데이터 대시보드</h1>
<div class="banner"><strong>업데이트 완료</strong> 최종 업데이트: {generated_at}<br>
원본 {dedup.original_count:,}개 → 중복 제거 후 {dedup.final_count:,}개 ({dedup.duplicate_count:,}개 중복 제거)</div>
{_summary_cards(context)}
{_quality_panel(context.quality)}
{_listing_table(context)}
{_file_section(context.file_stats)}
{_alerts_section(context.alerts)}
</div>
</body>
</html>
"""
