"""Report rendering and export destinations."""
from estate_report.reporting.renderer import render_report
from estate_report.reporting.sinks import ensure_output_dir, write_csv, write_excel, write_text

__all__ = ["ensure_output_dir", "render_report", "write_csv", "write_excel", "write_text"]
