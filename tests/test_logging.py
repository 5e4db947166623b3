"""Logging coverage to ensure problems are surfaced without stopping the run."""
import logging
from pathlib import Path

import estate_report.processing.pipeline as pipeline
from estate_report.core.logging import configure_logging


def test_pipeline_logs_summary(tmp_path: Path, data_dir: Path, caplog):
    """Running the pipeline should emit helpful progress messages."""

    caplog.set_level("INFO")

    pipeline.run_pipeline(data_dir, tmp_path / "index.html", export_path=tmp_path / "merged.csv")

    assert any("Wrote HTML report" in message for message in caplog.messages)
    assert any("duplicates removed" in message for message in caplog.messages)
    assert any("Wrote 5 deduplicated rows" in message for message in caplog.messages)


def test_pipeline_logs_ingestion_alerts(tmp_path: Path, caplog):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "broken.xlsx").write_text("not a workbook", encoding="utf-8")

    caplog.set_level("WARNING")
    pipeline.run_pipeline(data_dir, tmp_path / "index.html")

    assert any("Alert: Failed to read broken.xlsx" in message for message in caplog.messages)
    assert "Failed to read broken.xlsx" in (tmp_path / "index.html").read_text(encoding="utf-8")


def test_configure_logging_reads_env_level(monkeypatch):
    captured = {}

    def fake_basic_config(**kwargs):
        captured.update(kwargs)

    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)

    configure_logging()

    assert captured["level"] == "DEBUG"
    assert "%(name)s" in captured["format"]
