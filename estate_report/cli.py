"""Command line entry point for building the listing report."""
import argparse
from pathlib import Path

from estate_report.core.config import PipelineConfig
from estate_report.core.logging import configure_logging
from estate_report.core.utils import load_env_file
from estate_report.processing.pipeline import run_pipeline


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(
        description="Merge listing exports, remove duplicates and write an HTML report"
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("data"),
        help="Directory holding the CSV/XLSX listing exports",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("index.html"),
        help="HTML report to write",
    )
    parser.add_argument(
        "--export",
        type=Path,
        default=Path("merged_deduplicated_data.csv"),
        help="CSV file receiving the deduplicated dataset",
    )
    parser.add_argument(
        "--no-export",
        action="store_true",
        help="Skip writing the deduplicated dataset",
    )
    parser.add_argument(
        "--sink",
        choices=["csv", "excel"],
        default="csv",
        help="Also write an Excel copy of the export when set to 'excel'",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        help="Excel file to write when --sink=excel (defaults next to --export)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        help="Minimum price difference (만원) for a listing to be shown",
    )
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum number of listings in the report table",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=Path(".env"),
        help="KEY=VALUE file with ESTATE_* settings",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entrypoint for running the pipeline from the command line."""

    args = build_parser().parse_args(argv)
    load_env_file(args.env_file)
    configure_logging(args.log_level)

    config = PipelineConfig.from_env().with_overrides(threshold=args.threshold, limit=args.limit)
    output_path = run_pipeline(
        args.data_dir,
        args.output,
        export_path=None if args.no_export else args.export,
        config=config,
        sink="none" if args.no_export else args.sink,
        excel_path=args.excel_output,
    )
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
