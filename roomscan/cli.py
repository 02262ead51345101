"""CLI for running the scan checks over files or directories."""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import Sequence

from loguru import logger

from roomscan.exceptions import ConfigurationError, ScanLoadError
from roomscan.io import discover_scan_files, load_raw_scan
from roomscan.logging_config import configure_from_settings, setup_logging
from roomscan.metrics.validation_metrics import ValidationMetrics
from roomscan.settings import get_settings
from roomscan.validate.scan_validator import build_scan_report

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roomscan-validate",
        description="Run geometric quality checks over RawScan JSON documents",
    )
    parser.add_argument("paths", type=Path, nargs="+", help="Scan files or directories to search for *.json")
    parser.add_argument("--output", type=Path, help="Write the JSON summary here instead of stdout")
    parser.add_argument("--config", type=Path, help="YAML settings file (default: $ROOMSCAN_CONFIG or config/default.yaml)")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings(str(args.config) if args.config else None)
    except ConfigurationError as exc:
        setup_logging(level="ERROR")
        logger.error("{}", exc.message)
        return EXIT_CONFIG_ERROR

    configure_from_settings(
        settings.logging,
        level=args.log_level,
        json_format=args.json_logs,
        log_file=args.log_file,
    )

    metrics = ValidationMetrics()
    reports = []
    started = time.perf_counter()
    for path in discover_scan_files(args.paths):
        try:
            scan = load_raw_scan(path)
        except ScanLoadError as exc:
            logger.warning("Skipping {}: {}", path, exc.message)
            metrics.record_skipped(f"{path}: {exc.message}")
            continue
        report = build_scan_report(scan, str(path), settings.tolerances)
        metrics.record(report.flags)
        reports.append(report.to_dict())
    metrics.time_total = time.perf_counter() - started

    summary = {"summary": metrics.to_dict(), "scans": reports}
    text = json.dumps(summary, indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
        logger.info("Saved summary to {}", args.output)
    else:
        sys.stdout.write(text + "\n")

    logger.info(
        "Checked {} scan(s): {} with errors, {} skipped",
        metrics.scans_processed,
        metrics.scans_with_errors,
        metrics.skipped_files,
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
