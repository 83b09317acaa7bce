"""Application entry point for the tweetsieve batch filter."""

from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint

import settings as settings_module
from adapters.filesystem_source import DirectoryBatchSource
from adapters.json_sink import JsonFileSink
from adapters.run_report import RunReport
from core.classifier import Classifier
from core.models import RunSummary
from core.processor import BatchProcessor
from core.runner import BatchRunner
from settings import Settings

NAME = "TWEETSIEVE"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _resolve_log_path(path: str) -> str:
    # Relative paths live under the project root, never inside the scanned tree.
    if os.path.isabs(path):
        return path
    return os.path.join(settings_module.PROJECT_ROOT, path)


def _configure_logging(config: dict) -> None:
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file") or {}
    if file_cfg.get("enabled", False):
        path = _resolve_log_path(file_cfg.get("path", "logs/tweetsieve.log"))
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def run(root: str, settings: Settings, echo: bool = True) -> RunSummary:
    """Filter every batch below root and write the report log."""

    root = os.path.abspath(root)
    if not os.path.isdir(root):
        raise RuntimeError(f"Root directory not found: {root}")

    logger = logging.getLogger(__name__)
    logger.info("Scanning %s for %s files", root, settings.pattern)

    processor = BatchProcessor(Classifier(settings.filter))
    report = RunReport(settings.filter.min_ascii_percent, echo=echo)
    runner = BatchRunner(
        processor=processor,
        source=DirectoryBatchSource(root, settings.pattern),
        sink=JsonFileSink(settings.raw_suffix, settings.filtered_suffix),
        reporter=report,
    )

    report_path = settings.report_path
    if not os.path.isabs(report_path):
        report_path = os.path.join(root, report_path)

    # The log is written even when a sink write aborts the run.
    try:
        summary = runner.run()
    finally:
        report.write(report_path)
    logger.info("Report written to %s", report_path)
    return summary


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="tweetsieve",
        description="Extract English messages from JSON batch files below a directory.",
    )
    parser.add_argument("--root", default=None, help="Directory to scan (default: current directory)")
    parser.add_argument("--config", default=None, help="Path to config.json")
    parser.add_argument("--quiet", action="store_true", help="Suppress banner and progress output")

    args = parser.parse_args(argv)
    settings = settings_module.load_settings(args.config)
    root = os.path.abspath(args.root or os.getcwd())

    if not args.quiet:
        _print_banner()
    _configure_logging(settings.logging)
    run(root, settings, echo=not args.quiet)


if __name__ == "__main__":
    main()
