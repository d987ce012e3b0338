"""CLI entrypoint for merging a directory of PDFs by project."""

from __future__ import annotations

import argparse
import os
import sys

from pdfmerger.adapters.pymupdf_adapter import PyMuPdfAdapter
from pdfmerger.domain.errors import ConfigurationError, ScanError
from pdfmerger.domain.models import RunResult
from pdfmerger.infrastructure.config import AppConfig, RunContext, resolve_directories
from pdfmerger.infrastructure.logging import configure_logging, get_logger, shutdown_logging
from pdfmerger.services.orchestrator import MergeOrchestrator

logger = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdfmerger",
        description="Takes a directory of PDF files and merges them by project.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Set debug logging.",
    )
    parser.add_argument(
        "-i",
        "--input-directory",
        metavar="INPUT",
        default=None,
        help="Read PDF files from INPUT directory.",
    )
    parser.add_argument(
        "-o",
        "--output-directory",
        metavar="OUTPUT",
        default=None,
        help="Write merged PDF files to OUTPUT directory.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the merge order of every project without writing PDFs.",
    )
    parser.add_argument(
        "directories",
        nargs="*",
        help="INPUT::OUTPUT, used when neither -i nor -o is given.",
    )
    return parser


def _print_summary(result: RunResult) -> None:
    for item in result.items:
        print(f"{item.status.value:<8} {item.project_key} -> {item.output_path}")
    print(
        f"{result.success_count} merged, {result.planned_count} planned, "
        f"{result.error_count} failed"
    )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        input_dir, output_dir = resolve_directories(
            args.input_directory, args.output_directory, args.directories
        )
    except ConfigurationError as exc:
        parser.exit(1, f"pdfmerger: {exc}\n")

    context = RunContext(
        input_dir=input_dir,
        output_dir=output_dir,
        config=AppConfig(),
        dry_run=bool(args.dry_run),
    )

    try:
        os.makedirs(context.output_dir, exist_ok=True)
    except OSError as exc:
        parser.exit(1, f"pdfmerger: unable to create output directory: {exc}\n")

    try:
        configure_logging(verbose=bool(args.debug), log_file=context.log_file)
    except OSError as exc:
        shutdown_logging()
        parser.exit(1, f"pdfmerger: unable to open transcript {context.log_file}: {exc}\n")

    try:
        result = MergeOrchestrator(PyMuPdfAdapter(), context.config).run(context)
    except ScanError as exc:
        logger.error("error scanning files: %s", exc)
        return 1
    finally:
        shutdown_logging()

    _print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
