from __future__ import annotations

import os
from pathlib import Path

from pdfmerger.domain.errors import ScanError
from pdfmerger.domain.models import FileRecord
from pdfmerger.infrastructure.logging import get_logger
from pdfmerger.services.classifier import classify, is_signature_name

logger = get_logger("scanner")

PDF_EXTENSION = ".pdf"


def _is_pdf(name: str) -> bool:
    return os.path.splitext(name)[1] == PDF_EXTENSION


def scan_input_directory(input_dir: Path) -> list[FileRecord]:
    """Classify every PDF directly inside ``input_dir``.

    Subdirectories are not descended into. Entries are visited in name order.
    """
    try:
        with os.scandir(input_dir) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)
    except OSError as exc:
        raise ScanError(f"unable to read input directory {input_dir}: {exc}") from exc

    records: list[FileRecord] = []
    for entry in entries:
        path = Path(input_dir) / entry.name
        try:
            is_dir = entry.is_dir()
        except OSError as exc:
            raise ScanError(f"unable to stat {path}: {exc}") from exc
        if is_dir:
            logger.info("skipping directory: %s", entry.name)
            continue
        if not _is_pdf(entry.name):
            logger.info("skipping non-pdf file: %s", path)
            continue
        record = classify(path)
        logger.debug("classified %s into project %s", path, record.project_key)
        records.append(record)
    return records


def scan_signature_files(output_dir: Path) -> list[Path]:
    """Find signature PDFs anywhere below ``output_dir`` in walk order."""

    def _raise(exc: OSError) -> None:
        raise ScanError(f"unable to scan signature files in {output_dir}: {exc}") from exc

    if not Path(output_dir).is_dir():
        raise ScanError(f"signature directory does not exist: {output_dir}")

    found: list[Path] = []
    for root, dirnames, filenames in os.walk(output_dir, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            if not is_signature_name(name):
                continue
            path = Path(root) / name
            if not _is_pdf(name):
                logger.debug("ignoring non-pdf signature file: %s", path)
                continue
            logger.debug("found signature file: %s", path)
            found.append(path)
    return found
