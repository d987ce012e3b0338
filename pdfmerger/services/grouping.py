from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Iterable

from pdfmerger.domain.models import FileRecord, ProjectSet, SignatureIndex
from pdfmerger.infrastructure.logging import get_logger
from pdfmerger.services.classifier import signature_key_of

logger = get_logger("grouping")


def group_projects(records: Iterable[FileRecord]) -> ProjectSet:
    grouped: dict[str, list[Path]] = defaultdict(list)
    for record in records:
        grouped[record.project_key].append(record.path)
    return ProjectSet(projects={key: tuple(paths) for key, paths in grouped.items()})


def build_signature_index(paths: Iterable[Path]) -> SignatureIndex:
    entries: dict[str, list[Path]] = defaultdict(list)
    for path in paths:
        suffix_key = signature_key_of(path.name)
        logger.debug("adding signature file %s to suffix %s", path, suffix_key)
        entries[suffix_key].append(path)
    return SignatureIndex(entries={key: tuple(items) for key, items in entries.items()})
