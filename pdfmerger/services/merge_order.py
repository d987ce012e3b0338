"""Merge ordering for a single project.

The base order compares full paths with every ``-`` removed using plain
string comparison. It is not numeric-aware: ``A-10.pdf`` sorts before
``A-2.pdf``. Existing projects depend on this order, so it is kept as is.

Signature pages are spliced in after their anchor file in two passes over the
base order, so an insertion never shifts where a later anchor's signatures go.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from pdfmerger.domain.models import SignatureIndex
from pdfmerger.infrastructure.logging import get_logger
from pdfmerger.services.classifier import is_signature_name, suffix_key_of

logger = get_logger("merge_order")


def _sort_key(path: Path) -> str:
    return str(path).replace("-", "")


def base_order(paths: Iterable[Path]) -> list[Path]:
    return sorted(paths, key=_sort_key)


def splice_signatures(ordered: Sequence[Path], index: SignatureIndex) -> list[Path]:
    insertions: dict[int, tuple[Path, ...]] = {}
    for position, path in enumerate(ordered):
        if is_signature_name(path.name):
            logger.debug("skipping signature file: %s", path)
            continue
        suffix_key = suffix_key_of(path.name)
        if suffix_key is None or suffix_key not in index:
            continue
        logger.debug("inserting signature files after %s: %s", path, list(index.get(suffix_key)))
        insertions[position] = index.get(suffix_key)

    spliced: list[Path] = []
    for position, path in enumerate(ordered):
        spliced.append(path)
        spliced.extend(insertions.get(position, ()))
    return spliced


def build_merge_order(paths: Iterable[Path], index: SignatureIndex) -> list[Path]:
    return splice_signatures(base_order(paths), index)
