from __future__ import annotations

import os
from pathlib import Path

from pdfmerger.domain.models import FileRecord

KEY_DELIMITER = "-"
SIGNATURE_TOKEN = "signature"
SIGNATURE_PREFIX = f"{SIGNATURE_TOKEN}-"


def _stem(filename: str) -> str:
    return os.path.splitext(os.path.basename(filename))[0]


def project_key_of(filename: str) -> str:
    stem = _stem(filename)
    head = stem.split(KEY_DELIMITER)[0]
    # "-foo.pdf" would otherwise group under an empty key
    return head or stem


def suffix_key_of(filename: str) -> str | None:
    segments = _stem(filename).split(KEY_DELIMITER)
    if len(segments) < 2:
        return None
    return os.path.splitext(segments[1])[0]


def is_signature_name(filename: str) -> bool:
    return SIGNATURE_TOKEN in os.path.basename(filename)


def signature_key_of(filename: str) -> str:
    stem = _stem(filename)
    if stem.startswith(SIGNATURE_PREFIX):
        stem = stem[len(SIGNATURE_PREFIX) :]
    return stem.split(".")[0]


def classify(path: Path) -> FileRecord:
    return FileRecord(
        path=path,
        project_key=project_key_of(path.name),
        suffix_key=suffix_key_of(path.name),
    )
