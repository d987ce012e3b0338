from __future__ import annotations

from pathlib import Path
from typing import Callable

import fitz
import pytest

from pdfmerger.domain.models import SignatureIndex


def _write_pdf(path: Path, pages: list[str]) -> Path:
    document = fitz.open()
    try:
        for text in pages:
            page = document.new_page()
            page.insert_text((72, 72), text)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(document.tobytes(deflate=True, garbage=3))
    finally:
        document.close()
    return path


@pytest.fixture
def make_pdf() -> Callable[..., Path]:
    def _make(path: Path, pages: int = 1) -> Path:
        return _write_pdf(path, [f"{path.stem} page {number}" for number in range(1, pages + 1)])

    return _make


@pytest.fixture
def signature_index() -> Callable[..., SignatureIndex]:
    def _build(**entries: list[str]) -> SignatureIndex:
        return SignatureIndex(
            entries={key: tuple(Path(item) for item in items) for key, items in entries.items()}
        )

    return _build


@pytest.fixture
def project_tree(tmp_path: Path, make_pdf) -> tuple[Path, Path]:
    input_dir = tmp_path / "input"
    output_dir = tmp_path / "output"
    make_pdf(input_dir / "ALPHA-B.pdf")
    make_pdf(input_dir / "ALPHA-C.pdf", pages=2)
    make_pdf(input_dir / "BETA-1.pdf")
    make_pdf(input_dir / "BETA-2.pdf")
    make_pdf(input_dir / "Solo.pdf")
    (input_dir / "notes.txt").write_text("not a pdf", encoding="utf-8")
    make_pdf(input_dir / "nested" / "ALPHA-Z.pdf")
    make_pdf(output_dir / "signatures" / "signature-B.pdf")
    return input_dir, output_dir
