from __future__ import annotations

from pathlib import Path
from typing import Sequence

import fitz  # type: ignore[import-untyped]

from pdfmerger.domain.errors import MergeError, PdfValidationError


class PyMuPdfAdapter:
    @staticmethod
    def _save_optimized(document: fitz.Document, output_path: Path) -> None:
        document.save(
            str(output_path),
            garbage=4,
            clean=True,
            deflate=True,
            deflate_images=True,
            deflate_fonts=True,
        )

    def get_page_count(self, path: Path) -> int:
        try:
            with fitz.open(str(path)) as document:
                return int(document.page_count)
        except Exception as exc:
            raise PdfValidationError(f"Unable to read PDF page count of {path}") from exc

    def merge_files(self, ordered_paths: Sequence[Path], output_path: Path) -> int:
        if not ordered_paths:
            raise MergeError(f"No input files to merge into {output_path}")

        output = fitz.open()
        try:
            for path in ordered_paths:
                with fitz.open(str(path)) as source:
                    output.insert_pdf(source)
            page_count = int(output.page_count)
            self._save_optimized(output, output_path)
            return page_count
        except Exception as exc:
            raise MergeError(f"Unable to merge {len(ordered_paths)} files into {output_path}") from exc
        finally:
            output.close()

    def validate_file(self, path: Path, mode: str = "relaxed") -> int:
        try:
            with fitz.open(str(path)) as document:
                if not document.is_pdf:
                    raise PdfValidationError(f"{path} is not a PDF document")
                if document.page_count < 1:
                    raise PdfValidationError(f"{path} has no pages")
                if mode == "strict":
                    if document.is_repaired:
                        raise PdfValidationError(f"{path} needed repair when opened")
                    if document.needs_pass:
                        raise PdfValidationError(f"{path} is encrypted")
                return int(document.page_count)
        except PdfValidationError:
            raise
        except Exception as exc:
            raise PdfValidationError(f"Unable to validate {path}") from exc
