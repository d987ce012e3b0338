import logging
from pathlib import Path

import pytest

from pdfmerger.adapters.pymupdf_adapter import PyMuPdfAdapter
from pdfmerger.domain.errors import MergeError, PdfValidationError, ScanError
from pdfmerger.domain.models import Status
from pdfmerger.infrastructure.config import AppConfig, RunContext
from pdfmerger.services.orchestrator import MergeOrchestrator
from pdfmerger.services.scanner import scan_input_directory, scan_signature_files


@pytest.mark.integration
def test_input_scan_skips_subdirectories_and_non_pdfs(project_tree) -> None:
    input_dir, _ = project_tree

    records = scan_input_directory(input_dir)

    assert [record.path.name for record in records] == [
        "ALPHA-B.pdf",
        "ALPHA-C.pdf",
        "BETA-1.pdf",
        "BETA-2.pdf",
        "Solo.pdf",
    ]
    assert {record.project_key for record in records} == {"ALPHA", "BETA", "Solo"}


@pytest.mark.integration
def test_signature_scan_descends_into_subdirectories(project_tree, make_pdf) -> None:
    _, output_dir = project_tree
    make_pdf(output_dir / "a" / "signature-B.pdf")
    (output_dir / "signature-notes.txt").write_text("ignored", encoding="utf-8")

    found = scan_signature_files(output_dir)

    assert found == [
        output_dir / "a" / "signature-B.pdf",
        output_dir / "signatures" / "signature-B.pdf",
    ]


@pytest.mark.integration
def test_missing_directories_raise_scan_error(tmp_path: Path) -> None:
    with pytest.raises(ScanError):
        scan_input_directory(tmp_path / "missing")
    with pytest.raises(ScanError):
        scan_signature_files(tmp_path / "missing")


@pytest.mark.integration
def test_adapter_merges_and_validates(tmp_path: Path, make_pdf) -> None:
    adapter = PyMuPdfAdapter()
    first = make_pdf(tmp_path / "a.pdf", pages=2)
    second = make_pdf(tmp_path / "b.pdf", pages=1)
    output = tmp_path / "merged.pdf"

    merged_pages = adapter.merge_files([first, second], output)

    assert merged_pages == 3
    assert adapter.validate_file(output) == 3
    assert adapter.validate_file(output, mode="strict") == 3
    assert adapter.get_page_count(output) == 3


@pytest.mark.integration
def test_adapter_wraps_corrupt_input(tmp_path: Path) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_text("not a pdf", encoding="utf-8")
    adapter = PyMuPdfAdapter()

    with pytest.raises(MergeError):
        adapter.merge_files([broken], tmp_path / "out.pdf")
    with pytest.raises(PdfValidationError):
        adapter.validate_file(broken)


@pytest.mark.integration
def test_run_merges_every_project_with_signatures(project_tree) -> None:
    input_dir, output_dir = project_tree
    adapter = PyMuPdfAdapter()
    orchestrator = MergeOrchestrator(adapter, AppConfig(validation_mode="relaxed"))
    context = RunContext(input_dir=input_dir, output_dir=output_dir, config=orchestrator.config)

    result = orchestrator.run(context)

    assert [item.project_key for item in result.items] == ["ALPHA", "BETA", "Solo"]
    assert all(item.status == Status.SUCCESS for item in result.items)
    alpha = result.items[0]
    assert [path.name for path in alpha.merge_order] == [
        "ALPHA-B.pdf",
        "signature-B.pdf",
        "ALPHA-C.pdf",
    ]
    assert adapter.get_page_count(output_dir / "ALPHA.pdf") == 4
    assert adapter.get_page_count(output_dir / "BETA.pdf") == 2

    rerun = orchestrator.run(context)
    assert [item.merge_order for item in rerun.items] == [item.merge_order for item in result.items]


@pytest.mark.integration
def test_corrupt_project_is_isolated(project_tree) -> None:
    input_dir, output_dir = project_tree
    (input_dir / "AAA-1.pdf").write_text("not a pdf", encoding="utf-8")
    orchestrator = MergeOrchestrator(PyMuPdfAdapter(), AppConfig(validation_mode="relaxed"))

    result = orchestrator.run(RunContext(input_dir=input_dir, output_dir=output_dir))

    assert result.items[0].project_key == "AAA"
    assert result.items[0].status == Status.ERROR
    assert result.success_count == 3
    assert (output_dir / "Solo.pdf").exists()


@pytest.mark.integration
def test_input_scan_skips_uppercase_pdf_extension(tmp_path: Path, make_pdf, caplog) -> None:
    make_pdf(tmp_path / "ALPHA-1.PDF")
    make_pdf(tmp_path / "ALPHA-2.pdf")

    with caplog.at_level(logging.INFO, logger="pdfmerger"):
        records = scan_input_directory(tmp_path)

    assert [record.path.name for record in records] == ["ALPHA-2.pdf"]
    assert f"skipping non-pdf file: {tmp_path / 'ALPHA-1.PDF'}" in caplog.text
