from __future__ import annotations

from pathlib import Path

import streamlit as st

from pdfmerger.adapters.pymupdf_adapter import PyMuPdfAdapter
from pdfmerger.domain.errors import ConfigurationError, PdfMergerError
from pdfmerger.domain.models import RunResult
from pdfmerger.infrastructure.config import AppConfig, RunContext, resolve_directories
from pdfmerger.infrastructure.logging import configure_logging, shutdown_logging
from pdfmerger.services.orchestrator import MergeOrchestrator
from pdfmerger.services.report_service import ReportService


def _init_services() -> tuple[AppConfig, MergeOrchestrator, ReportService]:
    config = AppConfig()
    orchestrator = MergeOrchestrator(PyMuPdfAdapter(), config)
    return config, orchestrator, ReportService()


def _init_state() -> None:
    st.session_state.setdefault("last_result", None)


def _render_run_summary(result: RunResult) -> None:
    metric_col_1, metric_col_2, metric_col_3 = st.columns(3)
    metric_col_1.metric("Merged", result.success_count)
    metric_col_2.metric("Planned", result.planned_count)
    metric_col_3.metric("Failed", result.error_count)

    rows = []
    for item in result.items:
        rows.append(
            {
                "Project": item.project_key,
                "Status": item.status.value.title(),
                "Files": len(item.merge_order),
                "Output": str(item.output_path) if item.output_path else "",
                "Details": " | ".join(message.text for message in item.messages),
            }
        )

    st.dataframe(rows, use_container_width=True)

    for item in result.items:
        with st.expander(f"Merge order: {item.project_key}"):
            st.code("\n".join(str(path) for path in item.merge_order) or "(empty)")


def _run(
    orchestrator: MergeOrchestrator,
    config: AppConfig,
    input_dir: str,
    output_dir: str,
    dry_run: bool,
    debug: bool,
) -> RunResult:
    resolved_input, resolved_output = resolve_directories(input_dir, output_dir, [])
    context = RunContext(
        input_dir=resolved_input, output_dir=resolved_output, config=config, dry_run=dry_run
    )
    Path(context.output_dir).mkdir(parents=True, exist_ok=True)
    configure_logging(verbose=debug, log_file=context.log_file)
    try:
        return orchestrator.run(context)
    finally:
        shutdown_logging()


def main() -> None:
    st.set_page_config(page_title="PDF Project Merger", layout="wide")
    st.title("PDF Project Merger", anchor=False)
    st.caption(
        "Group PDFs by the token before the first '-', splice in matching "
        "signature pages from the output directory, and merge one PDF per project."
    )

    config, orchestrator, report_service = _init_services()
    _init_state()

    input_dir = st.text_input("Input directory", key="input_dir")
    output_dir = st.text_input("Output directory", key="output_dir")
    debug = st.checkbox("Debug logging", value=False)
    st.caption(f"Validation mode: {config.validation_mode}")

    preview_col, run_col = st.columns(2)
    preview = preview_col.button("Preview merge order")
    run = run_col.button("Run merge", type="primary")

    if preview or run:
        try:
            st.session_state.last_result = _run(
                orchestrator, config, input_dir, output_dir, dry_run=preview, debug=debug
            )
        except ConfigurationError as exc:
            st.warning(str(exc))
        except (PdfMergerError, OSError) as exc:
            st.error(str(exc))

    result: RunResult | None = st.session_state.last_result
    if result is None:
        return

    _render_run_summary(result)
    csv_name, csv_bytes = report_service.build_csv(result)
    txt_name, txt_summary = report_service.build_text_summary(result)
    st.download_button(
        "Download Report CSV",
        data=csv_bytes,
        file_name=csv_name,
        mime="text/csv",
    )
    st.download_button(
        "Download Report TXT",
        data=txt_summary,
        file_name=txt_name,
        mime="text/plain",
    )


if __name__ == "__main__":
    main()
