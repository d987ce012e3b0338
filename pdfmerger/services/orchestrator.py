from __future__ import annotations

import os
from pathlib import Path

from pdfmerger.adapters.pymupdf_adapter import PyMuPdfAdapter
from pdfmerger.domain.errors import MergeError, PdfValidationError, ScanError
from pdfmerger.domain.models import (
    OperationMessage,
    ProjectMergeResult,
    ProjectPlan,
    ProjectSet,
    RunResult,
    SignatureIndex,
    Status,
)
from pdfmerger.infrastructure.config import AppConfig, RunContext
from pdfmerger.infrastructure.logging import get_logger
from pdfmerger.services.grouping import build_signature_index, group_projects
from pdfmerger.services.merge_order import build_merge_order
from pdfmerger.services.scanner import scan_input_directory, scan_signature_files

logger = get_logger("orchestrator")


class MergeOrchestrator:
    def __init__(self, adapter: PyMuPdfAdapter, config: AppConfig | None = None) -> None:
        self.adapter = adapter
        self.config = config or AppConfig()

    @staticmethod
    def plan(
        project_set: ProjectSet, index: SignatureIndex, output_dir: Path
    ) -> list[ProjectPlan]:
        plans: list[ProjectPlan] = []
        for project_key in project_set.sorted_keys():
            plans.append(
                ProjectPlan(
                    project_key=project_key,
                    merge_order=tuple(build_merge_order(project_set.files(project_key), index)),
                    output_path=Path(output_dir) / f"{project_key}.pdf",
                )
            )
        return plans

    def merge_project(self, plan: ProjectPlan) -> ProjectMergeResult:
        logger.info("order of merging into project %s:", plan.project_key)
        for path in plan.merge_order:
            logger.info("%s", path)

        try:
            merged_pages = self.adapter.merge_files(plan.merge_order, plan.output_path)
            self.adapter.validate_file(plan.output_path, self.config.validation_mode)
        except (MergeError, PdfValidationError) as exc:
            cause = f": {exc.__cause__}" if exc.__cause__ is not None else ""
            logger.warning("error merging PDFs for project %s: %s%s", plan.project_key, exc, cause)
            return ProjectMergeResult(
                project_key=plan.project_key,
                status=Status.ERROR,
                merge_order=plan.merge_order,
                output_path=plan.output_path,
                messages=(OperationMessage(level="error", text=f"{exc}{cause}"),),
            )

        logger.info("successfully validated file: %s", plan.output_path)
        return ProjectMergeResult(
            project_key=plan.project_key,
            status=Status.SUCCESS,
            merge_order=plan.merge_order,
            output_path=plan.output_path,
            messages=(OperationMessage(level="info", text=f"Merged {merged_pages} pages."),),
            merged_pages=merged_pages,
        )

    def merge_projects(
        self, project_set: ProjectSet, index: SignatureIndex, output_dir: Path
    ) -> RunResult:
        items = [self.merge_project(plan) for plan in self.plan(project_set, index, output_dir)]
        return RunResult(items=items)

    def run(self, context: RunContext) -> RunResult:
        """Scan both directories and merge every project found.

        Scan failures propagate as ``ScanError``; merge and validation failures
        are recorded per project and never stop the run.
        """
        try:
            os.makedirs(context.output_dir, exist_ok=True)
        except OSError as exc:
            raise ScanError(f"unable to create output directory: {exc}") from exc

        index = build_signature_index(scan_signature_files(context.output_dir))
        logger.debug(
            "input dir: %s, output dir: %s, signature files: %s",
            context.input_dir,
            context.output_dir,
            {key: [str(path) for path in paths] for key, paths in index.entries.items()},
        )

        project_set = group_projects(scan_input_directory(context.input_dir))
        logger.info("found %d projects in %s", len(project_set), context.input_dir)

        if context.dry_run:
            items = []
            for plan in self.plan(project_set, index, context.output_dir):
                logger.info("planned order for project %s:", plan.project_key)
                for path in plan.merge_order:
                    logger.info("%s", path)
                items.append(
                    ProjectMergeResult(
                        project_key=plan.project_key,
                        status=Status.PLANNED,
                        merge_order=plan.merge_order,
                        output_path=plan.output_path,
                    )
                )
            return RunResult(items=items)

        return self.merge_projects(project_set, index, context.output_dir)
