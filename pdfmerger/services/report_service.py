from __future__ import annotations

import csv
import io

from pdfmerger.domain.models import RunResult


class ReportService:
    @staticmethod
    def build_csv(result: RunResult) -> tuple[str, bytes]:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(
            [
                "project",
                "status",
                "output_path",
                "file_count",
                "merged_pages",
                "merge_order",
                "messages",
            ]
        )
        for item in result.items:
            writer.writerow(
                [
                    item.project_key,
                    item.status.value,
                    str(item.output_path) if item.output_path else "",
                    len(item.merge_order),
                    item.merged_pages,
                    " | ".join(str(path) for path in item.merge_order),
                    " | ".join(message.text for message in item.messages),
                ]
            )
        return "merge_report.csv", buffer.getvalue().encode("utf-8")

    @staticmethod
    def build_text_summary(result: RunResult) -> tuple[str, str]:
        lines: list[str] = []
        lines.append("Merge Run Summary")
        lines.append(
            "success="
            f"{result.success_count} "
            "planned="
            f"{result.planned_count} "
            "error="
            f"{result.error_count}"
        )
        lines.append("")
        for item in result.items:
            lines.append(f"[{item.status.value.upper()}] {item.project_key}")
            if item.output_path:
                lines.append(f"output: {item.output_path}")
            lines.extend(f"  {index}. {path}" for index, path in enumerate(item.merge_order, 1))
            if item.messages:
                lines.extend(f"- {msg.text}" for msg in item.messages)
            lines.append("")
        return "merge_report.txt", "\n".join(lines).rstrip() + "\n"
