"""
ReportGenerator - Render interpretation reports in multiple formats.

Produces JSON, Markdown, plain-text and summary reports from
interpretation results.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence
from datetime import datetime
import json
import logging
import re

from .core.types import GroupResult, InterpretationReport, ResultStatus, Statement
from .infrastructure.fingerprint import get_environment_info

logger = logging.getLogger(__name__)

ATTENTION_PREFIX = "[ATTENTION]"
ERROR_PREFIX = "[ERROR]"


def format_statement(statement: Statement) -> str:
    """Statement text with its attention or error marker."""
    if statement.error:
        return f"{ERROR_PREFIX} {statement.text}"
    if statement.attention:
        return f"{ATTENTION_PREFIX} {statement.text}"
    return statement.text


def _safe_name(value: str) -> str:
    return re.sub(r"[^A-Za-z0-9_-]+", "-", value).strip("-") or "subject"


class ReportGenerator:
    """Generate trait reports in multiple formats."""

    def __init__(self, output_dir: str, include_genotypes: bool = True):
        """
        Initialize the report generator.

        Args:
            output_dir: Directory to save reports
            include_genotypes: Whether to show quick-genotype summaries
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.include_genotypes = include_genotypes

    def _output_path(self, report: InterpretationReport, suffix: str) -> Path:
        safe_timestamp = report.timestamp.replace(":", "-").replace(".", "-")
        return self.output_dir / f"{_safe_name(report.subject)}_{safe_timestamp}.{suffix}"

    def generate_all(
        self, report: InterpretationReport, formats: Optional[Sequence[str]] = None
    ) -> Dict[str, Path]:
        """
        Generate the requested report formats.

        Args:
            report: InterpretationReport to generate reports from
            formats: Any of "json", "markdown", "text" (default: all)

        Returns:
            Dict with paths to generated files
        """
        generators = {
            "json": self.generate_json,
            "markdown": self.generate_markdown,
            "text": self.generate_text,
        }
        formats = list(formats) if formats is not None else list(generators)

        paths = {}
        for fmt in formats:
            if fmt not in generators:
                raise ValueError(f"Unknown report format: {fmt}")
            paths[fmt] = generators[fmt](report)

        return paths

    def generate_json(self, report: InterpretationReport) -> Path:
        """
        Export complete report as JSON.

        Args:
            report: InterpretationReport to export

        Returns:
            Path to the generated JSON file
        """
        output_path = self._output_path(report, "json")

        report_dict = report.to_dict()
        if not self.include_genotypes:
            for group in report_dict["groups"]:
                group.pop("summary", None)
        report_dict["environment"] = get_environment_info()

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report_dict, f, indent=2, ensure_ascii=False)

        logger.info(f"JSON report saved to {output_path}")
        return output_path

    def render_markdown(self, report: InterpretationReport) -> str:
        """Render a report as Markdown."""
        lines = [
            f"# Trait Report: {report.subject}",
            "",
            f"**Profile Layout:** {report.layout}",
            f"**Generated:** {report.timestamp}",
            f"**Status:** {'OK' if report.status == ResultStatus.OK else 'PARTIAL FAILURE'}",
            "",
        ]

        attention = report.attention_statements
        if attention:
            lines.extend(["## Attention", ""])
            for statement in attention:
                lines.append(f"- {statement.text}")
            lines.append("")

        for group in report.groups:
            lines.extend(self._markdown_group(group))

        return "\n".join(lines)

    def _markdown_group(self, group: GroupResult) -> List[str]:
        lines = [f"## {group.group.title}", ""]
        if self.include_genotypes and group.summary:
            lines.extend([f"`[Quick Genotype: {group.summary}]`", ""])
        if group.note:
            lines.extend([f"_{group.note}_", ""])
        for statement in group.statements:
            lines.append(f"- {format_statement(statement)}")
        lines.append("")
        return lines

    def generate_markdown(self, report: InterpretationReport) -> Path:
        """
        Generate detailed markdown report.

        Args:
            report: InterpretationReport to export

        Returns:
            Path to the generated Markdown file
        """
        output_path = self._output_path(report, "md")

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.render_markdown(report))

        logger.info(f"Markdown report saved to {output_path}")
        return output_path

    def render_text(self, report: InterpretationReport) -> str:
        """Render a report as plain text."""
        lines = [f"Trait report for {report.subject}", "=" * 60]
        for group in report.groups:
            lines.append("")
            lines.append(group.group.title.upper())
            if self.include_genotypes and group.summary:
                lines.append(f"[Quick Genotype: {group.summary}]")
            if group.note:
                lines.append(group.note)
            for statement in group.statements:
                lines.append(f"  * {format_statement(statement)}")
        lines.append("")
        return "\n".join(lines)

    def generate_text(self, report: InterpretationReport) -> Path:
        """Generate a plain-text report."""
        output_path = self._output_path(report, "txt")

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.render_text(report))

        logger.info(f"Text report saved to {output_path}")
        return output_path

    def generate_summary(self, report: InterpretationReport) -> str:
        """
        Generate one-line summary for logs.

        Args:
            report: InterpretationReport to summarize

        Returns:
            Summary string
        """
        status = "OK" if report.status == ResultStatus.OK else "PARTIAL"
        return (
            f"[{status}] {report.subject} ({report.layout}): "
            f"Attention={len(report.attention_statements)}, "
            f"Errors={len(report.errors)}"
        )

    def generate_batch_summary(
        self,
        reports: List[InterpretationReport],
        output_name: str = "batch_summary",
    ) -> Path:
        """
        Generate an overview of many subjects' reports.

        Args:
            reports: List of InterpretationReport objects
            output_name: Base name for output file

        Returns:
            Path to the generated summary file
        """
        output_path = self.output_dir / f"{output_name}.md"

        lines = [
            "# Trait Report Batch Summary",
            "",
            f"**Generated:** {datetime.now().isoformat()}",
            f"**Subjects:** {len(reports)}",
            "",
            "| Subject | Layout | Attention | Errors | Status |",
            "|---------|--------|-----------|--------|--------|",
        ]

        for report in reports:
            status = "OK" if report.status == ResultStatus.OK else "PARTIAL"
            lines.append(
                f"| {report.subject} | {report.layout} | "
                f"{len(report.attention_statements)} | {len(report.errors)} | {status} |"
            )
        lines.append("")

        flagged = [r for r in reports if r.attention_statements]
        if flagged:
            lines.extend(["## Attention", ""])
            for report in flagged:
                lines.append(f"### {report.subject}")
                lines.append("")
                for statement in report.attention_statements:
                    lines.append(f"- {statement.text}")
                lines.append("")

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines))

        logger.info(f"Batch summary saved to {output_path}")
        return output_path
