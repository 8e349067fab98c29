"""
Markdown and HTML report generation.
Renders a ScoringResult into a Markdown document or a jinja2 HTML page and writes it to disk.

Sample input: ScoringResult, output_path="report.md", duration_ms=412
Expected output: report.md containing API information, scoring breakdown and priority improvements
"""

import datetime
import logging
from pathlib import Path
from typing import List, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..config import get_templates_dir
from ..models.errors import ErrorKind, SpecScoreError
from ..models.scoring import Grade, ScoringResult
from .config_loader import config
from .output_formatter import _status_marker

logger = logging.getLogger(__name__)

HTML_TEMPLATE = "report.html.j2"
REPORT_FOOTER = "*Report generated by spec-score CLI tool*"

GRADE_COLORS = {
    Grade.A: "#22c55e",
    Grade.B: "#3b82f6",
    Grade.C: "#eab308",
}
FAILING_COLOR = "#ef4444"
WARNING_COLOR = "#eab308"
PASSING_COLOR = "#22c55e"


def grade_color(grade: Grade) -> str:
    return GRADE_COLORS.get(grade, FAILING_COLOR)


def percentage_color(percentage: int) -> str:
    if percentage >= 80:
        return PASSING_COLOR
    if percentage >= 60:
        return WARNING_COLOR
    return FAILING_COLOR


def _generated_on(generated_on: Optional[datetime.date]) -> str:
    return (generated_on or datetime.date.today()).isoformat()


def render_markdown(
    result: ScoringResult,
    duration_ms: int,
    generated_on: Optional[datetime.date] = None,
) -> str:
    """Render the scoring result as a Markdown document."""
    document = result.document
    lines: List[str] = [
        "# OpenAPI Specification Report",
        "",
        f"Generated on: {_generated_on(generated_on)}  ",
        f"Report Duration: {duration_ms}ms",
        "",
        "## API Information",
        "",
        "| Field | Value |",
        "|-------|-------|",
        f"| **Title** | {document.title} |",
        f"| **Version** | {document.info.version} |",
        f"| **OpenAPI Version** | {document.openapi} |",
        f"| **Overall Score** | **{result.total_score}/100 (Grade: {result.grade.value})** |",
        "",
        "## Scoring Breakdown",
        "",
        "| Criteria | Score | Max | Percentage | Status |",
        "|----------|-------|-----|------------|--------|",
    ]
    for criterion in result.criteria:
        lines.append(
            f"| {criterion.name} | {criterion.score} | {criterion.max_score} "
            f"| {criterion.percentage}% | {_status_marker(criterion.percentage)} |"
        )

    lines.extend(["", "## Detailed Analysis", ""])
    for criterion in result.criteria:
        lines.extend([f"### {criterion.name} ({criterion.score}/{criterion.max_score})", ""])
        if criterion.findings:
            lines.append("**Findings:**")
            lines.extend(f"- {finding}" for finding in criterion.findings)
            lines.append("")
        if criterion.suggestions:
            lines.append("**Suggestions:**")
            lines.extend(f"- {suggestion}" for suggestion in criterion.suggestions)
            lines.append("")

    if result.feedback:
        lines.extend(["## Overall Feedback", ""])
        lines.extend(f"- {line}" for line in result.feedback)
        lines.append("")

    max_suggestions = config.get_int("max_priority_suggestions", 5)
    priorities = result.all_suggestions[:max_suggestions]
    if priorities:
        lines.extend(["## Priority Improvements", ""])
        lines.extend(
            f"{index}. {suggestion}" for index, suggestion in enumerate(priorities, start=1)
        )
        lines.append("")

    lines.extend(["---", REPORT_FOOTER])
    return "\n".join(lines)


def _create_template_environment() -> Environment:
    templates_dir = get_templates_dir()
    logger.debug(f"Loading report templates from {templates_dir}")
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "j2"]),
    )


def render_html(
    result: ScoringResult,
    duration_ms: int,
    generated_on: Optional[datetime.date] = None,
) -> str:
    """Render the scoring result as a standalone HTML page."""
    template = _create_template_environment().get_template(HTML_TEMPLATE)
    max_suggestions = config.get_int("max_priority_suggestions", 5)
    return template.render(
        result=result,
        priorities=result.all_suggestions[:max_suggestions],
        document=result.document,
        duration_ms=duration_ms,
        generated_on=_generated_on(generated_on),
        grade_color=grade_color(result.grade),
        percentage_color=percentage_color,
    )


def _write_report(content: str, output_path: Union[str, Path, None], label: str) -> Path:
    if not output_path:
        raise SpecScoreError(
            ErrorKind.CONFIGURATION_ERROR,
            f"Output file path is required for {label} reports",
        )

    path = Path(output_path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to write {label} report to {path}: {e}")
        raise

    logger.info(f"{label} report written to {path}")
    return path


def write_markdown_report(
    result: ScoringResult, output_path: Union[str, Path, None], duration_ms: int
) -> Path:
    """Render and save the Markdown report.

    Raises:
        SpecScoreError: If no output path is given
        OSError: If the file cannot be written
    """
    return _write_report(render_markdown(result, duration_ms), output_path, "Markdown")


def write_html_report(
    result: ScoringResult, output_path: Union[str, Path, None], duration_ms: int
) -> Path:
    """Render and save the HTML report.

    Raises:
        SpecScoreError: If no output path is given
        OSError: If the file cannot be written
    """
    return _write_report(render_html(result, duration_ms), output_path, "HTML")
