import asyncio
import datetime

import pytest

from spec_score.models.errors import ErrorKind, SpecScoreError
from spec_score.models.scoring import Grade
from spec_score.services.report_writer import (
    grade_color,
    percentage_color,
    render_html,
    render_markdown,
    write_html_report,
    write_markdown_report,
)
from spec_score.services.scorer import score_source

REPORT_DATE = datetime.date(2024, 5, 1)


@pytest.fixture
def pet_store_result(good_spec_path):
    return asyncio.run(score_source(good_spec_path))


def test_markdown_report_sections(pet_store_result) -> None:
    markdown = render_markdown(pet_store_result, 1000, generated_on=REPORT_DATE)

    assert markdown.startswith("# OpenAPI Specification Report")
    assert "Generated on: 2024-05-01" in markdown
    assert "Report Duration: 1000ms" in markdown
    assert "| **Title** | Pet Store API |" in markdown
    assert "| **Overall Score** | **79/100 (Grade: B)** |" in markdown
    assert "| Criteria | Score | Max | Percentage | Status |" in markdown
    assert "| Response Codes | 15 | 15 | 100% | ✅ |" in markdown
    assert "| Examples & Samples | 6 | 10 | 64% | ⚠️ |" in markdown
    assert "| Security | 5 | 10 | 50% | ❌ |" in markdown
    assert "## Detailed Analysis" in markdown
    assert "### Schema & Types (18/20)" in markdown
    assert "## Overall Feedback" in markdown


def test_markdown_priority_improvements_are_capped(minimal_spec_path) -> None:
    result = asyncio.run(score_source(minimal_spec_path))

    markdown = render_markdown(result, 5)

    priorities = markdown.split("## Priority Improvements")[1]
    assert "5. " in priorities
    assert "6. " not in priorities
    assert "1. Define reusable schemas in components.schemas" in priorities


def test_html_report_escapes_and_colours(pet_store_result) -> None:
    html = render_html(pet_store_result, 1000, generated_on=REPORT_DATE)

    assert html.startswith("<!DOCTYPE html>")
    assert "OpenAPI Specification Report" in html
    assert "Pet Store API" in html
    assert "Schema &amp; Types" in html
    assert "progress-bar" in html
    assert "criteria-card" in html
    assert "width: 64%" in html
    assert grade_color(Grade.B) in html


def test_colours_follow_bands() -> None:
    assert grade_color(Grade.A) == "#22c55e"
    assert grade_color(Grade.B) == "#3b82f6"
    assert grade_color(Grade.C) == "#eab308"
    assert grade_color(Grade.D) == grade_color(Grade.F) == "#ef4444"
    assert percentage_color(80) == "#22c55e"
    assert percentage_color(60) == "#eab308"
    assert percentage_color(59) == "#ef4444"


def test_writers_save_reports(pet_store_result, tmp_path) -> None:
    markdown_path = write_markdown_report(pet_store_result, tmp_path / "report.md", 10)
    html_path = write_html_report(pet_store_result, str(tmp_path / "report.html"), 10)

    assert "Pet Store API" in markdown_path.read_text(encoding="utf-8")
    assert "Pet Store API" in html_path.read_text(encoding="utf-8")


def test_writers_require_output_path(pet_store_result) -> None:
    with pytest.raises(SpecScoreError) as exc_info:
        write_markdown_report(pet_store_result, None, 10)

    assert exc_info.value.kind == ErrorKind.CONFIGURATION_ERROR


def test_write_failure_is_reraised(pet_store_result, tmp_path) -> None:
    with pytest.raises(OSError):
        write_html_report(pet_store_result, tmp_path / "missing-dir" / "report.html", 10)
