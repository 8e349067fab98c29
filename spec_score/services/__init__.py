"""
Service functions for the OpenAPI specification scorer.
"""

from .aggregator import aggregate, calculate_grade
from .report_writer import render_html, render_markdown, write_html_report, write_markdown_report
from .scorer import score_document, score_source
from .spec_loader import load_document
from .spec_validator import validate_spec

__all__ = [
    # Loading and validation
    "load_document",
    "validate_spec",
    # Scoring
    "aggregate",
    "calculate_grade",
    "score_document",
    "score_source",
    # Reports
    "render_html",
    "render_markdown",
    "write_html_report",
    "write_markdown_report",
]
