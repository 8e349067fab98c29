"""
Display and output formatting utilities.
Handles console output for validation results and scoring reports.

Sample input: ScoringResult with seven criteria, duration_ms=412
Expected output: Formatted console display with status indicators
"""

import logging

from ..models.scoring import ScoringResult, ValidationResult
from .config_loader import config

logger = logging.getLogger(__name__)

CRITERION_NAME_WIDTH = 30


def _status_marker(percentage: int) -> str:
    """Status marker for a criterion percentage: pass, warn or fail."""
    if percentage >= 80:
        return "✅"
    if percentage >= 60:
        return "⚠️"
    return "❌"


def _preview(text: str, length: int) -> str:
    if len(text) > length:
        return f"{text[:length]}..."
    return text


def _print_validation_success(result: ValidationResult, duration_ms: int) -> None:
    """Print document information, statistics and warnings for a valid specification."""
    print("")
    document = result.document
    if document is not None:
        print("📋 DOCUMENT INFORMATION:")
        print(f"   OpenAPI Version: {document.openapi}")
        print(f"   Title: {document.title}")
        print(f"   Version: {document.info.version}")
        if document.info.description:
            preview_length = config.get_int("description_preview_length", 100)
            print(f"   Description: {_preview(document.info.description, preview_length)}")
        print("")

    if result.stats is not None:
        print("📊 DOCUMENT STATISTICS:")
        print(f"   Paths: {result.stats.paths}")
        print(f"   Operations: {result.stats.operations}")
        print(f"   Schemas: {result.stats.schemas}")
        print(f"   Parameters: {result.stats.parameters}")
        print("")

    if result.warnings:
        print("⚠️  WARNINGS:")
        for warning in result.warnings:
            print(f"   • {warning}")
        print("")

    print(f"✅ Validation completed in {duration_ms}ms")


def _print_validation_failure(result: ValidationResult, duration_ms: int) -> None:
    """Print numbered errors and any accumulated warnings."""
    print("❌ Validation failed!")
    print("")

    print("🔴 ERRORS:")
    for index, error in enumerate(result.errors, start=1):
        print(f"   {index}. {error}")
    print("")

    if result.warnings:
        print("⚠️  ADDITIONAL WARNINGS:")
        for warning in result.warnings:
            print(f"   • {warning}")
        print("")

    print(f"❌ Validation failed after {duration_ms}ms")


def _print_scoring_result(result: ScoringResult, duration_ms: int) -> None:
    """Print the scoring report to the console.

    Args:
        result: Scoring result to display
        duration_ms: Elapsed time for loading and scoring
    """
    try:
        print(f"\n{'='*60}")
        print("📊 OPENAPI SPECIFICATION REPORT")
        print(f"{'='*60}")
        print(f"   API Title: {result.document.title}")
        print(f"   Version: {result.document.info.version}")
        print(f"   Overall Score: {result.total_score}/100 ({result.grade.value})")
        print("")

        print("🎯 DETAILED SCORING:")
        for criterion in result.criteria:
            print(
                f"   {_status_marker(criterion.percentage)} "
                f"{criterion.name.ljust(CRITERION_NAME_WIDTH)} "
                f"{criterion.score}/{criterion.max_score} ({criterion.percentage}%)"
            )
            for finding in criterion.findings:
                print(f"        • {finding}")
        print("")

        if result.feedback:
            print("💬 OVERALL FEEDBACK:")
            for line in result.feedback:
                print(f"   • {line}")
            print("")

        max_suggestions = config.get_int("max_priority_suggestions", 5)
        suggestions = result.all_suggestions[:max_suggestions]
        if suggestions:
            print("💡 SUGGESTIONS FOR IMPROVEMENT:")
            for suggestion in suggestions:
                print(f"   • {suggestion}")
            print("")

        print(f"✅ Report generated in {duration_ms}ms")
        print(f"{'='*60}")
    except Exception as e:
        logger.error(f"Failed to print scoring result: {e}")
        raise
