"""
Combines the seven criterion results into a total score, a letter grade and overall feedback.

Sample input: seven CriterionResult objects whose scores sum to 74
Expected output: ScoringResult(total_score=74, grade=Grade.B, feedback=[...])
"""

import logging
from typing import List, Sequence

from ..models.document import OpenAPIDocument
from ..models.scoring import CriterionResult, Grade, ScoringResult

logger = logging.getLogger(__name__)

# Lower bound of each band, highest first. Narrative feedback uses the same bands.
GRADE_BANDS = (
    (80, Grade.A),
    (70, Grade.B),
    (60, Grade.C),
    (50, Grade.D),
)

FEEDBACK_BANDS = (
    (80, "Excellent! Your OpenAPI specification follows industry best practices."),
    (70, "Good job! Your API specification is well-structured with minor areas for improvement."),
    (60, "Your API specification is decent but has several areas that could be improved."),
    (50, "Your API specification needs significant improvements to meet best practices."),
)
FALLBACK_FEEDBACK = "Your API specification requires major improvements across multiple areas."

WEAK_AREA_THRESHOLD = 60
MAX_WEAK_AREAS = 3


def calculate_grade(total_score: int) -> Grade:
    """Map a total score to its letter grade."""
    for lower_bound, grade in GRADE_BANDS:
        if total_score >= lower_bound:
            return grade
    return Grade.F


def select_weak_areas(criteria: Sequence[CriterionResult]) -> List[CriterionResult]:
    """Up to three criteria below the threshold, lowest percentage first."""
    weak = [criterion for criterion in criteria if criterion.percentage < WEAK_AREA_THRESHOLD]
    weak.sort(key=lambda criterion: criterion.percentage)
    return weak[:MAX_WEAK_AREAS]


def generate_overall_feedback(
    total_score: int, criteria: Sequence[CriterionResult]
) -> List[str]:
    """Narrative line for the score band, plus the weakest areas when there are any."""
    feedback = [
        next(
            (message for lower_bound, message in FEEDBACK_BANDS if total_score >= lower_bound),
            FALLBACK_FEEDBACK,
        )
    ]

    weak_areas = select_weak_areas(criteria)
    if weak_areas:
        feedback.append(
            f"Focus on improving: {', '.join(area.name for area in weak_areas)}"
        )

    return feedback


def aggregate(criteria: Sequence[CriterionResult], document: OpenAPIDocument) -> ScoringResult:
    """Build the final scoring result from already-rounded criterion scores."""
    total_score = sum(criterion.score for criterion in criteria)
    grade = calculate_grade(total_score)
    result = ScoringResult(
        criteria=list(criteria),
        total_score=total_score,
        grade=grade,
        feedback=generate_overall_feedback(total_score, criteria),
        document=document,
    )
    logger.info(f"Total score {total_score}/100 (grade {grade.value})")
    return result
