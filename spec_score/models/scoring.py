"""
Pydantic models for rubric scoring and validation results.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .document import OpenAPIDocument

logger = logging.getLogger(__name__)


class Grade(str, Enum):
    """Letter grade derived from the total score."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class CriterionResult(BaseModel):
    """Score and observations for one rubric criterion."""

    name: str = Field(description="Criterion name")
    score: int = Field(ge=0, description="Rounded score")
    max_score: int = Field(gt=0, description="Maximum attainable score")
    percentage: int = Field(ge=0, le=100, description="Score as a percentage of max_score")
    findings: List[str] = Field(
        default_factory=list, description="Facts observed in the document"
    )
    suggestions: List[str] = Field(
        default_factory=list, description="Improvement suggestions"
    )

    model_config = {"frozen": True}


class ScoringResult(BaseModel):
    """Complete scoring result for an OpenAPI document."""

    criteria: List[CriterionResult] = Field(description="The seven criterion results")
    total_score: int = Field(ge=0, le=100, description="Sum of the rounded criterion scores")
    grade: Grade = Field(description="Letter grade")
    feedback: List[str] = Field(default_factory=list, description="Overall feedback lines")
    document: OpenAPIDocument = Field(description="Scored document")

    model_config = {"frozen": True}

    @property
    def all_suggestions(self) -> List[str]:
        """Suggestions across every criterion, in criterion order."""
        return [suggestion for criterion in self.criteria for suggestion in criterion.suggestions]

    def get_criterion(self, name: str) -> Optional[CriterionResult]:
        """Look up a criterion result by name."""
        for criterion in self.criteria:
            if criterion.name == name:
                return criterion
        return None

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the scoring results."""
        try:
            summary = {
                "api_title": self.document.title,
                "api_version": self.document.info.version,
                "openapi_version": self.document.openapi,
                "total_score": self.total_score,
                "grade": self.grade.value,
                "criteria": {
                    criterion.name: f"{criterion.score}/{criterion.max_score}"
                    for criterion in self.criteria
                },
                "suggestions_count": len(self.all_suggestions),
            }
            logger.debug(f"Generated scoring summary for {self.document.title}")
            return summary
        except Exception as e:
            logger.error(f"Failed to generate scoring summary: {e}")
            raise


class DocumentStats(BaseModel):
    """Counts reported after a successful validation."""

    paths: int = Field(default=0, description="Number of paths")
    operations: int = Field(default=0, description="Number of operations across all methods")
    schemas: int = Field(default=0, description="Number of component schemas")
    parameters: int = Field(default=0, description="Number of component parameters")


class ValidationResult(BaseModel):
    """Outcome of loading and structurally validating a specification."""

    is_valid: bool = Field(default=False, description="Whether validation succeeded")
    document: Optional[OpenAPIDocument] = Field(
        default=None, description="Parsed document when validation succeeded"
    )
    errors: List[str] = Field(default_factory=list, description="Collected errors")
    warnings: List[str] = Field(default_factory=list, description="Collected warnings")
    stats: Optional[DocumentStats] = Field(default=None, description="Document statistics")
