"""
Data models for the OpenAPI specification scorer.
"""

from .document import (
    Components,
    Info,
    MediaType,
    OpenAPIDocument,
    Operation,
    Parameter,
    PathItem,
    RequestBody,
    Response,
    Schema,
)
from .errors import ErrorKind, SpecScoreError
from .scoring import (
    CriterionResult,
    DocumentStats,
    Grade,
    ScoringResult,
    ValidationResult,
)

__all__ = [
    "Components",
    "CriterionResult",
    "DocumentStats",
    "ErrorKind",
    "Grade",
    "Info",
    "MediaType",
    "OpenAPIDocument",
    "Operation",
    "Parameter",
    "PathItem",
    "RequestBody",
    "Response",
    "Schema",
    "ScoringResult",
    "SpecScoreError",
    "ValidationResult",
]
