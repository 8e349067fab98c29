"""
Error categories raised while loading, validating and reporting on OpenAPI specifications.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Category of a failure surfaced to the user."""

    FILE_NOT_FOUND = "file_not_found"
    PERMISSION_DENIED = "permission_denied"
    NETWORK_ERROR = "network_error"
    SYNTAX_ERROR = "syntax_error"
    REFERENCE_RESOLUTION_ERROR = "reference_resolution_error"
    SCHEMA_VALIDATION_ERROR = "schema_validation_error"
    PARSER_ERROR = "parser_error"
    CONFIGURATION_ERROR = "configuration_error"
    UNKNOWN_ERROR = "unknown_error"

    @property
    def label(self) -> str:
        """Human-readable prefix used when listing validation errors."""
        return _LABELS[self]


_LABELS = {
    ErrorKind.FILE_NOT_FOUND: "File Error",
    ErrorKind.PERMISSION_DENIED: "File Error",
    ErrorKind.NETWORK_ERROR: "Network Error",
    ErrorKind.SYNTAX_ERROR: "Syntax Error",
    ErrorKind.REFERENCE_RESOLUTION_ERROR: "Reference Resolution Error",
    ErrorKind.SCHEMA_VALIDATION_ERROR: "Schema Validation Error",
    ErrorKind.PARSER_ERROR: "Parser Error",
    ErrorKind.CONFIGURATION_ERROR: "Configuration Error",
    ErrorKind.UNKNOWN_ERROR: "Validation Error",
}


class SpecScoreError(Exception):
    """Failure with a known category and, when relevant, the offending source."""

    def __init__(self, kind: ErrorKind, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.source = source

    def describe(self) -> str:
        """Format the error as a single line for numbered error listings."""
        return f"{self.kind.label}: {self.message}"
