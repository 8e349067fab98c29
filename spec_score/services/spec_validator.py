"""
Structural validation of OpenAPI specifications.

Meta-schema and reference validation is delegated to openapi-spec-validator. On top of it,
a handful of document-level warnings are collected (missing paths, description, security,
examples, OpenAPI 3.0 upgrade hint). Failures are captured into the ValidationResult rather
than raised, so callers can render a structured failure report.

Sample input: source="tests/fixtures/good-openapi.yaml"
Expected output: ValidationResult(is_valid=True, warnings=[...], stats=DocumentStats(...))
"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from openapi_spec_validator import validate as validate_openapi
from openapi_spec_validator.validation.exceptions import (
    OpenAPIValidationError,
    ValidatorDetectError,
)
from referencing.exceptions import Unresolvable

from ..models.document import OpenAPIDocument
from ..models.errors import ErrorKind, SpecScoreError
from ..models.scoring import DocumentStats, ValidationResult
from .config_manager import _progress_pause
from .spec_loader import _load_specification, _parse_spec_content, build_document
from .tree_accessors import (
    HTTP_METHODS,
    component_count,
    has_example,
    iter_operations,
    iter_response_media_types,
)

logger = logging.getLogger(__name__)


def _check_structure(spec_dict: Dict[str, Any], source: str) -> None:
    """Run meta-schema validation, translating library errors into SpecScoreError."""
    try:
        validate_openapi(spec_dict)
    except ValidatorDetectError as e:
        raise SpecScoreError(ErrorKind.PARSER_ERROR, str(e), source)
    except Unresolvable as e:
        raise SpecScoreError(ErrorKind.REFERENCE_RESOLUTION_ERROR, str(e), source)
    except OpenAPIValidationError as e:
        raise SpecScoreError(ErrorKind.SCHEMA_VALIDATION_ERROR, e.message, source)


def count_missing_response_examples(document: OpenAPIDocument) -> int:
    """Response media types, across every operation, carrying neither example nor examples."""
    return sum(
        1
        for _, _, operation in iter_operations(document, HTTP_METHODS)
        for media_type in iter_response_media_types(operation)
        if not has_example(media_type)
    )


def collect_warnings(document: OpenAPIDocument) -> List[str]:
    """Document-level warnings layered on top of meta-schema validation."""
    warnings = []

    if not document.paths:
        warnings.append("No paths defined in the specification")

    if not document.info.description:
        warnings.append("API description is missing from info object")

    missing_examples = count_missing_response_examples(document)
    if missing_examples > 0:
        warnings.append(f"{missing_examples} response(s) missing examples")

    has_schemes = (
        document.components is not None
        and document.components.security_schemes is not None
    )
    if not has_schemes and document.security is None:
        warnings.append("No security schemes defined")

    if (document.openapi or "").startswith("3.0"):
        warnings.append("Consider upgrading to OpenAPI 3.1.0 for improved JSON Schema support")

    return warnings


def calculate_stats(document: OpenAPIDocument) -> DocumentStats:
    return DocumentStats(
        paths=len(document.paths or {}),
        operations=sum(1 for _ in iter_operations(document, HTTP_METHODS)),
        schemas=component_count(document, "schemas"),
        parameters=component_count(document, "parameters"),
    )


async def validate_spec(
    source: str, transport: Optional[httpx.AsyncBaseTransport] = None
) -> ValidationResult:
    """Load and validate a specification from a file path or URL.

    Args:
        source: File path or http(s) URL
        transport: Optional httpx transport, used to stub the network in tests

    Returns:
        ValidationResult; errors are collected, never raised
    """
    try:
        logger.info("Parsing OpenAPI document...")
        await _progress_pause()
        content = await _load_specification(source, transport=transport)
        spec_dict = _parse_spec_content(content, source)
        logger.info("Document parsed successfully")

        logger.info("Validating against OpenAPI specification...")
        await _progress_pause()
        _check_structure(spec_dict, source)
        document = build_document(spec_dict, source)
        logger.info("Validation successful")

        logger.info("Analyzing document structure...")
        await _progress_pause()
        warnings = collect_warnings(document)
        stats = calculate_stats(document)
        logger.info("Document structure analysis completed")
    except SpecScoreError as e:
        logger.error(f"Validation of {source} failed: {e.describe()}")
        return ValidationResult(is_valid=False, errors=[e.describe()])
    except Exception as e:
        logger.error(f"Unexpected error validating {source}: {e}")
        return ValidationResult(is_valid=False, errors=[f"Unknown validation error: {e}"])

    return ValidationResult(is_valid=True, document=document, warnings=warnings, stats=stats)
