"""
Rubric evaluators for OpenAPI documents.

Each evaluator is a pure function taking an OpenAPIDocument and returning a CriterionResult.
Evaluators share no state and may run in any order. Raw (real-valued) scores are summed from
bounded terms, then rounded half-up for the reported score; the percentage is computed from
the unrounded raw score.

Sample input: OpenAPIDocument parsed from a Pet Store specification
Expected output: CriterionResult(name="Schema & Types", score=18, max_score=20, ...)
"""

import logging
import re
from typing import List, Set

from ..models.document import OpenAPIDocument
from ..models.scoring import CriterionResult
from .tree_accessors import (
    CRUD_METHODS,
    HTTP_METHODS,
    REUSABLE_COMPONENT_TYPES,
    component_count,
    content_has_example,
    describes,
    get_operation,
    has_paths,
    has_request_content,
    has_schema,
    is_object_schema,
    iter_component_schemas,
    iter_operations,
    iter_parameters,
    iter_path_items,
    iter_request_media_types,
    iter_response_contents,
    iter_response_media_types,
    iter_responses,
    round_half_up,
    security_scheme_count,
)

logger = logging.getLogger(__name__)

SCHEMA_AND_TYPES = "Schema & Types"
DESCRIPTIONS = "Descriptions & Documentation"
PATHS_AND_OPERATIONS = "Paths & Operations"
RESPONSE_CODES = "Response Codes"
EXAMPLES = "Examples & Samples"
SECURITY = "Security"
BEST_PRACTICES = "Best Practices"

NO_PATHS_FINDING = "No paths defined"

WELL_NAMED_SEGMENT = re.compile(r"^[a-z0-9-]+$")
PATH_PARAMETER = re.compile(r"\{[^}]+\}")

STANDARD_SUCCESS_CODES = ("200", "201", "202", "204")
STANDARD_ERROR_CODES = ("400", "401", "403", "404", "409", "422", "500")

DEFAULT_API_VERSION = "1.0.0"


def _build_result(
    name: str,
    raw_score: float,
    max_score: int,
    findings: List[str],
    suggestions: List[str],
) -> CriterionResult:
    result = CriterionResult(
        name=name,
        score=round_half_up(raw_score),
        max_score=max_score,
        percentage=round_half_up(raw_score / max_score * 100),
        findings=findings,
        suggestions=suggestions,
    )
    logger.debug(f"{name}: raw={raw_score:.3f} score={result.score}/{max_score}")
    return result


def _no_paths_result(name: str, max_score: int, suggestion: str) -> CriterionResult:
    return _build_result(name, 0, max_score, [NO_PATHS_FINDING], [suggestion])


# -----------------------------------------------------------------------------
# Criterion evaluators
# -----------------------------------------------------------------------------

def score_schema_and_types(document: OpenAPIDocument) -> CriterionResult:
    """Score Schema & Types (20 points): named schemas, typing quality and schema usage."""
    max_score = 20
    score = 0.0
    findings: List[str] = []
    suggestions: List[str] = []

    schemas = list(iter_component_schemas(document))
    schema_count = len(schemas)

    if schema_count > 0:
        score += 5
        findings.append(f"Found {schema_count} schema definitions")
    else:
        findings.append("No schema definitions found")
        suggestions.append("Define reusable schemas in components.schemas")

    properly_typed = 0
    free_form = 0
    for _, schema in schemas:
        if not is_object_schema(schema):
            continue
        if schema.properties:
            properly_typed += 1
        elif schema.additional_properties in (None, False):
            free_form += 1

    if properly_typed > 0:
        score += min(10, properly_typed / schema_count * 10)
        findings.append(f"{properly_typed} schemas have proper type definitions")

    if free_form > 0:
        findings.append(f"{free_form} schemas are free-form objects without properties")
        suggestions.append(
            "Define specific properties for object schemas instead of using free-form objects"
        )

    schema_usages = 0
    total_operations = 0
    for _, _, operation in iter_operations(document, CRUD_METHODS):
        total_operations += 1
        schema_usages += sum(1 for media in iter_request_media_types(operation) if has_schema(media))
        schema_usages += sum(1 for media in iter_response_media_types(operation) if has_schema(media))

    if total_operations > 0:
        usage_ratio = schema_usages / (total_operations * 2)
        score += min(5, usage_ratio * 5)
        findings.append(f"{round_half_up(usage_ratio * 100)}% of operations use proper schemas")

    if score < max_score * 0.5:
        suggestions.append("Increase use of strongly-typed schemas throughout the API")

    return _build_result(SCHEMA_AND_TYPES, score, max_score, findings, suggestions)


def score_descriptions(document: OpenAPIDocument) -> CriterionResult:
    """Score Descriptions & Documentation (20 points)."""
    max_score = 20
    score = 0.0
    findings: List[str] = []
    suggestions: List[str] = []

    if describes(document.info.description, 10):
        score += 3
        findings.append("API has a meaningful description")
    else:
        suggestions.append("Add a comprehensive description to the API info object")

    total_paths = len(document.paths or {})
    paths_with_descriptions = sum(
        1 for _, path_item in iter_path_items(document) if path_item.description
    )

    operations_with_descriptions = 0
    parameters_with_descriptions = 0
    responses_with_descriptions = 0
    total_operations = 0
    total_parameters = 0
    total_responses = 0

    for _, _, operation in iter_operations(document, HTTP_METHODS):
        total_operations += 1
        if describes(operation.description, 5):
            operations_with_descriptions += 1

        for parameter in iter_parameters(operation):
            total_parameters += 1
            if parameter is not None and parameter.description:
                parameters_with_descriptions += 1

        for _, response in iter_responses(operation):
            total_responses += 1
            if response is not None and response.description:
                responses_with_descriptions += 1

    if total_operations > 0:
        score += operations_with_descriptions / total_operations * 8
        findings.append(
            f"{operations_with_descriptions}/{total_operations} operations have descriptions"
        )

    if total_parameters > 0:
        score += parameters_with_descriptions / total_parameters * 4
        findings.append(
            f"{parameters_with_descriptions}/{total_parameters} parameters have descriptions"
        )

    if total_responses > 0:
        score += responses_with_descriptions / total_responses * 3
        findings.append(
            f"{responses_with_descriptions}/{total_responses} responses have descriptions"
        )

    if total_paths > 0:
        score += paths_with_descriptions / total_paths * 2

    if score < max_score * 0.7:
        suggestions.append("Add descriptions to all operations, parameters, and responses")
        suggestions.append("Use meaningful descriptions that explain the purpose and behavior")

    return _build_result(DESCRIPTIONS, score, max_score, findings, suggestions)


def _is_well_named(path: str) -> bool:
    """Literal segments must be lowercase words joined by hyphens."""
    segments = [
        segment for segment in path.split("/") if segment and not segment.startswith("{")
    ]
    return all(WELL_NAMED_SEGMENT.match(segment) for segment in segments)


def normalize_path(path: str) -> str:
    """Replace every path parameter with a single placeholder token."""
    return PATH_PARAMETER.sub("{id}", path)


def score_paths_and_operations(document: OpenAPIDocument) -> CriterionResult:
    """Score Paths & Operations (15 points): naming, CRUD coverage and redundancy."""
    max_score = 15
    if not has_paths(document):
        return _no_paths_result(PATHS_AND_OPERATIONS, max_score, "Define API paths and operations")

    score = 0.0
    findings: List[str] = []
    suggestions: List[str] = []

    paths = list(document.paths)
    path_count = len(paths)

    well_named = sum(1 for path in paths if _is_well_named(path))
    score += well_named / path_count * 7
    findings.append(f"{well_named}/{path_count} paths follow RESTful naming conventions")

    crud_paths = 0
    for _, path_item in iter_path_items(document):
        has_get = get_operation(path_item, "get") is not None
        has_post = get_operation(path_item, "post") is not None
        if has_get and has_post:
            crud_paths += 1

    if crud_paths > 0:
        score += min(5, crud_paths * 2)
        findings.append(f"Found {crud_paths} CRUD-pattern endpoints")

    patterns: Set[str] = {normalize_path(path) for path in paths}
    overlapping = path_count - len(patterns)
    if overlapping == 0:
        score += 3
        findings.append("No overlapping or redundant paths detected")
    else:
        findings.append(f"{overlapping} potentially overlapping paths detected")
        suggestions.append("Review path structure for redundancy")

    if score < max_score * 0.6:
        suggestions.append("Use RESTful naming conventions (lowercase, hyphens, nouns)")
        suggestions.append("Implement consistent CRUD operations for resources")

    return _build_result(PATHS_AND_OPERATIONS, score, max_score, findings, suggestions)


def score_response_codes(document: OpenAPIDocument) -> CriterionResult:
    """Score Response Codes (15 points): success, error and multiple responses per operation."""
    max_score = 15
    if not has_paths(document):
        return _no_paths_result(
            RESPONSE_CODES, max_score, "Define API operations with proper response codes"
        )

    score = 0.0
    findings: List[str] = []
    suggestions: List[str] = []

    with_success = 0
    with_errors = 0
    with_multiple = 0
    total_operations = 0
    status_codes_used: Set[str] = set()

    for _, _, operation in iter_operations(document, CRUD_METHODS):
        total_operations += 1
        codes = list(operation.responses)
        status_codes_used.update(codes)

        if any(code.startswith("2") for code in codes):
            with_success += 1
        if any(code.startswith(("4", "5")) for code in codes):
            with_errors += 1
        if len(codes) > 1:
            with_multiple += 1

    if total_operations > 0:
        score += with_success / total_operations * 6
        score += with_errors / total_operations * 6
        score += with_multiple / total_operations * 3
        findings.append(f"{with_success}/{total_operations} operations define success responses")
        findings.append(f"{with_errors}/{total_operations} operations define error responses")
        findings.append(
            f"{with_multiple}/{total_operations} operations define multiple response codes"
        )

    uses_standard_success = any(code in status_codes_used for code in STANDARD_SUCCESS_CODES)
    uses_standard_errors = any(code in status_codes_used for code in STANDARD_ERROR_CODES)
    if uses_standard_success and uses_standard_errors:
        findings.append("Uses appropriate HTTP status codes")
    else:
        suggestions.append("Use standard HTTP status codes (200, 201, 400, 404, 500, etc.)")

    if score < max_score * 0.5:
        suggestions.append("Define both success and error responses for all operations")
        suggestions.append("Use specific status codes rather than just 200 and 500")

    return _build_result(RESPONSE_CODES, score, max_score, findings, suggestions)


def score_examples(document: OpenAPIDocument) -> CriterionResult:
    """Score Examples & Samples (10 points): request and response examples."""
    max_score = 10
    if not has_paths(document):
        return _no_paths_result(EXAMPLES, max_score, "Add request and response examples")

    score = 0.0
    findings: List[str] = []
    suggestions: List[str] = []

    with_request_examples = 0
    with_response_examples = 0
    total_with_bodies = 0
    total_responses = 0

    for _, _, operation in iter_operations(document, CRUD_METHODS):
        if has_request_content(operation):
            total_with_bodies += 1
            if content_has_example(operation.request_body.content):
                with_request_examples += 1

        for content in iter_response_contents(operation):
            total_responses += 1
            if content_has_example(content):
                with_response_examples += 1

    if total_with_bodies > 0:
        score += with_request_examples / total_with_bodies * 5
        findings.append(f"{with_request_examples}/{total_with_bodies} request bodies have examples")

    if total_responses > 0:
        score += with_response_examples / total_responses * 5
        findings.append(f"{with_response_examples}/{total_responses} responses have examples")

    if score < max_score * 0.3:
        suggestions.append("Add examples to request bodies and response content")
        suggestions.append("Examples help developers understand expected data formats")

    return _build_result(EXAMPLES, score, max_score, findings, suggestions)


def score_security(document: OpenAPIDocument) -> CriterionResult:
    """Score Security (10 points): schemes, global requirements and per-operation overrides."""
    max_score = 10
    score = 0.0
    findings: List[str] = []
    suggestions: List[str] = []

    scheme_count = security_scheme_count(document)
    if scheme_count > 0:
        score += min(5, scheme_count * 2)
        findings.append(f"Found {scheme_count} security scheme(s) defined")
    else:
        suggestions.append("Define security schemes in components.securitySchemes")

    if document.security:
        score += 3
        findings.append("Global security requirements defined")

    with_security = 0
    total_operations = 0
    for _, _, operation in iter_operations(document, CRUD_METHODS):
        total_operations += 1
        # an empty list still counts: it explicitly opts the operation out
        if operation.security is not None:
            with_security += 1

    if total_operations > 0 and with_security > 0:
        score += with_security / total_operations * 2
        findings.append(
            f"{with_security}/{total_operations} operations have specific security requirements"
        )

    if score == 0:
        suggestions.append("Implement authentication and authorization schemes")
        suggestions.append("Consider API keys, OAuth2, or JWT tokens")

    return _build_result(SECURITY, score, max_score, findings, suggestions)


def score_best_practices(document: OpenAPIDocument) -> CriterionResult:
    """Score Best Practices (10 points): servers, versioning, tags, component reuse, external docs."""
    max_score = 10
    score = 0.0
    findings: List[str] = []
    suggestions: List[str] = []

    if document.servers:
        score += 2
        findings.append(f"{len(document.servers)} server(s) defined")
    else:
        suggestions.append("Define servers array with API base URLs")

    version = document.info.version
    if version and version != DEFAULT_API_VERSION:
        score += 2
        findings.append(f"API version: {version}")

    with_tags = 0
    total_operations = 0
    for _, _, operation in iter_operations(document, CRUD_METHODS):
        total_operations += 1
        if operation.tags:
            with_tags += 1

    if total_operations > 0:
        score += with_tags / total_operations * 3
        findings.append(f"{with_tags}/{total_operations} operations have tags")

    populated = [
        component_type
        for component_type in REUSABLE_COMPONENT_TYPES
        if component_count(document, component_type) > 0
    ]
    if len(populated) > 1:
        score += 2
        findings.append(f"Uses {len(populated)} component types for reusability")

    if document.external_docs is not None:
        score += 1
        findings.append("External documentation referenced")

    if score < max_score * 0.4:
        suggestions.append("Add tags to organize operations")
        suggestions.append("Use components for reusable elements")
        suggestions.append("Define multiple servers for different environments")

    return _build_result(BEST_PRACTICES, score, max_score, findings, suggestions)


# Fixed rubric order; the aggregator relies on it.
CRITERIA_EVALUATORS = (
    score_schema_and_types,
    score_descriptions,
    score_paths_and_operations,
    score_response_codes,
    score_examples,
    score_security,
    score_best_practices,
)

CRITERIA_MAX_SCORES = {
    SCHEMA_AND_TYPES: 20,
    DESCRIPTIONS: 20,
    PATHS_AND_OPERATIONS: 15,
    RESPONSE_CODES: 15,
    EXAMPLES: 10,
    SECURITY: 10,
    BEST_PRACTICES: 10,
}
