"""
Traversal helpers over the optional OpenAPI document tree.
Each helper skips absent nodes so evaluators never have to guard against None themselves.

Sample input: OpenAPIDocument with paths {"/pets": {"get": {...}}}
Expected output: iter_operations(document) -> [("/pets", "get", Operation(...))]
"""

import logging
import math
from typing import Any, Dict, Iterator, Optional, Tuple

from ..models.document import (
    MediaType,
    OpenAPIDocument,
    Operation,
    Parameter,
    PathItem,
    Response,
    Schema,
)

logger = logging.getLogger(__name__)

CRUD_METHODS = ("get", "post", "put", "patch", "delete")
HTTP_METHODS = CRUD_METHODS + ("head", "options", "trace")

REUSABLE_COMPONENT_TYPES = (
    "schemas",
    "responses",
    "parameters",
    "examples",
    "request_bodies",
    "headers",
)


def round_half_up(value: float) -> int:
    """Round .5 upwards, matching the rubric's published scores."""
    return int(math.floor(value + 0.5))


def has_paths(document: OpenAPIDocument) -> bool:
    return bool(document.paths)


def iter_path_items(document: OpenAPIDocument) -> Iterator[Tuple[str, PathItem]]:
    """Yield (path, path_item) for every path whose item is present."""
    for path, path_item in (document.paths or {}).items():
        if path_item is not None:
            yield path, path_item


def get_operation(path_item: PathItem, method: str) -> Optional[Operation]:
    return getattr(path_item, method, None)


def iter_operations(
    document: OpenAPIDocument, methods: Tuple[str, ...] = CRUD_METHODS
) -> Iterator[Tuple[str, str, Operation]]:
    """Yield (path, method, operation) for each defined operation, in path then method order."""
    for path, path_item in iter_path_items(document):
        for method in methods:
            operation = get_operation(path_item, method)
            if operation is not None:
                yield path, method, operation


def iter_parameters(operation: Operation) -> Iterator[Optional[Parameter]]:
    """Yield every declared parameter slot, including empty ones."""
    for parameter in operation.parameters or []:
        yield parameter


def iter_responses(operation: Operation) -> Iterator[Tuple[str, Optional[Response]]]:
    for status_code, response in operation.responses.items():
        yield status_code, response


def iter_request_media_types(operation: Operation) -> Iterator[MediaType]:
    body = operation.request_body
    if body is None or body.content is None:
        return
    for media_type in body.content.values():
        if media_type is not None:
            yield media_type


def iter_response_contents(operation: Operation) -> Iterator[Dict[str, Optional[MediaType]]]:
    """Yield the content map of every response that declares one."""
    for _, response in iter_responses(operation):
        if response is not None and response.content is not None:
            yield response.content


def iter_response_media_types(operation: Operation) -> Iterator[MediaType]:
    for content in iter_response_contents(operation):
        for media_type in content.values():
            if media_type is not None:
                yield media_type


def has_request_content(operation: Operation) -> bool:
    return operation.request_body is not None and operation.request_body.content is not None


def has_schema(media_type: MediaType) -> bool:
    return media_type.media_schema is not None


def has_example(media_type: Optional[MediaType]) -> bool:
    """True when the media type carries an inline example or named examples.

    An empty examples map is not counted as an example.
    """
    if media_type is None:
        return False
    return media_type.example is not None or bool(media_type.examples)


def content_has_example(content: Dict[str, Optional[MediaType]]) -> bool:
    return any(has_example(media_type) for media_type in content.values())


def iter_component_schemas(document: OpenAPIDocument) -> Iterator[Tuple[str, Any]]:
    if document.components is None or not document.components.schemas:
        return
    yield from document.components.schemas.items()


def is_object_schema(schema: Any) -> bool:
    return isinstance(schema, Schema) and schema.type == "object"


def component_count(document: OpenAPIDocument, component_type: str) -> int:
    """Number of named entries in a components category; 0 when absent."""
    if document.components is None:
        return 0
    entries = getattr(document.components, component_type, None)
    return len(entries) if entries else 0


def security_scheme_count(document: OpenAPIDocument) -> int:
    return component_count(document, "security_schemes")


def describes(text: Optional[str], min_length: int = 0) -> bool:
    """True when text is present and longer than min_length characters."""
    return bool(text) and len(text) > min_length
