"""
Pydantic models for the parts of an OpenAPI document that the scoring rubric reads.
Every field is optional because real-world specifications are frequently incomplete;
unknown keys ($ref, vendor extensions, summaries, ...) are kept as extras.

Sample input: decoded YAML/JSON mapping of an OpenAPI 3.x document
Expected output: frozen OpenAPIDocument instance
"""

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

_TREE_CONFIG = {"extra": "allow", "frozen": True, "populate_by_name": True}


def _stringify_keys(value: Any) -> Any:
    """YAML decodes unquoted status codes such as 200 as integers.

    Specification extensions (x-*) may carry any value and are dropped from the map.
    """
    if isinstance(value, dict):
        return {
            str(key): item
            for key, item in value.items()
            if not str(key).startswith("x-")
        }
    return value


def _stringify_scalar(value: Any) -> Any:
    """YAML decodes versions such as 1.0 as floats."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


class Info(BaseModel):
    """API metadata from the info object."""

    title: Optional[str] = Field(default=None, description="API title")
    version: Optional[str] = Field(default=None, description="API version")
    description: Optional[str] = Field(default=None, description="API description")

    model_config = _TREE_CONFIG

    @field_validator("title", "version", "description", mode="before")
    @classmethod
    def coerce_scalars(cls, value: Any) -> Any:
        return _stringify_scalar(value)


class Schema(BaseModel):
    """Schema object; only its structural shape is inspected."""

    type: Optional[Any] = Field(default=None, description="Schema type tag")
    properties: Optional[Dict[str, Any]] = Field(
        default=None, description="Declared object properties"
    )
    additional_properties: Optional[Any] = Field(
        default=None,
        alias="additionalProperties",
        description="additionalProperties flag or schema",
    )

    model_config = _TREE_CONFIG


class MediaType(BaseModel):
    """Content-type specific schema and examples."""

    media_schema: Optional[Any] = Field(
        default=None, alias="schema", description="Schema definition or reference"
    )
    example: Optional[Any] = Field(default=None, description="Inline example")
    examples: Optional[Dict[str, Any]] = Field(
        default=None, description="Named examples"
    )

    model_config = _TREE_CONFIG


class Parameter(BaseModel):
    """Operation parameter (or a reference to one)."""

    name: Optional[str] = Field(default=None, description="Parameter name")
    location: Optional[str] = Field(
        default=None, alias="in", description="Parameter location"
    )
    description: Optional[str] = Field(default=None, description="Parameter description")

    model_config = _TREE_CONFIG


class RequestBody(BaseModel):
    """Request body; a $ref body carries no content."""

    description: Optional[str] = Field(default=None, description="Body description")
    content: Optional[Dict[str, Optional[MediaType]]] = Field(
        default=None, description="Media type string to media type"
    )

    model_config = _TREE_CONFIG


class Response(BaseModel):
    """Response for a single status code."""

    description: Optional[str] = Field(default=None, description="Response description")
    content: Optional[Dict[str, Optional[MediaType]]] = Field(
        default=None, description="Media type string to media type"
    )

    model_config = _TREE_CONFIG


class Operation(BaseModel):
    """One HTTP method handler within a path item."""

    description: Optional[str] = Field(default=None, description="Operation description")
    tags: Optional[List[str]] = Field(default=None, description="Operation tags")
    parameters: Optional[List[Optional[Parameter]]] = Field(
        default=None, description="Operation parameters"
    )
    request_body: Optional[RequestBody] = Field(
        default=None, alias="requestBody", description="Request body"
    )
    responses: Dict[str, Optional[Response]] = Field(
        default_factory=dict, description="Status code string to response"
    )
    security: Optional[List[Dict[str, Any]]] = Field(
        default=None, description="Per-operation security override"
    )

    model_config = _TREE_CONFIG

    @field_validator("responses", mode="before")
    @classmethod
    def coerce_status_codes(cls, value: Any) -> Any:
        return _stringify_keys(value)


class PathItem(BaseModel):
    """Operations available at one URL template."""

    description: Optional[str] = Field(default=None, description="Path item description")
    get: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None
    patch: Optional[Operation] = None
    delete: Optional[Operation] = None
    head: Optional[Operation] = None
    options: Optional[Operation] = None
    trace: Optional[Operation] = None

    model_config = _TREE_CONFIG


class Components(BaseModel):
    """Reusable component definitions."""

    schemas: Optional[Dict[str, Union[Schema, bool, None]]] = Field(
        default=None, description="Named schemas"
    )
    security_schemes: Optional[Dict[str, Any]] = Field(
        default=None, alias="securitySchemes", description="Named security schemes"
    )
    responses: Optional[Dict[str, Any]] = Field(default=None, description="Named responses")
    parameters: Optional[Dict[str, Any]] = Field(default=None, description="Named parameters")
    examples: Optional[Dict[str, Any]] = Field(default=None, description="Named examples")
    request_bodies: Optional[Dict[str, Any]] = Field(
        default=None, alias="requestBodies", description="Named request bodies"
    )
    headers: Optional[Dict[str, Any]] = Field(default=None, description="Named headers")

    model_config = _TREE_CONFIG


class OpenAPIDocument(BaseModel):
    """Root of an OpenAPI document as consumed by the scoring engine."""

    openapi: Optional[str] = Field(default=None, description="OpenAPI specification version")
    info: Info = Field(default_factory=Info, description="API metadata")
    servers: Optional[List[Any]] = Field(default=None, description="Server list")
    security: Optional[List[Dict[str, Any]]] = Field(
        default=None, description="Global security requirements"
    )
    paths: Optional[Dict[str, Optional[PathItem]]] = Field(
        default=None, description="Path template to path item"
    )
    components: Optional[Components] = Field(default=None, description="Reusable components")
    external_docs: Optional[Dict[str, Any]] = Field(
        default=None, alias="externalDocs", description="External documentation"
    )

    model_config = _TREE_CONFIG

    @field_validator("openapi", mode="before")
    @classmethod
    def coerce_version(cls, value: Any) -> Any:
        return _stringify_scalar(value)

    @field_validator("paths", mode="before")
    @classmethod
    def coerce_paths(cls, value: Any) -> Any:
        return _stringify_keys(value)

    @property
    def title(self) -> str:
        return self.info.title or "Untitled API"
