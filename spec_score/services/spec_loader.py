"""
OpenAPI specification loading utilities.
Handles loading OpenAPI specs from files and URLs, decoding JSON/YAML and building the
document model, with a distinct error kind for each failure.

Sample input: source="api-spec.yaml" or source="https://example.com/openapi.json"
Expected output: OpenAPI specification content as string, then OpenAPIDocument
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
import yaml
from pydantic import ValidationError

from ..models.document import OpenAPIDocument
from ..models.errors import ErrorKind, SpecScoreError
from .config_loader import config

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "application/json, application/yaml, text/yaml, text/plain, text/x-yaml"


def is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def _load_spec_file(filename: str) -> str:
    """Load OpenAPI specification from file."""
    try:
        with open(Path(filename), "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        logger.error(f"OpenAPI spec file not found: {filename}")
        raise SpecScoreError(ErrorKind.FILE_NOT_FOUND, f"File not found: {filename}", filename)
    except PermissionError:
        logger.error(f"Permission denied reading OpenAPI spec: {filename}")
        raise SpecScoreError(
            ErrorKind.PERMISSION_DENIED, f"Permission denied: {filename}", filename
        )
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read OpenAPI spec from {filename}: {e}")
        raise SpecScoreError(ErrorKind.UNKNOWN_ERROR, f"Failed to read file: {e}", filename)

    logger.info(f"Loaded OpenAPI spec from {filename}: {len(content)} characters")
    return content


async def _fetch_spec_from_url(
    url: str,
    timeout_seconds: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """Fetch OpenAPI specification from URL."""
    if timeout_seconds is None:
        timeout_seconds = config.get_float("fetch_timeout_seconds", 10.0)

    logger.info(f"Fetching OpenAPI spec from URL: {url} (timeout {timeout_seconds}s)")
    try:
        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.get(
                url, headers={"Accept": ACCEPT_HEADER}, timeout=timeout_seconds
            )
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        error_msg = (
            f"HTTP {e.response.status_code} error fetching URL {url}: "
            f"{e.response.reason_phrase}"
        )
        logger.error(error_msg)
        raise SpecScoreError(ErrorKind.NETWORK_ERROR, error_msg, url)
    except httpx.TimeoutException:
        error_msg = f"Request to {url} timed out after {timeout_seconds}s"
        logger.error(error_msg)
        raise SpecScoreError(ErrorKind.NETWORK_ERROR, error_msg, url)
    except httpx.HTTPError as e:
        error_msg = f"Failed to fetch URL {url}: {e}"
        logger.error(error_msg)
        raise SpecScoreError(ErrorKind.NETWORK_ERROR, error_msg, url)

    content = response.text
    logger.info(f"Fetched OpenAPI spec from URL: {len(content)} characters")
    return content


async def _load_specification(
    source: str, transport: Optional[httpx.AsyncBaseTransport] = None
) -> str:
    """Load OpenAPI specification text from file or URL."""
    if is_url(source):
        return await _fetch_spec_from_url(source, transport=transport)
    return _load_spec_file(source)


def _parse_spec_content(content: str, source: str) -> Dict[str, Any]:
    """Decode specification text: JSON when it looks like an object, YAML otherwise."""
    try:
        if content.strip().startswith("{"):
            spec_dict = json.loads(content)
            logger.debug(f"Parsed OpenAPI spec from {source} as JSON")
        else:
            spec_dict = yaml.safe_load(content)
            logger.debug(f"Parsed OpenAPI spec from {source} as YAML")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        error_msg = f"Failed to parse OpenAPI spec from {source}: {e}"
        logger.error(error_msg)
        raise SpecScoreError(ErrorKind.SYNTAX_ERROR, error_msg, source)

    if not isinstance(spec_dict, dict):
        error_msg = (
            f"Failed to parse OpenAPI spec from {source}: "
            f"expected a mapping at the document root, got {type(spec_dict).__name__}"
        )
        logger.error(error_msg)
        raise SpecScoreError(ErrorKind.SYNTAX_ERROR, error_msg, source)

    return spec_dict


def build_document(spec_dict: Dict[str, Any], source: str) -> OpenAPIDocument:
    """Build the document model from a decoded specification."""
    try:
        document = OpenAPIDocument.model_validate(spec_dict)
    except ValidationError as e:
        error_msg = f"Unexpected document structure in {source}: {e}"
        logger.error(error_msg)
        raise SpecScoreError(ErrorKind.PARSER_ERROR, error_msg, source)

    logger.info(
        f"Built document model for '{document.title}': {len(document.paths or {})} paths"
    )
    return document


async def load_document(
    source: str, transport: Optional[httpx.AsyncBaseTransport] = None
) -> OpenAPIDocument:
    """Load, decode and model a specification without structural validation."""
    content = await _load_specification(source, transport=transport)
    return build_document(_parse_spec_content(content, source), source)
