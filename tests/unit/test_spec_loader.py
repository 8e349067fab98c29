import asyncio
import json

import httpx
import pytest

from spec_score.models.errors import ErrorKind, SpecScoreError
from spec_score.services.spec_loader import (
    ACCEPT_HEADER,
    _fetch_spec_from_url,
    _load_specification,
    _parse_spec_content,
    build_document,
    is_url,
    load_document,
)

REMOTE_SPEC = {
    "openapi": "3.0.3",
    "info": {"title": "Remote API", "version": "1.0.0"},
    "paths": {"/test": {"get": {"responses": {"200": {"description": "Success"}}}}},
}


def test_is_url() -> None:
    assert is_url("https://example.com/openapi.json")
    assert is_url("http://localhost:8000/openapi.yaml")
    assert not is_url("specs/openapi.yaml")


def test_parse_json_and_yaml() -> None:
    assert _parse_spec_content('  {"openapi": "3.0.3"}', "inline.json") == {"openapi": "3.0.3"}
    assert _parse_spec_content("openapi: 3.0.3\ninfo:\n  title: T\n", "inline.yaml") == {
        "openapi": "3.0.3",
        "info": {"title": "T"},
    }


def test_parse_invalid_json_is_syntax_error() -> None:
    with pytest.raises(SpecScoreError) as exc_info:
        _parse_spec_content('{"openapi": ', "broken.json")

    assert exc_info.value.kind == ErrorKind.SYNTAX_ERROR
    assert "broken.json" in exc_info.value.message


def test_parse_invalid_yaml_is_syntax_error() -> None:
    with pytest.raises(SpecScoreError) as exc_info:
        _parse_spec_content("openapi: [3.0\n  info: :", "broken.yaml")

    assert exc_info.value.kind == ErrorKind.SYNTAX_ERROR


def test_parse_non_mapping_root_is_syntax_error() -> None:
    with pytest.raises(SpecScoreError) as exc_info:
        _parse_spec_content("- just\n- a list\n", "list.yaml")

    assert exc_info.value.kind == ErrorKind.SYNTAX_ERROR
    assert "expected a mapping" in exc_info.value.message


def test_build_document_wrong_shape_is_parser_error() -> None:
    with pytest.raises(SpecScoreError) as exc_info:
        build_document({"info": "not a mapping"}, "odd.yaml")

    assert exc_info.value.kind == ErrorKind.PARSER_ERROR


def test_missing_file_is_file_not_found(tmp_path) -> None:
    missing = tmp_path / "does-not-exist.yaml"

    with pytest.raises(SpecScoreError) as exc_info:
        asyncio.run(_load_specification(str(missing)))

    assert exc_info.value.kind == ErrorKind.FILE_NOT_FOUND
    assert exc_info.value.message == f"File not found: {missing}"
    assert exc_info.value.describe().startswith("File Error: File not found")


def test_load_document_from_file(tmp_path) -> None:
    spec_file = tmp_path / "remote.json"
    spec_file.write_text(json.dumps(REMOTE_SPEC), encoding="utf-8")

    document = asyncio.run(load_document(str(spec_file)))

    assert document.title == "Remote API"
    assert list(document.paths) == ["/test"]


def test_fetch_sends_accept_header_and_returns_body() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["accept"] = request.headers["Accept"]
        return httpx.Response(200, json=REMOTE_SPEC)

    document = asyncio.run(
        load_document("https://api.example.com/openapi.json", transport=httpx.MockTransport(handler))
    )

    assert seen["accept"] == ACCEPT_HEADER
    assert document.title == "Remote API"


def test_fetch_http_error_status_is_network_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(404))

    with pytest.raises(SpecScoreError) as exc_info:
        asyncio.run(_fetch_spec_from_url("https://api.example.com/missing.yaml", transport=transport))

    assert exc_info.value.kind == ErrorKind.NETWORK_ERROR
    assert "HTTP 404" in exc_info.value.message
    assert exc_info.value.source == "https://api.example.com/missing.yaml"


def test_fetch_timeout_is_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(SpecScoreError) as exc_info:
        asyncio.run(
            _fetch_spec_from_url(
                "https://slow.example.com/openapi.json",
                timeout_seconds=0.5,
                transport=httpx.MockTransport(handler),
            )
        )

    assert exc_info.value.kind == ErrorKind.NETWORK_ERROR
    assert "timed out after 0.5s" in exc_info.value.message


def test_fetch_connection_failure_is_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SpecScoreError) as exc_info:
        asyncio.run(
            _fetch_spec_from_url(
                "https://down.example.com/openapi.json", transport=httpx.MockTransport(handler)
            )
        )

    assert exc_info.value.kind == ErrorKind.NETWORK_ERROR
    assert "connection refused" in exc_info.value.message
