import asyncio

import httpx
import pytest

from spec_score.models.errors import ErrorKind, SpecScoreError
from spec_score.services.scorer import score_source


def test_score_remote_yaml_specification(good_spec_path) -> None:
    with open(good_spec_path, "r", encoding="utf-8") as f:
        body = f.read()
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, text=body, headers={"Content-Type": "application/yaml"})
    )

    result = asyncio.run(score_source("https://api.example.com/openapi.yaml", transport=transport))

    assert result.document.title == "Pet Store API"
    assert result.total_score == 79
    assert len(result.criteria) == 7


def test_score_remote_failure_propagates() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503))

    with pytest.raises(SpecScoreError) as exc_info:
        asyncio.run(score_source("https://api.example.com/openapi.yaml", transport=transport))

    assert exc_info.value.kind == ErrorKind.NETWORK_ERROR
