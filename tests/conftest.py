from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def good_spec_path() -> str:
    return str(FIXTURES_DIR / "good-openapi.yaml")


@pytest.fixture
def minimal_spec_path() -> str:
    return str(FIXTURES_DIR / "minimal-openapi.json")


@pytest.fixture
def broken_spec_path() -> str:
    return str(FIXTURES_DIR / "broken-openapi.json")
