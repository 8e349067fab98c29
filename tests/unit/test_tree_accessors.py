from spec_score.models.document import MediaType, OpenAPIDocument
from spec_score.services.tree_accessors import (
    CRUD_METHODS,
    HTTP_METHODS,
    component_count,
    content_has_example,
    describes,
    has_example,
    has_paths,
    iter_operations,
    iter_parameters,
    iter_response_media_types,
    round_half_up,
    security_scheme_count,
)


def test_round_half_up() -> None:
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(17.5) == 18
    assert round_half_up(1.49) == 1
    assert round_half_up(0) == 0


def test_iter_operations_skips_missing_nodes_and_filters_methods() -> None:
    document = OpenAPIDocument.model_validate(
        {
            "paths": {
                "/a": {
                    "get": {"responses": {"200": {"description": "OK"}}},
                    "head": {"responses": {"200": {"description": "OK"}}},
                    "delete": {"responses": {"204": {"description": "Gone"}}},
                },
                "/b": None,
                "/c": {"options": {"responses": {"200": {"description": "OK"}}}},
            }
        }
    )

    crud = [(path, method) for path, method, _ in iter_operations(document, CRUD_METHODS)]
    every = [(path, method) for path, method, _ in iter_operations(document, HTTP_METHODS)]

    assert crud == [("/a", "get"), ("/a", "delete")]
    assert every == [("/a", "get"), ("/a", "delete"), ("/a", "head"), ("/c", "options")]


def test_media_type_helpers_ignore_absent_content() -> None:
    document = OpenAPIDocument.model_validate(
        {
            "paths": {
                "/a": {
                    "get": {
                        "parameters": [None, {"name": "q", "in": "query"}],
                        "responses": {
                            "200": {
                                "description": "OK",
                                "content": {
                                    "application/json": {"example": 0},
                                    "text/plain": None,
                                },
                            },
                            "500": None,
                        },
                    }
                }
            }
        }
    )
    _, _, operation = next(iter_operations(document))

    media_types = list(iter_response_media_types(operation))

    assert len(media_types) == 1
    assert content_has_example(operation.responses["200"].content)
    assert len(list(iter_parameters(operation))) == 2


def test_component_counts_default_to_zero() -> None:
    empty = OpenAPIDocument.model_validate({})
    document = OpenAPIDocument.model_validate(
        {
            "components": {
                "schemas": {"A": {"type": "string"}, "B": True},
                "securitySchemes": {"key": {"type": "apiKey"}},
            }
        }
    )

    assert not has_paths(empty)
    assert component_count(empty, "schemas") == 0
    assert component_count(document, "schemas") == 2
    assert component_count(document, "headers") == 0
    assert security_scheme_count(document) == 1


def test_describes_requires_text_longer_than_minimum() -> None:
    assert describes("A real description", 10)
    assert not describes("short", 10)
    assert not describes("exactly 10", 10)
    assert not describes(None)
    assert not describes("")


def test_has_example_ignores_empty_examples_map() -> None:
    assert has_example(MediaType(example=0))
    assert has_example(MediaType(examples={"basic": {"value": 1}}))
    assert not has_example(MediaType(examples={}))
    assert not has_example(MediaType())
    assert not has_example(None)
