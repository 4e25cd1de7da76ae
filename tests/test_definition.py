"""Unit tests for definition assembly and its lifecycle."""

from __future__ import annotations

from copy import deepcopy
import logging
from typing import Any

import pytest

from serverless_openapi_generator.definition import DefinitionGenerator, GeneratorState
from serverless_openapi_generator.errors import (
    ConfigurationError,
    MalformedRouteError,
    RouteConflictError,
    SequenceError,
)

_STATIC_CONFIG: dict[str, Any] = {
    "title": "Test API",
    "version": "1.0.0",
    "description": "d",
    "models": [],
    "securitySchemes": {},
}


def _http_function(
    name: str,
    *,
    path: str,
    method: str = "get",
    summary: str = "Summary",
) -> dict[str, Any]:
    return {
        "name": name,
        "handler": f"handler.{name}",
        "events": [
            {
                "http": {
                    "path": path,
                    "method": method,
                    "summary": summary,
                    "responses": {"200": {"description": "ok"}},
                }
            }
        ],
    }


def _loaded_generator(
    functions: list[dict[str, Any]],
    **kwargs: Any,
) -> DefinitionGenerator:
    generator = DefinitionGenerator(_STATIC_CONFIG, **kwargs)
    generator.parse()
    generator.read_functions(functions)
    return generator


def test_hello_function_produces_documented_operation() -> None:
    """A documented GET event becomes an operation named after its function."""
    generator = _loaded_generator([_http_function("hello", path="/hello", summary="Say hello")])

    operation = generator.definition["paths"]["/hello"]["get"]
    assert operation["summary"] == "Say hello"
    assert operation["operationId"] == "hello"
    assert generator.validate().valid


def test_parse_copies_info_and_components_exactly() -> None:
    """Info fields and component catalogs mirror the static configuration."""
    config = {
        "title": "Pets",
        "description": "Pet API",
        "version": "2.3.4",
        "models": [
            {
                "name": "Pet",
                "description": "A pet",
                "contentType": "application/json",
                "schema": {"type": "object", "properties": {"id": {"type": "string"}}},
                "example": {"id": "1"},
            },
            {
                "name": "Names",
                "schema": [{"type": "string"}],
                "examples": [["rex", "tom"]],
            },
        ],
        "securitySchemes": {
            "api": {"type": "apiKey", "name": "X-Key", "in": "header"},
            "oidc": {
                "type": "openIdConnect",
                "openIdConnectUrl": "https://example.com/.well-known/openid-configuration",
            },
        },
    }

    definition = DefinitionGenerator(config).parse().definition

    assert definition["openapi"] == "3.0.0"
    assert definition["info"] == {"title": "Pets", "description": "Pet API", "version": "2.3.4"}
    assert definition["components"]["schemas"] == {
        "Pet": {
            "type": "object",
            "properties": {"id": {"type": "string"}},
            "description": "A pet",
            "example": {"id": "1"},
        },
        "Names": {
            "type": "array",
            "items": {"type": "string"},
            "example": ["rex", "tom"],
        },
    }
    assert definition["components"]["securitySchemes"] == {
        "api": {"type": "apiKey", "name": "X-Key", "in": "header"},
        "oidc": {
            "type": "openIdConnect",
            "openIdConnectUrl": "https://example.com/.well-known/openid-configuration",
        },
    }


def test_parse_accepts_config_argument_and_defaults_version() -> None:
    """Config may be passed to parse(); a missing version falls back to 1.0.0."""
    generator = DefinitionGenerator()
    generator.parse({"title": "T", "description": "D"})

    assert generator.definition["info"]["version"] == "1.0.0"
    assert generator.definition["components"] == {"schemas": {}, "securitySchemes": {}}
    assert generator.state is GeneratorState.PARSED


def test_parse_drops_json_schema_dialect_keyword() -> None:
    """``$schema`` is not an OpenAPI schema keyword and is removed."""
    config = dict(_STATIC_CONFIG)
    config["models"] = [
        {
            "name": "Thing",
            "schema": {"$schema": "http://json-schema.org/draft-04/schema#", "type": "object"},
        }
    ]

    schemas = DefinitionGenerator(config).parse().definition["components"]["schemas"]
    assert schemas == {"Thing": {"type": "object"}}


def test_parse_copies_document_level_metadata() -> None:
    """Servers, tags, externalDocs and security are carried into the document."""
    config = dict(_STATIC_CONFIG)
    config["servers"] = [{"url": "https://api.example.com"}]
    config["tags"] = [{"name": "pets"}]
    config["externalDocs"] = {"url": "https://docs.example.com"}
    config["security"] = [{"api": []}]

    definition = DefinitionGenerator(config).parse().definition
    assert definition["servers"] == [{"url": "https://api.example.com"}]
    assert definition["tags"] == [{"name": "pets"}]
    assert definition["externalDocs"] == {"url": "https://docs.example.com"}
    assert definition["security"] == [{"api": []}]


@pytest.mark.parametrize(
    "overrides",
    [
        {"title": None},
        {"title": "   "},
        {"description": ""},
        {"securitySchemes": {"basic": {"type": "basic"}}},
        {"securitySchemes": {"api": {"type": "apiKey", "name": "X-Key", "in": "body"}}},
        {"securitySchemes": {"web": {"type": "http"}}},
        {"securitySchemes": {"oauth": {"type": "oauth2"}}},
        {"models": [{"name": "A", "schema": {}}, {"name": "A", "schema": {}}]},
        {"models": [{"name": "NoSchema"}]},
    ],
    ids=[
        "missing-title",
        "blank-title",
        "empty-description",
        "unknown-security-type",
        "api-key-bad-location",
        "http-without-scheme",
        "oauth2-without-flows",
        "duplicate-models",
        "model-without-schema",
    ],
)
def test_parse_rejects_malformed_configuration(overrides: dict[str, Any]) -> None:
    """Malformed static configuration raises ConfigurationError."""
    config = dict(_STATIC_CONFIG)
    config.update(overrides)
    if overrides.get("title", "") is None:
        del config["title"]

    with pytest.raises(ConfigurationError):
        DefinitionGenerator(config).parse()


def test_parse_without_any_configuration_fails() -> None:
    """A generator with no configuration cannot parse."""
    with pytest.raises(ConfigurationError):
        DefinitionGenerator().parse()


def test_read_functions_produces_exact_route_set() -> None:
    """Only documented HTTP events contribute (path, method) entries."""
    functions = [
        _http_function("listUsers", path="users"),
        _http_function("createUser", path="/users", method="POST"),
        _http_function("getUser", path="//users/{id}"),
        {
            "name": "undocumented",
            "handler": "handler.undocumented",
            "events": [
                {"http": {"path": "internal", "method": "any"}},
                {"http": "GET status"},
                {"schedule": "rate(5 minutes)"},
            ],
        },
        {"name": "noEvents", "handler": "handler.no_events", "events": None},
    ]

    paths = _loaded_generator(functions).definition["paths"]
    routes = {(path, method) for path, item in paths.items() for method in item}
    assert routes == {
        ("/users", "get"),
        ("/users", "post"),
        ("/users/{id}", "get"),
    }


def test_documentation_block_marks_intent() -> None:
    """A ``documentation`` block alone is enough to document an event."""
    functions = [
        {
            "name": "ping",
            "events": [
                {
                    "http": {
                        "path": "ping",
                        "method": "get",
                        "documentation": {
                            "summary": "Ping",
                            "methodResponses": [
                                {"statusCode": 200, "responseBody": {"description": "pong"}}
                            ],
                        },
                    }
                }
            ],
        }
    ]

    operation = _loaded_generator(functions).definition["paths"]["/ping"]["get"]
    assert operation == {
        "summary": "Ping",
        "operationId": "ping",
        "responses": {"200": {"description": "pong"}},
    }


def test_later_function_wins_on_route_collision(caplog: pytest.LogCaptureFixture) -> None:
    """The later-processed function's documentation replaces the earlier one."""
    functions = [
        _http_function("first", path="/items", summary="First"),
        _http_function("second", path="items", summary="Second"),
    ]

    with caplog.at_level(logging.WARNING):
        generator = _loaded_generator(functions)

    operation = generator.definition["paths"]["/items"]["get"]
    assert operation["summary"] == "Second"
    assert operation["operationId"] == "second"
    assert "overrides" in caplog.text


def test_route_collision_raises_when_overrides_disabled() -> None:
    """Strict mode reports duplicate routes instead of overwriting them."""
    functions = [
        _http_function("first", path="/items"),
        _http_function("second", path="/items"),
    ]

    with pytest.raises(RouteConflictError):
        _loaded_generator(functions, allow_route_overrides=False)


@pytest.mark.parametrize(
    ("path", "method"),
    [
        ("/items", "any"),
        ("/items", "fetch"),
        ("/items", None),
        ("", "get"),
        ("   ", "get"),
        (None, "get"),
        (42, "get"),
    ],
)
def test_malformed_documented_routes_are_rejected(path: Any, method: Any) -> None:
    """Documented events need a known method and a non-empty string path."""
    function = _http_function("broken", path="placeholder")
    function["events"][0]["http"]["path"] = path
    function["events"][0]["http"]["method"] = method

    generator = DefinitionGenerator(_STATIC_CONFIG).parse()
    with pytest.raises(MalformedRouteError):
        generator.read_functions([function])


def test_read_functions_before_parse_is_rejected() -> None:
    """Routes cannot be loaded into an uninitialized document."""
    with pytest.raises(SequenceError):
        DefinitionGenerator(_STATIC_CONFIG).read_functions([])


def test_validate_before_read_functions_is_rejected() -> None:
    """Validation needs routes to have been loaded."""
    generator = DefinitionGenerator(_STATIC_CONFIG)
    with pytest.raises(SequenceError):
        generator.validate()
    generator.parse()
    with pytest.raises(SequenceError):
        generator.validate()


def test_steps_cannot_be_repeated() -> None:
    """parse and read_functions each run once per generator."""
    generator = _loaded_generator([])
    with pytest.raises(SequenceError):
        generator.parse()
    with pytest.raises(SequenceError):
        generator.read_functions([])


def test_validate_is_idempotent_and_side_effect_free() -> None:
    """Repeated validation yields identical results and leaves the document intact."""
    generator = _loaded_generator([_http_function("hello", path="/hello")])
    before = deepcopy(generator.definition)

    first = generator.validate()
    second = generator.validate()

    assert first == second
    assert generator.definition == before
    assert generator.state is GeneratorState.VALIDATED


def test_missing_title_is_reported_by_validation() -> None:
    """A document without info.title is invalid and points at the missing field."""
    generator = _loaded_generator([_http_function("hello", path="/hello")])
    del generator.definition["info"]["title"]

    result = generator.validate()

    assert not result.valid
    assert any(record.data_path == "/info/title" for record in result.errors), result.errors


def test_undeclared_model_reference_is_a_configuration_error() -> None:
    """Request models must name a declared model."""
    function = {
        "name": "create",
        "events": [
            {
                "http": {
                    "path": "items",
                    "method": "post",
                    "documentation": {"requestModels": {"application/json": "Missing"}},
                }
            }
        ],
    }

    generator = DefinitionGenerator(_STATIC_CONFIG).parse()
    with pytest.raises(ConfigurationError):
        generator.read_functions([function])
