"""Unit tests for operation synthesis from event documentation."""

from __future__ import annotations

from typing import Any

import pytest

from serverless_openapi_generator.config import ModelConfig
from serverless_openapi_generator.errors import ConfigurationError, MalformedRouteError
from serverless_openapi_generator.operations import build_operation, extract_documentation

_MODELS = {
    "Pet": ModelConfig.model_validate(
        {
            "name": "Pet",
            "schema": {"type": "object"},
            "examples": [{"id": "1"}, {"id": "2"}],
        }
    ),
    "Error": ModelConfig.model_validate({"name": "Error", "schema": {"type": "object"}}),
}


def _build(documentation: dict[str, Any]) -> dict[str, Any]:
    return build_operation(function_name="handler", documentation=documentation, models=_MODELS)


def test_extract_documentation_merges_inline_keys_and_block() -> None:
    """The documentation block wins over inline keys of the HTTP event."""
    http_event = {
        "path": "pets",
        "method": "get",
        "cors": True,
        "summary": "Inline",
        "tags": ["pets"],
        "documentation": {"summary": "Block"},
    }

    assert extract_documentation(http_event) == {"summary": "Block", "tags": ["pets"]}


def test_extract_documentation_without_documentation_keys() -> None:
    """Plain Serverless events carry no documentation intent."""
    assert extract_documentation({"path": "pets", "method": "get", "cors": True}) is None


def test_extract_documentation_rejects_non_mapping_block() -> None:
    """A scalar documentation block is a malformed route."""
    with pytest.raises(MalformedRouteError):
        extract_documentation({"path": "pets", "method": "get", "documentation": "yes"})


def test_operation_fields_and_defaults() -> None:
    """Explicit operationId wins; tags and vendor extensions are carried over."""
    operation = _build(
        {
            "operationId": "listPets",
            "tags": "pets",
            "description": "All pets",
            "deprecated": True,
            "security": [{"api": []}],
            "x-internal": True,
            "responses": {200: {"description": "ok"}},
        }
    )

    assert operation == {
        "tags": ["pets"],
        "description": "All pets",
        "operationId": "listPets",
        "responses": {"200": {"description": "ok"}},
        "deprecated": True,
        "security": [{"api": []}],
        "x-internal": True,
    }


def test_parameter_shorthands_follow_native_parameters() -> None:
    """``*Params`` entries become OpenAPI parameters after native ones."""
    operation = _build(
        {
            "parameters": [{"name": "trace", "in": "header", "schema": {"type": "string"}}],
            "pathParams": [{"name": "petId", "required": False}],
            "queryParams": [{"name": "limit", "required": True, "schema": {"type": "integer"}}],
            "cookieParams": [{"name": "session", "description": "Session id"}],
        }
    )

    assert operation["parameters"] == [
        {"name": "trace", "in": "header", "schema": {"type": "string"}},
        {"name": "petId", "in": "path", "required": True, "schema": {"type": "string"}},
        {"name": "limit", "in": "query", "required": True, "schema": {"type": "integer"}},
        {
            "name": "session",
            "in": "cookie",
            "description": "Session id",
            "schema": {"type": "string"},
        },
    ]


def test_parameter_without_name_is_rejected() -> None:
    """Shorthand parameters must be named."""
    with pytest.raises(ConfigurationError):
        _build({"queryParams": [{"description": "nameless"}]})


def test_request_models_reference_components_with_examples() -> None:
    """Request models point at component schemas and carry model examples."""
    operation = _build(
        {
            "requestBody": {"description": "New pet", "required": True},
            "requestModels": {"application/json": "Pet", "text/plain": {"type": "string"}},
        }
    )

    assert operation["requestBody"] == {
        "description": "New pet",
        "required": True,
        "content": {
            "application/json": {
                "schema": {"$ref": "#/components/schemas/Pet"},
                "examples": {
                    "PetExample1": {"value": {"id": "1"}},
                    "PetExample2": {"value": {"id": "2"}},
                },
            },
            "text/plain": {"schema": {"type": "string"}},
        },
    }


def test_request_models_by_name_use_model_content_type() -> None:
    """Bare model names are keyed by each model's declared content type."""
    models = {
        **_MODELS,
        "Upload": ModelConfig.model_validate(
            {"name": "Upload", "contentType": "text/csv", "schema": {"type": "string"}}
        ),
    }

    operation = build_operation(
        function_name="handler",
        documentation={"requestModels": ["Error", "Upload"]},
        models=models,
    )

    assert operation["requestBody"]["content"] == {
        "application/json": {"schema": {"$ref": "#/components/schemas/Error"}},
        "text/csv": {"schema": {"$ref": "#/components/schemas/Upload"}},
    }


@pytest.mark.parametrize(
    "request_models", [42, ["Missing"], "Missing", ["Pet", {"type": "object"}]]
)
def test_request_models_reject_bad_references(request_models: Any) -> None:
    """Unknown model names and unsupported shapes are configuration errors."""
    with pytest.raises(ConfigurationError):
        _build({"requestModels": request_models})


def test_method_responses_and_native_responses_merge() -> None:
    """Native responses replace shorthand responses with the same status code."""
    operation = _build(
        {
            "methodResponses": [
                {
                    "statusCode": 200,
                    "responseBody": {"description": "shorthand"},
                    "responseHeaders": [{"name": "X-Rate", "description": "Remaining calls"}],
                    "responseModels": {"application/json": "Error"},
                },
                {"statusCode": "500"},
            ],
            "responses": {"200": {"description": "native"}},
        }
    )

    assert operation["responses"] == {
        "200": {"description": "native"},
        "500": {"description": ""},
    }


def test_method_response_headers_and_models() -> None:
    """Shorthand responses expand headers and content."""
    operation = _build(
        {
            "methodResponses": [
                {
                    "statusCode": 201,
                    "responseBody": {"description": "Created"},
                    "responseHeaders": [{"name": "Location"}],
                    "responseModels": {"application/json": "Error"},
                }
            ]
        }
    )

    assert operation["responses"]["201"] == {
        "description": "Created",
        "headers": {"Location": {"schema": {"type": "string"}}},
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Error"}}},
    }


@pytest.mark.parametrize(
    "headers",
    [
        {"X-Rate": {"description": "Remaining calls"}},
        [{"description": "nameless"}],
        ["X-Rate"],
    ],
)
def test_method_response_headers_must_be_named_list_entries(headers: Any) -> None:
    """Response headers are a list of named entries."""
    with pytest.raises(ConfigurationError):
        _build({"methodResponses": [{"statusCode": 200, "responseHeaders": headers}]})


def test_operation_flags_are_carried_unchanged() -> None:
    """Non-boolean flags are kept as written so validation can report them."""
    operation = _build(
        {
            "deprecated": "false",
            "queryParams": [{"name": "limit", "required": "no"}],
            "responses": {"200": {"description": "ok"}},
        }
    )

    assert operation["deprecated"] == "false"
    assert operation["parameters"][0]["required"] == "no"


def test_method_response_requires_status_code() -> None:
    """Shorthand responses without a status code are configuration errors."""
    with pytest.raises(ConfigurationError):
        _build({"methodResponses": [{"responseBody": {"description": "?"}}]})


def test_operation_without_responses_has_empty_mapping() -> None:
    """Responses are always present so validation can report a missing one."""
    assert _build({"summary": "No responses"})["responses"] == {}
