"""Build OpenAPI operation objects from function HTTP event documentation."""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Optional

from .components import content_for_models
from .config import ModelConfig
from .errors import ConfigurationError, MalformedRouteError
from .json_types import JSONValue, MutableJSONObject

# Operation keys accepted inline on the HTTP event or inside its `documentation` block.
_OPERATION_KEYS: tuple[str, ...] = (
    "tags",
    "summary",
    "description",
    "externalDocs",
    "operationId",
    "parameters",
    "requestBody",
    "responses",
    "callbacks",
    "deprecated",
    "security",
    "servers",
)

_SHORTHAND_KEYS: tuple[str, ...] = (
    "pathParams",
    "queryParams",
    "headerParams",
    "cookieParams",
    "requestModels",
    "methodResponses",
)

_PARAMETER_SOURCES: tuple[tuple[str, str], ...] = (
    ("pathParams", "path"),
    ("queryParams", "query"),
    ("headerParams", "header"),
    ("cookieParams", "cookie"),
)

_PARAMETER_OPTIONAL_KEYS: tuple[str, ...] = (
    "description",
    "deprecated",
    "allowEmptyValue",
    "style",
    "explode",
    "allowReserved",
    "schema",
    "example",
    "examples",
    "content",
)

_DEFAULT_PARAMETER_SCHEMA: MutableJSONObject = {"type": "string"}


def extract_documentation(http_event: Mapping[str, Any]) -> Optional[dict[str, Any]]:
    """Return the documentation carried by an HTTP event, or ``None`` without any.

    Inline operation keys are merged with the event's ``documentation`` block;
    the block wins when both set the same key.
    """
    documentation = {
        key: value
        for key, value in http_event.items()
        if key in _OPERATION_KEYS or key in _SHORTHAND_KEYS
    }
    block = http_event.get("documentation")
    if block is not None:
        if not isinstance(block, Mapping):
            raise MalformedRouteError(
                f"HTTP event documentation must be a mapping, got {type(block).__name__}"
            )
        documentation.update(block)
    return documentation or None


def build_operation(
    *,
    function_name: str,
    documentation: Mapping[str, Any],
    models: Mapping[str, ModelConfig],
) -> MutableJSONObject:
    """Synthesize one OpenAPI Operation Object.

    Args:
        function_name (str): Owning function, the default ``operationId``.
        documentation (Mapping[str, Any]): Merged event documentation.
        models (Mapping[str, ModelConfig]): Declared models by name.

    Returns:
        MutableJSONObject: Operation Object ready to insert under ``paths``.
    """
    operation: MutableJSONObject = {}

    tags = documentation.get("tags")
    if tags is not None:
        operation["tags"] = [tags] if isinstance(tags, str) else deepcopy(tags)
    for key in ("summary", "description", "externalDocs"):
        if documentation.get(key) is not None:
            operation[key] = deepcopy(documentation[key])
    operation["operationId"] = documentation.get("operationId") or function_name

    parameters = build_parameters(documentation, owner=function_name)
    if parameters:
        operation["parameters"] = parameters

    request_body = build_request_body(documentation, models=models, owner=function_name)
    if request_body is not None:
        operation["requestBody"] = request_body

    operation["responses"] = build_responses(documentation, models=models, owner=function_name)

    for key in ("callbacks", "deprecated", "security", "servers"):
        if documentation.get(key) is not None:
            operation[key] = deepcopy(documentation[key])

    for key, value in documentation.items():
        if isinstance(key, str) and key.startswith("x-"):
            operation[key] = deepcopy(value)
    return operation


def build_parameters(documentation: Mapping[str, Any], *, owner: str) -> list[JSONValue]:
    """Collect native ``parameters`` followed by the ``*Params`` shorthands."""
    parameters: list[JSONValue] = []
    native = documentation.get("parameters")
    if native is not None:
        if not isinstance(native, list):
            raise ConfigurationError(f"Function {owner!r}: 'parameters' must be a list")
        parameters.extend(deepcopy(native))

    for key, location in _PARAMETER_SOURCES:
        entries = documentation.get(key)
        if entries is None:
            continue
        if not isinstance(entries, list):
            raise ConfigurationError(f"Function {owner!r}: '{key}' must be a list")
        for entry in entries:
            parameters.append(_build_parameter(entry, location=location, owner=owner))
    return parameters


def _build_parameter(entry: Any, *, location: str, owner: str) -> MutableJSONObject:
    if not isinstance(entry, Mapping) or not isinstance(entry.get("name"), str):
        raise ConfigurationError(f"Function {owner!r}: {location} parameters need a 'name'")

    parameter: MutableJSONObject = {"name": entry["name"], "in": location}
    if location == "path":
        parameter["required"] = True
    elif "required" in entry:
        parameter["required"] = entry["required"]
    for key in _PARAMETER_OPTIONAL_KEYS:
        if key in entry:
            parameter[key] = deepcopy(entry[key])
    if "schema" not in parameter and "content" not in parameter:
        parameter["schema"] = dict(_DEFAULT_PARAMETER_SCHEMA)
    return parameter


def build_request_body(
    documentation: Mapping[str, Any],
    *,
    models: Mapping[str, ModelConfig],
    owner: str,
) -> Optional[MutableJSONObject]:
    """Merge a native ``requestBody`` with the ``requestModels`` shorthand."""
    native = documentation.get("requestBody")
    request_models = documentation.get("requestModels")
    if native is None and request_models is None:
        return None
    if native is not None and not isinstance(native, Mapping):
        raise ConfigurationError(f"Function {owner!r}: 'requestBody' must be a mapping")

    request_body: MutableJSONObject = deepcopy(dict(native)) if native is not None else {}
    if request_models is not None:
        content = request_body.setdefault("content", {})
        content.update(content_for_models(request_models, models=models, owner=owner))
    return request_body


def build_responses(
    documentation: Mapping[str, Any],
    *,
    models: Mapping[str, ModelConfig],
    owner: str,
) -> MutableJSONObject:
    """Merge ``methodResponses`` shorthands with native ``responses``.

    Status codes are stringified since YAML reads ``200:`` as an integer.
    Native entries replace shorthand entries for the same status code.
    """
    responses: MutableJSONObject = {}

    method_responses = documentation.get("methodResponses")
    if method_responses is not None:
        if not isinstance(method_responses, list):
            raise ConfigurationError(f"Function {owner!r}: 'methodResponses' must be a list")
        for entry in method_responses:
            status_code, response = _build_method_response(entry, models=models, owner=owner)
            responses[status_code] = response

    native = documentation.get("responses")
    if native is not None:
        if not isinstance(native, Mapping):
            raise ConfigurationError(f"Function {owner!r}: 'responses' must be a mapping")
        for status_code, response in native.items():
            responses[str(status_code)] = deepcopy(response)
    return responses


def _build_method_response(
    entry: Any,
    *,
    models: Mapping[str, ModelConfig],
    owner: str,
) -> tuple[str, MutableJSONObject]:
    if not isinstance(entry, Mapping) or entry.get("statusCode") is None:
        raise ConfigurationError(f"Function {owner!r}: method responses need a 'statusCode'")

    body = entry.get("responseBody") or {}
    description = body.get("description", "") if isinstance(body, Mapping) else ""
    response: MutableJSONObject = {"description": description}

    headers = entry.get("responseHeaders")
    if headers:
        if not isinstance(headers, list):
            raise ConfigurationError(f"Function {owner!r}: 'responseHeaders' must be a list")
        response["headers"] = {}
        for header in headers:
            if not isinstance(header, Mapping) or not isinstance(header.get("name"), str):
                raise ConfigurationError(f"Function {owner!r}: response headers need a 'name'")
            response["headers"][header["name"]] = _build_response_header(header)

    response_models = entry.get("responseModels")
    if response_models:
        response["content"] = content_for_models(response_models, models=models, owner=owner)
    return str(entry["statusCode"]), response


def _build_response_header(header: Mapping[str, Any]) -> MutableJSONObject:
    result: MutableJSONObject = {}
    if header.get("description") is not None:
        result["description"] = header["description"]
    result["schema"] = deepcopy(header.get("schema") or _DEFAULT_PARAMETER_SCHEMA)
    return result
