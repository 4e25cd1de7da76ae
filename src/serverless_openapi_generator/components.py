"""Transform declared models into OpenAPI component schemas and media types."""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any

from .config import ModelConfig
from .errors import ConfigurationError
from .json_types import MutableJSONObject

SCHEMA_REF_PREFIX = "#/components/schemas/"

# JSON-schema keywords with no meaning inside an OpenAPI 3.0 Schema Object.
_UNSUPPORTED_SCHEMA_KEYS: tuple[str, ...] = ("$schema", "$id")


def model_to_schema(model: ModelConfig) -> MutableJSONObject:
    """Build the ``components.schemas`` entry for one model.

    Array-form schemas are wrapped as an OpenAPI array schema. The model's
    ``description`` and ``example`` are folded into the schema when the
    schema itself does not set them.

    Args:
        model (ModelConfig): Declared model.

    Returns:
        MutableJSONObject: OpenAPI Schema Object.
    """
    if isinstance(model.schema_, list):
        schema = _wrap_array_schema(model.schema_)
    else:
        schema = _clean_schema(model.schema_)

    if model.description and "description" not in schema:
        schema["description"] = model.description

    if "example" not in schema:
        if model.example is not None:
            schema["example"] = deepcopy(model.example)
        elif model.examples:
            schema["example"] = deepcopy(model.examples[0])
    return schema


def schema_ref(model_name: str) -> MutableJSONObject:
    """Return a ``$ref`` pointing at a component schema."""
    return {"$ref": f"{SCHEMA_REF_PREFIX}{model_name}"}


def media_type_for_model(
    reference: Any,
    *,
    models: Mapping[str, ModelConfig],
    owner: str,
) -> MutableJSONObject:
    """Build a Media Type Object for a model name or an inline schema.

    Args:
        reference (Any): Model name, or an inline schema mapping.
        models (Mapping[str, ModelConfig]): Declared models by name.
        owner (str): Function name used in error messages.

    Returns:
        MutableJSONObject: Media Type Object with ``schema`` and optional ``examples``.
    """
    if isinstance(reference, Mapping):
        return {"schema": _clean_schema(reference)}
    if not isinstance(reference, str) or reference not in models:
        raise ConfigurationError(f"Function {owner!r} references undeclared model {reference!r}")

    model = models[reference]
    media_type: MutableJSONObject = {"schema": schema_ref(model.name)}
    if model.examples:
        media_type["examples"] = {
            f"{model.name}Example{index}": {"value": deepcopy(example)}
            for index, example in enumerate(model.examples, start=1)
        }
    return media_type


def content_for_models(
    references: Any,
    *,
    models: Mapping[str, ModelConfig],
    owner: str,
) -> MutableJSONObject:
    """Build a ``content`` map from model references.

    ``references`` is either a mapping of content type to model, or one model
    name (or a list of them) keyed by each model's declared ``contentType``.
    """
    if isinstance(references, Mapping):
        return {
            str(content_type): media_type_for_model(reference, models=models, owner=owner)
            for content_type, reference in references.items()
        }
    names = [references] if isinstance(references, str) else references
    if not isinstance(names, list):
        raise ConfigurationError(
            f"Function {owner!r}: models must be a name, a list of names or a content type mapping"
        )
    content: MutableJSONObject = {}
    for name in names:
        if not isinstance(name, str):
            raise ConfigurationError(
                f"Function {owner!r}: model lists may only hold model names, got {name!r}"
            )
        media_type = media_type_for_model(name, models=models, owner=owner)
        content[models[name].content_type] = media_type
    return content


def _wrap_array_schema(items: list[Any]) -> MutableJSONObject:
    cleaned = [_clean_schema(item) if isinstance(item, Mapping) else item for item in items]
    if len(cleaned) == 1:
        item_schema = cleaned[0]
    elif not cleaned:
        item_schema = {}
    else:
        item_schema = {"oneOf": cleaned}
    return {"type": "array", "items": item_schema}


def _clean_schema(schema: Mapping[str, Any]) -> MutableJSONObject:
    return {
        key: deepcopy(value) for key, value in schema.items() if key not in _UNSUPPORTED_SCHEMA_KEYS
    }
