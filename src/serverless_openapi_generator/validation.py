"""Validation of assembled documents against the OpenAPI 3.0 schema."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

from jsonschema.exceptions import SchemaError, ValidationError
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for

from .json_types import JSONObject
from .meta_schema import OPENAPI_30


@dataclass(frozen=True)
class ValidationErrorRecord:
    """One schema violation in the assembled document."""

    data_path: str
    schema_path: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a document.

    ``errors`` holds structured violations; ``error`` is set instead when the
    document could not be checked at all.
    """

    valid: bool
    errors: tuple[ValidationErrorRecord, ...] = ()
    error: Optional[str] = None


def validate_document(document: JSONObject) -> ValidationResult:
    """Validate a document against the OpenAPI 3.0 JSON schema.

    Args:
        document (JSONObject): Assembled OpenAPI document.

    Returns:
        ValidationResult: Validity flag with error records.
    """
    validator = openapi_30_validator()
    try:
        records = tuple(_to_record(error) for error in validator.iter_errors(document))
    except (SchemaError, TypeError) as exc:
        # Non-string mapping keys cannot be matched against patternProperties.
        return ValidationResult(valid=False, error=f"Unable to validate OpenAPI document: {exc}")
    return ValidationResult(valid=not records, errors=records)


@lru_cache(maxsize=1)
def openapi_30_validator() -> Validator:
    """Return a cached validator for the OpenAPI 3.0 schema."""
    validator_cls = validator_for(OPENAPI_30)
    return validator_cls(OPENAPI_30)


def _to_record(error: ValidationError) -> ValidationErrorRecord:
    data_parts: list[Any] = list(error.absolute_path)
    missing = _missing_property(error)
    if missing is not None:
        data_parts.append(missing)
    return ValidationErrorRecord(
        data_path=json_pointer(data_parts),
        schema_path="#" + json_pointer(error.absolute_schema_path),
        message=error.message,
    )


def _missing_property(error: ValidationError) -> Optional[str]:
    if error.validator != "required" or not isinstance(error.instance, dict):
        return None
    for name in error.validator_value:
        if name not in error.instance and repr(name) in error.message:
            return name
    return None


def json_pointer(parts: Iterable[Any]) -> str:
    """Render path segments as an RFC 6901 JSON pointer."""
    return "".join(
        "/" + str(part).replace("~", "~0").replace("/", "~1") for part in parts
    )
