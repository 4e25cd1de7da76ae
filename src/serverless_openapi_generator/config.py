"""Static documentation and function route configuration models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import ConfigurationError

DEFAULT_API_VERSION = "1.0.0"
DEFAULT_CONTENT_TYPE = "application/json"

_API_KEY_LOCATIONS: tuple[str, ...] = ("query", "header", "cookie")


class ModelConfig(BaseModel):
    """A reusable named schema declared in the documentation block."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    description: Optional[str] = None
    content_type: str = Field(default=DEFAULT_CONTENT_TYPE, alias="contentType")
    schema_: Union[dict[str, Any], list[Any]] = Field(alias="schema")
    examples: list[Any] = Field(default_factory=list)
    example: Optional[Any] = None


class SecuritySchemeConfig(BaseModel):
    """An authentication mechanism copied into ``components.securitySchemes``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: Literal["apiKey", "http", "oauth2", "openIdConnect"]
    description: Optional[str] = None
    name: Optional[str] = None
    in_: Optional[str] = Field(default=None, alias="in")
    scheme: Optional[str] = None
    bearer_format: Optional[str] = Field(default=None, alias="bearerFormat")
    flows: Optional[dict[str, Any]] = None
    open_id_connect_url: Optional[str] = Field(default=None, alias="openIdConnectUrl")

    @model_validator(mode="after")
    def _check_type_specific_fields(self) -> SecuritySchemeConfig:
        if self.type == "apiKey":
            if not self.name:
                raise ValueError("apiKey security schemes require 'name'")
            if self.in_ not in _API_KEY_LOCATIONS:
                raise ValueError(
                    f"apiKey security schemes require 'in' to be one of {', '.join(_API_KEY_LOCATIONS)}"
                )
        elif self.type == "http" and not self.scheme:
            raise ValueError("http security schemes require 'scheme'")
        elif self.type == "oauth2" and not self.flows:
            raise ValueError("oauth2 security schemes require 'flows'")
        elif self.type == "openIdConnect" and not self.open_id_connect_url:
            raise ValueError("openIdConnect security schemes require 'openIdConnectUrl'")
        return self

    def to_component(self) -> dict[str, Any]:
        """Return the OpenAPI security scheme object."""
        return self.model_dump(by_alias=True, exclude_none=True)


class DocumentationConfig(BaseModel):
    """The static ``documentation`` block of the host configuration."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    description: str
    version: str = DEFAULT_API_VERSION
    models: list[ModelConfig] = Field(default_factory=list)
    security_schemes: dict[str, SecuritySchemeConfig] = Field(
        default_factory=dict, alias="securitySchemes"
    )
    servers: Optional[list[dict[str, Any]]] = None
    tags: Optional[list[dict[str, Any]]] = None
    external_docs: Optional[dict[str, Any]] = Field(default=None, alias="externalDocs")
    security: Optional[list[dict[str, list[str]]]] = None

    @field_validator("title", "description")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be a non-empty string")
        return value

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        # YAML reads `version: 1.0` as a float.
        if value is None:
            return DEFAULT_API_VERSION
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("models", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("security_schemes", mode="before")
    @classmethod
    def _none_as_empty_mapping(cls, value: Any) -> Any:
        return {} if value is None else value

    @model_validator(mode="after")
    def _check_unique_model_names(self) -> DocumentationConfig:
        seen: set[str] = set()
        for model in self.models:
            if model.name in seen:
                raise ValueError(f"duplicate model name {model.name!r}")
            seen.add(model.name)
        return self


class FunctionRouteConfig(BaseModel):
    """One deployable function and its trigger events."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(min_length=1)
    handler: Optional[str] = None
    description: Optional[str] = None
    environment: Optional[dict[str, Any]] = None
    events: list[Any] = Field(default_factory=list)

    @field_validator("events", mode="before")
    @classmethod
    def _none_as_no_events(cls, value: Any) -> Any:
        return [] if value is None else value


def load_documentation_config(
    raw: Union[DocumentationConfig, Mapping[str, Any], None],
) -> DocumentationConfig:
    """Validate the static documentation block.

    Args:
        raw (Union[DocumentationConfig, Mapping[str, Any], None]): Parsed host configuration.

    Returns:
        DocumentationConfig: Validated configuration.
    """
    if isinstance(raw, DocumentationConfig):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigurationError(
            f"Documentation configuration must be a mapping, got {type(raw).__name__}"
        )
    try:
        return DocumentationConfig.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid documentation configuration: {exc}") from exc


def load_function_config(
    raw: Union[FunctionRouteConfig, Mapping[str, Any]],
) -> FunctionRouteConfig:
    """Validate one function route configuration."""
    if isinstance(raw, FunctionRouteConfig):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigurationError(
            f"Function configuration must be a mapping, got {type(raw).__name__}"
        )
    try:
        return FunctionRouteConfig.model_validate(dict(raw))
    except ValidationError as exc:
        name = raw.get("name", "<unnamed>")
        raise ConfigurationError(f"Invalid configuration for function {name!r}: {exc}") from exc
