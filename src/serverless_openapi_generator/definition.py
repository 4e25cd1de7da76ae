"""OpenAPI definition assembly from static configuration and function routes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from copy import deepcopy
from enum import Enum
import logging
from typing import Any, Optional, Union

from .components import model_to_schema
from .config import (
    DocumentationConfig,
    FunctionRouteConfig,
    ModelConfig,
    load_documentation_config,
    load_function_config,
)
from .errors import ConfigurationError, RouteConflictError, SequenceError
from .json_types import MutableJSONObject, OpenAPIDocument
from .naming import normalize_method, normalize_path
from .operations import build_operation, extract_documentation
from .validation import ValidationResult, validate_document

OPENAPI_VERSION = "3.0.0"

_LOGGER = logging.getLogger(__name__)


class GeneratorState(Enum):
    """Lifecycle of a :class:`DefinitionGenerator`."""

    UNINITIALIZED = "uninitialized"
    PARSED = "parsed"
    ROUTES_LOADED = "routes_loaded"
    VALIDATED = "validated"


class DefinitionGenerator:
    """Own and progressively assemble one OpenAPI document.

    Steps must run in order: :meth:`parse`, :meth:`read_functions`, then
    :meth:`validate`. Out-of-order calls raise :class:`SequenceError`.
    """

    def __init__(
        self,
        config: Union[DocumentationConfig, Mapping[str, Any], None] = None,
        *,
        allow_route_overrides: bool = True,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._raw_config = config
        self._allow_route_overrides = allow_route_overrides
        self._logger = logger or _LOGGER
        self._definition: OpenAPIDocument = {}
        self._models: dict[str, ModelConfig] = {}
        self._state = GeneratorState.UNINITIALIZED

    @property
    def state(self) -> GeneratorState:
        """Current lifecycle state."""
        return self._state

    @property
    def definition(self) -> OpenAPIDocument:
        """The document assembled so far."""
        return self._definition

    def parse(
        self,
        config: Union[DocumentationConfig, Mapping[str, Any], None] = None,
    ) -> DefinitionGenerator:
        """Seed the document from the static documentation configuration.

        Args:
            config (Union[DocumentationConfig, Mapping[str, Any], None]): Static
                configuration; defaults to the one given to the constructor.

        Returns:
            DefinitionGenerator: This generator, for chaining.
        """
        self._require_state("parse", GeneratorState.UNINITIALIZED)
        raw = config if config is not None else self._raw_config
        if raw is None:
            raise ConfigurationError("No documentation configuration supplied")
        documentation = load_documentation_config(raw)

        definition: OpenAPIDocument = {
            "openapi": OPENAPI_VERSION,
            "info": {
                "title": documentation.title,
                "description": documentation.description,
                "version": documentation.version,
            },
        }
        if documentation.servers is not None:
            definition["servers"] = deepcopy(documentation.servers)
        if documentation.tags is not None:
            definition["tags"] = deepcopy(documentation.tags)
        if documentation.external_docs is not None:
            definition["externalDocs"] = deepcopy(documentation.external_docs)
        if documentation.security is not None:
            definition["security"] = deepcopy(documentation.security)
        definition["paths"] = {}
        definition["components"] = {
            "schemas": {model.name: model_to_schema(model) for model in documentation.models},
            "securitySchemes": {
                name: scheme.to_component()
                for name, scheme in documentation.security_schemes.items()
            },
        }

        self._models = {model.name: model for model in documentation.models}
        self._definition = definition
        self._state = GeneratorState.PARSED
        return self

    def read_functions(
        self,
        function_configs: Iterable[Union[FunctionRouteConfig, Mapping[str, Any]]],
    ) -> DefinitionGenerator:
        """Add one operation per documented HTTP event of each function.

        The same path and method declared twice keeps the later operation
        unless the generator was built with ``allow_route_overrides=False``.

        Args:
            function_configs (Iterable[Union[FunctionRouteConfig, Mapping[str, Any]]]):
                Function route configurations in host declaration order.

        Returns:
            DefinitionGenerator: This generator, for chaining.
        """
        self._require_state("read_functions", GeneratorState.PARSED)

        paths: dict[str, MutableJSONObject] = {}
        owners: dict[tuple[str, str], str] = {}
        for raw_function in function_configs:
            function = load_function_config(raw_function)
            for event in function.events:
                self._add_event_route(function, event, paths=paths, owners=owners)

        self._definition["paths"] = paths
        self._state = GeneratorState.ROUTES_LOADED
        return self

    def validate(self) -> ValidationResult:
        """Validate the assembled document against the OpenAPI 3.0 schema.

        Returns:
            ValidationResult: Validity flag and error records. Never raises for
                an invalid document and never modifies it.
        """
        if self._state not in (GeneratorState.ROUTES_LOADED, GeneratorState.VALIDATED):
            raise SequenceError(
                f"validate() requires read_functions() first (state: {self._state.value})"
            )
        result = validate_document(self._definition)
        self._state = GeneratorState.VALIDATED
        return result

    def _add_event_route(
        self,
        function: FunctionRouteConfig,
        event: Any,
        *,
        paths: dict[str, MutableJSONObject],
        owners: dict[tuple[str, str], str],
    ) -> None:
        if not isinstance(event, Mapping):
            return
        http_event = event.get("http")
        # The "GET users" string form carries no documentation.
        if not isinstance(http_event, Mapping):
            return
        documentation = extract_documentation(http_event)
        if documentation is None:
            return

        path = normalize_path(http_event.get("path"))
        method = normalize_method(http_event.get("method"))
        operation = build_operation(
            function_name=function.name,
            documentation=documentation,
            models=self._models,
        )

        previous_owner = owners.get((path, method))
        if previous_owner is not None:
            if not self._allow_route_overrides:
                raise RouteConflictError(
                    f"{method.upper()} {path} is documented by both "
                    f"{previous_owner!r} and {function.name!r}"
                )
            self._logger.warning(
                "%s %s documented by %r overrides the definition from %r",
                method.upper(),
                path,
                function.name,
                previous_owner,
            )
        owners[(path, method)] = function.name
        paths.setdefault(path, {})[method] = operation
        self._logger.debug("Added %s %s from function %r", method.upper(), path, function.name)

    def _require_state(self, step: str, expected: GeneratorState) -> None:
        if self._state is not expected:
            raise SequenceError(
                f"{step}() requires state {expected.value!r}, current state is {self._state.value!r}"
            )
