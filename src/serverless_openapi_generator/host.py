"""Host collaborators supplying documentation and function configuration."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

import yaml

from .errors import ConfigurationError


class FunctionConfigProvider(Protocol):
    """Source of the static documentation block and declared functions."""

    def documentation_config(self) -> Mapping[str, Any]:
        """Return the static documentation block."""
        ...

    def function_names(self) -> list[str]:
        """Return declared function names in declaration order."""
        ...

    def function_config(self, name: str) -> Mapping[str, Any]:
        """Return the raw configuration of one function."""
        ...


class StaticFunctionProvider:
    """In-memory provider, mainly for embedding and tests."""

    def __init__(
        self,
        documentation: Mapping[str, Any],
        functions: Mapping[str, Mapping[str, Any]],
    ) -> None:
        self._documentation = documentation
        self._functions = dict(functions)

    def documentation_config(self) -> Mapping[str, Any]:
        return self._documentation

    def function_names(self) -> list[str]:
        return list(self._functions)

    def function_config(self, name: str) -> Mapping[str, Any]:
        return self._functions[name]


class ServerlessConfigProvider:
    """Provider backed by a parsed ``serverless.yml`` service definition.

    The documentation block is read from ``custom.documentation``.
    """

    def __init__(self, service: Mapping[str, Any]) -> None:
        self._service = service
        self._functions = _collect_functions(service.get("functions"))

    @classmethod
    def from_file(cls, path: Path) -> ServerlessConfigProvider:
        """Load a provider from a Serverless service file."""
        return cls(load_serverless_config(path))

    def documentation_config(self) -> Mapping[str, Any]:
        custom = self._service.get("custom")
        documentation = custom.get("documentation") if isinstance(custom, Mapping) else None
        if not isinstance(documentation, Mapping):
            raise ConfigurationError("Serverless service is missing 'custom.documentation'")
        return documentation

    def function_names(self) -> list[str]:
        return list(self._functions)

    def function_config(self, name: str) -> Mapping[str, Any]:
        return self._functions[name]


class _ServerlessLoader(yaml.SafeLoader):
    """SafeLoader that keeps CloudFormation intrinsic tags as plain data."""


def _construct_intrinsic(loader: yaml.SafeLoader, tag_suffix: str, node: yaml.Node) -> Any:
    key = "Ref" if tag_suffix == "Ref" else f"Fn::{tag_suffix}"
    if isinstance(node, yaml.ScalarNode):
        value: Any = loader.construct_scalar(node)
    elif isinstance(node, yaml.SequenceNode):
        value = loader.construct_sequence(node, deep=True)
    else:
        value = loader.construct_mapping(node, deep=True)
    return {key: value}


_ServerlessLoader.add_multi_constructor("!", _construct_intrinsic)


def load_serverless_config(path: Path) -> dict[str, Any]:
    """Load a Serverless service definition from YAML.

    Args:
        path (Path): Path to ``serverless.yml``.

    Returns:
        dict[str, Any]: Parsed service definition.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle, Loader=_ServerlessLoader)
    except OSError as exc:
        raise ConfigurationError(f"Failed to read service file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse YAML in {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigurationError(
            f"Service file must deserialize to a mapping, got {type(payload)!r}"
        )
    return payload


def _collect_functions(raw: Any) -> dict[str, Mapping[str, Any]]:
    # Serverless also accepts a list of mappings when functions are split across files.
    if raw is None:
        return {}
    chunks = raw if isinstance(raw, list) else [raw]
    functions: dict[str, Mapping[str, Any]] = {}
    for chunk in chunks:
        if not isinstance(chunk, Mapping):
            raise ConfigurationError("'functions' must be a mapping or a list of mappings")
        for name, config in chunk.items():
            functions[str(name)] = config if isinstance(config, Mapping) else {}
    return functions
