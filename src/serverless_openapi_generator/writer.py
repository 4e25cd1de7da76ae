"""Serialization and filesystem output for generated documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigurationError, WriteError
from .json_types import JSONObject

OUTPUT_FORMATS: tuple[str, ...] = ("yaml", "json")


class _DocumentDumper(yaml.SafeDumper):
    """Dumper that writes repeated objects in full instead of as anchors."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def serialize_document(document: JSONObject, *, output_format: str, indent: int) -> str:
    """Render a document as YAML or JSON text.

    Args:
        document (JSONObject): OpenAPI document to render.
        output_format (str): ``"yaml"`` or ``"json"``.
        indent (int): Indentation width in spaces.

    Returns:
        str: Serialized document ending with a newline.
    """
    if output_format == "json":
        return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"
    if output_format == "yaml":
        return yaml.dump(
            document,
            Dumper=_DocumentDumper,
            indent=indent,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    raise ConfigurationError(
        f"Invalid output format {output_format!r}; must be one of {', '.join(OUTPUT_FORMATS)}"
    )


def write_document(path: Path, content: str) -> None:
    """Write serialized output, replacing any existing file.

    Args:
        path (Path): Destination file.
        content (str): Serialized document.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(f"Failed to create output directory {path.parent}: {exc}") from exc
    _write_file(path, content)


def _write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Failed to write file {path}: {exc}") from exc
