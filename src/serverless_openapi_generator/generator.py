"""High-level generation orchestration."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, Optional, Union

from .definition import DefinitionGenerator
from .errors import ConfigurationError
from .host import FunctionConfigProvider
from .json_types import OpenAPIDocument
from .validation import ValidationResult
from .writer import OUTPUT_FORMATS, serialize_document, write_document

DEFAULT_FORMAT = "yaml"
DEFAULT_INDENT = 2
_DEFAULT_OUTPUT_FILES = {"yaml": "openapi.yml", "json": "openapi.json"}
# PyYAML silently falls back to 2 outside this range.
_YAML_INDENTS = range(2, 10)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputOptions:
    """Resolved serialization options."""

    format: str
    file: Path
    indent: int


@dataclass(frozen=True)
class GenerationRun:
    """Result of one generation run."""

    options: OutputOptions
    validation: ValidationResult
    definition: OpenAPIDocument


def run_generation(
    *,
    provider: FunctionConfigProvider,
    output: Union[str, Path, None] = None,
    output_format: Optional[str] = None,
    indent: Optional[int] = None,
    allow_route_overrides: bool = True,
    logger: Optional[logging.Logger] = None,
) -> GenerationRun:
    """Generate, validate and write the OpenAPI document for one host service.

    Configuration and route errors propagate before anything is written. A
    document failing validation is still written so it can be inspected.

    Args:
        provider (FunctionConfigProvider): Host supplying documentation and functions.
        output (Union[str, Path, None]): Output file; defaults by format.
        output_format (Optional[str]): ``yaml`` or ``json``, case-insensitive.
        indent (Optional[int]): Indentation width in spaces.
        allow_route_overrides (bool): Keep the later operation on path collisions
            instead of raising ``RouteConflictError``.
        logger (Optional[logging.Logger]): Sink for progress and validation messages.

    Returns:
        GenerationRun: Options used, validation result and final document.
    """
    log = logger or _LOGGER
    log.info("OpenAPI v3 Documentation Generator")

    generator = DefinitionGenerator(
        provider.documentation_config(),
        allow_route_overrides=allow_route_overrides,
        logger=log,
    )
    generator.parse()
    generator.read_functions(collect_function_configs(provider))

    options = resolve_output_options(output=output, output_format=output_format, indent=indent)
    log.info(
        '[OPTIONS] format: "%s", output file: "%s", indentation: "%d"',
        options.format,
        options.file,
        options.indent,
    )

    log.info("[VALIDATION] Validating OpenAPI generated output")
    validation = generator.validate()
    report_validation(validation, log)

    content = serialize_document(
        generator.definition,
        output_format=options.format,
        indent=options.indent,
    )
    write_document(options.file, content)
    log.info('[OUTPUT] To "%s"', options.file)

    return GenerationRun(options=options, validation=validation, definition=generator.definition)


def collect_function_configs(provider: FunctionConfigProvider) -> list[dict[str, Any]]:
    """Look up each declared function and attach its declared name.

    The declared name replaces any ``name`` key, which Serverless fills with
    the deployed function name.
    """
    configs: list[dict[str, Any]] = []
    for name in provider.function_names():
        config = dict(provider.function_config(name))
        config["name"] = name
        configs.append(config)
    return configs


def resolve_output_options(
    *,
    output: Union[str, Path, None] = None,
    output_format: Optional[str] = None,
    indent: Optional[int] = None,
) -> OutputOptions:
    """Apply defaults to CLI-style output options and reject invalid values."""
    resolved_format = (output_format or DEFAULT_FORMAT).strip().lower()
    if resolved_format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"Invalid output format {output_format!r}; must be one of "
            f"{' or '.join(repr(name) for name in OUTPUT_FORMATS)}"
        )

    resolved_indent = DEFAULT_INDENT if indent is None else indent
    if isinstance(resolved_indent, bool) or not isinstance(resolved_indent, int) or resolved_indent < 0:
        raise ConfigurationError(f"Indentation must be a non-negative integer, got {indent!r}")
    if resolved_format == "yaml" and resolved_indent not in _YAML_INDENTS:
        raise ConfigurationError(
            f"YAML indentation must be between {_YAML_INDENTS.start} and "
            f"{_YAML_INDENTS.stop - 1}, got {resolved_indent}"
        )

    resolved_output = Path(output) if output else Path(_DEFAULT_OUTPUT_FILES[resolved_format])
    return OutputOptions(format=resolved_format, file=resolved_output, indent=resolved_indent)


def report_validation(result: ValidationResult, log: logging.Logger) -> None:
    """Write a validation result to the log sink."""
    if result.valid:
        log.info("[VALIDATION] OpenAPI valid: true")
        return

    log.warning("[VALIDATION] Failed to validate OpenAPI document")
    if result.error is not None:
        log.warning("%s", result.error)
    for record in result.errors:
        log.warning(
            "  %s %s %s",
            record.data_path or "/",
            record.schema_path,
            record.message,
        )
