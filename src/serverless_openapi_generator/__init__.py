"""Serverless to OpenAPI 3.0 documentation generator package."""

from __future__ import annotations

from .cli import main
from .definition import DefinitionGenerator, GeneratorState
from .errors import (
    ConfigurationError,
    GeneratorError,
    MalformedRouteError,
    RouteConflictError,
    SequenceError,
    WriteError,
)
from .generator import GenerationRun, OutputOptions, run_generation
from .host import FunctionConfigProvider, ServerlessConfigProvider, StaticFunctionProvider
from .validation import ValidationErrorRecord, ValidationResult

__all__ = [
    "ConfigurationError",
    "DefinitionGenerator",
    "FunctionConfigProvider",
    "GenerationRun",
    "GeneratorError",
    "GeneratorState",
    "MalformedRouteError",
    "OutputOptions",
    "RouteConflictError",
    "SequenceError",
    "ServerlessConfigProvider",
    "StaticFunctionProvider",
    "ValidationErrorRecord",
    "ValidationResult",
    "WriteError",
    "main",
    "run_generation",
]
