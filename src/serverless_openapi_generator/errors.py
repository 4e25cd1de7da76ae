"""Exception hierarchy for documentation generation."""

from __future__ import annotations


class GeneratorError(RuntimeError):
    """Base class for errors that abort a generation run."""


class ConfigurationError(GeneratorError):
    """Raised when static configuration or output options are missing or malformed."""


class MalformedRouteError(GeneratorError):
    """Raised when an HTTP event declares an invalid method or path."""


class RouteConflictError(GeneratorError):
    """Raised when two functions document the same path and method and overrides are disabled."""


class SequenceError(GeneratorError):
    """Raised when generator steps are invoked out of order."""


class WriteError(GeneratorError):
    """Raised when the output document cannot be written."""
