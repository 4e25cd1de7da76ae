"""Path template and HTTP method normalization for route definitions."""

from __future__ import annotations

import re
from typing import Any

from .errors import MalformedRouteError

HTTP_METHODS: tuple[str, ...] = (
    "get",
    "post",
    "put",
    "delete",
    "patch",
    "options",
    "head",
)

_LEADING_SLASHES_RE = re.compile(r"^/+")


def normalize_path(raw: Any) -> str:
    """Return a path template with exactly one leading slash.

    Args:
        raw (Any): Path as declared on the HTTP event.

    Returns:
        str: Normalized path template such as ``/users/{id}``.
    """
    if not isinstance(raw, str):
        raise MalformedRouteError(f"HTTP event path must be a string, got {type(raw).__name__}")
    text = raw.strip()
    if not text:
        raise MalformedRouteError("HTTP event path must not be empty")
    return "/" + _LEADING_SLASHES_RE.sub("", text)


def normalize_method(raw: Any) -> str:
    """Return the lowercase HTTP method, rejecting anything outside ``HTTP_METHODS``."""
    if not isinstance(raw, str) or raw.strip().lower() not in HTTP_METHODS:
        raise MalformedRouteError(
            f"Unsupported HTTP method {raw!r}; expected one of {', '.join(HTTP_METHODS)}"
        )
    return raw.strip().lower()
