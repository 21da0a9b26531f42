"""
Argument narrowing for tool handlers.

Checks presence and JSON type only. Enum values and numeric bounds in the
published schemas are left for the HeyGen API to judge.
"""

from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote, urlencode


class ToolArgumentError(ValueError):
    """A tool was called with a missing or mistyped argument."""


_MISSING = object()


def _check(name: str, value: Any, kind: str) -> Any:
    if kind == "string":
        if not isinstance(value, str):
            raise ToolArgumentError(f"'{name}' must be a string")
    elif kind == "number":
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ToolArgumentError(f"'{name}' must be a number")
    elif kind == "boolean":
        if not isinstance(value, bool):
            raise ToolArgumentError(f"'{name}' must be a boolean")
    return value


def required(args: Dict[str, Any], name: str, kind: str = "string") -> Any:
    value = args.get(name, _MISSING)
    if value is _MISSING or value is None:
        raise ToolArgumentError(f"Missing required argument '{name}'")
    return _check(name, value, kind)


def optional(args: Dict[str, Any], name: str, kind: str = "string", default: Any = None) -> Any:
    value = args.get(name)
    if value is None:
        return default
    return _check(name, value, kind)


def format_query_value(value: Any) -> str:
    """Render a query value the way the HeyGen API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_url(base: str, params: List[Tuple[str, Any]]) -> str:
    """
    Append a query string built from the supplied params.
    Pairs whose value is None are dropped; with nothing left, no '?' is added.
    """
    pairs = [(key, format_query_value(value)) for key, value in params if value is not None]
    if not pairs:
        return base
    return f"{base}?{urlencode(pairs)}"


def path_segment(value: str) -> str:
    """Percent-encode an identifier for use as a single path segment."""
    return quote(value, safe="")


def non_empty(value: Optional[str]) -> Optional[str]:
    """Collapse empty strings to None so they are never sent."""
    return value or None
