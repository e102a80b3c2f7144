"""Render values in a compact brace notation for diagnostic output."""

from collections.abc import Iterable, Mapping
from typing import Any


def format_value(value: Any) -> str:
    """Return the diagnostic text for ``value``.

    Booleans render as ``true``/``false`` and strings are double-quoted.
    Two-element tuples render as pairs. Mappings render as a list of
    key/value pairs. Any other iterable renders as ``{a, b, c}``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, tuple) and len(value) == 2:
        first, second = value
        return "{" + format_value(first) + ", " + format_value(second) + "}"
    if isinstance(value, Mapping):
        return "{" + ", ".join(format_value(item) for item in value.items()) + "}"
    if isinstance(value, Iterable):
        return "{" + ", ".join(format_value(item) for item in value) + "}"
    return str(value)


def debug_line(names: str, *args: Any) -> str:
    """Return ``[names] = [v1, v2, ...]`` with each value formatted."""
    rendered = ", ".join(format_value(arg) for arg in args)
    return f"[{names}] = [{rendered}]"