from __future__ import annotations

import inspect
from typing import Any

_SCALAR_TYPES = (bool, int, float, complex, str, bytes, bytearray)
_NUMERIC_TYPES = (bool, int, float, complex)
CONTAINER_TYPES = (list, tuple, dict, set, frozenset)
_INDENT = "    "


def type_name(value: Any) -> str:
    return type(value).__name__


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, _SCALAR_TYPES)


def is_plain_scalar(value: Any) -> bool:
    """True for None, booleans and numbers, the values a line diff says nothing about."""
    return value is None or isinstance(value, _NUMERIC_TYPES)


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render(value: Any) -> str:
    """Short form of a value for failure messages.

    Containers and objects collapse to their type name so that large structures
    never end up inside a one-line message.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (int, float, complex, bytes, bytearray)):
        return repr(value)
    return type_name(value)


def _canonical_keys(mapping: dict[Any, Any]) -> list[Any]:
    try:
        return sorted(mapping)
    except TypeError:
        # mixed key types have no total order, keep insertion order
        return list(mapping)


def _attributes(value: Any) -> dict[str, Any] | None:
    if isinstance(value, type) or inspect.isroutine(value):
        return None
    attributes: dict[str, Any] = {}
    if isinstance(value, BaseException):
        attributes["args"] = value.args
    try:
        attributes.update(vars(value))
    except TypeError:
        if not attributes:
            return None
    return attributes


def _block(opening: str, closing: str, entries: list[str], depth: int) -> str:
    if not entries:
        return f"{opening}{closing}"
    pad = _INDENT * (depth + 1)
    body = "\n".join(f"{pad}{entry}," for entry in entries)
    return f"{opening}\n{body}\n{_INDENT * depth}{closing}"


def _export(value: Any, depth: int, seen: frozenset[int]) -> str:
    if is_scalar(value):
        return render(value)
    if id(value) in seen:
        return "*RECURSION*"
    seen = seen | {id(value)}

    if isinstance(value, dict):
        entries = [
            f"{render(key)}: {_export(value[key], depth + 1, seen)}"
            for key in _canonical_keys(value)
        ]
        return _block("{", "}", entries, depth)
    if isinstance(value, list):
        entries = [_export(item, depth + 1, seen) for item in value]
        return _block("[", "]", entries, depth)
    if isinstance(value, tuple):
        entries = [_export(item, depth + 1, seen) for item in value]
        return _block("(", ")", entries, depth)
    if isinstance(value, (set, frozenset)):
        entries = sorted(_export(item, depth + 1, seen) for item in value)
        if not entries:
            return f"{type_name(value)}()"
        return _block("{", "}", entries, depth)

    attributes = _attributes(value)
    if attributes is None:
        return repr(value)
    entries = [
        f"{render(key)}: {_export(attributes[key], depth + 1, seen)}"
        for key in _canonical_keys(attributes)
    ]
    return f"{type_name(value)} " + _block("{", "}", entries, depth)


def export(value: Any) -> str:
    """Full multi-line representation of a value, used as diff input.

    Mapping keys and object attributes are emitted in sorted order when the keys
    allow it, so two equal-but-differently-ordered dicts export identically.
    """
    return _export(value, 0, frozenset())
