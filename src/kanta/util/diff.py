from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Any

from .export import export, is_plain_scalar, render


@dataclass(frozen=True)
class Comparison:
    expected: Any
    actual: Any
    diff: str


def _strictly_equal(expected: Any, actual: Any, seen: frozenset[tuple[int, int]]) -> bool:
    if expected is actual:
        return True
    if type(expected) is not type(actual):
        return False
    if not isinstance(expected, (list, tuple, dict)):
        return bool(expected == actual)

    pair = (id(expected), id(actual))
    if pair in seen:
        # already being compared further up, so this branch adds no difference
        return True
    seen = seen | {pair}
    if isinstance(expected, dict):
        return expected.keys() == actual.keys() and all(
            _strictly_equal(expected[key], actual[key], seen) for key in expected
        )
    return len(expected) == len(actual) and all(
        _strictly_equal(left, right, seen) for left, right in zip(expected, actual)
    )


def strictly_equal(expected: Any, actual: Any) -> bool:
    return _strictly_equal(expected, actual, frozenset())


def _type_label(value: Any, other: Any) -> str:
    value_type = type(value)
    if value_type.__name__ == type(other).__name__:
        return f"{value_type.__module__}.{value_type.__qualname__}"
    return value_type.__name__


def unified_diff(expected: Any, actual: Any, context_lines: int = 3) -> str:
    """Line diff of the exported forms, or "" when a line diff would say nothing."""
    if is_plain_scalar(expected) and is_plain_scalar(actual):
        return ""
    expected_lines = export(expected).splitlines()
    actual_lines = export(actual).splitlines()
    if expected_lines == actual_lines:
        return ""

    lines: list[str] = []
    for line in difflib.unified_diff(
        expected_lines,
        actual_lines,
        fromfile="Expected",
        tofile="Actual",
        n=context_lines,
        lineterm="",
    ):
        if line.startswith("@@"):
            line = "@@ @@"
        lines.append(line)
    return "\n" + "\n".join(lines) + "\n"


def diff(expected: Any, actual: Any, context_lines: int = 3) -> str | None:
    """Describe how ``actual`` differs from ``expected``.

    Returns None when the two are strictly equal. A type mismatch is reported
    without rendering either value; otherwise a unified diff is returned when
    one can be produced, falling back to a one-line "does not equal" message.
    """
    if strictly_equal(expected, actual):
        return None
    if type(expected) is not type(actual):
        return (
            f"expected type {_type_label(expected, actual)} "
            f"differs from received type: {_type_label(actual, expected)}"
        )
    text = unified_diff(expected, actual, context_lines)
    if not text:
        text = f"{render(actual)} does not equal expected value: {render(expected)}"
    return text
