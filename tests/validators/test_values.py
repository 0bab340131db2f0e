from __future__ import annotations

import pytest

from kanta import ValidationFailure, configure, is_
from kanta.config import KantaSettings
from kanta.util.diff import Comparison


@pytest.mark.parametrize(
    ("expected", "actual", "message"),
    [
        (True, "0", "expected type bool differs from received type: str"),
        (5, "5", "expected type int differs from received type: str"),
        (True, False, "false does not equal expected value: true"),
        (3, 5, "5 does not equal expected value: 3"),
        ("foo", "bar", "\n--- Expected\n+++ Actual\n@@ @@\n-'foo'\n+'bar'\n"),
    ],
)
def test_is_rejects_values_that_are_not_strictly_equal(
    expected: object, actual: object, message: str
) -> None:
    with pytest.raises(ValidationFailure) as exc_info:
        is_(expected)(actual)
    assert exc_info.value.message == message


@pytest.mark.parametrize(
    ("expected", "actual"),
    [(0, 0), (False, False), (1, 1), ("1", "1"), (True, True), (["test"], ["test"]), (None, None)],
)
def test_is_accepts_strictly_equal_values(expected: object, actual: object) -> None:
    check = is_(expected)
    check(actual)
    check(actual)


def test_is_failure_carries_comparison() -> None:
    failure = is_("foo").evaluate("bar")
    assert failure is not None
    assert failure.data == Comparison(expected="foo", actual="bar", diff=failure.message)


def test_is_uses_configured_context_lines() -> None:
    configure(KantaSettings(diff_context_lines=0))
    failure = is_([1, 2, 3]).evaluate([1, 5, 3])
    assert failure is not None
    assert failure.message == "\n--- Expected\n+++ Actual\n@@ @@\n-    2,\n+    5,\n"
