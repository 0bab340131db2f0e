from __future__ import annotations

import pytest

from kanta.util.diff import diff, strictly_equal


@pytest.mark.parametrize(
    ("expected", "actual", "message"),
    [
        (True, "0", "expected type bool differs from received type: str"),
        (["test"], object(), "expected type list differs from received type: object"),
        (5, ["test"], "expected type int differs from received type: list"),
        (5, "5", "expected type int differs from received type: str"),
        (1, 1.0, "expected type int differs from received type: float"),
        (True, 1, "expected type bool differs from received type: int"),
        (True, False, "false does not equal expected value: true"),
        (3, 5, "5 does not equal expected value: 3"),
        (None, None, None),
        ("foo", "bar", "\n--- Expected\n+++ Actual\n@@ @@\n-'foo'\n+'bar'\n"),
    ],
)
def test_diff_messages(expected: object, actual: object, message: str | None) -> None:
    assert diff(expected, actual) == message


def test_diff_of_dicts_is_a_unified_diff() -> None:
    assert diff({"a": 1, "b": 2}, {"a": 1, "b": 3}) == (
        "\n--- Expected\n+++ Actual\n@@ @@\n"
        " {\n"
        "     'a': 1,\n"
        "-    'b': 2,\n"
        "+    'b': 3,\n"
        " }\n"
    )


def test_diff_of_multiline_strings_is_line_based() -> None:
    assert diff("one\ntwo", "one\nthree") == (
        "\n--- Expected\n+++ Actual\n@@ @@\n"
        " 'one\n"
        "-two'\n"
        "+three'\n"
    )


def test_diff_respects_context_lines() -> None:
    expected = list(range(10))
    actual = list(range(10))
    actual[5] = 50

    assert diff(expected, actual, context_lines=1) == (
        "\n--- Expected\n+++ Actual\n@@ @@\n"
        "     4,\n"
        "-    5,\n"
        "+    50,\n"
        "     6,\n"
    )


def test_diff_falls_back_when_exports_match() -> None:
    class Opaque:
        pass

    assert diff(Opaque(), Opaque()) == "Opaque does not equal expected value: Opaque"


def test_diff_qualifies_type_names_that_collide() -> None:
    Shadow = type("int", (), {})

    message = diff(1, Shadow())
    assert message is not None
    assert message.startswith("expected type builtins.int differs from received type: ")


@pytest.mark.parametrize(
    ("left", "right", "equal"),
    [
        (0, 0, True),
        ("1", "1", True),
        (["test"], ["test"], True),
        ({"a": 1, "b": 2}, {"b": 2, "a": 1}, True),
        ([1, True], [1, 1], False),
        ({"a": 1}, {"a": 1.0}, False),
        ((1, 2), [1, 2], False),
        ([1, 2], [1, 2, 3], False),
    ],
)
def test_strictly_equal(left: object, right: object, equal: bool) -> None:
    assert strictly_equal(left, right) is equal


def test_self_referencing_structures_compare_without_recursing() -> None:
    left: list[object] = [1]
    left.append(left)
    right: list[object] = [1]
    right.append(right)
    assert strictly_equal(left, right) is True

    other: list[object] = [2]
    other.append(other)
    assert strictly_equal(left, other) is False
    message = diff(left, other)
    assert message is not None
    assert "*RECURSION*" in message
    assert "-    1,\n+    2,\n" in message


def test_self_referencing_dicts_compare_without_recursing() -> None:
    left: dict[str, object] = {"n": 1}
    left["self"] = left
    right: dict[str, object] = {"n": 2}
    right["self"] = right
    assert strictly_equal(left, right) is False
