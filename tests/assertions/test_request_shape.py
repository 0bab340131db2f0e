from __future__ import annotations

from typing import Any

import pytest

import kanta
from kanta import AssertionFailure, RequestShapeError, assert_, is_, is_instance_of
from kanta.assertions.base import CallableAssertion, ValueAssertion
from kanta.assertions.engine import (
    CALLABLE_ARGS_NOT_A_SEQUENCE_ERROR,
    CALLABLE_KWARGS_NOT_A_MAPPING_ERROR,
    verify,
)


def _no_op(*args: Any, **kwargs: Any) -> None:
    return None


MALFORMED_REQUESTS = [
    ({}, kanta.NO_SUBJECT_SPECIFIED_ERROR),
    ({"that": Exception(), "that_calling": isinstance}, kanta.MULTIPLE_SUBJECTS_SPECIFIED_ERROR),
    ({"that": Exception(), "that_calling": []}, kanta.MULTIPLE_SUBJECTS_SPECIFIED_ERROR),
    ({"that": Exception()}, kanta.MISSING_FAILURE_REASON_ERROR),
    (
        {"that": Exception(), "or_fail_because": "something went wrong"},
        kanta.MISSING_VALUE_SUBJECT_VALIDATOR_ERROR,
    ),
    (
        {"that": Exception(), "satisfies": False, "or_fail_because": "something went wrong"},
        kanta.VALUE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR,
    ),
    (
        {
            "that": Exception(),
            "satisfies": [object(), "some_missing_method"],
            "or_fail_because": "something went wrong",
        },
        kanta.VALUE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR,
    ),
    (
        {
            "that": Exception(),
            "satisfies": [is_(False), None],
            "or_fail_because": "something went wrong",
        },
        kanta.VALUE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR,
    ),
    (
        {"that_calling": _no_op, "or_fail_because": "something went wrong"},
        kanta.MISSING_CALLABLE_SUBJECT_VALIDATOR_ERROR,
    ),
    (
        {
            "that_calling": False,
            "throws_exception_satisfying": [],
            "or_fail_because": "something went wrong",
        },
        kanta.CALLABLE_SUBJECT_IS_NOT_CALLABLE_ERROR,
    ),
    (
        {
            "that_calling": _no_op,
            "throws_exception_satisfying": False,
            "or_fail_because": "something went wrong",
        },
        kanta.CALLABLE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR,
    ),
    (
        {
            "that_calling": _no_op,
            "throws_exception_satisfying": [False, is_instance_of("RuntimeError")],
            "or_fail_because": "something went wrong",
        },
        kanta.CALLABLE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR,
    ),
    (
        {
            "that_calling": _no_op,
            "with_args": "ab",
            "throws_exception_satisfying": [],
            "or_fail_because": "something went wrong",
        },
        CALLABLE_ARGS_NOT_A_SEQUENCE_ERROR,
    ),
    (
        {
            "that_calling": _no_op,
            "with_kwargs": ["a"],
            "throws_exception_satisfying": [],
            "or_fail_because": "something went wrong",
        },
        CALLABLE_KWARGS_NOT_A_MAPPING_ERROR,
    ),
]


@pytest.mark.parametrize(("request_data", "message"), MALFORMED_REQUESTS)
def test_assert_rejects_malformed_requests(request_data: dict[str, Any], message: str) -> None:
    with pytest.raises(RequestShapeError) as exc_info:
        assert_(request_data)
    assert str(exc_info.value) == message
    assert not isinstance(exc_info.value, AssertionFailure)


def test_request_shape_error_is_a_runtime_error() -> None:
    with pytest.raises(RuntimeError):
        assert_({})


def test_verify_classifies_value_request() -> None:
    check = is_(1)
    assertion = verify({"that": 1, "satisfies": check, "or_fail_because": "reason"})
    assert assertion == ValueAssertion(subject=1, validators=[check], failure_reason="reason")


def test_verify_classifies_callable_request_with_defaults() -> None:
    assertion = verify(
        {"that_calling": _no_op, "throws_exception_satisfying": (), "or_fail_because": "reason"}
    )
    assert isinstance(assertion, CallableAssertion)
    assert assertion.args == ()
    assert assertion.kwargs == {}
    assert assertion.validators == []


def test_verify_does_not_call_the_subject() -> None:
    calls: list[int] = []
    verify(
        {
            "that_calling": lambda: calls.append(1),
            "throws_exception_satisfying": [],
            "or_fail_because": "reason",
        }
    )
    assert calls == []


def test_keyword_fields_are_merged_over_mapping() -> None:
    assert_({"that": 1, "or_fail_because": "reason"}, satisfies=is_(1))
    with pytest.raises(RequestShapeError) as exc_info:
        assert_(that=1, or_fail_because="reason")
    assert str(exc_info.value) == kanta.MISSING_VALUE_SUBJECT_VALIDATOR_ERROR
