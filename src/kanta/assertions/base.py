from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

VALUE_SUBJECT_KEY = "that"
VALUE_VALIDATOR_KEY = "satisfies"
CALLABLE_SUBJECT_KEY = "that_calling"
CALLABLE_SUBJECT_ARGS_KEY = "with_args"
CALLABLE_SUBJECT_KWARGS_KEY = "with_kwargs"
CALLABLE_EXCEPTION_VALIDATOR_KEY = "throws_exception_satisfying"
FAILURE_REASON_KEY = "or_fail_because"

_SUBJECT_KEY_HINT = (
    f"For testing values/objects/collections, use the '{VALUE_SUBJECT_KEY}' key.\n"
    f"For testing that a callable raises an exception, use the '{CALLABLE_SUBJECT_KEY}' key."
)

NO_SUBJECT_SPECIFIED_ERROR = (
    "Must include a subject to test when passing assertion setup to the assert_ function.\n"
    + _SUBJECT_KEY_HINT
)
MULTIPLE_SUBJECTS_SPECIFIED_ERROR = (
    "Must specify only a single key denoting the subject to test when passing assertion "
    "setup to the assert_ function.\n" + _SUBJECT_KEY_HINT
)
MISSING_FAILURE_REASON_ERROR = (
    f"Must specify a string containing the failure reason summary within the "
    f"'{FAILURE_REASON_KEY}' key when passing assertion setup to the assert_ function."
)
MISSING_VALUE_SUBJECT_VALIDATOR_ERROR = (
    f"Must specify which validators to test the given subject against using the "
    f"'{VALUE_VALIDATOR_KEY}' key when passing assertion setup to the assert_ function."
)
VALUE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR = (
    f"Must pass a callable or a list of callables using the '{VALUE_VALIDATOR_KEY}' key "
    "to include validation callbacks when passing assertion setup to the assert_ function."
)
MISSING_CALLABLE_SUBJECT_VALIDATOR_ERROR = (
    f"Must specify which validators to test the expected exception against using the "
    f"'{CALLABLE_EXCEPTION_VALIDATOR_KEY}' key when passing assertion setup to the "
    "assert_ function."
)
CALLABLE_SUBJECT_IS_NOT_CALLABLE_ERROR = (
    f"The subject given via the '{CALLABLE_SUBJECT_KEY}' key must be callable."
)
CALLABLE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR = (
    f"Must pass a callable or a list of callables using the "
    f"'{CALLABLE_EXCEPTION_VALIDATOR_KEY}' key to include validation callbacks when "
    "passing assertion setup to the assert_ function."
)

CALLABLE_FAILED_TO_THROW_MESSAGE = "The given callable failed to throw an exception"
DEFAULT_FAIL_MESSAGE = "Test explicitly failed (This message should ideally be more descriptive...)"


class RequestShapeError(RuntimeError):
    """Raised for a malformed assertion request, a mistake in the test itself."""


class ValidationFailure(Exception):
    """Failure signal produced by a validator.

    ``origin`` is the call stack at the point the failure was created; the
    dispatcher uses it to point at the assertion site in the caller's code.
    """

    def __init__(
        self,
        message: str,
        data: Any = None,
        origin: list[traceback.FrameSummary] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.data = data
        self.origin = origin if origin is not None else traceback.extract_stack()[:-1]

    def rewrap(self, prefix: str) -> "ValidationFailure":
        return ValidationFailure(prefix + self.message, data=self.data, origin=self.origin)


class AssertionFailure(AssertionError):
    def __init__(self, message: str, data: Any = None):
        super().__init__(message)
        self.message = message
        self.data = data


@dataclass(frozen=True)
class ValueAssertion:
    subject: Any
    validators: Sequence[Callable[[Any], Any]]
    failure_reason: str


@dataclass(frozen=True)
class CallableAssertion:
    callable: Callable[..., Any]
    validators: Sequence[Callable[[Any], Any]]
    failure_reason: str
    args: Sequence[Any] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)
