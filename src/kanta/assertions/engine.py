from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Callable, NoReturn, Sequence, Union

from kanta.config.loader import get_settings, using_settings
from kanta.config.models import KantaSettings
from kanta.util.export import render
from kanta.validators.base import run_validator

from .base import (
    CALLABLE_EXCEPTION_VALIDATOR_KEY,
    CALLABLE_FAILED_TO_THROW_MESSAGE,
    CALLABLE_SUBJECT_ARGS_KEY,
    CALLABLE_SUBJECT_IS_NOT_CALLABLE_ERROR,
    CALLABLE_SUBJECT_KEY,
    CALLABLE_SUBJECT_KWARGS_KEY,
    CALLABLE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR,
    DEFAULT_FAIL_MESSAGE,
    FAILURE_REASON_KEY,
    MISSING_CALLABLE_SUBJECT_VALIDATOR_ERROR,
    MISSING_FAILURE_REASON_ERROR,
    MISSING_VALUE_SUBJECT_VALIDATOR_ERROR,
    MULTIPLE_SUBJECTS_SPECIFIED_ERROR,
    NO_SUBJECT_SPECIFIED_ERROR,
    VALUE_SUBJECT_KEY,
    VALUE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR,
    VALUE_VALIDATOR_KEY,
    AssertionFailure,
    CallableAssertion,
    RequestShapeError,
    ValidationFailure,
    ValueAssertion,
)

CALLABLE_ARGS_NOT_A_SEQUENCE_ERROR = (
    f"The arguments given via the '{CALLABLE_SUBJECT_ARGS_KEY}' key must be a list or tuple."
)
CALLABLE_KWARGS_NOT_A_MAPPING_ERROR = (
    f"The keyword arguments given via the '{CALLABLE_SUBJECT_KWARGS_KEY}' key must be a mapping."
)

Assertion = Union[ValueAssertion, CallableAssertion]

logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


def _to_sequence(value: Any) -> list[Any]:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        return [value]
    return list(value)


def is_value_assertion(request: Mapping[str, Any]) -> bool:
    return VALUE_SUBJECT_KEY in request


def is_callable_assertion(request: Mapping[str, Any]) -> bool:
    return CALLABLE_SUBJECT_KEY in request


def _validators(request: Mapping[str, Any], key: str, error: str) -> list[Callable[[Any], Any]]:
    validators = _to_sequence(request[key])
    if not all(callable(validator) for validator in validators):
        raise RequestShapeError(error)
    return validators


def verify(request: Mapping[str, Any]) -> Assertion:
    """Check the shape of an assertion request and classify it.

    Raises RequestShapeError with one of the fixed messages from
    ``kanta.assertions.base`` for the first problem found.
    """
    value_subject_given = is_value_assertion(request)
    callable_subject_given = is_callable_assertion(request)

    if not value_subject_given and not callable_subject_given:
        raise RequestShapeError(NO_SUBJECT_SPECIFIED_ERROR)
    if value_subject_given and callable_subject_given:
        raise RequestShapeError(MULTIPLE_SUBJECTS_SPECIFIED_ERROR)
    if FAILURE_REASON_KEY not in request:
        raise RequestShapeError(MISSING_FAILURE_REASON_ERROR)
    failure_reason = str(request[FAILURE_REASON_KEY])

    if value_subject_given:
        if VALUE_VALIDATOR_KEY not in request:
            raise RequestShapeError(MISSING_VALUE_SUBJECT_VALIDATOR_ERROR)
        validators = _validators(
            request, VALUE_VALIDATOR_KEY, VALUE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR
        )
        return ValueAssertion(
            subject=request[VALUE_SUBJECT_KEY],
            validators=validators,
            failure_reason=failure_reason,
        )

    subject = request[CALLABLE_SUBJECT_KEY]
    if not callable(subject):
        raise RequestShapeError(CALLABLE_SUBJECT_IS_NOT_CALLABLE_ERROR)
    if CALLABLE_EXCEPTION_VALIDATOR_KEY not in request:
        raise RequestShapeError(MISSING_CALLABLE_SUBJECT_VALIDATOR_ERROR)
    validators = _validators(
        request,
        CALLABLE_EXCEPTION_VALIDATOR_KEY,
        CALLABLE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR,
    )

    args = request.get(CALLABLE_SUBJECT_ARGS_KEY)
    if args is None:
        args = ()
    if not isinstance(args, (list, tuple)):
        raise RequestShapeError(CALLABLE_ARGS_NOT_A_SEQUENCE_ERROR)
    kwargs = request.get(CALLABLE_SUBJECT_KWARGS_KEY)
    if kwargs is None:
        kwargs = {}
    if not isinstance(kwargs, Mapping):
        raise RequestShapeError(CALLABLE_KWARGS_NOT_A_MAPPING_ERROR)

    return CallableAssertion(
        callable=subject,
        validators=validators,
        failure_reason=failure_reason,
        args=tuple(args),
        kwargs=dict(kwargs),
    )


def _within(filename: str, boundary: Path) -> bool:
    return Path(filename).resolve().is_relative_to(boundary)


def source_location_suffix(
    failure: ValidationFailure, settings: KantaSettings | None = None
) -> str:
    """``"\\nLine N of FILE"`` for the innermost frame outside kanta, or ``""``."""
    if settings is None:
        settings = get_settings()
    if not settings.source_location or not failure.origin:
        return ""
    boundaries = [_PACKAGE_DIR]
    boundaries.extend(Path(entry).resolve() for entry in settings.source_boundaries)
    for frame in reversed(failure.origin):
        if frame.filename.startswith("<"):
            continue
        if any(_within(frame.filename, boundary) for boundary in boundaries):
            continue
        return f"\nLine {frame.lineno} of {frame.filename}"
    return ""


def _apply(
    validators: Sequence[Callable[[Any], Any]],
    subject: Any,
    failure_reason: str,
    settings: KantaSettings,
) -> None:
    for validator in validators:
        failure = run_validator(validator, subject)
        if failure is None:
            continue
        logger.debug("Validator %r rejected %s: %s", validator, render(subject), failure.message)
        raise AssertionFailure(
            failure_reason
            + "\n"
            + failure.message
            + source_location_suffix(failure, settings),
            data=failure.data,
        ) from None


def _is_host_framework_exception(exc: Exception, settings: KantaSettings) -> bool:
    for cls in type(exc).__mro__:
        module = cls.__module__
        for name in settings.passthrough_modules:
            if module == name or module.startswith(name + "."):
                return True
    return False


def _call(assertion: CallableAssertion, settings: KantaSettings) -> Exception:
    try:
        assertion.callable(*assertion.args, **assertion.kwargs)
    except Exception as exc:
        if _is_host_framework_exception(exc, settings):
            logger.debug("Passing %s through from %r", type(exc).__name__, assertion.callable)
            raise
        logger.debug("Callable %r raised %s", assertion.callable, type(exc).__name__)
        return exc
    logger.debug("Callable %r returned without raising", assertion.callable)
    fail(CALLABLE_FAILED_TO_THROW_MESSAGE)


def execute(assertion: Assertion, settings: KantaSettings | None = None) -> None:
    """Run a verified assertion; validators see ``settings`` through active_settings()."""
    if settings is None:
        settings = get_settings()
    with using_settings(settings):
        if isinstance(assertion, ValueAssertion):
            logger.debug(
                "Running %d validator(s) against %s",
                len(assertion.validators),
                render(assertion.subject),
            )
            _apply(assertion.validators, assertion.subject, assertion.failure_reason, settings)
            return

        thrown = _call(assertion, settings)
        logger.debug(
            "Running %d validator(s) against thrown exception", len(assertion.validators)
        )
        _apply(assertion.validators, thrown, assertion.failure_reason, settings)


def assert_(
    request: Mapping[str, Any] | None = None,
    *,
    settings: KantaSettings | None = None,
    **fields: Any,
) -> None:
    """Run a declarative assertion.

    The request is a mapping, keyword arguments, or both (keywords win):

        assert_(that=response, satisfies=[is_object(), has_property("status", 200)],
                or_fail_because="request did not succeed")

        assert_(that_calling=parse, with_args=["{"],
                throws_exception_satisfying=is_instance_of(ValueError),
                or_fail_because="parse accepted broken input")

    Raises RequestShapeError for a malformed request and AssertionFailure when
    a validator rejects the subject or the callable does not raise.
    """
    merged: dict[str, Any] = dict(request or {})
    merged.update(fields)
    execute(verify(merged), settings)


def pass_() -> None:
    """Does nothing; a readable marker for a branch that counts as a pass."""


def fail(message: str = DEFAULT_FAIL_MESSAGE) -> NoReturn:
    raise AssertionFailure(message)
