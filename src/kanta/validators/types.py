from __future__ import annotations

import collections.abc
import numbers
from dataclasses import dataclass
from typing import Any

from kanta.assertions.base import ValidationFailure
from kanta.util.export import CONTAINER_TYPES, is_scalar, render

from .base import Validator

# searched for an abstract type when a name matches nothing in the subject's MRO
_INTERFACE_NAMESPACES = (collections.abc, numbers)


def _class_names(cls: type) -> set[str]:
    return {cls.__name__, cls.__qualname__, f"{cls.__module__}.{cls.__qualname__}"}


def _display_name(expected: type | str) -> str:
    if isinstance(expected, type):
        return expected.__name__
    return expected


def _resolve_interface(name: str) -> type | None:
    for namespace in _INTERFACE_NAMESPACES:
        candidate = getattr(namespace, name, None)
        if isinstance(candidate, type):
            return candidate
    return None


def _is_type_of(subject: Any, expected: type | str) -> bool:
    if isinstance(expected, type):
        return isinstance(subject, expected)
    if any(expected in _class_names(cls) for cls in type(subject).__mro__):
        return True
    interface = _resolve_interface(expected)
    return interface is not None and isinstance(subject, interface)


@dataclass(frozen=True)
class IsObject(Validator):
    def evaluate(self, subject: Any) -> ValidationFailure | None:
        if not is_scalar(subject) and not isinstance(subject, CONTAINER_TYPES):
            return None
        return ValidationFailure(f"Given entity was not an object: {render(subject)}")


@dataclass(frozen=True)
class IsInstanceOf(Validator):
    expected: type | str

    def evaluate(self, subject: Any) -> ValidationFailure | None:
        failure = IsObject().evaluate(subject)
        if failure is not None:
            return failure
        subject_type = type(subject)
        if isinstance(self.expected, type):
            matched = subject_type is self.expected
        else:
            matched = self.expected in _class_names(subject_type)
        if matched:
            return None
        return ValidationFailure(
            f"Given object was an instance of {subject_type.__name__} "
            f"instead of {_display_name(self.expected)} as expected"
        )


@dataclass(frozen=True)
class IsTypeOf(Validator):
    expected: type | str

    def evaluate(self, subject: Any) -> ValidationFailure | None:
        failure = IsObject().evaluate(subject)
        if failure is not None:
            return failure
        if _is_type_of(subject, self.expected):
            return None
        return ValidationFailure(
            f"Given object was instance of {type(subject).__name__}, "
            f"which is not a type of {_display_name(self.expected)}"
        )


def is_object() -> IsObject:
    """Passes for anything that is not None, a scalar or a builtin container."""
    return IsObject()


def is_instance_of(expected: type | str) -> IsInstanceOf:
    """Exact runtime type match; subclasses do not pass.

    ``expected`` is a class or a class name (bare, qualified or dotted with the
    module).
    """
    return IsInstanceOf(expected)


def is_type_of(expected: type | str) -> IsTypeOf:
    """The subject is an instance of ``expected`` or of one of its subclasses.

    A class goes straight to ``isinstance``, so abstract base classes and
    runtime-checkable protocols match structurally. A name is first looked up
    in the subject's MRO, then in ``collections.abc`` and ``numbers``, so
    ``"Iterable"`` or ``"Sized"`` match any object implementing the protocol.
    """
    return IsTypeOf(expected)
