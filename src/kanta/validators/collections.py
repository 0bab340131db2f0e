from __future__ import annotations

from collections.abc import Iterable, Mapping, Sized
from dataclasses import dataclass
from typing import Any

from kanta.assertions.base import ValidationFailure
from kanta.util.diff import strictly_equal
from kanta.util.export import render

from .base import Validator
from .values import Is

_TEXT_TYPES = (str, bytes, bytearray)


def _is_traversable(subject: Any) -> bool:
    return isinstance(subject, Iterable) and not isinstance(subject, _TEXT_TYPES)


def _pairs(subject: Any) -> list[tuple[Any, Any]]:
    # same protocol dict() uses: keys() plus item access means a mapping
    if isinstance(subject, Mapping) or (
        callable(getattr(subject, "keys", None)) and hasattr(subject, "__getitem__")
    ):
        return [(key, subject[key]) for key in subject.keys()]
    return list(enumerate(subject))


def _missing_key(pairs: list[tuple[Any, Any]], keys: tuple[Any, ...]) -> ValidationFailure | None:
    present = [key for key, _ in pairs]
    for key in keys:
        if key not in present:
            return ValidationFailure(f"Key not found: {key}")
    return None


@dataclass(frozen=True)
class IsTraversable(Validator):
    def evaluate(self, subject: Any) -> ValidationFailure | None:
        if _is_traversable(subject):
            return None
        return ValidationFailure(f"Given entity was not traversable: {render(subject)}")


@dataclass(frozen=True)
class HasKeys(Validator):
    keys: tuple[Any, ...]

    def evaluate(self, subject: Any) -> ValidationFailure | None:
        failure = IsTraversable().evaluate(subject)
        if failure is not None:
            return failure
        return _missing_key(_pairs(subject), self.keys)


@dataclass(frozen=True)
class HasKVPair(Validator):
    key: Any
    value: Any

    def evaluate(self, subject: Any) -> ValidationFailure | None:
        failure = IsTraversable().evaluate(subject)
        if failure is not None:
            return failure
        pairs = _pairs(subject)
        failure = _missing_key(pairs, (self.key,))
        if failure is not None:
            return failure
        actual = next(value for key, value in pairs if key == self.key)
        failure = Is(self.value).evaluate(actual)
        if failure is None:
            return None
        return failure.rewrap("Key exists, but value was not as expected:\n")


@dataclass(frozen=True)
class HasValues(Validator):
    values: tuple[Any, ...]

    def evaluate(self, subject: Any) -> ValidationFailure | None:
        failure = IsTraversable().evaluate(subject)
        if failure is not None:
            return failure
        present = [value for _, value in _pairs(subject)]
        for expected in self.values:
            if not any(strictly_equal(expected, value) for value in present):
                return ValidationFailure(f"Expected value not found: {render(expected)}")
        return None


@dataclass(frozen=True)
class HasCountOf(Validator):
    n: int

    def evaluate(self, subject: Any) -> ValidationFailure | None:
        if isinstance(subject, Sized):
            count = len(subject)
        elif isinstance(subject, Iterable):
            count = sum(1 for _ in subject)
        else:
            return ValidationFailure(f"Given entity was not countable: {render(subject)}")
        if count == self.n:
            return None
        return ValidationFailure(f"Count was {count} instead of {self.n} as expected")


def is_traversable() -> IsTraversable:
    return IsTraversable()


def has_keys(*keys: Any) -> HasKeys:
    """Mapping keys, or positional indices for other iterables, must all be present."""
    return HasKeys(keys)


def has_kv_pair(key: Any, value: Any) -> HasKVPair:
    return HasKVPair(key, value)


def has_values(*values: Any) -> HasValues:
    """Each value must be strictly equal to some element (mapping values for mappings)."""
    return HasValues(values)


def has_count_of(n: int) -> HasCountOf:
    return HasCountOf(n)
