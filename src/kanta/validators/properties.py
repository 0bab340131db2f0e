from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from kanta.assertions.base import ValidationFailure
from kanta.util.properties import MISSING, resolve

from .base import Validator
from .types import IsObject
from .values import Is


@dataclass(frozen=True)
class HasProperty(Validator):
    name: str
    expected: Any = MISSING

    def evaluate(self, subject: Any) -> ValidationFailure | None:
        failure = IsObject().evaluate(subject)
        if failure is not None:
            return failure
        value = resolve(subject, self.name)
        if value is MISSING:
            return ValidationFailure(f"No property found with the given name: {self.name}")
        if self.expected is MISSING:
            return None
        failure = Is(self.expected).evaluate(value)
        if failure is None:
            return None
        return failure.rewrap(f"'{self.name}' property did not have expected value:\n")


def has_property(name: str, expected: Any = MISSING) -> HasProperty:
    """The subject exposes ``name``, and it equals ``expected`` when one is given.

    ``get_<name>()`` and ``get<Name>()`` accessors are consulted before the
    attribute itself. Passing ``expected=None`` checks that the value is None;
    leave it out to only check that the property exists.
    """
    return HasProperty(name, expected)
