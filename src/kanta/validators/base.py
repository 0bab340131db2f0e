from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from kanta.assertions.base import ValidationFailure


class Validator(ABC):
    """A check against a single subject.

    ``evaluate`` returns the failure instead of raising it so that catalog
    validators can compose without exception handling; calling the validator
    raises the failure, which is the contract plain-callable validators follow.
    """

    @abstractmethod
    def evaluate(self, subject: Any) -> ValidationFailure | None:
        ...

    def __call__(self, subject: Any) -> None:
        failure = self.evaluate(subject)
        if failure is not None:
            raise failure


def run_validator(validator: Callable[[Any], Any], subject: Any) -> ValidationFailure | None:
    if isinstance(validator, Validator):
        return validator.evaluate(subject)
    try:
        validator(subject)
    except ValidationFailure as failure:
        return failure
    return None
