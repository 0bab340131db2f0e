from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from kanta.assertions.base import ValidationFailure
from kanta.config.loader import active_settings
from kanta.util.diff import Comparison, diff

from .base import Validator


@dataclass(frozen=True)
class Is(Validator):
    expected: Any

    def evaluate(self, subject: Any) -> ValidationFailure | None:
        text = diff(self.expected, subject, active_settings().diff_context_lines)
        if text is None:
            return None
        return ValidationFailure(text, data=Comparison(self.expected, subject, text))


def is_(expected: Any) -> Is:
    """Strict equality: same type, and equal element by element for lists, tuples and dicts."""
    return Is(expected)
