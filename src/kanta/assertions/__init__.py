from .base import AssertionFailure, RequestShapeError, ValidationFailure
from .engine import assert_, execute, fail, pass_, verify

__all__ = [
    "AssertionFailure",
    "RequestShapeError",
    "ValidationFailure",
    "assert_",
    "execute",
    "fail",
    "pass_",
    "verify",
]
