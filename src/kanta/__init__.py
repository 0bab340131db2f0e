from kanta.assertions.base import (
    CALLABLE_EXCEPTION_VALIDATOR_KEY,
    CALLABLE_SUBJECT_ARGS_KEY,
    CALLABLE_SUBJECT_IS_NOT_CALLABLE_ERROR,
    CALLABLE_SUBJECT_KEY,
    CALLABLE_SUBJECT_KWARGS_KEY,
    CALLABLE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR,
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
    RequestShapeError,
    ValidationFailure,
)
from kanta.assertions.engine import assert_, fail, pass_
from kanta.config import KantaSettings, configure, get_settings, load_settings
from kanta.util.properties import MISSING
from kanta.validators import (
    Validator,
    has_count_of,
    has_keys,
    has_kv_pair,
    has_property,
    has_values,
    is_,
    is_instance_of,
    is_object,
    is_traversable,
    is_type_of,
)

__version__ = "0.1.0"

__all__ = [
    "AssertionFailure",
    "CALLABLE_EXCEPTION_VALIDATOR_KEY",
    "CALLABLE_SUBJECT_ARGS_KEY",
    "CALLABLE_SUBJECT_IS_NOT_CALLABLE_ERROR",
    "CALLABLE_SUBJECT_KEY",
    "CALLABLE_SUBJECT_KWARGS_KEY",
    "CALLABLE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR",
    "FAILURE_REASON_KEY",
    "KantaSettings",
    "MISSING",
    "MISSING_CALLABLE_SUBJECT_VALIDATOR_ERROR",
    "MISSING_FAILURE_REASON_ERROR",
    "MISSING_VALUE_SUBJECT_VALIDATOR_ERROR",
    "MULTIPLE_SUBJECTS_SPECIFIED_ERROR",
    "NO_SUBJECT_SPECIFIED_ERROR",
    "RequestShapeError",
    "VALUE_SUBJECT_KEY",
    "VALUE_SUBJECT_VALIDATOR_CANNOT_BE_CALLED_ERROR",
    "VALUE_VALIDATOR_KEY",
    "ValidationFailure",
    "Validator",
    "assert_",
    "configure",
    "fail",
    "get_settings",
    "has_count_of",
    "has_keys",
    "has_kv_pair",
    "has_property",
    "has_values",
    "is_",
    "is_instance_of",
    "is_object",
    "is_traversable",
    "is_type_of",
    "load_settings",
    "pass_",
]
