from .base import Validator, run_validator
from .collections import has_count_of, has_keys, has_kv_pair, has_values, is_traversable
from .properties import has_property
from .types import is_instance_of, is_object, is_type_of
from .values import is_

__all__ = [
    "Validator",
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
    "run_validator",
]
