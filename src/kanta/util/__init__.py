from .diff import Comparison, diff, strictly_equal, unified_diff
from .export import export, render, type_name
from .properties import MISSING, resolve

__all__ = [
    "Comparison",
    "MISSING",
    "diff",
    "export",
    "render",
    "resolve",
    "strictly_equal",
    "type_name",
    "unified_diff",
]
