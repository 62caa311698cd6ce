"""Composite format template syntax package.

Provides the immutable scan cursor, the argument-count scanner, and
diagnostic-bearing template validation.

Python 3.13+.
"""

from .cursor import Cursor
from .scanner import (
    FormatArgumentPrediction,
    predict_format_arguments,
    required_argument_count,
    would_fail,
)
from .validator import TemplateValidation, ensure_valid_template, validate_template

__all__ = [
    "Cursor",
    "FormatArgumentPrediction",
    "TemplateValidation",
    "ensure_valid_template",
    "predict_format_arguments",
    "required_argument_count",
    "validate_template",
    "would_fail",
]
