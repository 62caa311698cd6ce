"""compositefmt - composite format string analysis.

Predicts how a composite formatter treats a template such as
``"{0} of {1,5:N0}"`` without performing substitution: the minimum number
of positional arguments required, and whether the template is malformed.

Public API:
    predict_format_arguments - Required argument count and failure prediction
    required_argument_count - Required argument count only
    would_fail - Failure prediction only
    validate_template - Prediction plus located diagnostics
    ensure_valid_template - Prediction, raising TemplateSyntaxError if malformed
    TextFormatter, TemplateTextFormatter - Key-based text formatting
    StringKey, ForFormattedText - Typed text keys

Exceptions:
    CompositeFormatError - Base exception class
    ArgumentError - Invalid argument (e.g. a None template)
    TemplateSyntaxError - Malformed template (ensure_valid_template only)

Submodules:
    compositefmt.syntax - Cursor, scanner and validator
    compositefmt.diagnostics - Error types, diagnostic codes and formatting
    compositefmt.text - Keys, display strings and text formatters
"""

from .constants import MAX_NUMERIC_CLAMP
from .diagnostics import ArgumentError, CompositeFormatError, TemplateSyntaxError
from .syntax import (
    FormatArgumentPrediction,
    TemplateValidation,
    ensure_valid_template,
    predict_format_arguments,
    required_argument_count,
    validate_template,
    would_fail,
)
from .text import (
    ForFormattedText,
    StringKey,
    TemplateTextFormatter,
    TextFormatter,
    to_default_parameter_list_display_string,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("compositefmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "MAX_NUMERIC_CLAMP",
    "ArgumentError",
    "CompositeFormatError",
    "ForFormattedText",
    "FormatArgumentPrediction",
    "StringKey",
    "TemplateSyntaxError",
    "TemplateTextFormatter",
    "TemplateValidation",
    "TextFormatter",
    "__version__",
    "ensure_valid_template",
    "predict_format_arguments",
    "required_argument_count",
    "to_default_parameter_list_display_string",
    "validate_template",
    "would_fail",
]
