"""Text utilities: typed keys, parameter display strings, text formatters.

Python 3.13+.
"""

from .display import to_default_parameter_list_display_string
from .formatter import DefaultTextFormatter, TemplateTextFormatter, TextFormatter
from .keys import ForFormattedText, StringKey

__all__ = [
    "DefaultTextFormatter",
    "ForFormattedText",
    "StringKey",
    "TemplateTextFormatter",
    "TextFormatter",
    "to_default_parameter_list_display_string",
]
