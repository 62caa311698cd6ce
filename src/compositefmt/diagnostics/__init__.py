"""Diagnostic system for composite format templates.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan, TemplateErrorKind
from .errors import ArgumentError, CompositeFormatError, TemplateSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult

__all__ = [
    "ArgumentError",
    "CompositeFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "SourceSpan",
    "TemplateErrorKind",
    "TemplateSyntaxError",
    "ValidationError",
    "ValidationResult",
]
