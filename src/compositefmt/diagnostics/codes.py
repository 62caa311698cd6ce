"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
    "TemplateErrorKind",
]


class TemplateErrorKind(StrEnum):
    """Kind of structural malformation found in a composite format template.

    Inherits from ``StrEnum`` so that ``str(kind)`` yields the plain code
    (``"missing-index"``) used in ``ValidationError.code`` and log output.

    Kinds:
        UNMATCHED_CLOSE_BRACE: Lone ``}`` outside any placeholder
        MISSING_INDEX: ``{`` not followed by a digit
        UNTERMINATED_PLACEHOLDER: Input ends inside a placeholder
        INVALID_ALIGNMENT: Alignment clause without digits
        INVALID_PLACEHOLDER: Unexpected character where ``}`` was required
        UNESCAPED_OPEN_BRACE: Lone ``{`` inside a format specifier
    """

    UNMATCHED_CLOSE_BRACE = "unmatched-close-brace"
    MISSING_INDEX = "missing-index"
    UNTERMINATED_PLACEHOLDER = "unterminated-placeholder"
    INVALID_ALIGNMENT = "invalid-alignment"
    INVALID_PLACEHOLDER = "invalid-placeholder"
    UNESCAPED_OPEN_BRACE = "unescaped-open-brace"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (invalid input to the public API)
        3000-3999: Template syntax errors (placeholder grammar)
    """

    # Argument errors (1000-1999)
    TEMPLATE_NOT_STRING = 1001
    INVALID_CLAMP = 1002
    KEY_NOT_STRING = 1003

    # Template syntax errors (3000-3999)
    UNMATCHED_CLOSE_BRACE = 3001
    MISSING_INDEX = 3002
    UNTERMINATED_PLACEHOLDER = 3003
    INVALID_ALIGNMENT = 3004
    INVALID_PLACEHOLDER = 3005
    UNESCAPED_OPEN_BRACE = 3006


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Template location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough information for
    both humans and tools that surface template-authoring errors.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Template location (None for argument errors)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        argument_name: Argument that caused the error (argument errors)
        expected_type: Expected type for the argument (argument errors)
        received_type: Actual type received (argument errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MISSING_INDEX]: Expected an argument index after '{' at position 5
              --> line 1, column 6
              = help: Escape a literal opening brace as '{{'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
