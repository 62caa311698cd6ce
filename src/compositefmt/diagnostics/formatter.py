"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from compositefmt.constants import SANITIZE_MAX_CONTENT_LENGTH

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationError, ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Supports multiple output formats and
    sanitization options.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        MISSING_INDEX: Expected an argument index after '{' at position 5
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = SANITIZE_MAX_CONTENT_LENGTH

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Format a ValidationResult with its summary line and errors.

        Args:
            result: ValidationResult to format

        Returns:
            Formatted string with summary and details
        """
        if result.is_valid:
            return "Validation passed"

        parts = [f"Validation failed: {result.error_count} error(s)", "\nErrors:"]
        parts.extend(f"  {self._format_validation_error(e)}" for e in result.errors)
        return "\n".join(parts)

    def _format_validation_error(self, error: "ValidationError") -> str:
        message = self._escape_control(error.message)
        if error.line is not None and error.column is not None:
            return f"[{error.code}] at line {error.line}, column {error.column}: {message}"
        if error.line is not None:
            return f"[{error.code}] at line {error.line}: {message}"
        return f"[{error.code}]: {message}"

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[UNMATCHED_CLOSE_BRACE]: Unmatched '}' at position 3
              --> line 1, column 4
              = help: Escape a literal closing brace as '}}'
              = note: see https://learn.microsoft.com/...
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._escape_control(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span:
            parts.append(f"  --> line {diagnostic.span.line}, column {diagnostic.span.column}")

        if diagnostic.argument_name:
            parts.append(f"  = argument: {diagnostic.argument_name}")

        if diagnostic.expected_type:
            parts.append(f"  = expected: {diagnostic.expected_type}")

        if diagnostic.received_type:
            parts.append(f"  = received: {diagnostic.received_type}")

        if diagnostic.hint:
            hint = self._maybe_sanitize(diagnostic.hint)
            parts.append(f"  = help: {hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            UNMATCHED_CLOSE_BRACE: Unmatched '}' at position 3
        """
        message = self._maybe_sanitize(self._escape_control(diagnostic.message))
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "MISSING_INDEX", "code_value": 3002, "message": "...", "severity": "error"}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.argument_name:
            data["argument_name"] = diagnostic.argument_name

        if diagnostic.expected_type:
            data["expected_type"] = diagnostic.expected_type

        if diagnostic.received_type:
            data["received_type"] = diagnostic.received_type

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def _escape_control(text: str) -> str:
        """Escape control characters so one diagnostic stays one log record."""
        if text.isprintable():
            return text
        return "".join(c if c.isprintable() else repr(c)[1:-1] for c in text)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
