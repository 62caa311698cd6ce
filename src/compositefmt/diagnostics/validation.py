"""Validation result for composite format templates.

Immutable result objects returned by ``validate_template()``.

Python 3.13+.
"""

from dataclasses import dataclass

from compositefmt.constants import SANITIZE_MAX_CONTENT_LENGTH

__all__ = [
    "ValidationError",
    "ValidationResult",
]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured syntax error from template validation.

    Attributes:
        code: Error code (e.g., "missing-index", "unmatched-close-brace")
        message: Human-readable error message
        content: The template that failed validation
        line: Line number where the scan stopped (1-indexed, optional)
        column: Column number where the scan stopped (1-indexed, optional)

    Security Note:
        Templates may come from translators or end users. Use
        format(sanitize=True) to truncate or redact content before logging.
    """

    code: str
    message: str
    content: str
    line: int | None = None
    column: int | None = None

    def format(
        self,
        *,
        sanitize: bool = False,
        redact_content: bool = False,
    ) -> str:
        """Format error as human-readable string.

        Args:
            sanitize: If True, truncate content to
                SANITIZE_MAX_CONTENT_LENGTH characters.
            redact_content: If True (and sanitize=True), completely redact
                content instead of truncating.

        Returns:
            Formatted error string with optional content sanitization.

        Examples:
            >>> error = ValidationError("missing-index", "Expected index", "a { b", 1, 3)
            >>> error.format()
            "[missing-index] at line 1, column 3: Expected index (content: 'a { b')"
        """
        if sanitize:
            if redact_content:
                content_display = "[content redacted]"
            elif len(self.content) > SANITIZE_MAX_CONTENT_LENGTH:
                content_display = self.content[:SANITIZE_MAX_CONTENT_LENGTH] + "..."
            else:
                content_display = self.content
        else:
            content_display = self.content

        location = ""
        if self.line is not None:
            location = f" at line {self.line}"
            if self.column is not None:
                location += f", column {self.column}"

        return f"[{self.code}]{location}: {self.message} (content: {content_display!r})"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable validation result for a single template.

    Attributes:
        errors: Structural validation errors (at most one per template,
            since scanning stops at the first malformation)

    Example:
        >>> ValidationResult.valid().is_valid
        True
        >>> result = ValidationResult.invalid(
        ...     errors=(ValidationError("missing-index", "Expected index", "{a}", 1, 2),)
        ... )
        >>> result.error_count
        1
    """

    errors: tuple[ValidationError, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were found."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of errors."""
        return len(self.errors)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors."""
        return ValidationResult(errors=())

    @staticmethod
    def invalid(errors: tuple[ValidationError, ...]) -> "ValidationResult":
        """Create an invalid result from one or more errors.

        Raises:
            ValueError: If errors is empty
        """
        if not errors:
            msg = "ValidationResult.invalid() requires at least one error"
            raise ValueError(msg)
        return ValidationResult(errors=errors)

    def format(self, *, sanitize: bool = False, redact_content: bool = False) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate template content in error output.
            redact_content: If True (and sanitize=True), completely redact
                template content.

        Returns:
            Formatted string listing errors, or a pass message.
        """
        if not self.errors:
            return "Validation passed: no errors"

        lines = [f"Errors ({len(self.errors)}):"]
        for error in self.errors:
            lines.append(f"  {error.format(sanitize=sanitize, redact_content=redact_content)}")
        return "\n".join(lines)
