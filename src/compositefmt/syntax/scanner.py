"""Composite format template scanner.

Predicts how a composite formatter (``{0}``, ``{1,-10}``, ``{2:N2}``
placeholders) will treat a template without performing substitution:

- how many positional arguments it needs so that no placeholder indexes
  past the end of the argument list, and
- whether the template is malformed so that formatting fails regardless
  of the arguments supplied.

The control flow follows the composite formatter's own parsing loop
character for character, including the constructs it tolerates. Every
branch below is a compatibility contract, not a from-first-principles
grammar.

Grammar:
    template      := (literal-char | escaped-brace | placeholder)*
    escaped-brace := "{{" | "}}"
    placeholder   := "{" index [ "," alignment ] [ ":" format-spec ] "}"
    index         := digit+
    alignment     := "-"? digit+
    format-spec   := (any-char-except-unescaped-brace | escaped-brace)*

Thread Safety:
    Pure functions over a local immutable cursor. Safe to call concurrently.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import NamedTuple

from compositefmt.constants import MAX_NUMERIC_CLAMP
from compositefmt.diagnostics import ArgumentError, ErrorTemplate, TemplateErrorKind

from .cursor import Cursor

__all__ = [
    "FormatArgumentPrediction",
    "predict_format_arguments",
    "required_argument_count",
    "would_fail",
]

_ZERO = ord("0")


class FormatArgumentPrediction(NamedTuple):
    """Outcome of scanning a composite format template.

    A NamedTuple, so it unpacks and compares like ``(required_count, would_fail)``.

    Attributes:
        required_count: Minimum number of positional arguments needed to
            avoid an index-out-of-range failure
        would_fail: True if the template is malformed and formatting it
            would fail regardless of argument count
    """

    required_count: int
    would_fail: bool


@dataclass(frozen=True, slots=True)
class ScanOutcome:
    """Full scan result, including where and why the scan stopped.

    Attributes:
        required_count: Accumulated required argument count
        cursor: Cursor where scanning stopped (EOF on success)
        error: Malformation kind, or None if the template is well-formed
    """

    required_count: int
    cursor: Cursor
    error: TemplateErrorKind | None = None

    def to_prediction(self) -> FormatArgumentPrediction:
        """Drop positional detail, keeping the public result."""
        return FormatArgumentPrediction(self.required_count, self.error is not None)


def check_template_arguments(template: object, clamp: object) -> None:
    """Validate public API arguments.

    Raises:
        ArgumentError: If template is not a str, or clamp is not a positive int
    """
    if not isinstance(template, str):
        raise ArgumentError(ErrorTemplate.template_not_string(template))
    if not isinstance(clamp, int) or isinstance(clamp, bool) or clamp <= 0:
        raise ArgumentError(ErrorTemplate.invalid_clamp(clamp))


def _read_number(cursor: Cursor, clamp: int) -> tuple[int, Cursor]:
    """Accumulate decimal digits starting at a digit.

    Stops at the first non-digit, at EOF, or as soon as the value reaches
    ``clamp``. In the last case any remaining digits are left unconsumed.
    """
    value = 0
    while True:
        value = value * 10 + ord(cursor.current) - _ZERO
        cursor = cursor.advance()
        if value >= clamp or not cursor.is_at_digit():
            return value, cursor


def scan_template(template: str, clamp: int = MAX_NUMERIC_CLAMP) -> ScanOutcome:
    """Scan a template in a single left-to-right pass.

    Arguments are not validated here; public entry points call
    check_template_arguments() first.

    Args:
        template: Composite format template
        clamp: Upper bound for digit accumulation

    Returns:
        ScanOutcome with the required count and stop position
    """
    required_count = 0
    cursor = Cursor(template, 0)

    while True:
        # Literal text, with doubled braces as escapes
        while not cursor.is_eof:
            char = cursor.current
            if char == "}":
                if cursor.peek(1) != "}":
                    return ScanOutcome(
                        required_count, cursor, TemplateErrorKind.UNMATCHED_CLOSE_BRACE
                    )
                cursor = cursor.advance(2)
            elif char == "{":
                if cursor.peek(1) != "{":
                    break
                cursor = cursor.advance(2)
            else:
                cursor = cursor.advance()

        # Only exit point where the formatter would not fail
        if cursor.is_eof:
            return ScanOutcome(required_count, cursor)

        cursor = cursor.advance()
        if not cursor.is_at_digit():
            return ScanOutcome(required_count, cursor, TemplateErrorKind.MISSING_INDEX)

        index, cursor = _read_number(cursor, clamp)
        cursor = cursor.skip_spaces()

        if cursor.is_at(","):
            cursor = cursor.advance().skip_spaces()
            if cursor.is_at("-"):
                cursor = cursor.advance()
            if cursor.is_eof:
                return ScanOutcome(
                    required_count, cursor, TemplateErrorKind.UNTERMINATED_PLACEHOLDER
                )
            if not cursor.is_at_digit():
                return ScanOutcome(required_count, cursor, TemplateErrorKind.INVALID_ALIGNMENT)
            _, cursor = _read_number(cursor, clamp)
            # Running out of input inside the alignment digits stops the
            # scan before the index is counted.
            if cursor.is_eof:
                return ScanOutcome(
                    required_count, cursor, TemplateErrorKind.UNTERMINATED_PLACEHOLDER
                )
            cursor = cursor.skip_spaces()

        required_count = max(required_count, index + 1)

        if cursor.is_eof:
            return ScanOutcome(
                required_count, cursor, TemplateErrorKind.UNTERMINATED_PLACEHOLDER
            )

        if cursor.current == ":":
            cursor = cursor.advance()
            while True:
                if cursor.is_eof:
                    return ScanOutcome(
                        required_count, cursor, TemplateErrorKind.UNTERMINATED_PLACEHOLDER
                    )
                char = cursor.current
                if char == "{":
                    if cursor.peek(1) != "{":
                        return ScanOutcome(
                            required_count, cursor, TemplateErrorKind.UNESCAPED_OPEN_BRACE
                        )
                    cursor = cursor.advance(2)
                elif char == "}":
                    if cursor.peek(1) != "}":
                        break
                    cursor = cursor.advance(2)
                else:
                    cursor = cursor.advance()

        if cursor.current != "}":
            return ScanOutcome(required_count, cursor, TemplateErrorKind.INVALID_PLACEHOLDER)
        cursor = cursor.advance()


def predict_format_arguments(
    template: str, *, clamp: int = MAX_NUMERIC_CLAMP
) -> FormatArgumentPrediction:
    """Predict the argument count a composite formatter needs for a template.

    Args:
        template: Composite format template, e.g. ``"{0} of {1,5:N0}"``.
            May be empty; must not be None.
        clamp: Upper bound for digit accumulation in indices and alignment
            widths. Digits continuing past the bound make the placeholder
            malformed; the clamped value still counts towards the result.

    Returns:
        FormatArgumentPrediction(required_count, would_fail). required_count
        is one more than the largest index of any placeholder accepted
        before the scan stopped.

    Raises:
        ArgumentError: If template is not a str, or clamp is not a positive int

    Example:
        >>> predict_format_arguments("{0}{1}{2}{0}{5}")
        FormatArgumentPrediction(required_count=6, would_fail=False)
        >>> predict_format_arguments("text { more")
        FormatArgumentPrediction(required_count=0, would_fail=True)
        >>> predict_format_arguments("{{literal}}")
        FormatArgumentPrediction(required_count=0, would_fail=False)
    """
    check_template_arguments(template, clamp)
    return scan_template(template, clamp).to_prediction()


def required_argument_count(template: str, *, clamp: int = MAX_NUMERIC_CLAMP) -> int:
    """Return only the required argument count for a template.

    Raises:
        ArgumentError: If template is not a str, or clamp is not a positive int
    """
    return predict_format_arguments(template, clamp=clamp).required_count


def would_fail(template: str, *, clamp: int = MAX_NUMERIC_CLAMP) -> bool:
    """Return True if formatting the template would fail outright.

    Raises:
        ArgumentError: If template is not a str, or clamp is not a positive int
    """
    return predict_format_arguments(template, clamp=clamp).would_fail
