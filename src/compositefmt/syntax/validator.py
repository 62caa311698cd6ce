"""Template validation with located diagnostics.

Wraps the scanner so that a malformed template produces a Diagnostic and a
ValidationResult pointing at the line and column where scanning stopped,
for surfacing template-authoring errors to a human.

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from compositefmt.constants import MAX_NUMERIC_CLAMP
from compositefmt.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    SourceSpan,
    TemplateSyntaxError,
    ValidationError,
    ValidationResult,
)

from .scanner import (
    FormatArgumentPrediction,
    ScanOutcome,
    check_template_arguments,
    scan_template,
)

__all__ = ["TemplateValidation", "ensure_valid_template", "validate_template"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TemplateValidation:
    """Validation outcome for one template.

    Attributes:
        prediction: Same value predict_format_arguments() returns
        result: ValidationResult with at most one error
        diagnostic: Diagnostic for the malformation, or None if valid
    """

    prediction: FormatArgumentPrediction
    result: ValidationResult
    diagnostic: Diagnostic | None = None

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid


def _build_diagnostic(outcome: ScanOutcome) -> Diagnostic:
    assert outcome.error is not None  # noqa: S101 - caller checks
    cursor = outcome.cursor
    line, column = cursor.compute_line_col()
    end = cursor.pos if cursor.is_eof else cursor.pos + 1
    span = SourceSpan(start=cursor.pos, end=end, line=line, column=column)
    return ErrorTemplate.malformed_template(outcome.error, span)


def validate_template(
    template: str, *, clamp: int = MAX_NUMERIC_CLAMP
) -> TemplateValidation:
    """Validate a composite format template.

    Args:
        template: Composite format template; must not be None
        clamp: Upper bound for digit accumulation (see predict_format_arguments)

    Returns:
        TemplateValidation whose prediction equals
        predict_format_arguments(template, clamp=clamp)

    Raises:
        ArgumentError: If template is not a str, or clamp is not a positive int

    Example:
        >>> validation = validate_template("Hello {0")
        >>> validation.prediction
        FormatArgumentPrediction(required_count=1, would_fail=True)
        >>> validation.result.errors[0].code
        'unterminated-placeholder'
    """
    check_template_arguments(template, clamp)
    outcome = scan_template(template, clamp)
    prediction = outcome.to_prediction()

    if outcome.error is None:
        return TemplateValidation(prediction=prediction, result=ValidationResult.valid())

    diagnostic = _build_diagnostic(outcome)
    assert diagnostic.span is not None  # noqa: S101 - always set by _build_diagnostic
    error = ValidationError(
        code=str(outcome.error),
        message=diagnostic.message,
        content=template,
        line=diagnostic.span.line,
        column=diagnostic.span.column,
    )
    logger.debug(
        "Template malformed (%s) at line %d, column %d",
        outcome.error,
        diagnostic.span.line,
        diagnostic.span.column,
    )
    return TemplateValidation(
        prediction=prediction,
        result=ValidationResult.invalid(errors=(error,)),
        diagnostic=diagnostic,
    )


def ensure_valid_template(
    template: str, *, clamp: int = MAX_NUMERIC_CLAMP
) -> FormatArgumentPrediction:
    """Validate a template, raising on malformation.

    Returns:
        The prediction; its would_fail is always False

    Raises:
        ArgumentError: If template is not a str, or clamp is not a positive int
        TemplateSyntaxError: If the template is malformed
    """
    validation = validate_template(template, clamp=clamp)
    if validation.diagnostic is not None:
        raise TemplateSyntaxError(validation.diagnostic)
    return validation.prediction
