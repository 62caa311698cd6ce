"""Tests for syntax.validator: validate_template and ensure_valid_template."""

from __future__ import annotations

import logging

import pytest

from compositefmt import (
    ArgumentError,
    TemplateSyntaxError,
    ensure_valid_template,
    validate_template,
)
from compositefmt.diagnostics import DiagnosticCode, TemplateErrorKind


class TestValidTemplates:
    def test_valid_template(self) -> None:
        validation = validate_template("Moved {0} to {1,-8:G}")

        assert validation.is_valid
        assert validation.prediction == (2, False)
        assert validation.result.errors == ()
        assert validation.diagnostic is None

    def test_empty_template(self) -> None:
        assert validate_template("").prediction == (0, False)


class TestMalformedTemplates:
    """Each malformation kind is reported with its stop position."""

    @pytest.mark.parametrize(
        ("template", "kind", "position"),
        [
            ("ab}c", TemplateErrorKind.UNMATCHED_CLOSE_BRACE, 2),
            ("text { more", TemplateErrorKind.MISSING_INDEX, 6),
            ("{", TemplateErrorKind.MISSING_INDEX, 1),
            ("{0", TemplateErrorKind.UNTERMINATED_PLACEHOLDER, 2),
            ("{0,5", TemplateErrorKind.UNTERMINATED_PLACEHOLDER, 4),
            ("{0:abc", TemplateErrorKind.UNTERMINATED_PLACEHOLDER, 6),
            ("{0,x}", TemplateErrorKind.INVALID_ALIGNMENT, 3),
            ("{0 x}", TemplateErrorKind.INVALID_PLACEHOLDER, 3),
            ("{0:a{b}", TemplateErrorKind.UNESCAPED_OPEN_BRACE, 4),
        ],
    )
    def test_kind_and_position(
        self, template: str, kind: TemplateErrorKind, position: int
    ) -> None:
        validation = validate_template(template)

        assert not validation.is_valid
        assert validation.prediction.would_fail is True
        (error,) = validation.result.errors
        assert error.code == str(kind)
        assert error.content == template
        assert validation.diagnostic is not None
        assert validation.diagnostic.code == DiagnosticCode[kind.name]
        assert validation.diagnostic.span is not None
        assert validation.diagnostic.span.start == position

    def test_line_and_column_on_later_line(self) -> None:
        validation = validate_template("first {0}\nsecond { x")
        (error,) = validation.result.errors

        assert error.line == 2
        assert error.column == 9

    def test_span_at_eof_is_empty(self) -> None:
        validation = validate_template("{0")

        assert validation.diagnostic is not None
        assert validation.diagnostic.span is not None
        assert validation.diagnostic.span.start == validation.diagnostic.span.end == 2

    def test_failure_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="compositefmt.syntax.validator"):
            validate_template("x}")

        assert "unmatched-close-brace" in caplog.text

    def test_none_template_raises(self) -> None:
        with pytest.raises(ArgumentError):
            validate_template(None)  # type: ignore[arg-type]


class TestEnsureValidTemplate:
    def test_returns_prediction(self) -> None:
        assert ensure_valid_template("{0}{3}") == (4, False)

    def test_raises_with_diagnostic(self) -> None:
        with pytest.raises(TemplateSyntaxError) as exc_info:
            ensure_valid_template("{0}}")

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.UNMATCHED_CLOSE_BRACE
        assert "error[UNMATCHED_CLOSE_BRACE]" in str(exc_info.value)
        assert "line 1, column 4" in str(exc_info.value)

    def test_clamp_is_forwarded(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            ensure_valid_template("{150}", clamp=10)
