"""Tests for syntax.scanner: predict_format_arguments and its conveniences.

Each case pins one branch of the composite-format parsing loop. The
expected values are compatibility contracts with the downstream formatter,
including the malformed constructs it tolerates.
"""

from __future__ import annotations

import pytest

from compositefmt import (
    MAX_NUMERIC_CLAMP,
    ArgumentError,
    CompositeFormatError,
    FormatArgumentPrediction,
    predict_format_arguments,
    required_argument_count,
    would_fail,
)
from compositefmt.diagnostics import DiagnosticCode

# ============================================================================
# WELL-FORMED TEMPLATES
# ============================================================================


class TestWellFormedTemplates:
    """Templates a composite formatter accepts."""

    @pytest.mark.parametrize(
        ("template", "expected_count"),
        [
            ("", 0),
            ("plain text", 0),
            ("{0}", 1),
            ("{0}{1}{2}{0}{5}", 6),
            ("{{literal}}", 0),
            ("{0:N2}", 1),
            ("{0,-10}", 1),
            ("z{0}z", 1),
            ("z{10}z", 11),
            ("z{1}z{3,20}z", 4),
            ("z{1,-20}z{1,20}z{1:X2}z{1:{{X2,-1}{{ }}", 2),
            ("{007}", 8),
            ("{2   }", 3),
            ("{2 ,  -5  :x}", 3),
            ("{0:}", 1),
            ("{0:}}}", 1),
            ("{0:a}}b{{c}", 1),
            ("{{{0}}}", 1),
            ("}}{{", 0),
            ("line one\n{1}\nline three", 2),
        ],
    )
    def test_well_formed(self, template: str, expected_count: int) -> None:
        """Well-formed templates report the max index + 1 and no failure."""
        assert predict_format_arguments(template) == (expected_count, False)

    def test_count_is_max_index_not_placeholder_count(self) -> None:
        """Repeated low indices do not add to the count."""
        result = predict_format_arguments("{3}" + "{0}" * 20)

        assert result.required_count == 4

    def test_result_is_named_tuple(self) -> None:
        """Result unpacks as (required_count, would_fail)."""
        result = predict_format_arguments("{1}")
        required_count, failed = result

        assert isinstance(result, FormatArgumentPrediction)
        assert required_count == result.required_count == 2
        assert failed is result.would_fail is False


# ============================================================================
# MALFORMED TEMPLATES
# ============================================================================


class TestMalformedTemplates:
    """Templates a composite formatter rejects."""

    @pytest.mark.parametrize(
        ("template", "expected_count"),
        [
            ("text { more", 0),
            ("{", 0),
            ("{a}", 0),
            ("{-1}", 0),
            ("{5}{-1}", 6),
            ("{5}" + "{0}" * 11 + "{-1}", 6),
            ("{0}}", 1),
            ("}", 0),
            ("abc}def", 0),
            ("{0:}}", 1),
            ("{0:{}", 1),
            ("{0:abc", 1),
            ("{0 x}", 1),
            ("{0\t}", 1),
            ("{ 0}", 0),
            ("{٣}", 0),
        ],
    )
    def test_malformed(self, template: str, expected_count: int) -> None:
        """Malformed templates report the count accumulated before the stop."""
        assert predict_format_arguments(template) == (expected_count, True)

    def test_unterminated_index_still_counts(self) -> None:
        """Index digits running into end of input are counted."""
        assert predict_format_arguments("{0") == (1, True)

    def test_unterminated_index_after_placeholder(self) -> None:
        """Trailing unterminated index raises the count past earlier placeholders."""
        assert predict_format_arguments("{0}{1") == (2, True)

    def test_index_with_trailing_spaces_at_end(self) -> None:
        """Spaces after an index then end of input: counted, malformed."""
        assert predict_format_arguments("{4   ") == (5, True)

    @pytest.mark.parametrize("template", ["{0,", "{0, ", "{0,-", "{0,5", "{0 , 12"])
    def test_alignment_cut_short_is_not_counted(self, template: str) -> None:
        """End of input inside an alignment clause stops before counting."""
        assert predict_format_arguments(template) == (0, True)

    def test_alignment_then_spaces_at_end_is_counted(self) -> None:
        """End of input after alignment digits and spaces counts the index."""
        assert predict_format_arguments("{0,5 ") == (1, True)

    @pytest.mark.parametrize("template", ["{0,}", "{0,x}", "{0,-}", "{0,--1}", "{0,+1}"])
    def test_alignment_without_digits(self, template: str) -> None:
        """Alignment requires digits after the optional '-'."""
        assert predict_format_arguments(template) == (0, True)

    def test_scan_stops_at_first_malformation(self) -> None:
        """Placeholders after the first malformation are not counted."""
        assert predict_format_arguments("{1}}{9}") == (2, True)


# ============================================================================
# NUMERIC CLAMP
# ============================================================================


class TestNumericClamp:
    """Digit accumulation stops at the clamp."""

    def test_index_at_clamp_is_accepted(self) -> None:
        """The clamp value itself is a valid index."""
        assert predict_format_arguments("{1000000}") == (1_000_001, False)

    def test_index_below_clamp_is_exact(self) -> None:
        assert predict_format_arguments("{999999}") == (1_000_000, False)

    def test_digits_past_clamp_fail_with_clamped_count(self) -> None:
        """Digits continuing past the clamp fail; the clamped value counts."""
        assert predict_format_arguments("{10000000}") == (1_000_001, True)

    def test_huge_digit_run_is_bounded(self) -> None:
        """A very long index is rejected without unbounded accumulation."""
        result = predict_format_arguments("{" + "9" * 100_000 + "}")

        assert result.would_fail is True
        assert result.required_count == 9_999_999 + 1

    def test_alignment_past_clamp_fails(self) -> None:
        assert predict_format_arguments("{0,10000000}") == (1, True)

    def test_custom_clamp(self) -> None:
        """A smaller clamp rejects numbers that continue past it."""
        assert predict_format_arguments("{15}", clamp=10) == (16, False)
        assert predict_format_arguments("{150}", clamp=10) == (16, True)
        assert predict_format_arguments("{150}") == (151, False)

    def test_default_clamp_constant(self) -> None:
        assert MAX_NUMERIC_CLAMP == 1_000_000

    @pytest.mark.parametrize("clamp", [0, -1, 1.5, "10", None, True])
    def test_invalid_clamp_rejected(self, clamp: object) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            predict_format_arguments("{0}", clamp=clamp)  # type: ignore[arg-type]

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_CLAMP


# ============================================================================
# ARGUMENT CHECKS
# ============================================================================


class TestArgumentChecks:
    """The template must be present."""

    def test_none_template_raises(self) -> None:
        with pytest.raises(ArgumentError, match="Template must be a str"):
            predict_format_arguments(None)  # type: ignore[arg-type]

    def test_argument_error_is_type_error(self) -> None:
        """ArgumentError is catchable as TypeError and as the package base."""
        with pytest.raises(TypeError):
            predict_format_arguments(None)  # type: ignore[arg-type]
        with pytest.raises(CompositeFormatError):
            predict_format_arguments(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("template", [b"{0}", 42, ["{0}"]])
    def test_non_string_template_raises(self, template: object) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            predict_format_arguments(template)  # type: ignore[arg-type]

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.TEMPLATE_NOT_STRING
        assert diagnostic.received_type == type(template).__name__

    def test_conveniences_check_arguments(self) -> None:
        with pytest.raises(ArgumentError):
            required_argument_count(None)  # type: ignore[arg-type]
        with pytest.raises(ArgumentError):
            would_fail(None)  # type: ignore[arg-type]


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================


class TestConveniences:
    """required_argument_count() and would_fail() project the prediction."""

    @pytest.mark.parametrize("template", ["", "{0}", "{3}{", "x}", "{2,-4:N}"])
    def test_projections_match_prediction(self, template: str) -> None:
        prediction = predict_format_arguments(template)

        assert required_argument_count(template) == prediction.required_count
        assert would_fail(template) is prediction.would_fail

    def test_clamp_is_forwarded(self) -> None:
        assert would_fail("{150}", clamp=10) is True
        assert required_argument_count("{150}", clamp=10) == 16
