"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from compositefmt.constants import DOCS_URL

from .codes import Diagnostic, DiagnosticCode, SourceSpan, TemplateErrorKind


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = DOCS_URL

    # ------------------------------------------------------------------
    # Argument errors
    # ------------------------------------------------------------------

    @staticmethod
    def template_not_string(value: object) -> Diagnostic:
        """Template argument is None or not a str.

        Args:
            value: The value received in place of a template

        Returns:
            Diagnostic for TEMPLATE_NOT_STRING
        """
        received = type(value).__name__
        msg = f"Template must be a str, got {received}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_NOT_STRING,
            message=msg,
            hint="Pass the composite format string itself; an empty string is allowed",
            argument_name="template",
            expected_type="str",
            received_type=received,
        )

    @staticmethod
    def invalid_clamp(value: object) -> Diagnostic:
        """Numeric clamp is not a positive int.

        Args:
            value: The clamp value received

        Returns:
            Diagnostic for INVALID_CLAMP
        """
        msg = f"Numeric clamp must be a positive int, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CLAMP,
            message=msg,
            hint="Omit clamp to use MAX_NUMERIC_CLAMP",
            argument_name="clamp",
            expected_type="int",
            received_type=type(value).__name__,
        )

    @staticmethod
    def key_not_string(value: object) -> Diagnostic:
        """String key constructed from None or a non-str.

        Args:
            value: The value received in place of a key

        Returns:
            Diagnostic for KEY_NOT_STRING
        """
        received = type(value).__name__
        msg = f"StringKey requires a str key, got {received}"
        return Diagnostic(
            code=DiagnosticCode.KEY_NOT_STRING,
            message=msg,
            argument_name="key",
            expected_type="str",
            received_type=received,
        )

    # ------------------------------------------------------------------
    # Template syntax errors
    # ------------------------------------------------------------------

    @staticmethod
    def malformed_template(kind: TemplateErrorKind, span: SourceSpan) -> Diagnostic:
        """Structural malformation in a composite format template.

        Args:
            kind: Which grammar rule was violated
            span: Location where the scan stopped

        Returns:
            Diagnostic whose code corresponds to ``kind``
        """
        message, hint = _MALFORMED_TEXT[kind]
        msg = f"{message} at position {span.start}"
        return Diagnostic(
            code=DiagnosticCode[kind.name],
            message=msg,
            span=span,
            hint=hint,
            help_url=ErrorTemplate._DOCS_BASE,
        )


# (message, hint) per malformation kind
_MALFORMED_TEXT: dict[TemplateErrorKind, tuple[str, str]] = {
    TemplateErrorKind.UNMATCHED_CLOSE_BRACE: (
        "Unmatched '}'",
        "Escape a literal closing brace as '}}'",
    ),
    TemplateErrorKind.MISSING_INDEX: (
        "Expected an argument index after '{'",
        "Escape a literal opening brace as '{{'",
    ),
    TemplateErrorKind.UNTERMINATED_PLACEHOLDER: (
        "Template ends inside a placeholder",
        "Close the placeholder with '}'",
    ),
    TemplateErrorKind.INVALID_ALIGNMENT: (
        "Expected alignment digits after ','",
        "Alignment is an optional '-' followed by digits, e.g. '{0,-10}'",
    ),
    TemplateErrorKind.INVALID_PLACEHOLDER: (
        "Expected '}' to close the placeholder",
        "A placeholder is '{index[,alignment][:format]}'",
    ),
    TemplateErrorKind.UNESCAPED_OPEN_BRACE: (
        "Unescaped '{' inside a format specifier",
        "Escape a literal opening brace as '{{'",
    ),
}
