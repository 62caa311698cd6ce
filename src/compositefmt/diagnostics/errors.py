"""Exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["ArgumentError", "CompositeFormatError", "TemplateSyntaxError"]


class CompositeFormatError(Exception):
    """Base exception for all compositefmt errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CompositeFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ArgumentError(CompositeFormatError, TypeError):
    """Invalid argument passed to the public API.

    Raised synchronously when a template is absent (``None``) or not a
    string, or when a numeric clamp is not a positive integer. Also a
    ``TypeError`` so callers that guard with ``except TypeError`` keep
    working.
    """


class TemplateSyntaxError(CompositeFormatError):
    """Composite format template is structurally malformed.

    Only raised by ``ensure_valid_template()``. The predictor reports
    malformation through its ``would_fail`` flag instead of raising.
    """
