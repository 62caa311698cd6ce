"""Shared constants for compositefmt.

This module provides centralized configuration constants used across
the syntax, diagnostics and text packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Numeric limits: Bounds on digit accumulation while scanning templates
- Output limits: Truncation of template content in diagnostics

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Numeric limits
    "MAX_NUMERIC_CLAMP",
    # Output limits
    "SANITIZE_MAX_CONTENT_LENGTH",
    # Documentation
    "DOCS_URL",
]

# ============================================================================
# NUMERIC LIMITS
# ============================================================================
#
# Placeholder indices and alignment widths are accumulated digit by digit.
# Accumulation stops once the value reaches MAX_NUMERIC_CLAMP; any digit that
# follows is left unconsumed and the placeholder is then rejected as
# malformed. This mirrors the limit applied by the composite formatter whose
# behaviour the scanner predicts.
#
# The clamp is not a rejection threshold: "{999999}" and "{1000000}" are both
# accepted. Only runs of digits that continue past the clamp fail.
#
# Callers targeting a formatter with a different internal limit pass their
# own value through the ``clamp=`` keyword of the scanning functions.
#
# ============================================================================

MAX_NUMERIC_CLAMP: int = 1_000_000

# ============================================================================
# OUTPUT LIMITS
# ============================================================================

# Maximum template content length before truncation when sanitizing
# validation output.
SANITIZE_MAX_CONTENT_LENGTH: int = 100

# ============================================================================
# DOCUMENTATION
# ============================================================================

# Reference for the composite formatting grammar the scanner follows.
DOCS_URL: str = "https://learn.microsoft.com/dotnet/standard/base-types/composite-formatting"
