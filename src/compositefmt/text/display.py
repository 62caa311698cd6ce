"""Display strings for parameter lists."""

from collections.abc import Iterable

__all__ = ["to_default_parameter_list_display_string"]


def to_default_parameter_list_display_string(
    parameters: Iterable[str | None] | None,
) -> str:
    """Render parameters as ``"(p0, p1, ...)"``.

    Args:
        parameters: Parameters to render; None elements render as empty text

    Returns:
        ``""`` if parameters is None or empty, otherwise the parenthesized,
        comma-separated list

    Example:
        >>> to_default_parameter_list_display_string(["x", "y", "z"])
        '(x, y, z)'
        >>> to_default_parameter_list_display_string([None])
        '()'
        >>> to_default_parameter_list_display_string([])
        ''
    """
    if parameters is None:
        return ""
    rendered = ["" if p is None else p for p in parameters]
    if not rendered:
        return ""
    return f"({', '.join(rendered)})"
