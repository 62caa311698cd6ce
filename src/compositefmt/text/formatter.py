"""Text formatters keyed by StringKey.

TextFormatter is the abstract interface. TextFormatter.DEFAULT renders a
key and its parameters as ``{key(p0, p1)}`` so missing text stays visible.
TemplateTextFormatter looks up composite format templates and substitutes
parameters into them, falling back to the default rendering whenever the
scanner predicts formatting would fail.

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import ClassVar

from compositefmt.syntax import FormatArgumentPrediction, predict_format_arguments

from .display import to_default_parameter_list_display_string
from .keys import ForFormattedText, StringKey

__all__ = ["DefaultTextFormatter", "TemplateTextFormatter", "TextFormatter"]

logger = logging.getLogger(__name__)

# Matches escapes and placeholders of a template already accepted by the scanner.
_TOKEN_PATTERN = re.compile(
    r"\{\{|\}\}|\{(?P<index>\d+) *(?:, *(?P<alignment>-?\d+) *)?(?::(?:[^{}]|\{\{|\}\})*)?\}"
)


class TextFormatter(ABC):
    """Provides formatted text for a StringKey[ForFormattedText] and parameters."""

    DEFAULT: ClassVar["TextFormatter"]

    @abstractmethod
    def format(
        self, key: StringKey[ForFormattedText] | None, *parameters: str | None
    ) -> str:
        """Format text for a key.

        Args:
            key: Key identifying the text; None yields an empty string
            *parameters: Positional parameters of the text

        Returns:
            The formatted text
        """

    def format_iterable(
        self,
        key: StringKey[ForFormattedText] | None,
        parameters: Iterable[str | None] | None,
    ) -> str:
        """Format text for a key with parameters supplied as an iterable.

        A None iterable is treated as no parameters.
        """
        return self.format(key, *(parameters or ()))


class DefaultTextFormatter(TextFormatter):
    """Renders ``{key(p0, p1, ...)}``.

    Example:
        >>> TextFormatter.DEFAULT.format(StringKey("save"), "a.txt")
        '{save(a.txt)}'
        >>> TextFormatter.DEFAULT.format(StringKey("quit"))
        '{quit}'
    """

    def format(
        self, key: StringKey[ForFormattedText] | None, *parameters: str | None
    ) -> str:
        if key is None:
            return ""
        return "{" + key.key + to_default_parameter_list_display_string(parameters) + "}"


TextFormatter.DEFAULT = DefaultTextFormatter()


def _render(template: str, parameters: tuple[str | None, ...]) -> str:
    def substitute(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == "{{":
            return "{"
        if token == "}}":
            return "}"
        value = parameters[int(match.group("index"))] or ""
        alignment = match.group("alignment")
        if alignment is None:
            return value
        width = int(alignment)
        return value.rjust(width) if width > 0 else value.ljust(-width)

    return _TOKEN_PATTERN.sub(substitute, template)


class TemplateTextFormatter(TextFormatter):
    """Formats text from a mapping of keys to composite format templates.

    Templates are scanned once at construction. Formatting falls back to
    ``fallback`` (TextFormatter.DEFAULT unless given) when the key is
    unknown, the template is malformed, or fewer parameters are supplied
    than the template requires.

    Positional parameters replace ``{index}`` placeholders. A positive
    alignment right-aligns and a negative alignment left-aligns the value
    within the given width. Format specifiers are accepted but not applied,
    since all parameters are already text.

    Example:
        >>> formatter = TemplateTextFormatter({StringKey("saved"): "Saved {0} ({1,3}%)"})
        >>> formatter.format(StringKey("saved"), "a.txt", "7")
        'Saved a.txt (  7%)'
        >>> formatter.format(StringKey("saved"), "a.txt")
        '{saved(a.txt)}'
    """

    def __init__(
        self,
        templates: Mapping[StringKey[ForFormattedText], str],
        fallback: TextFormatter | None = None,
    ) -> None:
        self._fallback = fallback if fallback is not None else TextFormatter.DEFAULT
        self._templates: dict[
            StringKey[ForFormattedText], tuple[str, FormatArgumentPrediction]
        ] = {}
        for key, template in templates.items():
            prediction = predict_format_arguments(template)
            if prediction.would_fail:
                logger.warning("Template for key '%s' is malformed", key)
            self._templates[key] = (template, prediction)

    def required_argument_count(self, key: StringKey[ForFormattedText]) -> int | None:
        """Return the parameter count the key's template needs, or None if unknown."""
        entry = self._templates.get(key)
        return None if entry is None else entry[1].required_count

    def format(
        self, key: StringKey[ForFormattedText] | None, *parameters: str | None
    ) -> str:
        if key is None:
            return ""

        entry = self._templates.get(key)
        if entry is None:
            logger.debug("No template for key '%s'", key)
            return self._fallback.format(key, *parameters)

        template, prediction = entry
        if prediction.would_fail:
            return self._fallback.format(key, *parameters)
        if len(parameters) < prediction.required_count:
            logger.warning(
                "Template for key '%s' requires %d parameter(s), got %d",
                key,
                prediction.required_count,
                len(parameters),
            )
            return self._fallback.format(key, *parameters)

        return _render(template, parameters)
