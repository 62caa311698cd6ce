"""Typed string identifiers.

Python 3.13+. Zero external dependencies.
"""

from typing import Generic, TypeVar

from compositefmt.diagnostics import ArgumentError, ErrorTemplate

__all__ = ["ForFormattedText", "StringKey"]


class ForFormattedText:
    """Marker type for keys that name formatted text.

    Used only as the type parameter of StringKey, e.g.
    ``StringKey[ForFormattedText]("greeting")``.
    """


T = TypeVar("T")


class StringKey(Generic[T]):
    """Immutable identifier distinguished by a type parameter.

    Equality and hashing use the key string only; the type parameter exists
    for static checking and is erased at runtime.

    Example:
        >>> StringKey[ForFormattedText]("greeting") == StringKey("greeting")
        True
        >>> StringKey("greeting").key
        'greeting'
    """

    __slots__ = ("_key",)

    def __init__(self, key: str) -> None:
        """Create a key.

        Raises:
            ArgumentError: If key is None or not a str
        """
        if not isinstance(key, str):
            raise ArgumentError(ErrorTemplate.key_not_string(key))
        object.__setattr__(self, "_key", key)

    @property
    def key(self) -> str:
        return self._key

    def __setattr__(self, name: str, value: object) -> None:
        msg = "StringKey is immutable"
        raise AttributeError(msg)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringKey):
            return self._key == other._key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"StringKey({self._key!r})"

    def __str__(self) -> str:
        return self._key
