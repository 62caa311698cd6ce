"""Immutable cursor infrastructure for template scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only for diagnostics)

Line Ending Support:
    ``\\n`` is the line delimiter. CRLF templates work because the ``\\n``
    is still present; CR-only templates report every position on line 1.
"""

from dataclasses import dataclass

__all__ = ["Cursor", "is_ascii_digit"]


def is_ascii_digit(char: str) -> bool:
    """Check for an ASCII decimal digit.

    Unlike ``str.isdigit()``, rejects other Unicode digits such as
    ``'٣'`` (ARABIC-INDIC DIGIT THREE), which composite formatters do not
    accept as placeholder indices.

    Example:
        >>> is_ascii_digit("7")
        True
        >>> is_ascii_digit("٣")
        False
    """
    return "0" <= char <= "9"


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable template position tracker.

    Example:
        >>> cursor = Cursor("{0}", 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        '0'
        >>> cursor.current  # Original unchanged (immutability)
        '{'
        >>> Cursor("{0}", 3).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length.

        Use in while loops: ``while not cursor.is_eof:``
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF

        Example:
            >>> Cursor("}}", 0).peek(1)
            '}'
            >>> Cursor("}", 0).peek(1) is None
            True
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions, clamped to EOF.

        Example:
            >>> cursor = Cursor("abc", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(10).pos
            3
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def skip_spaces(self) -> "Cursor":
        """Skip space characters (U+0020 only).

        Tabs and newlines are not skipped; inside a placeholder they are
        structural errors.

        Example:
            >>> Cursor("0   ,", 1).skip_spaces().current
            ','
        """
        c = self
        while not c.is_eof and c.current == " ":
            c = c.advance()
        return c

    def is_at(self, char: str) -> bool:
        """True if not at EOF and the current character equals ``char``."""
        return not self.is_eof and self.source[self.pos] == char

    def is_at_digit(self) -> bool:
        """True if not at EOF and the current character is an ASCII digit."""
        return not self.is_eof and is_ascii_digit(self.source[self.pos])

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("a\\n{b}", 3).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)
