"""Character cursor over source text used by the lexer."""

from __future__ import annotations

EOF_CHAR = "\0"


class Cursor:
    """A forward-only cursor over a source string.

    Reading past the end yields ``EOF_CHAR`` instead of raising.
    """

    __slots__ = ("source_view", "pos", "prev")

    def __init__(self, source_view: str = "") -> None:
        self.source_view = source_view
        self.pos = 0
        self.prev = EOF_CHAR

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, size={len(self.source_view)})"

    def len_remaining(self) -> int:
        """Number of characters not yet consumed."""
        return len(self.source_view) - min(self.pos, len(self.source_view))

    def remaining(self) -> str:
        """The unconsumed tail of the source."""
        return self.source_view[self.pos:]

    def slice(self, start: int, end: int) -> str:
        """Text between ``start`` and ``end``; empty for an invalid range."""
        size = len(self.source_view)
        if start >= size or start > end:
            return ""
        return self.source_view[start:start + min(end - start, size)]

    def previous(self) -> str:
        """The character most recently consumed by :meth:`bump`."""
        return self.prev

    def has_previous(self) -> bool:
        return self.prev != EOF_CHAR

    def _peek(self, distance: int) -> str:
        index = self.pos + distance
        return self.source_view[index] if index < len(self.source_view) else EOF_CHAR

    def first(self) -> str:
        return self._peek(0)

    def second(self) -> str:
        return self._peek(1)

    def third(self) -> str:
        return self._peek(2)

    def advance(self, n_char: int = 1) -> None:
        """Move forward ``n_char`` characters, stopping at the end."""
        self.pos = min(self.pos + n_char, len(self.source_view))

    def is_eof(self) -> bool:
        return self.pos >= len(self.source_view)

    def position(self) -> int:
        return self.pos

    def bump(self) -> str:
        """Consume and return the current character, or ``EOF_CHAR`` at the end."""
        if self.pos >= len(self.source_view):
            return EOF_CHAR
        character = self.source_view[self.pos]
        self.prev = character
        self.pos += 1
        return character