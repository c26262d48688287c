"""
Cursor-based string scanner.

Provides the delimiter and token primitives used to walk SIP URL text
without building a parse tree.
"""

from __future__ import annotations

QUOTE = '"'
ESCAPE = "\\"


class Scanner:
    """
    Cursor over an immutable string.

    Positions are 0-based; a missing position is reported as -1, like
    ``str.find``. Movement methods return the scanner so calls can be chained.

    Examples:
        >>> s = Scanner("sip:alice@example.com;lr")
        >>> s.go_to(";").skip_char().get_word("=;")
        'lr'
    """

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self._text = text
        self._pos = 0
        self.pos = pos

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Scanner({self._text!r}, pos={self._pos})"

    @property
    def pos(self) -> int:
        """Current cursor position."""
        return self._pos

    @pos.setter
    def pos(self, value: int) -> None:
        self._pos = max(0, min(value, len(self._text)))

    def get_pos(self) -> int:
        return self._pos

    def set_pos(self, pos: int) -> Scanner:
        self.pos = pos
        return self

    def has_more(self) -> bool:
        """Return True while the cursor is before the end of the text."""
        return self._pos < len(self._text)

    def peek(self) -> str:
        """Return the character under the cursor, or '' at the end."""
        return self._text[self._pos : self._pos + 1]

    def remaining(self) -> str:
        return self._text[self._pos :]

    def index_of(self, chars: str) -> int:
        """
        Find the first character of ``chars`` at or after the cursor.

        Args:
            chars: One or more delimiter characters

        Returns:
            Position of the match, or -1. The cursor does not move.
        """
        for i in range(self._pos, len(self._text)):
            if self._text[i] in chars:
                return i
        return -1

    def go_to(self, chars: str) -> Scanner:
        """Move to the next character in ``chars``, or to the end."""
        index = self.index_of(chars)
        self._pos = len(self._text) if index < 0 else index
        return self

    def go_to_skipping_quoted(self, chars: str) -> Scanner:
        """
        Move to the next character in ``chars`` that is outside quotes.

        A ``"..."`` run is opaque; inside it a backslash escapes the next
        character. An unterminated quote swallows the rest of the text.
        """
        text = self._text
        i = self._pos
        quoted = False
        while i < len(text):
            c = text[i]
            if quoted:
                if c == ESCAPE:
                    i += 1
                elif c == QUOTE:
                    quoted = False
            elif c == QUOTE:
                quoted = True
            elif c in chars:
                break
            i += 1
        self._pos = min(i, len(text))
        return self

    def skip_char(self) -> Scanner:
        """Advance past one character."""
        if self._pos < len(self._text):
            self._pos += 1
        return self

    def get_word(self, separators: str) -> str:
        """
        Read a token up to the next separator.

        The cursor is left on the separator (or at the end). The token may be
        empty when the cursor already sits on a separator.
        """
        begin = self._pos
        self.go_to(separators)
        return self._text[begin : self._pos]


__all__ = ["Scanner"]
