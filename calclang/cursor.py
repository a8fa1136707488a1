"""Character cursor for expression scanning.

There is no token stream: the evaluator walks the expression one
character at a time through a :class:`Cursor`. The cursor holds the source,
the current position and the lookahead character. Spaces are only skipped
by :meth:`Cursor.eat`, i.e. when the parser is looking for a specific
character, so whitespace is tolerated before operators and brackets but
nowhere else.


File: cursor.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from calclang.exceptions import ExpressionSyntaxException


def is_word_char(ch: str | None) -> bool:
    """Return True for characters that may appear in a number or identifier."""
    return ch is not None and (ch == "_" or "0" <= ch <= "9" or (ch.isascii() and ch.isalpha()))


class Cursor:
    """
    Scan state for a single expression.
    """
    def __init__(self, source: str):
        """
        Initialize a cursor positioned on the first character.

        Parameters:
            source (str): The expression text.
        """
        self.source = source
        self.pos = -1
        self.ch: str | None = None
        self.advance()

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, ch={self.ch!r})"

    @property
    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self.ch is None

    def advance(self) -> None:
        """Move to the next character, or to the end-of-input sentinel."""
        self.pos += 1
        self.ch = self.source[self.pos] if self.pos < len(self.source) else None

    def skip_spaces(self) -> None:
        """Skip ASCII spaces. Tabs and other whitespace are not skipped."""
        while self.ch == " ":
            self.advance()

    def eat(self, expected: str) -> bool:
        """
        Consume ``expected`` if it is the next non-space character.

        Returns:
            bool: True if the character was consumed.
        """
        self.skip_spaces()
        if self.ch == expected:
            self.advance()
            return True
        return False

    def take_word(self) -> str:
        """Consume the maximal run of digits, letters and underscores."""
        start = self.pos
        while is_word_char(self.ch):
            self.advance()
        return self.source[start:self.pos]

    def error(self, message: str) -> ExpressionSyntaxException:
        """
        Build a syntax error describing the current character.
        """
        if self.ch is None:
            return ExpressionSyntaxException(f"{message}: end of input", position=self.pos)
        return ExpressionSyntaxException(f"{message}: '{self.ch}'", position=self.pos)
