"""Error types raised by the lexer and parser.

Both errors derive from `SyntaxError` so a driver can handle every front-end
failure with a single `except SyntaxError`.

- `ParserError` is a flat record of the token the parser expected and the
  token it actually found (`None` when the token stream ran out).
- `LexerError` reports a character outside the recognized character classes.
"""

from __future__ import annotations
from typing import Optional
from tokens import Token


class ParserError(SyntaxError):
    def __init__(self, expected: Token, found: Optional[Token] = None):
        self.expected = expected
        self.found = found
        super().__init__(self._format())

    def _format(self) -> str:
        if self.found is None:
            return f"Expected {self.expected.describe()}, found end of input"

        msg = f"Expected {self.expected.describe()}, found {self.found.describe()}"
        if self.found.line:
            msg += f" at line {self.found.line}, column {self.found.column}"
        return msg

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParserError):
            return NotImplemented
        return self.expected == other.expected and self.found == other.found

    def __hash__(self) -> int:
        return hash((self.expected.type, self.expected.value))

    def __repr__(self) -> str:
        return f"ParserError(expected={self.expected!r}, found={self.found!r})"


class LexerError(SyntaxError):
    def __init__(self, character: str, line: int, column: int):
        self.character = character
        self.line = line
        self.column = column
        super().__init__(
            f"Lexical error at line {line}, column {column}: "
            f"Unexpected character {character!r}"
        )
