"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small `Token` dataclass that holds a token type and an
optional lexeme/value. Tokens are the atomic units produced by the lexer and
consumed by the parser.

Source positions (`line`/`column`) are recorded for error messages but do
not take part in equality, so `Token(TokenType.PUNCTUATION, ".")` compares
equal to any `.` token regardless of where it was scanned.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


PUNCTUATION_CHARS = ("\\", ".", "(", ")")


class TokenType(Enum):
    IDENTIFIER = auto()

    # One of `\`, `.`, `(`, `)`; the character itself is the token value
    PUNCTUATION = auto()

    NEWLINE = auto()
    COMMENT = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class Token:
    type: TokenType
    value: Optional[str] = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        """Literal text span of the token (empty for NEWLINE and EOF)."""
        if self.value is None:
            return ""
        return self.value

    def describe(self) -> str:
        """Short human-readable name used in error messages."""
        match self.type:
            case TokenType.PUNCTUATION:
                return f"'{self.value}'"
            case TokenType.IDENTIFIER:
                return f"identifier '{self.value}'" if self.value else "identifier"
            case TokenType.COMMENT:
                return "comment"
            case TokenType.NEWLINE:
                return "newline"
            case TokenType.EOF:
                return "EOF"


def punctuation(char: str) -> Token:
    """Build a punctuation token, e.g. `punctuation(".")`."""
    if char not in PUNCTUATION_CHARS:
        raise ValueError(f"'{char}' is not a punctuation character")
    return Token(TokenType.PUNCTUATION, char)


def identifier(name: str = "") -> Token:
    return Token(TokenType.IDENTIFIER, name)
