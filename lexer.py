"""
Lexer for untyped lambda-calculus expressions.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input string into a list of `Token` objects defined in
    `tokens.py`.
- It recognizes identifiers (a letter followed by letters/digits), the four
    punctuation characters `\\`, `.`, `(` and `)`, newlines, and `#` comments
    running to the end of the line. Spaces, tabs and carriage returns are
    skipped and never produce a token.

Examples:
    Input:  "\\x.f x  # apply"
    Tokens: [PUNCTUATION('\\'), IDENTIFIER('x'), PUNCTUATION('.'),
             IDENTIFIER('f'), IDENTIFIER('x'), COMMENT(' apply'), EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- Dispatch is tried in a fixed order: punctuation, newline, identifier,
    whitespace, comment, end of input. Punctuation is always a single
    character, so `\\\\` yields two tokens.
- Any other character (digits, `$`, `+`, ...) raises `LexerError`.
"""

from __future__ import annotations
from typing import List, Optional
from tokens import PUNCTUATION_CHARS, Token, TokenType
from errors import LexerError


WHITESPACE_CHARS = (" ", "\t", "\r")


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char: Optional[str] = self.text[self.pos] if self.text else None

    def error(self) -> LexerError:
        return LexerError(self.current_char, self.line, self.column)

    def advance(self) -> None:
        """Advance to next character."""
        # Newlines reset the column and increment the line number.
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def punctuation(self) -> Token:
        token = Token(TokenType.PUNCTUATION, self.current_char, self.line, self.column)
        self.advance()
        return token

    def newline(self) -> Token:
        token = Token(TokenType.NEWLINE, None, self.line, self.column)
        self.advance()
        return token

    def identifier(self) -> Token:
        """Parse an identifier: a letter, then any run of letters and digits."""
        line, column = self.line, self.column
        result = [self.current_char]
        self.advance()

        while self.current_char is not None and self.current_char.isalnum():
            result.append(self.current_char)
            self.advance()

        return Token(TokenType.IDENTIFIER, "".join(result), line, column)

    def comment(self) -> Token:
        """Parse a `#` comment up to (not including) the newline."""
        line, column = self.line, self.column
        self.advance()  # Consume '#'

        result = []
        while self.current_char is not None and self.current_char != "\n":
            result.append(self.current_char)
            self.advance()

        return Token(TokenType.COMMENT, "".join(result), line, column)

    def lex_next(self) -> Token:
        """Return the next token, skipping any whitespace in front of it."""
        while self.current_char is not None and self.current_char in WHITESPACE_CHARS:
            self.advance()

        char = self.current_char
        if char is None:
            return Token(TokenType.EOF, None, self.line, self.column)

        if char in PUNCTUATION_CHARS:
            return self.punctuation()

        if char == "\n":
            return self.newline()

        if char.isalpha():
            return self.identifier()

        if char == "#":
            return self.comment()

        raise self.error()

    def lex_all(self) -> List[Token]:
        """Return all tokens from the input string, ending with exactly one EOF."""
        tokens = []
        while True:
            token = self.lex_next()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens

    tokenize = lex_all
