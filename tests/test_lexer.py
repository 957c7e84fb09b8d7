import pytest

from main import tokenize
from errors import LexerError
from tokens import Token, TokenType, identifier, punctuation


def test_lexer_recognizes_punctuation_and_identifiers():
    tokens = tokenize("\\x.(f x)")
    assert tokens == [
        punctuation("\\"),
        identifier("x"),
        punctuation("."),
        punctuation("("),
        identifier("f"),
        identifier("x"),
        punctuation(")"),
        Token(TokenType.EOF),
    ]


def test_punctuation_runs_are_not_merged():
    tokens = tokenize("\\\\..")
    types = [t.type for t in tokens]
    assert types == [TokenType.PUNCTUATION] * 4 + [TokenType.EOF]
    assert [t.value for t in tokens[:4]] == ["\\", "\\", ".", "."]


def test_identifier_is_alpha_then_alphanumeric():
    tokens = tokenize("x1 abc2d")
    assert tokens[:2] == [identifier("x1"), identifier("abc2d")]


def test_whitespace_is_skipped():
    tokens = tokenize(" \t a \r b  ")
    assert tokens == [identifier("a"), identifier("b"), Token(TokenType.EOF)]


def test_newlines_are_emitted_individually():
    tokens = tokenize("a\n\nb")
    types = [t.type for t in tokens]
    assert types == [
        TokenType.IDENTIFIER,
        TokenType.NEWLINE,
        TokenType.NEWLINE,
        TokenType.IDENTIFIER,
        TokenType.EOF,
    ]


def test_comment_runs_to_end_of_line():
    tokens = tokenize("a # comment\nb")
    assert tokens == [
        identifier("a"),
        Token(TokenType.COMMENT, " comment"),
        Token(TokenType.NEWLINE),
        identifier("b"),
        Token(TokenType.EOF),
    ]


def test_comment_at_end_of_input():
    tokens = tokenize("#done")
    assert tokens == [Token(TokenType.COMMENT, "done"), Token(TokenType.EOF)]


@pytest.mark.parametrize("src", ["", "a", "\\x.x\n", "  (a b)  # c\n\n"])
def test_exactly_one_eof_at_end(src):
    tokens = tokenize(src)
    assert tokens[-1].type == TokenType.EOF
    assert sum(1 for t in tokens if t.type == TokenType.EOF) == 1


def test_lexemes_rebuild_input_without_whitespace():
    src = "\\f.(f  x)\tyz"
    tokens = tokenize(src)
    rebuilt = "".join(t.lexeme for t in tokens)
    assert rebuilt == "".join(src.split())


def test_lex_next_returns_one_token_per_call():
    from lexer import Lexer

    lexer = Lexer("a  b")
    assert lexer.lex_next() == identifier("a")
    assert lexer.lex_next() == identifier("b")
    assert lexer.lex_next().type == TokenType.EOF
    # EOF is sticky once the input is exhausted
    assert lexer.lex_next().type == TokenType.EOF


def test_tokens_record_line_and_column():
    tokens = tokenize("a\n  bc")
    assert (tokens[0].line, tokens[0].column) == (1, 1)
    assert (tokens[2].line, tokens[2].column) == (2, 3)


@pytest.mark.parametrize("src, char", [("a 1", "1"), ("x+y", "+"), ("$", "$")])
def test_unexpected_character_raises_lexer_error(src, char):
    with pytest.raises(LexerError) as excinfo:
        tokenize(src)
    assert excinfo.value.character == char


def test_lexer_error_is_a_syntax_error():
    with pytest.raises(SyntaxError, match="line 2, column 3"):
        tokenize("a\nb 9")
