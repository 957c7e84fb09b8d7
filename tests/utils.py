from lexer import Lexer
from parser import Parser


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse a source text into a list of AST nodes."""
    return Parser(Lexer(text).tokenize()).parse_all()


def parse_one(text: str):
    """Lex+parse a source text that holds exactly one expression."""
    nodes = parse_text(text)
    assert len(nodes) == 1
    return nodes[0]
