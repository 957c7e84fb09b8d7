"""Tests for the tree and surface renderings of expressions."""

import pytest

from tests.utils import lex, parse_one
from ast_nodes import *
from pretty_printer import PrettyPrinter


def test_print_ast_tree_shape():
    s = PrettyPrinter.print_ast(parse_one("\\x.a b"))
    assert s.splitlines() == [
        "FunctionApplication",
        "  function: FunctionDefinition",
        "    parameter: Identifier(x)",
        "    body: Identifier(a)",
        "  argument: Identifier(b)",
    ]


def test_print_ast_group_and_empty():
    s = PrettyPrinter.print_ast(ExpressionGroupNode(IdentifierNode("y")))
    assert s.splitlines() == ["ExpressionGroup", "  inner: Identifier(y)"]
    assert PrettyPrinter.print_ast(EmptyNode()) == "Empty"


@pytest.mark.parametrize(
    "src",
    ["x", "a b c", "\\x.a b", "\\x.(a b)", "a (b c)", "\\f.\\x.f (f x)", "(\\x.x) y"],
)
def test_print_surface_reparses_to_same_tree(src):
    node = parse_one(src)
    surface = PrettyPrinter.print_surface(node)
    assert parse_one(surface) == node


def test_print_surface_keeps_groups():
    assert PrettyPrinter.print_surface(parse_one("( a  b )")) == "(a b)"


def test_print_tokens_truncates_long_lists():
    tokens = lex(" ".join(["a"] * 60))
    s = PrettyPrinter.print_tokens(tokens, limit=5)
    lines = s.splitlines()
    assert lines[0] == "Tokens (61):"
    assert len(lines) == 7
    assert lines[-1] == "  ... and 56 more"
