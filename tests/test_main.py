"""End-to-end tests for the driver entry points."""

import json

from main import parse, process_program, tokenize
from ast_nodes import *
from tokens import TokenType


def test_tokenize_and_parse_entry_points():
    tokens = tokenize("a b\n")
    assert tokens[-1].type == TokenType.EOF
    assert parse(tokens) == [
        FunctionApplicationNode(IdentifierNode("a"), IdentifierNode("b"))
    ]


def test_process_program_prints_tokens_and_ast(capsys):
    ok = process_program("\\x.x", print_tokens=True, surface=True)
    out = capsys.readouterr().out
    assert ok is True
    assert "Tokens (5):" in out
    assert "AST:" in out
    assert "\\x.x" in out


def test_process_program_reports_syntax_errors(capsys):
    assert process_program("(a b") is False
    assert "Syntax Error: Expected ')'" in capsys.readouterr().out

    assert process_program("a 42") is False
    assert "Unexpected character '4'" in capsys.readouterr().out


def test_process_program_dumps_json(tmp_path, capsys):
    out_path = tmp_path / "out.json"
    ok = process_program("a\nb", print_ast=False, dump_json_path=str(out_path))
    assert ok is True
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert [n["name"] for n in data["ast"]] == ["a", "b"]
    assert data["tokens"][-1]["type"] == "EOF"


def test_interactive_mode_reports_and_continues(monkeypatch, capsys):
    from main import interactive_mode

    lines = iter(["\\x", "", "a b", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    interactive_mode(print_tokens=False, surface=True)
    out = capsys.readouterr().out
    assert "Syntax Error: Expected '.'" in out
    assert "a b" in out
    assert "Goodbye!" in out


def test_process_program_reports_deep_nesting(capsys):
    src = "(" * 500 + "x" + ")" * 500
    assert process_program(src) is False
    assert "Syntax Error: expression nested too deeply" in capsys.readouterr().out


def test_process_program_accepts_moderate_nesting(capsys):
    src = "(" * 20 + "x" + ")" * 20
    assert process_program(src, surface=True) is True
    assert src in capsys.readouterr().out
