from __future__ import annotations
from typing import List, Optional
import json
import logging
import sys

from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json, tokens_to_json
from ast_viz import write_and_render

logger = logging.getLogger(__name__)


def tokenize(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()


def parse(tokens: List[Token]) -> List[ASTNode]:
    """Parse tokens into one expression tree per line."""
    return Parser(tokens).parse_all()


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    surface: bool = False,
    dump_json_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process one chunk of input: lex, parse and print the requested stages.

    Returns False if the input had a lexical or syntax error, or was nested
    too deeply to parse.
    """
    try:
        tokens = tokenize(text)
        logger.debug("lexed %d tokens", len(tokens))
        if print_tokens:
            print(PrettyPrinter.print_tokens(tokens))

        nodes = parse(tokens)
        logger.debug("parsed %d top-level nodes", len(nodes))
        if print_ast:
            print("\nAST:")
            for node in nodes:
                if surface:
                    print(PrettyPrinter.print_surface(node))
                else:
                    print(PrettyPrinter.print_ast(node))

        if dump_json_path:
            export = {
                "tokens": tokens_to_json(tokens),
                "ast": [ast_to_json(node) for node in nodes],
            }
            try:
                with open(dump_json_path, "w", encoding="utf-8") as fh:
                    json.dump(export, fh, indent=2, ensure_ascii=False)
                print(f"Wrote tokens+AST JSON to {dump_json_path}")
            except OSError as e:
                print(f"Failed to write JSON to {dump_json_path}: {e}")

        # Optionally render visualization via Graphviz
        if viz_path:
            try:
                write_and_render(nodes, viz_path, fmt=viz_format)
                print(f"Wrote AST visualization to {viz_path}.{viz_format}")
            except Exception as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}")

    except SyntaxError as e:
        print(f"Syntax Error: {e}")
        return False
    except RecursionError:
        # Each level of parentheses costs several parser frames
        print("Syntax Error: expression nested too deeply")
        return False

    return True


def interactive_mode(
    print_tokens: bool = True,
    print_ast: bool = True,
    surface: bool = False,
) -> None:
    """Run the read-parse-print loop on stdin, one line at a time."""
    print("\nInteractive Lambda Parser (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("> ")
            if text.strip().lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text.strip():
                continue

            print(f"Raw input: {text.strip()}")
            process_program(
                text,
                print_tokens=print_tokens,
                print_ast=print_ast,
                surface=surface,
            )

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break
        except Exception as e:
            print(f"Unexpected error: {e}")
            import traceback

            traceback.print_exc()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Lex and parse lambda-calculus expressions from a file or interactively"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--surface",
        dest="surface",
        action="store_true",
        help="Print expressions in lambda notation instead of as a tree",
    )
    parser.set_defaults(print_tokens=False, print_ast=True, surface=False)
    parser.add_argument(
        "--dump-json", dest="dump_json", help="Path to write tokens+AST JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--debug", dest="debug", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.interactive:
        # The REPL echoes the token list for every line.
        interactive_mode(print_tokens=True, print_ast=args.print_ast, surface=args.surface)
    elif args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            sys.exit(1)

        ok = process_program(
            text,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            surface=args.surface,
            dump_json_path=args.dump_json,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
        )
        if not ok:
            sys.exit(1)
    else:
        parser.print_help()
