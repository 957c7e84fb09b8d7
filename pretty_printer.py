"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders it back into lambda notation on a single line. The printer is
intentionally simple and intended for debugging, tests and the REPL driver.

Examples:
    PrettyPrinter.print_ast(node)
    PrettyPrinter.print_surface(node)   # e.g. "(\\x.x) y"
"""

from __future__ import annotations
from typing import List
from ast_nodes import *
from tokens import Token


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: List[Token], limit: int = 50) -> str:
        """Numbered token listing, truncated after `limit` entries."""
        lines = [f"Tokens ({len(tokens)}):"]
        for i, token in enumerate(tokens[:limit]):
            lines.append(f"  {i:3}: {token}")
        if len(tokens) > limit:
            lines.append(f"  ... and {len(tokens) - limit} more")
        return "\n".join(lines)

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case IdentifierNode(name=n):
                lines.append(f"{indent_str}{prefix}Identifier({n})")

            case FunctionDefinitionNode(parameter=param, body=body):
                lines.append(f"{indent_str}{prefix}FunctionDefinition")
                lines.append(PrettyPrinter.print_ast(param, indent + 2, "parameter: "))
                lines.append(PrettyPrinter.print_ast(body, indent + 2, "body: "))

            case FunctionApplicationNode(function=func, argument=arg):
                lines.append(f"{indent_str}{prefix}FunctionApplication")
                lines.append(PrettyPrinter.print_ast(func, indent + 2, "function: "))
                lines.append(PrettyPrinter.print_ast(arg, indent + 2, "argument: "))

            case ExpressionGroupNode(inner=inner):
                lines.append(f"{indent_str}{prefix}ExpressionGroup")
                lines.append(PrettyPrinter.print_ast(inner, indent + 2, "inner: "))

            case EmptyNode():
                lines.append(f"{indent_str}{prefix}Empty")

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return the node in lambda notation, e.g. `\\x.f x`.

        No parentheses are added beyond the ones recorded as groups, so the
        output re-parses to the same tree.
        """
        match node:
            case IdentifierNode(name=n):
                return n
            case FunctionDefinitionNode(parameter=param, body=body):
                return f"\\{PrettyPrinter.print_surface(param)}.{PrettyPrinter.print_surface(body)}"
            case FunctionApplicationNode(function=func, argument=arg):
                return f"{PrettyPrinter.print_surface(func)} {PrettyPrinter.print_surface(arg)}"
            case ExpressionGroupNode(inner=inner):
                return f"({PrettyPrinter.print_surface(inner)})"
            case EmptyNode():
                return "<empty>"
            case _:
                return str(node)
