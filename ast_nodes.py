"""AST node definitions for untyped lambda-calculus expressions.

This module defines the expression dataclasses produced by the parser. The
`NodeType` enum identifies node kinds and is used by the pretty-printer, the
JSON dump and the Graphviz renderer.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which carries optional
    source `line`/`column` information. Positions are keyword-only and are
    excluded from equality so trees can be compared structurally.
- `type` is a class-level constant, so node fields can be passed
    positionally: `FunctionApplicationNode(IdentifierNode("f"), IdentifierNode("x"))`.
- Each composite node owns its children; trees never share subtrees.
- `EmptyNode` is the parser's "nothing parsed yet" accumulator. It never
    appears in a tree returned by `Parser.parse_all()`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar


class NodeType(Enum):
    IDENTIFIER = auto()
    FUNC_DEF = auto()
    FUNC_APP = auto()
    EXPR_GROUP = auto()
    EMPTY = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: ClassVar[NodeType]
    line: int = field(default=0, compare=False, kw_only=True)
    column: int = field(default=0, compare=False, kw_only=True)


@dataclass
class EmptyNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.EMPTY


@dataclass
class IdentifierNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.IDENTIFIER
    name: str = ""


@dataclass
class FunctionDefinitionNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.FUNC_DEF
    parameter: IdentifierNode = field(default_factory=lambda: IdentifierNode())
    body: ASTNode = field(default_factory=lambda: EmptyNode())


@dataclass
class FunctionApplicationNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.FUNC_APP
    function: ASTNode = field(default_factory=lambda: EmptyNode())
    argument: ASTNode = field(default_factory=lambda: EmptyNode())


@dataclass
class ExpressionGroupNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.EXPR_GROUP
    inner: ASTNode = field(default_factory=lambda: EmptyNode())
