"""Graphviz visualization helpers for expression trees.

Provides `render_ast_dot(nodes)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: each top-level node gets its own cluster labelled with the line in
lambda notation. Identifiers are drawn as ellipses, composite nodes as boxes,
and edges are labelled with the child's role (`parameter`, `body`,
`function`, `argument`).
"""

from typing import List
from ast_nodes import *
from graphviz import Digraph, escape
from pretty_printer import PrettyPrinter


def _node_label(node: ASTNode) -> str:
    match node:
        case IdentifierNode(name=n):
            return n
        case FunctionDefinitionNode(parameter=param):
            return f"λ{param.name}"
        case FunctionApplicationNode():
            return "@"
        case ExpressionGroupNode():
            return "( )"
        case _:
            return str(node.type)


def _children(node: ASTNode) -> List[tuple]:
    match node:
        case FunctionDefinitionNode(parameter=param, body=body):
            return [("parameter", param), ("body", body)]
        case FunctionApplicationNode(function=func, argument=arg):
            return [("function", func), ("argument", arg)]
        case ExpressionGroupNode(inner=inner):
            return [("inner", inner)]
        case _:
            return []


def render_ast_dot(nodes: List[ASTNode]) -> Digraph:
    """Return a graphviz.Digraph for the given top-level nodes.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")

    counter = 0

    def add(graph: Digraph, node: ASTNode) -> str:
        nonlocal counter
        node_id = f"n{counter}"
        counter += 1

        shape = "ellipse" if isinstance(node, IdentifierNode) else "box"
        graph.node(node_id, label=escape(_node_label(node)), shape=shape)
        for role, child in _children(node):
            child_id = add(graph, child)
            graph.edge(node_id, child_id, label=role)
        return node_id

    for i, node in enumerate(nodes):
        with dot.subgraph(name=f"cluster_{i}") as c:
            c.attr(label=escape(PrettyPrinter.print_surface(node)), style="rounded")
            add(c, node)

    return dot


def write_and_render(nodes: List[ASTNode], out_path: str, fmt: str = "svg") -> None:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(nodes, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(nodes)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
