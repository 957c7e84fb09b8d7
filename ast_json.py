"""Convert AST nodes and tokens into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node, and `tokens_to_json`
for the token list. Both encode the node/token kind and its key fields.
"""

from typing import Any, Dict, List, Optional
from ast_nodes import *
from tokens import Token


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    match node:
        case IdentifierNode(name=name):
            return {"node_type": "Identifier", "name": name}
        case FunctionDefinitionNode(parameter=param, body=body):
            return {
                "node_type": "FunctionDefinition",
                "parameter": ast_to_json(param),
                "body": ast_to_json(body),
            }
        case FunctionApplicationNode(function=func, argument=arg):
            return {
                "node_type": "FunctionApplication",
                "function": ast_to_json(func),
                "argument": ast_to_json(arg),
            }
        case ExpressionGroupNode(inner=inner):
            return {"node_type": "ExpressionGroup", "inner": ast_to_json(inner)}
        case EmptyNode():
            return {"node_type": "Empty"}

    raise TypeError(f"Cannot serialize {type(node).__name__}")


def tokens_to_json(tokens: List[Token]) -> List[Dict[str, Any]]:
    return [
        {
            "type": token.type.name,
            "value": token.value,
            "line": token.line,
            "column": token.column,
        }
        for token in tokens
    ]
