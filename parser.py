"""
Parser for untyped lambda-calculus expressions.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser over the
    token list produced by `Lexer.tokenize()`. Each input line is one
    top-level node.

Grammar:

    Node               := Expression Newline*
    Expression         := Element*
    Element            := FunctionDefinition | ExpressionGroup | Identifier
    FunctionDefinition := '\\' Identifier '.' Element
    ExpressionGroup    := '(' Expression ')'

Key points:
- Application is left-associative: elements are folded one at a time, so
    `a b c` parses as `(a b) c`.
- A lambda body is a single *Element*, not a full Expression: `\\x.a b`
    parses as `(\\x.a) b`. Parentheses restore full scope: `\\x.(a b)`.
- Groups are kept in the tree as `ExpressionGroupNode`.
- Composite rules (function definitions and groups) run every one of their
    steps before looking at the results, then raise the first failure in
    left-to-right order. A later step may therefore consume tokens even
    after an earlier one failed.
- Comment tokens have no place in the grammar and are dropped when the
    cursor is built.

Examples:
    - `\\f.\\x.f x` -> App(Def(f, Def(x, f)), x)
    - `(\\x.x) y`   -> App(Group(Def(x, x)), y)
"""

from __future__ import annotations
from typing import Callable, List, Optional, Sequence, Union
from tokens import Token, TokenType, identifier, punctuation
from ast_nodes import *
from errors import ParserError


LAMBDA = punctuation("\\")
DOT = punctuation(".")
LPAREN = punctuation("(")
RPAREN = punctuation(")")
NEWLINE = Token(TokenType.NEWLINE)


class TokenCursor:
    """Index-based cursor over a token list with resettable multi-token peeking.

    `peek(offset)` looks at a fixed distance from the cursor. `peek_next()`
    walks a separate peek position forward one token per call; `reset_peek()`
    moves that position back to the cursor. Neither consumes anything.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = [t for t in tokens if t.type != TokenType.COMMENT]
        self.pos = 0
        self.peek_pos = 0

    def peek(self, offset: int = 0) -> Optional[Token]:
        index = self.pos + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def peek_next(self) -> Optional[Token]:
        token = self.peek(self.peek_pos)
        self.peek_pos += 1
        return token

    def reset_peek(self) -> None:
        self.peek_pos = 0

    def next(self) -> Optional[Token]:
        """Consume and return the next token, or None when exhausted."""
        token = self.peek()
        if token is not None:
            self.pos += 1
        self.peek_pos = 0
        return token


class Parser:
    def __init__(self, tokens: Sequence[Token]):
        self.cursor = TokenCursor(tokens)

    def expect(self, expected: Token) -> Token:
        """Consume the next token and check it equals `expected`.

        The token is consumed even when it does not match.
        """
        token = self.cursor.next()
        if token is None:
            raise ParserError(expected, None)
        if token != expected:
            raise ParserError(expected, token)
        return token

    def parse_all(self) -> List[ASTNode]:
        """Parse every node until the token stream is exhausted.

        Blank lines parse to `EmptyNode` and are left out of the result.
        """
        nodes: List[ASTNode] = []
        self.cursor.reset_peek()
        while self.cursor.peek_next() is not None:
            self.cursor.reset_peek()
            node = self.parse()
            if not isinstance(node, EmptyNode):
                nodes.append(node)
        return nodes

    def parse(self) -> ASTNode:
        """Parse one node: an expression, then any newlines ending it."""
        node = self.parse_expression()

        consumed_newline = False
        while (token := self.cursor.peek()) is not None and token.type == TokenType.NEWLINE:
            self.cursor.next()
            consumed_newline = True

        token = self.cursor.peek()
        if token is not None and token.type == TokenType.EOF:
            self.cursor.next()
        elif token is not None and not consumed_newline:
            # Something the expression loop stopped on but cannot start a
            # new node, e.g. an unbalanced ')'.
            raise ParserError(NEWLINE, token)

        return node

    def parse_expression(self) -> ASTNode:
        """Fold elements left-associatively until `)`, newline or EOF."""
        result: ASTNode = EmptyNode()

        while True:
            token = self.cursor.peek()
            if token is None or token.type in (TokenType.NEWLINE, TokenType.EOF):
                break
            if token == RPAREN:
                break

            element = self.parse_element()
            if isinstance(result, EmptyNode):
                result = element
            else:
                result = FunctionApplicationNode(
                    result, element, line=result.line, column=result.column
                )

        return result

    def parse_element(self) -> ASTNode:
        """Dispatch on the next token to a function definition, group or identifier."""
        self.cursor.reset_peek()
        token = self.cursor.peek_next()
        self.cursor.reset_peek()

        match token:
            case Token(type=TokenType.PUNCTUATION, value="\\"):
                return self.parse_function_definition()
            case Token(type=TokenType.PUNCTUATION, value="("):
                return self.parse_expression_group()
            case Token(type=TokenType.IDENTIFIER):
                return self.parse_identifier()
            case _:
                raise ParserError(identifier(), token)

    def parse_identifier(self) -> IdentifierNode:
        token = self.cursor.next()
        if token is None or token.type != TokenType.IDENTIFIER:
            raise ParserError(identifier(), token)
        return IdentifierNode(token.value, line=token.line, column=token.column)

    def parse_function_definition(self) -> FunctionDefinitionNode:
        # '\' Identifier '.' Element
        results = [
            self._attempt(self.expect, LAMBDA),
            self._attempt(self.parse_identifier),
            self._attempt(self.expect, DOT),
            self._attempt(self.parse_element),
        ]
        self._raise_first_failure(results)

        lambda_token, parameter, _, body = results
        return FunctionDefinitionNode(
            parameter, body, line=lambda_token.line, column=lambda_token.column
        )

    def parse_expression_group(self) -> ExpressionGroupNode:
        # '(' Expression ')'
        results = [
            self._attempt(self.expect, LPAREN),
            self._attempt(self._parse_group_body),
            self._attempt(self.expect, RPAREN),
        ]
        self._raise_first_failure(results)

        lparen, inner, _ = results
        return ExpressionGroupNode(inner, line=lparen.line, column=lparen.column)

    def _parse_group_body(self) -> ASTNode:
        inner = self.parse_expression()
        if isinstance(inner, EmptyNode):
            # `()` would leave the Empty accumulator inside the tree
            raise ParserError(identifier(), self.cursor.peek())
        return inner

    @staticmethod
    def _attempt(
        parse_step: Callable[..., Union[ASTNode, Token]], *args: Token
    ) -> Union[ASTNode, Token, ParserError]:
        """Run one step of a composite rule, returning its failure instead of raising."""
        try:
            return parse_step(*args)
        except ParserError as e:
            return e

    @staticmethod
    def _raise_first_failure(results: List[Union[ASTNode, Token, ParserError]]) -> None:
        for result in results:
            if isinstance(result, ParserError):
                raise result
