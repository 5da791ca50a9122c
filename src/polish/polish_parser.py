"""
polish Language Parser

Builds an expression tree from the token stream of a `Lexer`, following the
prefix grammar

    Expr := Int
          | "+" Expr Expr
          | "(" Expr ")"

Parser Behavior
---------------
- Pulls tokens from the lexer on demand and buffers exactly one of them as the
  lookahead; the token stream is never materialized.
- Operands of `+` are parsed left first, then right, so the left subtree has
  consumed all of its tokens before the right one starts.
- Parentheses produce a `Parened` node rather than being dropped.
- No error recovery: the first error is raised and no partial tree is returned.

Entry Points
------------
- `parse_expr()`: Parse one expression; tokens after it are left unread.
- `parse()`: Parse one expression and require the input to end there.

Raises
------
UnexpectedEof
    The input ended where a token was required.
UnexpectedToken
    A token other than the required one was found.
NestingTooDeepError
    The input nests deeper than the recursion limit allows.
LexError
    Propagated from the lexer while pulling the next token.
"""

from __future__ import annotations

from polish import polish_ast as nodes
from polish.polish_errors import NestingTooDeepError, UnexpectedEof, UnexpectedToken
from polish.polish_lexer import Lexer
from polish.polish_token import Int, LeftParen, Plus, RightParen, Token


class Parser:
    """
    Recursive-descent parser with one token of lookahead.

    Attributes
    ----------
    lexer : Lexer
        The token source; read forward only.
    lookahead : Token | None
        The next unconsumed token, or None at end of input.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer: Lexer = lexer
        self.lookahead: Token | None = lexer.next_token()

    def advance(self) -> None:
        self.lookahead = self.lexer.next_token()

    def peek(self, expected: str) -> Token:
        """Returns the lookahead, raising UnexpectedEof if there is none."""
        if self.lookahead is None:
            raise UnexpectedEof(expected)
        return self.lookahead

    def consume(self, expected: Token) -> None:
        """
        Consumes the lookahead if it equals `expected`.

        Raises
        ------
        UnexpectedEof
            If the input is exhausted.
        UnexpectedToken
            If the lookahead is a different token.
        """
        token = self.peek(f"'{expected}'")
        if token != expected:
            raise UnexpectedToken(token, f"'{expected}'")
        self.advance()

    def parse_expr(self) -> nodes.Expr:
        """
        Parse a single expression starting at the lookahead.

        Returns
        -------
        Expr
            The root of the parsed expression tree.

        Raises
        ------
        NestingTooDeepError
            If the expression nests past the interpreter's recursion limit.
        """
        try:
            return self.parse_operand()
        except RecursionError as e:
            raise NestingTooDeepError() from e

    def parse_operand(self) -> nodes.Expr:
        token = self.peek("an expression")

        if isinstance(token, Plus):
            self.consume(Plus())
            left = self.parse_operand()
            right = self.parse_operand()
            return nodes.Plus(left, right)

        if isinstance(token, LeftParen):
            self.consume(LeftParen())
            inner = self.parse_operand()
            self.consume(RightParen())
            return nodes.Parened(inner)

        return nodes.Num(self.parse_int())

    def parse_int(self) -> int:
        token = self.peek("an integer")
        if not isinstance(token, Int):
            raise UnexpectedToken(token, "an integer")
        self.advance()
        return token.value

    def parse(self) -> nodes.Expr:
        """
        Parse one expression that must span the whole input.

        Raises
        ------
        UnexpectedToken
            If tokens remain after the expression.
        """
        expr = self.parse_expr()
        if self.lookahead is not None:
            raise UnexpectedToken(self.lookahead, "end of input")
        return expr


__all__ = ["Parser"]
