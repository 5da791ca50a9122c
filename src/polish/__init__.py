from polish.polish_ast import Expr
from polish.polish_errors import (
    EvalOverflowError,
    LexError,
    NestingTooDeepError,
    ParseError,
    PolishError,
    UnexpectedEof,
    UnexpectedToken,
)
from polish.polish_eval import calculate, evaluate
from polish.polish_lexer import Lexer, tokenize
from polish.polish_parser import Parser


def parse(source: str) -> Expr:
    """Parses `source` as one complete expression."""
    return Parser(Lexer(source)).parse()


__all__ = [
    "EvalOverflowError",
    "Expr",
    "LexError",
    "Lexer",
    "NestingTooDeepError",
    "ParseError",
    "Parser",
    "PolishError",
    "UnexpectedEof",
    "UnexpectedToken",
    "calculate",
    "evaluate",
    "parse",
    "tokenize",
]
