"""
Error taxonomy for the polish pipeline.

Classes:
    PolishError: Base class of every error raised by the pipeline.
    LexError: A character (or digit run) that cannot start a valid token.
    ParseError: Base class of grammar violations.
    UnexpectedEof: Input ended where a token was required.
    UnexpectedToken: A different token was found where one was required.
    NestingTooDeepError: Input nested past the recursion limit of the parser.
    EvalOverflowError: An addition left the 32-bit signed range under the
        "error" overflow policy.

Lexing and parsing errors also derive from the builtin `SyntaxError`, so callers
that already guard a toolchain call with `except SyntaxError` catch them.
"""

from polish.polish_token import Token


class PolishError(Exception):
    """Base class for all polish errors."""


class LexError(PolishError, SyntaxError):
    """Raised when the lexer meets input that does not begin any token.

    Attributes:
        lexeme (str): The offending character or digit run.
    """

    def __init__(self, message: str, lexeme: str) -> None:
        super().__init__(message)
        self.lexeme = lexeme


class ParseError(PolishError, SyntaxError):
    """Base class for parser failures.

    Attributes:
        expected (str): Description of what the parser required.
    """

    def __init__(self, message: str, expected: str) -> None:
        super().__init__(message)
        self.expected = expected


class UnexpectedEof(ParseError):
    def __init__(self, expected: str) -> None:
        super().__init__(f"Unexpected end of input, expected {expected}", expected)


class UnexpectedToken(ParseError):
    """Raised when the lookahead is not the token the grammar requires.

    Attributes:
        found (Token): The offending token.
        expected (str): Description of what the parser required.
    """

    def __init__(self, found: Token, expected: str) -> None:
        super().__init__(f"Unexpected token '{found}', expected {expected}", expected)
        self.found = found


class NestingTooDeepError(ParseError):
    """Raised when an expression is nested deeper than the parser can recurse."""

    def __init__(self) -> None:
        super().__init__("Expression nested too deeply", "a shallower expression")


class EvalOverflowError(PolishError, OverflowError):
    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Integer overflow evaluating {left} + {right}")
        self.left = left
        self.right = right


__all__ = [
    "EvalOverflowError",
    "LexError",
    "NestingTooDeepError",
    "ParseError",
    "PolishError",
    "UnexpectedEof",
    "UnexpectedToken",
]
