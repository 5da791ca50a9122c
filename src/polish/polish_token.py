"""
Token vocabulary for the polish expression language.

The set of tokens is closed: every token produced by the lexer is one of

    Int(value)   a non-negative integer literal
    Plus         the prefix addition operator `+`
    LeftParen    `(`
    RightParen   `)`

Tokens are immutable, compare by value and carry no source position.

Example:
    >>> Int(3) == Int(3)
    True
    >>> str(Plus())
    '+'
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Int:
    """An integer literal token.

    Attributes:
        value (int): The parsed, non-negative value of the literal.
    """

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Plus:
    """The `+` operator token."""

    def __str__(self) -> str:
        return "+"


@dataclass(frozen=True)
class LeftParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class RightParen:
    def __str__(self) -> str:
        return ")"


Token = Union[Int, Plus, LeftParen, RightParen]

# Single-character tokens keyed by their lexeme.
single_char_tokens: dict[str, Token] = {
    "+": Plus(),
    "(": LeftParen(),
    ")": RightParen(),
}

__all__ = ["Int", "LeftParen", "Plus", "RightParen", "Token", "single_char_tokens"]
