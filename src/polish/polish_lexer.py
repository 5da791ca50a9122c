"""
Lexical analyzer for the polish expression language.

This module converts raw source text into a lazy stream of tokens:

Classes:
    CharacterStream: Forward-only cursor over the source string.
    Lexer: Pulls characters from a CharacterStream and produces Tokens on demand.

Features:
    - Skips whitespace (space, tab, carriage return, newline)
    - Reads a maximal run of ASCII digits as one integer literal
    - Recognizes the single-character tokens `+`, `(` and `)`

Raises:
    LexError: On any other character, or on an integer literal above INT_MAX.

Example:
    >>> lexer = Lexer("+ 1 2")
    >>> lexer.next_token()
    Plus()
    >>> list(lexer)
    [Int(value=1), Int(value=2)]

Exports:
    - CharacterStream
    - Lexer
    - tokenize
    - INT_MAX
"""

from collections.abc import Iterator

from polish.polish_errors import LexError
from polish.polish_token import Int, Token, single_char_tokens

# Literals and sums live in the 32-bit signed range.
INT_MAX = 2**31 - 1
MAX_DIGITS = len(str(INT_MAX))

WHITESPACE = " \t\r\n"
DIGITS = "0123456789"


class CharacterStream:
    """
    Reads characters one at a time from a source string.

    Attributes:
        source (str): The input source string.
        position (int): Index of the next unread character.
    """

    def __init__(self, source: str, position: int = 0):
        self.source = source
        self.position = position

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Returns:
            str: The next character.

        Raises:
            IndexError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise IndexError(
                f"Attempted to read past end of source at position=<{self.position}>"
            )
        char = self.source[self.position]
        self.position += 1
        return char

    def peek(self) -> str:
        """Returns the next character without consuming it, or "" at end of input."""
        if self.position >= len(self.source):
            return ""
        return self.source[self.position]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Lexer:
    """Lexical analyzer for the polish language.

    The lexer is a forward-only producer: tokens are scanned only when asked for,
    and it cannot be rewound. It is also an iterator, so `list(Lexer(src))`
    drains the remaining tokens.

    Attributes:
        stream (CharacterStream): The source being scanned.
    """

    def __init__(self, source: str | CharacterStream) -> None:
        if isinstance(source, str):
            source = CharacterStream(source)
        self.stream = source

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.stream.peek() in WHITESPACE:
            self.stream.next()

    def read_int(self) -> Int:
        """Consumes a maximal run of digits and returns it as an Int token.

        Raises:
            LexError: If the literal does not fit below INT_MAX.
        """
        start = self.stream.position
        while not self.stream.end_of_file() and self.stream.peek() in DIGITS:
            self.stream.next()
        digits = self.stream.source[start : self.stream.position]
        # Length check first: int() refuses very long digit strings.
        significant = digits.lstrip("0") or "0"
        if len(significant) > MAX_DIGITS or int(significant) > INT_MAX:
            shown = digits if len(digits) <= 20 else digits[:20] + "..."
            raise LexError(f"Integer literal out of range: {shown}", digits)
        return Int(int(significant))

    def next_token(self) -> Token | None:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token | None: The next token, or None once the input is exhausted.

        Raises:
            LexError: If the next meaningful character cannot start a token.
        """
        self.skip_whitespace()

        if self.stream.end_of_file():
            return None

        ch = self.stream.peek()

        if ch in DIGITS:
            return self.read_int()

        if ch in single_char_tokens:
            self.stream.next()
            return single_char_tokens[ch]

        raise LexError(f"Unexpected character {ch!r}", ch)


def tokenize(source: str) -> list[Token]:
    """Lexes the whole of `source` into a list of tokens."""
    return list(Lexer(source))


__all__ = ["CharacterStream", "INT_MAX", "Lexer", "tokenize"]
