"""
Tree-walking evaluator for polish expressions.

`evaluate()` reduces an expression tree to an integer by structural recursion:

    Num(n)          -> n
    Plus(l, r)      -> evaluate(l) + evaluate(r)
    Parened(inner)  -> evaluate(inner)

Values live in the 32-bit signed range of the lexer's literals. What happens when
a sum leaves that range is chosen by the overflow policy:

    "error"     raise EvalOverflowError (default)
    "wrap"      wrap around two's-complement style
    "saturate"  clamp to INT_MAX

Example:
    >>> calculate("+ 1 + 2 3")
    6
    >>> calculate("+ 2147483647 1", overflow="wrap")
    -2147483648
"""

from typing import Literal

from polish.polish_ast import Expr, Num, Parened, Plus
from polish.polish_errors import EvalOverflowError
from polish.polish_lexer import INT_MAX, Lexer
from polish.polish_parser import Parser

OverflowPolicy = Literal["error", "wrap", "saturate"]
OVERFLOW_POLICIES: tuple[str, ...] = ("error", "wrap", "saturate")

INT_MIN = -INT_MAX - 1


def check_policy(overflow: str) -> None:
    if overflow not in OVERFLOW_POLICIES:
        raise ValueError(f"Unknown overflow policy: {overflow!r}")


def add(left: int, right: int, overflow: OverflowPolicy = "error") -> int:
    """Adds two integers under the given overflow policy.

    Raises:
        EvalOverflowError: If the sum overflows and the policy is "error".
        ValueError: If the policy is unknown.
    """
    check_policy(overflow)
    total = left + right
    if INT_MIN <= total <= INT_MAX:
        return total
    if overflow == "wrap":
        return (total - INT_MIN) % 2**32 + INT_MIN
    if overflow == "saturate":
        return INT_MAX if total > INT_MAX else INT_MIN
    raise EvalOverflowError(left, right)


def evaluate(expr: Expr, overflow: OverflowPolicy = "error") -> int:
    """
    Reduce an expression tree to its integer value.

    The walk keeps its own stack of pending nodes, so tree depth is not bounded
    by the interpreter's recursion limit. Left operands are reduced before right
    ones.

    Args:
        expr (Expr): The root of the tree.
        overflow (str): Overflow policy, one of "error", "wrap", "saturate".

    Returns:
        int: The value of the expression.

    Raises:
        EvalOverflowError: If a sum overflows under the "error" policy.
        ValueError: If the overflow policy is unknown.
        TypeError: If the tree holds something other than an expression node.
    """
    check_policy(overflow)
    values: list[int] = []
    # (node, operands_done): a Plus is revisited once both operands are on `values`.
    pending: list[tuple[Expr, bool]] = [(expr, False)]
    while pending:
        node, operands_done = pending.pop()
        if isinstance(node, Num):
            values.append(node.value)
        elif isinstance(node, Parened):
            pending.append((node.inner, False))
        elif isinstance(node, Plus):
            if operands_done:
                right = values.pop()
                left = values.pop()
                values.append(add(left, right, overflow))
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
        else:
            raise TypeError(f"Expected an expression node, got {type(node).__name__}")
    return values.pop()


def calculate(source: str, overflow: OverflowPolicy = "error") -> int:
    """Lexes, parses and evaluates `source`, which must hold exactly one expression."""
    check_policy(overflow)
    return evaluate(Parser(Lexer(source)).parse(), overflow)


__all__ = [
    "INT_MIN",
    "OVERFLOW_POLICIES",
    "OverflowPolicy",
    "add",
    "calculate",
    "check_policy",
    "evaluate",
]
