"""
Defines the abstract syntax tree (AST) for the polish expression language.

Classes:
    Num:
        Leaf node holding an integer literal.
    Plus:
        Interior node adding a left and a right operand.
    Parened:
        Interior node for an explicitly parenthesized sub-expression. It evaluates
        to the same value as its child; the node only records the grouping.

    ExprDict:
        TypedDict shape of a node serialized with `to_dict()`, suitable for JSON
        output or debugging.

Nodes are frozen and compare structurally. Every child is owned by exactly one
parent and trees never contain cycles, since nodes cannot be mutated after
construction.

Example:
    >>> tree = Plus(Num(1), Parened(Num(2)))
    >>> str(tree)
    '+ 1 (2)'
"""

from dataclasses import dataclass
from typing import Any, TypedDict, Union


class ExprDict(TypedDict, total=False):
    """
    TypedDict representation of an Expr used for serialization.

    Fields:
        kind (str): The node variant ("num", "plus" or "parened").
        value (int): Literal value, only for "num".
        left (ExprDict): Left operand, only for "plus".
        right (ExprDict): Right operand, only for "plus".
        inner (ExprDict): Grouped expression, only for "parened".
    """

    kind: str
    value: int
    left: "ExprDict"
    right: "ExprDict"
    inner: "ExprDict"


@dataclass(frozen=True)
class Num:
    value: int

    def __str__(self) -> str:
        return str(self.value)

    def to_dict(self) -> ExprDict:
        return {"kind": "num", "value": self.value}


@dataclass(frozen=True)
class Plus:
    """Prefix addition `+ left right`.

    Attributes:
        left (Expr): The first operand.
        right (Expr): The second operand.
    """

    left: "Expr"
    right: "Expr"

    def __str__(self) -> str:
        return f"+ {self.left} {self.right}"

    def to_dict(self) -> ExprDict:
        return {
            "kind": "plus",
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
        }


@dataclass(frozen=True)
class Parened:
    """A parenthesized sub-expression `( inner )`.

    Attributes:
        inner (Expr): The grouped expression.
    """

    inner: "Expr"

    def __str__(self) -> str:
        return f"({self.inner})"

    def to_dict(self) -> ExprDict:
        return {"kind": "parened", "inner": self.inner.to_dict()}


Expr = Union[Num, Plus, Parened]


def from_dict(data: ExprDict | dict[str, Any]) -> Expr:
    """Rebuilds an Expr from the output of `to_dict()`.

    Raises:
        ValueError: If a node has an unknown kind.
    """
    kind = data.get("kind")
    if kind == "num":
        return Num(data["value"])
    if kind == "plus":
        return Plus(from_dict(data["left"]), from_dict(data["right"]))
    if kind == "parened":
        return Parened(from_dict(data["inner"]))
    raise ValueError(f"Unknown expression kind: {kind!r}")


__all__ = ["Expr", "ExprDict", "Num", "Parened", "Plus", "from_dict"]
