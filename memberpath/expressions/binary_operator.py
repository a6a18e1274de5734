"""Binary operator expression."""

from typing import ClassVar

from ._bases import Expression


class BinaryExpression(Expression):
    """Two-operand operator (e.g. ``p.Age + 1``, ``p.Name == "x"``)."""

    kind: ClassVar[str] = "binary"

    symbol: str
    left: Expression
    right: Expression
