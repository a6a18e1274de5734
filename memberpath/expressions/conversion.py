"""Type conversion expression."""

from typing import Any, ClassVar

from ._bases import Expression


class ConversionExpression(Expression):
    """Implicit or explicit conversion of ``operand`` (e.g. boxing ``p.Age`` to ``object``)."""

    kind: ClassVar[str] = "conversion"

    operand: Expression
    type: Any = object
