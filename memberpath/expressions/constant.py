"""Constant expression."""

from typing import Any, ClassVar

from ._bases import Expression


class ConstantExpression(Expression):
    kind: ClassVar[str] = "constant"

    value: Any
