"""Base expression type for member-access expression trees."""

from __future__ import annotations
from typing import Any, ClassVar

from pydantic import BaseModel


class Expression(BaseModel):
    """Base type for all expression tree nodes.

    Nodes are immutable once built. Reading an attribute that is not a field
    (``p.Office``) or indexing by name (``p["Office"]``) builds a
    ``MemberExpression`` on this node, so a chain such as
    ``p.Office.Street.Address`` records itself in the order it is written.
    Operators build ``BinaryExpression`` nodes instead of comparing or
    computing anything.
    """

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    kind: ClassVar[str] = "unknown"
    """Short name of the node variant, used in error messages."""

    @staticmethod
    def _to_expression(value: Any) -> Expression:
        """Wrap a literal in a ``ConstantExpression``; pass expressions through."""
        if isinstance(value, Expression):
            return value
        from .constant import ConstantExpression
        return ConstantExpression(value=value)

    def __getitem__(self, name: str):
        from .member import MemberExpression
        return MemberExpression(name=name, source=self)

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def convert(self, to: Any):
        """Build a conversion of this node to ``to`` (e.g. ``p.Age.convert(object)``)."""
        from .conversion import ConversionExpression
        return ConversionExpression(operand=self, type=to)

    def call(self, function: str, *arguments: Any):
        """Build a method call on this node (e.g. ``p.Name.call("Trim")``)."""
        from .call import CallExpression
        return CallExpression(function=function,
                              instance=self,
                              arguments=tuple(map(self._to_expression, arguments)))

    def _binary(self, symbol: str, other: Any):
        from .binary_operator import BinaryExpression
        return BinaryExpression(symbol=symbol, left=self, right=self._to_expression(other))

    def __and__(self, other: Any):
        return self._binary("&", other)

    def __or__(self, other: Any):
        return self._binary("|", other)

    def __add__(self, other: Any):
        return self._binary("+", other)

    def __sub__(self, other: Any):
        return self._binary("-", other)

    def __mul__(self, other: Any):
        return self._binary("*", other)

    def __truediv__(self, other: Any):
        return self._binary("/", other)

    def __mod__(self, other: Any):
        return self._binary("%", other)

    def __eq__(self, other: Any):
        return self._binary("==", other)

    def __ne__(self, other: Any):
        return self._binary("!=", other)

    def __lt__(self, other: Any):
        return self._binary("<", other)

    def __le__(self, other: Any):
        return self._binary("<=", other)

    def __gt__(self, other: Any):
        return self._binary(">", other)

    def __ge__(self, other: Any):
        return self._binary(">=", other)
