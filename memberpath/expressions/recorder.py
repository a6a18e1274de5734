"""Recording proxy handed to callables by ``LambdaExpression.from_callable``."""

from typing import Any

from ._bases import Expression


def unwrap(value: Any) -> Expression:
    """Node recorded by ``value``; literals become ``ConstantExpression`` nodes."""
    if isinstance(value, Recorder):
        return object.__getattribute__(value, "_node")
    return Expression._to_expression(value)


class Recorder:
    """Stand-in for a lambda parameter, and for every value derived from it.

    Attribute and item access always record a member, so ``p.name``,
    ``p.type`` or ``p.address.source`` become member nodes even though the
    expression nodes have fields of the same names. ``convert``, ``call`` and
    operators record the matching node kinds; ``p["convert"]`` and
    ``p["call"]`` reach members named like them.
    """

    __slots__ = ("_node",)

    def __init__(self, node: Expression):
        object.__setattr__(self, "_node", node)

    def __getattr__(self, name: str):
        # dunder probes (copy, pickle, ...) are not members
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return self[name]

    def __getitem__(self, name: str):
        from .member import MemberExpression
        return Recorder(MemberExpression(name=name, source=unwrap(self)))

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"Cannot assign {name!r} while recording a lambda")

    def __repr__(self) -> str:
        return f"Recorder({unwrap(self)!r})"

    def convert(self, to: Any):
        """Record a conversion (e.g. ``p.age.convert(object)``)."""
        return Recorder(unwrap(self).convert(to))

    def call(self, function: str, *arguments: Any):
        """Record a method call (e.g. ``p.name.call("strip")``)."""
        return Recorder(unwrap(self).call(function, *map(unwrap, arguments)))

    def _binary(self, symbol: str, other: Any):
        return Recorder(unwrap(self)._binary(symbol, unwrap(other)))

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
