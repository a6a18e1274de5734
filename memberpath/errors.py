"""Errors raised when a property path cannot be extracted."""

from __future__ import annotations
from typing import Any

from .expressions import Expression, LambdaExpression


def describe(expression: Any) -> str:
    """Human-readable node kind (e.g. ``binary expression``, ``'int' object``)."""
    if isinstance(expression, LambdaExpression):
        return f"lambda expression with a {describe(expression.body)} body"
    if isinstance(expression, Expression):
        return f"{expression.kind} expression"
    return f"{type(expression).__name__!r} object"


class PropertyPathError(ValueError):
    """Base error; ``expression`` is the node that could not be handled."""

    def __init__(self, expression: Any, message: str):
        super().__init__(message)
        self.expression = expression


class UnsupportedShapeError(PropertyPathError):
    """The root is not a member access, nor a lambda or single conversion wrapping one."""

    def __init__(self, expression: Any, reason: str | None = None):
        message = f"Cannot resolve a property path from {describe(expression)}"
        if reason:
            message += f": {reason}"
        super().__init__(expression, message)


class MalformedChainError(PropertyPathError):
    """A conversion inside a member chain wraps another conversion.

    ``path`` is the part of the chain read before the conversion was met
    (e.g. ``Street`` for ``p.Office.convert(a).convert(b).Street``).
    """

    def __init__(self, expression: Any, path: str):
        super().__init__(
            expression,
            f"Conversion before {path!r} wraps another conversion; only one layer is unwrapped",
        )
        self.path = path
