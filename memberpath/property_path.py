"""Extraction of dotted property paths from member-access expression trees."""

from __future__ import annotations
import logging
from typing import Any

from .errors import MalformedChainError, UnsupportedShapeError
from .expressions import ConversionExpression, Expression, LambdaExpression, MemberExpression

PATH_SEPARATOR = "."
"""String used to join member names in a property path (e.g. ``Office.Street``)."""

logger = logging.getLogger("memberpath")


def _resolve_member(expression: Any) -> MemberExpression | None:
    """Member node that ``expression`` stands for, or ``None``.

    A lambda stands for its body; one conversion layer is unwrapped.
    """
    if isinstance(expression, LambdaExpression):
        expression = expression.body
    if isinstance(expression, ConversionExpression):
        expression = expression.operand
    if isinstance(expression, MemberExpression):
        return expression
    return None


def get_property_path(expression: Any) -> str:
    """Dot-separated member names of a member-access chain, in source order.

    ``expression`` is a ``LambdaExpression`` (or a plain callable, recorded with
    ``LambdaExpression.from_callable``), a ``MemberExpression``, or a
    ``ConversionExpression`` wrapping one: ``lambda p: p.Office.Street.Address``
    gives ``"Office.Street.Address"``.

    Raises ``UnsupportedShapeError`` when no member access can be found at the
    root, and ``MalformedChainError`` when a conversion inside the chain wraps
    another conversion, which would silently cut the path short. Recording a
    callable can also raise ``UnsupportedShapeError`` (see
    ``LambdaExpression.from_callable``); exceptions raised inside it propagate.
    """
    if not isinstance(expression, Expression):
        if not callable(expression):
            raise UnsupportedShapeError(expression)
        expression = LambdaExpression.from_callable(expression)

    member = _resolve_member(expression)
    if member is None:
        raise UnsupportedShapeError(expression)

    # walk from the last written member back to the parameter
    names: list[str] = []
    while member is not None:
        names.append(member.name)
        source = member.source
        member = _resolve_member(source)
        if isinstance(source, ConversionExpression) and isinstance(source.operand, ConversionExpression):
            raise MalformedChainError(source, PATH_SEPARATOR.join(reversed(names)))
    names.reverse()

    path = PATH_SEPARATOR.join(names)
    logger.debug("Resolved property path %s", path)
    return path
