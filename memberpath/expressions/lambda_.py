"""Lambda expression and its construction from Python callables."""

from __future__ import annotations
import inspect
from typing import Any, Callable, ClassVar, Tuple

from pydantic import Field as PydanticField

from ._bases import Expression
from .parameter import ParameterExpression

_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class LambdaExpression(Expression):
    """A lambda: ``parameters`` and the ``body`` computed from them.

    Members are not read off a lambda itself; ``lambda_expression.Foo`` raises
    ``AttributeError``.
    """

    kind: ClassVar[str] = "lambda"

    parameters: Tuple[ParameterExpression, ...] = PydanticField(default_factory=tuple)
    body: Expression

    @classmethod
    def from_callable(cls, function: Callable[..., Any]) -> LambdaExpression:
        """Record ``function`` as a lambda (e.g. ``lambda p: p.Office.Street``).

        Each positional parameter becomes a ``ParameterExpression`` of the same
        name and annotation. ``function`` is called once, with a ``Recorder``
        per parameter, so every attribute it reads becomes a member node. A
        result that is not an expression is kept as a constant body.

        Classes, and callables whose signature cannot be read or which cannot
        be called with their positional parameters alone, raise
        ``UnsupportedShapeError``. Exceptions raised by ``function`` itself
        propagate unchanged.
        """
        from ..errors import UnsupportedShapeError
        from .recorder import Recorder, unwrap
        if isinstance(function, type):
            raise UnsupportedShapeError(function, "classes are not recorded")
        try:
            signature = inspect.signature(function)
        except (TypeError, ValueError) as error:
            raise UnsupportedShapeError(function, f"no signature ({error})") from error
        parameters = tuple(
            ParameterExpression(
                name=parameter.name,
                type=None if parameter.annotation is inspect.Parameter.empty else parameter.annotation,
            )
            for parameter in signature.parameters.values()
            if parameter.kind in _POSITIONAL_KINDS
        )
        recorders = tuple(map(Recorder, parameters))
        try:
            signature.bind(*recorders)
        except TypeError as error:
            raise UnsupportedShapeError(function, str(error)) from error
        body = unwrap(function(*recorders))
        return cls(parameters=parameters, body=body)

    def __getitem__(self, name: str):
        raise TypeError(f"Cannot access member {name!r} on a lambda expression")

    def __getattr__(self, name: str):
        raise AttributeError(name)

    @property
    def path_str(self) -> str:
        """Dot-separated path of the member chain in the body (e.g. ``Office.Street``)."""
        from ..property_path import get_property_path
        return get_property_path(self)
