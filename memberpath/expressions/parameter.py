"""Lambda parameter reference."""

from typing import Any, ClassVar

from ._bases import Expression


class ParameterExpression(Expression):
    """Reference to a lambda parameter; the usual end of a member chain."""

    kind: ClassVar[str] = "parameter"

    name: str
    type: Any = None
    """Annotated type of the parameter, if any."""
