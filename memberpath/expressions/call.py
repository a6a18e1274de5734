"""Method or function call expression."""

from __future__ import annotations
from typing import Any, ClassVar, Tuple

from pydantic import Field as PydanticField

from ._bases import Expression


class CallExpression(Expression):
    """Call of ``function`` with ``arguments``, on ``instance`` when it is a method call."""

    kind: ClassVar[str] = "call"

    function: str
    arguments: Tuple[Any, ...] = PydanticField(default_factory=tuple)
    instance: Expression | None = None
