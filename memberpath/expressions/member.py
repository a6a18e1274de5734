"""Member access expression."""

from __future__ import annotations
from typing import ClassVar

from pydantic import Field as PydanticField

from ._bases import Expression


class MemberExpression(Expression):
    """Access to a named field or property on the result of ``source``.

    ``p.Office.Street`` is ``MemberExpression(name="Street", source=MemberExpression(name="Office", source=p))``:
    the outermost node holds the innermost (last written) member.
    """

    kind: ClassVar[str] = "member"

    name: str = PydanticField(min_length=1)
    """Member name (e.g. ``Street``)."""
    source: Expression | None = None
    """Node the member is read from; ``None`` for a static member."""

    @property
    def path_str(self) -> str:
        """Dot-separated path ending at this member (e.g. ``Office.Street``)."""
        from ..property_path import get_property_path
        return get_property_path(self)
