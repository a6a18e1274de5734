"""memberpath: dotted property paths from member-access expression trees."""

from .errors import MalformedChainError, PropertyPathError, UnsupportedShapeError
from .expressions import LambdaExpression, MemberExpression
from .property_path import PATH_SEPARATOR, get_property_path

__all__ = [
    "LambdaExpression",
    "MalformedChainError",
    "MemberExpression",
    "PATH_SEPARATOR",
    "PropertyPathError",
    "UnsupportedShapeError",
    "get_property_path",
]
