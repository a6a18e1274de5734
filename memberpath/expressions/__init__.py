"""Expression tree types for member-access chains.

Python has no compiler-built expression trees, so lambdas are recorded:
``LambdaExpression.from_callable(lambda p: p.Office.Street)`` calls the lambda
with a ``Recorder``, and every attribute read on it (or on the recorders it
returns) builds a ``MemberExpression``, whatever its name. Nodes themselves
also build members from attribute access, except for names they use.
``convert(...)``, ``call(...)`` and operators build the other node kinds. Nodes are frozen pydantic models.
"""

from ._bases import Expression
from .binary_operator import BinaryExpression
from .call import CallExpression
from .constant import ConstantExpression
from .conversion import ConversionExpression
from .lambda_ import LambdaExpression
from .member import MemberExpression
from .parameter import ParameterExpression
from .recorder import Recorder

__all__ = [
    "BinaryExpression",
    "CallExpression",
    "ConstantExpression",
    "ConversionExpression",
    "Expression",
    "LambdaExpression",
    "MemberExpression",
    "ParameterExpression",
    "Recorder",
]
