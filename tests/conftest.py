import pytest

from memberpath.expressions import ParameterExpression


@pytest.fixture
def p():
    """Lambda parameter ``p`` to build member chains on."""
    return ParameterExpression(name="p")
