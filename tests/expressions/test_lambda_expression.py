"""Tests for memberpath.expressions.LambdaExpression."""

import pytest

from memberpath.expressions import (
    ConstantExpression,
    ConversionExpression,
    LambdaExpression,
    MemberExpression,
    ParameterExpression,
)


class Person:
    pass


def test_from_callable_records_member_chain():
    expr = LambdaExpression.from_callable(lambda p: p.Office.Street)
    assert len(expr.parameters) == 1
    assert expr.parameters[0].name == "p"
    assert isinstance(expr.body, MemberExpression)
    assert expr.body.name == "Street"
    assert expr.body.source.name == "Office"


def test_from_callable_uses_parameter_names_and_annotations():
    def select(person: Person, index):
        return person.Name

    expr = LambdaExpression.from_callable(select)
    assert [parameter.name for parameter in expr.parameters] == ["person", "index"]
    assert expr.parameters[0].type is Person
    assert expr.parameters[1].type is None


def test_from_callable_skips_non_positional_parameters():
    expr = LambdaExpression.from_callable(lambda p, *, flag=False: p.Id)
    assert [parameter.name for parameter in expr.parameters] == ["p"]


def test_from_callable_wraps_literal_body():
    expr = LambdaExpression.from_callable(lambda: 42)
    assert expr.parameters == ()
    assert isinstance(expr.body, ConstantExpression)
    assert expr.body.value == 42


def test_from_callable_keeps_conversion_body():
    expr = LambdaExpression.from_callable(lambda p: p.Age.convert(object))
    assert isinstance(expr.body, ConversionExpression)
    assert expr.body.operand.name == "Age"


def test_from_callable_body_can_be_parameter():
    expr = LambdaExpression.from_callable(lambda p: p)
    assert isinstance(expr.body, ParameterExpression)


def test_lambda_has_no_members():
    expr = LambdaExpression.from_callable(lambda p: p.Id)
    with pytest.raises(AttributeError):
        _ = expr.Id
    with pytest.raises(TypeError, match="lambda expression"):
        _ = expr["Id"]


def test_lambda_path_str():
    expr = LambdaExpression.from_callable(lambda p: p.Office.Street.Address)
    assert expr.path_str == "Office.Street.Address"


def test_member_path_str(p):
    assert p.Office.Street.path_str == "Office.Street"
