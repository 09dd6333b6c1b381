import math

import numpy as np
import pytest

from symbolic_calculus import parse, MissingVariableError, EvaluationError


@pytest.mark.parametrize("text, expected", [
    ("2 + 3 * 4", 14.0),
    ("(2 + 3) * 4", 20.0),
    ("2 ^ 3 ^ 2", 512.0),
    ("10 / 4", 2.5),
    ("-2.5 * 4", -10.0),
    ("max(3, 5)", 5.0),
    ("min(3, 5)", 3.0),
    ("sqrt(16)", 4.0),
    ("cos(0)", 1.0),
    ("tan(0)", 0.0),
    ("acos(1)", 0.0),
])
def test_constant_expressions(text, expected):
    assert parse(text).evaluate() == expected


def test_non_commutative_operators_follow_text_order():
    assert parse("5 - 3").evaluate() == 2.0
    assert parse("8 / 2").evaluate() == 4.0
    assert parse("2 ^ 3").evaluate() == 8.0
    assert parse("8 - 3 - 2").evaluate() == 3.0
    assert parse("log(8, 2)").evaluate() == pytest.approx(3.0)
    assert parse("x - y").evaluate([10.0, 4.0]) == 6.0


def test_functions_and_constants():
    assert parse("sin(pi / 2)").evaluate() == pytest.approx(1.0)
    assert parse("ln(e)").evaluate() == pytest.approx(1.0)
    assert parse("atan(1) * 4").evaluate() == pytest.approx(math.pi)
    assert parse("asin(1)").evaluate() == pytest.approx(math.pi / 2)


def test_negation():
    assert parse("-x ^ 2").evaluate([3.0]) == -9.0
    assert parse("-(x + 1)").evaluate([2.0]) == -3.0
    assert parse("2 * -x").evaluate([4.0]) == -8.0
    # a minus sign written against a number belongs to the literal
    assert parse("-3 ^ 2").evaluate() == 9.0


def test_ieee_results_instead_of_exceptions():
    assert parse("1 / 0").evaluate() == math.inf
    assert parse("-1 / 0").evaluate() == -math.inf
    assert math.isnan(parse("0 / 0").evaluate())
    assert math.isnan(parse("sqrt(-1)").evaluate())
    assert math.isnan(parse("ln(-1)").evaluate())


def test_positional_values_follow_discovery_order():
    expr = parse("x + 2*x")
    assert expr.variables == ("x",)
    assert expr.evaluate([5.0]) == 15.0

    expr = parse("b - a")
    assert expr.variables == ("b", "a")
    assert expr.evaluate([10.0, 3.0]) == 7.0


def test_mapping_and_scalar_values():
    expr = parse("x + 2*x")
    assert expr.evaluate({"x": 5.0}) == 15.0
    assert expr.evaluate(5.0) == 15.0
    assert parse("x * y").evaluate({"y": 3, "x": 2}) == 6.0


def test_extra_positional_values_are_ignored():
    assert parse("x").evaluate([1.0, 2.0]) == 1.0


def test_missing_variables_are_named():
    with pytest.raises(MissingVariableError) as excinfo:
        parse("x + y + z").evaluate([1.0])
    assert excinfo.value.missing == ("y", "z")

    with pytest.raises(MissingVariableError) as excinfo:
        parse("x + y").evaluate({"y": 1.0})
    assert excinfo.value.missing == ("x",)


def test_zero_argument_form():
    assert parse("2").evaluate() == 2.0
    with pytest.raises(MissingVariableError) as excinfo:
        parse("x * y").evaluate()
    assert excinfo.value.missing == ("x", "y")
    assert isinstance(excinfo.value, EvaluationError)


def test_evaluate_many_matches_scalar_evaluation():
    expr = parse("x * y + sin(x)")
    X = np.array([[1.0, 2.0], [3.0, 4.0], [-0.5, 0.25]])
    expected = [expr.evaluate(row) for row in X]
    assert np.allclose(expr.evaluate_many(X), expected)


def test_evaluate_many_shapes():
    assert np.array_equal(parse("2").evaluate_many(np.zeros(3)), [2.0, 2.0, 2.0])
    assert np.array_equal(parse("x ^ 2").evaluate_many([1.0, 2.0, 3.0]), [1.0, 4.0, 9.0])
    with pytest.raises(MissingVariableError):
        parse("x + y").evaluate_many([1.0, 2.0])


def test_structural_equality():
    assert parse("x+1") == parse("(x + 1)")
    assert parse("x + 1") != parse("1 + x")
    assert hash(parse("x+1")) == hash(parse("( x + 1 )"))
    assert parse("x") != "x"


def test_expression_accessors():
    expr = parse("x + pi")
    assert expr.text() == "x + pi"
    assert expr.original_text == "x + pi"
    assert str(expr) == "x + pi"
    assert expr.variables == ("x",)
    assert isinstance(expr.postfix, tuple)
    assert expr.size() == 3
    assert expr.depth() == 2
