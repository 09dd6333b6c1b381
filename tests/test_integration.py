import math

import numpy as np
import pytest

from symbolic_calculus import parse, approximate_area, TooManyVariablesError
from symbolic_calculus import integration
from symbolic_calculus.integration import generate_sample_points, riemann_sum


def test_identity_on_unit_interval():
    assert parse("x").integrate(0.0, 1.0, 0.001) == pytest.approx(0.5, abs=2e-3)


def test_area_counts_absolute_values():
    expr = parse("x")
    assert expr.integrate(-1.0, 1.0, 0.001) == pytest.approx(1.0, abs=1e-2)
    assert expr.signed_integral(-1.0, 1.0) == pytest.approx(0.0, abs=1e-9)


def test_constant_expression():
    # samples at 0, 0.25, 0.5, 0.75 and 1
    assert parse("2").integrate(0.0, 1.0, 0.25) == pytest.approx(2.5)


def test_non_finite_samples_are_skipped():
    # 1/0 at the middle sample contributes nothing
    assert parse("1 / x").integrate(-1.0, 1.0, 0.5) == pytest.approx(3.0)
    assert parse("sqrt(x)").integrate(-1.0, 0.0, 0.5) == 0.0


def test_empty_interval():
    assert parse("x").integrate(1.0, 0.0, 0.1) == 0.0


def test_more_than_one_variable_is_rejected():
    with pytest.raises(TooManyVariablesError) as excinfo:
        parse("x * y").integrate(0.0, 1.0, 0.1)
    assert excinfo.value.variables == ("x", "y")

    with pytest.raises(TooManyVariablesError):
        parse("x + y").signed_integral(0.0, 1.0)


@pytest.mark.parametrize("step", [0.0, -0.1, math.nan, math.inf])
def test_invalid_step(step):
    with pytest.raises(ValueError):
        parse("x").integrate(0.0, 1.0, step)


def test_infinite_bounds():
    with pytest.raises(ValueError):
        parse("x").integrate(0.0, math.inf, 0.1)


def test_signed_integral():
    assert parse("x ^ 2").signed_integral(0.0, 3.0) == pytest.approx(9.0)
    assert parse("sin(x)").signed_integral(0.0, math.pi) == pytest.approx(2.0)


def test_approximate_area_with_plain_function():
    area = approximate_area(np.cos, 0.0, math.pi / 2, 1e-4)
    assert area == pytest.approx(1.0, abs=1e-3)


def test_sample_points():
    points, _ = generate_sample_points(0.0, 1.0, 0.25, 100)
    assert np.array_equal(points, [0.0, 0.25, 0.5, 0.75, 1.0])
    points, _ = generate_sample_points(2.0, 1.0, 0.5, 100)
    assert len(points) == 0


def test_sample_points_in_batches():
    points, next_point = generate_sample_points(0.0, 1.0, 0.25, 2)
    assert np.array_equal(points, [0.0, 0.25])
    assert next_point == 0.5


def test_batched_sum_matches_single_batch(monkeypatch):
    expr = parse("1 / x")
    expected = expr.integrate(-1.0, 1.0, 0.5)
    monkeypatch.setattr(integration, "SAMPLE_CHUNK_SIZE", 2)
    assert expr.integrate(-1.0, 1.0, 0.5) == expected
    assert parse("2").integrate(0.0, 1.0, 0.25) == pytest.approx(2.5)
    assert parse("x").integrate(0.0, 1.0, 0.5) == pytest.approx(0.75)


def test_step_too_small_to_advance():
    with pytest.raises(ValueError):
        parse("x").integrate(1e20, 2e20, 1.0)


def test_riemann_sum_kernel():
    values = np.array([1.0, np.inf, -2.0])
    assert riemann_sum(values, 0.5) == 1.5
