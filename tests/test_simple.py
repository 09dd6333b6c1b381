import numpy as np
from symbolic_calculus import parse


def test_simple_pipeline():
    """Simple end-to-end run: parse, evaluate, simplify, differentiate, integrate"""

    expr = parse("3 * x ^ 2 + 2 * x + 1")
    print(f"Expression: {expr}")
    print(f"Variables: {expr.variables}")
    print(f"Postfix: {' '.join(expr.postfix)}")
    print(f"Tree:\n{expr.tree_diagram()}")

    assert expr.variables == ("x",)
    assert expr.evaluate([2.0]) == 17.0

    simplified = expr.simplify()
    print(f"\nSimplified: {simplified.to_string()}")
    assert simplified.evaluate([2.0]) == 17.0

    derivative = expr.derivative("x")
    print(f"Derivative: {derivative.to_string()}")
    # 6x + 2
    assert derivative.evaluate([2.0]) == 14.0

    area = expr.integrate(0.0, 1.0, 0.001)
    print(f"Area on [0, 1]: {area:.4f}")
    # exact value is 1 + 1 + 1 = 3
    assert abs(area - 3.0) < 0.02

    xs = np.linspace(-2, 2, 9)
    assert np.allclose(expr.evaluate_many(xs), 3 * xs ** 2 + 2 * xs + 1)

    print("\nTest completed successfully!")


if __name__ == "__main__":
    test_simple_pipeline()
