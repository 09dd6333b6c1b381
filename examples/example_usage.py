import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from symbolic_calculus import (
  parse, SymPyAnalyzer, LogLevel, configure_logging, ExpressionError
)


def show_expression(text):
  """Parse one expression and print everything we can compute from it"""
  print(f"\n=== {text} ===")
  try:
    expr = parse(text)
  except ExpressionError as e:
    print(f"Could not parse: {e}")
    return

  print(f"Variables: {list(expr.variables)}")
  print(f"Postfix: {' '.join(expr.postfix)}")
  print(f"Canonical: {expr.to_string()}")
  print(f"Tree:\n{expr.tree_diagram()}")

  simplified = expr.simplify()
  print(f"Simplified: {simplified.to_string()}")

  if len(expr.variables) != 1:
    if not expr.variables:
      print(f"Value: {expr.evaluate()}")
    return

  variable = expr.variables[0]
  xs = np.linspace(0.5, 2.5, 5)
  print(f"Values at {xs}: {expr.evaluate_many(xs)}")

  try:
    derivative = expr.derivative(variable)
    print(f"d/d{variable}: {derivative.to_string()}")
  except ExpressionError as e:
    print(f"No derivative: {e}")

  area = expr.integrate(0.5, 2.5, 0.001)
  signed = expr.signed_integral(0.5, 2.5)
  print(f"Riemann area on [0.5, 2.5]: {area:.4f} (signed integral {signed:.4f})")


def main():
  configure_logging(LogLevel.MINIMAL)

  examples = [
    "3 * x ^ 2 + 2 * x + 1",
    "sin(x) ^ 2 + cos(x) ^ 2",
    "ln(x) / x",
    "log(x, 2) - sqrtx",
    "2 * x * 3 + 0 * y",
    "max(x, 1.5)",
    "(2 + 3) * 4 ^ 0.5",
    "(x + 1",
  ]
  for text in examples:
    show_expression(text)

  analyzer = SymPyAnalyzer()
  a, b = parse("2 * x + x"), parse("x * 3")
  print(f"\n{a} equivalent to {b}: {analyzer.are_equivalent(a, b)}")
  print(f"LaTeX of {a}: {analyzer.latex_representation(a)}")


if __name__ == "__main__":
  main()
