import cmath
import sympy as sp
from typing import Sequence
from ..core.node import Node


class SymPyAnalyzer:
  """SymPy views of expression trees: conversion, LaTeX and equivalence checks"""

  def __init__(self, sample_points: Sequence[float] = (0.3, 0.7, 1.1, 1.9)):
    # Positive samples keep ln and sqrt on the real line
    self.sample_points = tuple(sample_points)

  @staticmethod
  def _root(expr) -> Node:
    return expr if isinstance(expr, Node) else expr.root

  def to_sympy(self, expr) -> sp.Expr:
    """Convert an Expression or Node to a SymPy expression"""
    return self._root(expr).to_sympy()

  def latex_representation(self, expr) -> str:
    """Get LaTeX representation of the expression"""
    try:
      return sp.latex(self.to_sympy(expr))
    except Exception:
      return self._root(expr).to_string()

  def are_equivalent(self, a, b, tolerance: float = 1e-9) -> bool:
    """
    Algebraic equivalence check, unlike Expression equality which compares
    canonical text.

    Returns:
        True when the difference simplifies to zero, or when it is
        numerically zero at every sample point.
    """
    difference = sp.simplify(self.to_sympy(a) - self.to_sympy(b))
    if difference == 0:
      return True

    symbols = sorted(difference.free_symbols, key=lambda s: s.name)
    for sample in self.sample_points:
      point = {symbol: sample + 0.1 * i for i, symbol in enumerate(symbols)}
      value = complex(difference.evalf(subs=point))
      if not cmath.isfinite(value) or abs(value) > tolerance:
        return False
    return True
