import numpy as np
import sympy as sp
from typing import Any, Dict, Mapping, Sequence, Tuple, Union
from .core.node import Node
from .parser import to_postfix, build_tree
from .utils.simplifier import ExpressionSimplifier
from .utils.differentiator import ExpressionDifferentiator
from .utils.tree_utils import calculate_tree_depth, format_tree
from ..exceptions import MissingVariableError, TooManyVariablesError
from ..integration import approximate_area, signed_area
from ..logging_system import LogLevel, log_info

Values = Union[Mapping[str, float], Sequence[float], float, None]


class Expression:
  """Parsed infix expression: source text, variables, postfix tokens and tree.

  Instances are immutable from the caller's side. simplify() and derivative()
  return new expressions built from a deep copy of the tree.
  """

  __slots__ = ('_original_text', '_variables', '_postfix', 'root')

  def __init__(self, text: str):
    postfix, variables = to_postfix(text)
    self._original_text = text
    self._postfix: Tuple[str, ...] = postfix
    self._variables: Tuple[str, ...] = variables
    self.root: Node = build_tree(postfix)

  @classmethod
  def from_tree(cls, root: Node) -> 'Expression':
    """Re-parse the canonical text of a tree into a fresh expression"""
    text = root.to_string()
    if not root.is_leaf():
      # drop the outermost "( ... )"
      text = text[2:-2]
    return cls(text)

  @property
  def original_text(self) -> str:
    return self._original_text

  @property
  def variables(self) -> Tuple[str, ...]:
    """Variable names in the order they first appear in the text"""
    return self._variables

  @property
  def postfix(self) -> Tuple[str, ...]:
    return self._postfix

  def text(self) -> str:
    return self._original_text

  def to_string(self) -> str:
    """Canonical fully parenthesized text of the tree"""
    return self.root.to_string()

  def copy(self) -> 'Expression':
    return Expression.from_tree(self.root.copy())

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def tree_diagram(self) -> str:
    return format_tree(self.root)

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def _bind(self, values: Values) -> Dict[str, Any]:
    if values is None:
      if self._variables:
        raise MissingVariableError(self._variables)
      return {}

    if isinstance(values, Mapping):
      missing = [name for name in self._variables if name not in values]
      if missing:
        raise MissingVariableError(missing)
      return {name: values[name] for name in self._variables}

    if np.isscalar(values):
      values = [values]
    values = list(values)
    # Values are matched to variables by discovery order; extras are ignored
    if len(values) < len(self._variables):
      raise MissingVariableError(self._variables[len(values):])
    return dict(zip(self._variables, values))

  def evaluate(self, values: Values = None) -> float:
    """
    Evaluate the expression.

    Args:
        values: A mapping of variable name to value, a sequence of values
            assigned to ``variables`` in order, a single value, or None for
            expressions without variables.

    Raises:
        MissingVariableError: when any variable is left without a value
    """
    return float(self.root.evaluate(self._bind(values)))

  def evaluate_many(self, X: np.ndarray) -> np.ndarray:
    """Vectorized evaluation; column i of X holds values for variables[i]"""
    X = np.asarray(X, dtype=np.float64)
    if X.ndim == 1:
      X = X.reshape(-1, 1)
    if X.shape[1] < len(self._variables):
      raise MissingVariableError(self._variables[X.shape[1]:])
    bindings = {name: X[:, i] for i, name in enumerate(self._variables)}
    result = np.asarray(self.root.evaluate(bindings), dtype=np.float64)
    return np.broadcast_to(result, (X.shape[0],)).copy()

  def simplify(self) -> 'Expression':
    simplified = Expression.from_tree(ExpressionSimplifier.simplify_tree(self.root))
    log_info(f"Simplified '{self._original_text}' -> '{simplified.original_text}'", LogLevel.DETAILED)
    return simplified

  def derivative_text(self, variable: str) -> str:
    """Unsimplified derivative text with respect to ``variable``"""
    return ExpressionDifferentiator.derivative_text(self.root, variable)

  def derivative(self, variable: str) -> 'Expression':
    return Expression(self.derivative_text(variable)).simplify()

  def _check_single_variable(self):
    if len(self._variables) > 1:
      raise TooManyVariablesError(self._variables)

  def integrate(self, start: float, stop: float, step: float) -> float:
    """
    Approximate the area under the graph on [start, stop] with a Riemann sum.

    Absolute values of the rectangle areas are summed, so the result is
    never negative. Only single-variable expressions are supported.
    """
    self._check_single_variable()
    return approximate_area(self.evaluate_many, start, stop, step)

  def signed_integral(self, start: float, stop: float) -> float:
    """Signed definite integral by adaptive quadrature"""
    self._check_single_variable()
    return signed_area(lambda x: self.evaluate([x]), start, stop)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.to_string() == other.to_string()

  def __hash__(self) -> int:
    return hash(self.to_string())

  def __repr__(self) -> str:
    return f"Expression({self._original_text!r})"

  def __str__(self) -> str:
    return self._original_text


def parse(text: str) -> Expression:
  """Parse infix text into an Expression"""
  return Expression(text)
