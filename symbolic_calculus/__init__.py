"""Symbolic Calculus Package

Parse infix math expressions into trees that can be evaluated, simplified,
differentiated and numerically integrated.
"""

from .expression_tree import (
  Expression, parse, Node, VariableNode, ConstantNode,
  BinaryOpNode, UnaryOpNode, ExpressionSimplifier, ExpressionDifferentiator,
  SymPyAnalyzer
)
from .exceptions import (
  ExpressionError, ParseError, MismatchedParenthesisError, EvaluationError,
  MissingVariableError, TooManyVariablesError, DifferentiationError
)
from .integration import approximate_area, signed_area
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "parse", "Node", "VariableNode", "ConstantNode",
  "BinaryOpNode", "UnaryOpNode",
  "ExpressionSimplifier", "ExpressionDifferentiator", "SymPyAnalyzer",
  "ExpressionError", "ParseError", "MismatchedParenthesisError", "EvaluationError",
  "MissingVariableError", "TooManyVariablesError", "DifferentiationError",
  "approximate_area", "signed_area",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
