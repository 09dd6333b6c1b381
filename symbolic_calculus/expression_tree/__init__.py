"""Expression Tree Module

Parsing, evaluation, simplification and differentiation of expression trees.
"""

from .expression import Expression, parse
from .parser import to_postfix, build_tree
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode
)
from .core.operators import (
    FUNCTIONS,
    SINGLE_OPERAND_FUNCTIONS,
    PRECEDENCE_MAP,
    evaluate_binary_op,
    evaluate_unary_op,
    format_number
)
from .utils import ExpressionSimplifier, ExpressionDifferentiator, SymPyAnalyzer

__all__ = [
    "Expression", "parse", "to_postfix", "build_tree",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "FUNCTIONS", "SINGLE_OPERAND_FUNCTIONS", "PRECEDENCE_MAP",
    "evaluate_binary_op", "evaluate_unary_op", "format_number",
    "ExpressionSimplifier", "ExpressionDifferentiator", "SymPyAnalyzer"
]
