"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .operators import (
    FUNCTIONS, SINGLE_OPERAND_FUNCTIONS, TWO_OPERAND_FUNCTIONS,
    BINARY_OPERATORS, CONSTANTS, PRECEDENCE_MAP,
    evaluate_binary_op, evaluate_unary_op, format_number, is_number
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'FUNCTIONS', 'SINGLE_OPERAND_FUNCTIONS', 'TWO_OPERAND_FUNCTIONS',
    'BINARY_OPERATORS', 'CONSTANTS', 'PRECEDENCE_MAP',
    'evaluate_binary_op', 'evaluate_unary_op', 'format_number', 'is_number'
]
