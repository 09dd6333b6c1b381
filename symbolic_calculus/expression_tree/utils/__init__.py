"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier, MAX_SIMPLIFY_PASSES
from .differentiator import ExpressionDifferentiator
from .sympy_utils import SymPyAnalyzer
from .tree_utils import (
    get_children, get_all_nodes, calculate_tree_depth, find_nodes_by_operator,
    get_variables, get_constants, clone_tree, tree_to_postfix, format_tree
)

__all__ = [
    'ExpressionSimplifier', 'MAX_SIMPLIFY_PASSES', 'ExpressionDifferentiator', 'SymPyAnalyzer',
    'get_children', 'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_operator',
    'get_variables', 'get_constants', 'clone_tree', 'tree_to_postfix', 'format_tree'
]
