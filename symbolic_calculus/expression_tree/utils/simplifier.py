import math
from ..core.node import Node, ConstantNode, BinaryOpNode, UnaryOpNode
from ..core.operators import evaluate_binary_op, evaluate_unary_op
from ...logging_system import log_debug, log_warning

# Upper bound on rewrite passes; each pass runs over the whole tree
MAX_SIMPLIFY_PASSES = 32

# Operators where (a op x) op c == (a op c) op x
CHAINABLE_OPERATORS = ('+', '*', 'max', 'min')


def _is_value(node: Node, value: float) -> bool:
  return isinstance(node, ConstantNode) and node.value == value


class ExpressionSimplifier:
  """Constant folding and algebraic identity rewrites"""

  @staticmethod
  def simplify_tree(node: Node, max_passes: int = MAX_SIMPLIFY_PASSES) -> Node:
    """Simplify a deep copy of the tree until its text stops changing"""
    current = node.copy()
    text = current.to_string()
    for n_pass in range(1, max_passes + 1):
      current = ExpressionSimplifier._apply_simplification_rules(current)
      new_text = current.to_string()
      log_debug(f"Simplification pass {n_pass}: {new_text}")
      if new_text == text:
        break
      text = new_text
    else:
      log_warning(f"Simplification stopped after {max_passes} passes without reaching a fixed point")
    return current

  @staticmethod
  def _apply_simplification_rules(node: Node) -> Node:
    if isinstance(node, UnaryOpNode):
      operand = ExpressionSimplifier._apply_simplification_rules(node.operand)
      if isinstance(operand, ConstantNode):
        return ConstantNode(evaluate_unary_op(operand.value, node.operator))
      return UnaryOpNode(node.operator, operand)

    if isinstance(node, BinaryOpNode):
      left = ExpressionSimplifier._apply_simplification_rules(node.left)
      right = ExpressionSimplifier._apply_simplification_rules(node.right)

      if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
        return ConstantNode(evaluate_binary_op(left.value, right.value, node.operator))

      chained = ExpressionSimplifier._coalesce_chain(node.operator, left, right)
      return ExpressionSimplifier._apply_identities(chained)

    return node

  @staticmethod
  def _coalesce_chain(operator: str, left: Node, right: Node) -> BinaryOpNode:
    """Fold two literals of an operator chain, e.g. 2 * x * 3 -> 6 * x"""
    if operator in CHAINABLE_OPERATORS:
      if (isinstance(right, ConstantNode) and isinstance(left, BinaryOpNode)
          and left.operator == operator):
        if isinstance(left.left, ConstantNode):
          folded = ConstantNode(evaluate_binary_op(left.left.value, right.value, operator))
          return BinaryOpNode(operator, folded, left.right)
        if isinstance(left.right, ConstantNode):
          folded = ConstantNode(evaluate_binary_op(left.right.value, right.value, operator))
          return BinaryOpNode(operator, left.left, folded)

      elif (isinstance(left, ConstantNode) and isinstance(right, BinaryOpNode)
            and right.operator == operator):
        if isinstance(right.left, ConstantNode):
          folded = ConstantNode(evaluate_binary_op(right.left.value, left.value, operator))
          return BinaryOpNode(operator, folded, right.right)
        if isinstance(right.right, ConstantNode):
          folded = ConstantNode(evaluate_binary_op(right.right.value, left.value, operator))
          return BinaryOpNode(operator, right.left, folded)

    return BinaryOpNode(operator, left, right)

  @staticmethod
  def _apply_identities(node: BinaryOpNode) -> Node:
    operator, left, right = node.operator, node.left, node.right
    if not (left.is_leaf() or right.is_leaf()):
      return node

    if _is_value(right, 0.0):
      if operator in ('+', '-'):
        return left  # x + 0 = x, x - 0 = x
      if operator == '/':
        return ConstantNode(math.inf)
      if operator == '*':
        return ConstantNode(0.0)  # x * 0 = 0
      if operator == '^':
        return ConstantNode(1.0)  # x ^ 0 = 1

    if _is_value(left, 0.0):
      if operator == '+':
        return right  # 0 + x = x
      if operator == '-':
        return BinaryOpNode('*', ConstantNode(-1.0), right)  # 0 - x = -x
      if operator in ('*', '/'):
        return ConstantNode(0.0)

    if _is_value(right, 1.0) and operator in ('*', '/', '^'):
      return left  # x * 1 = x, x / 1 = x, x ^ 1 = x

    if _is_value(left, 1.0):
      if operator == '*':
        return right  # 1 * x = x
      if operator == '^':
        return ConstantNode(1.0)  # 1 ^ x = 1

    return node
