from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from ..core.operators import format_number
from .tree_utils import get_variables
from ...exceptions import DifferentiationError
from ...logging_system import log_debug


class ExpressionDifferentiator:
  """Rule-based symbolic differentiation.

  Derivatives are produced as infix text that the parser reads back; every
  nested derivative is wrapped in parentheses so it stays a single operand.
  """

  @staticmethod
  def derivative_text(node: Node, variable: str) -> str:
    text = ExpressionDifferentiator._derive(node, variable)
    log_debug(f"d/d{variable} {node.to_string()} = {text}")
    return text

  @staticmethod
  def _derive(node: Node, variable: str) -> str:
    if isinstance(node, VariableNode):
      return "1.0" if node.name == variable else "0.0"
    if isinstance(node, ConstantNode):
      return "0.0"
    if isinstance(node, BinaryOpNode):
      return ExpressionDifferentiator._derive_binary(node, variable)
    if isinstance(node, UnaryOpNode):
      return ExpressionDifferentiator._derive_unary(node, variable)
    raise DifferentiationError(type(node).__name__)

  @staticmethod
  def _derive_binary(node: BinaryOpNode, variable: str) -> str:
    derive = ExpressionDifferentiator._derive
    op = node.operator
    f = node.left.to_string()
    g = node.right.to_string()

    if op in ('+', '-'):
      return f"( {derive(node.left, variable)} ) {op} ( {derive(node.right, variable)} )"

    if op == '*':
      # product rule
      return f"( {derive(node.right, variable)} ) * {f} + ( {derive(node.left, variable)} ) * {g}"

    if op == '/':
      # quotient rule
      return (f"( ( {derive(node.left, variable)} ) * {g} - ( {derive(node.right, variable)} ) * {f} )"
              f" / ( {g} ^ 2 )")

    if op == '^':
      if isinstance(node.right, ConstantNode):
        # power rule
        n = node.right.value
        return f"{format_number(n)} * {f} ^ {format_number(n - 1)} * ( {derive(node.left, variable)} )"
      return (f"( {f} ^ {g} ) * ( ( ( {derive(node.left, variable)} ) / {f} ) * {g}"
              f" + ( {derive(node.right, variable)} ) * ln( {f} ) )")

    if op == 'log':
      df = derive(node.left, variable)
      if variable not in get_variables(node.right):
        return f"( {df} ) / ( ( {f} ) * ln( {g} ) )"
      # log(f, g) = ln(f) / ln(g) with a base that depends on the variable
      dg = derive(node.right, variable)
      return (f"( ( ( {df} ) / ( {f} ) ) * ln( {g} ) - ( ( {dg} ) / ( {g} ) ) * ln( {f} ) )"
              f" / ( ln( {g} ) ^ 2 )")

    raise DifferentiationError(op)

  @staticmethod
  def _derive_unary(node: UnaryOpNode, variable: str) -> str:
    op = node.operator
    g = node.operand.to_string()
    dg = ExpressionDifferentiator._derive(node.operand, variable)

    if op == 'sin':
      return f"( {dg} ) * cos( {g} )"
    if op == 'cos':
      return f"( {dg} ) * -1 * sin( {g} )"
    if op == 'tan':
      return f"( {dg} ) / ( cos( {g} ) ^ 2 )"
    if op == 'asin':
      return f"( {dg} ) / sqrt( 1 - ( {g} ) ^ 2 )"
    if op == 'acos':
      return f"-1 * ( {dg} ) / sqrt( 1 - ( {g} ) ^ 2 )"
    if op == 'atan':
      return f"( {dg} ) / ( ( {g} ^ 2 ) + 1 )"
    if op == 'sqrt':
      return f"( {dg} ) / ( 2 * sqrt( {g} ) )"
    if op == 'ln':
      return f"( {dg} ) / ( {g} )"

    raise DifferentiationError(op)
