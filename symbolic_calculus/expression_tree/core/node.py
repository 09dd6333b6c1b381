import sympy as sp
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, Optional
from .operators import (
  TWO_OPERAND_FUNCTIONS, evaluate_binary_op, evaluate_unary_op, format_number
)

# SymPy counterparts of the operator table
SYMPY_BINARY_OPS: Dict[str, Callable[[sp.Expr, sp.Expr], sp.Expr]] = {
  '+': lambda a, b: sp.Add(a, b),
  '-': lambda a, b: sp.Add(a, sp.Mul(-1, b)),
  '*': lambda a, b: sp.Mul(a, b),
  '/': lambda a, b: sp.Mul(a, sp.Pow(b, -1)),
  '^': lambda a, b: sp.Pow(a, b),
  'max': lambda a, b: sp.Max(a, b),
  'min': lambda a, b: sp.Min(a, b),
  'log': lambda a, b: sp.log(a, b),
}

SYMPY_UNARY_OPS: Dict[str, Callable[[sp.Expr], sp.Expr]] = {
  'sin': sp.sin,
  'cos': sp.cos,
  'tan': sp.tan,
  'asin': sp.asin,
  'acos': sp.acos,
  'atan': sp.atan,
  'sqrt': sp.sqrt,
  'ln': sp.log,
}


class Node(ABC):
  """Base node class with size caching"""

  __slots__ = ('_size_cache', '_string_cache')

  def __init__(self):
    self._size_cache: Optional[int] = None
    self._string_cache: Optional[str] = None

  def _clear_cache(self):
    self._size_cache = None
    self._string_cache = None

  @abstractmethod
  def evaluate(self, bindings: Mapping[str, Any]) -> Any:
    pass

  def to_string(self) -> str:
    """Fully parenthesized infix text, re-parseable by the parser"""
    if self._string_cache is None:
      self._string_cache = self._compute_string()
    return self._string_cache

  @abstractmethod
  def _compute_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def is_leaf(self) -> bool:
    return False

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = self._compute_size()
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  def __repr__(self) -> str:
    return f"{self.__class__.__name__}({self.to_string()!r})"


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    self.name = name

  def evaluate(self, bindings: Mapping[str, Any]) -> Any:
    return bindings[self.name]

  def _compute_string(self) -> str:
    return self.name

  def copy(self) -> 'VariableNode':
    return VariableNode(self.name)

  def is_leaf(self) -> bool:
    return True

  def _compute_size(self) -> int:
    return 1

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  def evaluate(self, bindings: Mapping[str, Any]) -> Any:
    return self.value

  def _compute_string(self) -> str:
    return format_number(self.value)

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self.value)

  def is_leaf(self) -> bool:
    return True

  def _compute_size(self) -> int:
    return 1

  def to_sympy(self) -> sp.Expr:
    return sp.Float(self.value)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    self.operator = operator
    self.left = left
    self.right = right

  def evaluate(self, bindings: Mapping[str, Any]) -> Any:
    right_val = self.right.evaluate(bindings)
    left_val = self.left.evaluate(bindings)
    return evaluate_binary_op(left_val, right_val, self.operator)

  def _compute_string(self) -> str:
    if self.operator in TWO_OPERAND_FUNCTIONS:
      return f"( {self.operator} ( {self.left.to_string()} , {self.right.to_string()} ) )"
    return f"( {self.left.to_string()} {self.operator} {self.right.to_string()} )"

  def copy(self) -> 'BinaryOpNode':
    return BinaryOpNode(self.operator, self.left.copy(), self.right.copy())

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def to_sympy(self) -> sp.Expr:
    return SYMPY_BINARY_OPS[self.operator](self.left.to_sympy(), self.right.to_sympy())


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')

  def __init__(self, operator: str, operand: Node):
    super().__init__()
    self.operator = operator
    self.operand = operand

  def evaluate(self, bindings: Mapping[str, Any]) -> Any:
    return evaluate_unary_op(self.operand.evaluate(bindings), self.operator)

  def _compute_string(self) -> str:
    operand = self.operand.to_string()
    # A bare leaf needs its own parentheses to read back as the only argument
    if self.operand.is_leaf():
      operand = f"( {operand} )"
    return f"( {self.operator} {operand} )"

  def copy(self) -> 'UnaryOpNode':
    return UnaryOpNode(self.operator, self.operand.copy())

  def _compute_size(self) -> int:
    return 1 + self.operand.size()

  def to_sympy(self) -> sp.Expr:
    return SYMPY_UNARY_OPS[self.operator](self.operand.to_sympy())
