import math
import re
import numpy as np
from typing import Dict, Tuple

# Precedence ranks
HIGH_PRIORITY = 3
MEDIUM_PRIORITY = 2
LOW_PRIORITY = 1
ZERO_PRIORITY = 0

SINGLE_OPERAND_FUNCTIONS: Tuple[str, ...] = ('sin', 'cos', 'tan', 'asin', 'acos', 'atan', 'sqrt', 'ln')
TWO_OPERAND_FUNCTIONS: Tuple[str, ...] = ('max', 'min', 'log')
CONSTANTS: Dict[str, float] = {
  'pi': math.pi,
  'e': math.e,
  'inf': math.inf,
  'nan': math.nan,
}
FUNCTIONS: Tuple[str, ...] = SINGLE_OPERAND_FUNCTIONS + TWO_OPERAND_FUNCTIONS

# Longest first so that 'asin' wins over 'sin' on a prefix match
FUNCTIONS_BY_LENGTH: Tuple[str, ...] = tuple(sorted(FUNCTIONS, key=len, reverse=True))

BINARY_OPERATORS: Tuple[str, ...] = ('+', '-', '*', '/', '^')

PRECEDENCE_MAP: Dict[str, int] = {
  'sqrt': HIGH_PRIORITY,
  'ln': HIGH_PRIORITY,
  'max': HIGH_PRIORITY,
  'min': HIGH_PRIORITY,
  'log': HIGH_PRIORITY,
  'sin': HIGH_PRIORITY,
  'cos': HIGH_PRIORITY,
  'tan': HIGH_PRIORITY,
  'asin': HIGH_PRIORITY,
  'acos': HIGH_PRIORITY,
  'atan': HIGH_PRIORITY,
  '^': MEDIUM_PRIORITY,
  '*': LOW_PRIORITY,
  '/': LOW_PRIORITY,
  '+': ZERO_PRIORITY,
  '-': ZERO_PRIORITY,
}

NUMBER_PATTERN = re.compile(r'-?(?:[0-9]+(?:\.[0-9]*)?|inf|nan)')


def is_operator(token: str) -> bool:
  return token in PRECEDENCE_MAP


def is_single_operand(token: str) -> bool:
  return token in SINGLE_OPERAND_FUNCTIONS


def is_function(token: str) -> bool:
  return token in FUNCTIONS


def is_number(token: str) -> bool:
  return NUMBER_PATTERN.fullmatch(token) is not None


def format_number(value: float) -> str:
  """Render a float so that the parser reads back exactly the same value"""
  value = float(value)
  if math.isnan(value):
    return 'nan'
  if math.isinf(value):
    return 'inf' if value > 0 else '-inf'
  return np.format_float_positional(value, trim='0')


def _log_base(values, base):
  return np.log(values) / np.log(base)


BINARY_OP_RULES = {
  '+': np.add,
  '-': np.subtract,
  '*': np.multiply,
  '/': np.divide,
  '^': np.power,
  'max': np.maximum,
  'min': np.minimum,
  'log': _log_base,
}

UNARY_OP_RULES = {
  'sin': np.sin,
  'cos': np.cos,
  'tan': np.tan,
  'asin': np.arcsin,
  'acos': np.arccos,
  'atan': np.arctan,
  'sqrt': np.sqrt,
  'ln': np.log,
}


def evaluate_binary_op(left_val, right_val, operator: str):
  """Apply a two-operand rule as ``left OP right``.

  Works on floats and numpy arrays alike. Division by zero and domain
  errors follow IEEE (inf / nan) instead of raising.
  """
  rule = BINARY_OP_RULES[operator]
  with np.errstate(all='ignore'):
    return rule(np.float64(left_val) if np.isscalar(left_val) else left_val,
                np.float64(right_val) if np.isscalar(right_val) else right_val)


def evaluate_unary_op(operand_val, operator: str):
  rule = UNARY_OP_RULES[operator]
  with np.errstate(all='ignore'):
    return rule(np.float64(operand_val) if np.isscalar(operand_val) else operand_val)
