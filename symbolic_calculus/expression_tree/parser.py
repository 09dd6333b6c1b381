"""
Infix parsing for expression trees.

Converts infix text into a postfix token sequence with the shunting-yard
algorithm (https://en.wikipedia.org/wiki/Shunting-yard_algorithm) and builds
the binary expression tree from that sequence.
"""

import string
from typing import List, Sequence, Tuple

from .core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .core.operators import (
    PRECEDENCE_MAP, CONSTANTS, FUNCTIONS, FUNCTIONS_BY_LENGTH, BINARY_OPERATORS,
    format_number, is_number, is_operator, is_single_operand, is_function
)
from ..exceptions import ParseError, MismatchedParenthesisError
from ..logging_system import log_debug

# ASCII only; other Unicode digits and letters are rejected as unexpected characters
DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)

# Kinds of the previously scanned token
_START = 'start'
_OPERAND = 'operand'
_OPERATOR = 'operator'
_FUNCTION = 'function'
_OPEN = 'open'
_CLOSE = 'close'
_SEPARATOR = 'separator'

# A '-' read right after one of these is a negation, not a subtraction
_UNARY_CONTEXT = (_START, _OPERATOR, _FUNCTION, _OPEN, _SEPARATOR)


def to_postfix(expression: str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """
    Convert an infix expression to postfix order.

    Args:
        expression: Infix text, whitespace is ignored

    Returns:
        (postfix tokens, variable names in first-seen order)

    Raises:
        MismatchedParenthesisError: on unbalanced parentheses
        ParseError: on empty input or unexpected characters
    """
    if expression is None or not expression.strip():
        raise ParseError("Empty expression")

    text = ''.join(expression.split())
    postfix: List[str] = []
    operators: List[str] = []
    variables: List[str] = []

    prev_kind = _START
    negate = False
    i = 0
    while i < len(text):
        c = text[i]

        if c == '-' and prev_kind in _UNARY_CONTEXT:
            negate = not negate
            i += 1
            continue

        if c in DIGITS:
            start = i
            seen_dot = False
            while i < len(text) and (text[i] in DIGITS or (text[i] == '.' and not seen_dot)):
                if text[i] == '.':
                    seen_dot = True
                i += 1
            literal = text[start:i]
            postfix.append('-' + literal if negate else literal)
            negate = False
            prev_kind = _OPERAND
            continue

        if c in LETTERS:
            start = i
            while i < len(text) and (text[i] in LETTERS or text[i] in DIGITS):
                i += 1
            word = text[start:i]

            if word in CONSTANTS:
                value = -CONSTANTS[word] if negate else CONSTANTS[word]
                postfix.append(format_number(value))
                negate = False
                prev_kind = _OPERAND
                continue

            function = word if word in FUNCTIONS else next(
                (name for name in FUNCTIONS_BY_LENGTH if word.startswith(name)), None)
            if negate:
                postfix.append('-1')
                operators.append('*')
                negate = False
            if function is not None:
                operators.append(function)
                # Anything glued after the name is scanned again, so 'sinx' reads as 'sin x'
                i = start + len(function)
                prev_kind = _FUNCTION
                continue

            postfix.append(word)
            if word not in variables:
                variables.append(word)
            prev_kind = _OPERAND
            continue

        if c in BINARY_OPERATORS:
            if negate:
                raise ParseError(f"Unexpected operator '{c}' after a minus sign at position {i}")
            while (operators and operators[-1] != '('
                   and (PRECEDENCE_MAP[c] < PRECEDENCE_MAP[operators[-1]]
                        or (PRECEDENCE_MAP[c] == PRECEDENCE_MAP[operators[-1]] and c != '^'))):
                postfix.append(operators.pop())
            operators.append(c)
            prev_kind = _OPERATOR
        elif c == '(':
            if negate:
                postfix.append('-1')
                operators.append('*')
                negate = False
            operators.append('(')
            prev_kind = _OPEN
        elif c == ')':
            while operators and operators[-1] != '(':
                postfix.append(operators.pop())
            if not operators:
                raise MismatchedParenthesisError()
            operators.pop()
            if operators and is_function(operators[-1]):
                postfix.append(operators.pop())
            prev_kind = _CLOSE
        elif c == ',':
            while operators and operators[-1] != '(':
                postfix.append(operators.pop())
            if not operators:
                raise ParseError(f"Argument separator outside of a function call at position {i}")
            prev_kind = _SEPARATOR
        else:
            raise ParseError(f"Unexpected character {c!r} at position {i}")
        i += 1

    if negate:
        raise ParseError("Dangling minus sign at the end of the expression")

    while operators:
        if operators[-1] in ('(', ')'):
            raise MismatchedParenthesisError()
        postfix.append(operators.pop())

    log_debug(f"Parsed '{expression}' -> postfix {' '.join(postfix)}")
    return tuple(postfix), tuple(variables)


def build_tree(postfix: Sequence[str]) -> Node:
    """Build the expression tree for a postfix token sequence"""
    stack: List[Node] = []
    for token in postfix:
        if is_number(token):
            stack.append(ConstantNode(float(token)))
        elif is_single_operand(token):
            if not stack:
                raise ParseError(f"Malformed expression: '{token}' has no operand")
            stack.append(UnaryOpNode(token, stack.pop()))
        elif is_operator(token):
            if len(stack) < 2:
                raise ParseError(f"Malformed expression: '{token}' needs two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(BinaryOpNode(token, left, right))
        else:
            stack.append(VariableNode(token))

    if len(stack) != 1:
        raise ParseError("Malformed expression")
    return stack[0]
