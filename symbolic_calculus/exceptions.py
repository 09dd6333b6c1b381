"""Exception hierarchy for expression parsing, evaluation and differentiation."""

from typing import Iterable, Tuple


class ExpressionError(Exception):
    """Base class for every error raised by symbolic_calculus"""


class ParseError(ExpressionError, ValueError):
    """The expression text could not be turned into a tree"""


class MismatchedParenthesisError(ParseError):
    def __init__(self, message: str = "Mismatched parenthesis!"):
        super().__init__(message)


class EvaluationError(ExpressionError):
    """An expression could not be evaluated with the values given"""


class MissingVariableError(EvaluationError):
    def __init__(self, missing: Iterable[str]):
        self.missing: Tuple[str, ...] = tuple(missing)
        super().__init__(f"Missing values for variables!: [{', '.join(self.missing)}]")


class TooManyVariablesError(EvaluationError):
    def __init__(self, variables: Iterable[str]):
        self.variables: Tuple[str, ...] = tuple(variables)
        super().__init__(
            f"This method only works for single variable expressions, got {len(self.variables)}: "
            f"[{', '.join(self.variables)}]"
        )


class DifferentiationError(ExpressionError):
    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"No differentiation rule for operator '{operator}'")
