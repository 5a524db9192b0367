"""Arithmetic evaluator for two operands and an operation selector.

Evaluation never raises for bad input: division by zero, unknown operations
and results that overflow to infinity come back as a ``Failure`` so the
caller decides how to report them.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Dict, Union

# Type alias for binary operator functions
OperatorFn = Callable[[float, float], float]


class Operation(StrEnum):
    """Operation selectors accepted by the evaluator."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class ErrorKind(StrEnum):
    """Reasons an evaluation can fail."""
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    INVALID_OPERATION = "INVALID_OPERATION"
    RESULT_OUT_OF_RANGE = "RESULT_OUT_OF_RANGE"


ERROR_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.DIVISION_BY_ZERO: "Error: Division by zero",
    ErrorKind.INVALID_OPERATION: "Error: Invalid operation",
    ErrorKind.RESULT_OUT_OF_RANGE: "Error: Result out of range",
}

OPERATORS: Dict[Operation, OperatorFn] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
}


@dataclass(frozen=True)
class Success:
    """A computed value."""

    value: float


@dataclass(frozen=True)
class Failure:
    """A computation that could not be performed.

    Attributes:
        kind: Machine-readable failure reason.
    """

    kind: ErrorKind

    @property
    def message(self) -> str:
        """Human-readable message surfaced to clients."""
        return ERROR_MESSAGES[self.kind]


Evaluation = Union[Success, Failure]


def parse_operation(selector: str) -> Operation | None:
    """Return the Operation for an exact, case-sensitive selector, or None."""
    try:
        return Operation(selector)
    except ValueError:
        return None


def evaluate(num1: float, num2: float, operation: str) -> Evaluation:
    """Apply ``operation`` to the two operands.

    Args:
        num1: Left operand.
        num2: Right operand.
        operation: One of ``add``, ``subtract``, ``multiply``, ``divide``.

    Returns:
        Success with the result, or Failure with the reason.
    """
    op = parse_operation(operation)
    if op is None:
        return Failure(ErrorKind.INVALID_OPERATION)
    if op is Operation.DIVIDE and num2 == 0:
        return Failure(ErrorKind.DIVISION_BY_ZERO)
    result = OPERATORS[op](num1, num2)
    if not math.isfinite(result):
        return Failure(ErrorKind.RESULT_OUT_OF_RANGE)
    return Success(result)
