"""Calculator module - arithmetic evaluation over HTTP."""

from .evaluator import (
    Operation,
    ErrorKind,
    Success,
    Failure,
    Evaluation,
    evaluate,
)
from .schemas import CalculationRequest, CalculationResponse
from .router import router


__all__ = [
    "Operation",
    "ErrorKind",
    "Success",
    "Failure",
    "Evaluation",
    "evaluate",
    "CalculationRequest",
    "CalculationResponse",
    "router",
]
