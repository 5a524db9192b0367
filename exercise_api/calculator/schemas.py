"""Pydantic schemas for the calculator endpoint."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr


class CalculationRequest(BaseModel):
    """Two operands and an operation selector.

    Missing fields fall back to zero values. Operands must be finite JSON
    numbers. ``operation`` is not checked against the known selectors here;
    the evaluator reports unknown ones.
    """
    num1: StrictFloat = Field(0.0, allow_inf_nan=False, description="Left operand")
    num2: StrictFloat = Field(0.0, allow_inf_nan=False, description="Right operand")
    operation: StrictStr = Field("", description="add, subtract, multiply or divide")

    model_config = ConfigDict(frozen=True)


class CalculationResponse(BaseModel):
    """Calculator response; ``error`` is only present when the computation failed."""
    result: float = 0.0
    error: Optional[str] = None
