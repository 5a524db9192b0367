"""FastAPI router for the calculator endpoint."""

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from .evaluator import Failure, evaluate
from .schemas import CalculationRequest, CalculationResponse

logger = structlog.get_logger("calculator")

router = APIRouter(tags=["calculator"])


@router.post(
    "/calculate",
    response_model=CalculationResponse,
    response_model_exclude_none=True,
    responses={400: {"model": CalculationResponse}},
)
async def calculate_endpoint(request: CalculationRequest):
    """Evaluate ``num1 <operation> num2``.

    Returns 200 with ``result`` on success. Division by zero and unknown
    operations return 400 with ``error`` set and ``result`` left at 0.
    """
    outcome = evaluate(request.num1, request.num2, request.operation)

    if isinstance(outcome, Failure):
        logger.info(
            "calculation_failed",
            operation=request.operation,
            error_kind=outcome.kind.value,
        )
        return JSONResponse(
            status_code=400,
            content=CalculationResponse(error=outcome.message).model_dump(),
        )

    logger.debug("calculation_succeeded", operation=request.operation, result=outcome.value)
    return CalculationResponse(result=outcome.value)
