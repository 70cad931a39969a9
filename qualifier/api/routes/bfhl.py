"""
BFHL Routes - The operation endpoint.

POST /bfhl accepts a JSON object carrying exactly one operation key
(fibonacci, prime, lcm, hcf or AI) and answers with the envelope.
Errors are raised as QualifierException subclasses and rendered by
the exception handlers registered in qualifier.api.main.
"""
from typing import Any

from fastapi import APIRouter, Body, Depends

from qualifier.api.dependencies import get_app_settings, get_dispatcher
from qualifier.core.config import Settings
from qualifier.core.logging_config import get_logger
from qualifier.models.envelope import ErrorResponse, OperationResponse
from qualifier.models.operations import parse_operation
from qualifier.services.dispatcher import OperationDispatcher

logger = get_logger(__name__)

router = APIRouter(
    prefix="/bfhl",
    tags=["Operations"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
        503: {"model": ErrorResponse, "description": "AI service unavailable"},
    }
)


@router.post(
    "",
    response_model=OperationResponse,
    summary="Run one operation",
    description="""
    Send a JSON object with exactly one of these keys:

    - `fibonacci` (number): first n Fibonacci numbers
    - `prime` (array of numbers): the prime elements, in order
    - `lcm` (array of positive numbers): least common multiple
    - `hcf` (array of positive numbers): highest common factor
    - `AI` (string): a short answer from Google Gemini

    **Examples:**
    - `{"fibonacci": 7}` → `[0, 1, 1, 2, 3, 5, 8]`
    - `{"lcm": [12, 18, 24]}` → `72`
    """
)
def run_operation(
    payload: Any = Body(default=None),
    settings: Settings = Depends(get_app_settings),
    dispatcher: OperationDispatcher = Depends(get_dispatcher),
) -> OperationResponse:
    """
    Parse the body, dispatch the operation and wrap the result.

    Declared as a plain function so FastAPI runs it in its thread pool;
    the AI operation blocks on a network call.
    """
    operation = parse_operation(payload)
    data = dispatcher.dispatch(operation)

    logger.info(f"Operation {operation.key.value} succeeded")

    return OperationResponse(
        is_success=True,
        official_email=settings.official_email,
        data=data,
    )
