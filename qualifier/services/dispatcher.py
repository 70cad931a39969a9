"""
Operation Dispatcher - Runs a parsed operation and classifies failures.

Flow:
1. Receives a typed Operation (see qualifier.models.operations)
2. Invokes the matching math function or the AI client
3. Returns the raw result for the route to wrap in an envelope

Failures leave as QualifierException subclasses only. Anything else
raised by an operation is logged and converted to InternalError, so
the route never sees an unclassified exception.
"""
from typing import Callable, Dict, Protocol, Type

from qualifier.core.exceptions import InternalError, QualifierException
from qualifier.core.logging_config import get_logger
from qualifier.models.envelope import OperationResult
from qualifier.models.operations import (
    AIOperation,
    FibonacciOperation,
    HcfOperation,
    LcmOperation,
    Operation,
    PrimeOperation,
)
from qualifier.services import math_service

logger = get_logger(__name__)


class QuestionAnswerer(Protocol):
    """Anything that can answer a natural language question."""

    def ask(self, question: str) -> str:
        ...


class OperationDispatcher:
    """
    Stateless dispatcher from operation variants to their handlers.

    Example:
        >>> dispatcher = OperationDispatcher(ai_client=LLMClient(settings))
        >>> dispatcher.dispatch(FibonacciOperation(n=7))
        [0, 1, 1, 2, 3, 5, 8]
    """

    def __init__(self, ai_client: QuestionAnswerer):
        """
        Initialize the dispatcher.

        Args:
            ai_client: Collaborator used for the AI operation
        """
        self.ai_client = ai_client
        self._handlers: Dict[Type, Callable[..., OperationResult]] = {
            FibonacciOperation: lambda op: math_service.generate_fibonacci(op.n),
            PrimeOperation: lambda op: math_service.filter_primes(op.numbers),
            LcmOperation: lambda op: math_service.calculate_lcm(op.numbers),
            HcfOperation: lambda op: math_service.calculate_hcf(op.numbers),
            AIOperation: lambda op: self.ai_client.ask(op.question),
        }

    def dispatch(self, operation: Operation) -> OperationResult:
        """
        Run an operation.

        Args:
            operation: Parsed operation variant

        Returns:
            List of ints, int, or str depending on the operation

        Raises:
            InvalidRequest: On domain validation failures
            AIUnavailable: If the AI collaborator fails
            InternalError: On anything unexpected
        """
        logger.info(f"Dispatching operation: {operation.key.value}")

        try:
            return self._handlers[type(operation)](operation)
        except QualifierException as e:
            field = getattr(e, "field", None) or "-"
            logger.warning(
                f"Operation {operation.key.value} failed: "
                f"kind={e.kind.value}, field={field}, message={e.message}"
            )
            raise
        except Exception as e:
            logger.exception(f"Unexpected error in operation {operation.key.value}: {e}")
            raise InternalError() from e
