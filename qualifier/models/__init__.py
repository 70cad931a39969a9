"""
Models module - Request variants and response envelopes.

This module defines:
- operations.py : Typed operation requests parsed from the JSON body
- envelope.py   : Pydantic response envelopes
"""
from qualifier.models.envelope import (
    OperationResponse,
    HealthResponse,
    ErrorResponse,
    OperationResult,
)
from qualifier.models.operations import (
    OperationKey,
    Operation,
    FibonacciOperation,
    PrimeOperation,
    LcmOperation,
    HcfOperation,
    AIOperation,
    parse_operation,
)

__all__ = [
    "OperationResponse",
    "HealthResponse",
    "ErrorResponse",
    "OperationResult",
    "OperationKey",
    "Operation",
    "FibonacciOperation",
    "PrimeOperation",
    "LcmOperation",
    "HcfOperation",
    "AIOperation",
    "parse_operation",
]
