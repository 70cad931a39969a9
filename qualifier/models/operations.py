"""
Operation requests - the typed form of a /bfhl request body.

The body arrives as an untyped JSON object. parse_operation() turns it
into exactly one of five frozen request variants, so the dispatcher
never inspects raw JSON. Every type mismatch becomes an InvalidRequest
here, before any computation starts.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Tuple, Union

from qualifier.core.exceptions import InvalidRequest
from qualifier.core.validators import (
    is_number,
    is_number_array,
    is_text,
    truncate_number,
)

Number = Union[int, float]


class OperationKey(str, Enum):
    """Recognised operation keys, spelled exactly as they appear in JSON."""
    FIBONACCI = "fibonacci"
    PRIME = "prime"
    LCM = "lcm"
    HCF = "hcf"
    AI = "AI"


OPERATION_KEYS: Tuple[str, ...] = tuple(key.value for key in OperationKey)


@dataclass(frozen=True)
class FibonacciOperation:
    n: int
    key = OperationKey.FIBONACCI


@dataclass(frozen=True)
class PrimeOperation:
    numbers: Tuple[Number, ...]
    key = OperationKey.PRIME


@dataclass(frozen=True)
class LcmOperation:
    numbers: Tuple[Number, ...]
    key = OperationKey.LCM


@dataclass(frozen=True)
class HcfOperation:
    numbers: Tuple[Number, ...]
    key = OperationKey.HCF


@dataclass(frozen=True)
class AIOperation:
    question: str
    key = OperationKey.AI


Operation = Union[
    FibonacciOperation,
    PrimeOperation,
    LcmOperation,
    HcfOperation,
    AIOperation,
]

# Array operations share one shape; only the variant and error label differ
_ARRAY_OPERATIONS = {
    OperationKey.PRIME: (PrimeOperation, "Prime"),
    OperationKey.LCM: (LcmOperation, "LCM"),
    OperationKey.HCF: (HcfOperation, "HCF"),
}


def find_operation_keys(body: dict) -> List[OperationKey]:
    """Return the recognised operation keys present in a request body."""
    return [OperationKey(key) for key in OPERATION_KEYS if key in body]


def parse_operation(body: Any) -> Operation:
    """
    Parse a decoded JSON request body into a typed operation.

    Checks run in order: body shape, key count, value type.

    Args:
        body: Decoded JSON body

    Returns:
        One of the five operation variants

    Raises:
        InvalidRequest: On any shape, key-count or type problem
    """
    if not isinstance(body, dict):
        raise InvalidRequest("Request body must be a JSON object")

    keys = find_operation_keys(body)

    if not keys:
        raise InvalidRequest(
            "No valid operation key provided. Expected one of: "
            + ", ".join(OPERATION_KEYS)
        )

    if len(keys) > 1:
        raise InvalidRequest(
            "Multiple operation keys provided. Only one key is allowed per request"
        )

    key = keys[0]
    value = body[key.value]

    if key is OperationKey.FIBONACCI:
        if not is_number(value):
            raise InvalidRequest("Fibonacci input must be a number", field=key.value)
        return FibonacciOperation(n=truncate_number(value, 32))

    if key is OperationKey.AI:
        if not is_text(value):
            raise InvalidRequest("AI input must be a string", field=key.value)
        return AIOperation(question=value)

    variant, label = _ARRAY_OPERATIONS[key]
    if not is_number_array(value):
        raise InvalidRequest(f"{label} input must be an array", field=key.value)
    return variant(numbers=tuple(value))
