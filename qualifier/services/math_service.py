"""
Math Operations - Fibonacci, prime filter, LCM and HCF.

Pure functions, no I/O. Integer widths follow the wire contract:
Fibonacci terms and LCM/HCF inputs are 64-bit signed, prime filter
inputs are 32-bit signed. Overflow wraps rather than raising.
"""
import math
from functools import reduce
from typing import List, Optional, Sequence, Tuple, Union

from qualifier.core.exceptions import InvalidRequest
from qualifier.core.validators import truncate_number, wrap_signed

Number = Union[int, float]


def generate_fibonacci(n: int) -> List[int]:
    """
    Generate the first n Fibonacci numbers, starting 0, 1, 1, 2, ...

    Args:
        n: Number of terms

    Returns:
        List of n terms (empty for n == 0)

    Raises:
        InvalidRequest: If n is negative
    """
    if n < 0:
        raise InvalidRequest("Input must be a non-negative integer", field="fibonacci")

    if n == 0:
        return []
    if n == 1:
        return [0]

    sequence = [0, 1]
    for i in range(2, n):
        sequence.append(wrap_signed(sequence[i - 1] + sequence[i - 2], 64))

    return sequence


def is_prime(num: int) -> bool:
    """Trial division by odd numbers up to floor(sqrt(num))."""
    if num < 2:
        return False
    if num == 2:
        return True
    if num % 2 == 0:
        return False

    for i in range(3, math.isqrt(num) + 1, 2):
        if num % i == 0:
            return False
    return True


def filter_primes(numbers: Optional[Sequence[Number]]) -> List[int]:
    """
    Keep the prime elements of a list, in their original order.

    Each element is truncated to a 32-bit integer first; the truncated
    values are what gets returned.

    Raises:
        InvalidRequest: If numbers is None
    """
    if numbers is None:
        raise InvalidRequest("Input must be an array", field="prime")

    truncated = (truncate_number(value, 32) for value in numbers)
    return [value for value in truncated if is_prime(value)]


def _positive_longs(numbers: Optional[Sequence[Number]], field: str) -> List[int]:
    """Truncate to 64-bit and check the shared LCM/HCF input constraints."""
    if not numbers:
        raise InvalidRequest("Input must be a non-empty array", field=field)

    longs = [truncate_number(value, 64) for value in numbers]
    if any(value <= 0 for value in longs):
        raise InvalidRequest("All elements must be positive integers", field=field)

    return longs


def _truncated_divmod(a: int, b: int) -> Tuple[int, int]:
    """Quotient rounded toward zero; remainder takes the dividend's sign."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def gcd(a: int, b: int) -> int:
    """
    Euclidean algorithm: gcd(a, 0) = a, gcd(a, b) = gcd(b, a mod b).

    The remainder follows the dividend's sign, so a running LCM that
    wrapped negative keeps a negative divisor through the fold.
    """
    while b != 0:
        a, b = b, _truncated_divmod(a, b)[1]
    return a


def lcm(a: int, b: int) -> int:
    """|a * b| / gcd(a, b), with the product in 64-bit arithmetic."""
    # abs() of the most negative 64-bit value wraps back onto itself
    product = wrap_signed(abs(wrap_signed(a * b, 64)), 64)
    return wrap_signed(_truncated_divmod(product, gcd(a, b))[0], 64)


def calculate_lcm(numbers: Optional[Sequence[Number]]) -> int:
    """
    Least common multiple of a non-empty list of positive integers.

    Folds left to right: lcm(lcm(lcm(x0, x1), x2), ...).

    Raises:
        InvalidRequest: If the list is empty or any element is <= 0
    """
    return reduce(lcm, _positive_longs(numbers, "lcm"))


def calculate_hcf(numbers: Optional[Sequence[Number]]) -> int:
    """
    Highest common factor of a non-empty list of positive integers.

    Raises:
        InvalidRequest: If the list is empty or any element is <= 0
    """
    return reduce(gcd, _positive_longs(numbers, "hcf"))
