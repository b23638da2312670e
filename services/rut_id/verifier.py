"""
Módulo 11 verifier ("dígito verificador") for Chilean RUT numbers.

The algorithm:
1. Multiply each digit (from right to left) by sequence 2,3,4,5,6,7,2,3,4...
2. Sum all products
3. Calculate 11 - (sum % 11)
4. If result is 11, DV is 0; if 10, DV is K; otherwise DV is the result
"""

from .errors import NegativeNumber

MIN_WEIGHT = 2
MAX_WEIGHT = 7


def compute_verifier(number: int) -> str:
    """
    Compute the verifier character for a RUT body.

    Args:
        number: Numeric body of the RUT (no verifier)

    Returns:
        One of '0'-'9' or 'K'

    Raises:
        NegativeNumber: If number is negative

    Examples:
        >>> compute_verifier(16894365)
        '2'
        >>> compute_verifier(1000005)
        'K'
    """
    if number < 0:
        raise NegativeNumber(number)

    total = 0
    weight = MIN_WEIGHT
    n = number

    while n > 0:
        total += (n % 10) * weight
        weight = MIN_WEIGHT if weight == MAX_WEIGHT else weight + 1
        n //= 10

    result = 11 - (total % 11)

    if 1 <= result <= 9:
        return str(result)
    if result == 10:
        return "K"
    assert result == 11, f"unreachable verifier value {result}"
    return "0"


def count_digits(number: int) -> int:
    """Count decimal digits of a non-negative number (0 has one digit)."""
    if number < 0:
        raise NegativeNumber(number)

    count = 1
    while number >= 10:
        number //= 10
        count += 1
    return count
