"""
EAN-13 check digit for the NAVS13 payload.
"""

from collections.abc import Sequence

PAYLOAD_LENGTH = 12


def ean13_check(digits: Sequence[int]) -> int:
    """
    Calculate the EAN-13 check digit of a 12 digit payload.

    Algorithm:
    1. Multiply digits at even indexes (0, 2, 4, ...) by 1
    2. Multiply digits at odd indexes (1, 3, 5, ...) by 3
    3. Sum all results
    4. Check digit = 0 if the sum is a multiple of 10, else 10 - (sum mod 10)

    Args:
        digits: 12 digit values in [0, 9]

    Returns:
        The check digit

    Raises:
        ValueError: if the payload is malformed
    """
    if len(digits) != PAYLOAD_LENGTH:
        raise ValueError(f"Payload must have exactly {PAYLOAD_LENGTH} digits, got {len(digits)}")

    total = 0
    for i, digit in enumerate(digits):
        if not 0 <= digit <= 9:
            raise ValueError(f"Invalid digit in payload: {digit}")
        weight = 1 if i % 2 == 0 else 3
        total += digit * weight

    return (10 - (total % 10)) % 10
