"""
Random NAVS13 generation for test data.

Generated numbers are structurally valid only; they are not issued numbers.
"""

import random

from navs13.checksum import ean13_check
from navs13.config import get_settings
from navs13.models.identifier import SWISS_COUNTRY_CODE, ValidatedIdentifier

FREE_DIGITS = 9

# OS entropy, no shared sequence between callers
_system_random = random.SystemRandom()


def generate(random_source: random.Random | None = None) -> ValidatedIdentifier:
    """
    Create a structurally valid Swiss NAVS13.

    Args:
        random_source: Source of digits, e.g. ``random.Random(seed)`` for
            reproducible output. Defaults to ``random.SystemRandom``.

    Returns:
        A new identifier with the 756 prefix and a matching check digit
    """
    rng = random_source or _system_random
    digits = SWISS_COUNTRY_CODE + tuple(rng.randrange(10) for _ in range(FREE_DIGITS))
    return ValidatedIdentifier(digits=digits, check=ean13_check(digits))


def generate_many(
    count: int,
    random_source: random.Random | None = None,
) -> list[ValidatedIdentifier]:
    """
    Create several identifiers.

    Raises:
        ValueError: if count is outside 1..max_generate_count
    """
    limit = get_settings().max_generate_count
    if not 1 <= count <= limit:
        raise ValueError(f"count must be between 1 and {limit}, got {count}")

    return [generate(random_source) for _ in range(count)]
