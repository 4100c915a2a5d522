"""
NAVS13 parsing and validation.

Parsing has no side effects and never raises for bad input: failures come
back as one of the ``ParseError`` variants, checked in a fixed order (length,
country code, checksum).
"""

from navs13.checksum import ean13_check
from navs13.models.errors import (
    InvalidChecksum,
    InvalidCountryCode,
    InvalidLength,
    InvalidNavs13Error,
    ParseError,
)
from navs13.models.identifier import (
    EXPECTED_LENGTH,
    SWISS_COUNTRY_CODE,
    ValidatedIdentifier,
)


def extract_digits(text: str) -> list[int]:
    """Keep the decimal digits of ``text`` in order, dropping everything else."""
    return [int(char) for char in text if char.isdecimal()]


def parse(text: str) -> ValidatedIdentifier | ParseError:
    """
    Parse free-form text into a validated NAVS13.

    Separators, whitespace and letters are ignored, so ``756.1234.5678.97``,
    ``7561234567897`` and ``AVS 756 1234 5678 97`` are equivalent.

    Args:
        text: Any string

    Returns:
        The identifier on success, otherwise the first failure found
    """
    values = extract_digits(text)

    if len(values) != EXPECTED_LENGTH:
        return InvalidLength(count=len(values))

    prefix = tuple(values[:3])
    if prefix != SWISS_COUNTRY_CODE:
        return InvalidCountryCode(digits=prefix)

    digits = tuple(values[:12])
    check = values[12]
    if ean13_check(digits) != check:
        return InvalidChecksum(check=check)

    return ValidatedIdentifier(digits=digits, check=check)


def parse_or_raise(text: str) -> ValidatedIdentifier:
    """
    Parse a NAVS13, raising instead of returning the failure.

    Raises:
        InvalidNavs13Error: if the text is not a valid NAVS13
    """
    result = parse(text)
    if not isinstance(result, ValidatedIdentifier):
        raise InvalidNavs13Error(text, result)
    return result


def is_valid(text: str) -> bool:
    """
    Validate a NAVS13.

    Returns:
        True if ``text`` holds a structurally valid NAVS13
    """
    return isinstance(parse(text), ValidatedIdentifier)
