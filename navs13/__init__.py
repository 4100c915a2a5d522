"""
Validation and generation of Swiss social insurance numbers (NAVS13).

Only the structure is checked: the 756 country code and the EAN-13 check
digit. A valid structure does not mean the number was issued.
"""

from navs13.avs import generate, generate_many, is_valid, parse, parse_or_raise
from navs13.checksum import ean13_check
from navs13.models import (
    InvalidChecksum,
    InvalidCountryCode,
    InvalidLength,
    InvalidNavs13Error,
    Navs13Error,
    ParseError,
    ValidatedIdentifier,
    format_identifier,
)

__all__ = [
    "InvalidChecksum",
    "InvalidCountryCode",
    "InvalidLength",
    "InvalidNavs13Error",
    "Navs13Error",
    "ParseError",
    "ValidatedIdentifier",
    "ean13_check",
    "format_identifier",
    "generate",
    "generate_many",
    "is_valid",
    "parse",
    "parse_or_raise",
]
