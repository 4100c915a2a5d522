"""
Pydantic models for identifiers and parse failures.
"""

from navs13.models.errors import (
    InvalidChecksum,
    InvalidCountryCode,
    InvalidLength,
    InvalidNavs13Error,
    Navs13Error,
    ParseError,
)
from navs13.models.identifier import (
    SWISS_COUNTRY_CODE,
    ValidatedIdentifier,
    format_identifier,
)

__all__ = [
    # Identifier
    "SWISS_COUNTRY_CODE",
    "ValidatedIdentifier",
    "format_identifier",
    # Errors
    "InvalidChecksum",
    "InvalidCountryCode",
    "InvalidLength",
    "ParseError",
    # Exceptions
    "InvalidNavs13Error",
    "Navs13Error",
]
