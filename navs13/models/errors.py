"""
Parse failures and the exception hierarchy.

Expected invalid input is reported with one of the ``ParseError`` variants,
returned as a value by the parser. Exceptions are reserved for callers that
explicitly ask for one (``parse_or_raise``).
"""

from abc import abstractmethod
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from navs13.models.identifier import Digit, EXPECTED_LENGTH


class _ParseErrorBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Process exit status used by the command-line front end
    exit_code: ClassVar[int]

    @property
    @abstractmethod
    def description(self) -> str:
        """Human readable reason, shown by the command-line tool."""

    def __str__(self) -> str:
        return self.description


class InvalidLength(_ParseErrorBase):
    """The input does not hold exactly 13 digits."""

    kind: Literal["invalid_length"] = "invalid_length"
    exit_code: ClassVar[int] = 64
    count: int = Field(..., ge=0, description="Number of digits found")

    @property
    def description(self) -> str:
        return f"Number of digits should be {EXPECTED_LENGTH}. Found: {self.count}"


class InvalidCountryCode(_ParseErrorBase):
    """The first three digits are not 756."""

    kind: Literal["invalid_country_code"] = "invalid_country_code"
    exit_code: ClassVar[int] = 65
    digits: tuple[Digit, Digit, Digit]

    @property
    def description(self) -> str:
        prefix = "".join(str(d) for d in self.digits)
        return f"{prefix} isn't iso-3166 for Switzerland."


class InvalidChecksum(_ParseErrorBase):
    """The trailing digit does not match the EAN-13 checksum."""

    kind: Literal["invalid_checksum"] = "invalid_checksum"
    exit_code: ClassVar[int] = 66
    check: Digit = Field(..., description="Check digit carried by the input")

    @property
    def description(self) -> str:
        return f"{self.check} is an invalid EAN-13 check digit."


ParseError = Annotated[
    Union[InvalidLength, InvalidCountryCode, InvalidChecksum],
    Field(discriminator="kind"),
]


class Navs13Error(Exception):
    """Base exception for all NAVS13 errors."""


class InvalidNavs13Error(Navs13Error, ValueError):
    """Raised when a string was required to be a valid NAVS13 and is not."""

    def __init__(self, value: str, error: ParseError) -> None:
        self.value = value
        self.error = error
        super().__init__(f"{value!r} is not a valid NAVS13: {error.description}")
