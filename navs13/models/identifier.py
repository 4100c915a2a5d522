"""
Validated NAVS13 identifier model.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from navs13.checksum import PAYLOAD_LENGTH, ean13_check

# Swiss ISO 3166-1 numeric country code, digit by digit
SWISS_COUNTRY_CODE: tuple[int, int, int] = (7, 5, 6)
EXPECTED_LENGTH = PAYLOAD_LENGTH + 1

Digit = Annotated[int, Field(ge=0, le=9)]


class ValidatedIdentifier(BaseModel):
    """
    A structurally valid NAVS13.

    Only built by ``parse`` and ``generate``. Instances are immutable and
    always satisfy the country code and checksum invariants; building one by
    hand with inconsistent values raises ``pydantic.ValidationError``.

    Note that a valid structure does not mean the number was ever issued.
    """

    model_config = ConfigDict(frozen=True)

    digits: tuple[Digit, ...] = Field(
        ...,
        min_length=PAYLOAD_LENGTH,
        max_length=PAYLOAD_LENGTH,
        description="Country code followed by the nine free digits",
    )
    check: Digit = Field(..., description="EAN-13 check digit")

    @model_validator(mode="after")
    def check_invariants(self) -> "ValidatedIdentifier":
        if self.digits[:3] != SWISS_COUNTRY_CODE:
            raise ValueError(f"Country code must be 756, got {self.digits[:3]}")
        if ean13_check(self.digits) != self.check:
            raise ValueError(f"Check digit {self.check} does not match the payload")
        return self

    @property
    def country_code(self) -> tuple[int, int, int]:
        return self.digits[0], self.digits[1], self.digits[2]

    @property
    def payload(self) -> tuple[int, ...]:
        """The nine free digits between the country code and the check digit."""
        return self.digits[3:]

    @property
    def compact(self) -> str:
        """All 13 digits without separators."""
        return "".join(str(d) for d in self.digits) + str(self.check)

    def __str__(self) -> str:
        return format_identifier(self)


def format_identifier(identifier: ValidatedIdentifier) -> str:
    """
    Render the canonical ``DDD.DDDD.DDDD.DC`` form.

    Example: 756.1234.5678.97
    """
    text = identifier.compact
    return f"{text[0:3]}.{text[3:7]}.{text[7:11]}.{text[11:13]}"
