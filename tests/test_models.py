"""
Tests for identifier and parse error models.
"""

import subprocess
import sys
from pathlib import Path
from typing import Literal

import pytest
from pydantic import TypeAdapter, ValidationError

from navs13.models import (
    InvalidChecksum,
    InvalidCountryCode,
    InvalidLength,
    ParseError,
    ValidatedIdentifier,
    format_identifier,
)
from navs13.models.errors import _ParseErrorBase

DIGITS = (7, 5, 6, 2, 4, 6, 5, 8, 9, 3, 5, 6)
PROJECT_ROOT = Path(__file__).resolve().parents[1]


class TestValidatedIdentifier:
    """Tests for ValidatedIdentifier model."""

    def test_create(self):
        """Test creating a consistent identifier."""
        identifier = ValidatedIdentifier(digits=DIGITS, check=4)

        assert identifier.country_code == (7, 5, 6)
        assert identifier.payload == (2, 4, 6, 5, 8, 9, 3, 5, 6)
        assert identifier.compact == "7562465893564"

    def test_list_coerced_to_tuple(self):
        """Test that digits given as a list are stored as a tuple."""
        identifier = ValidatedIdentifier(digits=list(DIGITS), check=4)
        assert identifier.digits == DIGITS

    def test_rejects_wrong_country_code(self):
        """Test that a non-Swiss prefix cannot be built."""
        with pytest.raises(ValidationError, match="Country code"):
            ValidatedIdentifier(digits=(4, 7, 1, 9, 5, 1, 2, 0, 0, 2, 8, 8), check=9)

    def test_rejects_wrong_check(self):
        """Test that an inconsistent check digit cannot be built."""
        with pytest.raises(ValidationError, match="Check digit"):
            ValidatedIdentifier(digits=DIGITS, check=5)

    @pytest.mark.parametrize("digits", [DIGITS[:11], DIGITS + (0,)])
    def test_rejects_wrong_length(self, digits):
        """Test that digits must hold exactly 12 values."""
        with pytest.raises(ValidationError):
            ValidatedIdentifier(digits=digits, check=4)

    def test_rejects_out_of_range_digit(self):
        """Test that each digit must be in 0-9."""
        with pytest.raises(ValidationError):
            ValidatedIdentifier(digits=(7, 5, 6, 12, 4, 6, 5, 8, 9, 3, 5, 6), check=4)

    def test_immutable(self):
        """Test that fields cannot be reassigned."""
        identifier = ValidatedIdentifier(digits=DIGITS, check=4)
        with pytest.raises(ValidationError):
            identifier.check = 5

    def test_value_semantics(self):
        """Test equality and hashing by value."""
        a = ValidatedIdentifier(digits=DIGITS, check=4)
        b = ValidatedIdentifier(digits=DIGITS, check=4)
        assert a == b
        assert len({a, b}) == 1


class TestFormatting:
    """Tests for the canonical text form."""

    def test_format(self):
        """Test the DDD.DDDD.DDDD.DC layout."""
        identifier = ValidatedIdentifier(digits=(7, 5, 6, 1, 2, 3, 4, 5, 6, 7, 8, 9), check=7)
        assert format_identifier(identifier) == "756.1234.5678.97"

    def test_str(self):
        """Test that str() uses the canonical layout."""
        identifier = ValidatedIdentifier(digits=(7, 5, 6, 4, 9, 6, 5, 7, 6, 6, 5, 6), check=0)
        assert str(identifier) == "756.4965.7665.60"


class TestParseErrors:
    """Tests for parse error variants."""

    def test_exit_codes(self):
        """Test that each kind has its own exit code."""
        assert InvalidLength(count=12).exit_code == 64
        assert InvalidCountryCode(digits=(4, 7, 1)).exit_code == 65
        assert InvalidChecksum(check=5).exit_code == 66

    def test_descriptions(self):
        """Test human readable descriptions."""
        assert InvalidLength(count=12).description == "Number of digits should be 13. Found: 12"
        assert InvalidCountryCode(digits=(4, 7, 1)).description == "471 isn't iso-3166 for Switzerland."
        assert InvalidChecksum(check=5).description == "5 is an invalid EAN-13 check digit."
        assert str(InvalidChecksum(check=5)) == "5 is an invalid EAN-13 check digit."

    def test_dump(self):
        """Test that dumps carry the kind tag and the payload only."""
        assert InvalidLength(count=12).model_dump() == {"kind": "invalid_length", "count": 12}
        assert InvalidCountryCode(digits=(4, 7, 1)).model_dump() == {
            "kind": "invalid_country_code",
            "digits": (4, 7, 1),
        }

    def test_discriminated_union(self):
        """Test loading a variant from its tagged form."""
        adapter = TypeAdapter(ParseError)
        error = adapter.validate_python({"kind": "invalid_checksum", "check": 3})
        assert error == InvalidChecksum(check=3)

    def test_country_code_needs_three_digits(self):
        """Test that the observed prefix is a triple."""
        with pytest.raises(ValidationError):
            InvalidCountryCode(digits=(4, 7))

    def test_frozen(self):
        """Test that errors are immutable."""
        error = InvalidLength(count=12)
        with pytest.raises(ValidationError):
            error.count = 13

    def test_description_is_abstract(self):
        """Test that a variant must define its description."""

        class Incomplete(_ParseErrorBase):
            kind: Literal["incomplete"] = "incomplete"

        with pytest.raises(TypeError):
            Incomplete()


class TestImports:
    """Tests that modules import on their own."""

    @pytest.mark.parametrize(
        "module",
        ["navs13.checksum", "navs13.models.identifier", "navs13.models.errors", "navs13.avs.validator"],
    )
    def test_fresh_import(self, module):
        """Test importing a module first in a new interpreter."""
        subprocess.run(
            [sys.executable, "-c", f"import {module}"],
            cwd=PROJECT_ROOT,
            check=True,
        )
