"""Tests for NPI validation."""

import pytest

from onc_registration.validators import NPI_PREFIX, IdentifierValidator, luhn_checksum_valid
from onc_registration.validators.npi import ERROR_CHECK_DIGIT, ERROR_DIGITS, ERROR_LENGTH


@pytest.fixture
def validator() -> IdentifierValidator:
    return IdentifierValidator()


class TestValidNpi:
    """NPIs that pass validation."""

    def test_valid_npi(self, validator: IdentifierValidator) -> None:
        """Test a known-good NPI validates with no error."""
        result = validator.validate("1234567893")

        assert result.valid is True
        assert result.error is None

    @pytest.mark.parametrize(
        "raw",
        ["123 456 7893", "123-456-7893", "  123-456 7893  ", "1234 5678 93", "123\t456\n7893"],
    )
    def test_separators_are_ignored(self, validator: IdentifierValidator, raw: str) -> None:
        """Test whitespace and hyphens do not change the outcome."""
        assert validator.validate(raw) == validator.validate("1234567893")

    def test_repeated_calls_are_identical(self, validator: IdentifierValidator) -> None:
        """Test validation is deterministic."""
        assert validator.validate("1234567890") == validator.validate("1234567890")


class TestInvalidNpi:
    """NPIs that fail validation, each with a distinct reason."""

    @pytest.mark.parametrize("raw", ["123456789", "12345678901", "", "   "])
    def test_wrong_length(self, validator: IdentifierValidator, raw: str) -> None:
        """Test anything other than ten characters after stripping is rejected."""
        result = validator.validate(raw)

        assert result.valid is False
        assert result.error == ERROR_LENGTH
        assert "exactly 10 digits" in result.error

    @pytest.mark.parametrize("raw", ["123456789A", "123456789!", "12345.7893", "١٢٣٤٥٦٧٨٩٣"])
    def test_non_digits(self, validator: IdentifierValidator, raw: str) -> None:
        """Test letters, punctuation and non-ASCII digits are rejected."""
        result = validator.validate(raw)

        assert result.valid is False
        assert result.error == ERROR_DIGITS
        assert "only digits" in result.error

    def test_bad_check_digit(self, validator: IdentifierValidator) -> None:
        """Test a well-formed NPI with the wrong check digit."""
        result = validator.validate("1234567890")

        assert result.valid is False
        assert result.error == ERROR_CHECK_DIGIT
        assert "invalid check digit" in result.error

    def test_format_and_checksum_reasons_differ(self, validator: IdentifierValidator) -> None:
        """Test malformed input is distinguishable from a plausible but wrong NPI."""
        assert validator.validate("123456789A").error != validator.validate("1234567890").error


class TestLuhn:
    """Tests for the Luhn helper."""

    def test_prefix_is_required(self) -> None:
        """Test the NPI only passes with the issuer prefix prepended."""
        assert luhn_checksum_valid(NPI_PREFIX + "1234567893")
        assert not luhn_checksum_valid("1234567893")

    @pytest.mark.parametrize("number", ["79927398713", "0", "18"])
    def test_known_valid_numbers(self, number: str) -> None:
        """Test textbook Luhn-valid numbers."""
        assert luhn_checksum_valid(number)

    @pytest.mark.parametrize("number", ["79927398710", "1", "19"])
    def test_known_invalid_numbers(self, number: str) -> None:
        """Test textbook Luhn-invalid numbers."""
        assert not luhn_checksum_valid(number)
