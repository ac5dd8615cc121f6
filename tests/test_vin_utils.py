"""
Test Suite for VIN Core Utilities
=================================

Tests covering:
- VIN constants (alphabet, weights, transliteration)
- Structural validation (length, characters)
- Check digit calculation and checksum validation
- Model year decoding

Run with: pytest tests/test_vin_utils.py -v
"""

import pytest
import sys
from pathlib import Path

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vin_parser.core.exceptions import (
    ChecksumMismatch,
    IllegalCharacter,
    IncorrectLength,
    InvalidCharacters,
    StructuralError,
    VINError,
)
from vin_parser.core.vin_utils import (
    VINConstants,
    VIN_LENGTH,
    VIN_VALID_CHARS,
    calculate_check_digit,
    decode_year,
    normalize_vin,
    validate_checksum,
    validate_vin_format,
)


# =============================================================================
# CONSTANTS TESTS
# =============================================================================

class TestVINConstants:
    """Tests for the static VIN tables."""

    def test_alphabet_excludes_ioq(self):
        """Test VIN alphabet is correct (no I, O, Q)."""
        assert 'I' not in VIN_VALID_CHARS
        assert 'O' not in VIN_VALID_CHARS
        assert 'Q' not in VIN_VALID_CHARS
        assert len(VIN_VALID_CHARS) == 33  # 10 digits + 23 letters

    def test_every_valid_char_has_value(self):
        """Test transliteration covers exactly the VIN alphabet."""
        assert set(VINConstants.CHAR_VALUES) == set(VIN_VALID_CHARS)

    def test_values_are_single_digits(self):
        assert all(0 <= v <= 9 for v in VINConstants.CHAR_VALUES.values())

    def test_digits_map_to_themselves(self):
        for d in "0123456789":
            assert VINConstants.CHAR_VALUES[d] == int(d)

    def test_weights(self):
        """Test there is one weight per position and the check digit weighs 0."""
        assert len(VINConstants.CHECKSUM_WEIGHTS) == VIN_LENGTH
        assert VINConstants.CHECKSUM_WEIGHTS[8] == 0

    def test_transliteration_is_read_only(self):
        with pytest.raises(TypeError):
            VINConstants.CHAR_VALUES['I'] = 1  # type: ignore[index]

    def test_year_codes_cover_thirty_years(self):
        assert len(VINConstants.YEAR_CODES) == VINConstants.YEAR_CYCLE_LENGTH
        for c in "UZ0IOQ":
            assert c not in VINConstants.YEAR_CODES


# =============================================================================
# STRUCTURAL VALIDATION TESTS
# =============================================================================

class TestValidateVINFormat:
    """Tests for validate_vin_format function."""

    def test_valid_vin(self):
        assert validate_vin_format("WP0ZZZ99ZTS392124") == "WP0ZZZ99ZTS392124"

    def test_lowercase_normalized(self):
        """Test that lowercase VINs are normalized to uppercase."""
        assert validate_vin_format("0123456789abcdefg") == "0123456789ABCDEFG"

    @pytest.mark.parametrize("vin", [
        " WP0ZZZ99ZTS392124",
        "WP0ZZZ99ZTS392124\n",
        "\tWP0ZZZ99ZTS392124\t",
    ])
    def test_surrounding_whitespace_counts_toward_length(self, vin):
        """Test that input is not trimmed before the length check."""
        with pytest.raises(IncorrectLength) as exc_info:
            validate_vin_format(vin)
        assert exc_info.value.length == len(vin)

    def test_unicode_case_mapping_cannot_change_length(self):
        """Test that 'ß' is not expanded to 'SS' to reach 17 characters."""
        with pytest.raises(IncorrectLength) as exc_info:
            validate_vin_format("WP0ZZZ99ZTS3921ß")
        assert exc_info.value.length == 16

    def test_unicode_case_mapping_cannot_admit_characters(self):
        """Test that 'ſ' (long s) is not accepted as 'S'."""
        with pytest.raises(InvalidCharacters) as exc_info:
            validate_vin_format("WP0ZZZ99ZTS39212ſ")
        assert exc_info.value.characters == {'ſ'}
        assert exc_info.value.positions == (17,)

    def test_empty_string(self):
        with pytest.raises(IncorrectLength) as exc_info:
            validate_vin_format("")
        assert exc_info.value.length == 0

    def test_invalid_length_short(self):
        with pytest.raises(IncorrectLength):
            validate_vin_format("WP0ZZZ99")

    def test_invalid_length_long(self):
        with pytest.raises(IncorrectLength) as exc_info:
            validate_vin_format("WP0ZZZ99ZTS39212400")
        assert exc_info.value.length == 19

    def test_length_error_is_structural(self):
        with pytest.raises(StructuralError):
            validate_vin_format("SHORT")

    def test_invalid_characters(self):
        """Test VIN with characters outside the alphabet."""
        with pytest.raises(InvalidCharacters) as exc_info:
            validate_vin_format("abcdefghioq_958.!")
        err = exc_info.value
        assert err.characters == {'I', 'O', 'Q', '_', '.', '!'}
        assert err.positions == (9, 10, 11, 12, 16, 17)

    def test_invalid_character_position(self):
        with pytest.raises(InvalidCharacters) as exc_info:
            validate_vin_format("W$0ZZZ99ZTS392124")
        assert exc_info.value.positions == (2,)
        assert exc_info.value.characters == {'$'}

    def test_interior_whitespace_rejected(self):
        with pytest.raises(InvalidCharacters):
            validate_vin_format("WP0ZZZ99 TS392124")

    def test_non_string_input(self):
        with pytest.raises(TypeError):
            validate_vin_format(12345)  # type: ignore[arg-type]

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            validate_vin_format("SHORT")

    def test_normalize_vin(self):
        assert normalize_vin("wp0") == "WP0"
        assert normalize_vin(" wp0 ") == " WP0 "
        assert normalize_vin("ßſ") == "ßſ"


# =============================================================================
# CHECKSUM TESTS
# =============================================================================

class TestCalculateCheckDigit:
    """Tests for check digit calculation."""

    @pytest.mark.parametrize("vin,expected", [
        ("1M8GDM9AXKP042788", 'X'),  # remainder 10
        ("WP0ZZZ99ZTS392124", '8'),
        ("1HGBH41JXMN109186", 'X'),
        ("5N1AN08U86C503579", '8'),
        ("11111111111111111", '1'),
        ("00000000000000000", '0'),
    ])
    def test_known_check_digits(self, vin, expected):
        assert calculate_check_digit(vin) == expected

    def test_check_position_ignored(self):
        """Test that position 9 does not affect the result."""
        assert calculate_check_digit("WP0ZZZ990TS392124") == calculate_check_digit("WP0ZZZ99ZTS392124")

    def test_lowercase_accepted(self):
        assert calculate_check_digit("1m8gdm9axkp042788") == 'X'

    def test_non_ascii_character_raises(self):
        with pytest.raises(IllegalCharacter) as exc_info:
            calculate_check_digit("WP0ZZZ99ZTS39212ſ")
        assert exc_info.value.position == 17

    def test_short_vin_raises(self):
        with pytest.raises(IncorrectLength):
            calculate_check_digit("SHORT")

    def test_untransliterable_character_raises(self):
        """Test that characters without a value raise IllegalCharacter."""
        with pytest.raises(IllegalCharacter) as exc_info:
            calculate_check_digit("1M8GDM9AXKP04278I")
        assert exc_info.value.character == 'I'
        assert exc_info.value.position == 17


class TestValidateChecksum:
    """Tests for checksum validation."""

    def test_valid_checksum(self):
        validate_checksum("1M8GDM9AXKP042788")

    def test_mismatch_carries_both_values(self):
        with pytest.raises(ChecksumMismatch) as exc_info:
            validate_checksum("WP0ZZZ99ZTS392124")
        assert exc_info.value.expected == '8'
        assert exc_info.value.received == 'Z'

    def test_lowercase_x_accepted(self):
        validate_checksum("1M8GDM9AxKP042788")

    def test_mismatch_message(self):
        with pytest.raises(VINError, match="8 expected, Z received"):
            validate_checksum("WP0ZZZ99ZTS392124")


# =============================================================================
# MODEL YEAR TESTS
# =============================================================================

class TestDecodeYear:
    """Tests for model year decoding."""

    def test_letter_code_is_ambiguous(self):
        """Test that letter codes return both 30-year cycle candidates."""
        assert decode_year('A', reference_year=2024) == (1980, 2010)
        assert decode_year('T', reference_year=2024) == (1996, 2026)

    def test_digit_code_unambiguous(self):
        """Test that digit year codes (2001-2009) yield a single year."""
        assert decode_year('5', reference_year=2024) == (2005,)

    def test_lookahead_bounds_candidates(self):
        assert decode_year('W', reference_year=2024) == (1998,)
        assert decode_year('W', reference_year=2026) == (1998, 2028)
        assert decode_year('W', reference_year=2024, lookahead=4) == (1998, 2028)

    def test_third_cycle(self):
        assert decode_year('A', reference_year=2040) == (1980, 2010, 2040)

    def test_at_least_one_year(self):
        """Test that the first cycle year is returned even for an early reference."""
        assert decode_year('Y', reference_year=1985) == (2000,)

    def test_lowercase_code(self):
        assert decode_year('t', reference_year=2024) == (1996, 2026)

    def test_default_reference_year(self):
        years = decode_year('A')
        assert years[:2] == (1980, 2010)

    @pytest.mark.parametrize("code", ['U', 'Z', '0', 'I', 'O', 'Q', '$', '', 'AB', 'ſ'])
    def test_invalid_code_raises(self, code):
        with pytest.raises(IllegalCharacter) as exc_info:
            decode_year(code)
        assert exc_info.value.position == VINConstants.YEAR_POSITION
