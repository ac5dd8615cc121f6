"""
Test Suite for VIN Decoder
==========================

Tests covering:
- check_validity / verify_checksum / get_info facade
- VINInfo record and derived accessors
- Decoder configuration
- Property-based validation testing

Run with: pytest tests/test_vin_decoder.py -v
"""

import dataclasses
import pytest
import sys
from pathlib import Path

from hypothesis import given
from hypothesis import strategies as st

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vin_parser import (
    ChecksumMismatch,
    IncorrectLength,
    InvalidCharacters,
    StructuralError,
    UnknownManufacturer,
    VINDecoder,
    VINInfo,
    calculate_check_digit,
    check_validity,
    get_info,
    is_valid,
    verify_checksum,
)
from vin_parser.config import DecoderConfig

VIN_ALPHABET = "0123456789ABCDEFGHJKLMNPRSTUVWXYZ"
CHECK_CHARS = "0123456789X"


# =============================================================================
# TEST FIXTURES
# =============================================================================

@pytest.fixture
def decoder():
    """Decoder with a fixed reference year."""
    return VINDecoder(DecoderConfig(year_lookahead=2, reference_year=2024))


# =============================================================================
# FACADE TESTS
# =============================================================================

class TestCheckValidity:
    """Tests for check_validity."""

    def test_known_good(self):
        assert check_validity("WP0ZZZ99ZTS392124") == "WP0ZZZ99ZTS392124"

    def test_all_zeros(self):
        assert check_validity("00000000000000000") == "00000000000000000"

    def test_does_not_check_checksum(self):
        # Check digit 'Z' is wrong but structure is fine
        check_validity("WP0ZZZ99ZTS392124")

    def test_empty(self):
        with pytest.raises(IncorrectLength):
            check_validity("")

    def test_bad_symbol(self):
        with pytest.raises(InvalidCharacters):
            check_validity("W$0ZZZ99ZTS392124")


class TestVerifyChecksum:
    """Tests for verify_checksum."""

    def test_valid_x_check_digit(self):
        assert verify_checksum("1M8GDM9AXKP042788") == "1M8GDM9AXKP042788"

    def test_invalid_checksum(self):
        with pytest.raises(ChecksumMismatch) as exc_info:
            verify_checksum("WP0ZZZ99ZTS392124")
        assert exc_info.value.expected == '8'
        assert exc_info.value.received == 'Z'

    def test_structure_checked_first(self):
        """Test that structural errors win over checksum errors."""
        with pytest.raises(IncorrectLength):
            verify_checksum("1M8GDM9AYKP04278")
        with pytest.raises(InvalidCharacters):
            verify_checksum("1M8GDM9AYKP04278I")

    @pytest.mark.parametrize("vin", [
        "1M8GDM9AxKP042788",
        "1M8GdM9AXKP042788",
        "5n1an08u86c503579",
        "2C3CDYBT8EH395611",
    ])
    def test_valid_variants(self, vin):
        verify_checksum(vin)

    @pytest.mark.parametrize("vin", [
        "\t1M8GDM9AXKP042788\t",
        " 5N1AN08U86C503579",
        "2C3CDYBT8EH395611\n",
    ])
    def test_padded_vin_rejected(self, vin):
        """Test that surrounding whitespace is part of the input, not trimmed."""
        with pytest.raises(IncorrectLength):
            verify_checksum(vin)

    def test_is_valid(self):
        assert is_valid("1M8GDM9AXKP042788") is True
        assert is_valid("1M8GDM9AYKP042788") is False
        assert is_valid("SHORT") is False


class TestGetInfo:
    """Tests for get_info."""

    def test_porsche(self, decoder):
        info = decoder.get_info("WP0ZZZ998TS392124")
        assert info.vin == "WP0ZZZ998TS392124"
        assert info.country == "Germany/West Germany"
        assert info.manufacturer == "Porsche car"
        assert info.region == "Europe"
        assert info.valid_checksum is True
        assert info.years == (1996, 2026)

    def test_case_insensitive(self, decoder):
        lower = decoder.get_info("wp0zzz998ts392124")
        upper = decoder.get_info("WP0ZZZ998TS392124")
        assert lower == upper
        assert lower.vin == "wp0zzz998ts392124".upper()

    def test_checksum_mismatch_does_not_abort(self, decoder):
        """Test that a bad check digit is reported in the record, not raised."""
        info = decoder.get_info("WP0ZZZ99ZTS392124")
        assert info.manufacturer == "Porsche car"
        assert info.valid_checksum is False
        assert info.checksum.expected == '8'
        assert info.checksum.received == 'Z'

    def test_unknown_manufacturer(self, decoder):
        with pytest.raises(UnknownManufacturer):
            decoder.get_info("00000000000000000")

    def test_structural_error(self, decoder):
        with pytest.raises(StructuralError):
            decoder.get_info("WP0ZZZ998TS39212")

    def test_non_year_code(self, decoder):
        """Test that a position 10 character that is not a year code gives no years."""
        info = decoder.get_info("WP0ZZZ998ZS392124")
        assert info.years is None

    def test_north_american_vin(self, decoder):
        info = decoder.get_info("5N1AN08U86C503579")
        assert info.manufacturer == "Nissan USA"
        assert info.country == "United States"
        assert info.region == "North America"
        assert info.years == (2006,)

    def test_module_function(self):
        info = get_info("wp0zzz998ts392124")
        assert isinstance(info, VINInfo)
        assert info.manufacturer == "Porsche car"


# =============================================================================
# VININFO TESTS
# =============================================================================

class TestVINInfo:
    """Tests for VINInfo accessors."""

    def test_sections(self, decoder):
        info = decoder.get_info("WP0ZZZ998TS392124")
        assert info.wmi == "WP0"
        assert info.vds == "ZZZ998"
        assert info.vis == "TS392124"
        assert info.check_digit == "8"
        assert info.year_code == "T"
        assert info.plant_code == "S"
        assert info.serial_number == "392124"
        assert info.region_code == "W"
        assert info.country_code == "WP"

    def test_small_manufacturer(self, decoder):
        info = decoder.get_info("TM912345678901234")
        assert info.small_manufacturer is True
        assert info.manufacturer_code == "TM9901"
        assert info.manufacturer == "Škoda trolleybuses (Czech Republic)"

    def test_regular_manufacturer(self, decoder):
        info = decoder.get_info("WP0ZZZ998TS392124")
        assert info.small_manufacturer is False
        assert info.manufacturer_code == "WP0"

    def test_immutable(self, decoder):
        info = decoder.get_info("WP0ZZZ998TS392124")
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.vin = "X"  # type: ignore[misc]

    def test_to_dict(self, decoder):
        result = decoder.get_info("WP0ZZZ99ZTS392124").to_dict()
        assert result['vin'] == "WP0ZZZ99ZTS392124"
        assert result['valid_checksum'] is False
        assert result['expected_check_digit'] == '8'
        assert result['years'] == [1996, 2026]


class TestDecoderConfig:
    """Tests for configuration-driven year decoding."""

    def test_lookahead(self):
        decoder = VINDecoder(DecoderConfig(year_lookahead=0, reference_year=2027))
        assert decoder.decode_years('W') == (1998,)

    def test_global_config_read_at_call_time(self, monkeypatch):
        from vin_parser import config as config_module

        monkeypatch.setenv('VIN_REFERENCE_YEAR', '2040')
        config_module.reset_config()
        try:
            assert VINDecoder().decode_years('A') == (1980, 2010, 2040)
        finally:
            config_module.reset_config()


# =============================================================================
# PROPERTY-BASED TESTS
# =============================================================================

vin_bodies = st.text(alphabet=VIN_ALPHABET, min_size=17, max_size=17)


def _with_check_digit(body: str) -> str:
    return body[:8] + calculate_check_digit(body) + body[9:]


@given(st.text(max_size=40).filter(lambda s: len(s) != 17))
def test_wrong_length_is_structural_error(vin):
    with pytest.raises(StructuralError):
        check_validity(vin)


@given(vin_bodies, st.sampled_from(" \t\n"), st.booleans())
def test_padded_vin_is_structural_error(vin, pad, leading):
    with pytest.raises(StructuralError):
        check_validity(pad + vin if leading else vin + pad)


@given(
    st.text(alphabet=VIN_ALPHABET, min_size=16, max_size=16),
    st.sampled_from("IOQioq"),
    st.integers(min_value=0, max_value=16),
)
def test_forbidden_letters_rejected(body, letter, index):
    with pytest.raises(InvalidCharacters):
        check_validity(body[:index] + letter + body[index:])


@given(vin_bodies)
def test_checksum_case_insensitive(vin):
    assert is_valid(vin.lower()) == is_valid(vin)


@given(vin_bodies)
def test_computed_check_digit_verifies(body):
    verify_checksum(_with_check_digit(body))


@given(vin_bodies, st.sampled_from(CHECK_CHARS))
def test_mutated_check_digit_fails(body, replacement):
    vin = _with_check_digit(body)
    expected = vin[8]
    if replacement == expected:
        return

    mutated = vin[:8] + replacement + vin[9:]
    with pytest.raises(ChecksumMismatch) as exc_info:
        verify_checksum(mutated)
    assert exc_info.value.expected == expected
    assert exc_info.value.received == replacement
