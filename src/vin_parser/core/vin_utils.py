"""
VIN Utilities - Single Source of Truth
======================================

Constants, structural validation, checksum calculation and model year
decoding for ISO 3779 Vehicle Identification Numbers.

Every other module calls into these functions rather than implementing its
own checksum or alphabet logic.

Author: VIN Parser Project
Date: October 2026
"""

import datetime
import logging
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple

from .exceptions import (
    ChecksumMismatch,
    IllegalCharacter,
    IncorrectLength,
    InvalidCharacters,
)

logger = logging.getLogger(__name__)


# =============================================================================
# VIN CONSTANTS
# =============================================================================

class VINConstants:
    """Immutable VIN constants per ISO 3779 / NHTSA."""

    LENGTH: int = 17

    # Valid characters (I, O, Q excluded to avoid confusion with 1, 0)
    VALID_CHARS: FrozenSet[str] = frozenset("0123456789ABCDEFGHJKLMNPRSTUVWXYZ")
    INVALID_CHARS: FrozenSet[str] = frozenset("IOQ")

    # Position indices (1-based as per ISO 3779)
    CHECK_DIGIT_POSITION: int = 9
    YEAR_POSITION: int = 10
    PLANT_POSITION: int = 11
    SEQUENTIAL_START: int = 12
    SEQUENTIAL_END: int = 17

    # Checksum weights by position (NHTSA standard)
    CHECKSUM_WEIGHTS: Tuple[int, ...] = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)
    CHECKSUM_MODULUS: int = 11
    CHECKSUM_OVERFLOW_CHAR: str = 'X'

    # Character to value mapping for checksum (ISO 3779)
    CHAR_VALUES: Mapping[str, int] = MappingProxyType({
        'A': 1, 'B': 2, 'C': 3, 'D': 4, 'E': 5, 'F': 6, 'G': 7, 'H': 8,
        'J': 1, 'K': 2, 'L': 3, 'M': 4, 'N': 5, 'P': 7, 'R': 9,
        'S': 2, 'T': 3, 'U': 4, 'V': 5, 'W': 6, 'X': 7, 'Y': 8, 'Z': 9,
        '0': 0, '1': 1, '2': 2, '3': 3, '4': 4, '5': 5, '6': 6, '7': 7, '8': 8, '9': 9,
    })

    # Model year codes, one per year starting at 1980, repeating every 30 years.
    # U, Z and 0 are never used as year codes.
    YEAR_CODES: str = "ABCDEFGHJKLMNPRSTVWXY123456789"
    YEAR_CYCLE_START: int = 1980
    YEAR_CYCLE_LENGTH: int = 30


VIN_LENGTH = VINConstants.LENGTH
VIN_VALID_CHARS = VINConstants.VALID_CHARS
VIN_INVALID_CHARS = VINConstants.INVALID_CHARS

_CHECK_DIGIT_INDEX = VINConstants.CHECK_DIGIT_POSITION - 1
_YEAR_INDEX = VINConstants.YEAR_POSITION - 1


# =============================================================================
# VIN VALIDATION
# =============================================================================

def normalize_vin(vin: str) -> str:
    """
    Canonicalize a VIN candidate by uppercasing its ASCII letters.

    The length never changes: whitespace is kept, and non-ASCII characters
    are left as they are so they fail the alphabet check instead of being
    case-mapped into it ('ß' -> 'SS', 'ſ' -> 'S').

    Raises:
        TypeError: If vin is not a string
    """
    if not isinstance(vin, str):
        raise TypeError(f"Expected string, got {type(vin).__name__}")
    return ''.join(c.upper() if c.isascii() else c for c in vin)


def validate_vin_format(vin: str) -> str:
    """
    Check that a VIN has a valid format (length and characters).

    Does NOT check the checksum. Use validate_checksum() for that.

    Args:
        vin: VIN string to check (any case)

    Returns:
        The canonical uppercase VIN

    Raises:
        IncorrectLength: If the VIN is not 17 characters long
        InvalidCharacters: If any character is outside the VIN alphabet
    """
    vin = normalize_vin(vin)

    if len(vin) != VIN_LENGTH:
        raise IncorrectLength(len(vin), VIN_LENGTH)

    bad_positions = [i + 1 for i, c in enumerate(vin) if c not in VIN_VALID_CHARS]
    if bad_positions:
        raise InvalidCharacters(
            characters=(vin[p - 1] for p in bad_positions),
            positions=bad_positions,
        )

    return vin


# =============================================================================
# CHECKSUM
# =============================================================================

def calculate_check_digit(vin: str) -> str:
    """
    Calculate the expected check digit for a VIN.

    The check digit (position 9) is calculated by:
    1. Assigning numeric values to each character
    2. Multiplying by position weights
    3. Summing and taking mod 11
    4. Result 10 becomes 'X'

    Args:
        vin: 17-character VIN (check digit position is ignored)

    Returns:
        Expected check digit ('0'-'9' or 'X')

    Raises:
        IncorrectLength: If the VIN is not 17 characters long
        IllegalCharacter: If a character has no transliteration value

    Examples:
        >>> calculate_check_digit("1M8GDM9AXKP042788")
        'X'
    """
    vin = normalize_vin(vin)
    if len(vin) != VIN_LENGTH:
        raise IncorrectLength(len(vin), VIN_LENGTH)

    total = 0
    for i, char in enumerate(vin):
        if i == _CHECK_DIGIT_INDEX:
            continue
        value = VINConstants.CHAR_VALUES.get(char)
        if value is None:
            raise IllegalCharacter(char, i + 1)
        total += value * VINConstants.CHECKSUM_WEIGHTS[i]

    remainder = total % VINConstants.CHECKSUM_MODULUS
    return VINConstants.CHECKSUM_OVERFLOW_CHAR if remainder == 10 else str(remainder)


def validate_checksum(vin: str) -> None:
    """
    Validate VIN checksum at position 9.

    Args:
        vin: 17-character VIN to validate

    Raises:
        ChecksumMismatch: If the check digit does not match, carrying both
            the expected and the received character
    """
    vin = normalize_vin(vin)
    expected = calculate_check_digit(vin)
    received = vin[_CHECK_DIGIT_INDEX]

    if received != expected:
        logger.debug(f"Checksum mismatch for {vin}: expected {expected}, got {received}")
        raise ChecksumMismatch(expected=expected, received=received)


# =============================================================================
# MODEL YEAR
# =============================================================================

def decode_year(
    code: str,
    reference_year: Optional[int] = None,
    lookahead: int = 2,
) -> Tuple[int, ...]:
    """
    Map the model year code (position 10) to its candidate years.

    Year codes repeat every 30 years (A=1980/2010, B=1981/2011, ...), so one
    code usually stands for more than one year. The full ambiguous set is
    returned; callers needing a single year must disambiguate with outside
    context such as the registration date.

    Args:
        code: Single year-code character (any case)
        reference_year: Latest year considered "now" (default: current year)
        lookahead: Years past the reference year still accepted, since
            model years run ahead of the calendar

    Returns:
        Candidate years in ascending order (at least one)

    Raises:
        IllegalCharacter: If code is not a model year code

    Examples:
        >>> decode_year('A', reference_year=2024)
        (1980, 2010)
        >>> decode_year('5', reference_year=2024)
        (2005,)
    """
    code = normalize_vin(code) if isinstance(code, str) else code
    if not isinstance(code, str) or len(code) != 1 or code not in VINConstants.YEAR_CODES:
        raise IllegalCharacter(str(code), VINConstants.YEAR_POSITION)

    if reference_year is None:
        reference_year = datetime.date.today().year

    first = VINConstants.YEAR_CYCLE_START + VINConstants.YEAR_CODES.index(code)
    last = max(reference_year + lookahead, first)

    return tuple(range(first, last + 1, VINConstants.YEAR_CYCLE_LENGTH))


def year_code_of(vin: str) -> str:
    """Return the model year code character of a canonical VIN."""
    return vin[_YEAR_INDEX]
