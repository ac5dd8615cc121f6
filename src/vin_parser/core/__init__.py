"""
VIN Parser Core Module
======================

Core VIN constants, validation, checksum, year decoding and WMI registry.
Single Source of Truth for all VIN-related functionality.
"""

from .exceptions import (
    VINError,
    StructuralError,
    IncorrectLength,
    InvalidCharacters,
    IllegalCharacter,
    ChecksumMismatch,
    UnknownManufacturer,
)
from .vin_utils import (
    # Constants
    VINConstants,
    VIN_LENGTH,
    VIN_VALID_CHARS,
    VIN_INVALID_CHARS,
    # Validation
    normalize_vin,
    validate_vin_format,
    # Checksum
    calculate_check_digit,
    validate_checksum,
    # Model year
    decode_year,
)
from .wmi import (
    WmiEntry,
    REGIONS,
    COUNTRIES,
    MANUFACTURERS,
    lookup_wmi,
    region_of,
    country_of,
)

__all__ = [
    # Errors
    "VINError",
    "StructuralError",
    "IncorrectLength",
    "InvalidCharacters",
    "IllegalCharacter",
    "ChecksumMismatch",
    "UnknownManufacturer",
    # Constants
    "VINConstants",
    "VIN_LENGTH",
    "VIN_VALID_CHARS",
    "VIN_INVALID_CHARS",
    # Validation
    "normalize_vin",
    "validate_vin_format",
    # Checksum
    "calculate_check_digit",
    "validate_checksum",
    # Model year
    "decode_year",
    # WMI
    "WmiEntry",
    "REGIONS",
    "COUNTRIES",
    "MANUFACTURERS",
    "lookup_wmi",
    "region_of",
    "country_of",
]
