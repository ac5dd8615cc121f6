"""
VIN Parser
==========

Parser and checksum verifier for ISO 3779 Vehicle Identification Numbers.

Provides region, country and manufacturer of origin, candidate model years
and checksum validation for a given VIN.

Package Structure:
    vin_parser/
    ├── core/           # Constants, validation, checksum, years, WMI registry
    ├── decoder/        # Parser facade and batch reports
    ├── config.py       # Settings with environment overrides
    └── cli.py          # Command line interface

Quick Start:
    from vin_parser import check_validity, verify_checksum, get_info

    check_validity("WP0ZZZ99ZTS392124")      # structure only
    verify_checksum("1M8GDM9AXKP042788")     # structure + check digit

    info = get_info("wp0zzz998ts392124")
    print(info.manufacturer)                 # 'Porsche car'
    print(info.valid_checksum)               # True

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "VIN Parser Team"

# Core exports (lightweight, always available)
from .core import (
    VINError,
    StructuralError,
    IncorrectLength,
    InvalidCharacters,
    IllegalCharacter,
    ChecksumMismatch,
    UnknownManufacturer,
    VINConstants,
    VIN_LENGTH,
    VIN_VALID_CHARS,
    WmiEntry,
    calculate_check_digit,
    decode_year,
    lookup_wmi,
)
from .decoder import (
    ChecksumResult,
    VINInfo,
    VINDecoder,
    check_validity,
    verify_checksum,
    get_info,
    is_valid,
)

__all__ = [
    "__version__",
    "__author__",
    # Errors
    "VINError",
    "StructuralError",
    "IncorrectLength",
    "InvalidCharacters",
    "IllegalCharacter",
    "ChecksumMismatch",
    "UnknownManufacturer",
    # Core
    "VINConstants",
    "VIN_LENGTH",
    "VIN_VALID_CHARS",
    "WmiEntry",
    "calculate_check_digit",
    "decode_year",
    "lookup_wmi",
    # Decoder
    "ChecksumResult",
    "VINInfo",
    "VINDecoder",
    "check_validity",
    "verify_checksum",
    "get_info",
    "is_valid",
]


# Lazy imports for reporting (heavier dependencies)
def __getattr__(name: str):
    """Lazy import for report helpers."""
    if name in ("decode_batch", "summarize", "save_report"):
        from .decoder import report
        return getattr(report, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
