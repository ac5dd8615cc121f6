"""VIN decoding facade and batch reporting."""

from .vin_decoder import (
    ChecksumResult,
    VINInfo,
    VINDecoder,
    check_validity,
    verify_checksum,
    get_info,
    is_valid,
    get_decoder,
)

__all__ = [
    "ChecksumResult",
    "VINInfo",
    "VINDecoder",
    "check_validity",
    "verify_checksum",
    "get_info",
    "is_valid",
    "get_decoder",
]
