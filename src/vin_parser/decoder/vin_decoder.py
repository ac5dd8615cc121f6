"""
VIN Decoder - Parser Facade
===========================

Normalizes VIN input, enforces structural constraints, runs the checksum,
resolves the WMI and decodes candidate model years into a VINInfo record.

Usage:
    from vin_parser import get_info

    info = get_info("WP0ZZZ998TS392124")
    print(info.manufacturer, info.country, info.region)
    print(info.valid_checksum)

VIN Structure (ISO 3779):
    - Position 1-3: WMI (World Manufacturer Identifier)
    - Position 4-9: VDS (Vehicle Descriptor Section), 9 = check digit
    - Position 10-17: VIS (Vehicle Identifier Section)
        - 10: Model year
        - 11: Plant code
        - 12-17: Sequential number
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..config import DecoderConfig, get_config
from ..core.exceptions import VINError
from ..core.vin_utils import (
    VINConstants,
    calculate_check_digit,
    decode_year,
    validate_checksum,
    validate_vin_format,
    year_code_of,
)
from ..core.wmi import lookup_wmi

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChecksumResult:
    """Outcome of the check digit comparison."""
    expected: str
    received: str

    @property
    def is_valid(self) -> bool:
        return self.expected == self.received


@dataclass(frozen=True)
class VINInfo:
    """
    Decoded VIN information.

    Created once per successful parse and never mutated. A checksum
    mismatch does not prevent decoding; it is recorded in `checksum`.
    """
    vin: str
    region: str
    country: str
    manufacturer: str
    checksum: ChecksumResult
    # None when position 10 is not a model year code
    years: Optional[Tuple[int, ...]] = field(default=None)

    @property
    def valid_checksum(self) -> bool:
        return self.checksum.is_valid

    @property
    def wmi(self) -> str:
        """World Manufacturer Identifier (positions 1-3)."""
        return self.vin[:3]

    @property
    def vds(self) -> str:
        """Vehicle Descriptor Section (positions 4-9)."""
        return self.vin[3:9]

    @property
    def vis(self) -> str:
        """Vehicle Identifier Section (positions 10-17)."""
        return self.vin[9:]

    @property
    def check_digit(self) -> str:
        return self.vin[VINConstants.CHECK_DIGIT_POSITION - 1]

    @property
    def year_code(self) -> str:
        return year_code_of(self.vin)

    @property
    def plant_code(self) -> str:
        return self.vin[VINConstants.PLANT_POSITION - 1]

    @property
    def serial_number(self) -> str:
        """Sequential number (positions 12-17)."""
        return self.vin[VINConstants.SEQUENTIAL_START - 1:VINConstants.SEQUENTIAL_END]

    @property
    def region_code(self) -> str:
        return self.vin[:1]

    @property
    def country_code(self) -> str:
        return self.vin[:2]

    @property
    def small_manufacturer(self) -> bool:
        """
        True when the WMI ends in '9'.

        Manufacturers building fewer than 1000 vehicles a year share such a
        WMI and are told apart by positions 12-14.
        """
        return self.wmi[2] == '9'

    @property
    def manufacturer_code(self) -> str:
        """WMI, extended with positions 12-14 for small manufacturers."""
        if self.small_manufacturer:
            return self.wmi + self.vin[11:14]
        return self.wmi

    def to_dict(self) -> Dict[str, Any]:
        return {
            'vin': self.vin,
            'wmi': self.wmi,
            'vds': self.vds,
            'vis': self.vis,
            'region': self.region,
            'country': self.country,
            'manufacturer': self.manufacturer,
            'small_manufacturer': self.small_manufacturer,
            'check_digit': self.check_digit,
            'expected_check_digit': self.checksum.expected,
            'valid_checksum': self.valid_checksum,
            'year_code': self.year_code,
            'years': list(self.years) if self.years is not None else None,
            'plant_code': self.plant_code,
            'serial_number': self.serial_number,
        }


class VINDecoder:
    """
    VIN parser facade.

    All operations are pure functions of the input VIN and the static lookup
    tables; the decoder only holds year-decoding settings.

    Thread Safety: This class is thread-safe for concurrent use.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        """
        Initialize decoder.

        Args:
            config: Decoder settings (default: global configuration, read
                at call time)
        """
        self._config = config

    @property
    def config(self) -> DecoderConfig:
        if self._config is not None:
            return self._config
        return get_config().decoder

    def check_validity(self, vin: str) -> str:
        """
        Validate length and alphabet without computing the checksum.

        Returns:
            The canonical uppercase VIN

        Raises:
            StructuralError: IncorrectLength or InvalidCharacters
        """
        return validate_vin_format(vin)

    def verify_checksum(self, vin: str) -> str:
        """
        Validate structure and the check digit at position 9.

        Returns:
            The canonical uppercase VIN

        Raises:
            StructuralError: If the VIN is malformed
            ChecksumMismatch: If the check digit is wrong
        """
        vin = validate_vin_format(vin)
        validate_checksum(vin)
        return vin

    def decode_years(self, code: str) -> Tuple[int, ...]:
        """Candidate model years for a year code, using this decoder's settings."""
        config = self.config
        return decode_year(
            code,
            reference_year=config.reference_year,
            lookahead=config.year_lookahead,
        )

    def get_info(self, vin: str) -> VINInfo:
        """
        Decode region, country, manufacturer, checksum outcome and years.

        A checksum mismatch is reported in VINInfo.checksum and never raised,
        so forged or corrupted VINs still get a full descriptive decode.

        Raises:
            StructuralError: If the VIN is malformed
            UnknownManufacturer: If no WMI prefix resolves
        """
        vin = validate_vin_format(vin)
        entry = lookup_wmi(vin)

        checksum = ChecksumResult(
            expected=calculate_check_digit(vin),
            received=vin[VINConstants.CHECK_DIGIT_POSITION - 1],
        )
        if not checksum.is_valid:
            logger.debug(
                f"{vin}: check digit {checksum.received}, expected {checksum.expected}"
            )

        year_code = year_code_of(vin)
        years = self.decode_years(year_code) if year_code in VINConstants.YEAR_CODES else None

        return VINInfo(
            vin=vin,
            region=entry.region,
            country=entry.country,
            manufacturer=entry.manufacturer,
            checksum=checksum,
            years=years,
        )

    def is_valid(self, vin: str) -> bool:
        """True if the VIN is structurally valid and its checksum matches."""
        try:
            self.verify_checksum(vin)
        except VINError:
            return False
        return True


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Module-level decoder instance for simple usage
_default_decoder = VINDecoder()


def check_validity(vin: str) -> str:
    """
    Validate a VIN without computing the checksum.

    Examples:
        >>> check_validity("WP0ZZZ99ZTS392124")
        'WP0ZZZ99ZTS392124'
    """
    return _default_decoder.check_validity(vin)


def verify_checksum(vin: str) -> str:
    """
    Validate a VIN and its checksum.

    Examples:
        >>> verify_checksum("1M8GDM9AXKP042788")
        '1M8GDM9AXKP042788'
    """
    return _default_decoder.verify_checksum(vin)


def get_info(vin: str) -> VINInfo:
    """Decode a VIN using the default decoder."""
    return _default_decoder.get_info(vin)


def is_valid(vin: str) -> bool:
    """True if the VIN passes structural and checksum validation."""
    return _default_decoder.is_valid(vin)


def get_decoder() -> VINDecoder:
    """Get the default decoder instance."""
    return _default_decoder
