"""
World Manufacturer Identifier (WMI) Registry
============================================

Static lookup tables for the first three VIN characters:

- Region: first character (e.g. 'W' -> Europe)
- Country: first two characters, assigned in ranges (e.g. 'WA'-'W0' -> Germany)
- Manufacturer: 3-character WMI where one is registered, otherwise a shared
  2-character code, otherwise the regional 1-character block

Manufacturer resolution always prefers the longest matching prefix. Tables
are built once at import and exposed as read-only mappings.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .exceptions import UnknownManufacturer
from .vin_utils import normalize_vin

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

# Ordering used by ISO 3779 range assignments ('0' sorts last)
ISO_3779_ORDER = "ABCDEFGHJKLMNPRSTUVWXYZ1234567890"


@dataclass(frozen=True)
class WmiEntry:
    """Resolved WMI information."""
    prefix: str
    region: str
    country: str
    manufacturer: str


# =============================================================================
# REGIONS (1st character)
# =============================================================================

_REGION_RANGES: Tuple[Tuple[str, str, str], ...] = (
    ('A', 'H', 'Africa'),
    ('J', 'R', 'Asia'),
    ('S', 'Z', 'Europe'),
    ('1', '5', 'North America'),
    ('6', '7', 'Oceania'),
    ('8', '9', 'South America'),
)

_REGIONAL_MANUFACTURER_LABELS: Dict[str, str] = {
    'Africa': 'African manufacturer',
    'Asia': 'Asian manufacturer',
    'Europe': 'European manufacturer',
    'North America': 'North American manufacturer',
    'Oceania': 'Oceanian manufacturer',
    'South America': 'South American manufacturer',
}


# =============================================================================
# COUNTRIES (1st + 2nd character)
# =============================================================================

_COUNTRY_RANGES: Tuple[Tuple[str, str, str], ...] = (
    # Africa
    ('AA', 'AH', 'South Africa'),
    ('AJ', 'AN', 'Ivory Coast'),
    ('BA', 'BE', 'Angola'),
    ('BF', 'BK', 'Kenya'),
    ('BL', 'BR', 'Tanzania'),
    ('CA', 'CE', 'Benin'),
    ('CF', 'CK', 'Madagascar'),
    ('CL', 'CR', 'Tunisia'),
    ('DA', 'DE', 'Egypt'),
    ('DF', 'DK', 'Morocco'),
    ('DL', 'DR', 'Zambia'),
    ('EA', 'EE', 'Ethiopia'),
    ('EF', 'EK', 'Mozambique'),
    ('FA', 'FE', 'Ghana'),
    ('FF', 'FK', 'Nigeria'),
    # Asia
    ('JA', 'J0', 'Japan'),
    ('KA', 'KE', 'Sri Lanka'),
    ('KF', 'KK', 'Israel'),
    ('KL', 'KR', 'Korea (South)'),
    ('KS', 'K0', 'Kazakhstan'),
    ('LA', 'L0', 'China'),
    ('MA', 'ME', 'India'),
    ('MF', 'MK', 'Indonesia'),
    ('ML', 'MR', 'Thailand'),
    ('MS', 'M0', 'Myanmar'),
    ('NA', 'NE', 'Iran'),
    ('NF', 'NK', 'Pakistan'),
    ('NL', 'NR', 'Turkey'),
    ('PA', 'PE', 'Philippines'),
    ('PF', 'PK', 'Singapore'),
    ('PL', 'PR', 'Malaysia'),
    ('RA', 'RE', 'United Arab Emirates'),
    ('RF', 'RK', 'Taiwan'),
    ('RL', 'RR', 'Vietnam'),
    ('RS', 'R0', 'Saudi Arabia'),
    # Europe
    ('SA', 'SM', 'United Kingdom'),
    ('SN', 'ST', 'East Germany'),
    ('SU', 'SZ', 'Poland'),
    ('S1', 'S4', 'Latvia'),
    ('TA', 'TH', 'Switzerland'),
    ('TJ', 'TP', 'Czech Republic'),
    ('TR', 'TV', 'Hungary'),
    ('TW', 'T1', 'Portugal'),
    ('UH', 'UM', 'Denmark'),
    ('UN', 'UT', 'Ireland'),
    ('UU', 'UZ', 'Romania'),
    ('U5', 'U7', 'Slovakia'),
    ('VA', 'VE', 'Austria'),
    ('VF', 'VR', 'France'),
    ('VS', 'VW', 'Spain'),
    ('VX', 'V2', 'Serbia'),
    ('V3', 'V5', 'Croatia'),
    ('V6', 'V0', 'Estonia'),
    ('WA', 'W0', 'Germany/West Germany'),
    ('XA', 'XE', 'Bulgaria'),
    ('XF', 'XK', 'Greece'),
    ('XL', 'XR', 'Netherlands'),
    ('XS', 'XW', 'Russia (USSR)'),
    ('XX', 'X2', 'Luxembourg'),
    ('X3', 'X0', 'Russia'),
    ('YA', 'YE', 'Belgium'),
    ('YF', 'YK', 'Finland'),
    ('YL', 'YR', 'Malta'),
    ('YS', 'YW', 'Sweden'),
    ('YX', 'Y2', 'Norway'),
    ('Y3', 'Y5', 'Belarus'),
    ('Y6', 'Y0', 'Ukraine'),
    ('ZA', 'ZR', 'Italy'),
    ('ZX', 'Z2', 'Slovenia'),
    ('Z3', 'Z5', 'Lithuania'),
    # North America
    ('1A', '10', 'United States'),
    ('2A', '20', 'Canada'),
    ('3A', '3W', 'Mexico'),
    ('3X', '37', 'Costa Rica'),
    ('38', '30', 'Cayman Islands'),
    ('4A', '40', 'United States'),
    ('5A', '50', 'United States'),
    # Oceania
    ('6A', '6W', 'Australia'),
    ('7A', '7E', 'New Zealand'),
    # South America
    ('8A', '8E', 'Argentina'),
    ('8F', '8K', 'Chile'),
    ('8L', '8R', 'Ecuador'),
    ('8S', '8W', 'Peru'),
    ('8X', '82', 'Venezuela'),
    ('9A', '9E', 'Brazil'),
    ('9F', '9K', 'Colombia'),
    ('9L', '9R', 'Paraguay'),
    ('9S', '9W', 'Uruguay'),
    ('9X', '92', 'Trinidad & Tobago'),
    ('93', '99', 'Brazil'),
)


# =============================================================================
# MANUFACTURERS
# =============================================================================

# Shared 2-character codes; used when no 3-character WMI is registered
_MANUFACTURERS_2: Dict[str, str] = {
    '1C': 'Chrysler',
    '1F': 'Ford Motor Company',
    '1G': 'General Motors USA',
    '1H': 'Honda USA',
    '1L': 'Lincoln USA',
    '1N': 'Nissan USA',
    '2G': 'General Motors Canada',
    '2M': 'Mercury',
    '2T': 'Toyota Canada',
    '3G': 'General Motors Mexico',
    '3H': 'Honda Mexico',
    '3N': 'Nissan Mexico',
    '4F': 'Mazda USA',
    '4M': 'Mercury',
    '4S': 'Subaru-Isuzu Automotive',
    '4T': 'Toyota',
    '5F': 'Honda USA-Alabama',
    '5L': 'Lincoln',
    '5T': 'Toyota USA - trucks',
    '6F': 'Ford Motor Company Australia',
    '6G': 'General Motors-Holden',
    '6H': 'General Motors-Holden',
    'JA': 'Isuzu',
    'JF': 'Fuji Heavy Industries (Subaru)',
    'JH': 'Honda',
    'JK': 'Kawasaki (motorcycles)',
    'JM': 'Mazda',
    'JN': 'Nissan',
    'JS': 'Suzuki',
    'JT': 'Toyota',
    'KL': 'Daewoo General Motors South Korea',
    'KM': 'Hyundai',
    'KN': 'Kia',
}

_MANUFACTURERS_3: Dict[str, str] = {
    # Africa
    'AAV': 'Volkswagen South Africa',
    'AFA': 'Ford South Africa',
    'AHT': 'Toyota South Africa',
    # Asia
    'JA3': 'Mitsubishi',
    'JA4': 'Mitsubishi',
    'JH4': 'Acura',
    'JHM': 'Honda',
    'JM1': 'Mazda',
    'JN1': 'Nissan',
    'JN8': 'Nissan',
    'JSA': 'Suzuki',
    'JT2': 'Toyota',
    'JTD': 'Toyota',
    'JTE': 'Toyota',
    'JTH': 'Lexus',
    'JYA': 'Yamaha (motorcycles)',
    'KM1': 'Hyosung (motorcycles)',
    'KMH': 'Hyundai',
    'KMY': 'Daelim (motorcycles)',
    'KNA': 'Kia',
    'KNM': 'Renault Samsung',
    'KPA': 'SsangYong',
    'KPT': 'SsangYong',
    'L56': 'Renault Samsung',
    'L5Y': 'Merato Motorcycle Taizhou Zhongneng',
    'LDY': 'Zhongtong Coach, China',
    'LGH': 'Dong Feng (DFM), China',
    'LKL': 'Suzhou King Long, China',
    'LSY': 'Brilliance Zhonghua',
    'LTV': 'Toyota Tian Jin',
    'LVS': 'Ford Chang An',
    'LVV': 'Chery, China',
    'LZE': 'Isuzu Guangzhou, China',
    'LZG': 'Shaanxi Automobile Group, China',
    'LZM': 'MAN China',
    'LZY': 'Yutong Zhengzhou, China',
    'MA1': 'Mahindra',
    'MA3': 'Suzuki India',
    'MA7': 'Honda Siel Cars India',
    'MAL': 'Hyundai India',
    'MHR': 'Honda Indonesia',
    'MM8': 'Mazda Thailand',
    'MMB': 'Mitsubishi Thailand',
    'MMM': 'Chevrolet Thailand',
    'MMT': 'Mitsubishi Thailand',
    'MNB': 'Ford Thailand',
    'MNT': 'Nissan Thailand',
    'MP1': 'Isuzu Thailand',
    'MPA': 'Isuzu Thailand',
    'MR0': 'Toyota Thailand',
    'MRH': 'Honda Thailand',
    'NLE': 'Mercedes-Benz Türk Truck',
    'NM0': 'Ford Turkey',
    'NM4': 'Tofaş Türk',
    'NMT': 'Toyota Türkiye',
    'PE1': 'Ford Philippines',
    'PE3': 'Mazda Philippines',
    'PL1': 'Proton, Malaysia',
    # Europe
    'SAJ': 'Jaguar',
    'SAL': 'Land Rover',
    'SAR': 'Rover',
    'SB1': 'Toyota UK',
    'SBM': 'McLaren',
    'SCA': 'Rolls Royce',
    'SCB': 'Bentley',
    'SCC': 'Lotus Cars',
    'SCE': 'DeLorean Motor Cars N. Ireland (UK)',
    'SCF': 'Aston',
    'SDB': 'Peugeot UK (formerly Talbot)',
    'SED': 'General Motors Luton Plant',
    'SEY': 'LDV',
    'SFA': 'Ford UK',
    'SFD': 'Alexander Dennis UK',
    'SHH': 'Honda UK',
    'SHS': 'Honda UK',
    'SJN': 'Nissan UK',
    'SKF': 'Vauxhall',
    'SMT': 'Triumph Motorcycles',
    'SUF': 'Fiat Auto Poland',
    'SUL': 'FSC (Poland)',
    'SUP': 'FSO-Daewoo (Poland)',
    'SUU': 'Solaris Bus & Coach (Poland)',
    'TCC': 'Micro Compact Car AG (smart 1998-1999)',
    'TDM': 'QUANTYA Swiss Electric Movement (Switzerland)',
    'TK9': 'SOR buses (Czech Republic)',
    'TM9': 'Škoda trolleybuses (Czech Republic)',
    'TMA': 'Hyundai Motor Manufacturing Czech',
    'TMB': 'Škoda (Czech Republic)',
    'TMK': 'Karosa (Czech Republic)',
    'TMP': 'Škoda trolleybuses (Czech Republic)',
    'TMT': 'Tatra (Czech Republic)',
    'TN9': 'Karosa (Czech Republic)',
    'TRA': 'Ikarus Bus',
    'TRU': 'Audi Hungary',
    'TSE': 'Ikarus Egyedi Autobuszgyar (Hungary)',
    'TSM': 'Suzuki Hungary',
    'TW1': 'Toyota Caetano Portugal',
    'TYA': 'Mitsubishi Trucks Portugal',
    'TYB': 'Mitsubishi Trucks Portugal',
    'U5Y': 'Kia Motors Slovakia',
    'U6Y': 'Kia Motors Slovakia',
    'UU1': 'Renault Dacia (Romania)',
    'UU3': 'ARO',
    'UU6': 'Daewoo Romania',
    'VAG': 'Magna Steyr Puch',
    'VAN': 'MAN Austria',
    'VBK': 'KTM (motorcycles)',
    'VF1': 'Renault',
    'VF2': 'Renault',
    'VF3': 'Peugeot',
    'VF4': 'Talbot',
    'VF6': 'Renault (Trucks & Buses)',
    'VF7': 'Citroën',
    'VF8': 'Matra',
    'VF9': 'Bugatti',
    'VFE': 'IvecoBus',
    'VG5': 'MBK (motorcycles)',
    'VLU': 'Scania France',
    'VN1': 'SOVAB (France)',
    'VNE': 'Irisbus (France)',
    'VNK': 'Toyota France',
    'VNV': 'Renault-Nissan',
    'VS6': 'Ford Spain',
    'VS7': 'Citroën Spain',
    'VS9': 'Carrocerias Ayats (Spain)',
    'VSA': 'Mercedes-Benz Spain',
    'VSE': 'Suzuki Spain (Santana Motors)',
    'VSK': 'Nissan Spain',
    'VSS': 'SEAT',
    'VSX': 'Opel Spain',
    'VTH': 'Derbi (motorcycles)',
    'VTT': 'Suzuki Spain (motorcycles)',
    'VV9': 'TAURO Sport Auto Spain',
    'VWA': 'Nissan Spain',
    'VWV': 'Volkswagen Spain',
    'VX1': 'Zastava / Yugo Serbia',
    'W0L': 'Opel',
    'WA1': 'Audi SUV',
    'WAG': 'Neoplan',
    'WAU': 'Audi',
    'WBA': 'BMW',
    'WBS': 'BMW M',
    'WDA': 'Daimler',
    'WDB': 'Mercedes-Benz',
    'WDC': 'DaimlerChrysler',
    'WDD': 'Mercedes-Benz',
    'WDF': 'Mercedes-Benz (commercial vehicles)',
    'WEB': 'Evobus GmbH (Mercedes-Bus)',
    'WF0': 'Ford Germany',
    'WJM': 'Iveco Magirus',
    'WKK': 'Kässbohrer/Setra',
    'WMA': 'MAN Germany',
    'WME': 'smart',
    'WMW': 'MINI',
    'WMX': 'Mercedes-AMG',
    'WP0': 'Porsche car',
    'WP1': 'Porsche SUV',
    'WUA': 'quattro GmbH',
    'WV1': 'Volkswagen Commercial Vehicles',
    'WV2': 'Volkswagen Bus/Van',
    'WV3': 'Volkswagen Trucks',
    'WVG': 'Volkswagen SUV',
    'WVW': 'Volkswagen',
    'X1M': 'PAZ (Russia)',
    'X4X': 'AvtoTor (Russia, BMW SKD)',
    'X7L': 'Renault AvtoFramos (Russia)',
    'X7M': 'Hyundai TagAZ (Russia)',
    'XL9': 'Spyker',
    'XLB': 'Volvo (NedCar)',
    'XLE': 'Scania Netherlands',
    'XLR': 'DAF (trucks)',
    'XMC': 'Mitsubishi (NedCar)',
    'XTA': 'Lada/AutoVaz (Russia)',
    'XTC': 'KAMAZ (Russia)',
    'XTH': 'GAZ (Russia)',
    'XTT': 'UAZ/Sollers (Russia)',
    'XTY': 'LiAZ (Russia)',
    'XUF': 'General Motors Russia',
    'XUU': 'AvtoTor (Russia, General Motors SKD)',
    'XW8': 'Volkswagen Group Russia',
    'XWB': 'UZ-Daewoo (Uzbekistan)',
    'XWE': 'AvtoTor (Russia, Hyundai-Kia SKD)',
    'YB1': 'Volvo Trucks Belgium',
    'YBW': 'Volkswagen Belgium',
    'YCM': 'Mazda Belgium',
    'YE2': 'Van Hool (buses)',
    'YH2': 'BRP Finland (Lynx snowmobiles)',
    'YK1': 'Saab-Valmet Finland',
    'YS2': 'Scania AB',
    'YS3': 'Saab',
    'YS4': 'Scania Bus',
    'YT9': 'Koenigsegg',
    'YTN': 'Saab NEVS',
    'YU7': 'Husaberg (motorcycles)',
    'YV1': 'Volvo Cars',
    'YV2': 'Volvo Trucks',
    'YV3': 'Volvo Buses',
    'YV4': 'Volvo Cars',
    'YV5': 'Volvo Trucks',
    'ZAM': 'Maserati',
    'ZAP': 'Piaggio/Vespa/Gilera',
    'ZAR': 'Alfa Romeo',
    'ZCF': 'Iveco',
    'ZCG': 'Cagiva SpA / MV Agusta',
    'ZD0': 'Yamaha Motor Italia SpA',
    'ZD3': 'Beta Motor',
    'ZD4': 'Aprilia',
    'ZDC': 'Honda Italia Industriale SpA',
    'ZDF': 'Ferrari Dino',
    'ZDM': 'Ducati Motor Holdings SpA',
    'ZFA': 'Fiat',
    'ZFC': 'Fiat V.I.',
    'ZFF': 'Ferrari',
    'ZGU': 'Moto Guzzi',
    'ZHW': 'Lamborghini',
    'ZJM': 'Malaguti',
    'ZJN': 'Innocenti',
    'ZKH': 'Husqvarna Motorcycles Italy',
    'ZLA': 'Lancia',
    # North America
    '1B3': 'Dodge',
    '1C3': 'Chrysler',
    '1C6': 'Chrysler',
    '1D3': 'Dodge',
    '1FA': 'Ford Motor Company',
    '1FB': 'Ford Motor Company',
    '1FC': 'Ford Motor Company',
    '1FD': 'Ford Motor Company',
    '1FM': 'Ford Motor Company',
    '1FT': 'Ford Motor Company',
    '1FU': 'Freightliner',
    '1FV': 'Freightliner',
    '1F9': 'FWD Corp.',
    '1G1': 'Chevrolet USA',
    '1G2': 'Pontiac USA',
    '1G3': 'Oldsmobile USA',
    '1G4': 'Buick USA',
    '1G6': 'Cadillac USA',
    '1G8': 'Saturn USA',
    '1GC': 'Chevrolet Truck USA',
    '1GM': 'Pontiac USA',
    '1GT': 'GMC Truck USA',
    '1GY': 'Cadillac USA',
    '1HD': 'Harley-Davidson',
    '1HG': 'Honda USA-Ohio',
    '1J4': 'Jeep',
    '1J8': 'Jeep',
    '1M1': 'Mack Truck USA',
    '1M2': 'Mack Truck USA',
    '1M3': 'Mack Truck USA',
    '1M4': 'Mack Truck USA',
    '1M8': 'Motor Coach Industries',
    '1M9': 'Mynatt Truck & Equipment',
    '1ME': 'Mercury USA',
    '1NX': 'NUMMI USA',
    '1P3': 'Plymouth USA',
    '1R9': 'Roadrunner Hay Squeeze USA',
    '1VW': 'Volkswagen USA',
    '1XK': 'Kenworth USA',
    '1XP': 'Peterbilt USA',
    '1YV': 'Mazda USA (AutoAlliance International)',
    '1ZV': 'Auto Alliance International',
    '2A4': 'Chrysler Canada',
    '2B3': 'Dodge Canada',
    '2B7': 'Dodge Canada',
    '2BP': 'Bombardier Recreational Products',
    '2C3': 'Chrysler Canada',
    '2CN': 'CAMI',
    '2D3': 'Dodge Canada',
    '2FA': 'Ford Motor Company Canada',
    '2FB': 'Ford Motor Company Canada',
    '2FC': 'Ford Motor Company Canada',
    '2FM': 'Ford Motor Company Canada',
    '2FT': 'Ford Motor Company Canada',
    '2FU': 'Freightliner',
    '2FV': 'Freightliner',
    '2FZ': 'Sterling',
    '2G1': 'Chevrolet Canada',
    '2G2': 'Pontiac Canada',
    '2G3': 'Oldsmobile Canada',
    '2G4': 'Buick Canada',
    '2HG': 'Honda Canada',
    '2HJ': 'Honda Canada',
    '2HK': 'Honda Canada',
    '2HM': 'Hyundai Canada',
    '2NV': 'Nova Bus Canada',
    '2P4': 'Plymouth Canada',
    '2V4': 'Volkswagen Canada',
    '2V8': 'Volkswagen Canada',
    '2WK': 'Western Star',
    '2WL': 'Western Star',
    '2WM': 'Western Star',
    '3D3': 'Dodge Mexico',
    '3FA': 'Ford Motor Company Mexico',
    '3FE': 'Ford Motor Company Mexico',
    '3P3': 'Plymouth Mexico',
    '3VW': 'Volkswagen Mexico',
    '4RK': 'Nova Bus USA',
    '4T9': 'Lumen Motors',
    '4UF': 'Arctic Cat Inc.',
    '4US': 'BMW USA',
    '4UZ': 'Frt-Thomas Bus',
    '4V1': 'Volvo',
    '4V2': 'Volvo',
    '4V3': 'Volvo',
    '4V4': 'Volvo',
    '4V5': 'Volvo',
    '4V6': 'Volvo',
    '4VL': 'Volvo',
    '4VM': 'Volvo',
    '4VZ': 'Volvo',
    '538': 'Zero Motorcycles (USA)',
    '56K': 'Indian Motorcycle USA',
    '5N1': 'Nissan USA',
    '5NP': 'Hyundai USA',
    '5YJ': 'Tesla, Inc.',
    # Oceania
    '6AB': 'MAN Australia',
    '6F4': 'Nissan Motor Company Australia',
    '6F5': 'Kenworth Australia',
    '6FP': 'Ford Motor Company Australia',
    '6G1': 'General Motors-Holden (post Nov 2002)',
    '6G2': 'Pontiac Australia (GTO & G8)',
    '6H8': 'General Motors-Holden (pre Nov 2002)',
    '6MM': 'Mitsubishi Motors Australia',
    '6T1': 'Toyota Motor Corporation Australia',
    '6U9': 'Privately Imported car in Australia',
    # South America
    '8A1': 'Renault Argentina',
    '8AD': 'Peugeot Argentina',
    '8AF': 'Ford Motor Company Argentina',
    '8AG': 'Chevrolet Argentina',
    '8AJ': 'Toyota Argentina',
    '8AK': 'Suzuki Argentina',
    '8AP': 'Fiat Argentina',
    '8AW': 'Volkswagen Argentina',
    '8GD': 'Peugeot Chile',
    '8GG': 'Chevrolet Chile',
    '8LD': 'Chevrolet Ecuador',
    '935': 'Citroën Brazil',
    '936': 'Peugeot Brazil',
    '93H': 'Honda Brazil',
    '93R': 'Toyota Brazil',
    '93U': 'Audi Brazil',
    '93V': 'Audi Brazil',
    '93X': 'Mitsubishi Motors Brazil',
    '93Y': 'Renault Brazil',
    '94D': 'Nissan Brazil',
    '9BD': 'Fiat Brazil',
    '9BF': 'Ford Motor Company Brazil',
    '9BG': 'Chevrolet Brazil',
    '9BM': 'Mercedes-Benz Brazil',
    '9BR': 'Toyota Brazil',
    '9BS': 'Scania Brazil',
    '9BW': 'Volkswagen Brazil',
    '9FB': 'Renault Colombia',
}


# =============================================================================
# TABLE CONSTRUCTION
# =============================================================================

def _expand_range(start: str, end: str) -> List[str]:
    """
    Expand an inclusive code range over the ISO 3779 ordering.

    Only the last character varies: ('WA', 'W0') -> ['WA', 'WB', ..., 'W9', 'W0'].
    """
    if start[:-1] != end[:-1]:
        raise ValueError(f"Range {start}-{end} spans more than one prefix")

    lo = ISO_3779_ORDER.index(start[-1])
    hi = ISO_3779_ORDER.index(end[-1])
    if lo > hi:
        raise ValueError(f"Range {start}-{end} is reversed")

    return [start[:-1] + c for c in ISO_3779_ORDER[lo:hi + 1]]


def _build_ranges(ranges: Tuple[Tuple[str, str, str], ...]) -> Mapping[str, str]:
    table: Dict[str, str] = {}
    for start, end, name in ranges:
        for code in _expand_range(start, end):
            if code in table:
                raise ValueError(f"Code {code} assigned to both {table[code]} and {name}")
            table[code] = name
    return MappingProxyType(table)


REGIONS: Mapping[str, str] = _build_ranges(_REGION_RANGES)
COUNTRIES: Mapping[str, str] = _build_ranges(_COUNTRY_RANGES)

# One mapping per prefix length, tried longest first
MANUFACTURERS: Mapping[int, Mapping[str, str]] = MappingProxyType({
    3: MappingProxyType(dict(_MANUFACTURERS_3)),
    2: MappingProxyType(dict(_MANUFACTURERS_2)),
    1: MappingProxyType({
        code: _REGIONAL_MANUFACTURER_LABELS[region]
        for code, region in REGIONS.items()
    }),
})


# =============================================================================
# LOOKUP
# =============================================================================

def region_of(code: str) -> str:
    """Region for the first character of a VIN or WMI, or 'Unknown'."""
    return REGIONS.get(normalize_vin(code[:1]), UNKNOWN)


def country_of(code: str) -> str:
    """Country for the first two characters of a VIN or WMI, or 'Unknown'."""
    return COUNTRIES.get(normalize_vin(code[:2]), UNKNOWN)


def lookup_wmi(vin: str) -> WmiEntry:
    """
    Resolve region, country and manufacturer from a VIN (or bare WMI).

    Tries the 3-character prefix, then the 2-character prefix, then the
    1-character prefix. Exact prefix equality only.

    Args:
        vin: Full VIN or its first 1-3 characters (any case)

    Returns:
        WmiEntry with the matched prefix

    Raises:
        UnknownManufacturer: If no prefix is registered

    Examples:
        >>> lookup_wmi("WP0ZZZ998TS392124").manufacturer
        'Porsche car'
    """
    wmi = normalize_vin(vin)[:3]

    for length in (3, 2, 1):
        if len(wmi) < length:
            continue
        prefix = wmi[:length]
        manufacturer = MANUFACTURERS[length].get(prefix)
        if manufacturer is not None:
            if length < 3:
                logger.debug(f"WMI {wmi} resolved by {length}-character prefix {prefix!r}")
            return WmiEntry(
                prefix=prefix,
                region=region_of(wmi),
                country=country_of(wmi),
                manufacturer=manufacturer,
            )

    raise UnknownManufacturer(wmi)
