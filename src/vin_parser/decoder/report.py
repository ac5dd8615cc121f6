"""
Batch VIN Report
================

Decodes many VINs into a tabular report:
1. Structural validity
2. Checksum validity
3. Region / country / manufacturer
4. Candidate model years
5. Per-row error message (rows never abort the batch)

Usage:
    from vin_parser.decoder.report import decode_batch, summarize, save_report

    df = decode_batch(["WP0ZZZ998TS392124", "1M8GDM9AXKP042788"])
    print(summarize(df))
    save_report(df, "report.csv")
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd

from ..core.exceptions import StructuralError, UnknownManufacturer
from .vin_decoder import VINDecoder, get_decoder

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    'input',
    'vin',
    'valid_structure',
    'valid_checksum',
    'region',
    'country',
    'manufacturer',
    'years',
    'error',
]


def read_vins(path: Union[str, Path]) -> List[str]:
    """
    Read one VIN per line, skipping blank lines and '#' comments.
    """
    vins = []
    with open(path, encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            vins.append(line)
    return vins


def _decode_row(raw: str, decoder: VINDecoder) -> Dict[str, Any]:
    row: Dict[str, Any] = {col: None for col in REPORT_COLUMNS}
    row.update(input=raw, vin=raw, valid_structure=False, valid_checksum=False)

    try:
        vin = decoder.check_validity(raw)
    except StructuralError as e:
        row['error'] = str(e)
        return row

    row.update(vin=vin, valid_structure=True)

    try:
        info = decoder.get_info(vin)
    except UnknownManufacturer as e:
        row['valid_checksum'] = decoder.is_valid(vin)
        row['error'] = str(e)
        return row

    row.update(
        valid_checksum=info.valid_checksum,
        region=info.region,
        country=info.country,
        manufacturer=info.manufacturer,
        years=', '.join(str(y) for y in info.years) if info.years else None,
    )
    return row


def decode_batch(vins: Iterable[str], decoder: Optional[VINDecoder] = None) -> pd.DataFrame:
    """
    Decode VINs into a DataFrame with one row per input.

    Args:
        vins: VIN candidates (any case)
        decoder: Decoder to use (default: module decoder)

    Returns:
        DataFrame with REPORT_COLUMNS
    """
    decoder = decoder or get_decoder()
    rows = [_decode_row(raw, decoder) for raw in vins]
    logger.info(f"Decoded {len(rows)} VINs")
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def summarize(df: pd.DataFrame) -> Dict[str, int]:
    """Counters for a batch report."""
    # Empty frames give an object column, which pandas will not take as a mask
    valid = df[df['valid_structure'].astype(bool)]
    vin_counts = valid['vin'].value_counts()

    return {
        'total': int(len(df)),
        'valid_structure': int(df['valid_structure'].sum()),
        'valid_checksum': int(df['valid_checksum'].sum()),
        'decoded': int(df['manufacturer'].notna().sum()),
        'errors': int(df['error'].notna().sum()),
        'unique_vins': int(len(vin_counts)),
        'duplicate_vins': int((vin_counts > 1).sum()),
    }


def save_report(df: pd.DataFrame, path: Union[str, Path]) -> Path:
    """Save a report as JSON (for .json) or CSV (anything else)."""
    path = Path(path)
    if path.suffix.lower() == '.json':
        df.to_json(path, orient='records', indent=2)
    else:
        df.to_csv(path, index=False)
    logger.info(f"Report saved to: {path}")
    return path
