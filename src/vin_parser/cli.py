#!/usr/bin/env python3
"""
VIN Parser CLI - Command Line Interface
=======================================

Main CLI entry point for VIN validation and decoding.

Usage:
    vin-parser check <vin>             Validate length and characters
    vin-parser verify <vin>            Validate structure and check digit
    vin-parser info <vin>              Decode region, country, manufacturer, years
    vin-parser batch <file>            Decode a file with one VIN per line
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .config import VINParserConfig, get_config, set_config, setup_logging
from .core.exceptions import VINError
from .decoder import check_validity, get_info, verify_checksum

logger = logging.getLogger(__name__)


def cmd_check(args):
    """Validate VIN structure (no checksum)."""
    try:
        vin = check_validity(args.vin)
    except VINError as e:
        print(f"Invalid: {e}")
        return 1

    print(f"Valid structure: {vin}")
    return 0


def cmd_verify(args):
    """Validate VIN structure and checksum."""
    try:
        vin = verify_checksum(args.vin)
    except VINError as e:
        print(f"Invalid: {e}")
        return 1

    print(f"Valid VIN: {vin}")
    return 0


def cmd_info(args):
    """Decode a single VIN."""
    try:
        info = get_info(args.vin)
    except VINError as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(json.dumps(info.to_dict(), indent=2, ensure_ascii=False))
        return 0

    years = ', '.join(str(y) for y in info.years) if info.years else 'Unknown'
    checksum = 'valid' if info.valid_checksum else (
        f"INVALID ({info.checksum.expected} expected, {info.checksum.received} received)"
    )

    print(f"VIN:          {info.vin}")
    print(f"Region:       {info.region}")
    print(f"Country:      {info.country}")
    print(f"Manufacturer: {info.manufacturer}")
    print(f"Model years:  {years}")
    print(f"Checksum:     {checksum}")
    return 0


def cmd_batch(args):
    """Decode a file of VINs into a report."""
    import pandas as pd

    from .decoder.report import decode_batch, read_vins, save_report, summarize

    path = Path(args.file)
    if not path.exists():
        print(f"Error: File not found: {path}")
        return 1

    vins = read_vins(path)
    if not vins:
        print(f"No VINs found in {path}")
        return 1

    print(f"Processing {len(vins)} VINs...")
    df = decode_batch(vins)

    for row in df.itertuples(index=False):
        status = row.manufacturer if pd.isna(row.error) else f"ERROR: {row.error}"
        print(f"  {row.input}: {status}")

    summary = summarize(df)
    print("\nSummary:")
    for key, value in summary.items():
        print(f"  {key}: {value}")

    if args.output:
        save_report(df, args.output)
        print(f"Report saved to: {args.output}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='vin-parser',
        description='VIN Parser - Validate and decode Vehicle Identification Numbers',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', '-c', help='Path to JSON or YAML config file')
    parser.add_argument('--log-level', help='Logging level (DEBUG, INFO, WARNING, ...)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Check command
    check_parser = subparsers.add_parser('check', help='Validate length and characters')
    check_parser.add_argument('vin', help='VIN to validate')

    # Verify command
    verify_parser = subparsers.add_parser('verify', help='Validate structure and check digit')
    verify_parser.add_argument('vin', help='VIN to verify')

    # Info command
    info_parser = subparsers.add_parser('info', help='Decode VIN information')
    info_parser.add_argument('vin', help='VIN to decode')
    info_parser.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # Batch command
    batch_parser = subparsers.add_parser('batch', help='Decode a file of VINs')
    batch_parser.add_argument('file', help='Text file with one VIN per line')
    batch_parser.add_argument('--output', '-o', help='Output report (.csv or .json)')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.config:
        set_config(VINParserConfig.load(args.config))
    config = get_config()
    if args.log_level:
        config.logging.level = args.log_level
    setup_logging(config.logging)

    commands = {
        'check': cmd_check,
        'verify': cmd_verify,
        'info': cmd_info,
        'batch': cmd_batch,
    }

    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
