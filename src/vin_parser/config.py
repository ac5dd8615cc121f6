"""
Parser Configuration - Centralized Settings
===========================================

All configurable parameters in one place.
Supports environment variable overrides and JSON/YAML config files.

Usage:
    from vin_parser.config import get_config
    config = get_config()
    print(config.decoder.year_lookahead)

Environment Variables:
    VIN_YEAR_LOOKAHEAD=2
    VIN_REFERENCE_YEAR=2024
    VIN_LOG_LEVEL=DEBUG
    VIN_LOG_FILE=/tmp/vin_parser.log

Author: VIN Parser Project
Date: October 2026
"""

import os
import json
import logging
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Optional, Dict, Any, Union

import yaml

logger = logging.getLogger(__name__)

YAML_SUFFIXES = ('.yaml', '.yml')


def _get_env_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Invalid int for {key}: {value}, using default {default}")
    return default


def _get_env_optional_int(key: str) -> Optional[int]:
    """Get optional int from environment variable."""
    value = os.environ.get(key)
    if value is None or value == '':
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid int for {key}: {value}, ignoring")
        return None


def _get_env_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _coerce(key: str, value: Any, field_type: Any, default: Any) -> Any:
    """Convert a config file value to its field type, keeping the default on failure."""
    optional = field_type in (Optional[int], Optional[str])
    if value is None:
        return None if optional else default

    target = int if field_type in (int, Optional[int]) else str
    if target is int and isinstance(value, bool):
        logger.warning(f"Invalid int for {key}: {value!r}, using default {default}")
        return default
    try:
        return target(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid {target.__name__} for {key}: {value!r}, using default {default}")
        return default


@dataclass
class DecoderConfig:
    """VIN decoding configuration."""

    # Model years run ahead of the calendar; accept codes up to this many
    # years past the reference year
    year_lookahead: int = field(
        default_factory=lambda: _get_env_int('VIN_YEAR_LOOKAHEAD', 2)
    )

    # Fixed "current" year for year decoding (None = today's year)
    reference_year: Optional[int] = field(
        default_factory=lambda: _get_env_optional_int('VIN_REFERENCE_YEAR')
    )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: _get_env_str('VIN_LOG_LEVEL', 'INFO')
    )
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format: str = '%Y-%m-%d %H:%M:%S'

    # File logging (optional)
    log_file: Optional[str] = field(
        default_factory=lambda: os.environ.get('VIN_LOG_FILE')
    )


@dataclass
class VINParserConfig:
    """Complete parser configuration."""

    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def save(self, path: Union[str, Path]):
        """Save configuration to a JSON or YAML file (chosen by suffix)."""
        path = Path(path)
        with open(path, 'w') as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False)
            else:
                json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'VINParserConfig':
        """Load configuration from a JSON or YAML file (chosen by suffix)."""
        path = Path(path)
        with open(path) as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        config = cls()

        for section in ('decoder', 'logging'):
            target = getattr(config, section)
            field_types = {f.name: f.type for f in fields(target)}
            for key, value in (data.get(section) or {}).items():
                if key in field_types:
                    default = getattr(target, key)
                    setattr(target, key, _coerce(key, value, field_types[key], default))
                else:
                    logger.warning(f"Unknown {section} setting in {path}: {key}")

        return config


# Global configuration instance (singleton pattern)
_config: Optional[VINParserConfig] = None


def get_config() -> VINParserConfig:
    """
    Get the global configuration instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _config
    if _config is None:
        _config = VINParserConfig()
    return _config


def set_config(config: VINParserConfig):
    """Replace the global configuration instance."""
    global _config
    _config = config


def reset_config():
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None


def setup_logging(config: LoggingConfig):
    """Configure logging based on settings."""
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=level,
        format=config.format,
        datefmt=config.date_format,
        handlers=handlers,
    )
