"""
Display defaults for formatting angles.

Lets an application choose its DMS layout, precision, component separator
and compass granularity once, from a dict or a YAML file, instead of passing
them to every formatting call.

Example YAML:
    dms:
      default_format: dm
      precision: 3
      separator: " "
      compass_precision: 2
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union
import logging

import yaml

from geo_dms.compass import CompassPrecision, parse_compass_precision
from geo_dms.dms_formatter import DmsFormat, parse_format, resolve_precision

logger = logging.getLogger(__name__)

CONFIG_SECTION = 'dms'

_KNOWN_KEYS = ('default_format', 'precision', 'separator', 'compass_precision')


@dataclass(frozen=True)
class DmsDisplayConfig:
    """Formatting defaults shared by the display helpers and the CLI.

    Attributes:
        default_format: Layout used when a caller does not name one
        precision: Decimals on the smallest unit; None means the per-format
            default (4 for D, 2 for DM, 0 for DMS)
        separator: Text placed between degrees, minutes, seconds and the
            hemisphere letter
        compass_precision: Granularity used for compass-point names
    """
    default_format: DmsFormat = DmsFormat.DMS
    precision: Optional[int] = None
    separator: str = ''
    compass_precision: CompassPrecision = CompassPrecision.SECONDARY_INTERCARDINAL

    def __post_init__(self):
        # Reject bad precision up front rather than on first use
        resolve_precision(self.default_format, self.precision)

    def resolve_precision(self, fmt: Union[DmsFormat, str, None] = None) -> int:
        """Precision to use for fmt (or the default format)."""
        fmt = self.default_format if fmt is None else parse_format(fmt)
        return resolve_precision(fmt, self.precision)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a plain dictionary suitable for YAML."""
        return {
            'default_format': self.default_format.value,
            'precision': self.precision,
            'separator': self.separator,
            'compass_precision': int(self.compass_precision),
        }

    @classmethod
    def from_dict(cls, config: dict) -> 'DmsDisplayConfig':
        """Create configuration from dictionary.

        Args:
            config: Dictionary with any of the keys 'default_format',
                'precision', 'separator', 'compass_precision'

        Returns:
            DmsDisplayConfig instance

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a dictionary, got {type(config)}")

        unknown = sorted(set(config) - set(_KNOWN_KEYS))
        if unknown:
            raise ValueError(
                f"Unknown configuration keys: {', '.join(map(str, unknown))}. "
                f"Valid keys are: {', '.join(_KNOWN_KEYS)}"
            )

        kwargs: Dict[str, Any] = {}
        if 'default_format' in config:
            kwargs['default_format'] = parse_format(config['default_format'])
        if config.get('precision') is not None:
            kwargs['precision'] = config['precision']
        if 'separator' in config:
            separator = config['separator']
            if not isinstance(separator, str):
                raise ValueError(f"'separator' must be a string, got {type(separator)}")
            kwargs['separator'] = separator
        if 'compass_precision' in config:
            kwargs['compass_precision'] = parse_compass_precision(config['compass_precision'])

        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'DmsDisplayConfig':
        """Load configuration from the 'dms' section of a YAML file.

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If the file is malformed or contains invalid values
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not isinstance(data, dict) or CONFIG_SECTION not in data:
            raise ValueError(
                f"Configuration file missing '{CONFIG_SECTION}' section: {path}\n"
                f"Expected structure: {CONFIG_SECTION}:\n  default_format: ...\n  ..."
            )

        config = cls.from_dict(data[CONFIG_SECTION] or {})
        logger.debug("Loaded DMS display configuration from %s: %s", config_path, config)
        return config


def get_default_config() -> DmsDisplayConfig:
    """Return the default display configuration (DMS, per-format precision)."""
    return DmsDisplayConfig()
