"""
Geographic angle parsing and formatting.

Converts between the notations people type for latitudes, longitudes and
bearings (degrees, degrees-minutes, degrees-minutes-seconds, with typographic
symbol variants, hemisphere letters and signs) and signed decimal degrees,
renders decimal degrees back into fixed-width display strings, and names the
compass point nearest to a bearing.

Example Usage:
    >>> from geo_dms import parse_dms, format_latitude, compass_point, DmsFormat
    >>>
    >>> lat = parse_dms("51° 12′ 00″ N")
    >>> format_latitude(lat, DmsFormat.DM)
    '51°12.00′N'
    >>> compass_point(24)
    'NNE'

An unparseable string gives nan rather than an exception; check it with
is_undefined() before use.

Available Functions:
    Parsing:
        - parse_dms: angle string -> decimal degrees (nan on failure)
        - parse_dms_array: many strings -> numpy array
        - is_undefined: test for the nan sentinel

    Formatting:
        - format_dms: unsigned D / DM / DMS string (None for nan)
        - format_latitude, format_longitude: with N/S or E/W suffix
        - format_bearing: wrapped to 0-360, "-" for nan

    Compass and wrapping:
        - compass_point: bearing -> "N", "NNE", ...
        - wrap360, wrap180, wrap90

    Configuration:
        - DmsDisplayConfig, get_default_config
"""

from geo_dms.angle_wrap import wrap90, wrap180, wrap360
from geo_dms.compass import COMPASS_POINTS, CompassPrecision, compass_point
from geo_dms.display_config import DmsDisplayConfig, get_default_config
from geo_dms.dms_formatter import (
    DEFAULT_PRECISION,
    UNDEFINED_PLACEHOLDER,
    DmsFormat,
    format_bearing,
    format_dms,
    format_latitude,
    format_longitude,
)
from geo_dms.dms_parser import is_undefined, parse_dms, parse_dms_array

# Define public API
__all__ = [
    # Parsing
    'parse_dms',
    'parse_dms_array',
    'is_undefined',

    # Formatting
    'DmsFormat',
    'DEFAULT_PRECISION',
    'UNDEFINED_PLACEHOLDER',
    'format_dms',
    'format_latitude',
    'format_longitude',
    'format_bearing',

    # Compass and wrapping
    'CompassPrecision',
    'COMPASS_POINTS',
    'compass_point',
    'wrap360',
    'wrap180',
    'wrap90',

    # Configuration
    'DmsDisplayConfig',
    'get_default_config',
]

# Package metadata
__version__ = '0.1.0'
__description__ = 'Parse and format geographic angles in degrees, minutes and seconds'
