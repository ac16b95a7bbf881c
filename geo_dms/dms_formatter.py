"""
Render decimal degrees as degrees/minutes/seconds display strings.

Three layouts are supported, selected with :class:`DmsFormat`:

    D    045.7626°
    DM   045°45.76′
    DMS  045°45′45″

Precision is the number of decimals on the smallest displayed unit. Rounding
is applied to that unit after decomposition and any overflow is carried into
the larger units, so 51.99999999999999 at DMS precision 0 renders as
052°00′00″ rather than 051°59′60″.

:func:`format_dms` drops the sign; the latitude, longitude and bearing
wrappers add the hemisphere letter or wrap the value as appropriate.
"""

import logging
import math
import numbers
from enum import Enum
from typing import List, Optional, Union

from geo_dms.angle_wrap import wrap360

logger = logging.getLogger(__name__)


DEGREE_SYMBOL = '°'
MINUTE_SYMBOL = '′'
SECOND_SYMBOL = '″'

UNDEFINED_PLACEHOLDER = '-'

# Width of the integer degrees field
LATITUDE_DEGREE_WIDTH = 2
LONGITUDE_DEGREE_WIDTH = 3

# Modulus of each place: degrees, minutes, seconds
_PLACE_MODULI = (360, 60, 60)


class DmsFormat(str, Enum):
    """Layout of a formatted angle."""

    D = "d"
    """Decimal degrees"""

    DM = "dm"
    """Whole degrees and decimal minutes"""

    DMS = "dms"
    """Whole degrees, whole minutes and decimal seconds"""


DEFAULT_PRECISION = {
    DmsFormat.D: 4,
    DmsFormat.DM: 2,
    DmsFormat.DMS: 0,
}


def parse_format(fmt: Union[DmsFormat, str]) -> DmsFormat:
    """Parse a format name ('d', 'dm', 'dms', any case) into DmsFormat.

    Raises:
        ValueError: If fmt is not a valid format
    """
    if isinstance(fmt, DmsFormat):
        return fmt

    try:
        return DmsFormat(str(fmt).lower())
    except ValueError:
        valid_formats = [f.value for f in DmsFormat]
        raise ValueError(
            f"Invalid format '{fmt}'. "
            f"Must be one of: {', '.join(valid_formats)}"
        ) from None


def resolve_precision(fmt: DmsFormat, precision: Optional[int]) -> int:
    """Return precision, or the default for fmt when precision is None."""
    if precision is None:
        return DEFAULT_PRECISION[fmt]

    if isinstance(precision, bool) or not isinstance(precision, numbers.Integral) or precision < 0:
        raise ValueError(f"Precision must be a non-negative integer, got {precision!r}")

    return precision


def _decompose(magnitude: float, fmt: DmsFormat) -> List[float]:
    """Split a non-negative angle into [degrees, minutes, seconds] places."""
    if fmt is DmsFormat.D:
        return [magnitude]

    degrees = math.floor(magnitude)
    minutes = (magnitude - degrees) * 60.0
    if fmt is DmsFormat.DM:
        return [float(degrees), minutes]

    whole_minutes = math.floor(minutes)
    seconds = (minutes - whole_minutes) * 60.0
    return [float(degrees), float(whole_minutes), seconds]


def _round_and_carry(places: List[float], precision: int, magnitude: float) -> List[float]:
    """
    Round the smallest place and propagate any overflow towards degrees.

    Degrees only wrap back to 0 when rounding produced the 360; an input that
    was already 360 or more is left as it is.
    """
    places = list(places)
    places[-1] = round(places[-1], precision)

    for index in range(len(places) - 1, 0, -1):
        modulus = _PLACE_MODULI[index]
        if places[index] >= modulus:
            places[index] -= modulus
            places[index - 1] += 1

    if places[0] >= _PLACE_MODULI[0] and magnitude < _PLACE_MODULI[0]:
        places[0] -= _PLACE_MODULI[0]

    return places


def _zero_padded(value: float, width: int, precision: int) -> str:
    """Fixed-point text with at least `width` integer digits."""
    total_width = width + 1 + precision if precision else width
    return f"{value:0{total_width}.{precision}f}"


def _render(places: List[float], fmt: DmsFormat, precision: int,
            degree_width: int, separator: str) -> str:
    if fmt is DmsFormat.D:
        return _zero_padded(places[0], degree_width, precision) + DEGREE_SYMBOL

    parts = [_zero_padded(places[0], degree_width, 0) + DEGREE_SYMBOL]
    if fmt is DmsFormat.DM:
        parts.append(_zero_padded(places[1], 2, precision) + MINUTE_SYMBOL)
    else:
        parts.append(_zero_padded(places[1], 2, 0) + MINUTE_SYMBOL)
        parts.append(_zero_padded(places[2], 2, precision) + SECOND_SYMBOL)

    return separator.join(parts)


def _format_magnitude(
    value: float,
    fmt: Union[DmsFormat, str],
    precision: Optional[int],
    separator: str,
    degree_width: int,
) -> Optional[str]:
    fmt = parse_format(fmt)
    precision = resolve_precision(fmt, precision)

    if not math.isfinite(value):
        logger.debug("No DMS rendering for undefined angle %r", value)
        return None

    magnitude = abs(value)
    places = _round_and_carry(_decompose(magnitude, fmt), precision, magnitude)

    return _render(places, fmt, precision, degree_width, separator)


def format_dms(
    value: float,
    fmt: Union[DmsFormat, str] = DmsFormat.DMS,
    precision: Optional[int] = None,
    separator: str = '',
) -> Optional[str]:
    """
    Format decimal degrees as an unsigned D, DM or DMS string.

    Args:
        value: Angle in degrees; the sign is discarded
        fmt: Output layout, DmsFormat or 'd' / 'dm' / 'dms'
        precision: Decimals on the smallest unit (default 4 for D,
            2 for DM, 0 for DMS)
        separator: Text inserted between degrees, minutes and seconds

    Returns:
        Formatted angle with 3-digit degrees, or None if value is nan

    Raises:
        ValueError: If fmt or precision is invalid

    Example:
        >>> format_dms(45.7626)
        '045°45′45″'
        >>> format_dms(45.7626, DmsFormat.DM, 4)
        '045°45.7560′'
        >>> format_dms(float('nan')) is None
        True
    """
    return _format_magnitude(value, fmt, precision, separator, LONGITUDE_DEGREE_WIDTH)


def format_latitude(
    value: float,
    fmt: Union[DmsFormat, str] = DmsFormat.DMS,
    precision: Optional[int] = None,
    separator: str = '',
) -> str:
    """Format a latitude with 2-digit degrees and an N/S suffix.

    Returns "-" if value is nan.

    Example:
        >>> format_latitude(-51.2)
        '51°12′00″S'
    """
    text = _format_magnitude(value, fmt, precision, separator, LATITUDE_DEGREE_WIDTH)
    if text is None:
        return UNDEFINED_PLACEHOLDER

    return text + separator + ('S' if value < 0 else 'N')


def format_longitude(
    value: float,
    fmt: Union[DmsFormat, str] = DmsFormat.DMS,
    precision: Optional[int] = None,
    separator: str = '',
) -> str:
    """Format a longitude with 3-digit degrees and an E/W suffix.

    Returns "-" if value is nan.
    """
    text = _format_magnitude(value, fmt, precision, separator, LONGITUDE_DEGREE_WIDTH)
    if text is None:
        return UNDEFINED_PLACEHOLDER

    return text + separator + ('W' if value < 0 else 'E')


def format_bearing(
    value: float,
    fmt: Union[DmsFormat, str] = DmsFormat.DMS,
    precision: Optional[int] = None,
    separator: str = '',
) -> str:
    """
    Format a bearing, wrapped into 0-360, with 3-digit degrees and no suffix.

    A bearing that rounds up to 360 is shown as 000, and a nan bearing as "-"
    so that a display slot for it is never left empty.

    Example:
        >>> format_bearing(-90)
        '270°00′00″'
        >>> format_bearing(359.9999999999999)
        '000°00′00″'
    """
    if math.isfinite(value):
        value = wrap360(value)

    text = _format_magnitude(value, fmt, precision, separator, LONGITUDE_DEGREE_WIDTH)
    if text is None:
        return UNDEFINED_PLACEHOLDER

    return text
