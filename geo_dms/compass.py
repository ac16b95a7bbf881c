"""
Compass-point names for bearings.

The compass rose is split into 4, 8 or 16 equal sectors, each centred on its
named point, so at 16-point precision "NNE" covers 11.25° to 33.75°.
"""

import math
from enum import IntEnum
from typing import Union

from geo_dms.angle_wrap import wrap360

UNDEFINED_COMPASS_POINT = '-'

COMPASS_POINTS = (
    'N', 'NNE', 'NE', 'ENE',
    'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW',
    'W', 'WNW', 'NW', 'NNW',
)


class CompassPrecision(IntEnum):
    """Granularity of the compass rose used by :func:`compass_point`."""

    CARDINAL = 1
    """N, E, S, W"""

    INTERCARDINAL = 2
    """Cardinals plus NE, SE, SW, NW"""

    SECONDARY_INTERCARDINAL = 3
    """Intercardinals plus NNE, ENE, ESE, SSE, SSW, WSW, WNW, NNW"""

    @property
    def point_count(self) -> int:
        """Number of sectors at this precision (4, 8 or 16)."""
        return 2 ** (self.value + 1)


def parse_compass_precision(precision: Union[CompassPrecision, int]) -> CompassPrecision:
    """Parse 1, 2 or 3 into CompassPrecision, raising ValueError otherwise."""
    try:
        return CompassPrecision(precision)
    except ValueError:
        valid = [str(p.value) for p in CompassPrecision]
        raise ValueError(
            f"Invalid compass precision '{precision}'. "
            f"Must be one of: {', '.join(valid)}"
        ) from None


def compass_point(
    bearing: float,
    precision: Union[CompassPrecision, int] = CompassPrecision.SECONDARY_INTERCARDINAL,
) -> str:
    """
    Return the compass point nearest to a bearing.

    Args:
        bearing: Bearing in degrees; any finite value, reduced modulo 360
        precision: Number of points on the rose (1 = 4, 2 = 8, 3 = 16)

    Returns:
        Point abbreviation such as "N", "NE" or "NNE", or "-" for a
        non-finite bearing

    Raises:
        ValueError: If precision is not 1, 2 or 3

    Example:
        >>> compass_point(24)
        'NNE'
        >>> compass_point(24, CompassPrecision.CARDINAL)
        'N'
    """
    precision = parse_compass_precision(precision)

    if not math.isfinite(bearing):
        return UNDEFINED_COMPASS_POINT

    count = precision.point_count
    # Round half up so a bearing on a sector boundary falls to the clockwise point
    sector = math.floor(wrap360(bearing) * count / 360.0 + 0.5) % count

    return COMPASS_POINTS[sector * len(COMPASS_POINTS) // count]
