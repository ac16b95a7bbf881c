"""
Reduce angles into their conventional ranges.

Values already inside the target range are returned unchanged, so wrapping a
well-formed latitude or longitude is lossless. nan propagates.
"""

from geo_dms.types import Degrees


def wrap360(degrees: float) -> Degrees:
    """Constrain a bearing to 0 <= degrees < 360 (e.g. -1 -> 359, 361 -> 1)."""
    if 0 <= degrees < 360:
        return Degrees(degrees)

    wrapped = degrees % 360.0
    # Tiny negative inputs round up to exactly 360.0
    if wrapped >= 360.0:
        wrapped = 0.0
    return Degrees(wrapped)


def wrap180(degrees: float) -> Degrees:
    """Constrain a longitude to -180 < degrees <= 180 (e.g. 190 -> -170)."""
    if -180 < degrees <= 180:
        return Degrees(degrees)

    return Degrees(180.0 - (180.0 - degrees) % 360.0)


def wrap90(degrees: float) -> Degrees:
    """
    Constrain a latitude to -90 <= degrees <= 90.

    Latitudes past a pole fold back towards the equator rather than jumping
    to the other hemisphere: 100 -> 80, -100 -> -80, 180 -> 0.
    """
    if -90 <= degrees <= 90:
        return Degrees(degrees)

    # Triangle wave with period 360 and amplitude 90
    return Degrees(abs((degrees - 90.0) % 360.0 - 180.0) - 90.0)
