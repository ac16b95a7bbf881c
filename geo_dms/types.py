"""
Unit type annotations for angle values.

NewType alias documenting that a float carries decimal degrees. It is
erased at runtime, so a ``Degrees`` value is an ordinary ``float`` (including
``nan`` for an undefined angle).

Usage Example:
    >>> from geo_dms.types import Degrees
    >>>
    >>> def heading() -> Degrees:
    ...     return Degrees(237.0)
"""

from typing import NewType

Degrees = NewType('Degrees', float)
"""Angle in decimal degrees (latitude, longitude, bearing)"""
