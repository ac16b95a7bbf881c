"""
Parse degrees/minutes/seconds strings into decimal degrees.

Accepts the notations people actually type for latitudes, longitudes and
bearings:

- "45.76260", "45.76260°"
- "45°45.756′", "45 45.756"
- "45°45′45.36″", "45º45'45.36\"", "45° 45’ 45.36”"
- "-45°45′45.36″", "45°45′45.36″S", "45 45 45.36 W"

Failure is reported with ``nan``, never by raising, so callers test the result
with :func:`is_undefined`.
"""

import logging
import math
import numbers
import re
from typing import Iterable

import numpy as np

from geo_dms.types import Degrees

logger = logging.getLogger(__name__)


NEGATIVE_SIGNS = ('-', '−')  # hyphen-minus, MINUS SIGN
POSITIVE_SIGN = '+'
NEGATIVE_HEMISPHERES = ('S', 'W')
HEMISPHERES = ('N', 'S', 'E', 'W')

DEGREE_SYMBOLS = '°º'              # degree sign, masculine ordinal
MINUTE_SYMBOLS = '′’\''            # prime, right single quote, apostrophe
SECOND_SYMBOLS = '″”"'             # double prime, right double quote, quote
SPACE_SEPARATORS = '\u202f\u00a0\t'          # narrow no-break, no-break, tab

# Every accepted symbol collapses to an ordinary space before tokenizing
_SEPARATOR_TABLE = str.maketrans({
    symbol: ' '
    for symbol in DEGREE_SYMBOLS + MINUTE_SYMBOLS + SECOND_SYMBOLS + SPACE_SEPARATORS
})

_NUMBER_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]*)?|\.[0-9]+')

# Divisor applied to degrees, minutes and seconds respectively
_COMPONENT_DIVISORS = (1.0, 60.0, 3600.0)


def is_undefined(value) -> bool:
    """Return True if ``value`` is the undefined-angle sentinel (nan)."""
    try:
        return math.isnan(value)
    except TypeError:
        return False


def _split_sign(text: str):
    """Strip sign prefix and hemisphere suffix, returning (body, negative)."""
    negative = False

    if text.startswith(NEGATIVE_SIGNS):
        negative = True
        text = text[1:]
    elif text.startswith(POSITIVE_SIGN):
        text = text[1:]

    if text and text[-1].upper() in HEMISPHERES:
        if text[-1].upper() in NEGATIVE_HEMISPHERES:
            negative = True
        text = text[:-1].rstrip()

    return text, negative


def parse_dms(text) -> Degrees:
    """
    Parse a string in degrees/minutes/seconds notation into signed decimal degrees.

    One, two or three numeric components are accepted, separated by degree,
    minute and second symbols (including their typographic variants) and/or
    whitespace. A leading ``+``/``-``/``−`` or a trailing N/S/E/W gives the
    sign; S, W and a negative prefix each make the result negative.

    Out-of-range values such as "185" or "365" are returned unchanged; range
    checks are left to the caller.

    Numbers are passed through as floats, so values that are already decimal
    degrees can be fed through the same call.

    Args:
        text: Angle string, or a number already in decimal degrees

    Returns:
        Decimal degrees, or nan if the input cannot be interpreted

    Example:
        >>> parse_dms("30° 30′ S")
        -30.5
        >>> parse_dms("10 15")
        10.25
        >>> is_undefined(parse_dms("xxx"))
        True
    """
    if isinstance(text, numbers.Real) and not isinstance(text, bool):
        return Degrees(float(text))

    if not isinstance(text, str):
        logger.debug("Cannot parse angle from %s", type(text).__name__)
        return Degrees(math.nan)

    body, negative = _split_sign(text.strip())
    tokens = body.translate(_SEPARATOR_TABLE).split()

    if not 1 <= len(tokens) <= 3:
        logger.debug("Rejected angle %r: expected 1-3 components, found %d", text, len(tokens))
        return Degrees(math.nan)

    if not all(_NUMBER_PATTERN.fullmatch(token) for token in tokens):
        logger.debug("Rejected angle %r: non-numeric component", text)
        return Degrees(math.nan)

    degrees = sum(float(token) / divisor for token, divisor in zip(tokens, _COMPONENT_DIVISORS))

    if not math.isfinite(degrees):
        logger.debug("Rejected angle %r: component too large", text)
        return Degrees(math.nan)

    if negative:
        degrees = -degrees

    return Degrees(degrees)


def parse_dms_array(texts: Iterable) -> np.ndarray:
    """Parse many angle strings at once.

    Args:
        texts: Iterable of angle strings (or numbers)

    Returns:
        1-D float64 array with nan for every entry that failed to parse
    """
    return np.array([parse_dms(text) for text in texts], dtype=np.float64)
