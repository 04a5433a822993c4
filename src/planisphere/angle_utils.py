"""Degree-based trigonometry, floor modulo and sexagesimal conversion."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from planisphere.constants import ARCMIN_PER_DEGREE, ARCSEC_PER_DEGREE


def sin(x: float) -> float:
    """Sine of x given in degrees."""
    return math.sin(math.radians(x))


def cos(x: float) -> float:
    """Cosine of x given in degrees."""
    return math.cos(math.radians(x))


def tan(x: float) -> float:
    """Tangent of x given in degrees."""
    return math.tan(math.radians(x))


def asin(x: float) -> float:
    """Arc sine of x, in degrees."""
    return math.degrees(math.asin(x))


def acos(x: float) -> float:
    """Arc cosine of x, in degrees."""
    return math.degrees(math.acos(x))


def atan(x: float) -> float:
    """Arc tangent of x, in degrees."""
    return math.degrees(math.atan(x))


def fmod_floor(a: float, b: float) -> float:
    """Floor-based modulo for floats; the result has the sign of b.

    Unlike math.fmod (which truncates) fmod_floor(-1.0, 24) is 23.0.
    """
    return a - b * math.floor(a / b)


@dataclass(frozen=True)
class Sexagesimal:
    """Angle split into integer degrees, integer minutes and fractional seconds.

    The sign is carried by every non-zero component (truncation toward zero), so
    -10.5 becomes (-10, -30, 0.0).
    """

    degrees: int
    minutes: int
    seconds: float


def deg_to_sex(degree: float) -> Sexagesimal:
    """Split decimal degrees into sexagesimal degrees, minutes, seconds."""
    d = int(degree)
    m = (degree - d) * ARCMIN_PER_DEGREE
    im = int(m)
    return Sexagesimal(d, im, (m - im) * 60.0)


def sex_to_deg(sex: Sexagesimal) -> float:
    """Inverse of deg_to_sex."""
    return sex.degrees + sex.minutes / ARCMIN_PER_DEGREE + sex.seconds / ARCSEC_PER_DEGREE


def parse_angle(string: str) -> float | None:
    """Parse an angle given as decimal or as "deg min sec".

    Accepts one, two or three whitespace (or colon) separated numbers. Minutes
    and seconds must be non-negative; a leading minus sign applies to the whole
    angle, so "-0 30" is -0.5.

    Parameters:
        string: Angle text, e.g. "52.5", "52 30" or "-13:24:18".

    Returns:
        Angle in the units of the first field (degrees or hours), or None when
        the text cannot be parsed.
    """
    s = string.strip()
    parts = [p for p in re.split(r'[\s:]+', s) if p]
    if not 1 <= len(parts) <= 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    angle = 0.0
    for scale, value in zip((1.0, ARCMIN_PER_DEGREE, ARCSEC_PER_DEGREE), values):
        angle += abs(value) / scale
    if s.startswith('-'):
        angle = -angle
    return angle


def dms_string(value: float, separator: str = 'dms', ndecimal: int = 1) -> str:
    """Format an angle (degrees or hours) as sexagesimal text.

    Rounding happens on the seconds field, so 10.99999999 prints as 11 00 00.0
    rather than 10 59 60.0.

    Parameters:
        value: Angle in degrees, or hours for right ascension.
        separator: Three unit characters, e.g. 'dms' or 'hms'; fewer than three
            characters gives blank separators.
        ndecimal: Number of decimals printed for the seconds.

    Returns:
        Formatted string such as "-13d 24m 18.0s".
    """
    if len(separator) < 3:
        units = ('', '', '')
    else:
        units = (separator[0], separator[1], separator[2])
    sign = '-' if value < 0 else ''
    scale = 10**ndecimal
    total = round(abs(value) * ARCSEC_PER_DEGREE * scale)
    whole_secs, frac = divmod(total, scale)
    whole_mins, secs = divmod(whole_secs, 60)
    degs, mins = divmod(whole_mins, 60)
    sec_text = f'{secs:02d}' if ndecimal <= 0 else f'{secs:02d}.{frac:0{ndecimal}d}'
    return f'{sign}{degs}{units[0]} {mins:02d}{units[1]} {sec_text}{units[2]}'
