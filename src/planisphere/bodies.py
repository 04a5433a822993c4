"""Low-order Sun and Moon position models, position functions and phase.

Sun: https://en.wikipedia.org/wiki/Position_of_the_Sun (about 0.01 degree).
Moon: truncated Brown series after Montenbruck, Grundlagen der
Ephemeridenrechnung (arc minutes in longitude).
"""

from __future__ import annotations

from typing import Callable

from planisphere.angle_utils import acos, cos, sin
from planisphere.constants import (
    ARCSEC_PER_DEGREE,
    AU_KM,
    DAYS_PER_CENTURY,
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
    HALF_CIRCLE_DEGREES,
    JD_J2000,
)
from planisphere.frames import ecliptic_to_equatorial, geocentric_to_heliocentric_ecliptic

# Julian Date -> (right ascension in hours, declination in degrees)
PositionFunction = Callable[[float], tuple[float, float]]


def _sun_ecliptic_longitude(jd: float) -> tuple[float, float]:
    """Apparent ecliptic longitude of the Sun and its mean anomaly g (degrees)."""
    n = jd - JD_J2000
    mean_lon = (280.460 + 0.9856474 * n) % DEGREES_PER_CIRCLE
    g = (357.528 + 0.9856003 * n) % DEGREES_PER_CIRCLE
    return (mean_lon + 1.915 * sin(g) + 0.020 * sin(2 * g), g)


def sun_position_equatorial(jd: float) -> tuple[float, float]:
    """Geocentric equatorial position of the Sun.

    Parameters:
        jd: Julian Date.

    Returns:
        (ra, dec): right ascension and declination, both in degrees.
    """
    lon, _ = _sun_ecliptic_longitude(jd)
    return ecliptic_to_equatorial(0.0, lon)


def sun_position_ecliptic(jd: float) -> tuple[float, float, float]:
    """Geocentric ecliptic position of the Sun.

    Parameters:
        jd: Julian Date.

    Returns:
        (lat, lon, distance): ecliptic latitude (always 0) and longitude in
        degrees, Earth-Sun distance in AU.
    """
    lon, g = _sun_ecliptic_longitude(jd)
    distance = 1.00014 - 0.01671 * cos(g) - 0.00014 * cos(2 * g)
    return (0.0, lon % DEGREES_PER_CIRCLE, distance)


def earth_position_heliocentric(jd: float) -> tuple[float, float, float]:
    """Heliocentric ecliptic (lon, lat, distance) of Earth: the Sun's vector reversed."""
    lat, lon, distance = sun_position_ecliptic(jd)
    return ((lon + HALF_CIRCLE_DEGREES) % DEGREES_PER_CIRCLE, -lat, distance)


def moon_position_ecliptic(jd: float) -> tuple[float, float, float]:
    """Geocentric ecliptic position of the Moon.

    Parameters:
        jd: Julian Date.

    Returns:
        (lat, lon, distance): ecliptic latitude and longitude in degrees,
        Earth-Moon distance in AU.
    """
    t = (jd - JD_J2000) / DAYS_PER_CENTURY
    # Mean longitude, mean anomaly, Sun's mean anomaly, argument of latitude,
    # mean elongation.
    l0 = (218.31665 + 481267.88134 * t - 0.001327 * t**2) % 360.0
    l = (134.96341 + 477198.86763 * t + 0.008997 * t**2) % 360.0  # noqa: E741
    ls = (357.52911 + 35999.05029 * t + 0.000154 * t**2) % 360.0
    f = (93.27210 + 483202.01753 * t - 0.003403 * t**2) % 360.0
    d = (297.85020 + 445267.11152 * t - 0.001630 * t**2) % 360.0

    dlon = (
        22640 * sin(l) + 769 * sin(2 * l) + 36 * sin(3 * l)
        - 4586 * sin(l - 2 * d)
        + 2370 * sin(2 * d)
        - 668 * sin(ls)
        - 412 * sin(2 * f)
        - 212 * sin(2 * l - 2 * d)
        - 206 * sin(l + ls - 2 * d)
        + 192 * sin(l + 2 * d)
        - 165 * sin(ls - 2 * d)
        + 148 * sin(l - ls)
        - 125 * sin(d)
        - 110 * sin(l + ls)
        - 55 * sin(2 * f - 2 * d)
    )  # arc seconds
    lon = l0 + dlon / ARCSEC_PER_DEGREE

    dlat = (
        18520 * sin(f + lon - l0 + 0.114 * sin(2 * f) + 0.150 * sin(ls))
        - 526 * sin(f - 2 * d)
        + 44 * sin(l + f - 2 * d)
        - 31 * sin(-l + f - 2 * d)
        - 25 * sin(-2 * l + f)
        - 23 * sin(ls + f - 2 * d)
        + 21 * sin(-l + f)
        + 11 * sin(-ls + f - 2 * d)
    )  # arc seconds
    lat = dlat / ARCSEC_PER_DEGREE

    distance_km = (
        385000
        - 20905 * cos(l)
        - 570 * cos(2 * l)
        - 3699 * cos(2 * d - l)
        - 2956 * cos(2 * d)
        + 246 * cos(2 * l - 2 * d)
        - 205 * cos(ls - 2 * d)
        - 171 * cos(l + 2 * d)
        - 152 * cos(l + ls - 2 * d)
    )
    return (lat, lon % DEGREES_PER_CIRCLE, distance_km / AU_KM)


def moon_position_equatorial(jd: float) -> tuple[float, float]:
    """Geocentric (ra, dec) of the Moon, both in degrees."""
    lat, lon, _ = moon_position_ecliptic(jd)
    return ecliptic_to_equatorial(lat, lon)


def sun_position_function() -> PositionFunction:
    """Position function of the Sun (right ascension in hours)."""

    def _position(jd: float) -> tuple[float, float]:
        ra, dec = sun_position_equatorial(jd)
        return (ra / DEGREES_PER_HOUR_RA, dec)

    return _position


def moon_position_function() -> PositionFunction:
    """Position function of the Moon (right ascension in hours)."""

    def _position(jd: float) -> tuple[float, float]:
        ra, dec = moon_position_equatorial(jd)
        return (ra / DEGREES_PER_HOUR_RA, dec)

    return _position


def star_position_function(ra: float, dec: float) -> PositionFunction:
    """Constant position function for a fixed star.

    Parameters:
        ra: Right ascension in hours.
        dec: Declination in degrees.
    """

    def _position(jd: float) -> tuple[float, float]:
        del jd
        return (ra, dec)

    return _position


def illuminated_fraction(delta: float, r: float, big_r: float) -> float:
    """Illuminated fraction of a body's disk as seen from Earth, in percent.

    Parameters:
        delta: Body-Earth distance (AU).
        r: Body-Sun distance (AU).
        big_r: Earth-Sun distance (AU).

    Returns:
        Phase in percent, 0 (new) to 100 (full).
    """
    cos_phase = (delta**2 + r**2 - big_r**2) / (2 * delta * r)
    phase_angle = acos(max(-1.0, min(1.0, cos_phase)))
    return 50.0 * (1 + cos(phase_angle))


def moon_illuminated_fraction(jd: float) -> float:
    """Illuminated fraction of the Moon in percent at Julian Date jd."""
    lat, lon, delta = moon_position_ecliptic(jd)
    earth_lon, earth_lat, earth_dist = earth_position_heliocentric(jd)
    _, _, r = geocentric_to_heliocentric_ecliptic(earth_lon, earth_lat, earth_dist, lon, lat, delta)
    return illuminated_fraction(delta, r, earth_dist)
