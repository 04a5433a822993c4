"""Planet positions from mean orbital elements (geocentric, equatorial, phase)."""

from __future__ import annotations

import logging

from planisphere.bodies import PositionFunction, illuminated_fraction
from planisphere.constants import DEGREES_PER_HOUR_RA
from planisphere.frames import ecliptic_to_equatorial, heliocentric_to_geocentric_ecliptic
from planisphere.planets.base import OrbitalElements, heliocentric_position, solve_kepler
from planisphere.planets.elements import (
    EARTH,
    JUPITER,
    MARS,
    MERCURY,
    NEPTUNE,
    SATURN,
    URANUS,
    VENUS,
)

logger = logging.getLogger(__name__)

__all__ = [
    'OrbitalElements',
    'PLANET_NAMES',
    'get_planet',
    'heliocentric_position',
    'planet_illuminated_fraction',
    'planet_position_ecliptic',
    'planet_position_equatorial',
    'planet_position_function',
    'planet_position_heliocentric',
    'solve_kepler',
]

_PLANETS: dict[str, OrbitalElements] = {
    el.name.lower(): el for el in (MERCURY, VENUS, EARTH, MARS, JUPITER, SATURN, URANUS, NEPTUNE)
}

# Planets that can be observed from Earth, in order from the Sun.
PLANET_NAMES: tuple[str, ...] = tuple(name for name in _PLANETS if name != 'earth')


def get_planet(name: str) -> OrbitalElements:
    """Return the mean elements of a planet by case-insensitive name.

    Raises:
        ValueError: If name is not a known planet.
    """
    try:
        return _PLANETS[name.strip().lower()]
    except KeyError:
        raise ValueError(f'Unknown planet {name!r}; expected one of {", ".join(_PLANETS)}') from None


def planet_position_heliocentric(name: str, jd: float) -> tuple[float, float, float]:
    """Heliocentric ecliptic (lon, lat, r) of a planet in degrees and AU."""
    return heliocentric_position(get_planet(name), jd)


def _geocentric(name: str, jd: float) -> tuple[tuple[float, float, float], tuple[float, float, float]]:
    """Geocentric (lat, lon, delta) of a planet and the heliocentric (lon, lat, r) of Earth."""
    if get_planet(name) is EARTH:
        raise ValueError('Earth has no geocentric position')
    earth = heliocentric_position(EARTH, jd)
    lon, lat, r = planet_position_heliocentric(name, jd)
    return heliocentric_to_geocentric_ecliptic(*earth, lon, lat, r), earth


def planet_position_ecliptic(name: str, jd: float) -> tuple[float, float, float]:
    """Geocentric ecliptic position of a planet.

    Parameters:
        name: Planet name (e.g. 'Jupiter').
        jd: Julian Date.

    Returns:
        (lat, lon, distance): ecliptic latitude and longitude in degrees and the
        Earth-planet distance in AU. No light-time correction.
    """
    geo, _ = _geocentric(name, jd)
    return geo


def planet_position_equatorial(name: str, jd: float) -> tuple[float, float]:
    """Geocentric (ra, dec) of a planet, both in degrees."""
    lat, lon, _ = planet_position_ecliptic(name, jd)
    return ecliptic_to_equatorial(lat, lon)


def planet_position_function(name: str) -> PositionFunction:
    """Position function of a planet (right ascension in hours) for the rise/set solver."""
    get_planet(name)

    def _position(jd: float) -> tuple[float, float]:
        ra, dec = planet_position_equatorial(name, jd)
        return (ra / DEGREES_PER_HOUR_RA, dec)

    return _position


def planet_illuminated_fraction(name: str, jd: float) -> float:
    """Illuminated fraction of a planet's disk in percent as seen from Earth."""
    (_, _, delta), earth = _geocentric(name, jd)
    _, _, r = planet_position_heliocentric(name, jd)
    fraction = illuminated_fraction(delta, r, earth[2])
    logger.debug('%s at JD %.5f: delta %.5f AU, r %.5f AU, phase %.2f%%', name, jd, delta, r, fraction)
    return fraction
