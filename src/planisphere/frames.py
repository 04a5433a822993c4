"""Coordinate frame transforms (equatorial, horizontal, ecliptic, cartesian).

Longitudes (azimuth, ecliptic longitude, right ascension in degrees) come out
in [0, 360) through the half-angle quadrant rule in _longitude. Azimuth is
measured from south through west.
"""

from __future__ import annotations

import math

import numpy as np

from planisphere.angle_utils import acos, asin, atan, cos, sin
from planisphere.constants import DEGREES_PER_CIRCLE, HALF_CIRCLE_DEGREES, OBLIQUITY_J2000


def _longitude(x: float, y: float) -> float:
    """Angle of (x, y) in degrees in [0, 360), zero for the origin.

    Raises:
        RuntimeError: If no quadrant branch matches, which only happens when x or
            y is NaN.
    """
    if x == 0 and y == 0:
        return 0.0
    phi = 2 * atan(y / (abs(x) + math.sqrt(x**2 + y**2)))
    if x >= 0 and y >= 0:
        return phi
    if x >= 0 and y < 0:
        return DEGREES_PER_CIRCLE + phi
    if x < 0:
        return HALF_CIRCLE_DEGREES - phi
    raise RuntimeError(f'No quadrant for x={x!r}, y={y!r}')


def _latitude(z: float, p: float) -> float:
    """Latitude in degrees of a vector with height z and projected radius p."""
    if p == 0:
        if z > 0:
            return 90.0
        if z < 0:
            return -90.0
        return 0.0
    return atan(z / p)


def equatorial_to_horizontal(hour_angle: float, latitude: float, declination: float) -> tuple[float, float]:
    """Convert equatorial coordinates to horizontal coordinates.

    Parameters:
        hour_angle: Hour angle in degrees (local sidereal time - right ascension).
        latitude: Geographic latitude of the observer in degrees.
        declination: Declination in degrees.

    Returns:
        (azimuth, elevation) in degrees; azimuth from south through west.
    """
    x = sin(latitude) * cos(declination) * cos(hour_angle) - cos(latitude) * sin(declination)
    y = cos(declination) * sin(hour_angle)
    z = sin(latitude) * sin(declination) + cos(latitude) * cos(declination) * cos(hour_angle)
    p = math.sqrt(x**2 + y**2)
    return (_longitude(x, y), _latitude(z, p))


def orbit_to_heliocentric_ecliptic(u: float, node: float, inclination: float) -> tuple[float, float]:
    """Convert an orbital-plane angle to heliocentric ecliptic coordinates.

    Parameters:
        u: Argument of latitude in degrees (argument of periapsis + true anomaly).
        node: Longitude of the ascending node in degrees.
        inclination: Inclination of the orbit against the ecliptic in degrees.

    Returns:
        (longitude, latitude) in degrees.
    """
    b = asin(sin(u) * sin(inclination))
    # Clamp rounding noise at the node crossings.
    lo1 = acos(max(-1.0, min(1.0, cos(u) / cos(b))))
    lo2 = asin(max(-1.0, min(1.0, sin(u) * cos(inclination) / cos(b))))
    if lo2 < 0:
        lon = DEGREES_PER_CIRCLE - (lo1 - node)
    else:
        lon = lo1 + node
    if lon > DEGREES_PER_CIRCLE:
        lon -= DEGREES_PER_CIRCLE
    return (lon, b)


def spherical_to_cartesian(lat: float, lon: float, r: float) -> tuple[float, float, float]:
    """Convert spherical (lat, lon, r) with angles in degrees to (x, y, z)."""
    return (r * cos(lat) * cos(lon), r * cos(lat) * sin(lon), r * sin(lat))


def cartesian_to_spherical(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Convert (x, y, z) to spherical (lat, lon, r) with angles in degrees.

    On the polar axis (x = y = 0) the latitude is +90, 0 or -90 by the sign of z
    and the longitude is 0.
    """
    r = math.sqrt(x**2 + y**2 + z**2)
    p = math.sqrt(x**2 + y**2)
    return (_latitude(z, p), _longitude(x, y), r)


def _ecliptic_vector(lon: float, lat: float, dist: float) -> np.ndarray:
    return np.array(spherical_to_cartesian(lat, lon, dist), dtype=np.float64)


def heliocentric_to_geocentric_ecliptic(
    earth_lon: float,
    earth_lat: float,
    earth_dist: float,
    lon: float,
    lat: float,
    dist: float,
) -> tuple[float, float, float]:
    """Convert heliocentric ecliptic coordinates of a body to geocentric ones.

    Parameters:
        earth_lon, earth_lat: Heliocentric ecliptic longitude/latitude of Earth (degrees).
        earth_dist: Earth-Sun distance (AU).
        lon, lat: Heliocentric ecliptic longitude/latitude of the body (degrees).
        dist: Body-Sun distance (AU).

    Returns:
        (lat, lon, earth_distance): geocentric ecliptic latitude and longitude in
        degrees and the Earth-body distance in AU.
    """
    v = _ecliptic_vector(lon, lat, dist) - _ecliptic_vector(earth_lon, earth_lat, earth_dist)
    return cartesian_to_spherical(float(v[0]), float(v[1]), float(v[2]))


def geocentric_to_heliocentric_ecliptic(
    earth_lon: float,
    earth_lat: float,
    earth_dist: float,
    lon: float,
    lat: float,
    dist: float,
) -> tuple[float, float, float]:
    """Convert geocentric ecliptic coordinates of a body to heliocentric ones.

    Parameters:
        earth_lon, earth_lat: Heliocentric ecliptic longitude/latitude of Earth (degrees).
        earth_dist: Earth-Sun distance (AU).
        lon, lat: Geocentric ecliptic longitude/latitude of the body (degrees).
        dist: Earth-body distance (AU).

    Returns:
        (lat, lon, sun_distance): heliocentric ecliptic latitude and longitude in
        degrees and the Sun-body distance in AU.
    """
    v = _ecliptic_vector(lon, lat, dist) + _ecliptic_vector(earth_lon, earth_lat, earth_dist)
    return cartesian_to_spherical(float(v[0]), float(v[1]), float(v[2]))


def ecliptic_to_equatorial(lat: float, lon: float) -> tuple[float, float]:
    """Convert geocentric ecliptic (lat, lon) to equatorial (ra, dec), all in degrees.

    The obliquity is fixed at its J2000 mean value; no precession or nutation.
    """
    x = cos(lat) * cos(lon)
    y = cos(OBLIQUITY_J2000) * cos(lat) * sin(lon) - sin(OBLIQUITY_J2000) * sin(lat)
    z = sin(OBLIQUITY_J2000) * cos(lat) * sin(lon) + cos(OBLIQUITY_J2000) * sin(lat)
    dec, ra, _ = cartesian_to_spherical(x, y, z)
    return (ra, dec)


def equatorial_to_ecliptic(ra: float, dec: float) -> tuple[float, float]:
    """Convert equatorial (ra, dec) in degrees to geocentric ecliptic (lat, lon).

    Inverse rotation of ecliptic_to_equatorial.
    """
    x = cos(dec) * cos(ra)
    y = cos(OBLIQUITY_J2000) * cos(dec) * sin(ra) + sin(OBLIQUITY_J2000) * sin(dec)
    z = -sin(OBLIQUITY_J2000) * cos(dec) * sin(ra) + cos(OBLIQUITY_J2000) * sin(dec)
    lat, lon, _ = cartesian_to_spherical(x, y, z)
    return (lat, lon)
