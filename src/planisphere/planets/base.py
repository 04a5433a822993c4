"""Keplerian mean orbital elements and heliocentric positions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from planisphere.constants import (
    DAYS_PER_CENTURY,
    DEGREES_PER_CIRCLE,
    JD_J2000,
    PRECESSION_PER_CENTURY,
)
from planisphere.frames import orbit_to_heliocentric_ecliptic

KEPLER_TOLERANCE = 1e-12
KEPLER_MAX_ITERATIONS = 30


@dataclass(frozen=True)
class OrbitalElements:
    """Mean elements at J2000 and their rates per Julian century.

    Angles in degrees, semi-major axis in AU (J2000 ecliptic and equinox).
    """

    name: str
    a: float
    e: float
    inclination: float
    mean_longitude: float
    perihelion_longitude: float
    node: float
    a_rate: float = 0.0
    e_rate: float = 0.0
    inclination_rate: float = 0.0
    mean_longitude_rate: float = 0.0
    perihelion_longitude_rate: float = 0.0
    node_rate: float = 0.0

    def at(self, jd: float) -> OrbitalElements:
        """Return the osculating-like elements propagated to Julian Date jd."""
        t = (jd - JD_J2000) / DAYS_PER_CENTURY
        return OrbitalElements(
            name=self.name,
            a=self.a + self.a_rate * t,
            e=self.e + self.e_rate * t,
            inclination=self.inclination + self.inclination_rate * t,
            mean_longitude=self.mean_longitude + self.mean_longitude_rate * t,
            perihelion_longitude=self.perihelion_longitude + self.perihelion_longitude_rate * t,
            node=self.node + self.node_rate * t,
        )


def solve_kepler(mean_anomaly: float, e: float) -> float:
    """Solve Kepler's equation E - e sin E = M by Newton iteration.

    Parameters:
        mean_anomaly: Mean anomaly M in radians.
        e: Eccentricity (0 <= e < 1).

    Returns:
        Eccentric anomaly E in radians.
    """
    big_e = mean_anomaly + e * math.sin(mean_anomaly)
    for _ in range(KEPLER_MAX_ITERATIONS):
        delta = (big_e - e * math.sin(big_e) - mean_anomaly) / (1 - e * math.cos(big_e))
        big_e -= delta
        if abs(delta) < KEPLER_TOLERANCE:
            break
    return big_e


def heliocentric_position(elements: OrbitalElements, jd: float) -> tuple[float, float, float]:
    """Heliocentric ecliptic position of a body from its mean elements.

    Parameters:
        elements: Mean elements at J2000 with rates.
        jd: Julian Date.

    Returns:
        (lon, lat, r): ecliptic longitude and latitude in degrees, Sun distance in AU.
        The longitude is referred to the mean equinox of date, like the Sun and
        Moon series, by adding general precession to the J2000 elements.
    """
    el = elements.at(jd)
    mean_anomaly = math.radians((el.mean_longitude - el.perihelion_longitude) % DEGREES_PER_CIRCLE)
    big_e = solve_kepler(mean_anomaly, el.e)
    true_anomaly = 2 * math.atan2(
        math.sqrt(1 + el.e) * math.sin(big_e / 2),
        math.sqrt(1 - el.e) * math.cos(big_e / 2),
    )
    r = el.a * (1 - el.e * math.cos(big_e))
    argument_of_perihelion = el.perihelion_longitude - el.node
    u = (argument_of_perihelion + math.degrees(true_anomaly)) % DEGREES_PER_CIRCLE
    lon, lat = orbit_to_heliocentric_ecliptic(u, el.node % DEGREES_PER_CIRCLE, el.inclination)
    lon += PRECESSION_PER_CENTURY * (jd - JD_J2000) / DAYS_PER_CENTURY
    return (lon % DEGREES_PER_CIRCLE, lat, r)
