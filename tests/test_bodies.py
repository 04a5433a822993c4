"""Tests for the Sun and Moon models, position functions and phase."""

from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest

from planisphere.bodies import (
    earth_position_heliocentric,
    illuminated_fraction,
    moon_illuminated_fraction,
    moon_position_ecliptic,
    moon_position_function,
    star_position_function,
    sun_position_ecliptic,
    sun_position_equatorial,
    sun_position_function,
)
from planisphere.constants import AU_KM, OBLIQUITY_J2000
from planisphere.time_utils import jd_from_datetime


def _jd(*args: int) -> float:
    return jd_from_datetime(datetime(*args, tzinfo=timezone.utc))


def test_sun_at_march_equinox() -> None:
    """Declination crosses zero at the 2024 March equinox (20 Mar 03:06 UTC)."""
    ra, dec = sun_position_equatorial(_jd(2024, 3, 20, 3, 6))
    assert abs(dec) < 0.1
    assert min(ra, 360.0 - ra) < 0.2


def test_sun_at_june_solstice() -> None:
    """Declination reaches the obliquity at the 2024 June solstice."""
    ra, dec = sun_position_equatorial(_jd(2024, 6, 20, 20, 51))
    assert dec == pytest.approx(OBLIQUITY_J2000, abs=0.05)
    assert ra == pytest.approx(90.0, abs=0.2)


def test_sun_distance_perihelion_and_aphelion() -> None:
    """Earth-Sun distance near 0.983 AU in January and 1.017 AU in July."""
    lat, _, near = sun_position_ecliptic(_jd(2024, 1, 3))
    _, _, far = sun_position_ecliptic(_jd(2024, 7, 5))
    assert lat == 0.0
    assert 0.982 < near < 0.985
    assert 1.016 < far < 1.018


def test_earth_is_opposite_the_sun() -> None:
    """Earth's heliocentric longitude is the Sun's geocentric longitude plus 180."""
    jd = _jd(2024, 5, 1)
    _, sun_lon, sun_dist = sun_position_ecliptic(jd)
    earth_lon, earth_lat, earth_dist = earth_position_heliocentric(jd)
    assert (earth_lon - sun_lon) % 360.0 == pytest.approx(180.0)
    assert earth_lat == 0.0
    assert earth_dist == sun_dist


def test_moon_against_published_example() -> None:
    """1992 April 12, 0h: longitude 133.1627, latitude -3.2291, distance 368409.7 km."""
    lat, lon, dist = moon_position_ecliptic(2448724.5)
    assert lon == pytest.approx(133.1627, abs=0.05)
    assert lat == pytest.approx(-3.2291, abs=0.02)
    assert dist * AU_KM == pytest.approx(368409.7, abs=300.0)


def test_moon_longitude_in_range() -> None:
    """Longitude is normalized to [0, 360) over a full month."""
    start = _jd(2024, 1, 1)
    for day in range(30):
        lat, lon, dist = moon_position_ecliptic(start + day)
        assert 0.0 <= lon < 360.0
        assert abs(lat) < 5.5
        assert 356000.0 < dist * AU_KM < 407000.0


def test_position_functions_return_hours() -> None:
    """Position functions give right ascension in hours."""
    jd = _jd(2024, 6, 20, 20, 51)
    ra, dec = sun_position_function()(jd)
    assert ra == pytest.approx(6.0, abs=0.02)
    assert dec > 23.0

    ra, _ = moon_position_function()(jd)
    assert 0.0 <= ra < 24.0


def test_star_position_function_is_constant() -> None:
    """A star's position does not depend on the date."""
    position = star_position_function(6.752, -16.716)
    assert position(2451545.0) == (6.752, -16.716)
    assert position(2460000.5) == (6.752, -16.716)


@pytest.mark.parametrize(
    ('delta', 'r', 'big_r', 'expected'),
    [
        (1.0, 2.0, 1.0, 100.0),
        (1.0, 1.0, math.sqrt(2.0), 50.0),
        (1.0, 1.0, 2.0, 0.0),
    ],
)
def test_illuminated_fraction_geometry(delta: float, r: float, big_r: float, expected: float) -> None:
    """Full at opposition, half at quadrature, new in conjunction."""
    assert illuminated_fraction(delta, r, big_r) == pytest.approx(expected, abs=1e-9)


def test_illuminated_fraction_clamps_rounding() -> None:
    """A degenerate triangle slightly beyond the acos domain does not raise."""
    assert illuminated_fraction(1.0, 2.0 + 1e-15, 1.0) == pytest.approx(100.0)


@pytest.mark.parametrize(
    ('when', 'low', 'high'),
    [
        ((2024, 1, 11, 11, 57), 0.0, 3.0),
        ((2024, 1, 18, 3, 53), 45.0, 55.0),
        ((2024, 1, 25, 17, 54), 97.0, 100.0),
    ],
)
def test_moon_phase_through_a_lunation(when: tuple[int, ...], low: float, high: float) -> None:
    """New, first quarter and full Moon of January 2024."""
    assert low <= moon_illuminated_fraction(_jd(*when)) <= high
