"""Observer location and apparent horizontal positions at a given instant."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from planisphere.bodies import moon_position_equatorial, sun_position_equatorial
from planisphere.constants import DEGREES_PER_HOUR_RA
from planisphere.frames import equatorial_to_horizontal
from planisphere.planets import planet_position_equatorial
from planisphere.time_utils import jd_from_datetime, local_sidereal_time


@dataclass(frozen=True)
class Observer:
    """Geographic location of the observer.

    Parameters:
        latitude: Latitude in degrees, north positive.
        longitude: Longitude in degrees, east positive.
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f'Latitude {self.latitude} outside [-90, 90]')
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f'Longitude {self.longitude} outside [-180, 180]')


def hour_angle(observer: Observer, when: datetime, ra: float) -> float:
    """Hour angle in hours (local sidereal time - ra) for ra in hours; not folded."""
    return local_sidereal_time(when, observer.longitude) - ra


def horizontal_position(observer: Observer, when: datetime, ra: float, dec: float) -> tuple[float, float]:
    """Horizontal coordinates of an equatorial position.

    Parameters:
        observer: Observer location.
        when: Calendar instant.
        ra: Right ascension in hours.
        dec: Declination in degrees.

    Returns:
        (azimuth, elevation) in degrees; azimuth from south through west. No
        refraction.
    """
    ha = hour_angle(observer, when, ra) * DEGREES_PER_HOUR_RA
    return equatorial_to_horizontal(ha, observer.latitude, dec)


def sun_horizontal(observer: Observer, when: datetime) -> tuple[float, float]:
    """(azimuth, elevation) of the Sun."""
    ra, dec = sun_position_equatorial(jd_from_datetime(when))
    return horizontal_position(observer, when, ra / DEGREES_PER_HOUR_RA, dec)


def moon_horizontal(observer: Observer, when: datetime) -> tuple[float, float]:
    """(azimuth, elevation) of the Moon; geocentric, no parallax."""
    ra, dec = moon_position_equatorial(jd_from_datetime(when))
    return horizontal_position(observer, when, ra / DEGREES_PER_HOUR_RA, dec)


def planet_horizontal(observer: Observer, when: datetime, name: str) -> tuple[float, float]:
    """(azimuth, elevation) of a planet."""
    ra, dec = planet_position_equatorial(name, jd_from_datetime(when))
    return horizontal_position(observer, when, ra / DEGREES_PER_HOUR_RA, dec)
