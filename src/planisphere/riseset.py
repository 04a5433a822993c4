"""Rise, set and twilight times by fixed-point iteration on the hour angle.

The solver starts from a trial UTC hour T0 on the UTC day of the given date and
moves the trial time toward the instant where the object's hour angle matches
the elevation threshold. There is no tolerance test: the iteration count is
part of each body's tuning (2 for stars and the Sun, 5 for the Moon).

A result is either an aware UTC datetime or a NoEvent member when the object
stays above or below the threshold for the whole day.
"""

from __future__ import annotations

import enum
import logging
from datetime import datetime, timedelta
from typing import Callable

from planisphere.angle_utils import acos, cos, sin
from planisphere.bodies import (
    PositionFunction,
    moon_position_function,
    star_position_function,
    sun_position_function,
)
from planisphere.constants import (
    ASTRONOMICAL_TWILIGHT_ELEVATION,
    CIVIL_TWILIGHT_ELEVATION,
    DEGREES_PER_HOUR_RA,
    HOURS_PER_DAY,
    MILLISECONDS_PER_HOUR,
    MOON_ELEVATION,
    MOON_ITERATIONS,
    NAUTICAL_TWILIGHT_ELEVATION,
    PLANET_ITERATIONS,
    STAR_ELEVATION,
    STAR_ITERATIONS,
    SUN_ELEVATION,
    SUN_ITERATIONS,
)
from planisphere.planets import planet_position_function
from planisphere.time_utils import jd_from_datetime, sidereal_time, utc_midnight

logger = logging.getLogger(__name__)

# Rate of hour angle change against the trial time for fixed stars.
STAR_RATE = 1.0027379
# First-iteration rates for bodies whose rate is measured from successive RAs.
MOON_INITIAL_RATE = 1.0027 - 0.0366
PLANET_INITIAL_RATE = 1.0027 - 0
MOVING_BODY_BASE_RATE = 1.0027


class NoEvent(enum.Enum):
    """Outcome when the elevation threshold is not crossed on that day."""

    ALWAYS_ABOVE = 'always above'
    ALWAYS_BELOW = 'always below'


RiseSetResult = datetime | NoEvent


class BodyClass(enum.Enum):
    """Kind of body; selects how the apparent motion rate is estimated."""

    STAR = 'star'
    SUN = 'sun'
    MOON = 'moon'
    PLANET = 'planet'


class RiseSetType(enum.Enum):
    """Sun events: (elevation threshold in degrees, True for rising)."""

    ASTRO_DAWN = (ASTRONOMICAL_TWILIGHT_ELEVATION, True)
    NAUTICAL_DAWN = (NAUTICAL_TWILIGHT_ELEVATION, True)
    CIVIL_DAWN = (CIVIL_TWILIGHT_ELEVATION, True)
    RISE = (SUN_ELEVATION, True)
    SET = (SUN_ELEVATION, False)
    CIVIL_DUSK = (CIVIL_TWILIGHT_ELEVATION, False)
    NAUTICAL_DUSK = (NAUTICAL_TWILIGHT_ELEVATION, False)
    ASTRO_DUSK = (ASTRONOMICAL_TWILIGHT_ELEVATION, False)

    @property
    def elevation(self) -> float:
        return self.value[0]

    @property
    def rising(self) -> bool:
        return self.value[1]


# (iteration, ra, previous ra, T, previous T) -> rate
RateFunction = Callable[[int, float, float, float, float], float]


def _fixed_rate(rate: float) -> RateFunction:
    def _rate(iteration: int, ra: float, ra_last: float, t: float, t_last: float) -> float:
        return rate

    return _rate


def _measured_rate(initial: float) -> RateFunction:
    def _rate(iteration: int, ra: float, ra_last: float, t: float, t_last: float) -> float:
        if iteration == 0:
            return initial
        dra = ra - ra_last
        # RA wrapped through 0h between the two trial times.
        if dra > 12:
            dra -= 24
        elif dra < -12:
            dra += 24
        return MOVING_BODY_BASE_RATE - dra / (t - t_last)

    return _rate


def rate_function(body_class: BodyClass | str) -> RateFunction:
    """Return the rate strategy for a body class.

    Parameters:
        body_class: BodyClass member or its value ('star', 'sun', 'moon', 'planet').

    Returns:
        Function giving the rate of hour angle change against the trial time.

    Raises:
        ValueError: If body_class names no known class.
    """
    try:
        cls = BodyClass(body_class)
    except ValueError:
        raise ValueError(
            f'Invalid body class {body_class!r}; expected one of star, sun, moon, planet'
        ) from None
    if cls is BodyClass.STAR:
        return _fixed_rate(STAR_RATE)
    if cls is BodyClass.SUN:
        return _fixed_rate(1.0)
    if cls is BodyClass.MOON:
        return _measured_rate(MOON_INITIAL_RATE)
    return _measured_rate(PLANET_INITIAL_RATE)


def rise_set(
    body_class: BodyClass | str,
    elevation: float,
    longitude: float,
    latitude: float,
    position: PositionFunction,
    date: datetime,
    t0: float,
    rise: bool,
    iterations: int,
) -> RiseSetResult:
    """Rise time (rise=True) or set time (rise=False) of a celestial object.

    Parameters:
        body_class: Kind of body; selects the motion rate estimate.
        elevation: Elevation threshold in degrees (negative below the horizon).
        longitude: East longitude of the observer in degrees.
        latitude: Latitude of the observer in degrees.
        position: Julian Date -> (ra in hours, dec in degrees).
        date: Calendar instant; its UTC day is searched. Not modified.
        t0: Initial trial time in UTC hours.
        rise: True for the rise time, False for the set time.
        iterations: Number of iterations.

    Returns:
        Event time as an aware UTC datetime, or NoEvent.ALWAYS_ABOVE /
        NoEvent.ALWAYS_BELOW when the threshold is not crossed.

    Raises:
        ValueError: If body_class is not a known body class.
    """
    rate = rate_function(body_class)
    base = utc_midnight(date)
    jd_base = jd_from_datetime(base)
    t = t0
    ra_last = 0.0
    t_last = 0.0

    for i in range(iterations):
        lst = sidereal_time(base.year, base.month, base.day, t) + longitude / DEGREES_PER_HOUR_RA
        ra, dec = position(jd_base + t / HOURS_PER_DAY)

        hour_angle = lst - ra
        if hour_angle > 12:
            hour_angle -= 24
        elif hour_angle < -12:
            hour_angle += 24

        x = (sin(elevation) - sin(latitude) * sin(dec)) / (cos(latitude) * cos(dec))
        if abs(x) > 1:
            outcome = NoEvent.ALWAYS_ABOVE if x < 0 else NoEvent.ALWAYS_BELOW
            logger.debug(
                'No crossing of %.4f deg at lat %.4f, dec %.4f: %s',
                elevation,
                latitude,
                dec,
                outcome.value,
            )
            return outcome
        semi_arc = acos(x) / DEGREES_PER_HOUR_RA
        if rise:
            semi_arc = -semi_arc

        n = rate(i, ra, ra_last, t, t_last)
        t_last = t
        ra_last = ra
        t = t + (semi_arc - hour_angle) / n
        logger.debug('Iteration %d: hour angle %.6f h, rate %.7f, T %.6f h', i, hour_angle, n, t)

    return base + timedelta(milliseconds=int(t * MILLISECONDS_PER_HOUR))


def star_rise_set(
    longitude: float, latitude: float, date: datetime, ra: float, dec: float, rise: bool
) -> RiseSetResult:
    """Rise or set time of a fixed star.

    Parameters:
        longitude, latitude: Observer location in degrees (east positive).
        date: Calendar instant of the day to search.
        ra: Right ascension in hours.
        dec: Declination in degrees.
        rise: True for rise, False for set.
    """
    return rise_set(
        BodyClass.STAR,
        STAR_ELEVATION,
        longitude,
        latitude,
        star_position_function(ra, dec),
        date,
        12.0,
        rise,
        STAR_ITERATIONS,
    )


def sun_rise_set(
    longitude: float, latitude: float, date: datetime, event: RiseSetType | str
) -> RiseSetResult:
    """Sunrise, sunset or twilight time.

    Parameters:
        longitude, latitude: Observer location in degrees (east positive).
        date: Calendar instant of the day to search.
        event: RiseSetType member or its name (e.g. 'CIVIL_DUSK').

    Raises:
        ValueError: If event names no RiseSetType.
    """
    if not isinstance(event, RiseSetType):
        try:
            event = RiseSetType[str(event).upper()]
        except KeyError:
            raise ValueError(f'Invalid rise/set type {event!r}') from None
    t0 = 6.0 if event.rising else 18.0
    return rise_set(
        BodyClass.SUN,
        event.elevation,
        longitude,
        latitude,
        sun_position_function(),
        date,
        t0,
        event.rising,
        SUN_ITERATIONS,
    )


def moon_rise_set(longitude: float, latitude: float, date: datetime, rise: bool) -> RiseSetResult:
    """Moonrise (rise=True) or moonset (rise=False) time."""
    return rise_set(
        BodyClass.MOON,
        MOON_ELEVATION,
        longitude,
        latitude,
        moon_position_function(),
        date,
        12.0,
        rise,
        MOON_ITERATIONS,
    )


def planet_rise_set(
    name: str, longitude: float, latitude: float, date: datetime, rise: bool
) -> RiseSetResult:
    """Rise or set time of a planet from the mean-element model.

    Raises:
        ValueError: If name is not a known planet.
    """
    return rise_set(
        BodyClass.PLANET,
        STAR_ELEVATION,
        longitude,
        latitude,
        planet_position_function(name),
        date,
        12.0,
        rise,
        PLANET_ITERATIONS,
    )
