"""Civil time to Julian Date and Greenwich mean sidereal time.

Calendar instants are ``datetime`` values. Aware datetimes are converted to UTC;
naive datetimes are taken to be UTC already. Every conversion returns a new
value, so the caller's instant is never altered.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone

import julian

from planisphere.angle_utils import fmod_floor
from planisphere.config import get_leapsecs_path
from planisphere.constants import (
    DAYS_PER_CENTURY,
    DEGREES_PER_HOUR_RA,
    GMST_AT_J2000_MIDNIGHT,
    GMST_HOURS_PER_DAY,
    HOURS_PER_DAY,
    JD_J2000,
    JD_J2000_MIDNIGHT,
    SECONDS_PER_HOUR,
    SIDEREAL_RATE,
)

logger = logging.getLogger(__name__)

# rms-julian counts days from this date.
_JULIAN_DAY_ZERO = datetime(2000, 1, 1, tzinfo=timezone.utc)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def julian_date(year: int, month: int, day: int, ut: float = 0.0) -> float:
    """Return the Julian Date of a Gregorian calendar date (valid after 15 Oct 1582).

    Parameters:
        year, month, day: Calendar date.
        ut: Hours of Universal Time.

    Returns:
        Julian Date.
    """
    if month <= 2:
        y = year - 1
        m = month + 12
    else:
        y = year
        m = month
    b = math.floor(y / 400.0) - math.floor(y / 100.0)
    return (
        math.floor(365.25 * y) + math.floor(30.6001 * (m + 1)) + b + 1720996.5 + day + ut / HOURS_PER_DAY
    )


def to_utc(when: datetime) -> datetime:
    """Return when as an aware UTC datetime; naive values are taken as UTC."""
    if when.tzinfo is None or when.tzinfo.utcoffset(when) is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


def utc_midnight(when: datetime) -> datetime:
    """Return 00:00 UTC of the UTC calendar day containing when."""
    return to_utc(when).replace(hour=0, minute=0, second=0, microsecond=0)


def ut_hours(when: datetime) -> float:
    """Hours of Universal Time (hour + minute/60 + second/3600) of when."""
    utc = to_utc(when)
    return utc.hour + utc.minute / 60.0 + utc.second / SECONDS_PER_HOUR


def jd_from_datetime(when: datetime) -> float:
    """Return the Julian Date of a calendar instant, converted to UTC first."""
    utc = to_utc(when)
    return julian_date(utc.year, utc.month, utc.day, ut_hours(utc))


def julian_century(when: datetime) -> float:
    """Return Julian centuries since J2000.0 for a calendar instant."""
    return (jd_from_datetime(when) - JD_J2000) / DAYS_PER_CENTURY


def sidereal_time(year: int, month: int, day: int, ut: float) -> float:
    """Return Greenwich mean sidereal time in hours, in [0, 24).

    Parameters:
        year, month, day: UTC calendar date.
        ut: Hours of Universal Time; may lie outside [0, 24).

    Returns:
        Sidereal time in hours.
    """
    jd0 = julian_date(year, month, day)
    theta = GMST_AT_J2000_MIDNIGHT + GMST_HOURS_PER_DAY * (jd0 - JD_J2000_MIDNIGHT) + SIDEREAL_RATE * ut
    return fmod_floor(theta, HOURS_PER_DAY)


def local_sidereal_time(when: datetime, longitude: float) -> float:
    """Return local mean sidereal time in hours for an east longitude in degrees.

    The result is not folded back into [0, 24).
    """
    utc = to_utc(when)
    return sidereal_time(utc.year, utc.month, utc.day, ut_hours(utc)) + longitude / DEGREES_PER_HOUR_RA


def _ensure_leapsecs() -> None:
    """Load the rms-julian leap seconds table if not already loaded.

    Uses JULIAN_LEAPSECS when set and readable, otherwise rms-julian's bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info('Leap seconds from %s not used (%s); using rms-julian bundled LSK.', path, e)
    julian.load_lsk()
    _leapsecs_loaded = True


def parse_datetime(string: str) -> datetime | None:
    """Parse a UTC date/time string (any format rms-julian accepts).

    Parameters:
        string: Date/time text such as "2024-03-20 12:00" or "2024-03-20T12:00:00Z".

    Returns:
        Aware UTC datetime, or None on parse failure.
    """
    _ensure_leapsecs()
    stripped = string.strip()
    candidates = [stripped]
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not accept the ISO "Z" suffix.
        candidates.append(stripped[:-1])
    for candidate in candidates:
        try:
            day, sec = julian.day_sec_from_string(candidate)[:2]
        except (ValueError, TypeError, LookupError, OSError):
            continue
        return _JULIAN_DAY_ZERO + timedelta(days=int(day), seconds=float(sec))
    return None
