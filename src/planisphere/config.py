"""Configuration: default observer and leap-second file from environment."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

# Defaults when the environment does not name an observer (Berlin).
DEFAULT_LATITUDE = 52.52
DEFAULT_LONGITUDE = 13.405
DEFAULT_UTC_OFFSET = 0.0


def _float_from_env(name: str, default: float, lower: float, upper: float) -> float:
    """Read a float environment variable, falling back to default when unset or invalid."""
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning('Ignoring %s=%r: not a number; using %s', name, raw, default)
        return default
    if not lower <= value <= upper:
        logger.warning('Ignoring %s=%r: outside [%s, %s]; using %s', name, raw, lower, upper, default)
        return default
    return value


def get_default_latitude() -> float:
    """Return observer latitude in degrees (PLANISPHERE_LATITUDE env var or default)."""
    return _float_from_env('PLANISPHERE_LATITUDE', DEFAULT_LATITUDE, -90.0, 90.0)


def get_default_longitude() -> float:
    """Return observer east longitude in degrees (PLANISPHERE_LONGITUDE env var or default)."""
    return _float_from_env('PLANISPHERE_LONGITUDE', DEFAULT_LONGITUDE, -180.0, 180.0)


def get_default_utc_offset() -> float:
    """Return civil time offset from UTC in hours (PLANISPHERE_UTC_OFFSET env var or default)."""
    return _float_from_env('PLANISPHERE_UTC_OFFSET', DEFAULT_UTC_OFFSET, -14.0, 14.0)


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Returns:
        JULIAN_LEAPSECS if set, otherwise None (rms-julian's bundled LSK is used).
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None
