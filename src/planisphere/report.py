"""Text formatting of rise/set events and sky positions for the command line."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Iterable, TextIO

from planisphere.angle_utils import dms_string
from planisphere.riseset import NoEvent, RiseSetResult

NO_TIME = ' - '


def format_event(result: RiseSetResult | None, tz: tzinfo | None = None) -> str:
    """Format a rise/set result as "YYYY-MM-DD  HH:MM".

    Parameters:
        result: Event time, NoEvent outcome, or None when not computed.
        tz: Zone to show the time in; the result's own zone (UTC) when None.

    Returns:
        Formatted time, the NoEvent text ("always above"/"always below"), or " - ".
    """
    if result is None:
        return NO_TIME
    if isinstance(result, NoEvent):
        return result.value
    shown = result.astimezone(tz) if tz is not None else result
    return shown.strftime('%Y-%m-%d  %H:%M')


def format_ra(ra: float) -> str:
    """Right ascension in hours as "6h 45m 08.9s"."""
    return dms_string(ra, 'hms')


def format_dec(dec: float) -> str:
    """Declination in degrees as "-16d 42m 58.0s"."""
    return dms_string(dec, 'dms')


def write_events(
    stream: TextIO,
    title: str,
    events: Iterable[tuple[str, RiseSetResult]],
    tz: tzinfo | None = None,
) -> None:
    """Write a titled two-column table of event labels and times."""
    stream.write(title + '\n')
    for label, result in events:
        stream.write(f'  {label:<15} {format_event(result, tz)}\n')


def write_positions(
    stream: TextIO,
    when: datetime,
    rows: Iterable[tuple[str, float, float, float, float]],
) -> None:
    """Write a table of (name, ra_hours, dec, azimuth, elevation) rows."""
    stream.write(f'Positions at {when.strftime("%Y-%m-%d %H:%M:%S %Z")}\n')
    stream.write(f'  {"Body":<10} {"RA":>15} {"Dec":>16} {"Azimuth":>9} {"Elevation":>9}\n')
    for name, ra, dec, az, el in rows:
        stream.write(f'  {name:<10} {format_ra(ra):>15} {format_dec(dec):>16} {az:9.2f} {el:9.2f}\n')
