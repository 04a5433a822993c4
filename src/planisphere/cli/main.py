"""CLI entry point: planisphere riseset|position subcommands."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import datetime, timedelta, timezone
from typing import cast

from planisphere.angle_utils import parse_angle
from planisphere.bodies import (
    moon_illuminated_fraction,
    moon_position_equatorial,
    sun_position_equatorial,
)
from planisphere.config import (
    get_default_latitude,
    get_default_longitude,
    get_default_utc_offset,
)
from planisphere.constants import DEGREES_PER_HOUR_RA
from planisphere.observer import Observer, horizontal_position
from planisphere.planets import PLANET_NAMES, planet_illuminated_fraction, planet_position_equatorial
from planisphere.report import write_events, write_positions
from planisphere.riseset import (
    RiseSetResult,
    RiseSetType,
    moon_rise_set,
    planet_rise_set,
    star_rise_set,
    sun_rise_set,
)
from planisphere.time_utils import jd_from_datetime, parse_datetime

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or PLANISPHERE_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('PLANISPHERE_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _angle_arg(text: str) -> float:
    """argparse type for decimal or sexagesimal angles."""
    value = parse_angle(text)
    if value is None:
        raise argparse.ArgumentTypeError(f'invalid angle: {text!r}')
    return value


def _observer_from_args(args: argparse.Namespace) -> Observer:
    latitude = args.lat if args.lat is not None else get_default_latitude()
    longitude = args.lon if args.lon is not None else get_default_longitude()
    return Observer(latitude=latitude, longitude=longitude)


def _instant_from_args(text: str | None, tz: timezone) -> datetime:
    """Civil instant from a date/time string read in zone tz; now when text is None.

    A trailing "Z" marks the text as UTC; the instant is then shown in zone tz.

    Raises:
        ValueError: If the text cannot be parsed.
    """
    if text is None:
        return datetime.now(tz)
    parsed = parse_datetime(text)
    if parsed is None:
        raise ValueError(f'Unable to parse date/time {text!r}')
    if text.strip().endswith(('Z', 'z')):
        return parsed.astimezone(tz)
    return parsed.replace(tzinfo=tz)


def _riseset_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print rise/set (and for the Sun twilight) times (riseset subcommand).

    Parameters:
        parser: Argument parser, used to report missing star coordinates.
        args: Parsed args; body, date, lat, lon, ra, dec, utc_offset.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        tz = timezone(timedelta(hours=args.utc_offset))
        observer = _observer_from_args(args)
        date = _instant_from_args(args.date, tz)
        body = args.body.strip().lower()
        logger.debug('Rise/set of %s for %s at %s', body, date.isoformat(), observer)
        events: list[tuple[str, RiseSetResult]]
        if body == 'sun':
            events = []
            for event in RiseSetType:
                label = event.name.replace('_', ' ').lower()
                events.append((label, sun_rise_set(observer.longitude, observer.latitude, date, event)))
        elif body == 'moon':
            events = [
                ('rise', moon_rise_set(observer.longitude, observer.latitude, date, True)),
                ('set', moon_rise_set(observer.longitude, observer.latitude, date, False)),
            ]
        elif body == 'star':
            if args.ra is None or args.dec is None:
                parser.error('--body star requires --ra and --dec')
            events = [
                ('rise', star_rise_set(observer.longitude, observer.latitude, date, args.ra, args.dec, True)),
                ('set', star_rise_set(observer.longitude, observer.latitude, date, args.ra, args.dec, False)),
            ]
        else:
            events = [
                ('rise', planet_rise_set(body, observer.longitude, observer.latitude, date, True)),
                ('set', planet_rise_set(body, observer.longitude, observer.latitude, date, False)),
            ]
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    title = (
        f'{args.body.capitalize()} on {date.strftime("%Y-%m-%d")} at '
        f'lat {observer.latitude:.4f}, lon {observer.longitude:.4f} (UTC{args.utc_offset:+g})'
    )
    write_events(sys.stdout, title, events, tz)
    return 0


def _position_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print RA/Dec and azimuth/elevation of Sun, Moon and planets (position subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; time, lat, lon, utc_offset.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        tz = timezone(timedelta(hours=args.utc_offset))
        observer = _observer_from_args(args)
        when = _instant_from_args(args.time, tz)
        jd = jd_from_datetime(when)
        equatorial = [
            ('Sun', sun_position_equatorial(jd)),
            ('Moon', moon_position_equatorial(jd)),
        ]
        equatorial += [(name.capitalize(), planet_position_equatorial(name, jd)) for name in PLANET_NAMES]
        rows = []
        for name, (ra_deg, dec) in equatorial:
            ra = ra_deg / DEGREES_PER_HOUR_RA
            az, el = horizontal_position(observer, when, ra, dec)
            rows.append((name, ra, dec, az, el))
        phases = [('Moon', moon_illuminated_fraction(jd))]
        phases += [(name.capitalize(), planet_illuminated_fraction(name, jd)) for name in PLANET_NAMES]
    except (ValueError, RuntimeError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    write_positions(sys.stdout, when, rows)
    print('Illuminated fraction')
    for name, fraction in phases:
        print(f'  {name:<10} {fraction:6.1f}%')
    return 0


def _add_observer_args(sub: argparse.ArgumentParser) -> None:
    sub.add_argument('--lat', type=_angle_arg, default=None, help='Latitude (deg, north positive)')
    sub.add_argument('--lon', type=_angle_arg, default=None, help='Longitude (deg, east positive)')
    sub.add_argument(
        '--utc-offset',
        type=float,
        default=get_default_utc_offset(),
        help='Civil time offset from UTC in hours (default PLANISPHERE_UTC_OFFSET or 0)',
    )
    sub.add_argument('-v', '--verbose', action='store_true', help='Debug logging')


def main() -> int:
    """Entry point for planisphere CLI (riseset | position).

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='planisphere',
        description='Sun, Moon, planet and star positions and rise/set times.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    riseset_parser = subparsers.add_parser('riseset', help='Rise, set and twilight times')
    riseset_parser.add_argument(
        '--body',
        default='sun',
        help=f'sun, moon, star or a planet ({", ".join(PLANET_NAMES)})',
    )
    riseset_parser.add_argument('--date', default=None, help='Civil date (default today)')
    riseset_parser.add_argument('--ra', type=_angle_arg, default=None, help='Star right ascension (hours)')
    riseset_parser.add_argument('--dec', type=_angle_arg, default=None, help='Star declination (deg)')
    _add_observer_args(riseset_parser)
    riseset_parser.set_defaults(func=_riseset_cmd)

    position_parser = subparsers.add_parser('position', help='Current sky positions')
    position_parser.add_argument('--time', default=None, help='Civil date/time (default now)')
    _add_observer_args(position_parser)
    position_parser.set_defaults(func=_position_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


if __name__ == '__main__':
    sys.exit(main())
