"""Tests for text formatting of events and positions."""

from __future__ import annotations

import io
from datetime import datetime, timedelta, timezone

from planisphere.report import format_dec, format_event, format_ra, write_events, write_positions
from planisphere.riseset import NoEvent

EVENT = datetime(2024, 3, 20, 6, 1, 30, tzinfo=timezone.utc)


def test_format_event_time() -> None:
    """Times print as date, two spaces, hours and minutes."""
    assert format_event(EVENT) == '2024-03-20  06:01'


def test_format_event_in_zone() -> None:
    """A display zone shifts the printed time."""
    assert format_event(EVENT, timezone(timedelta(hours=1))) == '2024-03-20  07:01'


def test_format_event_no_event_and_missing() -> None:
    """NoEvent prints its description; a missing value prints a dash."""
    assert format_event(NoEvent.ALWAYS_ABOVE) == 'always above'
    assert format_event(NoEvent.ALWAYS_BELOW) == 'always below'
    assert format_event(None) == ' - '


def test_format_ra_and_dec() -> None:
    """Right ascension in hours, declination in degrees."""
    assert format_ra(6.752) == '6h 45m 07.2s'
    assert format_dec(-16.716) == '-16d 42m 57.6s'


def test_write_events_table() -> None:
    """Title followed by one indented line per event."""
    stream = io.StringIO()
    write_events(stream, 'Sun', [('rise', EVENT), ('set', NoEvent.ALWAYS_ABOVE)])
    lines = stream.getvalue().splitlines()
    assert lines[0] == 'Sun'
    assert lines[1] == '  rise            2024-03-20  06:01'
    assert lines[2] == '  set             always above'


def test_write_positions_table() -> None:
    """Header and one row per body."""
    stream = io.StringIO()
    write_positions(stream, EVENT, [('Sun', 0.0, 0.0, 90.0, -1.25)])
    out = stream.getvalue()
    assert out.startswith('Positions at 2024-03-20 06:01:30 UTC')
    assert 'Azimuth' in out
    assert '0h 00m 00.0s' in out
    assert '-1.25' in out
