"""Tests for the planisphere command line."""

from __future__ import annotations

import sys

import pytest

from planisphere.cli import main as cli_main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ('PLANISPHERE_LATITUDE', 'PLANISPHERE_LONGITUDE', 'PLANISPHERE_UTC_OFFSET', 'PLANISPHERE_LOG'):
        monkeypatch.delenv(name, raising=False)


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, 'argv', ['planisphere', *argv])
    return cli_main.main()


def test_riseset_sun(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Sun rise/set lists twilight, rise and set for the given day."""
    rc = _run(monkeypatch, 'riseset', '--date', '2024-03-20 00:00', '--lat', '52', '--lon', '0')
    out = capsys.readouterr().out
    assert rc == 0
    assert out.startswith('Sun on 2024-03-20')
    assert 'astro dawn' in out
    assert 'civil dusk' in out
    assert '2024-03-20  06:0' in out


def test_riseset_sexagesimal_and_offset(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Sexagesimal latitude and a civil offset shift the printed times."""
    rc = _run(
        monkeypatch,
        'riseset',
        '--date',
        '2024-03-20 12:00',
        '--lat',
        '52 00 00',
        '--lon',
        '0',
        '--utc-offset',
        '1',
    )
    out = capsys.readouterr().out
    assert rc == 0
    assert 'lat 52.0000' in out
    assert '(UTC+1)' in out
    assert '2024-03-20  07:0' in out


def test_riseset_polar_day(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Days without a crossing say so instead of printing a time."""
    rc = _run(monkeypatch, 'riseset', '--date', '2024-06-21 12:00', '--lat', '80', '--lon', '15')
    assert rc == 0
    assert 'always above' in capsys.readouterr().out


def test_riseset_star_requires_coordinates(monkeypatch: pytest.MonkeyPatch) -> None:
    """--body star without --ra/--dec is a usage error."""
    with pytest.raises(SystemExit):
        _run(monkeypatch, 'riseset', '--body', 'star', '--date', '2024-03-20 00:00')


def test_riseset_star(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """A star's rise and set are printed for the given coordinates."""
    rc = _run(
        monkeypatch,
        'riseset',
        '--body',
        'star',
        '--ra',
        '6 45 07.2',
        '--dec',
        '-16 42 57.6',
        '--date',
        '2024-03-20 00:00',
        '--lat',
        '52',
        '--lon',
        '0',
    )
    out = capsys.readouterr().out
    assert rc == 0
    assert '  rise ' in out
    assert '  set ' in out


def test_riseset_unknown_planet(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Unknown body names fail with exit code 1."""
    rc = _run(monkeypatch, 'riseset', '--body', 'pluto', '--date', '2024-03-20 00:00')
    assert rc == 1
    assert 'Error: Unknown planet' in capsys.readouterr().err


def test_riseset_observer_out_of_range(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Latitudes beyond the poles are reported as errors."""
    rc = _run(monkeypatch, 'riseset', '--date', '2024-03-20 00:00', '--lat', '95')
    assert rc == 1
    assert 'outside' in capsys.readouterr().err


def test_invalid_angle_is_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Angles that do not parse are rejected by argparse."""
    with pytest.raises(SystemExit):
        _run(monkeypatch, 'riseset', '--lat', 'north')


def test_position(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Positions of the Sun, Moon and planets plus their phases."""
    rc = _run(monkeypatch, 'position', '--time', '2024-01-25 17:54', '--lat', '52.5', '--lon', '13.4')
    out = capsys.readouterr().out
    assert rc == 0
    assert out.startswith('Positions at 2024-01-25 17:54:00')
    assert 'Moon' in out
    assert 'Neptune' in out
    assert 'Illuminated fraction' in out


def test_utc_offset_out_of_range(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Offsets a time zone cannot hold are reported as errors, not tracebacks."""
    rc = _run(monkeypatch, 'riseset', '--date', '2024-03-20 00:00', '--utc-offset', '25')
    assert rc == 1
    assert 'Error:' in capsys.readouterr().err

    rc = _run(monkeypatch, 'position', '--time', '2024-03-20 00:00', '--utc-offset', '-30')
    assert rc == 1
    assert 'Error:' in capsys.readouterr().err


def test_trailing_z_is_utc(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """A time ending in Z is UTC and is shown in the requested zone."""
    rc = _run(monkeypatch, 'position', '--time', '2024-01-25T17:54:00Z', '--utc-offset', '1')
    assert rc == 0
    assert capsys.readouterr().out.startswith('Positions at 2024-01-25 18:54:00')


def test_time_without_z_is_civil(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Without Z the time is read in the zone given by --utc-offset."""
    rc = _run(monkeypatch, 'position', '--time', '2024-01-25 17:54', '--utc-offset', '1')
    assert rc == 0
    assert capsys.readouterr().out.startswith('Positions at 2024-01-25 17:54:00')
