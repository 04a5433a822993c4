"""Planisphere astrometry engine.

Low-order ephemerides and rise/set timing for an observer on Earth:
- Time conversion: civil date/time to Julian Date and Greenwich sidereal time
- Frame transforms between equatorial, horizontal and ecliptic coordinates
- Sun, Moon and planet position models with illuminated fraction
- Iterative rise/set/twilight solver driven by caller-supplied position functions

All angles are in degrees unless a function documents hours.
"""

__all__: list[str] = []
