"""Fixed constants: epochs, astronomical units, obliquity and rise/set thresholds."""

# Astronomical unit in km
AU_KM = 149597870.7

# Epochs (Julian Date)
JD_J2000 = 2451545.0  # 2000-01-01 12:00 UT
JD_J2000_MIDNIGHT = 2451544.5  # 2000-01-01 00:00 UT
DAYS_PER_CENTURY = 36525.0

# Mean obliquity of the ecliptic, fixed at J2000
OBLIQUITY_J2000 = 23.4392916667

# General precession in ecliptic longitude (degrees per Julian century)
PRECESSION_PER_CENTURY = 1.39697

# Greenwich mean sidereal time terms (hours)
GMST_AT_J2000_MIDNIGHT = 6.664520
GMST_HOURS_PER_DAY = 0.0657098244
SIDEREAL_RATE = 1.0027379093

# Time and angle units
HOURS_PER_DAY = 24.0
SECONDS_PER_HOUR = 3600.0
MILLISECONDS_PER_HOUR = SECONDS_PER_HOUR * 1000.0
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360 deg / 24 h

# Rise/set elevation thresholds (degrees)
STAR_ELEVATION = -0.566667  # refraction only
SUN_ELEVATION = -0.83333  # refraction + semi-diameter
MOON_ELEVATION = 0.133333  # refraction, semi-diameter and horizontal parallax
CIVIL_TWILIGHT_ELEVATION = -6.0
NAUTICAL_TWILIGHT_ELEVATION = -12.0
ASTRONOMICAL_TWILIGHT_ELEVATION = -18.0

# Solver iteration counts
STAR_ITERATIONS = 2
SUN_ITERATIONS = 2
MOON_ITERATIONS = 5
PLANET_ITERATIONS = 5
