"""Approximate mean elements of the major planets, valid 1800-2050.

Standish, E. M., Keplerian Elements for Approximate Positions of the Major
Planets (JPL), table 1. The Earth entry is the Earth-Moon barycenter.
"""

from __future__ import annotations

from planisphere.planets.base import OrbitalElements

MERCURY = OrbitalElements(
    name='Mercury',
    a=0.38709927,
    e=0.20563593,
    inclination=7.00497902,
    mean_longitude=252.25032350,
    perihelion_longitude=77.45779628,
    node=48.33076593,
    a_rate=0.00000037,
    e_rate=0.00001906,
    inclination_rate=-0.00594749,
    mean_longitude_rate=149472.67411175,
    perihelion_longitude_rate=0.16047689,
    node_rate=-0.12534081,
)

VENUS = OrbitalElements(
    name='Venus',
    a=0.72333566,
    e=0.00677672,
    inclination=3.39467605,
    mean_longitude=181.97909950,
    perihelion_longitude=131.60246718,
    node=76.67984255,
    a_rate=0.00000390,
    e_rate=-0.00004107,
    inclination_rate=-0.00078890,
    mean_longitude_rate=58517.81538729,
    perihelion_longitude_rate=0.00268329,
    node_rate=-0.27769418,
)

EARTH = OrbitalElements(
    name='Earth',
    a=1.00000261,
    e=0.01671123,
    inclination=-0.00001531,
    mean_longitude=100.46457166,
    perihelion_longitude=102.93768193,
    node=0.0,
    a_rate=0.00000562,
    e_rate=-0.00004392,
    inclination_rate=-0.01294668,
    mean_longitude_rate=35999.37244981,
    perihelion_longitude_rate=0.32327364,
    node_rate=0.0,
)

MARS = OrbitalElements(
    name='Mars',
    a=1.52371034,
    e=0.09339410,
    inclination=1.84969142,
    mean_longitude=-4.55343205,
    perihelion_longitude=-23.94362959,
    node=49.55953891,
    a_rate=0.00001847,
    e_rate=0.00007882,
    inclination_rate=-0.00813131,
    mean_longitude_rate=19140.30268499,
    perihelion_longitude_rate=0.44441088,
    node_rate=-0.29257343,
)

JUPITER = OrbitalElements(
    name='Jupiter',
    a=5.20288700,
    e=0.04838624,
    inclination=1.30439695,
    mean_longitude=34.39644051,
    perihelion_longitude=14.72847983,
    node=100.47390909,
    a_rate=-0.00011607,
    e_rate=-0.00013253,
    inclination_rate=-0.00183714,
    mean_longitude_rate=3034.74612775,
    perihelion_longitude_rate=0.21252668,
    node_rate=0.20469106,
)

SATURN = OrbitalElements(
    name='Saturn',
    a=9.53667594,
    e=0.05386179,
    inclination=2.48599187,
    mean_longitude=49.95424423,
    perihelion_longitude=92.59887831,
    node=113.66242448,
    a_rate=-0.00125060,
    e_rate=-0.00050991,
    inclination_rate=0.00193609,
    mean_longitude_rate=1222.49362201,
    perihelion_longitude_rate=-0.41897216,
    node_rate=-0.28867794,
)

URANUS = OrbitalElements(
    name='Uranus',
    a=19.18916464,
    e=0.04725744,
    inclination=0.77263783,
    mean_longitude=313.23810451,
    perihelion_longitude=170.95427630,
    node=74.01692503,
    a_rate=-0.00196176,
    e_rate=-0.00004397,
    inclination_rate=-0.00242939,
    mean_longitude_rate=428.48202785,
    perihelion_longitude_rate=0.40805281,
    node_rate=0.04240589,
)

NEPTUNE = OrbitalElements(
    name='Neptune',
    a=30.06992276,
    e=0.00859048,
    inclination=1.77004347,
    mean_longitude=-55.12002969,
    perihelion_longitude=44.96476227,
    node=131.78422574,
    a_rate=0.00026291,
    e_rate=0.00005105,
    inclination_rate=0.00035372,
    mean_longitude_rate=218.45945325,
    perihelion_longitude_rate=-0.32241464,
    node_rate=-0.00508664,
)
