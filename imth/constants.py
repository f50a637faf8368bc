"""Common mathematical and physical constants.

Values are SI unless noted. Physical constants follow the CODATA 2018
recommended values.
"""

from __future__ import annotations

# Standard acceleration due to gravity (m s^-2), negative along +up.
EARTH_GRAVITY = -9.80665

# Mass of the Earth (kg).
EARTH_MASS = 5.972168e24

# Mean radius of the Earth (m).
EARTH_RADIUS = 6.371e6

# Newtonian gravitational constant (m^3 kg^-1 s^-2).
G = 6.67430e-11

PI = 3.141592653589793
TAU = 6.283185307179586

# Speed of light in a vacuum (m s^-1), exact by definition.
C = 299_792_458

# Euler's number.
E = 2.718281828459045

# Vacuum magnetic permeability (N A^-2).
VACUUM_PERMEABILITY = 1.25663706e-6

# Vacuum electric permittivity (F m^-1).
VACUUM_PERMITTIVITY = 8.8541878128e-12
