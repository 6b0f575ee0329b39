"""
Physical and mathematical constants.

Sources:
    - IAU 1976 / Gauss for the heliocentric gravitational constant
    - 23d26m21.4091s for the J2000 mean obliquity of the ecliptic
    - DE430/431 for planetary mass ratios
"""

import numpy as np

# ---------------------------------------------------------------------------
# Mathematical constants
# ---------------------------------------------------------------------------
TWO_PI = 2.0 * np.pi
HALF_PI = 0.5 * np.pi
DEG2RAD = np.pi / 180.0
RAD2DEG = 180.0 / np.pi

# ---------------------------------------------------------------------------
# Time constants
# ---------------------------------------------------------------------------
JD_J2000 = 2451545.0                    # JD of J2000.0 epoch (2000-01-01 12:00 TT)
SECONDS_PER_DAY = 86400.0

# ---------------------------------------------------------------------------
# Heliocentric constants
# ---------------------------------------------------------------------------
GAUSS_K = 0.01720209895                 # Gaussian gravitational constant [AU^1.5 / day]
AU_KM = 149597870.691                   # Astronomical unit [km]
OBLIQUITY_J2000 = 23.4392803055555555556 * DEG2RAD   # Mean obliquity at J2000 [rad]

# ---------------------------------------------------------------------------
# Anomaly solver limits
# ---------------------------------------------------------------------------
KEPLER_EPSILON = 1e-10                  # Laguerre-Conway step tolerance [rad]
MAX_ELLIPTIC_ITERATIONS = 10            # Near-parabolic ellipses may not converge
MAX_HYPERBOLIC_ITERATIONS = 50

# ---------------------------------------------------------------------------
# Gimbal (virtual observer) limits, in AU
# ---------------------------------------------------------------------------
GIMBAL_MIN_DISTANCE = 0.01
GIMBAL_MAX_DISTANCE = 50.0
GIMBAL_MIN_PARENT_RADII = 1.5           # floor when orbiting a body of known radius

# ---------------------------------------------------------------------------
# Validity windows for Sun-centred bodies without an explicit orbit_good [days]
# ---------------------------------------------------------------------------
OPEN_ORBIT_GOOD_DAYS = 1000.0

# ---------------------------------------------------------------------------
# Planetary masses as Sun/planet ratios (DE430/431)
# ---------------------------------------------------------------------------
PLANET_MASS_RATIOS = {
    "Sun":     1.0,
    "Mercury": 6023682.155592,
    "Venus":   408523.718658,
    "Earth":   332946.048834,
    "Mars":    3098703.590291,
    "Jupiter": 1047.348625,
    "Saturn":  3497.901768,
    "Uranus":  22902.981613,
    "Neptune": 19412.259776,
    "Pluto":   135836683.768617,
}
