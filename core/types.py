"""
Foundational data types for the orbit-propagation engine.

All element sets and propagation results flow through these dataclasses.
Convention:
    - Distances: AU (Kepler orbits), km (secular satellite elements)
    - Time: Julian Ephemeris Date (epochs), days (Kepler rates), seconds (rock rates)
    - Velocity: AU/day
    - Angles: radians
    - Central mass: solar masses
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass, field
from enum import Enum, auto


class InvalidElementsError(ValueError):
    """Raised when an element set violates a construction-time invariant."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class OrbitRegime(Enum):
    """Conic section selected by the eccentricity."""
    ELLIPTICAL = auto()     # e < 1
    PARABOLIC = auto()      # e == 1
    HYPERBOLIC = auto()     # e > 1

    @classmethod
    def from_eccentricity(cls, e: float) -> OrbitRegime:
        if e < 1.0:
            return cls.ELLIPTICAL
        if e > 1.0:
            return cls.HYPERBOLIC
        return cls.PARABOLIC


# ---------------------------------------------------------------------------
# Orbital Elements
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OrbitalElements:
    """Pericentre-based Keplerian elements, valid for all three regimes.

    Attributes:
        q: Pericentre distance [AU]. Must be positive.
        e: Eccentricity (>= 0).
        i: Inclination [rad].
        node: Longitude of the ascending node [rad].
        arg_pericenter: Argument of pericentre [rad].
        t0: Time of pericentre passage [JDE].
        mean_motion: Mean motion [rad/day]. For the parabolic case this is
            the scaled Barker rate W/dt rather than a classical mean motion.
        central_mass: Mass of the central body [solar masses].
        orbit_good: Half-width of the validity window around t0 [days].
            Values <= 0 mean the orbit is valid at all times.
    """
    q: float
    e: float
    i: float
    node: float
    arg_pericenter: float
    t0: float
    mean_motion: float
    central_mass: float = 1.0
    orbit_good: float = 0.0

    def __post_init__(self):
        values = (self.q, self.e, self.i, self.node, self.arg_pericenter,
                  self.t0, self.mean_motion, self.central_mass, self.orbit_good)
        if not all(np.isfinite(values)):
            raise InvalidElementsError(f"Non-finite orbital element in {self}")
        if self.q <= 0.0:
            raise InvalidElementsError(
                f"Pericentre distance must be positive, got q={self.q}")
        if self.e < 0.0:
            raise InvalidElementsError(
                f"Eccentricity must be non-negative, got e={self.e}")
        if self.mean_motion <= 0.0:
            raise InvalidElementsError(
                f"Mean motion must be positive, got n={self.mean_motion}")
        if self.central_mass <= 0.0:
            raise InvalidElementsError(
                f"Central mass must be positive, got {self.central_mass}")

    @property
    def regime(self) -> OrbitRegime:
        return OrbitRegime.from_eccentricity(self.e)


@dataclass(frozen=True)
class RockElements:
    """Precessing-ellipse elements of a small satellite.

    The eccentricity and inclination are carried as vectors so that the
    secular apsidal and nodal motion reduce to plane rotations.

    Attributes:
        jpl_id: JPL body number (e.g. 401 for Phobos).
        name: English name.
        source: JPL ephemeris the fit was derived from.
        epoch_jd: Element epoch [JDE].
        a: Semi-major axis [km].
        h: e * sin(longitude of periapsis).
        k: e * cos(longitude of periapsis).
        mean_lon: Mean longitude at epoch [rad].
        p: tan(i/2) * sin(node).
        q: tan(i/2) * cos(node).
        apsis_rate: Apsidal precession rate [rad/s].
        mean_motion: Mean motion [rad/s].
        node_rate: Nodal precession rate [rad/s].
        pole_ra: Right ascension of the Laplacian plane pole, J2000 [rad].
        pole_dec: Declination of the Laplacian plane pole, J2000 [rad].
    """
    jpl_id: int
    name: str
    source: str
    epoch_jd: float
    a: float
    h: float
    k: float
    mean_lon: float
    p: float
    q: float
    apsis_rate: float
    mean_motion: float
    node_rate: float
    pole_ra: float
    pole_dec: float

    @property
    def eccentricity(self) -> float:
        """Eccentricity at the element epoch."""
        return float(np.hypot(self.h, self.k))

    @property
    def inclination(self) -> float:
        """Inclination to the Laplacian plane at the element epoch [rad]."""
        return float(2.0 * np.arctan(np.hypot(self.p, self.q)))


# ---------------------------------------------------------------------------
# Propagation Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AnomalyResult:
    """Output of one anomaly solve, in the orbit plane.

    Attributes:
        r_cos_nu: r * cos(true anomaly) [AU].
        r_sin_nu: r * sin(true anomaly) [AU].
        anomaly: Final eccentric anomaly (elliptic), hyperbolic anomaly
            (hyperbolic) or tan(nu/2) (parabolic).
        mean_anomaly: Mean anomaly the solve was driven by (W for parabolas).
        iterations: Number of correction steps taken (0 for the closed form).
        converged: False when the iteration cap was hit before the step
            fell below tolerance. The result is still the best estimate.
    """
    r_cos_nu: float
    r_sin_nu: float
    anomaly: float
    mean_anomaly: float
    iterations: int = 0
    converged: bool = True

    @property
    def r(self) -> float:
        """Radius [AU]."""
        return float(np.hypot(self.r_cos_nu, self.r_sin_nu))

    @property
    def true_anomaly(self) -> float:
        return float(np.arctan2(self.r_sin_nu, self.r_cos_nu))


@dataclass
class StateVector:
    """Position and velocity of a body at a given epoch.

    Attributes:
        epoch_jde: Julian Ephemeris Date of the state.
        position: Ecliptic J2000 position [AU], shape (3,).
        velocity: Ecliptic J2000 velocity [AU/day], shape (3,).
    """
    epoch_jde: float
    position: np.ndarray                                     # (3,) AU
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))  # (3,) AU/day

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64)
        self.velocity = np.asarray(self.velocity, dtype=np.float64)

    @property
    def r_mag(self) -> float:
        return float(np.linalg.norm(self.position))

    @property
    def v_mag(self) -> float:
        return float(np.linalg.norm(self.velocity))

    @property
    def state_vector(self) -> np.ndarray:
        """Combined [r, v] state vector, shape (6,)."""
        return np.concatenate([self.position, self.velocity])
