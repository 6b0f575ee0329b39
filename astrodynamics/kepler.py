"""
Keplerian orbit propagator.

Two-body motion from pericentre-based elements, for all conic sections:
    - Anomaly solve dispatched on a regime fixed at construction
    - Orbit-plane P/Q basis from (arg_pericenter, node, inclination)
    - Rotation from the parent-body frame into ecliptic J2000
    - Velocity cached from the last evaluation

Positions are in AU, velocities in AU/day.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..core.config import SolverConfig
from ..core.constants import GAUSS_K, TWO_PI
from ..core.frames import FrameRotation
from ..core.types import AnomalyResult, OrbitalElements, OrbitRegime, StateVector
from .anomaly import solve_anomaly

logger = logging.getLogger(__name__)


def mean_motion(q: float, e: float, central_mass: float = 1.0) -> float:
    """Mean motion implied by the Gaussian gravitational constant [rad/day].

    For parabolas this is the Barker rate W/dt = 1.5·k·sqrt(mu / (2 q^3)),
    the quantity the parabolic solver expects.
    """
    if e == 1.0:
        return GAUSS_K * 1.5 * np.sqrt(central_mass / (2.0 * q**3))
    a = abs(q / (1.0 - e))
    return GAUSS_K * np.sqrt(central_mass / a**3)


def sidereal_period(a: float, central_mass: float = 1.0) -> float:
    """Kepler's third law, T = 2π/k · sqrt(a^3 / mu) [days]."""
    return TWO_PI / GAUSS_K * np.sqrt(a**3 / central_mass)


class KeplerPropagator:
    """Analytic two-body propagator for one orbiting body.

    Each instance owns its element set, its frame rotation and the
    velocity of its last evaluation; instances share no state. A single
    instance must not be propagated concurrently with itself.

    Attributes:
        elements: Immutable orbital elements.
        rotation: Parent-frame to ecliptic J2000 rotation.
        config: Anomaly solver settings.
        needs_update: Set on every :meth:`propagate`; the orbit-trail
            owner clears it once it has refreshed.
    """

    def __init__(self, elements: OrbitalElements,
                 rotation: Optional[FrameRotation] = None,
                 config: Optional[SolverConfig] = None):
        """Initialize the propagator.

        Args:
            elements: Validated orbital elements.
            rotation: Parent orientation. Identity (ecliptic) if omitted.
            config: Anomaly solver settings.
        """
        self.elements = elements
        self.rotation = rotation if rotation is not None else FrameRotation.identity()
        self.config = config or SolverConfig()
        self.regime = elements.regime
        self.needs_update = True

        self._P, self._Q = self._orbit_plane_basis(elements)
        self._velocity = np.zeros(3)
        self._last_anomaly: Optional[AnomalyResult] = None

        logger.debug(
            "KeplerPropagator: %s orbit, q=%.9g AU, e=%.9g, n=%.9g rad/day",
            self.regime.name.lower(), elements.q, elements.e, elements.mean_motion,
        )

    @staticmethod
    def _orbit_plane_basis(el: OrbitalElements) -> tuple[np.ndarray, np.ndarray]:
        """Unit vectors towards pericentre (P) and 90 deg ahead of it (Q)."""
        sin_w, cos_w = np.sin(el.arg_pericenter), np.cos(el.arg_pericenter)
        sin_O, cos_O = np.sin(el.node), np.cos(el.node)
        sin_i, cos_i = np.sin(el.i), np.cos(el.i)

        P = np.array([
            -sin_w * sin_O * cos_i + cos_w * cos_O,
            sin_w * cos_O * cos_i + cos_w * sin_O,
            sin_w * sin_i
        ])
        Q = np.array([
            -cos_w * sin_O * cos_i - sin_w * cos_O,
            cos_w * cos_O * cos_i - sin_w * sin_O,
            cos_w * sin_i
        ])
        return P, Q

    def propagate(self, jde: float) -> np.ndarray:
        """Position at a Julian Ephemeris Date, in ecliptic J2000 [AU].

        Also caches the velocity at ``jde`` (see :attr:`velocity`).

        Args:
            jde: Julian Ephemeris Date (TT).

        Returns:
            Position vector [AU], shape (3,).
        """
        el = self.elements
        anomaly = solve_anomaly(self.regime, el.q, el.e, el.mean_motion,
                                jde - el.t0, self.config)
        r_cos_nu, r_sin_nu = anomaly.r_cos_nu, anomaly.r_sin_nu

        pos = self._P * r_cos_nu + self._Q * r_sin_nu

        r = np.sqrt(r_cos_nu * r_cos_nu + r_sin_nu * r_sin_nu)
        sin_nu = r_sin_nu / r
        cos_nu = r_cos_nu / r
        p = el.q * (1.0 + el.e)
        sqrt_mu_p = np.sqrt(GAUSS_K * GAUSS_K * el.central_mass / p)
        vel = sqrt_mu_p * ((el.e + cos_nu) * self._Q - sin_nu * self._P)

        self._velocity = self.rotation.apply(vel)
        self._last_anomaly = anomaly
        self.needs_update = True
        return self.rotation.apply(pos)

    def state_at(self, jde: float) -> StateVector:
        """Position and velocity at ``jde`` as a fresh StateVector."""
        position = self.propagate(jde)
        return StateVector(epoch_jde=jde, position=position,
                           velocity=self._velocity.copy())

    @property
    def velocity(self) -> np.ndarray:
        """Velocity [AU/day] at the epoch of the last :meth:`propagate` call.

        Zero before the first call.
        """
        return self._velocity.copy()

    @property
    def last_anomaly(self) -> Optional[AnomalyResult]:
        """Anomaly solve of the last call, including convergence diagnostics."""
        return self._last_anomaly

    def update_orientation(self, obliquity: float, ascending_node: float,
                           j2000_longitude: float) -> None:
        """Recompute the parent-frame rotation after the parent pole moved."""
        self.rotation.update(obliquity, ascending_node, j2000_longitude)

    # -----------------------------------------------------------------
    # Derived quantities
    # -----------------------------------------------------------------

    def semimajor_axis(self) -> float:
        """q / (1 - e) [AU]; negative for hyperbolas, 0 for parabolas."""
        if self.regime is OrbitRegime.PARABOLIC:
            return 0.0
        return self.elements.q / (1.0 - self.elements.e)

    def eccentricity(self) -> float:
        return self.elements.e

    def sidereal_period(self) -> float:
        """Orbital period [days]; 0 for open orbits."""
        a = self.semimajor_axis()
        if a <= 0.0:
            return 0.0
        return sidereal_period(a, self.elements.central_mass)

    def object_date_valid(self, jde: float) -> bool:
        """Whether ``jde`` lies inside the elements' validity window."""
        orbit_good = self.elements.orbit_good
        return orbit_good <= 0.0 or abs(self.elements.t0 - jde) < orbit_good
