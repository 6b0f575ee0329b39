"""
Anomaly solver for elliptic, parabolic and hyperbolic orbits.

Given the time elapsed since pericentre passage, returns the orbit-plane
coordinates (r cos nu, r sin nu) of the body.

    - Elliptic:   Kepler's equation M = E - e sin E, Laguerre-Conway iteration
    - Hyperbolic: M = e sinh H - H, Laguerre-Conway iteration
    - Parabolic:  Barker's equation, closed-form cubic solution

References:
    Conway, "An improved algorithm due to Laguerre for the solution of
        Kepler's equation", Celestial Mechanics 39, 1986
    Heafner, "Fundamental Ephemeris Computations", Willmann-Bell, 1999
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..core.config import SolverConfig
from ..core.constants import TWO_PI
from ..core.types import AnomalyResult, OrbitRegime

logger = logging.getLogger(__name__)

_DEFAULT_SOLVER = SolverConfig()


def _laguerre_conway_step(f: float, f1: float, f2: float) -> float:
    """Laguerre-Conway correction with degree parameter n = 5."""
    return -5.0 * f / (f1 + np.sign(f1) * np.sqrt(np.abs(16.0 * f1 * f1 - 20.0 * f * f2)))


def solve_elliptic(q: float, e: float, n: float, dt: float,
                   config: Optional[SolverConfig] = None) -> AnomalyResult:
    """Solve an elliptic orbit (0 <= e < 1).

    Iterates at most ``config.max_elliptic_iterations`` times. Near-parabolic
    orbits may still be moving when the cap is hit; the last estimate is
    returned with ``converged=False``.

    Args:
        q: Pericentre distance [AU].
        e: Eccentricity.
        n: Mean motion [rad/day].
        dt: Time since pericentre [days].
        config: Solver settings.

    Returns:
        AnomalyResult with the eccentric anomaly in ``anomaly``.
    """
    cfg = config or _DEFAULT_SOLVER
    a = q / (1.0 - e)
    M = (n * dt) % TWO_PI
    E = M + 0.85 * e * np.sign(np.sin(M))

    iterations = 0
    converged = False
    while iterations < cfg.max_elliptic_iterations:
        sin_E = np.sin(E)
        f = E - e * sin_E - M
        f1 = 1.0 - e * np.cos(E)
        f2 = e * sin_E
        dE = _laguerre_conway_step(f, f1, f2)
        E += dE
        iterations += 1
        if np.abs(dE) < cfg.tolerance:
            converged = True
            break

    if not converged:
        logger.debug(
            "Elliptic solver hit the iteration cap: e=%.9f, M=%.9f, E=%.12f after %d steps",
            e, M, E, iterations,
        )

    # a * sqrt(1 - e^2) == q * sqrt((1 + e) / (1 - e))
    return AnomalyResult(
        r_cos_nu=float(a * (np.cos(E) - e)),
        r_sin_nu=float(q * np.sqrt((1.0 + e) / (1.0 - e)) * np.sin(E)),
        anomaly=float(E),
        mean_anomaly=float(M),
        iterations=iterations,
        converged=converged,
    )


def solve_hyperbolic(q: float, e: float, n: float, dt: float,
                     config: Optional[SolverConfig] = None) -> AnomalyResult:
    """Solve a hyperbolic orbit (e > 1).

    The mean anomaly is not reduced modulo 2π since the motion is not
    periodic.

    Returns:
        AnomalyResult with the hyperbolic anomaly in ``anomaly``.
    """
    cfg = config or _DEFAULT_SOLVER
    a = q / (e - 1.0)
    M = n * dt
    H = np.sign(M) * np.log(2.0 * np.abs(M) / e + 1.85)

    iterations = 0
    converged = False
    while iterations < cfg.max_hyperbolic_iterations:
        sinh_H = np.sinh(H)
        f = e * sinh_H - H - M
        f1 = e * np.cosh(H) - 1.0
        f2 = e * sinh_H
        dH = _laguerre_conway_step(f, f1, f2)
        H += dH
        iterations += 1
        if np.abs(dH) < cfg.tolerance:
            converged = True
            break

    if not converged:
        logger.debug(
            "Hyperbolic solver hit the iteration cap: e=%.9f, M=%.9f, H=%.12f",
            e, M, H,
        )

    return AnomalyResult(
        r_cos_nu=float(a * (e - np.cosh(H))),
        r_sin_nu=float(q * np.sqrt((e + 1.0) / (e - 1.0)) * np.sinh(H)),
        anomaly=float(H),
        mean_anomaly=float(M),
        iterations=iterations,
        converged=converged,
    )


def solve_parabolic(q: float, n: float, dt: float) -> AnomalyResult:
    """Solve a parabolic orbit (e == 1) in closed form.

    With W = n·dt, s = tan(nu/2) is the real root of s^3 + 3s - 2W = 0,
    i.e. Barker's equation s + s^3/3 = 2W/3.

    Returns:
        AnomalyResult with tan(nu/2) in ``anomaly`` and W in ``mean_anomaly``.
    """
    W = n * dt
    # s(W) is odd; solving for |W| avoids cancellation on the inbound leg
    Y = np.cbrt(np.abs(W) + np.sqrt(W * W + 1.0))
    tan_half_nu = np.sign(W) * (Y - 1.0 / Y)
    return AnomalyResult(
        r_cos_nu=float(q * (1.0 - tan_half_nu * tan_half_nu)),
        r_sin_nu=float(2.0 * q * tan_half_nu),
        anomaly=float(tan_half_nu),
        mean_anomaly=float(W),
    )


def solve_anomaly(regime: OrbitRegime, q: float, e: float, n: float, dt: float,
                  config: Optional[SolverConfig] = None) -> AnomalyResult:
    """Dispatch to the solver for a regime fixed at construction."""
    if regime is OrbitRegime.ELLIPTICAL:
        return solve_elliptic(q, e, n, dt, config)
    if regime is OrbitRegime.HYPERBOLIC:
        return solve_hyperbolic(q, e, n, dt, config)
    return solve_parabolic(q, n, dt)
