"""
Engine configuration.

Iteration limits for the anomaly solver and the clamping range of the
virtual-observer gimbal.
"""

from dataclasses import dataclass, field

from .constants import (
    KEPLER_EPSILON, MAX_ELLIPTIC_ITERATIONS, MAX_HYPERBOLIC_ITERATIONS,
    GIMBAL_MIN_DISTANCE, GIMBAL_MAX_DISTANCE, HALF_PI, RAD2DEG
)


@dataclass
class SolverConfig:
    """Laguerre-Conway iteration settings.

    The elliptic cap is deliberately small: near-parabolic ellipses can
    converge slowly, and the solver returns its best estimate rather than
    iterate further.
    """
    tolerance: float = KEPLER_EPSILON
    max_elliptic_iterations: int = MAX_ELLIPTIC_ITERATIONS
    max_hyperbolic_iterations: int = MAX_HYPERBOLIC_ITERATIONS

    def __post_init__(self):
        if self.tolerance <= 0.0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.max_elliptic_iterations < 1 or self.max_hyperbolic_iterations < 1:
            raise ValueError("iteration caps must be at least 1")


@dataclass
class GimbalConfig:
    """Virtual observer limits and starting point [AU, rad]."""
    min_distance: float = GIMBAL_MIN_DISTANCE
    max_distance: float = GIMBAL_MAX_DISTANCE
    default_longitude: float = 0.0
    default_latitude: float = 0.5 * HALF_PI         # 45 deg

    def __post_init__(self):
        if not 0.0 < self.min_distance <= self.max_distance:
            raise ValueError(
                f"invalid gimbal distance range [{self.min_distance}, {self.max_distance}]")


@dataclass
class OrreryConfig:
    """Top-level engine configuration."""
    solver: SolverConfig = field(default_factory=SolverConfig)
    gimbal: GimbalConfig = field(default_factory=GimbalConfig)

    def describe(self) -> str:
        """Human-readable summary of the active settings."""
        s, g = self.solver, self.gimbal
        return (f"Laguerre-Conway (tol={s.tolerance:g}, "
                f"elliptic cap={s.max_elliptic_iterations}, "
                f"hyperbolic cap={s.max_hyperbolic_iterations}) + "
                f"Gimbal ({g.min_distance:g}-{g.max_distance:g} AU, "
                f"start lon={g.default_longitude * RAD2DEG:.1f} deg, "
                f"lat={g.default_latitude * RAD2DEG:.1f} deg)")
