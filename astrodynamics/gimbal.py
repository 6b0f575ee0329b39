"""
Gimbal pseudo-orbit for virtual observer locations.

Holds a fixed spherical offset (distance, longitude, latitude) from the
parent body instead of a physical orbit. The offset is steered
interactively, so latitude and distance are clamped to keep the
viewpoint well-behaved.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..core.config import GimbalConfig
from ..core.constants import TWO_PI, HALF_PI
from ..core.frames import FrameRotation, spherical_to_rect


class GimbalPropagator:
    """Time-independent position on a sphere around the parent body.

    Attributes:
        rotation: Parent-frame to ecliptic J2000 rotation (usually identity).
        needs_update: Never raised by propagation, since the position does
            not depend on time.
    """

    def __init__(self, distance: float,
                 longitude: Optional[float] = None,
                 latitude: Optional[float] = None,
                 rotation: Optional[FrameRotation] = None,
                 config: Optional[GimbalConfig] = None):
        """Initialize the gimbal.

        Args:
            distance: Radius of the sphere [AU].
            longitude: Starting longitude [rad]. Defaults to the config value.
            latitude: Starting latitude [rad]. Defaults to the config value.
            rotation: Parent orientation. Identity if omitted.
            config: Distance limits and defaults.
        """
        cfg = config or GimbalConfig()
        self.rotation = rotation if rotation is not None else FrameRotation.identity()
        self.needs_update = False
        self._min_distance = cfg.min_distance
        self._max_distance = cfg.max_distance
        self._longitude = 0.0
        self._latitude = 0.0
        self._distance = cfg.min_distance

        self.longitude = cfg.default_longitude if longitude is None else longitude
        self.latitude = cfg.default_latitude if latitude is None else latitude
        self.distance = distance

    def propagate(self, jde: float = 0.0) -> np.ndarray:
        """Position in ecliptic J2000 [AU]. ``jde`` is ignored."""
        pos = self._distance * spherical_to_rect(self._longitude, self._latitude)
        return self.rotation.apply(pos)

    @property
    def velocity(self) -> np.ndarray:
        """Always zero: the gimbal does not move with time."""
        return np.zeros(3)

    # -----------------------------------------------------------------
    # Spherical offset
    # -----------------------------------------------------------------

    @property
    def longitude(self) -> float:
        return self._longitude

    @longitude.setter
    def longitude(self, value: float):
        self._longitude = float(value % TWO_PI)

    @property
    def latitude(self) -> float:
        return self._latitude

    @latitude.setter
    def latitude(self, value: float):
        self._latitude = float(np.clip(value, -HALF_PI, HALF_PI))

    @property
    def distance(self) -> float:
        return self._distance

    @distance.setter
    def distance(self, value: float):
        self._distance = float(np.clip(value, self._min_distance, self._max_distance))

    @property
    def min_distance(self) -> float:
        return self._min_distance

    @property
    def max_distance(self) -> float:
        return self._max_distance

    def add_to_longitude(self, d_lon: float) -> None:
        self.longitude = self._longitude + d_lon

    def add_to_latitude(self, d_lat: float) -> None:
        self.latitude = self._latitude + d_lat

    def add_to_distance(self, d_dist: float) -> None:
        self.distance = self._distance + d_dist

    def set_min_distance(self, value: float) -> None:
        """Lower the floor, e.g. to 1.5 parent radii; re-clamps the distance."""
        if not 0.0 < value <= self._max_distance:
            raise ValueError(f"min distance must be in (0, {self._max_distance}], got {value}")
        self._min_distance = float(value)
        self.distance = self._distance

    def set_max_distance(self, value: float) -> None:
        if value < self._min_distance:
            raise ValueError(f"max distance must be >= {self._min_distance}, got {value}")
        self._max_distance = float(value)
        self.distance = self._distance
