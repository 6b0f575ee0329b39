"""
Reference frame transformations.

Provides rotation matrices between:
    - Parent-body orbit reference frames (planet equator for moons, ecliptic
      for Sun-centred bodies)
    - Ecliptic J2000 (VSOP87), the shared frame every position ends up in
    - Equatorial J2000 (ICRF-aligned), used by the secular satellite elements

Matrices are stored as (3,3) numpy arrays and applied as R @ v.
"""

from __future__ import annotations

import logging

import numpy as np
from scipy.spatial.transform import Rotation

from .constants import OBLIQUITY_J2000, TWO_PI, HALF_PI

logger = logging.getLogger(__name__)

# Equatorial J2000 -> ecliptic J2000 is a rotation about x by -eps0.
EQUATORIAL_TO_ECLIPTIC = Rotation.from_euler('x', -OBLIQUITY_J2000).as_matrix()
ECLIPTIC_TO_EQUATORIAL = EQUATORIAL_TO_ECLIPTIC.T
EQUATORIAL_TO_ECLIPTIC.setflags(write=False)
ECLIPTIC_TO_EQUATORIAL.setflags(write=False)


def _rot_x(angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1., 0., 0.],
        [0., c, -s],
        [0., s, c]
    ])


def _rot_z(angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, -s, 0.],
        [s, c, 0.],
        [0., 0., 1.]
    ])


def rotation_to_ecliptic(obliquity: float, ascending_node: float,
                         j2000_longitude: float) -> np.ndarray:
    """Rotation from a parent-body orbit frame into ecliptic J2000.

    3-1-3 Euler composition R = Rz(node) · Rx(obliquity) · Rz(j2000_longitude).
    For Sun-centred bodies all three angles are zero and R is the identity.

    Args:
        obliquity: Obliquity of the parent's equator to the ecliptic [rad].
        ascending_node: Ecliptic longitude of the parent equator's
            ascending node [rad].
        j2000_longitude: Longitude, measured in the parent's equator, of
            the frame origin relative to that node [rad].

    Returns:
        3x3 rotation matrix, v_ecl = R · v_parent.
    """
    return _rot_z(ascending_node) @ _rot_x(obliquity) @ _rot_z(j2000_longitude)


class FrameRotation:
    """Cached parent-frame to ecliptic rotation owned by one orbit.

    The matrix is derived once from the parent's orientation angles and is
    only recomputed through :meth:`update`, which the owner of the parent
    orientation model calls when the parent pole moves.
    """

    def __init__(self, obliquity: float = 0.0, ascending_node: float = 0.0,
                 j2000_longitude: float = 0.0):
        self._set_angles(obliquity, ascending_node, j2000_longitude)
        logger.debug(
            "Frame rotation built: obliquity=%.6f, node=%.6f, j2000 lon=%.6f rad",
            *self._angles,
        )

    @classmethod
    def identity(cls) -> FrameRotation:
        return cls()

    def _set_angles(self, obliquity: float, ascending_node: float,
                    j2000_longitude: float) -> None:
        self._angles = (float(obliquity), float(ascending_node), float(j2000_longitude))
        self._matrix = rotation_to_ecliptic(*self._angles)

    def update(self, obliquity: float, ascending_node: float,
               j2000_longitude: float) -> None:
        """Recompute the matrix for new parent orientation angles."""
        self._set_angles(obliquity, ascending_node, j2000_longitude)
        logger.info(
            "Frame rotation recomputed: obliquity=%.6f, node=%.6f, j2000 lon=%.6f rad",
            *self._angles,
        )

    @property
    def angles(self) -> tuple[float, float, float]:
        """(obliquity, ascending_node, j2000_longitude) [rad]."""
        return self._angles

    @property
    def matrix(self) -> np.ndarray:
        """Copy of the 3x3 rotation matrix."""
        return self._matrix.copy()

    @property
    def is_identity(self) -> bool:
        return bool(np.array_equal(self._matrix, np.eye(3)))

    def apply(self, vec: np.ndarray) -> np.ndarray:
        """Rotate a parent-frame vector into ecliptic J2000."""
        return self._matrix @ vec


def spherical_to_rect(lon: float, lat: float) -> np.ndarray:
    """Unit vector from longitude/latitude [rad]."""
    cos_lat = np.cos(lat)
    return np.array([
        np.cos(lon) * cos_lat,
        np.sin(lon) * cos_lat,
        np.sin(lat)
    ])


def rect_to_spherical(vec: np.ndarray) -> tuple[float, float]:
    """Longitude in [0, 2π) and latitude of a (non-zero) vector [rad]."""
    lon = float(np.arctan2(vec[1], vec[0]) % TWO_PI)
    lat = float(np.arctan2(vec[2], np.hypot(vec[0], vec[1])))
    return lon, lat


def laplacian_plane_basis(pole_ra: float, pole_dec: float
                          ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Right-handed basis attached to a Laplacian plane, in equatorial J2000.

    Args:
        pole_ra: Right ascension of the Laplacian pole [rad].
        pole_dec: Declination of the Laplacian pole [rad].

    Returns:
        avect: In the J2000 equator, at right angles to the pole.
        bvect: At right angles to the pole and to avect.
        cvect: The pole itself.
    """
    avect = np.array([-np.sin(pole_ra), np.cos(pole_ra), 0.])
    sin_dec, cos_dec = np.sin(pole_dec), np.cos(pole_dec)
    bvect = np.array([-avect[1] * sin_dec, avect[0] * sin_dec, cos_dec])
    cvect = np.array([avect[1] * cos_dec, -avect[0] * cos_dec, sin_dec])
    return avect, bvect, cvect


def pole_to_orientation(pole_ra: float, pole_dec: float) -> tuple[float, float]:
    """Ecliptic obliquity and ascending node of a body's equator.

    Args:
        pole_ra, pole_dec: J2000 equatorial north pole of the body [rad].

    Returns:
        (obliquity, ascending_node) relative to ecliptic J2000 [rad].
    """
    pole_ecl = EQUATORIAL_TO_ECLIPTIC @ spherical_to_rect(pole_ra, pole_dec)
    lon, lat = rect_to_spherical(pole_ecl)
    return HALF_PI - lat, lon + HALF_PI


def j2000_node_longitude(obliquity: float, ascending_node: float) -> float:
    """Longitude of the J2000 equator's node on a parent equator [rad].

    This is the third angle consumed by :func:`rotation_to_ecliptic` for
    moons whose elements are referred to the parent's equator and the
    J2000 equator as origin.
    """
    c_obl, s_obl = np.cos(obliquity), np.sin(obliquity)
    c_nod, s_nod = np.cos(ascending_node), np.sin(ascending_node)
    axis0 = np.array([c_nod, s_nod, 0.])
    axis1 = np.array([-s_nod * c_obl, c_nod * c_obl, s_obl])
    orbit_pole = np.array([s_nod * s_obl, -c_nod * s_obl, c_obl])

    j2000_pole = EQUATORIAL_TO_ECLIPTIC @ np.array([0., 0., 1.])
    node_origin = np.cross(j2000_pole, orbit_pole)
    norm = np.linalg.norm(node_origin)
    if norm == 0.0:
        # Parent equator coincides with the J2000 equator
        return 0.0
    node_origin /= norm
    return float(np.arctan2(node_origin @ axis1, node_origin @ axis0))
