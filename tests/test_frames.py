"""
===============================================================================
Reference Frame Test Suite
===============================================================================
Parent-frame rotations, the equatorial/ecliptic tie, pole conversions and the
Laplacian-plane basis.
===============================================================================
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.spatial.transform import Rotation

from orrery.core.constants import DEG2RAD, HALF_PI, OBLIQUITY_J2000, TWO_PI
from orrery.core.frames import (
    ECLIPTIC_TO_EQUATORIAL, EQUATORIAL_TO_ECLIPTIC, FrameRotation,
    j2000_node_longitude, laplacian_plane_basis, pole_to_orientation,
    rect_to_spherical, rotation_to_ecliptic, spherical_to_rect,
)

ANGLE_SETS = [
    (0.0, 0.0, 0.0),
    (0.41, 3.85, 0.0),
    (0.05, 5.9, 0.4),
    (1.7, 1.3, -2.2),
    (HALF_PI, np.pi, 1.0),
]


# =============================================================================
# Test: Parent-frame rotation
# =============================================================================

class TestRotationToEcliptic:

    @pytest.mark.parametrize("angles", ANGLE_SETS)
    def test_orthonormal(self, angles):
        R = rotation_to_ecliptic(*angles)
        assert_allclose(R @ R.T, np.eye(3), atol=1e-14)
        assert_allclose(np.linalg.det(R), 1.0, atol=1e-14)

    @pytest.mark.parametrize("angles", ANGLE_SETS)
    def test_matches_intrinsic_zxz(self, angles):
        """Rz(node) Rx(obliquity) Rz(lon) is the intrinsic 3-1-3 sequence."""
        obl, node, lon = angles
        expected = Rotation.from_euler('ZXZ', [node, obl, lon]).as_matrix()
        assert_allclose(rotation_to_ecliptic(obl, node, lon), expected, atol=1e-14)

    def test_zero_angles_identity(self):
        assert np.array_equal(rotation_to_ecliptic(0.0, 0.0, 0.0), np.eye(3))

    def test_frame_pole(self):
        """The parent z-axis maps to the pole set by obliquity and node."""
        obl, node = 0.3, 2.0
        pole = rotation_to_ecliptic(obl, node, 0.7) @ np.array([0., 0., 1.])
        assert_allclose(pole, [np.sin(node) * np.sin(obl),
                               -np.cos(node) * np.sin(obl),
                               np.cos(obl)], atol=1e-14)


class TestFrameRotation:

    def test_identity(self):
        rot = FrameRotation.identity()
        assert rot.is_identity
        assert rot.angles == (0.0, 0.0, 0.0)
        v = np.array([1.0, -2.0, 0.5])
        assert np.array_equal(rot.apply(v), v)

    def test_matrix_is_a_copy(self):
        rot = FrameRotation(0.2, 0.3, 0.4)
        m = rot.matrix
        m[:] = 0.0
        assert_allclose(rot.matrix, rotation_to_ecliptic(0.2, 0.3, 0.4))

    def test_update(self):
        rot = FrameRotation.identity()
        rot.update(0.2, 0.3, 0.4)
        assert not rot.is_identity
        assert rot.angles == (0.2, 0.3, 0.4)
        v = np.array([0.3, 0.1, -0.9])
        assert_allclose(rot.apply(v), rotation_to_ecliptic(0.2, 0.3, 0.4) @ v)

    def test_construction_is_quiet_at_info(self, caplog):
        """Building thousands of orbit frames must not flood INFO."""
        with caplog.at_level("INFO", logger="orrery.core.frames"):
            FrameRotation(0.1, 0.2, 0.3)
            FrameRotation.identity()
        assert caplog.records == []

    def test_construction_logged_at_debug(self, caplog):
        with caplog.at_level("DEBUG", logger="orrery.core.frames"):
            FrameRotation(0.1, 0.2, 0.3)
        assert [r.levelname for r in caplog.records] == ["DEBUG"]
        assert "Frame rotation built" in caplog.text

    def test_update_logged_at_info(self, caplog):
        rot = FrameRotation(0.1, 0.2, 0.3)
        with caplog.at_level("INFO", logger="orrery.core.frames"):
            rot.update(0.2, 0.3, 0.4)
        assert [r.levelname for r in caplog.records] == ["INFO"]
        assert "Frame rotation recomputed" in caplog.text


# =============================================================================
# Test: Equatorial / ecliptic J2000
# =============================================================================

class TestObliquity:

    def test_celestial_pole_in_ecliptic(self):
        """The J2000 celestial pole sits at ecliptic longitude 90 deg."""
        pole = EQUATORIAL_TO_ECLIPTIC @ np.array([0., 0., 1.])
        assert_allclose(pole, [0.0, np.sin(OBLIQUITY_J2000), np.cos(OBLIQUITY_J2000)],
                        atol=1e-14)

    def test_equinox_unchanged(self):
        assert_allclose(EQUATORIAL_TO_ECLIPTIC @ np.array([1., 0., 0.]), [1., 0., 0.])

    def test_inverse(self):
        assert_allclose(ECLIPTIC_TO_EQUATORIAL @ EQUATORIAL_TO_ECLIPTIC, np.eye(3),
                        atol=1e-14)

    def test_obliquity_value(self):
        assert_allclose(OBLIQUITY_J2000, (23.0 + 26.0 / 60.0 + 21.4091 / 3600.0) * DEG2RAD,
                        rtol=1e-12)

    def test_read_only(self):
        with pytest.raises(ValueError):
            EQUATORIAL_TO_ECLIPTIC[0, 0] = 2.0


# =============================================================================
# Test: Spherical coordinates and poles
# =============================================================================

class TestSpherical:

    @pytest.mark.parametrize("lon, lat", [
        (0.0, 0.0), (1.0, 0.5), (3.5, -1.2), (6.2, 1.5),
    ])
    def test_round_trip(self, lon, lat):
        out_lon, out_lat = rect_to_spherical(3.7 * spherical_to_rect(lon, lat))
        assert_allclose([out_lon, out_lat], [lon, lat], atol=1e-14)

    def test_longitude_range(self):
        lon, _ = rect_to_spherical(np.array([1.0, -1.0, 0.0]))
        assert_allclose(lon, TWO_PI - np.pi / 4.0)

    def test_unit_length(self):
        assert_allclose(np.linalg.norm(spherical_to_rect(2.3, -0.7)), 1.0)


class TestPoleOrientation:

    def test_earth_pole(self):
        """Earth's own pole gives the J2000 obliquity."""
        obliquity, node = pole_to_orientation(0.0, HALF_PI)
        assert_allclose(obliquity, OBLIQUITY_J2000, atol=1e-12)
        assert_allclose(node % TWO_PI, np.pi, atol=1e-12)

    @pytest.mark.parametrize("ra, dec", [
        (40.589 * DEG2RAD, 83.537 * DEG2RAD),       # Saturn
        (257.311 * DEG2RAD, -15.175 * DEG2RAD),     # Uranus
        (268.057 * DEG2RAD, 64.495 * DEG2RAD),      # Jupiter
        (317.681 * DEG2RAD, 52.887 * DEG2RAD),      # Mars
    ])
    def test_frame_pole_matches_input_pole(self, ra, dec):
        obliquity, node = pole_to_orientation(ra, dec)
        frame_pole = rotation_to_ecliptic(obliquity, node, 0.0) @ np.array([0., 0., 1.])
        assert_allclose(frame_pole,
                        EQUATORIAL_TO_ECLIPTIC @ spherical_to_rect(ra, dec), atol=1e-14)

    @pytest.mark.parametrize("obliquity, node", [
        (0.4665, 2.96),     # Saturn-like
        (1.7082, 1.29),     # Uranus-like
        (0.0546, 5.9),
    ])
    def test_j2000_node_on_j2000_equator(self, obliquity, node):
        """With the J2000 node as origin, the parent x-axis lies in the J2000 equator."""
        lon = j2000_node_longitude(obliquity, node)
        x_axis = rotation_to_ecliptic(obliquity, node, lon) @ np.array([1., 0., 0.])
        j2000_pole = EQUATORIAL_TO_ECLIPTIC @ np.array([0., 0., 1.])
        assert abs(x_axis @ j2000_pole) < 1e-14

    def test_j2000_node_finite_for_earth_equator(self):
        obliquity, node = pole_to_orientation(0.0, HALF_PI)
        assert np.isfinite(j2000_node_longitude(obliquity, node))


class TestLaplacianPlane:

    @pytest.mark.parametrize("ra, dec", [
        (0.0, HALF_PI), (317.68 * DEG2RAD, 52.89 * DEG2RAD), (4.4, -0.26),
    ])
    def test_right_handed_orthonormal(self, ra, dec):
        a, b, c = laplacian_plane_basis(ra, dec)
        basis = np.vstack([a, b, c])
        assert_allclose(basis @ basis.T, np.eye(3), atol=1e-14)
        assert_allclose(np.cross(a, b), c, atol=1e-14)

    def test_pole_is_cvect(self):
        _, _, c = laplacian_plane_basis(1.2, 0.3)
        assert_allclose(c, spherical_to_rect(1.2, 0.3), atol=1e-14)

    def test_avect_in_equator(self):
        a, _, _ = laplacian_plane_basis(2.5, -0.4)
        assert a[2] == 0.0
