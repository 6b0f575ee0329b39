"""
===============================================================================
Element Builder Test Suite
===============================================================================
Catalogue values to OrbitalElements: alternative parameterisations, moon
units, central masses, validity windows and missing-key errors.
===============================================================================
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from orrery.astrodynamics.elements import (
    build_gimbal, build_kepler_orbit, elements_from_config, parent_frame_rotation,
    parent_frame_rotation_from_pole,
)
from orrery.astrodynamics.kepler import KeplerPropagator, mean_motion, sidereal_period
from orrery.core.config import GimbalConfig, OrreryConfig, SolverConfig
from orrery.core.constants import (
    AU_KM, DEG2RAD, HALF_PI, JD_J2000, OBLIQUITY_J2000, OPEN_ORBIT_GOOD_DAYS,
    PLANET_MASS_RATIOS, RAD2DEG, TWO_PI,
)
from orrery.core.frames import j2000_node_longitude, rect_to_spherical
from orrery.core.types import InvalidElementsError, OrbitRegime


@pytest.fixture
def earth_values():
    """J2000 mean elements of the Earth-Moon barycentre."""
    return {
        "semi_major_axis": 1.00000261,
        "eccentricity": 0.01671123,
        "inclination": 0.0,
        "ascending_node": 0.0,
        "long_of_pericenter": 102.93768193,
        "mean_longitude": 100.46457166,
        "epoch": JD_J2000,
    }


@pytest.fixture
def phobos_values():
    return {
        "semi_major_axis": 9376.0,            # km
        "eccentricity": 0.0151,
        "period": 0.31891023,
        "inclination": 1.075,
        "ascending_node": 164.931,
        "arg_of_pericenter": 150.247,
        "mean_anomaly": 92.474,
        "epoch": JD_J2000,
    }


# =============================================================================
# Test: Sun-centred bodies
# =============================================================================

class TestHeliocentric:

    def test_semi_major_axis_to_pericentre(self, earth_values):
        el = elements_from_config("Earth", earth_values)
        assert_allclose(el.q, 1.00000261 * (1.0 - 0.01671123))
        assert el.central_mass == 1.0
        assert el.regime is OrbitRegime.ELLIPTICAL

    def test_gaussian_mean_motion(self, earth_values):
        el = elements_from_config("Earth", earth_values)
        assert_allclose(el.mean_motion, mean_motion(el.q, el.e))

    def test_longitude_of_pericentre(self, earth_values):
        el = elements_from_config("Earth", earth_values)
        assert_allclose(el.arg_pericenter + el.node, 102.93768193 * DEG2RAD)

    def test_position_at_j2000(self, earth_values):
        """Early January: just past perihelion, heliocentric longitude ~100.38 deg."""
        prop = KeplerPropagator(elements_from_config("Earth", earth_values))
        pos = prop.propagate(JD_J2000)
        assert_allclose(np.linalg.norm(pos), 0.983307, atol=5e-5)
        lon, lat = rect_to_spherical(pos)
        assert_allclose(lon * RAD2DEG, 100.3803, atol=0.01)
        assert_allclose(lat, 0.0, atol=1e-15)

    def test_mean_anomaly_recovered_at_epoch(self):
        values = {"pericenter_distance": 1.2, "eccentricity": 0.3,
                  "mean_anomaly": 40.0, "epoch": 2455000.5}
        el = elements_from_config("Test", values)
        prop = KeplerPropagator(el)
        prop.propagate(2455000.5)
        assert_allclose(prop.last_anomaly.mean_anomaly, 40.0 * DEG2RAD, rtol=1e-9)

    def test_time_at_pericenter(self):
        el = elements_from_config("Comet", {
            "pericenter_distance": 0.5, "eccentricity": 1.0,
            "time_at_pericenter": 2459000.25, "mean_motion": 0.01,
        })
        assert el.t0 == 2459000.25
        assert_allclose(el.mean_motion, 0.01 * DEG2RAD)
        assert el.regime is OrbitRegime.PARABOLIC

    def test_period_sets_mean_motion(self):
        el = elements_from_config("Test", {
            "pericenter_distance": 1.0, "period": 400.0, "time_at_pericenter": 0.0,
        })
        assert_allclose(el.mean_motion, TWO_PI / 400.0)

    def test_default_epoch_is_j2000(self):
        el = elements_from_config("Test", {
            "pericenter_distance": 1.0, "mean_anomaly": 0.0,
        })
        assert el.t0 == JD_J2000


# =============================================================================
# Test: Moons
# =============================================================================

class TestMoons:

    def test_km_converted_to_au(self, phobos_values):
        el = elements_from_config("Phobos", phobos_values, parent="Mars")
        assert_allclose(el.q, 9376.0 * (1.0 - 0.0151) / AU_KM)

    def test_period_mean_motion(self, phobos_values):
        el = elements_from_config("Phobos", phobos_values, parent="Mars")
        assert_allclose(el.mean_motion, TWO_PI / 0.31891023)

    def test_central_mass(self, phobos_values):
        el = elements_from_config("Phobos", phobos_values, parent="Mars")
        assert_allclose(el.central_mass, 1.0 / PLANET_MASS_RATIOS["Mars"])

    def test_always_valid(self, phobos_values):
        el = elements_from_config("Phobos", phobos_values, parent="Mars")
        assert el.orbit_good == 0.0
        assert KeplerPropagator(el).object_date_valid(JD_J2000 + 1e6)

    def test_moon_needs_rate(self, phobos_values):
        del phobos_values["period"]
        with pytest.raises(InvalidElementsError, match="Phobos"):
            elements_from_config("Phobos", phobos_values, parent="Mars")

    def test_unknown_parent_defaults_to_unit_mass(self, phobos_values):
        el = elements_from_config("Moonlet", phobos_values, parent="Eris")
        assert el.central_mass == 1.0


# =============================================================================
# Test: Validity windows
# =============================================================================

class TestOrbitGood:

    def test_elliptic_half_period(self, earth_values):
        el = elements_from_config("Earth", earth_values)
        assert_allclose(el.orbit_good, 0.5 * sidereal_period(1.00000261))

    def test_open_orbit(self):
        el = elements_from_config("Comet", {
            "pericenter_distance": 0.8, "eccentricity": 1.2,
            "time_at_pericenter": 2459000.5,
        })
        assert el.orbit_good == OPEN_ORBIT_GOOD_DAYS

    def test_explicit_value(self, earth_values):
        earth_values["orbit_good"] = 30.0
        assert elements_from_config("Earth", earth_values).orbit_good == 30.0


# =============================================================================
# Test: Missing or inconsistent values
# =============================================================================

class TestErrors:

    def test_no_distance(self):
        with pytest.raises(InvalidElementsError, match="semi_major_axis"):
            elements_from_config("X", {"eccentricity": 0.1, "mean_anomaly": 0.0})

    def test_parabola_with_semi_major_axis(self):
        with pytest.raises(InvalidElementsError, match="parabolic"):
            elements_from_config("X", {"eccentricity": 1.0, "semi_major_axis": 2.0,
                                       "time_at_pericenter": 0.0})

    def test_no_time_reference(self):
        with pytest.raises(InvalidElementsError, match="mean_longitude"):
            elements_from_config("X", {"pericenter_distance": 1.0})

    def test_negative_distance(self):
        with pytest.raises(InvalidElementsError):
            elements_from_config("X", {"semi_major_axis": -1.0, "eccentricity": 0.2,
                                       "time_at_pericenter": 0.0})

    @pytest.mark.parametrize("period", [0.0, -365.25])
    def test_non_positive_period(self, period):
        with pytest.raises(InvalidElementsError, match="period"):
            elements_from_config("X", {"pericenter_distance": 1.0, "period": period,
                                       "mean_anomaly": 10.0})

    @pytest.mark.parametrize("rate", [0.0, -0.9856])
    def test_non_positive_mean_motion(self, rate):
        with pytest.raises(InvalidElementsError, match="mean motion"):
            elements_from_config("X", {"pericenter_distance": 1.0, "mean_motion": rate,
                                       "mean_anomaly": 10.0})

    def test_zero_rate_moon(self, phobos_values):
        phobos_values["period"] = 0.0
        with pytest.raises(InvalidElementsError, match="Phobos"):
            elements_from_config("Phobos", phobos_values, parent="Mars")

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            elements_from_config("X", {})


# =============================================================================
# Test: Parent frame
# =============================================================================

class TestParentFrame:

    def test_sun_centred_identity(self):
        assert parent_frame_rotation().is_identity

    def test_angles(self):
        rot = parent_frame_rotation(0.4665, 2.96)
        obl, node, lon = rot.angles
        assert (obl, node) == (0.4665, 2.96)
        assert_allclose(lon, j2000_node_longitude(0.4665, 2.96))

    def test_from_pole(self):
        rot = parent_frame_rotation_from_pole(0.0, HALF_PI)
        assert_allclose(rot.angles[0], OBLIQUITY_J2000, atol=1e-12)


# =============================================================================
# Test: Propagator builders
# =============================================================================

class TestBuilders:

    def test_kepler_orbit_uses_solver_config(self, earth_values):
        cfg = OrreryConfig(solver=SolverConfig(max_elliptic_iterations=3))
        prop = build_kepler_orbit("Earth", earth_values, config=cfg)
        assert prop.config is cfg.solver
        assert prop.elements == elements_from_config("Earth", earth_values)

    def test_kepler_orbit_default_config(self, phobos_values):
        rot = parent_frame_rotation_from_pole(317.681 * DEG2RAD, 52.887 * DEG2RAD)
        prop = build_kepler_orbit("Phobos", phobos_values, parent="Mars", rotation=rot)
        assert prop.config == SolverConfig()
        assert prop.rotation is rot

    def test_kepler_orbit_invalid_values(self):
        with pytest.raises(InvalidElementsError):
            build_kepler_orbit("X", {"pericenter_distance": 1.0, "period": 0.0,
                                     "mean_anomaly": 0.0})

    def test_gimbal_uses_gimbal_config(self):
        cfg = OrreryConfig(gimbal=GimbalConfig(min_distance=0.1, max_distance=2.0))
        gimbal = build_gimbal(10.0, config=cfg)
        assert gimbal.distance == 2.0
        assert gimbal.min_distance == 0.1

    def test_gimbal_parent_radius_floor(self):
        """Never closer than 1.5 parent radii."""
        jupiter_radius = 71492.0 / AU_KM
        gimbal = build_gimbal(0.0001, parent_radius=jupiter_radius)
        assert_allclose(gimbal.min_distance, 1.5 * jupiter_radius)
        assert_allclose(gimbal.distance, 1.5 * jupiter_radius)

    def test_gimbal_requested_distance_kept_above_floor(self):
        gimbal = build_gimbal(0.005, parent_radius=0.001)
        assert_allclose(gimbal.distance, 0.005)
