"""
Orbital element construction from catalogue values.

Turns an already-parsed set of catalogue values (angles in degrees,
distances in AU for Sun-centred bodies and km for moons) into validated
OrbitalElements, filling in whichever of the equivalent parameterisations
the catalogue left out:

    - pericentre distance  <- semi-major axis
    - mean motion          <- period, or the Gaussian constant (Sun only)
    - arg. of pericentre   <- longitude of pericentre
    - time of pericentre   <- epoch + mean anomaly, or mean longitude

The builders at the bottom hand the engine configuration to the propagators.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..core.config import OrreryConfig
from ..core.constants import (
    AU_KM, DEG2RAD, GIMBAL_MIN_PARENT_RADII, JD_J2000, OPEN_ORBIT_GOOD_DAYS,
    PLANET_MASS_RATIOS, TWO_PI
)
from ..core.frames import FrameRotation, j2000_node_longitude, pole_to_orientation
from ..core.types import InvalidElementsError, OrbitalElements
from .gimbal import GimbalPropagator
from .kepler import KeplerPropagator, mean_motion as gaussian_mean_motion, sidereal_period

logger = logging.getLogger(__name__)

SUN = "Sun"


def _get(values: Mapping[str, Any], key: str) -> Optional[float]:
    value = values.get(key)
    return None if value is None else float(value)


def elements_from_config(name: str, values: Mapping[str, Any],
                         parent: str = SUN) -> OrbitalElements:
    """Build OrbitalElements for one body.

    Recognised keys: ``eccentricity``, ``pericenter_distance``,
    ``semi_major_axis``, ``mean_motion`` [deg/day], ``period`` [days],
    ``inclination``, ``ascending_node``, ``arg_of_pericenter``,
    ``long_of_pericenter``, ``time_at_pericenter`` [JDE], ``epoch`` [JDE],
    ``mean_anomaly``, ``mean_longitude``, ``orbit_good`` [days].

    Args:
        name: Body name, used in error messages.
        values: Catalogue values for the body.
        parent: Name of the central body.

    Returns:
        Validated OrbitalElements.

    Raises:
        InvalidElementsError: A required parameter is missing or the
            resulting elements are invalid.
    """
    e = _get(values, "eccentricity") or 0.0
    is_moon = parent != SUN

    q = _get(values, "pericenter_distance")
    if q is None or q <= 0.0:
        a = _get(values, "semi_major_axis")
        if a is None:
            raise InvalidElementsError(
                f"{name}: provide pericenter_distance or semi_major_axis")
        if e == 1.0:
            raise InvalidElementsError(
                f"{name}: a parabolic orbit has no semi_major_axis, provide pericenter_distance")
        q = a * (1.0 - e)
    else:
        a = 0.0 if e == 1.0 else q / (1.0 - e)
    if q <= 0.0:
        raise InvalidElementsError(f"{name}: pericenter distance must be positive, got {q}")

    if is_moon:
        # Moon distances are catalogued in km
        q /= AU_KM
        a /= AU_KM

    n = _get(values, "mean_motion")
    if n is not None:
        n *= DEG2RAD
    else:
        period = _get(values, "period")
        if period is not None:
            if period <= 0.0:
                raise InvalidElementsError(f"{name}: period must be positive, got {period}")
            n = TWO_PI / period
        elif is_moon:
            raise InvalidElementsError(
                f"{name}: when the parent body is not the Sun, provide mean_motion or period")
        else:
            n = gaussian_mean_motion(q, e)
    if not n > 0.0:
        raise InvalidElementsError(f"{name}: mean motion must be positive, got {n} rad/day")

    node = (_get(values, "ascending_node") or 0.0) * DEG2RAD
    arg_pericenter = _get(values, "arg_of_pericenter")
    if arg_pericenter is None:
        long_pericenter = (_get(values, "long_of_pericenter") or 0.0) * DEG2RAD
        arg_pericenter = long_pericenter - node
    else:
        arg_pericenter *= DEG2RAD
        long_pericenter = arg_pericenter + node

    t0 = _get(values, "time_at_pericenter")
    if t0 is None:
        epoch = _get(values, "epoch")
        if epoch is None:
            epoch = JD_J2000
        mean_anomaly = _get(values, "mean_anomaly")
        if mean_anomaly is not None:
            mean_anomaly *= DEG2RAD
        else:
            mean_longitude = _get(values, "mean_longitude")
            if mean_longitude is None:
                raise InvalidElementsError(
                    f"{name}: without time_at_pericenter, provide mean_anomaly or mean_longitude")
            mean_anomaly = mean_longitude * DEG2RAD - long_pericenter
        t0 = epoch - mean_anomaly / n

    central_mass = 1.0 / PLANET_MASS_RATIOS.get(parent, 1.0)

    orbit_good = _get(values, "orbit_good")
    if orbit_good is None:
        if is_moon:
            orbit_good = 0.0
        elif e < 1.0:
            orbit_good = 0.5 * sidereal_period(a, central_mass)
        else:
            orbit_good = OPEN_ORBIT_GOOD_DAYS

    elements = OrbitalElements(
        q=q,
        e=e,
        i=(_get(values, "inclination") or 0.0) * DEG2RAD,
        node=node,
        arg_pericenter=arg_pericenter,
        t0=t0,
        mean_motion=n,
        central_mass=central_mass,
        orbit_good=orbit_good,
    )
    logger.debug("Elements for %s around %s: %s", name, parent, elements)
    return elements


def parent_frame_rotation(obliquity: float = 0.0,
                          ascending_node: float = 0.0) -> FrameRotation:
    """Frame rotation for a moon whose elements refer to its parent's equator.

    With both angles zero (Sun-centred bodies) this is the identity.
    """
    if obliquity == 0.0 and ascending_node == 0.0:
        return FrameRotation.identity()
    return FrameRotation(obliquity, ascending_node,
                         j2000_node_longitude(obliquity, ascending_node))


def parent_frame_rotation_from_pole(pole_ra: float, pole_dec: float) -> FrameRotation:
    """Frame rotation from the parent's J2000 equatorial north pole [rad]."""
    obliquity, ascending_node = pole_to_orientation(pole_ra, pole_dec)
    return parent_frame_rotation(obliquity, ascending_node)


def build_kepler_orbit(name: str, values: Mapping[str, Any], parent: str = SUN,
                       rotation: Optional[FrameRotation] = None,
                       config: Optional[OrreryConfig] = None) -> KeplerPropagator:
    """Elements from catalogue values, wrapped in a propagator.

    Args:
        name: Body name.
        values: Catalogue values, see :func:`elements_from_config`.
        parent: Name of the central body.
        rotation: Parent orientation. Identity if omitted.
        config: Engine configuration; its solver section drives the propagator.

    Returns:
        KeplerPropagator for the body.
    """
    cfg = config or OrreryConfig()
    elements = elements_from_config(name, values, parent)
    logger.debug("Kepler orbit for %s: %s", name, cfg.describe())
    return KeplerPropagator(elements, rotation=rotation, config=cfg.solver)


def build_gimbal(distance: float, parent_radius: Optional[float] = None,
                 rotation: Optional[FrameRotation] = None,
                 config: Optional[OrreryConfig] = None) -> GimbalPropagator:
    """Observer gimbal around a parent body.

    With ``parent_radius`` [AU] given, the viewpoint may not come closer
    than 1.5 parent radii.
    """
    cfg = config or OrreryConfig()
    gimbal = GimbalPropagator(distance, rotation=rotation, config=cfg.gimbal)
    if parent_radius is not None:
        gimbal.set_min_distance(GIMBAL_MIN_PARENT_RADII * parent_radius)
        gimbal.distance = distance
    return gimbal
