"""
Secular theory for small planetary satellites ("rocks").

Each satellite moves on an ellipse whose periapsis and node precess at
constant rates about the satellite's Laplacian plane:

    mean_lon(t) = l0 + n·dt
    (h, k)      rotated by apsis_rate·dt
    (p, q)      rotated by node_rate·dt

The true longitude gets a second-order equation-of-centre correction, and
the position is projected on a basis attached to the Laplacian pole before
being rotated from equatorial to ecliptic J2000.

This is independent of the Kepler propagator: no Kepler equation is
solved. Positions are planetocentric, in km (or AU via ``evaluate_au``).
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import numpy as np

from ..core.constants import SECONDS_PER_DAY, AU_KM
from ..core.frames import EQUATORIAL_TO_ECLIPTIC, laplacian_plane_basis
from ..core.types import RockElements
from .rock_catalog import ROCK_CATALOG

logger = logging.getLogger(__name__)


def rock_position_equatorial(rock: RockElements, jde: float) -> np.ndarray:
    """Planetocentric position in equatorial J2000 [km].

    Args:
        rock: Precessing-ellipse elements.
        jde: Julian Ephemeris Date.

    Returns:
        Position vector [km], shape (3,).
    """
    dt = (jde - rock.epoch_jd) * SECONDS_PER_DAY
    mean_lon = rock.mean_lon + dt * rock.mean_motion

    # Apsidal motion: rotate (h, k)
    s, c = np.sin(dt * rock.apsis_rate), np.cos(dt * rock.apsis_rate)
    h = rock.k * s + rock.h * c
    k = rock.k * c - rock.h * s

    e = np.sqrt(h * h + k * k)
    omega = np.arctan2(h, k)        # longitude of periapsis
    true_lon = (mean_lon
                + 2.0 * e * np.sin(mean_lon - omega)
                + 1.25 * e * e * np.sin(2.0 * (mean_lon - omega)))
    r = rock.a * (1.0 - e * e) / (1.0 + e * np.cos(true_lon - omega))

    # Nodal motion in the Laplacian plane: rotate (p, q)
    s, c = np.sin(dt * rock.node_rate), np.cos(dt * rock.node_rate)
    p = rock.q * s + rock.p * c
    q = rock.q * c - rock.p * s

    avect, bvect, cvect = laplacian_plane_basis(rock.pole_ra, rock.pole_dec)
    sin_l, cos_l = np.sin(true_lon), np.cos(true_lon)
    dot_prod = 2.0 * (q * sin_l - p * cos_l) / (1.0 + p * p + q * q)
    a_fraction = cos_l + p * dot_prod
    b_fraction = sin_l - q * dot_prod
    c_fraction = dot_prod

    return r * (a_fraction * avect + b_fraction * bvect + c_fraction * cvect)


def evaluate_rock(jde: float, body_id: int,
                  catalog: Mapping[int, RockElements] = ROCK_CATALOG
                  ) -> Optional[np.ndarray]:
    """Planetocentric ecliptic J2000 position of a catalogued satellite.

    Args:
        jde: Julian Ephemeris Date.
        body_id: JPL body number (e.g. 401 for Phobos).
        catalog: Element catalog to look the body up in.

    Returns:
        Position vector [km], shape (3,), or None if ``body_id`` is not in
        the catalog.
    """
    rock = catalog.get(body_id)
    if rock is None:
        logger.debug("No secular elements for body id %s", body_id)
        return None
    return EQUATORIAL_TO_ECLIPTIC @ rock_position_equatorial(rock, jde)


class SecularSatelliteEvaluator:
    """Lookup-and-evaluate front end over a rock catalog.

    Attributes:
        catalog: Immutable mapping from JPL id to elements.
    """

    def __init__(self, catalog: Mapping[int, RockElements] = ROCK_CATALOG):
        self.catalog = catalog

    def __contains__(self, body_id: int) -> bool:
        return body_id in self.catalog

    @property
    def body_ids(self) -> tuple[int, ...]:
        return tuple(sorted(self.catalog))

    def elements(self, body_id: int) -> RockElements:
        """Elements of a catalogued body. Raises KeyError if unknown."""
        return self.catalog[body_id]

    def evaluate(self, jde: float, body_id: int) -> Optional[np.ndarray]:
        """Ecliptic J2000 position [km], or None for an unknown id."""
        return evaluate_rock(jde, body_id, self.catalog)

    def evaluate_au(self, jde: float, body_id: int) -> Optional[np.ndarray]:
        """Ecliptic J2000 position [AU], or None for an unknown id."""
        pos = self.evaluate(jde, body_id)
        if pos is None:
            return None
        return pos / AU_KM
