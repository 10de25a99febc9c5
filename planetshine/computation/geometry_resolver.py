"""
Body/vessel/sun geometry for albedo lighting.

Derives the directions and altitude figures every later stage depends on.
"""

import logging
from dataclasses import dataclass
import numpy as np

from ..utils.geometry_utils import EPSILON, normalize

logger = logging.getLogger(__name__)

# Shrinks the body so reflected lights never sit exactly on the visual horizon
EFFECTIVE_RADIUS_FACTOR = 0.99


@dataclass(frozen=True)
class BodyGeometry:
    """
    Geometry of one frame.

    Attributes:
        body_position: World position of the active body
        vessel_position: World position of the vessel
        effective_radius: Body radius * EFFECTIVE_RADIUS_FACTOR
        body_vessel_direction: Unit vector body -> vessel
        body_sun_direction: Unit vector body -> primary light source
        distance: |vessel - body|
        altitude: distance - effective_radius
        visible_surface: altitude / distance, floored at 0
    """
    body_position: np.ndarray
    vessel_position: np.ndarray
    effective_radius: float
    body_vessel_direction: np.ndarray
    body_sun_direction: np.ndarray
    distance: float
    altitude: float
    visible_surface: float


def resolve_geometry(
    vessel_position: np.ndarray,
    body_position: np.ndarray,
    body_radius: float,
    sun_position: np.ndarray,
    body_is_sun: bool = False
) -> BodyGeometry:
    """
    Resolve the frame geometry.

    Args:
        vessel_position: Vessel world position
        body_position: Active body world position
        body_radius: Active body radius
        sun_position: Primary light source world position
        body_is_sun: True if the active body is itself the primary light source

    Returns:
        BodyGeometry for this frame. A vessel at the body center yields a
        zero direction and visible_surface 0 rather than an error.
    """
    vessel_position = np.array(vessel_position, dtype=np.float64)
    body_position = np.array(body_position, dtype=np.float64)

    effective_radius = float(body_radius) * EFFECTIVE_RADIUS_FACTOR
    body_vessel_vector = vessel_position - body_position
    body_vessel_direction = normalize(body_vessel_vector)

    if body_is_sun:
        body_sun_direction = body_vessel_direction
    else:
        body_sun_direction = normalize(np.asarray(sun_position, dtype=np.float64) - body_position)

    distance = float(np.linalg.norm(body_vessel_vector))
    altitude = distance - effective_radius
    visible_surface = max(altitude / max(distance, EPSILON), 0.0)

    if distance < EPSILON:
        logger.debug("Vessel coincides with body center; visible surface saturated to 0")

    return BodyGeometry(
        body_position=body_position,
        vessel_position=vessel_position,
        effective_radius=effective_radius,
        body_vessel_direction=body_vessel_direction,
        body_sun_direction=body_sun_direction,
        distance=distance,
        altitude=altitude,
        visible_surface=visible_surface
    )
