"""
Angular visibility model.

Converts body/vessel/sun geometry into the sun angle, the fraction of the
visible surface that is sunlit, and the averaged position of the reflected
light on the body's surface.

The visible cap seen from the vessel spans sun angles in
[90 - 90*s, 90 + 90*s] where s is the visible-surface fraction. The sunlit
share of that cap ramps linearly across the interval.
"""

import logging
from dataclasses import dataclass
import numpy as np

from ..utils.geometry_utils import (
    clamp01,
    safe_divide,
    angle_between_deg,
    rotate_towards
)
from .geometry_resolver import BodyGeometry

logger = logging.getLogger(__name__)

ANGLE_EFFECT_BOOST = 0.3


@dataclass(frozen=True)
class AngularVisibility:
    """
    Angular visibility of the sunlit surface.

    Attributes:
        sun_angle: Angle between body->sun and body->vessel, degrees [0, 180]
        angle_max: Upper bound of the visible cap, degrees
        angle_min: Lower bound of the visible cap, degrees
        visibility_ratio: Sunlit share of the visible cap [0, 1]
        angle_average: Angle from body->vessel of the averaged light source, degrees
        angle_effect: Falloff with the angle between sun and averaged light [0, 1]
        boosted_angle_effect: angle_effect + ANGLE_EFFECT_BOOST, clamped [0, 1]
        average_light_position: World position of the averaged reflector
    """
    sun_angle: float
    angle_max: float
    angle_min: float
    visibility_ratio: float
    angle_average: float
    angle_effect: float
    boosted_angle_effect: float
    average_light_position: np.ndarray


def compute_angular_visibility(geometry: BodyGeometry) -> AngularVisibility:
    """
    Compute the angular visibility for a frame.

    When visible_surface is 0 (vessel on the effective surface) the cap has
    zero width; the denominator is floored so the ratio saturates to 0 or 1.

    Args:
        geometry: Resolved frame geometry

    Returns:
        AngularVisibility for this frame.
    """
    visible_surface = geometry.visible_surface

    sun_angle = angle_between_deg(geometry.body_sun_direction, geometry.body_vessel_direction)
    angle_max = 90.0 + 90.0 * visible_surface
    angle_min = 90.0 - 90.0 * visible_surface

    visibility_ratio = clamp01(safe_divide(angle_max - sun_angle, angle_max - angle_min))
    angle_average = (90.0 * visible_surface) * (1.0 - visibility_ratio * (1.0 - sun_angle / 180.0))
    angle_effect = clamp01(1.0 - (sun_angle - angle_average) / 90.0)
    boosted_angle_effect = clamp01(angle_effect + ANGLE_EFFECT_BOOST)

    average_light_direction_from_body = rotate_towards(
        geometry.body_vessel_direction,
        geometry.body_sun_direction,
        angle_average
    )
    average_light_position = (geometry.body_position
                              + average_light_direction_from_body * geometry.effective_radius)

    return AngularVisibility(
        sun_angle=sun_angle,
        angle_max=angle_max,
        angle_min=angle_min,
        visibility_ratio=visibility_ratio,
        angle_average=angle_average,
        angle_effect=angle_effect,
        boosted_angle_effect=boosted_angle_effect,
        average_light_position=average_light_position
    )
