"""
Albedo light distribution.

Computes the averaged reflected-light direction and intensity, then spreads
N lights evenly on a cone around that direction. The cone opens with the
apparent size of the sunlit area so large nearby surfaces read as soft,
wide light and distant ones as a single point.

Provides:
- compute_light_distribution: pure per-frame computation of all light directions/intensities
- spread_light_directions: place N directions on a cone around an average direction
- distribute_lights: write a distribution into a LightPool
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple
import numpy as np

from ..config.planetshine_config_schemas import PlanetShineConfig
from ..scene.light_pool import LightPool
from ..utils.geometry_utils import clamp01, safe_divide, normalize, rotate_about_axis
from .geometry_resolver import BodyGeometry
from .angular_visibility import AngularVisibility
from .atmosphere_effect import AtmosphereEffect

logger = logging.getLogger(__name__)

# Extra spread granted inside the ambient fade zone
AMBIENT_SPREAD_BOOST = 0.4
# Tuning constant of the distance falloff, not a physical value
DISTANCE_FALLOFF = 25.0


@dataclass(frozen=True)
class LightDistribution:
    """
    Attributes:
        spread_angle: Cone half-angle of the spread lights, degrees
        spread_ratio: spread_angle / area_spread_angle_max, clamped [0, 1]
        light_range: effective_radius * albedo_range
        range_ratio: altitude / light_range
        distance_effect: 1 / (1 + DISTANCE_FALLOFF * range_ratio^2)
        average_light_direction: Unit vector from the averaged reflector to the vessel
        base_intensity: Per-light intensity before the spread multiplier
        lights: (direction, intensity) per light, in index order
    """
    spread_angle: float
    spread_ratio: float
    light_range: float
    range_ratio: float
    distance_effect: float
    average_light_direction: np.ndarray
    base_intensity: float
    lights: Tuple[Tuple[np.ndarray, float], ...]

    @property
    def light_count(self) -> int:
        return len(self.lights)


def spread_light_directions(
    average_direction: np.ndarray,
    spread_angle: float,
    spread_axis: np.ndarray,
    body_vessel_direction: np.ndarray,
    light_count: int
) -> List[np.ndarray]:
    """
    Place light directions on a cone around the average direction.

    Each direction is tilted by spread_angle around spread_axis, then turned
    by i * 360 / N around body_vessel_direction. A single light is never
    rotated.

    Args:
        average_direction: Direction of the averaged light
        spread_angle: Tilt in degrees
        spread_axis: Tilt axis (degenerate axis means no tilt)
        body_vessel_direction: Axis of the azimuthal placement
        light_count: N

    Returns:
        List of N direction vectors.
    """
    if light_count <= 1:
        return [np.array(average_direction, dtype=np.float64) for _ in range(light_count)]

    tilted = rotate_about_axis(average_direction, spread_angle, spread_axis)
    azimuth_step = 360.0 / light_count
    return [rotate_about_axis(tilted, i * azimuth_step, body_vessel_direction) for i in range(light_count)]


def compute_light_distribution(
    geometry: BodyGeometry,
    visibility: AngularVisibility,
    atmosphere: AtmosphereEffect,
    config: PlanetShineConfig,
    body_albedo_intensity: float
) -> LightDistribution:
    """
    Compute directions and intensities of all albedo lights.

    Args:
        geometry: Resolved frame geometry
        visibility: Angular visibility of the sunlit surface
        atmosphere: Altitude fades
        config: Lighting configuration (light count, spread and intensity tunables)
        body_albedo_intensity: Body's albedo intensity multiplier

    Returns:
        LightDistribution with exactly config.albedo_lights_quantity lights.
    """
    light_count = config.albedo_lights_quantity
    effective_radius = geometry.effective_radius
    sun_angle_factor = 1.0 - visibility.sun_angle / 180.0

    reflector_distance = float(np.linalg.norm(visibility.average_light_position - geometry.vessel_position))
    spread_angle = ((1.0 + AMBIENT_SPREAD_BOOST * atmosphere.ambient_fade_ratio)
                    * config.area_spread_angle_max
                    * clamp01(safe_divide(effective_radius, reflector_distance * 2.0))
                    * visibility.visibility_ratio * sun_angle_factor)
    spread_ratio = clamp01(safe_divide(spread_angle, config.area_spread_angle_max))

    light_range = effective_radius * config.albedo_range
    range_ratio = safe_divide(geometry.altitude, light_range)
    distance_effect = 1.0 / (1.0 + DISTANCE_FALLOFF * range_ratio * range_ratio)

    average_light_direction = normalize(geometry.vessel_position - visibility.average_light_position,
                                        fallback=geometry.body_vessel_direction)

    if light_count == 0:
        return LightDistribution(
            spread_angle=spread_angle,
            spread_ratio=spread_ratio,
            light_range=light_range,
            range_ratio=range_ratio,
            distance_effect=distance_effect,
            average_light_direction=average_light_direction,
            base_intensity=0.0,
            lights=()
        )

    base_intensity = config.base_albedo_intensity / light_count
    base_intensity *= (visibility.visibility_ratio * visibility.boosted_angle_effect
                       * atmosphere.reflection_effect * distance_effect * body_albedo_intensity)

    light_intensity = base_intensity
    if light_count > 1:
        light_intensity *= 1.0 + spread_ratio * spread_ratio * config.area_spread_intensity_multiplicator

    spread_axis = np.cross(geometry.body_vessel_direction, geometry.body_sun_direction)
    directions = spread_light_directions(
        average_light_direction,
        spread_angle,
        spread_axis,
        geometry.body_vessel_direction,
        light_count
    )

    return LightDistribution(
        spread_angle=spread_angle,
        spread_ratio=spread_ratio,
        light_range=light_range,
        range_ratio=range_ratio,
        distance_effect=distance_effect,
        average_light_direction=average_light_direction,
        base_intensity=base_intensity,
        lights=tuple((direction, light_intensity) for direction in directions)
    )


def distribute_lights(pool: LightPool, distribution: LightDistribution, color: np.ndarray) -> None:
    """
    Overwrite every pool record with the distribution.

    Raises:
        ValueError: If the distribution was computed for a different light count
    """
    pool.overwrite(distribution.lights, color)
