"""Altitude based fade ratios for reflected and ambient light."""

import logging
from dataclasses import dataclass

from ..config.planetshine_config_schemas import PlanetShineConfig
from ..utils.geometry_utils import clamp01, safe_divide

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AtmosphereEffect:
    """
    Attributes:
        reflection_effect: Dimming of reflected light near the ground [0, 1]
        ambient_fade_ratio: 1 near the body, 0 beyond the ambient fade altitude
        ambient_effect: Ambient contribution before angle and color weighting
    """
    reflection_effect: float
    ambient_fade_ratio: float
    ambient_effect: float


def compute_atmosphere_effect(
    altitude: float,
    effective_radius: float,
    ground_ambient_level: float,
    config: PlanetShineConfig
) -> AtmosphereEffect:
    """
    Compute atmosphere fades for the vessel's altitude.

    Thresholds in the config are fractions of the effective radius.

    Args:
        altitude: Vessel altitude above the effective radius
        effective_radius: Shrunk body radius
        ground_ambient_level: Body's atmosphere ambient level [0, 1]
        config: Lighting configuration

    Returns:
        AtmosphereEffect for this frame.
    """
    reflection_effect = clamp01(
        (1.0 - ground_ambient_level)
        + safe_divide(altitude - effective_radius * config.min_albedo_fade_altitude,
                      effective_radius * (config.max_albedo_fade_altitude - config.min_albedo_fade_altitude))
    )

    ambient_fade_ratio = 1.0 - clamp01(
        safe_divide(altitude - effective_radius * config.min_ambient_fade_altitude,
                    effective_radius * (config.max_ambient_fade_altitude - config.min_ambient_fade_altitude))
    )

    ambient_effect = ground_ambient_level * config.base_ground_ambient * ambient_fade_ratio

    return AtmosphereEffect(
        reflection_effect=reflection_effect,
        ambient_fade_ratio=ambient_fade_ratio,
        ambient_effect=ambient_effect
    )
