"""
Per-frame albedo lighting computation.

Chains geometry -> angular visibility -> atmosphere fades -> light
distribution and ambient blending into one pure function of the frame
inputs and the configuration. Nothing here writes to a light pool; the
session applies the result once the whole computation has completed.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Optional
import numpy as np

from ..config.planetshine_config_schemas import PlanetShineConfig, BodyProperties
from ..scene.bodies import FrameInputs
from .geometry_resolver import BodyGeometry, resolve_geometry
from .angular_visibility import AngularVisibility, compute_angular_visibility
from .atmosphere_effect import AtmosphereEffect, compute_atmosphere_effect
from .light_distributor import LightDistribution, compute_light_distribution
from .ambient_blender import blend_ambient_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DebugLine:
    """Line segment for diagnostic drawing."""
    start: np.ndarray
    end: np.ndarray


@dataclass(frozen=True)
class FrameSnapshot:
    """
    Every named intermediate value of one frame, for diagnostics.

    Attributes:
        body_name: Active body identity
        body_properties: Properties used (configured or default)
        uses_default_properties: True if the body was missing from the table
        geometry, visibility, atmosphere, distribution: Stage results
        ambient_color: Ambient tint, or None if no ambient sink was present
        debug_lines: Light direction, sun direction and body direction segments
    """
    body_name: str
    body_properties: BodyProperties
    uses_default_properties: bool
    geometry: BodyGeometry
    visibility: AngularVisibility
    atmosphere: AtmosphereEffect
    distribution: LightDistribution
    ambient_color: Optional[np.ndarray]
    debug_lines: Dict[str, DebugLine] = field(default_factory=dict)

    @property
    def light_intensity(self) -> float:
        """Intensity of each light after the spread multiplier (0 if N == 0)."""
        if not self.distribution.lights:
            return 0.0
        return self.distribution.lights[0][1]

    def as_dict(self) -> Dict[str, Any]:
        """Flatten the named scalar intermediates."""
        return {
            'body': self.body_name,
            'body_albedo_intensity': self.body_properties.albedo_intensity,
            'body_ground_ambient': self.body_properties.atmosphere_ambient_level,
            'effective_radius': self.geometry.effective_radius,
            'vessel_altitude': self.geometry.altitude,
            'visible_surface': self.geometry.visible_surface,
            'sun_angle': self.visibility.sun_angle,
            'visible_light_sun_angle_max': self.visibility.angle_max,
            'visible_light_sun_angle_min': self.visibility.angle_min,
            'visible_light_ratio': self.visibility.visibility_ratio,
            'visible_light_angle_average': self.visibility.angle_average,
            'visible_light_angle_effect': self.visibility.angle_effect,
            'boosted_visible_light_angle_effect': self.visibility.boosted_angle_effect,
            'atmosphere_reflection_effect': self.atmosphere.reflection_effect,
            'atmosphere_ambient_ratio': self.atmosphere.ambient_fade_ratio,
            'atmosphere_ambient_effect': self.atmosphere.ambient_effect,
            'area_spread_angle': self.distribution.spread_angle,
            'area_spread_angle_ratio': self.distribution.spread_ratio,
            'light_range': self.distribution.light_range,
            'vessel_light_range_ratio': self.distribution.range_ratio,
            'light_distance_effect': self.distribution.distance_effect,
            'base_light_intensity': self.distribution.base_intensity,
            'light_intensity': self.light_intensity,
        }


@dataclass(frozen=True)
class AlbedoLightingResult:
    """
    Output of one frame's computation.

    Attributes:
        distribution: Light directions and intensities, in pool index order
        light_color: Color applied to every light (body albedo color)
        ambient_color: Ambient tint, or None when not requested
        snapshot: Diagnostic snapshot
    """
    distribution: LightDistribution
    light_color: np.ndarray
    ambient_color: Optional[np.ndarray]
    snapshot: FrameSnapshot


def compute_albedo_lighting(
    frame: FrameInputs,
    config: PlanetShineConfig,
    compute_ambient: bool = True
) -> Optional[AlbedoLightingResult]:
    """
    Compute albedo lights and ambient tint for one frame.

    Args:
        frame: Host inputs for this frame
        config: Lighting configuration
        compute_ambient: If False, the ambient step is skipped (no ambient sink)

    Returns:
        AlbedoLightingResult, or None if the frame has no active vessel,
        no active body or no primary light body.
    """
    body = frame.active_body
    sun = frame.primary_light_body
    if frame.vessel_position is None or body is None or sun is None:
        logger.debug("No active vessel or body; skipping albedo lighting for this frame")
        return None

    uses_default_properties = not config.has_body_properties(body.name)
    body_properties = config.get_body_properties(body.name)
    body_color = np.asarray(body_properties.albedo_color, dtype=np.float64)

    geometry = resolve_geometry(
        vessel_position=frame.vessel_position,
        body_position=body.position,
        body_radius=body.radius,
        sun_position=sun.position,
        body_is_sun=frame.active_body_is_light_source
    )
    visibility = compute_angular_visibility(geometry)
    atmosphere = compute_atmosphere_effect(
        geometry.altitude,
        geometry.effective_radius,
        body_properties.atmosphere_ambient_level,
        config
    )
    distribution = compute_light_distribution(
        geometry,
        visibility,
        atmosphere,
        config,
        body_properties.albedo_intensity
    )

    ambient_color = None
    if compute_ambient:
        ambient_color = blend_ambient_color(
            atmosphere.ambient_effect,
            visibility.angle_effect,
            body_color,
            config.vacuum_light_level
        )

    debug_lines = {
        'light_direction': DebugLine(visibility.average_light_position, geometry.vessel_position),
        'sun_direction': DebugLine(np.array(sun.position, dtype=np.float64), geometry.vessel_position),
        'body_direction': DebugLine(geometry.body_position, geometry.vessel_position),
    }

    snapshot = FrameSnapshot(
        body_name=body.name,
        body_properties=body_properties,
        uses_default_properties=uses_default_properties,
        geometry=geometry,
        visibility=visibility,
        atmosphere=atmosphere,
        distribution=distribution,
        ambient_color=ambient_color,
        debug_lines=debug_lines
    )

    return AlbedoLightingResult(
        distribution=distribution,
        light_color=body_color,
        ambient_color=ambient_color,
        snapshot=snapshot
    )
