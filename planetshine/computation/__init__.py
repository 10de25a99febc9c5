# Core computational functions for albedo lighting

from .geometry_resolver import (
    BodyGeometry,
    resolve_geometry,
    EFFECTIVE_RADIUS_FACTOR,
)

from .angular_visibility import (
    AngularVisibility,
    compute_angular_visibility,
)

from .atmosphere_effect import (
    AtmosphereEffect,
    compute_atmosphere_effect,
)

from .light_distributor import (
    LightDistribution,
    compute_light_distribution,
    spread_light_directions,
    distribute_lights,
)

from .ambient_blender import blend_ambient_color, vacuum_color

from .albedo_lighting import (
    AlbedoLightingResult,
    FrameSnapshot,
    DebugLine,
    compute_albedo_lighting,
)

__all__ = [
    # Geometry
    'BodyGeometry',
    'resolve_geometry',
    'EFFECTIVE_RADIUS_FACTOR',
    # Angular visibility
    'AngularVisibility',
    'compute_angular_visibility',
    # Atmosphere
    'AtmosphereEffect',
    'compute_atmosphere_effect',
    # Light distribution
    'LightDistribution',
    'compute_light_distribution',
    'spread_light_directions',
    'distribute_lights',
    # Ambient
    'blend_ambient_color',
    'vacuum_color',
    # Frame
    'AlbedoLightingResult',
    'FrameSnapshot',
    'DebugLine',
    'compute_albedo_lighting',
]
