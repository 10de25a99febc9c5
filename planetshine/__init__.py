"""
PlanetShine

Real-time approximation of sunlight reflected off a nearby celestial body
onto a vessel. Once per frame it computes a small pool of directional
albedo lights spread around the averaged reflection direction, and an
ambient tint derived from atmospheric scattering.
"""

from planetshine.config import (
    PlanetShineConfig,
    BodyProperties,
    DEFAULT_BODY_PROPERTIES,
    PlanetShineConfigManager,
)
from planetshine.scene import (
    CelestialBody,
    FrameInputs,
    LightSourceRecord,
    LightPool,
    AmbientLight,
    build_frame,
)
from planetshine.computation import (
    compute_albedo_lighting,
    FrameSnapshot,
)
from planetshine.session import LightingSession, run_frame_sequence

__version__ = "0.3.0"

__all__ = [
    'PlanetShineConfig',
    'BodyProperties',
    'DEFAULT_BODY_PROPERTIES',
    'PlanetShineConfigManager',
    'CelestialBody',
    'FrameInputs',
    'LightSourceRecord',
    'LightPool',
    'AmbientLight',
    'build_frame',
    'compute_albedo_lighting',
    'FrameSnapshot',
    'LightingSession',
    'run_frame_sequence',
]
