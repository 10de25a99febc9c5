# Scene inputs and render sinks

from .bodies import (
    CelestialBody,
    FrameInputs,
    PRIMARY_LIGHT_BODY_INDEX,
)

from .light_pool import (
    LightSourceRecord,
    LightPool,
    AmbientLight,
)

from .frame_builders import (
    build_frame,
    build_distance_sweep,
    build_sun_angle_sweep,
)

__all__ = [
    'CelestialBody',
    'FrameInputs',
    'PRIMARY_LIGHT_BODY_INDEX',
    'LightSourceRecord',
    'LightPool',
    'AmbientLight',
    'build_frame',
    'build_distance_sweep',
    'build_sun_angle_sweep',
]
