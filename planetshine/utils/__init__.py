"""Vector and scalar helpers for the lighting computation."""

from .geometry_utils import (
    EPSILON,
    clamp01,
    safe_divide,
    normalize,
    angle_between_deg,
    any_perpendicular,
    rotate_about_axis,
    rotate_towards,
)

__all__ = [
    'EPSILON',
    'clamp01',
    'safe_divide',
    'normalize',
    'angle_between_deg',
    'any_perpendicular',
    'rotate_about_axis',
    'rotate_towards',
]
