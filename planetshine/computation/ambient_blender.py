"""Ambient tint blending."""

import numpy as np


def blend_ambient_color(
    ambient_effect: float,
    angle_effect: float,
    body_color: np.ndarray,
    vacuum_level: float
) -> np.ndarray:
    """
    Ambient tint: body color weighted by the ambient and angle effects, plus
    a uniform vacuum floor.

    Args:
        ambient_effect: Atmosphere ambient effect
        angle_effect: Angular falloff of the sunlit area [0, 1]
        body_color: Body albedo RGB color
        vacuum_level: Minimum ambient level applied to every channel

    Returns:
        RGB ambient color.
    """
    return ambient_effect * angle_effect * np.asarray(body_color, dtype=np.float64) + vacuum_color(vacuum_level)


def vacuum_color(vacuum_level: float) -> np.ndarray:
    """Ambient tint with no body contribution."""
    return np.full(3, vacuum_level, dtype=np.float64)
