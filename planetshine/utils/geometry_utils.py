"""
Geometry utilities for albedo light computation.

Provides:
- clamp01 / safe_divide: scalar guards used by every lighting ratio
- normalize / angle_between_deg: vector basics with degenerate-input fallbacks
- rotate_about_axis: axis-angle rotation of a vector (quaternion based)
- rotate_towards: rotate one direction toward another by a bounded angle
"""

import numpy as np
import quaternion
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# Floor for denominators and vector norms
EPSILON = 1e-6


def clamp01(value: float) -> float:
    """Clamp a scalar to [0, 1]."""
    return float(min(max(value, 0.0), 1.0))


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Divide, flooring the magnitude of the denominator at EPSILON.

    The sign of the denominator is preserved, zero is treated as positive.
    """
    if abs(denominator) < EPSILON:
        denominator = EPSILON if denominator >= 0.0 else -EPSILON
    return numerator / denominator


def normalize(vector: np.ndarray, fallback: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Return the unit vector of `vector`.

    Args:
        vector: 3D vector
        fallback: Returned (as a copy) when the vector norm is below EPSILON.
            Defaults to the zero vector.

    Returns:
        Unit vector, or the fallback for degenerate input.
    """
    vector = np.asarray(vector, dtype=np.float64)
    norm = np.linalg.norm(vector)
    if norm < EPSILON:
        if fallback is None:
            return np.zeros(3)
        return np.array(fallback, dtype=np.float64)
    return vector / norm


def angle_between_deg(a: np.ndarray, b: np.ndarray) -> float:
    """
    Unsigned angle between two vectors in degrees, in [0, 180].

    Returns 0.0 if either vector is degenerate.
    """
    norm_product = np.linalg.norm(a) * np.linalg.norm(b)
    if norm_product < EPSILON:
        return 0.0
    cos_angle = np.clip(np.dot(a, b) / norm_product, -1.0, 1.0)
    return float(np.degrees(np.arccos(cos_angle)))


def any_perpendicular(vector: np.ndarray) -> np.ndarray:
    """Deterministic unit vector perpendicular to `vector`."""
    reference = np.array([1.0, 0.0, 0.0])
    if abs(np.dot(normalize(vector), reference)) > 0.9:
        reference = np.array([0.0, 1.0, 0.0])
    return normalize(np.cross(vector, reference))


def rotate_about_axis(vector: np.ndarray, angle_deg: float, axis: np.ndarray) -> np.ndarray:
    """
    Rotate a vector by angle_deg around an axis.

    Uses a unit quaternion built from the rotation vector axis * angle. A
    degenerate axis (zero norm) leaves the vector unchanged.

    Args:
        vector: 3D vector to rotate
        angle_deg: Rotation angle in degrees (right-hand rule)
        axis: Rotation axis (normalized internally)

    Returns:
        Rotated vector.
    """
    axis_unit = normalize(axis)
    if not np.any(axis_unit):
        return np.array(vector, dtype=np.float64)

    rotation = quaternion.from_rotation_vector(axis_unit * np.radians(angle_deg))
    return quaternion.rotate_vectors(rotation, np.asarray(vector, dtype=np.float64))


def rotate_towards(current: np.ndarray, target: np.ndarray, max_angle_deg: float) -> np.ndarray:
    """
    Rotate direction `current` toward `target` by at most max_angle_deg.

    Both inputs are treated as directions; the result is a unit vector. If
    the angle between them is smaller than max_angle_deg the result is
    `target`. Opposite directions rotate around a deterministic
    perpendicular axis.

    Args:
        current: Starting direction
        target: Direction to rotate toward
        max_angle_deg: Maximum rotation in degrees (>= 0)

    Returns:
        Unit direction vector.
    """
    current_unit = normalize(current)
    target_unit = normalize(target)

    angle = angle_between_deg(current_unit, target_unit)
    if angle <= max_angle_deg:
        return target_unit if np.any(target_unit) else current_unit

    axis = np.cross(current_unit, target_unit)
    if np.linalg.norm(axis) < EPSILON:
        # Antiparallel: every perpendicular is a shortest path
        axis = any_perpendicular(current_unit)

    return normalize(rotate_about_axis(current_unit, max_angle_deg, axis))
