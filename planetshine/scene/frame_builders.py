"""
Convenience builders for FrameInputs.

Places the active body at the origin, the vessel on the +X axis and the sun
in the XY plane at a chosen angle from the vessel direction. Used for
sweeps, benchmarks and tests where no host simulation is available.
"""

from typing import List, Sequence
import numpy as np

from .bodies import CelestialBody, FrameInputs

DEFAULT_SUN_DISTANCE = 13_599_840_256.0


def build_frame(
    body_radius: float,
    vessel_distance: float,
    sun_angle_deg: float,
    body_name: str = "Kerbin",
    sun_distance: float = DEFAULT_SUN_DISTANCE,
    body_position: Sequence[float] = (0.0, 0.0, 0.0)
) -> FrameInputs:
    """
    Build a two-body frame: sun at index 0, active body at index 1.

    Args:
        body_radius: Radius of the active body
        vessel_distance: Distance from the body center to the vessel
        sun_angle_deg: Angle between body->vessel and body->sun directions
        body_name: Name of the active body
        sun_distance: Distance from the body center to the sun
        body_position: World position of the active body

    Returns:
        FrameInputs with the vessel orbiting the active body.
    """
    body_position = np.asarray(body_position, dtype=np.float64)
    angle_rad = np.radians(sun_angle_deg)

    vessel_position = body_position + np.array([vessel_distance, 0.0, 0.0])
    sun_position = body_position + sun_distance * np.array([np.cos(angle_rad), np.sin(angle_rad), 0.0])

    bodies = [
        CelestialBody(name="Sun", position=sun_position, radius=261_600_000.0),
        CelestialBody(name=body_name, position=body_position, radius=body_radius),
    ]
    return FrameInputs(vessel_position=vessel_position, bodies=bodies, active_body_index=1)


def build_distance_sweep(
    body_radius: float,
    vessel_distances: Sequence[float],
    sun_angle_deg: float = 0.0,
    body_name: str = "Kerbin"
) -> List[FrameInputs]:
    """One frame per vessel distance at a fixed sun angle."""
    return [build_frame(body_radius, d, sun_angle_deg, body_name=body_name) for d in vessel_distances]


def build_sun_angle_sweep(
    body_radius: float,
    vessel_distance: float,
    sun_angles_deg: Sequence[float],
    body_name: str = "Kerbin"
) -> List[FrameInputs]:
    """One frame per sun angle at a fixed vessel distance."""
    return [build_frame(body_radius, vessel_distance, a, body_name=body_name) for a in sun_angles_deg]
