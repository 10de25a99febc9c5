"""
Host-side scene inputs consumed once per frame.

The host simulation supplies the vessel position and the set of celestial
bodies; index 0 of `bodies` is the primary light-emitting body (the sun).
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional
import numpy as np

logger = logging.getLogger(__name__)

# Type alias for 3D vectors
Vector3D = np.ndarray  # 3-element array: np.array([x, y, z])

PRIMARY_LIGHT_BODY_INDEX = 0


@dataclass
class CelestialBody:
    """
    A celestial body as reported by the host.

    Attributes:
        name: Body identity, used as the key into the property table.
        position: World position of the body's center.
        radius: Body radius in world units.
    """
    name: str
    position: Vector3D = field(default_factory=lambda: np.zeros(3))
    radius: float = 0.0

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64)
        self.radius = float(self.radius)


@dataclass
class FrameInputs:
    """
    Everything the host provides for one frame.

    Attributes:
        vessel_position: Active vessel world position, or None if no vessel is active.
        bodies: All bodies; index 0 is the primary light source.
        active_body_index: Index of the body the vessel is currently orbiting, or None.
    """
    vessel_position: Optional[Vector3D] = None
    bodies: List[CelestialBody] = field(default_factory=list)
    active_body_index: Optional[int] = None

    def __post_init__(self):
        if self.vessel_position is not None:
            self.vessel_position = np.asarray(self.vessel_position, dtype=np.float64)

    @property
    def active_body(self) -> Optional[CelestialBody]:
        """The orbited body, or None when it is unset or out of range."""
        if self.active_body_index is None:
            return None
        if not 0 <= self.active_body_index < len(self.bodies):
            logger.warning(f"Active body index {self.active_body_index} out of range "
                           f"({len(self.bodies)} bodies)")
            return None
        return self.bodies[self.active_body_index]

    @property
    def primary_light_body(self) -> Optional[CelestialBody]:
        if not self.bodies:
            return None
        return self.bodies[PRIMARY_LIGHT_BODY_INDEX]

    @property
    def active_body_is_light_source(self) -> bool:
        return self.active_body_index == PRIMARY_LIGHT_BODY_INDEX
