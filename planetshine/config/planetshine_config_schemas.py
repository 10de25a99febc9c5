"""
PlanetShine configuration schemas for albedo lighting.
Global tunables and the per-body albedo property table.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class BodyProperties:
    """Albedo material properties of a celestial body. Read-only once built."""
    albedo_color: Tuple[float, ...] = (100.0 / 256.0, 100.0 / 256.0, 100.0 / 256.0)
    albedo_intensity: float = 1.0
    atmosphere_ambient_level: float = 0.3

    def __post_init__(self):
        object.__setattr__(self, 'albedo_color', tuple(float(c) for c in self.albedo_color))


# Used for any body missing from the configuration table
DEFAULT_BODY_PROPERTIES = BodyProperties()


@dataclass
class PlanetShineConfig:
    """
    Complete PlanetShine configuration.

    Fade altitudes are expressed as fractions of the body's effective radius,
    area_spread_angle_max in degrees.
    """
    albedo_lights_quantity: int = 4
    min_albedo_fade_altitude: float = 0.02
    max_albedo_fade_altitude: float = 0.10
    min_ambient_fade_altitude: float = 0.00
    max_ambient_fade_altitude: float = 0.10
    base_ground_ambient: float = 0.60
    base_albedo_intensity: float = 0.15
    area_spread_angle_max: float = 75.0
    area_spread_intensity_multiplicator: float = 0.3
    albedo_range: float = 10.0
    vacuum_light_level: float = 0.02
    debug: bool = False

    # Body name -> albedo properties, in declaration order
    celestial_bodies: Dict[str, BodyProperties] = field(default_factory=dict)

    def get_body_properties(self, body_name: str) -> BodyProperties:
        """Get properties for a body, falling back to DEFAULT_BODY_PROPERTIES."""
        return self.celestial_bodies.get(body_name, DEFAULT_BODY_PROPERTIES)

    def has_body_properties(self, body_name: str) -> bool:
        return body_name in self.celestial_bodies
