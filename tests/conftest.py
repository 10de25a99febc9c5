"""Shared fixtures for PlanetShine tests."""

import pytest

from planetshine.config.planetshine_config_schemas import PlanetShineConfig, BodyProperties

KERBIN_RADIUS = 600_000.0
LOW_ORBIT_DISTANCE = 700_000.0


@pytest.fixture
def kerbin_properties():
    return BodyProperties(
        albedo_color=[0.38, 0.45, 0.60],
        albedo_intensity=1.0,
        atmosphere_ambient_level=0.5
    )


@pytest.fixture
def config(kerbin_properties):
    """Default tunables with a Kerbin entry in the body table."""
    return PlanetShineConfig(celestial_bodies={"Kerbin": kerbin_properties})


@pytest.fixture
def single_light_config(kerbin_properties):
    return PlanetShineConfig(albedo_lights_quantity=1, celestial_bodies={"Kerbin": kerbin_properties})


@pytest.fixture
def no_light_config(kerbin_properties):
    return PlanetShineConfig(albedo_lights_quantity=0, celestial_bodies={"Kerbin": kerbin_properties})
