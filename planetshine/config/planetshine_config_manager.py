"""
PlanetShine configuration manager.
Handles loading, validation and path resolution of lighting configurations.
"""

import yaml
import logging
from pathlib import Path
from typing import Union, Any, Dict

# Project Imports
from .planetshine_config_schemas import (
    PlanetShineConfig,
    BodyProperties,
    DEFAULT_BODY_PROPERTIES
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "planetshine_config.yaml"


class PlanetShineConfigManager:
    """
    Configuration manager for PlanetShine lighting settings.
    Handles configuration loading and path resolution.
    """

    def __init__(self, project_root: Path = None):
        """Initialize the configuration manager."""
        if project_root is None:
            self.project_root = Path(__file__).parent.parent.parent
        else:
            self.project_root = Path(project_root)

        self.config_dir = self.project_root / "data" / "config"

    def load_config(self, config_path: Union[str, Path] = DEFAULT_CONFIG_FILE) -> PlanetShineConfig:
        """
        Load PlanetShine configuration from YAML file.

        Args:
            config_path: Path to configuration YAML file. Relative paths are
                resolved against the project's data/config directory.

        Returns:
            PlanetShineConfig: Loaded and validated configuration

        Raises:
            FileNotFoundError: If the configuration file does not exist
            ValueError: If the configuration contains invalid values
        """
        config_path = Path(config_path)

        if not config_path.is_absolute():
            config_path = self.config_dir / config_path

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        logger.info(f"Loading PlanetShine config from: {config_path}")

        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        config = parse_config(config_data)
        validate_config(config)

        logger.info(f"Loaded PlanetShine config with {config.albedo_lights_quantity} albedo lights "
                    f"and {len(config.celestial_bodies)} body definitions")
        return config

    def get_output_directory(self, output_name: str = "lighting_results") -> Path:
        """
        Get the output directory path.
        Creates it under data/results/<output_name>.
        """
        output_dir = self.project_root / "data" / "results" / output_name
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir


def parse_config(config_data: Dict[str, Any]) -> PlanetShineConfig:
    """
    Build a PlanetShineConfig from a parsed YAML mapping.

    Missing options take the schema defaults.
    """
    defaults = PlanetShineConfig()
    lighting = config_data.get('lighting', {}) or {}

    config = PlanetShineConfig(
        albedo_lights_quantity=int(lighting.get('albedo_lights_quantity', defaults.albedo_lights_quantity)),
        min_albedo_fade_altitude=float(lighting.get('min_albedo_fade_altitude', defaults.min_albedo_fade_altitude)),
        max_albedo_fade_altitude=float(lighting.get('max_albedo_fade_altitude', defaults.max_albedo_fade_altitude)),
        min_ambient_fade_altitude=float(lighting.get('min_ambient_fade_altitude', defaults.min_ambient_fade_altitude)),
        max_ambient_fade_altitude=float(lighting.get('max_ambient_fade_altitude', defaults.max_ambient_fade_altitude)),
        base_ground_ambient=float(lighting.get('base_ground_ambient', defaults.base_ground_ambient)),
        base_albedo_intensity=float(lighting.get('base_albedo_intensity', defaults.base_albedo_intensity)),
        area_spread_angle_max=float(lighting.get('area_spread_angle_max', defaults.area_spread_angle_max)),
        area_spread_intensity_multiplicator=float(lighting.get('area_spread_intensity_multiplicator',
                                                               defaults.area_spread_intensity_multiplicator)),
        albedo_range=float(lighting.get('albedo_range', defaults.albedo_range)),
        vacuum_light_level=float(lighting.get('vacuum_light_level', defaults.vacuum_light_level)),
        debug=config_data.get('debug', defaults.debug),
    )

    if 'celestial_bodies' in config_data:
        for body_name, body_data in (config_data['celestial_bodies'] or {}).items():
            body_data = body_data or {}
            config.celestial_bodies[str(body_name)] = BodyProperties(
                albedo_color=tuple(float(c) for c in body_data.get('albedo_color', DEFAULT_BODY_PROPERTIES.albedo_color)),
                albedo_intensity=float(body_data.get('albedo_intensity', DEFAULT_BODY_PROPERTIES.albedo_intensity)),
                atmosphere_ambient_level=float(body_data.get('atmosphere_ambient_level',
                                                             DEFAULT_BODY_PROPERTIES.atmosphere_ambient_level))
            )
            logger.debug(f"  Body '{body_name}': color={config.celestial_bodies[str(body_name)].albedo_color}")

    return config


def validate_config(config: PlanetShineConfig) -> None:
    """
    Validate configuration values.

    Raises:
        ValueError: On the first invalid value found
    """
    if not isinstance(config.debug, bool):
        raise ValueError(f"debug must be true or false, got {config.debug!r}")
    if config.albedo_lights_quantity < 0:
        raise ValueError(f"albedo_lights_quantity must be >= 0, got {config.albedo_lights_quantity}")
    if config.max_albedo_fade_altitude <= config.min_albedo_fade_altitude:
        raise ValueError("max_albedo_fade_altitude must be greater than min_albedo_fade_altitude")
    if config.max_ambient_fade_altitude <= config.min_ambient_fade_altitude:
        raise ValueError("max_ambient_fade_altitude must be greater than min_ambient_fade_altitude")
    if config.albedo_range <= 0.0:
        raise ValueError(f"albedo_range must be positive, got {config.albedo_range}")
    if config.area_spread_angle_max <= 0.0:
        raise ValueError(f"area_spread_angle_max must be positive, got {config.area_spread_angle_max}")
    if config.base_albedo_intensity < 0.0:
        raise ValueError(f"base_albedo_intensity must be >= 0, got {config.base_albedo_intensity}")

    for body_name, props in config.celestial_bodies.items():
        if len(props.albedo_color) != 3:
            raise ValueError(f"Body '{body_name}': albedo_color must have 3 components (RGB)")
        if props.albedo_intensity < 0.0:
            raise ValueError(f"Body '{body_name}': albedo_intensity must be >= 0")
        if not (0.0 <= props.atmosphere_ambient_level <= 1.0):
            raise ValueError(f"Body '{body_name}': atmosphere_ambient_level must be in [0, 1]")
        if any(c < 0.0 or c > 1.0 for c in props.albedo_color):
            logger.warning(f"Body '{body_name}': albedo_color {props.albedo_color} outside [0, 1]")
