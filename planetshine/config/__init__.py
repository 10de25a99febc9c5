# Configuration schemas and YAML loading

from .planetshine_config_schemas import (
    PlanetShineConfig,
    BodyProperties,
    DEFAULT_BODY_PROPERTIES,
)

from .planetshine_config_manager import (
    PlanetShineConfigManager,
    parse_config,
    validate_config,
)

__all__ = [
    'PlanetShineConfig',
    'BodyProperties',
    'DEFAULT_BODY_PROPERTIES',
    'PlanetShineConfigManager',
    'parse_config',
    'validate_config',
]
