"""JSON configuration files: schema, loading and adaptation."""

from casework.application.config.adapter import (
    config_to_request,
    resolve_formats,
)
from casework.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from casework.application.config.schema import (
    SUPPORTED_VERSIONS,
    CabinetConfig,
    ConstructionConfig,
    MaterialConfig,
    OutputConfig,
    ProjectConfiguration,
)

__all__ = [
    "CabinetConfig",
    "ConfigError",
    "ConstructionConfig",
    "MaterialConfig",
    "OutputConfig",
    "ProjectConfiguration",
    "SUPPORTED_VERSIONS",
    "config_to_request",
    "load_config",
    "load_config_from_dict",
    "resolve_formats",
]
