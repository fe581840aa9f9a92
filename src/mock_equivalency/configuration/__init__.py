"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, settings_to_configure
from .runtime_settings import Configuration, EquivalencySettings

__all__ = [
    "Configuration",
    "EquivalencySettings",
    "ConfigurationError",
    "load_configuration",
    "settings_to_configure",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
