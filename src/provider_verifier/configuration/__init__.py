"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import GENERATE_DIFF_KEY, Configuration, VerifierSettings
from .value_resolvers import (
    ValueResolver,
    chain_value_resolvers,
    environment_value_resolver,
    environment_variable_name,
    mapping_value_resolver,
    settings_value_resolver,
)

__all__ = [
    "Configuration",
    "VerifierSettings",
    "GENERATE_DIFF_KEY",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
    "ValueResolver",
    "environment_value_resolver",
    "environment_variable_name",
    "mapping_value_resolver",
    "settings_value_resolver",
    "chain_value_resolvers",
]
