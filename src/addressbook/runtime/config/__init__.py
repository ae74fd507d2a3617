"""Configuration models and YAML loading."""

from .config_data import AppConfig, ConfigData, LoggingConfig, StorageConfig
from .config_template import load_config, load_templated_yaml, substitute_env_vars

__all__ = [
    "AppConfig",
    "ConfigData",
    "LoggingConfig",
    "StorageConfig",
    "load_config",
    "load_templated_yaml",
    "substitute_env_vars",
]
