"""Configuration models and loaders."""

from .config_data import AppConfig, ConfigData, LoggingConfig
from .config_template import load_templated_yaml, substitute_env_vars

__all__ = [
    "AppConfig",
    "ConfigData",
    "LoggingConfig",
    "load_templated_yaml",
    "substitute_env_vars",
]
