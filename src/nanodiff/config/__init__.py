"""Configuration loading, schema, and defaults."""

from nanodiff.config.loader import ConfigError, load_config
from nanodiff.config.schema import NanodiffConfig

__all__ = [
    "ConfigError",
    "NanodiffConfig",
    "load_config",
]
