"""Configuration loading, schema, and defaults."""

from semcommit.config.loader import ConfigError, load_config
from semcommit.config.schema import ClassifyConfig, OutputConfig, SemcommitConfig

__all__ = [
    "ClassifyConfig",
    "ConfigError",
    "OutputConfig",
    "SemcommitConfig",
    "load_config",
]
