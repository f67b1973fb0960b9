"""Configuration package for sampledsignals."""

from sampledsignals.config.models import ResampleOptions, StreamSettings
from sampledsignals.config.protocols import ConfigSource, CURRENT_SCHEMA_VERSION
from sampledsignals.config.default_source import DefaultConfigSource
from sampledsignals.config.yaml_source import YAMLConfigSource
from sampledsignals.config.resolver import ConfigResolver
from sampledsignals.config.loader import SettingsLoader
from sampledsignals.config.generator import ConfigGenerator

__all__ = [
    "ResampleOptions",
    "StreamSettings",
    "ConfigSource",
    "CURRENT_SCHEMA_VERSION",
    "DefaultConfigSource",
    "YAMLConfigSource",
    "ConfigResolver",
    "SettingsLoader",
    "ConfigGenerator",
]
