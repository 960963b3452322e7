"""Configuration package for CRUSH."""

# Re-export enums
from crush.config.enums import Interpolation

# Re-export models
from crush.config.models import CrushSettings

# Re-export validators
from crush.config.validators import SettingsValidator, OutputValidator

# Re-export sources and loader
from crush.config.default_source import DefaultConfigSource
from crush.config.yaml_source import YAMLConfigSource
from crush.config.resolver import ConfigResolver
from crush.config.loader import SettingsLoader
from crush.config.generator import ConfigGenerator

# Re-export defaults
from crush.config.defaults import DEFAULT_SETTINGS

__all__ = [
    # Enums
    "Interpolation",
    # Models
    "CrushSettings",
    # Validators
    "SettingsValidator",
    "OutputValidator",
    # Sources and loader
    "DefaultConfigSource",
    "YAMLConfigSource",
    "ConfigResolver",
    "SettingsLoader",
    "ConfigGenerator",
    # Defaults
    "DEFAULT_SETTINGS",
]
