"""Exception hierarchy for CRUSH."""
from crush.exceptions.base import ConfigError
from crush.exceptions.config import (
    ConfigValidationError,
    SampleRateOutOfRangeError,
    BitDepthOutOfRangeError,
    NoOutputRequestedError,
    UnsupportedOutputFormatError,
    YAMLConfigError,
)
from crush.exceptions.audio import AudioProcessingError

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "SampleRateOutOfRangeError",
    "BitDepthOutOfRangeError",
    "NoOutputRequestedError",
    "UnsupportedOutputFormatError",
    "YAMLConfigError",
    "AudioProcessingError",
]
