"""Configuration-related exceptions for CRUSH."""

from pydantic import ValidationError

from crush.constants import MAX_BIT_DEPTH, MAX_SAMPLE_RATE, MIN_BIT_DEPTH, MIN_SAMPLE_RATE
from crush.exceptions.base import ConfigError


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for user data.

    This exception is raised when user-provided settings fail validation due
    to incorrect data types or constraint violations defined in the Pydantic
    models.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class SampleRateOutOfRangeError(ConfigError):
    """Raised when the requested sample rate is outside the supported range."""

    def __init__(self, rate: int) -> None:
        super().__init__(
            f"Sample rate must be between {MIN_SAMPLE_RATE} and {MAX_SAMPLE_RATE} Hz inclusive, got {rate}."
        )
        self.rate = rate


class BitDepthOutOfRangeError(ConfigError):
    """Raised when the requested bit depth is outside the supported range."""

    def __init__(self, depth: int) -> None:
        super().__init__(
            f"Bit depth must be between {MIN_BIT_DEPTH} and {MAX_BIT_DEPTH} bits inclusive, got {depth}."
        )
        self.depth = depth


class NoOutputRequestedError(ConfigError):
    """Raised when neither an output file nor playback was requested."""

    def __init__(self) -> None:
        super().__init__("Either --output or --play must be specified.")


class UnsupportedOutputFormatError(ConfigError):
    """Raised when the output path has an extension other than WAV."""

    def __init__(self, extension: str) -> None:
        shown = extension or "(none)"
        super().__init__(f"Unsupported output format {shown}; supported formats: wav.")
        self.extension = extension


class YAMLConfigError(ConfigValidationError):
    """Exception raised for YAML configuration file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (missing or malformed 'crush' section)
    - Unsupported schema version
    """
    pass
