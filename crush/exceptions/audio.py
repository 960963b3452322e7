"""Audio processing exceptions for CRUSH."""

from crush.exceptions.base import ConfigError


class AudioProcessingError(ConfigError):
    """Raised when audio file operations fail.

    This exception is raised for issues such as:
    - Missing, empty or undecodable input files
    - FFmpeg/FFprobe failures during the decode fallback
    - File system errors while writing the output WAV
    - An unavailable audio output device during playback
    """
