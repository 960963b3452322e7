"""Validation utilities for CRUSH settings."""

from pathlib import Path

from crush.config.models import CrushSettings
from crush.constants import MAX_BIT_DEPTH, MAX_SAMPLE_RATE, MIN_BIT_DEPTH, MIN_SAMPLE_RATE
from crush.exceptions import BitDepthOutOfRangeError, NoOutputRequestedError, SampleRateOutOfRangeError


class SettingsValidator:
    """Validates sample rate and bit depth against the supported ranges."""

    def validate(self, settings: CrushSettings) -> None:
        """Raise if any setting is out of range."""
        if not MIN_SAMPLE_RATE <= settings.sample_rate <= MAX_SAMPLE_RATE:
            raise SampleRateOutOfRangeError(settings.sample_rate)
        if not MIN_BIT_DEPTH <= settings.bit_depth <= MAX_BIT_DEPTH:
            raise BitDepthOutOfRangeError(settings.bit_depth)


class OutputValidator:
    """Validates that the run has somewhere to send its result."""

    def validate(self, output: Path | None, play: bool) -> None:
        """Ensure an output file or playback was requested."""
        if output is None and not play:
            raise NoOutputRequestedError()
