"""Pydantic models for CRUSH configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crush.config.enums import Interpolation
from crush.constants import DEFAULT_BIT_DEPTH, DEFAULT_SAMPLE_RATE


class CrushSettings(BaseModel):
    """Effective settings for one crush run.

    Range checks live in ``SettingsValidator`` so that out-of-range values
    surface as the dedicated exceptions rather than generic validation errors.
    """

    model_config = ConfigDict(frozen=True)

    sample_rate: int = Field(DEFAULT_SAMPLE_RATE, description="Intermediate (crushed) sample rate in Hz")
    bit_depth: int = Field(DEFAULT_BIT_DEPTH, description="Effective bit depth of the crushed signal")
    interpolation: Interpolation = Interpolation.NEAREST

    @field_validator("interpolation", mode="before")
    @classmethod
    def validate_interpolation(cls, value) -> Interpolation:
        if isinstance(value, str):
            try:
                return Interpolation(value.strip().lower())
            except ValueError:
                raise ValueError(f"Invalid interpolation: {value}")
        return value
