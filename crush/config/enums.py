"""Configuration enums for CRUSH."""

from enum import Enum


class Interpolation(str, Enum):
    """Strategies for estimating an amplitude between two samples."""

    NEAREST = "nearest"
    LINEAR = "linear"

    def __str__(self) -> str:
        return self.value
