"""Sample rate conversion for CRUSH.

Resampling evaluates each channel at fractional positions of the original
signal using either nearest-neighbour or linear interpolation. No
anti-aliasing filter is applied; the aliasing is part of the effect.
"""

import logging
import math
from typing import Sequence

import numpy as np

from crush.config.enums import Interpolation
from crush.constants import INT16_MAX, INT16_MIN
from crush.signal.model import SAMPLE_DTYPE, Channel, Signal

logger = logging.getLogger(__name__)


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer, with halves rounded away from zero."""
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def resampled_length(frame_count: int, source_rate: int, target_rate: int) -> int:
    """Number of samples a channel of ``frame_count`` samples has after resampling."""
    return int(math.floor(frame_count * (target_rate / source_rate) + 0.5))


def lerp(values: Sequence[float] | np.ndarray, f: float, interpolation: Interpolation) -> float:
    """Look up ``values`` at the fractional index ``f``.

    Args:
        values: Non-empty sample sequence
        f: Position to evaluate, ``0 <= f < len(values)``
        interpolation: How to estimate between the two neighbouring samples;
            the plain string values are accepted too

    Returns:
        The interpolated amplitude as a float
    """
    assert len(values) > 0, "Cannot interpolate an empty sequence"
    assert 0.0 <= f < len(values), f"Lerp index {f} out of range: 0..{len(values)}"
    interpolation = Interpolation(interpolation)

    x = int(math.floor(f))
    y = min(x + 1, len(values) - 1)
    a = f - x

    if interpolation is Interpolation.NEAREST:
        return float(values[x]) if a < 0.5 else float(values[y])

    xv = float(values[x])
    yv = float(values[y])
    return (1.0 - a) * xv + a * yv


def _source_positions(frame_count: int, new_count: int, ratio: float) -> np.ndarray:
    """Fractional positions in the source for each output index."""
    positions = np.arange(new_count, dtype=np.float64) / ratio
    assert new_count == 0 or positions[-1] < frame_count, "Resampling would read past the last sample"
    return positions


def _resample_channel(
        samples: np.ndarray,
        x: np.ndarray,
        y: np.ndarray,
        a: np.ndarray,
        interpolation: Interpolation,
) -> np.ndarray:
    """Vectorised ``lerp`` over every output position of one channel."""
    values = samples.astype(np.float64)
    if interpolation is Interpolation.NEAREST:
        estimated = np.where(a < 0.5, values[x], values[y])
    else:
        estimated = (1.0 - a) * values[x] + a * values[y]
    rounded = np.clip(round_half_away(estimated), INT16_MIN, INT16_MAX)
    return rounded.astype(SAMPLE_DTYPE)


def resample(signal: Signal, target_rate: int, interpolation: Interpolation = Interpolation.NEAREST) -> Signal:
    """Convert ``signal`` to ``target_rate``.

    Every channel is looked up in the original signal at position
    ``i * source_rate / target_rate`` for each new index ``i``.

    Args:
        signal: Signal to convert
        target_rate: Desired sample rate in Hz
        interpolation: Interpolation used between source samples

    Returns:
        A new Signal at ``target_rate`` with the same channel count

    Raises:
        ValueError: If ``target_rate`` is not positive or ``interpolation`` is unknown
    """
    if target_rate < 1:
        raise ValueError(f"Target sample rate must be positive, got {target_rate}")
    interpolation = Interpolation(interpolation)

    frame_count = signal.frame_count
    if frame_count == 0:
        return signal.with_channels(signal.channels, sample_rate=target_rate)

    ratio = target_rate / signal.sample_rate
    new_count = resampled_length(frame_count, signal.sample_rate, target_rate)
    logger.debug(
        "Resampling %d frames from %d Hz to %d Hz (%d frames, %s)",
        frame_count, signal.sample_rate, target_rate, new_count, interpolation.value,
    )

    positions = _source_positions(frame_count, new_count, ratio)
    x = np.floor(positions).astype(np.intp)
    y = np.minimum(x + 1, frame_count - 1)
    a = positions - x

    channels = tuple(
        Channel(_resample_channel(channel.samples, x, y, a, interpolation))
        for channel in signal.channels
    )
    return Signal(channels, target_rate)
