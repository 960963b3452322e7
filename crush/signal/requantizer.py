"""Bit depth reduction for CRUSH.

Samples keep their 16-bit container; only the low-order bits are replaced.
The discarded bits are filled with ones for non-negative samples and zeros
for negative ones, so the staircase is symmetric around zero.
"""

import logging

import numpy as np

from crush.constants import SAMPLE_BITS
from crush.signal.model import SAMPLE_DTYPE, Channel, Signal

logger = logging.getLogger(__name__)

SIGN_BIT = 1 << (SAMPLE_BITS - 1)


def _masks(bit_depth: int) -> tuple[int, int]:
    """Return ``(hi_mask, lo_mask)`` as signed 16-bit values."""
    hi_mask = -1 << (SAMPLE_BITS - bit_depth)
    return hi_mask, ~hi_mask


def _check_depth(bit_depth: int) -> None:
    if bit_depth < 1:
        raise ValueError(f"Bit depth must be at least 1, got {bit_depth}")


def requantize_sample(sample: int, bit_depth: int) -> int:
    """Reduce one 16-bit sample to ``bit_depth`` significant bits."""
    _check_depth(bit_depth)
    sample = int(sample)
    if bit_depth >= SAMPLE_BITS:
        return sample

    hi_mask, lo_mask = _masks(bit_depth)
    fill = 0 if sample & SIGN_BIT else ~0
    return (sample & hi_mask) | (fill & lo_mask)


def requantize(signal: Signal, bit_depth: int) -> Signal:
    """Apply ``requantize_sample`` to every sample of ``signal``.

    Depths of 16 or more return ``signal`` itself.
    """
    _check_depth(bit_depth)
    if bit_depth >= SAMPLE_BITS:
        return signal

    hi_mask, lo_mask = _masks(bit_depth)
    hi = SAMPLE_DTYPE(hi_mask)
    lo = SAMPLE_DTYPE(lo_mask)
    zero = SAMPLE_DTYPE(0)
    logger.debug("Requantizing %d channel(s) to %d bits", signal.channel_count, bit_depth)

    channels = []
    for channel in signal.channels:
        samples = channel.samples
        fill = np.where(samples < 0, zero, lo).astype(SAMPLE_DTYPE)
        channels.append(Channel((samples & hi) | fill))
    return signal.with_channels(channels)
