"""Crush pipeline: downsample, requantize, upsample.

The stages run in order on a fully materialised Signal:

    Signal @ source rate → resample(target_rate) → requantize(bit_depth)
                         → resample(output_rate) → Signal @ output rate

Upsampling re-interpolates the already crushed samples, so the stair-step
and aliasing artifacts of the low-rate, low-depth signal survive into the
output.
"""

import logging
from typing import Callable, NamedTuple

from tqdm import tqdm

from crush.config.enums import Interpolation
from crush.constants import OUTPUT_SAMPLE_RATE, SAMPLE_BITS
from crush.signal.model import Signal
from crush.signal.requantizer import requantize
from crush.signal.resampler import resample

logger = logging.getLogger(__name__)


class Stage(NamedTuple):
    """A named signal transformation."""
    name: str
    apply: Callable[[Signal], Signal]


def build_stages(
        target_rate: int,
        bit_depth: int,
        interpolation: Interpolation = Interpolation.NEAREST,
        output_rate: int = OUTPUT_SAMPLE_RATE,
) -> list[Stage]:
    """Return the three crush stages in the order they run."""
    return [
        Stage(f"Downsample to {target_rate} Hz",
              lambda signal: resample(signal, target_rate, interpolation)),
        Stage(f"Requantize to {bit_depth} bits",
              lambda signal: requantize(signal, bit_depth)),
        Stage(f"Upsample to {output_rate} Hz",
              lambda signal: resample(signal, output_rate, interpolation)),
    ]


def process(
        signal: Signal,
        target_rate: int,
        bit_depth: int,
        interpolation: Interpolation = Interpolation.NEAREST,
        output_rate: int = OUTPUT_SAMPLE_RATE,
        *,
        show_progress: bool = False,
) -> Signal:
    """Crush ``signal`` and return the result at ``output_rate``.

    Args:
        signal: Decoded input signal
        target_rate: Intermediate sample rate in Hz
        bit_depth: Effective bit depth of the intermediate signal
        interpolation: Interpolation used by both resampling stages
        output_rate: Sample rate of the returned signal
        show_progress: Display a progress bar over the stages

    Returns:
        A new Signal; ``signal`` is left untouched
    """
    stages = build_stages(target_rate, bit_depth, interpolation, output_rate)
    for stage in tqdm(stages, desc="Crushing", unit="stage", disable=not show_progress):
        logger.debug("Stage: %s", stage.name)
        signal = stage.apply(signal)
    return signal


def is_noop(bit_depth: int, sample_rate: int, output_rate: int = OUTPUT_SAMPLE_RATE) -> bool:
    """Whether the settings leave the signal effectively untouched."""
    return bit_depth >= SAMPLE_BITS and sample_rate == output_rate
