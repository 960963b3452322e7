"""In-memory sample model for CRUSH.

A ``Signal`` owns one ``Channel`` per audio channel. Channels hold their
samples as read-only ``int16`` arrays, so every transformation has to build
a new Signal instead of editing one in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

SAMPLE_DTYPE = np.int16


@dataclass(frozen=True, eq=False)
class Channel:
    """One channel's samples in time order."""

    samples: np.ndarray

    def __post_init__(self) -> None:
        samples = np.array(self.samples, dtype=SAMPLE_DTYPE, copy=True).reshape(-1)
        samples.setflags(write=False)
        object.__setattr__(self, "samples", samples)

    def __len__(self) -> int:
        return len(self.samples)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Channel):
            return NotImplemented
        return np.array_equal(self.samples, other.samples)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Signal:
    """A multi-channel 16-bit signal at a fixed sample rate.

    Attributes:
        channels: One entry per audio channel; index 0 is left (or mono)
        sample_rate: Samples per second per channel

    Raises:
        ValueError: If there are no channels, the channels differ in length,
            or the sample rate is not positive
    """

    channels: tuple[Channel, ...]
    sample_rate: int

    def __post_init__(self) -> None:
        channels = tuple(self.channels)
        if not channels:
            raise ValueError("A signal needs at least one channel")
        lengths = {len(channel) for channel in channels}
        if len(lengths) != 1:
            raise ValueError(f"All channels must have the same length, got {sorted(lengths)}")
        if self.sample_rate < 1:
            raise ValueError(f"Sample rate must be positive, got {self.sample_rate}")
        object.__setattr__(self, "channels", channels)

    @classmethod
    def from_channels(cls, channels: Iterable[Iterable[int] | np.ndarray], sample_rate: int) -> Signal:
        """Build a signal from raw per-channel sample sequences."""
        return cls(tuple(Channel(c if isinstance(c, np.ndarray) else list(c)) for c in channels), sample_rate)

    @property
    def channel_count(self) -> int:
        return len(self.channels)

    @property
    def frame_count(self) -> int:
        """Number of samples in each channel."""
        return len(self.channels[0])

    @property
    def duration_seconds(self) -> float:
        return self.frame_count / self.sample_rate

    def with_channels(self, channels: Iterable[Channel], sample_rate: int | None = None) -> Signal:
        """Return a new signal with ``channels``, keeping this rate unless one is given."""
        return Signal(tuple(channels), self.sample_rate if sample_rate is None else sample_rate)

    def to_frames(self) -> np.ndarray:
        """Return a ``(frames, channels)`` int16 array for soundfile and sounddevice."""
        return np.column_stack([channel.samples for channel in self.channels]).astype(SAMPLE_DTYPE, copy=False)


def deinterleave(interleaved_samples: Iterable[int] | np.ndarray, channel_count: int, sample_rate: int) -> Signal:
    """Split round-robin ordered samples into a Signal.

    Sample ``k`` belongs to channel ``k % channel_count`` at time
    ``k // channel_count``. Samples left over after the last complete frame
    are dropped.

    Args:
        interleaved_samples: Flat sample sequence in channel order
        channel_count: Number of channels in the source (at least 1)
        sample_rate: Sample rate of the source in Hz

    Returns:
        Signal whose channels each hold ``len // channel_count`` samples

    Raises:
        ValueError: If ``channel_count`` is less than 1
    """
    if channel_count < 1:
        raise ValueError(f"Channel count must be at least 1, got {channel_count}")

    if isinstance(interleaved_samples, np.ndarray):
        flat = interleaved_samples.reshape(-1)
    else:
        flat = np.asarray(list(interleaved_samples), dtype=SAMPLE_DTYPE)

    frames = len(flat) // channel_count
    grid = flat[:frames * channel_count].reshape(frames, channel_count)
    return Signal(tuple(Channel(grid[:, i]) for i in range(channel_count)), sample_rate)


def interleave(signal: Signal) -> np.ndarray:
    """Return the samples of ``signal`` as a flat round-robin int16 array."""
    return signal.to_frames().reshape(-1)
