"""Signal model and crush transformations."""

from crush.signal.model import Channel, Signal, deinterleave, interleave
from crush.signal.resampler import lerp, resample
from crush.signal.requantizer import requantize, requantize_sample
from crush.signal.pipeline import process, build_stages, is_noop

__all__ = [
    "Channel",
    "Signal",
    "deinterleave",
    "interleave",
    "lerp",
    "resample",
    "requantize",
    "requantize_sample",
    "process",
    "build_stages",
    "is_noop",
]
