"""Unit tests for the requantizer."""

from __future__ import annotations

import numpy as np
import pytest

from crush.signal.model import Signal
from crush.signal.requantizer import requantize, requantize_sample

FULL_RANGE = np.arange(-32768, 32768, dtype=np.int32)


class TestRequantizeSample:
    """Tests for requantize_sample."""

    @pytest.mark.parametrize("sample,bit_depth,expected", [
        (-1, 1, -32768),
        (0, 1, 32767),
        (10, 8, 255),
        (256, 8, 511),
        (1, 4, 4095),
        (-255, 8, -256),
        (-256, 8, -256),
        (32767, 1, 32767),
        (-32768, 1, -32768),
        (12345, 16, 12345),
    ])
    def test_known_values(self, sample: int, bit_depth: int, expected: int) -> None:
        assert requantize_sample(sample, bit_depth) == expected

    def test_positive_fills_low_bits_with_ones(self) -> None:
        """Test that non-negative samples round towards the top of their step."""
        result = requantize_sample(0b0000_0001_0000_0000, 8)

        assert result & 0xFF == 0xFF

    def test_negative_fills_low_bits_with_zeros(self) -> None:
        """Test that negative samples round towards the bottom of their step."""
        result = requantize_sample(-300, 8)

        assert result & 0xFF == 0
        assert result <= -300

    @pytest.mark.parametrize("bit_depth", [17, 24, 32])
    def test_depths_above_sixteen_are_identity(self, bit_depth: int) -> None:
        assert requantize_sample(-1234, bit_depth) == -1234

    @pytest.mark.parametrize("bit_depth", [0, -3])
    def test_rejects_depth_below_one(self, bit_depth: int) -> None:
        with pytest.raises(ValueError, match="Bit depth"):
            requantize_sample(1, bit_depth)

    def test_accepts_numpy_scalars(self) -> None:
        assert requantize_sample(np.int16(-1), 1) == -32768


class TestRequantize:
    """Tests for requantize over whole signals."""

    @pytest.fixture
    def full_range_signal(self) -> Signal:
        """A mono signal holding every 16-bit value once."""
        return Signal.from_channels([FULL_RANGE], 44100)

    def test_sixteen_bits_is_identity(self, sine_signal_factory) -> None:
        signal = sine_signal_factory(channels=2)

        result = requantize(signal, 16)

        assert result == signal

    @pytest.mark.parametrize("bit_depth", range(1, 17))
    def test_idempotent(self, full_range_signal: Signal, bit_depth: int) -> None:
        once = requantize(full_range_signal, bit_depth)

        assert requantize(once, bit_depth) == once

    @pytest.mark.parametrize("bit_depth", range(1, 17))
    def test_error_is_less_than_one_step(self, full_range_signal: Signal, bit_depth: int) -> None:
        """Test that no sample moves by a full quantization step or more."""
        result = requantize(full_range_signal, bit_depth)

        error = np.abs(result.channels[0].samples.astype(np.int32) - FULL_RANGE)
        assert error.max() < 2 ** (16 - bit_depth)

    @pytest.mark.parametrize("bit_depth", [1, 3, 8, 12, 15])
    def test_matches_scalar_rule(self, full_range_signal: Signal, bit_depth: int) -> None:
        """Test that the vectorised path agrees with requantize_sample."""
        result = requantize(full_range_signal, bit_depth)

        picks = np.arange(0, len(FULL_RANGE), 509)
        expected = [requantize_sample(int(FULL_RANGE[i]), bit_depth) for i in picks]
        np.testing.assert_array_equal(result.channels[0].samples[picks], expected)

    @pytest.mark.parametrize("bit_depth", [1, 4, 8])
    def test_step_count(self, full_range_signal: Signal, bit_depth: int) -> None:
        """Test that only 2**bit_depth distinct values remain."""
        result = requantize(full_range_signal, bit_depth)

        assert len(np.unique(result.channels[0].samples)) == 2 ** bit_depth

    def test_preserves_rate_and_layout(self, sine_signal_factory) -> None:
        signal = sine_signal_factory(sample_rate=8000, channels=3)

        result = requantize(signal, 4)

        assert result.sample_rate == 8000
        assert result.channel_count == 3
        assert result.frame_count == signal.frame_count
        assert result.channels[0].samples.dtype == np.int16

    def test_input_is_not_modified(self, sine_signal_factory) -> None:
        signal = sine_signal_factory()
        before = signal.to_frames().copy()

        requantize(signal, 2)

        np.testing.assert_array_equal(signal.to_frames(), before)

    def test_empty_signal(self) -> None:
        signal = Signal.from_channels([[]], 44100)

        assert requantize(signal, 4).frame_count == 0

    def test_rejects_depth_below_one(self) -> None:
        with pytest.raises(ValueError):
            requantize(Signal.from_channels([[1]], 44100), 0)
