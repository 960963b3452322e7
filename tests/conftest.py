"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or session-scoped
- Generic enough for reuse across different test categories
- Well-documented with clear purpose
"""

from __future__ import annotations


import numpy as np
import pytest
from pytest_mock import MockerFixture

from crush.signal.model import Signal


# =============================================================================
# Signal Fixtures
# =============================================================================

@pytest.fixture
def sine_signal_factory():
    """Factory fixture for creating sine-wave signals.

    Returns:
        Callable that builds a Signal with one sine per channel
        (440 Hz, 660 Hz, ...) at roughly half of full scale.
    """
    def _create(
        sample_rate: int = 44100,
        duration: float = 0.1,
        channels: int = 1,
        amplitude: float = 0.5,
    ) -> Signal:
        frames = int(sample_rate * duration)
        t = np.arange(frames) / sample_rate
        data = [
            np.rint(amplitude * 32767 * np.sin(2 * np.pi * 220 * (i + 2) * t)).astype(np.int16)
            for i in range(channels)
        ]
        return Signal.from_channels(data, sample_rate)

    return _create


# =============================================================================
# Mock Console Fixtures
# =============================================================================

@pytest.fixture
def mock_console(mocker: MockerFixture):
    """Create a mock Rich Console for output testing.

    Returns:
        Mock object that mimics rich.console.Console interface.
    """
    return mocker.MagicMock(spec_set=["print", "log", "status"])


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for dependency injection.

    This mock implements the OutputHandler protocol with stub methods
    for info, warning, error, and success messages.

    Returns:
        Mock object implementing OutputHandler protocol.
    """
    handler = mocker.MagicMock()
    handler.info = mocker.MagicMock()
    handler.warning = mocker.MagicMock()
    handler.error = mocker.MagicMock()
    handler.success = mocker.MagicMock()
    return handler


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
    config.addinivalue_line("markers", "ffmpeg: Tests involving FFmpeg")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")
