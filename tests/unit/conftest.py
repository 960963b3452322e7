"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight mocks and fast execution.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def settings_data_factory():
    """Factory fixture for creating raw settings dictionaries.

    Example:
        >>> data = settings_data_factory(sample_rate=8000)
        >>> assert data == {"sample_rate": 8000, "bit_depth": 16, "interpolation": "nearest"}
    """
    def _create(
        sample_rate: int = 44100,
        bit_depth: int = 16,
        interpolation: str = "nearest",
    ) -> dict:
        return {"sample_rate": sample_rate, "bit_depth": bit_depth, "interpolation": interpolation}

    return _create


# =============================================================================
# WAV File Creation
# =============================================================================

@pytest.fixture
def create_wav_file(tmp_path: Path):
    """Factory fixture for writing small 16-bit WAV files.

    Returns:
        Callable that writes ``frames`` (shape ``(n, channels)`` or ``(n,)``)
        and returns the file path.
    """
    def _create(
        frames: np.ndarray,
        sample_rate: int = 44100,
        filename: str = "input.wav",
    ) -> Path:
        file_path = tmp_path / filename
        sf.write(str(file_path), np.asarray(frames, dtype=np.int16), sample_rate, subtype="PCM_16")
        return file_path

    return _create
