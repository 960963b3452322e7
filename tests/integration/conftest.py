"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf
from typer.testing import CliRunner


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with a wide console."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("COLUMNS", "200")
    return tmp_path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def wav_factory(tmp_path: Path):
    """Write a sine-wave WAV file with one frequency per channel.

    Returns:
        Callable ``(sample_rate, frames, channels, name)`` returning the path.
    """
    audio_dir = tmp_path / "audio"
    audio_dir.mkdir(exist_ok=True)

    def _create(
        sample_rate: int = 44100,
        frames: int = 4410,
        channels: int = 2,
        name: str = "input.wav",
    ) -> Path:
        t = np.arange(frames) / sample_rate
        data = np.column_stack([
            np.rint(0.6 * 32767 * np.sin(2 * np.pi * 220 * (i + 1) * t)) for i in range(channels)
        ]).astype(np.int16)
        path = audio_dir / name
        sf.write(str(path), data, sample_rate, subtype="PCM_16")
        return path

    return _create

