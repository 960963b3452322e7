"""CLI unit test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from an empty directory so no stray crush.yaml is found."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("COLUMNS", "200")
    return tmp_path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """A placeholder input file; decoding is mocked in these tests."""
    path = tmp_path / "input.wav"
    path.write_bytes(b"RIFF")
    return path
