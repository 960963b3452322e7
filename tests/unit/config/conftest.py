"""Shared fixtures for configuration tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory fixture that writes YAML text to a config file.

    Returns:
        Callable taking YAML content (and optional filename) and returning the path.
    """
    def _write(content: str, filename: str = "crush.yaml") -> Path:
        config_path = tmp_path / filename
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return _write
