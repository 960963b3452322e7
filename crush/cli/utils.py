"""CLI utility functions for CRUSH."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from crush.config import ConfigResolver, Interpolation, SettingsLoader
from crush.exceptions import YAMLConfigError


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _build_overrides(
    sample_rate: Optional[int],
    bit_depth: Optional[int],
    interpolation: Optional[Interpolation],
) -> dict[str, Any]:
    """Collect the settings given on the command line; unset flags stay None."""

    return {
        "sample_rate": sample_rate,
        "bit_depth": bit_depth,
        "interpolation": interpolation,
    }


def _create_loader(config: Optional[Path], overrides: dict[str, Any]) -> SettingsLoader:
    """Create a settings loader for the resolved config file, or the defaults if none is found."""

    try:
        config_path = ConfigResolver(_sanitize_path(config) if config else None).resolve()
    except FileNotFoundError as e:
        raise YAMLConfigError(str(e)) from e

    if config_path is None:
        return SettingsLoader(overrides=overrides)
    return SettingsLoader.from_yaml(config_path, overrides)
