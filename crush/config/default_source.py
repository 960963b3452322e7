"""Default configuration source for CRUSH."""

from typing import Any

from crush.config.defaults import DEFAULT_SETTINGS
from crush.config.protocols import CURRENT_SCHEMA_VERSION


class DefaultConfigSource:
    """Provide built-in default configuration.

    Implements the ConfigSource protocol using the Python defaults
    defined in crush/config/defaults.py.
    """

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return "built-in defaults"

    def load(self) -> tuple[dict[str, Any], int]:
        """Load the built-in default configuration.

        Returns:
            Tuple of (settings_data, schema_version)
        """
        return dict(DEFAULT_SETTINGS), CURRENT_SCHEMA_VERSION
