"""YAML configuration source for CRUSH."""

from pathlib import Path
from typing import Any

import yaml

from crush.config.protocols import CURRENT_SCHEMA_VERSION
from crush.exceptions import YAMLConfigError


class YAMLConfigSource:
    """Load configuration from YAML files.

    Implements the ConfigSource protocol for YAML file loading.

    Attributes:
        config_path: Path to the YAML configuration file
    """

    def __init__(self, config_path: Path) -> None:
        """Initialize the YAML config source.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            YAMLConfigError: If the file does not exist
        """
        self._config_path = config_path
        if not config_path.exists():
            raise YAMLConfigError(f"Configuration file not found: {config_path}")
        if not config_path.is_file():
            raise YAMLConfigError(f"Configuration path is not a file: {config_path}")

    @property
    def config_path(self) -> Path:
        return self._config_path

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return f"YAML file: {self._config_path}"

    def load(self) -> tuple[dict[str, Any], int]:
        """Load and parse the YAML configuration file.

        Returns:
            Tuple of (settings_data, schema_version)

        Raises:
            YAMLConfigError: If YAML parsing fails or structure is invalid
        """
        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error_msg = f"Failed to parse YAML configuration: {e}"
            if hasattr(e, 'problem_mark') and e.problem_mark is not None:
                mark = e.problem_mark
                error_msg += f" (line {mark.line + 1}, column {mark.column + 1})"
            raise YAMLConfigError(error_msg) from e

        if data is None:
            raise YAMLConfigError("Configuration file is empty")

        if not isinstance(data, dict):
            raise YAMLConfigError(
                f"Configuration must be a YAML mapping, got {type(data).__name__}"
            )

        return self._extract_config(data)

    def _extract_config(self, data: dict[str, Any]) -> tuple[dict[str, Any], int]:
        """Extract the crush section and schema version from parsed YAML.

        Args:
            data: Parsed YAML data as a dictionary

        Returns:
            Tuple of (settings_data, schema_version)

        Raises:
            YAMLConfigError: If required sections are missing or invalid
        """
        schema_version = data.get('schema_version', 1)
        if not isinstance(schema_version, int):
            raise YAMLConfigError(
                f"'schema_version' must be an integer, got {type(schema_version).__name__}"
            )
        if schema_version > CURRENT_SCHEMA_VERSION:
            raise YAMLConfigError(
                f"Configuration schema version {schema_version} is not supported. "
                f"Maximum supported version is {CURRENT_SCHEMA_VERSION}. "
                "Please update CRUSH."
            )

        settings = data.get('crush')
        if settings is None:
            raise YAMLConfigError("Missing required 'crush' section in configuration")
        if not isinstance(settings, dict):
            raise YAMLConfigError(
                f"'crush' must be a mapping, got {type(settings).__name__}"
            )

        return settings, schema_version
