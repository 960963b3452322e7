"""Settings loader for CRUSH."""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from crush.config.default_source import DefaultConfigSource
from crush.config.models import CrushSettings
from crush.config.protocols import ConfigSource
from crush.config.validators import SettingsValidator
from crush.config.yaml_source import YAMLConfigSource
from crush.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Merge a configuration source with CLI overrides into validated settings.

    Precedence, lowest to highest: built-in defaults, the configuration
    source, then any override that is not ``None``.

    Attributes:
        _source: Where the base settings come from
        _overrides: Raw values supplied on the command line
        _validator: Range validator applied to the merged settings
    """

    def __init__(
            self,
            source: ConfigSource | None = None,
            overrides: dict[str, Any] | None = None,
            *,
            validator: SettingsValidator | None = None,
    ) -> None:
        """Initialize the settings loader.

        Args:
            source: Configuration source (built-in defaults if None)
            overrides: Mapping of setting name to CLI value; None values are ignored
            validator: Custom settings validator (uses default if None)
        """
        self._source = source or DefaultConfigSource()
        self._overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        self._validator = validator or SettingsValidator()

    @classmethod
    def from_yaml(cls, config_path: Path, overrides: dict[str, Any] | None = None) -> "SettingsLoader":
        """Create a loader backed by a YAML configuration file."""
        return cls(YAMLConfigSource(config_path), overrides)

    @property
    def source_description(self) -> str:
        return self._source.source_description

    def load(self) -> CrushSettings:
        """Return validated settings.

        Raises:
            ConfigValidationError: If the merged data cannot be parsed
            SampleRateOutOfRangeError: If the sample rate is out of range
            BitDepthOutOfRangeError: If the bit depth is out of range
        """
        data, _ = self._source.load()
        merged = {**data, **self._overrides}
        logger.debug("Loading settings from %s with overrides %s", self.source_description, self._overrides)

        try:
            settings = CrushSettings(**merged)
        except ValidationError as e:
            raise ConfigValidationError(f"Invalid crush settings: {merged}", errors=e) from e

        self._validator.validate(settings)
        return settings
