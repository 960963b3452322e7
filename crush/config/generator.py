"""Configuration file generator for CRUSH."""

from pathlib import Path

import yaml

from crush.config.defaults import DEFAULT_SETTINGS
from crush.config.protocols import CURRENT_SCHEMA_VERSION


# Template header with documentation
CONFIG_HEADER = """\
# CRUSH Configuration File
# ========================
#
# Settings used when crushing audio. Command-line flags override these values.
#
# CRUSH SECTION
# -------------
#   sample_rate:   Intermediate sample rate in Hz (1-44100). Lower values
#                  produce more aliasing. Default: 44100
#   bit_depth:     Effective bit depth (1-32). Values of 16 and above leave
#                  the samples untouched. Default: 16
#   interpolation: Resampling strategy - one of:
#                  - nearest: Pick the closest sample (harsher, default)
#                  - linear:  Blend the two neighbouring samples
#
# The crushed signal is always upsampled back to 44100 Hz for output.
#
# Example:
#
#   crush:
#     sample_rate: 8000
#     bit_depth: 4
#     interpolation: nearest

"""


class ConfigGenerator:
    """Generate example YAML configuration files."""

    def __init__(self, settings: dict | None = None) -> None:
        """Initialize the config generator.

        Args:
            settings: Settings to write (uses defaults if None)
        """
        if settings is None:
            settings = dict(DEFAULT_SETTINGS)
        self.settings = settings

    def generate(self, output_path: Path, *, include_header: bool = True) -> None:
        """Generate a YAML configuration file.

        Args:
            output_path: Path where the config file will be written
            include_header: Whether to include documentation header

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        config = {
            'schema_version': CURRENT_SCHEMA_VERSION,
            'crush': self.settings,
        }

        yaml_content = yaml.safe_dump(
            config,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
            width=80,
        )

        with open(output_path, 'w', encoding='utf-8') as f:
            if include_header:
                f.write(CONFIG_HEADER)
            f.write(yaml_content)
