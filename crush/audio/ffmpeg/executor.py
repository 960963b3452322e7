"""FFmpeg execution wrapper for CRUSH."""

import subprocess
from pathlib import Path
from typing import List

from crush.exceptions import AudioProcessingError
from crush.output import OutputHandler


class FFmpegExecutor:
    """Execute FFmpeg commands with error handling and logging."""

    def __init__(self, output_handler: OutputHandler) -> None:
        """Initialize the FFmpeg executor.

        Args:
            output_handler: Handler for output messages
        """
        self.output_handler = output_handler

    def execute(self, command: List[str], input_path: Path) -> bytes:
        """Execute an FFmpeg command and return its standard output.

        Args:
            command: FFmpeg command as list of strings
            input_path: Input file path (for error messages)

        Returns:
            Raw bytes written by the command to stdout

        Raises:
            AudioProcessingError: If FFmpeg is missing or execution fails
        """
        try:
            result = subprocess.run(command, check=True, capture_output=True)
        except FileNotFoundError as e:
            self.output_handler.error(f"{command[0]} is not installed or not on PATH")
            raise AudioProcessingError(f"{command[0]} executable not found") from e
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.decode(errors="replace") if e.stderr else str(e)
            self.output_handler.error(f"FFmpeg failed for file {input_path}: {error_msg}")
            raise AudioProcessingError(f"FFmpeg command failed: {error_msg}") from e
        return result.stdout
