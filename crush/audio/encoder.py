"""WAV output for CRUSH."""

import logging
from pathlib import Path

import soundfile as sf

from crush.constants import SUPPORTED_OUTPUT_EXTENSIONS
from crush.exceptions import AudioProcessingError, UnsupportedOutputFormatError
from crush.signal.model import Signal

logger = logging.getLogger(__name__)


def output_extension(path: Path) -> str:
    """Return the lower-cased extension of ``path`` without the leading dot."""
    return path.suffix.lstrip(".").lower()


class WavEncoder:
    """Write signals as 16-bit PCM WAV files."""

    @property
    def soundfile_subtype(self) -> str:
        return "PCM_16"

    @staticmethod
    def check_path(path: Path) -> None:
        """Raise if ``path`` does not name a supported output format."""
        extension = output_extension(path)
        if extension not in SUPPORTED_OUTPUT_EXTENSIONS:
            raise UnsupportedOutputFormatError(extension)

    def write(self, signal: Signal, path: Path) -> None:
        """Write ``signal`` to ``path`` with its channel count and sample rate.

        Raises:
            UnsupportedOutputFormatError: If the extension is not .wav
            AudioProcessingError: If the file cannot be written
        """
        self.check_path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            sf.write(
                str(path),
                signal.to_frames(),
                signal.sample_rate,
                subtype=self.soundfile_subtype,
                format="WAV",
            )
        except (RuntimeError, OSError) as e:
            raise AudioProcessingError(f"Failed to write {path}: {e}") from e
        logger.debug("Wrote %d frames to %s", signal.frame_count, path)
