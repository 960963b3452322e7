"""Audio decoding for CRUSH."""

import logging
import subprocess
from pathlib import Path
from typing import NamedTuple

import numpy as np
import soundfile as sf

from crush.audio.ffmpeg import FFmpegCommandBuilder, FFmpegExecutor
from crush.audio.info import AudioInfoRetriever
from crush.exceptions import AudioProcessingError
from crush.output import ConsoleOutputHandler, OutputHandler
from crush.signal.model import SAMPLE_DTYPE, Signal, deinterleave

logger = logging.getLogger(__name__)


class DecodedAudio(NamedTuple):
    """Interleaved 16-bit samples with their layout."""
    samples: np.ndarray
    channels: int
    sample_rate: int


class AudioDecoder:
    """Decode audio files to interleaved 16-bit samples.

    soundfile handles WAV, FLAC, OGG and (with recent libsndfile) MP3.
    Anything it cannot open is decoded by ffmpeg to raw little-endian PCM.
    """

    def __init__(
        self,
        output_handler: OutputHandler | None = None,
        executor: FFmpegExecutor | None = None,
        info_retriever: AudioInfoRetriever | None = None,
    ) -> None:
        """Initialize the decoder.

        Args:
            output_handler: Handler for output messages
            executor: FFmpeg executor for the fallback path
            info_retriever: Used to probe files soundfile cannot open
        """
        self.output_handler = output_handler or ConsoleOutputHandler()
        self.executor = executor or FFmpegExecutor(self.output_handler)
        self.info_retriever = info_retriever or AudioInfoRetriever()

    def decode(self, path: Path) -> DecodedAudio:
        """Decode ``path``.

        Raises:
            AudioProcessingError: If the file is missing, empty, or cannot be decoded
        """
        self._check_file(path)
        try:
            return self._decode_soundfile(path)
        except RuntimeError as e:
            logger.debug("soundfile could not decode %s (%s); trying ffmpeg", path, e)
            try:
                return self._decode_ffmpeg(path)
            except AudioProcessingError as ffmpeg_e:
                raise AudioProcessingError(
                    f"Failed to decode audio file {path} with both soundfile and ffmpeg: "
                    f"soundfile: {e}, ffmpeg: {ffmpeg_e}"
                ) from e

    def load_signal(self, path: Path) -> Signal:
        """Decode ``path`` into a Signal."""
        decoded = self.decode(path)
        return deinterleave(decoded.samples, decoded.channels, decoded.sample_rate)

    def _check_file(self, path: Path) -> None:
        if not path.exists():
            raise AudioProcessingError(f"Audio file does not exist: {path}")
        if not path.is_file():
            raise AudioProcessingError(f"Audio path is not a file: {path}")
        if path.stat().st_size == 0:
            raise AudioProcessingError(f"Audio file is empty: {path}")

    def _decode_soundfile(self, path: Path) -> DecodedAudio:
        data, sample_rate = sf.read(str(path), dtype="int16", always_2d=True)
        logger.debug("Decoded %s with soundfile: %d frames, %d channels", path, data.shape[0], data.shape[1])
        return DecodedAudio(
            samples=data.reshape(-1),
            channels=data.shape[1],
            sample_rate=int(sample_rate),
        )

    def _decode_ffmpeg(self, path: Path) -> DecodedAudio:
        try:
            info = self.info_retriever.get_info_ffprobe(path)
        except (OSError, subprocess.CalledProcessError, ValueError, KeyError, IndexError) as e:
            raise AudioProcessingError(f"ffprobe could not read {path}: {e}") from e

        command = FFmpegCommandBuilder.build_decode_command(path, info.channels, info.samplerate)
        raw = self.executor.execute(command, path)
        usable = len(raw) - len(raw) % np.dtype("<i2").itemsize
        samples = np.frombuffer(raw[:usable], dtype="<i2").astype(SAMPLE_DTYPE)
        logger.debug("Decoded %s with ffmpeg: %d samples, %d channels", path, len(samples), info.channels)
        return DecodedAudio(samples=samples, channels=info.channels, sample_rate=info.samplerate)
