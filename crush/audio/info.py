"""Audio information retrieval for CRUSH."""

import json
import subprocess
from pathlib import Path
from typing import NamedTuple

from crush.audio.ffmpeg.commands import FFmpegCommandBuilder


class AudioInfo(NamedTuple):
    """Stream layout reported by ffprobe."""
    samplerate: int
    channels: int


class AudioInfoRetriever:
    """Retrieve the stream layout of files soundfile cannot open."""

    def get_info_ffprobe(self, path: Path) -> AudioInfo:
        """Get the sample rate and channel count of the first audio stream.

        Raises:
            OSError: If ffprobe is not installed
            subprocess.CalledProcessError: If ffprobe rejects the file
            ValueError, KeyError, IndexError: If the report has no usable audio stream
        """
        cmd = FFmpegCommandBuilder.build_probe_command(path)
        result = subprocess.run(cmd, capture_output=True, text=True, check=True)
        data = json.loads(result.stdout)
        stream = data['streams'][0]

        return AudioInfo(
            samplerate=int(stream['sample_rate']),
            channels=int(stream['channels']),
        )
