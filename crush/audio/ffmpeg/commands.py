"""FFmpeg command builders for CRUSH."""

from pathlib import Path
from typing import List

from crush.constants import SAMPLE_BITS


class FFmpegCommandBuilder:
    """Build FFmpeg/FFprobe commands for decoding audio soundfile cannot read."""

    @staticmethod
    def build_probe_command(input_path: Path) -> List[str]:
        """Build FFprobe command that reports stream information as JSON.

        Args:
            input_path: Audio file to inspect

        Returns:
            FFprobe command as list of strings
        """
        return [
            'ffprobe', '-v', 'quiet', '-print_format', 'json',
            '-show_format', '-show_streams', '-select_streams', 'a:0', str(input_path)
        ]

    @staticmethod
    def build_decode_command(input_path: Path, channels: int, sample_rate: int) -> List[str]:
        """Build FFmpeg command that decodes the first audio stream to raw PCM on stdout.

        Args:
            input_path: Audio file to decode
            channels: Channel count to decode to
            sample_rate: Sample rate to decode at

        Returns:
            FFmpeg command as list of strings
        """
        codec = f'pcm_s{SAMPLE_BITS}le'
        return [
            'ffmpeg', '-v', 'error', '-nostdin', '-i', str(input_path),
            '-map', '0:a:0',
            '-f', f's{SAMPLE_BITS}le', '-acodec', codec,
            '-ac', str(channels), '-ar', str(sample_rate),
            'pipe:1',
        ]
