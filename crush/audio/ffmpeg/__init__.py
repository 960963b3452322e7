"""FFmpeg helpers for CRUSH."""
from crush.audio.ffmpeg.commands import FFmpegCommandBuilder
from crush.audio.ffmpeg.executor import FFmpegExecutor

__all__ = [
    "FFmpegCommandBuilder",
    "FFmpegExecutor",
]
