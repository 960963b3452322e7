"""Audio input and output for CRUSH."""

from crush.audio.decoder import AudioDecoder, DecodedAudio
from crush.audio.encoder import WavEncoder
from crush.audio.playback import PlaybackSink

__all__ = [
    "AudioDecoder",
    "DecodedAudio",
    "WavEncoder",
    "PlaybackSink",
]
