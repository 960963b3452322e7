"""Audio playback for CRUSH."""

import logging
from types import ModuleType

from crush.exceptions import AudioProcessingError
from crush.signal.model import Signal

logger = logging.getLogger(__name__)


def _load_backend() -> ModuleType:
    """Import sounddevice; PortAudio is only needed when playing."""
    import sounddevice
    return sounddevice


class PlaybackSink:
    """Play signals on the default output device.

    ``start`` returns immediately so the output file can be written while
    the audio plays; ``wait`` blocks until playback has finished.
    """

    def __init__(self) -> None:
        self._sd: ModuleType | None = None
        self._playing = False

    def _backend(self) -> ModuleType:
        if self._sd is None:
            try:
                self._sd = _load_backend()
            except OSError as e:
                raise AudioProcessingError(f"Audio playback is unavailable: {e}") from e
        return self._sd

    def start(self, signal: Signal) -> None:
        """Begin playing ``signal``."""
        sd = self._backend()
        logger.debug("Playing %d frames at %d Hz", signal.frame_count, signal.sample_rate)
        try:
            sd.play(signal.to_frames(), samplerate=signal.sample_rate)
        except sd.PortAudioError as e:
            raise AudioProcessingError(f"Playback failed: {e}") from e
        self._playing = True

    def wait(self) -> None:
        """Block until the current playback finishes."""
        if not self._playing:
            return
        sd = self._backend()
        try:
            sd.wait()
        except sd.PortAudioError as e:
            raise AudioProcessingError(f"Playback failed: {e}") from e
        finally:
            self._playing = False
