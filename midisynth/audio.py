"""Ring-buffered audio generation shared between a producer and an output callback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

import numpy as np

from midisynth.logger import LogLevel, get_logger

__all__ = [
    "MAX_LATENCY",
    "AudioInfos",
    "AudioConfigError",
    "AudioSource",
    "Instrument",
    "Audio",
]

MAX_LATENCY = 30


@dataclass(frozen=True)
class AudioInfos:
    """Stream properties handed to every sound source."""

    sample_rate: int
    channels: int


class AudioConfigError(ValueError):
    """Raised when an audio setting is out of range."""


class AudioSource(Protocol):
    def process(self, audio_infos: AudioInfos, key_pressed: Any) -> float:
        ...


@dataclass
class Instrument:
    """A sound source tree rooted at a master component, scaled by a volume."""

    master: AudioSource
    volume: float = 1.0

    def process(self, audio_infos: AudioInfos, key_pressed: Any) -> float:
        """Return the next sample of this instrument."""
        return self.master.process(audio_infos, key_pressed) * self.volume


class Audio:
    """A circular sample buffer with a write cursor ahead of the read cursors.

    The producer calls update() once per frame; the output side calls
    fill_output() to consume samples. The gap between the cursors is kept
    close to the configured latency.
    """

    def __init__(
        self,
        sample_rate: int = 44100,
        channels: int = 2,
        buffer_duration: int = 1,
        latency: int = 3,
        target_fps: int = 60,
    ) -> None:
        for name, value in (
            ("sample_rate", sample_rate),
            ("channels", channels),
            ("buffer_duration", buffer_duration),
            ("target_fps", target_fps),
        ):
            if value < 1:
                raise AudioConfigError(f"{name} must be positive, got {value}")
        self._sample_rate = sample_rate
        self._channels = channels
        self._buffer_duration = buffer_duration
        self._latency = latency
        self._target_fps = target_fps
        self.mute = False
        self.time = 0.0
        self._sync_cursors = False
        self._samples_to_adjust = 0
        self._init_buffer()

    def _init_buffer(self) -> None:
        self._buffer = np.zeros(self.buffer_size, dtype=np.float32)
        self._left_phase = 0
        self._right_phase = 1
        self._write_cursor = (self._left_phase + self.latency_in_samples()) % self.buffer_size

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def channels(self) -> int:
        return self._channels

    @property
    def latency(self) -> int:
        return self._latency

    @property
    def target_fps(self) -> int:
        return self._target_fps

    @property
    def buffer_size(self) -> int:
        return self._sample_rate * self._buffer_duration * self._channels

    @property
    def buffer(self) -> np.ndarray:
        """The ring buffer itself, interleaved by channel."""
        return self._buffer

    @property
    def write_cursor(self) -> int:
        return self._write_cursor

    @property
    def samples_to_adjust(self) -> int:
        """Correction applied to the number of samples generated next update."""
        return self._samples_to_adjust

    def samples_per_update(self) -> float:
        return self._sample_rate / self._target_fps

    def latency_in_samples(self) -> int:
        """Distance, in buffer slots, the write cursor should keep ahead."""
        return int(self._latency * self.samples_per_update() * self._channels)

    def set_latency(self, frames: int) -> None:
        """Set the latency in update frames, from 1 to MAX_LATENCY."""
        if frames == self._latency:
            return
        seconds = frames * self.samples_per_update() / self._sample_rate
        logger = get_logger()
        if frames > MAX_LATENCY or frames <= 0:
            logger.log("Audio", LogLevel.WARNING, f"Invalid latency: {frames} ({seconds} seconds)")
            raise AudioConfigError(f"Invalid latency: {frames}")
        logger.log("Audio", LogLevel.INFO, f"New latency: {frames} buffer frame ({seconds} seconds)")
        self._latency = frames

    def set_channels(self, channels: int) -> None:
        """Change the channel count; the buffer is cleared."""
        if channels == self._channels:
            return
        if channels < 1:
            raise AudioConfigError(f"channels must be positive, got {channels}")
        self._channels = channels
        self._init_buffer()

    def set_sample_rate(self, sample_rate: int) -> None:
        """Change the sample rate; the buffer is cleared."""
        if sample_rate == self._sample_rate:
            return
        if sample_rate < 1:
            raise AudioConfigError(f"sample_rate must be positive, got {sample_rate}")
        self._sample_rate = sample_rate
        self._init_buffer()

    def update(self, instruments: Sequence[Instrument], key_pressed: Any) -> None:
        """Generate one frame worth of samples into the buffer."""
        count = int(self.samples_per_update()) + self._samples_to_adjust
        infos = AudioInfos(self._sample_rate, self._channels)
        size = self.buffer_size
        step = 1.0 / self._sample_rate
        for _ in range(count):
            value = float(sum(instrument.process(infos, key_pressed) for instrument in instruments))
            self.time += step
            value = min(max(value, -1.0), 1.0)
            for _ in range(self._channels):
                self._buffer[self._write_cursor] = value
                self._write_cursor = (self._write_cursor + 1) % size
        self._sync_cursors = True

    def fill_output(self, frames: int, mute: bool | None = None) -> np.ndarray:
        """Consume frames from the read cursors and return them interleaved.

        Stereo output holds two values per frame, anything else one.
        """
        if mute is None:
            mute = self.mute
        size = self.buffer_size
        ch = self._channels
        offsets = np.arange(frames) * ch
        out_channels = 2 if ch == 2 else 1
        out = np.zeros(frames * out_channels, dtype=np.float32)
        if not mute:
            out[0::out_channels] = self._buffer[(self._left_phase + offsets) % size]
            if ch == 2:
                out[1::2] = self._buffer[(self._right_phase + offsets) % size]
        self._left_phase = (self._left_phase + frames * ch) % size
        self._right_phase = (self._right_phase + frames * ch) % size

        if self._sync_cursors:
            self._sync_cursors = False
            delta = self._write_cursor - self._left_phase
            if delta < 0:
                delta += size
            self._samples_to_adjust = self.latency_in_samples() - delta
        return out

    def read_cursor(self, cursor: int = 0) -> int:
        """Position of the left (0) or right (1) read cursor."""
        if cursor not in (0, 1):
            raise ValueError("cursor should be 0 (left phase) or 1 (right phase)")
        return self._left_phase if cursor == 0 else self._right_phase