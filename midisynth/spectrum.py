"""Frequency spectrum of the audio that is about to be played."""

from __future__ import annotations

import math

import numpy as np

from midisynth.audio import Audio

__all__ = ["AudioSpectrum"]


class AudioSpectrum:
    """Windowed FFT over a slice of an Audio ring buffer."""

    def __init__(self, sample_count: int, fft_size: int) -> None:
        if sample_count < 2:
            raise ValueError("sample_count must be at least 2")
        if sample_count > fft_size:
            raise ValueError("sample_count must not exceed fft_size")
        self.sample_count = sample_count
        self.fft_size = fft_size
        self._input = np.zeros(fft_size, dtype=np.float64)
        self._window = 0.5 * (1.0 - np.cos(2.0 * np.pi * np.arange(sample_count) / (sample_count - 1)))
        self.frequencies = np.zeros(fft_size // 2, dtype=np.float64)
        self.magnitudes = np.zeros(fft_size // 2, dtype=np.float64)

    def hann_window(self, value: float, index: int) -> float:
        """Scale value by the Hann window coefficient at index."""
        return value * (0.5 * (1.0 - math.cos(2.0 * math.pi * index / (self.sample_count - 1))))

    def process(self, audio: Audio) -> tuple[np.ndarray, np.ndarray]:
        """Return (frequencies, magnitudes) of the samples due to play next."""
        size = audio.buffer_size
        channels = audio.channels
        start = (audio.write_cursor - int(audio.samples_per_update() * audio.latency)) % size
        indices = (start + np.arange(self.sample_count) * channels) % size
        buffer = audio.buffer.astype(np.float64)
        samples = buffer[indices] * self._window
        if channels == 2:
            samples = (samples + buffer[(indices + 1) % size] * self._window) / 2.0
        self._input[: self.sample_count] = samples

        half = self.fft_size // 2
        output = np.fft.fft(self._input)
        self.magnitudes = np.abs(output[:half])
        self.frequencies = audio.sample_rate / self.fft_size * np.arange(half, dtype=np.float64)
        return self.frequencies, self.magnitudes