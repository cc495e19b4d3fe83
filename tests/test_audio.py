import numpy as np
import pytest

from midisynth.audio import Audio, AudioConfigError, AudioInfos, Instrument


class Constant:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def process(self, audio_infos, key_pressed):
        self.calls.append(audio_infos)
        return self.value


def make_audio(channels=1):
    return Audio(sample_rate=600, channels=channels, buffer_duration=1, latency=3, target_fps=60)


def test_instrument_scales_master_by_volume():
    instrument = Instrument(Constant(0.25), volume=2.0)
    assert instrument.process(AudioInfos(600, 1), []) == pytest.approx(0.5)


def test_buffer_size_and_initial_write_cursor():
    audio = make_audio(channels=2)
    assert audio.buffer_size == 600 * 1 * 2
    assert audio.write_cursor == audio.latency_in_samples()
    assert audio.read_cursor(0) == 0
    assert audio.read_cursor(1) == 1


def test_update_writes_clamped_values_on_every_channel():
    audio = make_audio(channels=2)
    start = audio.write_cursor
    audio.update([Instrument(Constant(0.75), volume=2.0)], [])
    written = int(audio.samples_per_update()) * audio.channels
    assert audio.write_cursor == start + written
    assert np.all(audio.buffer[start:start + written] == 1.0)
    assert np.all(audio.buffer[:start] == 0.0)


def test_update_clamps_negative_values():
    audio = make_audio()
    start = audio.write_cursor
    audio.update([Instrument(Constant(-3.0))], [])
    assert audio.buffer[start] == -1.0


def test_update_sums_instruments_and_passes_infos():
    audio = make_audio()
    source = Constant(0.1)
    start = audio.write_cursor
    audio.update([Instrument(source), Instrument(Constant(0.2))], [])
    assert audio.buffer[start] == pytest.approx(0.3)
    assert source.calls[0] == AudioInfos(audio.sample_rate, audio.channels)


def test_update_advances_time():
    audio = make_audio()
    audio.update([], [])
    assert audio.time == pytest.approx(int(audio.samples_per_update()) / audio.sample_rate)


def test_fill_output_reads_buffer_and_mute_gives_silence():
    audio = make_audio(channels=2)
    audio.buffer[:] = np.arange(audio.buffer_size, dtype=np.float32)
    out = audio.fill_output(4)
    assert list(out) == list(audio.buffer[:8])
    assert audio.read_cursor(0) == 8
    silent = audio.fill_output(4, mute=True)
    assert np.all(silent == 0.0)
    assert audio.read_cursor(0) == 16


def test_mute_attribute_used_by_default():
    audio = make_audio()
    audio.buffer[:] = 0.5
    audio.mute = True
    muted = audio.fill_output(5)
    assert [float(v) for v in muted] == [0.0] * 5
    audio.mute = False
    audible = audio.fill_output(2)
    assert [float(v) for v in audible] == [0.5, 0.5]


def test_read_cursor_wraps_around():
    audio = make_audio()
    audio.fill_output(audio.buffer_size + 3)
    assert audio.read_cursor(0) == 3


def test_cursor_gap_in_steady_state_needs_no_adjustment():
    audio = make_audio()
    frames = int(audio.samples_per_update())
    audio.update([], [])
    audio.fill_output(frames)
    assert audio.samples_to_adjust == 0


def test_slow_consumer_produces_negative_adjustment():
    audio = make_audio()
    frames = int(audio.samples_per_update())
    shortfall = 2
    audio.update([], [])
    audio.fill_output(frames - shortfall)
    assert audio.samples_to_adjust == -shortfall


def test_fill_output_without_update_keeps_adjustment():
    audio = make_audio()
    audio.fill_output(1)
    assert audio.samples_to_adjust == 0


@pytest.mark.parametrize("frames", [0, 31])
def test_invalid_latency_raises(frames):
    audio = make_audio()
    with pytest.raises(AudioConfigError):
        audio.set_latency(frames)
    assert audio.latency == 3


def test_valid_latency_is_stored():
    audio = make_audio()
    audio.set_latency(30)
    assert audio.latency == 30


def test_set_channels_resets_buffer():
    audio = make_audio()
    audio.buffer[:] = 0.5
    audio.set_channels(2)
    assert audio.buffer_size == 600 * 2
    assert np.all(audio.buffer == 0.0)
    assert audio.write_cursor == audio.latency_in_samples()


def test_set_sample_rate_resizes_buffer():
    audio = make_audio()
    audio.set_sample_rate(1200)
    assert audio.sample_rate == 1200
    assert len(audio.buffer) == audio.buffer_size == 1200


def test_read_cursor_rejects_unknown_cursor():
    with pytest.raises(ValueError):
        make_audio().read_cursor(2)


def test_zero_channels_rejected():
    with pytest.raises(AudioConfigError):
        Audio(channels=0)