# midisynth

Building blocks for a MIDI synthesizer: a ring buffer that instruments write
samples into, a spectrum analyser, ADSR envelope curves, and the handling of
computer-keyboard and MIDI note input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `midisynth.audio`
  - `Audio(sample_rate=44100, channels=2, buffer_duration=1, latency=3, target_fps=60)`
    holds an interleaved `numpy` ring buffer. `update(instruments, key_pressed)`
    generates one frame of samples (clamped to [-1, 1]) at the write cursor;
    `fill_output(frames, mute=None)` consumes frames from the read cursors and
    returns them interleaved (two values per frame in stereo, one otherwise).
    After an update, the next `fill_output` computes `samples_to_adjust` so the
    write cursor stays `latency_in_samples()` ahead of the left read cursor.
  - `set_latency(frames)` accepts 1 to `MAX_LATENCY` (30) and raises
    `AudioConfigError` otherwise; `set_channels` and `set_sample_rate` clear the
    buffer. `read_cursor(0)` / `read_cursor(1)` give the left and right cursors.
  - `Instrument(master, volume=1.0)` scales the output of any object with a
    `process(audio_infos, key_pressed)` method. `AudioInfos` carries
    `sample_rate` and `channels`.
- `midisynth.spectrum` – `AudioSpectrum(sample_count, fft_size)`;
  `process(audio)` Hann-windows the samples due to play next (averaging the two
  channels in stereo) and returns `(frequencies, magnitudes)` for the first half
  of the FFT. `hann_window(value, index)` gives a single windowed value.
- `midisynth.envelope` – `envelope_curve(control_points, num_points=5000)`
  samples an ADSR envelope from eight `Vec2` points: quadratic Bézier attack,
  decay and release, linear sustain. `drag_control_point(points, index, x, y)`
  returns a new list with one point moved, its x kept between its neighbours
  (the last point up to `MAX_RELEASE_X`), y between 0 and `MAX_CONTROL_Y`, and
  the two sustain points held at the same height.
- `midisynth.mathutil` – `Vec2`, `lerp`, `inverse_lerp`, `bezier_quadratic`.
- `midisynth.keyboard`
  - `InputManager.update_keys(pressed_keys, settings, key_pressed)` advances one
    frame from the set of key codes held down. With
    `PlayerSettings(use_keyboard_as_input=True)` the keys Z S X D C V G B H N J M
    play one octave and O/P shift the octave (0 to 7); otherwise the events in
    `midi_events` are applied and the buffer is emptied.
  - `process_midi_events(events, key_pressed)` treats statuses 145 and 155 with
    non-zero velocity as note-on and every other event as a release.
  - `update_modifier(key, pressed)` records modifier keys;
    `create_key_events(queue)` appends `COPY`, `PASTE`, `CUT` and `CLEAR_FOCUS`
    messages for Ctrl+C, Ctrl+V, Ctrl+X and Escape.
  - `MidiEventBuffer(capacity=255)` keeps at most `capacity` `MidiEvent`s;
    `add_key_pressed` and `remove_key_pressed` maintain the list of `MidiInfo`.
- `midisynth.ids` – `IDManager(max_id)` hands out ids from 1 upwards, smallest
  first, or a requested one; `release_id` gives one back. Misuse raises
  `IDUnavailableError`.
- `midisynth.logger` – `get_logger()` returns a `Logger` whose
  `log(category, level, message, stream=None)` writes `[category] message` with
  the level's ANSI colour to the stream (stdout by default) and to every
  subscribed stream.
- `midisynth.log` – `Log` collects lines as coloured `LogEntry` runs;
  `LogStream` is a writable text stream that passes complete lines to it, and
  `filtered(pattern)` selects header/message pairs by comma-separated terms
  (a leading `-` excludes).
- `midisynth.messages` – `MessageId`, `Message` and the payload classes
  `EnvelopeEditRequest`, `FileBrowserOpenData`, `NodeFilepathData`.
- `midisynth.resources` – `find_resources_folder(application_path, verbose=False)`
  walks up from the application looking for a `resources` directory and raises
  `ResourcesNotFoundError` at the filesystem root; `FramePacer(target_fps, latency)`
  waits out the rest of a frame and reports overruns beyond the latency.

## Example

```python
from midisynth.mathutil import Vec2
from midisynth.envelope import envelope_curve

points = [Vec2(0, 0), Vec2(0.1, 1), Vec2(0.2, 1), Vec2(0.3, 0.6),
          Vec2(0.4, 0.6), Vec2(1.0, 0.6), Vec2(1.1, 0.2), Vec2(1.5, 0)]
curve = envelope_curve(points, 100)
xs = [p.x for p in curve]
ys = [p.y for p in curve]
```

## What it does not do

The package has no command, window or user interface. It opens no sound device
and no MIDI port: samples from `Audio.fill_output` must be handed to an output
library by the caller, and MIDI events must be put into `InputManager.midi_events`
by the caller. It provides no oscillators, filters or other sound components to
plug into an `Instrument`, and no node editor or saving and loading of instruments.