"""Computer keyboard and MIDI input turned into pressed-note lists and UI messages."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Iterator, MutableSequence, Protocol

from midisynth.logger import LogLevel, get_logger
from midisynth.mathutil import Vec2
from midisynth.messages import Message, MessageId

__all__ = [
    "KEY_SPACE",
    "KEY_C",
    "KEY_D",
    "KEY_G",
    "KEY_H",
    "KEY_J",
    "KEY_M",
    "KEY_N",
    "KEY_O",
    "KEY_P",
    "KEY_S",
    "KEY_V",
    "KEY_B",
    "KEY_X",
    "KEY_Z",
    "KEY_ESCAPE",
    "KEY_LAST",
    "MOD_SHIFT",
    "MOD_CONTROL",
    "MOD_ALT",
    "MOD_SUPER",
    "MOD_CAPS_LOCK",
    "MOD_NUM_LOCK",
    "PIANO_KEYS",
    "MAX_OCTAVE",
    "NOTE_ON_STATUSES",
    "KeyState",
    "MidiInfo",
    "MidiEvent",
    "MidiEventBuffer",
    "PlayerSettings",
    "InputManager",
    "add_key_pressed",
    "remove_key_pressed",
]

KEY_SPACE = 32
KEY_B = 66
KEY_C = 67
KEY_D = 68
KEY_G = 71
KEY_H = 72
KEY_J = 74
KEY_M = 77
KEY_N = 78
KEY_O = 79
KEY_P = 80
KEY_S = 83
KEY_V = 86
KEY_X = 88
KEY_Z = 90
KEY_ESCAPE = 256
KEY_LAST = 348

MOD_SHIFT = 0x0001
MOD_CONTROL = 0x0002
MOD_ALT = 0x0004
MOD_SUPER = 0x0008
MOD_CAPS_LOCK = 0x0010
MOD_NUM_LOCK = 0x0020

# Keys laid out like one octave of a piano keyboard, from C upwards.
PIANO_KEYS = (KEY_Z, KEY_S, KEY_X, KEY_D, KEY_C, KEY_V, KEY_G, KEY_B, KEY_H, KEY_N, KEY_J, KEY_M)
MAX_OCTAVE = 7
NOTE_ON_STATUSES = frozenset({145, 155})
DEFAULT_EVENT_CAPACITY = 255


@dataclass
class KeyState:
    """Press state of one key with its rising and falling edges."""

    down: bool = False
    up: bool = False
    pressed: bool = False
    _last_pressed: bool = field(default=False, repr=False)

    def update(self, pressed: bool) -> None:
        """Record the state of the key for a new frame."""
        self.pressed = pressed
        self.down = pressed and not self._last_pressed
        self.up = not pressed and self._last_pressed
        self._last_pressed = pressed


@dataclass
class MidiInfo:
    """A note currently held down."""

    key_index: int
    velocity: int
    rising_edge: bool = True


@dataclass(frozen=True)
class MidiEvent:
    """A MIDI channel message: status byte and two data bytes."""

    status: int
    data1: int = 0
    data2: int = 0


@dataclass
class PlayerSettings:
    """Options that steer where notes come from and how buffers are shown."""

    use_keyboard_as_input: bool = False
    split_buffer_graph: bool = False


class _EventQueue(Protocol):
    def append(self, item: Message) -> None:
        ...


class MidiEventBuffer:
    """A bounded store of MIDI events waiting to be processed."""

    def __init__(self, capacity: int = DEFAULT_EVENT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._events: list[MidiEvent] = []

    def extend(self, events: Iterable[MidiEvent]) -> int:
        """Store as many events as there is room for; return how many were kept."""
        free = self.capacity - len(self._events)
        if free == 0:
            get_logger().log(
                "MidiEventBuffer", LogLevel.WARNING, "Buffer full, cannot read new MIDI events."
            )
            return 0
        added = 0
        for event in events:
            if added == free:
                break
            self._events.append(event)
            added += 1
        return added

    def clear(self) -> None:
        self._events.clear()

    def __iter__(self) -> Iterator[MidiEvent]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)


def remove_key_pressed(key_pressed: MutableSequence[MidiInfo], key_index: int) -> None:
    """Remove the first held note with this key index, if any."""
    for position, info in enumerate(key_pressed):
        if info.key_index == key_index:
            del key_pressed[position]
            return


def add_key_pressed(key_pressed: MutableSequence[MidiInfo], key_index: int, velocity: int) -> None:
    """Add a newly pressed note, replacing one that was never released."""
    remove_key_pressed(key_pressed, key_index)
    key_pressed.append(MidiInfo(key_index, velocity, True))


class InputManager:
    """Tracks key states and turns them into notes and editor messages."""

    def __init__(self) -> None:
        self.keys: defaultdict[int, KeyState] = defaultdict(KeyState)
        self.modifiers: defaultdict[int, KeyState] = defaultdict(KeyState)
        self.octave = 4
        self.cursor_pos = Vec2(0.0, 0.0)
        self.midi_events = MidiEventBuffer()

    def update_modifier(self, key: int, pressed: bool) -> None:
        """Record the state of a modifier (shift, control, ...) key."""
        if key < MOD_SHIFT or key > MOD_NUM_LOCK:
            raise ValueError(f"Invalid mod key index: {key}")
        self.modifiers[key].update(pressed)

    def update_keys(
        self,
        pressed_keys: Iterable[int],
        settings: PlayerSettings,
        key_pressed: MutableSequence[MidiInfo],
    ) -> None:
        """Advance one frame with the set of key codes now held down.

        In keyboard mode the piano keys play notes and O/P change octave;
        otherwise buffered MIDI events are applied and the buffer emptied.
        """
        held = set(pressed_keys)
        for code in range(KEY_SPACE, KEY_LAST):
            self.keys[code].update(code in held)

        for info in key_pressed:
            info.rising_edge = False

        if settings.use_keyboard_as_input:
            if self.keys[KEY_O].down and self.octave > 0:
                self.octave -= 1
            if self.keys[KEY_P].down and self.octave < MAX_OCTAVE:
                self.octave += 1

            for offset, code in enumerate(PIANO_KEYS):
                state = self.keys[code]
                key_index = len(PIANO_KEYS) * self.octave + offset + 12
                if state.down:
                    add_key_pressed(key_pressed, key_index, 127)
                elif state.up:
                    remove_key_pressed(key_pressed, key_index)
        else:
            self.process_midi_events(self.midi_events, key_pressed)
            self.midi_events.clear()

    def process_midi_events(
        self, events: Iterable[MidiEvent], key_pressed: MutableSequence[MidiInfo]
    ) -> None:
        """Apply note-on events as presses and everything else as releases."""
        for event in events:
            if event.status in NOTE_ON_STATUSES and event.data2 != 0:
                add_key_pressed(key_pressed, event.data1, event.data2)
            else:
                remove_key_pressed(key_pressed, event.data1)

    def create_key_events(self, queue: _EventQueue) -> None:
        """Queue copy, paste, cut and clear-focus messages for shortcuts pressed this frame."""
        control = self.modifiers[MOD_CONTROL].pressed
        if control and self.keys[KEY_C].down:
            queue.append(Message(MessageId.COPY))
        if control and self.keys[KEY_V].down:
            queue.append(Message(MessageId.PASTE, self.cursor_pos))
        if control and self.keys[KEY_X].down:
            queue.append(Message(MessageId.CUT))
        if self.keys[KEY_ESCAPE].down:
            queue.append(Message(MessageId.CLEAR_FOCUS))