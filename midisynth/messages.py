"""Messages passed from input handling to the user interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any

from midisynth.mathutil import Vec2

__all__ = [
    "MessageId",
    "Message",
    "EnvelopeEditRequest",
    "FileBrowserOpenData",
    "NodeFilepathData",
]


class MessageId(IntEnum):
    NULL = 0x00
    SHOW_ADSR_EDITOR = 0x01
    UPDATE_ADSR = 0x02
    NODE_DELETED = 0x03
    ADSR_MODIFIED = 0x04
    COPY = 0x05
    CUT = 0x06
    PASTE = 0x07
    CREATE_INSTRUMENT = 0x08
    CLEAR_FOCUS = 0x09
    SHOW_FILE_BROWSER = 0x0A
    SEND_NODE_FILEPATH = 0x0B
    AUDIO_SAMPLE_RATE_UPDATED = 0x0C
    AUDIO_CHANNELS_UPDATED = 0x0D


@dataclass(frozen=True)
class Message:
    """A message identifier with an optional payload."""

    id: MessageId = MessageId.NULL
    data: Any = None


@dataclass
class EnvelopeEditRequest:
    """Asks for the envelope editor to edit a node's control points."""

    control_points: list[Vec2]
    node_id: int


@dataclass
class FileBrowserOpenData:
    """Asks for a file browser on behalf of a node."""

    title: str
    filter: list[str] = field(default_factory=list)
    node_id: int = 0


@dataclass
class NodeFilepathData:
    """A file chosen for a node."""

    filepath: Path
    node_id: int