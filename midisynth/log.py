"""In-memory log view fed by ANSI-coloured text."""

from __future__ import annotations

import io
import re
from dataclasses import dataclass

__all__ = [
    "Color",
    "WHITE",
    "LogEntry",
    "Log",
    "LogStream",
    "color_from_ansi_code",
    "parse_ansi_colored_text",
]

Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)

_ANSI_TO_COLOR: dict[str, Color] = {
    "30": (0.00, 0.00, 0.00, 1.00),
    "31": (0.94, 0.17, 0.17, 1.00),
    "32": (0.00, 1.00, 0.00, 1.00),
    "33": (0.90, 0.84, 0.22, 1.00),
    "34": (0.20, 0.30, 0.90, 1.00),
    "35": (0.87, 0.26, 0.90, 0.78),
    "36": (0.00, 1.00, 1.00, 1.00),
    "37": (1.00, 1.00, 1.00, 1.00),
}

_ANSI_PATTERN = re.compile(r"[^ -~]+\[1;([0-9]+)m")


@dataclass(frozen=True)
class LogEntry:
    """A run of text drawn in one colour."""

    text: str
    color: Color


def color_from_ansi_code(code: str) -> Color:
    """Map an ANSI foreground code such as '31' to an RGBA colour; white if unknown."""
    return _ANSI_TO_COLOR.get(code, WHITE)


def parse_ansi_colored_text(text: str) -> list[LogEntry]:
    """Split text on colour escapes into coloured runs, escapes removed."""
    entries: list[LogEntry] = []
    color = WHITE
    position = 0
    for match in _ANSI_PATTERN.finditer(text):
        before = text[position:match.start()]
        if before:
            entries.append(LogEntry(before, color))
        color = color_from_ansi_code(match.group(1))
        position = match.end()
    rest = text[position:]
    if rest:
        entries.append(LogEntry(rest, color))
    return entries


def _passes_filter(pattern: str, text: str) -> bool:
    terms = [term.strip() for term in pattern.split(",")]
    terms = [term for term in terms if term and term != "-"]
    if not terms:
        return True
    lowered = text.lower()
    has_include = False
    for term in terms:
        if term.startswith("-"):
            if term[1:].lower() in lowered:
                return False
        else:
            has_include = True
            if term.lower() in lowered:
                return True
    return not has_include


class Log:
    """Collects log lines as header/message entry pairs."""

    def __init__(self) -> None:
        self.auto_scroll = True
        self.entries: list[LogEntry] = []
        self._text: list[str] = []
        self.stream = LogStream(self)

    @property
    def text(self) -> str:
        """Everything added since the last clear, escapes included."""
        return "".join(self._text)

    def clear(self) -> None:
        self._text.clear()
        self.entries.clear()

    def add_log(self, text: str) -> None:
        """Append one line of coloured text."""
        self._text.append(text)
        self.entries.extend(parse_ansi_colored_text(text))

    def filtered(self, pattern: str = "") -> list[tuple[LogEntry, LogEntry]]:
        """Return (header, message) pairs whose joined text passes the filter.

        The pattern is a comma-separated list of case-insensitive terms;
        a term starting with '-' excludes matching lines.
        """
        pairs = iter(self.entries)
        return [
            (header, message)
            for header, message in zip(pairs, pairs)
            if _passes_filter(pattern, header.text + message.text)
        ]


class LogStream(io.TextIOBase):
    """A writable text stream that feeds complete lines to a Log."""

    def __init__(self, log: Log) -> None:
        super().__init__()
        self._log = log
        self._current_line = ""

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        for char in text:
            self._current_line += char
            if char == "\n":
                self._log.add_log(self._current_line)
                self._current_line = ""
        return len(text)

    def flush(self) -> None:
        """Partial lines stay buffered until their newline arrives."""