"""Command output — stream writer with NullCommandSink for tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from pod_racer.track.models import Point


def _format_coord(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Command:
    """One tick of output: where to steer and how hard to push."""

    target: Point
    thrust: str  # "0".."100" or "BOOST"

    def to_line(self) -> str:
        """Render as ``"<target_x> <target_y> <thrust>"``."""
        return f"{_format_coord(self.target.x)} {_format_coord(self.target.y)} {self.thrust}"


class NullCommandSink:
    """Records sent commands for test assertions."""

    def __init__(self) -> None:
        self.commands: list[Command] = []

    def send(self, command: Command) -> None:
        self.commands.append(command)


class StreamCommandSink:
    """Writes one command line per tick to *stream* and flushes it immediately."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def send(self, command: Command) -> None:
        self._stream.write(command.to_line() + "\n")
        self._stream.flush()
