"""TelemetryFeed — reads per-tick telemetry frames from a text stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

from pod_racer.telemetry.models import TelemetryFrame
from pod_racer.telemetry.parser import TelemetryParseError, TelemetryParser


class TelemetryFeed:
    """Pulls one :class:`TelemetryFrame` per tick from *stream*.

    Parameters
    ----------
    stream:
        Text stream yielding the own-state line then the opponent line for
        every tick (``sys.stdin`` in a live race).
    parser:
        Object with ``parse(own_line, opponent_line) -> TelemetryFrame``.
        Injected for testability; defaults to :class:`TelemetryParser`.
    """

    def __init__(self, stream: TextIO, parser: TelemetryParser | None = None) -> None:
        self._stream = stream
        self._parser = parser or TelemetryParser()
        self._frames_read: int = 0

    @property
    def frames_read(self) -> int:
        """Number of frames successfully read so far."""
        return self._frames_read

    def read_frame(self) -> TelemetryFrame | None:
        """Block until the next frame arrives.

        Returns ``None`` when the stream ends cleanly before a new frame.

        Raises
        ------
        TelemetryParseError
            If the stream ends between the two records of a frame, or a
            record is malformed.
        """
        own_line = self._stream.readline()
        if not own_line:
            return None

        opponent_line = self._stream.readline()
        if not opponent_line:
            raise TelemetryParseError(
                f"stream ended before the opponent record of frame {self._frames_read}"
            )

        frame = self._parser.parse(own_line, opponent_line)
        self._frames_read += 1
        return frame

    def __iter__(self) -> Iterator[TelemetryFrame]:
        while True:
            frame = self.read_frame()
            if frame is None:
                return
            yield frame
