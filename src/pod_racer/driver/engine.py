"""TickDriver — connects the telemetry feed to the navigator and the command sink."""

from __future__ import annotations

import logging

from pod_racer.driver.commands import Command

_logger = logging.getLogger(__name__)


class TickDriver:
    """Runs the read → decide → write loop, one command per telemetry frame.

    Holds no decision logic of its own.

    Parameters
    ----------
    feed:
        A :class:`~pod_racer.telemetry.feed.TelemetryFeed` (anything with
        ``read_frame() -> TelemetryFrame | None``).
    navigator:
        A :class:`~pod_racer.driver.navigator.Navigator`.
    sink:
        A sink with ``send(command)``, either
        :class:`~pod_racer.driver.commands.StreamCommandSink` or
        :class:`~pod_racer.driver.commands.NullCommandSink`.
    """

    def __init__(self, feed, navigator, sink) -> None:
        self._feed = feed
        self._navigator = navigator
        self._sink = sink
        self._ticks: int = 0

    @property
    def ticks(self) -> int:
        """Number of ticks processed so far."""
        return self._ticks

    def tick(self) -> Command | None:
        """Process one frame and emit its command.

        Returns the command sent, or None if the feed has no more frames.
        """
        frame = self._feed.read_frame()
        if frame is None:
            return None

        command = self._navigator.step(frame)
        self._sink.send(command)
        self._ticks += 1
        return command

    def run(self, max_ticks: int | None = None) -> int:
        """Tick until the feed ends or *max_ticks* is reached.

        Returns the number of ticks processed by this call.  Telemetry
        errors propagate: a race cannot continue on a guessed frame.
        """
        _logger.info("Race loop started")
        processed = 0
        while max_ticks is None or processed < max_ticks:
            if self.tick() is None:
                break
            processed += 1
        _logger.info("Race loop finished after %d tick(s)", processed)
        return processed
