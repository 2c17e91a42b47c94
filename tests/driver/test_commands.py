"""Tests for Command rendering and command sinks."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

from pod_racer.driver.commands import Command, NullCommandSink, StreamCommandSink
from pod_racer.track.models import Point


def test_to_line_renders_integral_coordinates_without_decimals():
    assert Command(Point(8100.0, 4850.0), "100").to_line() == "8100 4850 100"


def test_to_line_keeps_fractional_coordinates():
    assert Command(Point(12.5, -3.0), "0").to_line() == "12.5 -3 0"


def test_to_line_boost_token():
    assert Command(Point(0, 0), "BOOST").to_line() == "0 0 BOOST"


def test_stream_sink_writes_one_line_per_command():
    out = io.StringIO()
    sink = StreamCommandSink(out)
    sink.send(Command(Point(1, 2), "100"))
    sink.send(Command(Point(3, 4), "BOOST"))
    assert out.getvalue() == "1 2 100\n3 4 BOOST\n"


def test_stream_sink_flushes_every_command():
    stream = MagicMock()
    StreamCommandSink(stream).send(Command(Point(1, 2), "50"))
    stream.write.assert_called_once_with("1 2 50\n")
    stream.flush.assert_called_once()


def test_null_sink_records_commands():
    sink = NullCommandSink()
    cmd = Command(Point(1, 2), "100")
    sink.send(cmd)
    assert sink.commands == [cmd]
