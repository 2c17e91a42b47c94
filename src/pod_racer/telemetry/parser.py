"""TelemetryParser — converts the two per-tick input lines to a TelemetryFrame."""

from __future__ import annotations

from pod_racer.telemetry.models import TelemetryFrame

# Field order of each input record.
_OWN_FIELDS: tuple[str, ...] = (
    "x",
    "y",
    "checkpoint_x",
    "checkpoint_y",
    "checkpoint_dist",
    "checkpoint_angle",
)

_OPPONENT_FIELDS: tuple[str, ...] = (
    "opponent_x",
    "opponent_y",
)


class TelemetryParseError(ValueError):
    """Raised when a telemetry record is missing fields or holds non-numeric values."""


def _parse_number(token: str, field: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise TelemetryParseError(f"{field}: expected a number, got {token!r}") from None


def _parse_record(line: str, fields: tuple[str, ...]) -> dict[str, float]:
    tokens = line.split()
    if len(tokens) != len(fields):
        raise TelemetryParseError(
            f"expected {len(fields)} field(s) ({', '.join(fields)}), got {len(tokens)}: {line!r}"
        )
    return {field: _parse_number(tok, field) for field, tok in zip(fields, tokens)}


class TelemetryParser:
    """Parses the own-state and opponent records into a :class:`TelemetryFrame`.

    Records are whitespace separated; integer or float text is accepted.
    Malformed input is never guessed at: it raises :class:`TelemetryParseError`.
    """

    def parse(self, own_line: str, opponent_line: str) -> TelemetryFrame:
        """Convert one tick's raw lines to a validated :class:`TelemetryFrame`."""
        kwargs = _parse_record(own_line, _OWN_FIELDS)
        kwargs.update(_parse_record(opponent_line, _OPPONENT_FIELDS))

        frame = TelemetryFrame(**kwargs)
        if not frame.is_valid():
            raise TelemetryParseError(f"non-finite telemetry value in {own_line!r} / {opponent_line!r}")
        return frame
