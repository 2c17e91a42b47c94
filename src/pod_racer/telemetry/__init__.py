"""Per-tick race telemetry input.

Public API
----------
TelemetryFrame      - single tick of telemetry data
TelemetryParser     - raw input lines → TelemetryFrame
TelemetryParseError - raised on malformed or missing telemetry
TelemetryFeed       - reads frames from a text stream
"""

from pod_racer.telemetry.feed import TelemetryFeed
from pod_racer.telemetry.models import TelemetryFrame
from pod_racer.telemetry.parser import TelemetryParseError, TelemetryParser

__all__ = [
    "TelemetryFeed",
    "TelemetryFrame",
    "TelemetryParseError",
    "TelemetryParser",
]
