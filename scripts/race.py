"""Race entry point — reads telemetry on stdin, writes one command per tick on stdout.

Usage:
    uv run python scripts/race.py
    uv run python scripts/race.py --input recorded_race.txt --log-level DEBUG
    uv run python scripts/race.py --max-ticks 200

Tuning constants may be overridden with ``POD_RACER_*`` environment variables
or a ``.env`` file (see ``DriverConfig``).  Logs go to stderr so stdout stays a
pure command channel.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

from pod_racer.driver.commands import StreamCommandSink  # noqa: E402
from pod_racer.driver.config import ConfigError, DriverConfig  # noqa: E402
from pod_racer.driver.engine import TickDriver  # noqa: E402
from pod_racer.driver.navigator import Navigator  # noqa: E402
from pod_racer.telemetry.feed import TelemetryFeed  # noqa: E402
from pod_racer.telemetry.parser import TelemetryParseError  # noqa: E402

_logger = logging.getLogger("pod_racer.race")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Checkpoint-learning pod racer")
    ap.add_argument("--input", default="-", help="Telemetry file ('-' for stdin)")
    ap.add_argument(
        "--log-level",
        default=os.environ.get("POD_RACER_LOG_LEVEL", "WARNING"),
        help="Logging level for stderr output",
    )
    ap.add_argument("--max-ticks", type=int, default=None, help="Stop after this many ticks")
    args = ap.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = DriverConfig.from_env()
    except ConfigError as exc:
        _logger.error("Invalid configuration: %s", exc)
        return 2

    stream = sys.stdin if args.input == "-" else open(args.input, encoding="utf-8")
    driver = TickDriver(TelemetryFeed(stream), Navigator(config), StreamCommandSink(sys.stdout))

    try:
        driver.run(max_ticks=args.max_ticks)
    except TelemetryParseError as exc:
        _logger.error("Fatal telemetry error after %d tick(s): %s", driver.ticks, exc)
        return 1
    except KeyboardInterrupt:
        pass
    finally:
        if stream is not sys.stdin:
            stream.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
