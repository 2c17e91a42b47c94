"""Per-tick decision loop: pod, navigation state machine and tick driver."""

from pod_racer.driver.commands import Command, NullCommandSink, StreamCommandSink
from pod_racer.driver.config import BOOST_TOKEN, ConfigError, DriverConfig
from pod_racer.driver.engine import TickDriver
from pod_racer.driver.navigator import Navigator
from pod_racer.driver.pod import Pod
from pod_racer.driver.state import ChangingTarget, Moving, NavigationState

__all__ = [
    "BOOST_TOKEN",
    "ChangingTarget",
    "Command",
    "ConfigError",
    "DriverConfig",
    "Moving",
    "NavigationState",
    "Navigator",
    "NullCommandSink",
    "Pod",
    "StreamCommandSink",
    "TickDriver",
]
