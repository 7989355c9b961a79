"""Default status bar layout and settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .basic import datetime, run_command
from .cpu import cpu_perc
from .memory import ram_used
from .network import netspeed_rx
from .wifi import wifi_essid

INTERVAL = 1000
"""Milliseconds between updates."""

UNKNOWN_STR = ""
"""Text shown when a component has no value."""

CMDLEN = 128
"""Maximum length in bytes of one component's output, including the terminator."""

Component = Callable[[Optional[str]], Optional[str]]


@dataclass(frozen=True)
class Arg:
    """One status bar entry.

    ``func`` is called with ``args`` and its result is put into the printf-style
    ``fmt``. The entry is refreshed every ``turn`` iterations, and whenever the
    real-time signal ``SIGRTMIN + signal`` arrives if ``signal`` is not negative.
    """

    func: Component
    fmt: str
    args: Optional[str] = None
    turn: int = 1
    signal: int = -1


def default_args() -> list[Arg]:
    """The entries of the default status bar, left to right."""
    return [
        Arg(run_command, "%s", "~/scripts/middle_status.sh", 1, -1),
        Arg(run_command, "%s", "echo ';'", 1, -1),
        Arg(netspeed_rx, "%s | ", "wlan0", 1, -1),
        Arg(run_command, "%s | ", "~/scripts/volume.sh", 1, -1),
        Arg(ram_used, "  %s | ", None, 2, -1),
        Arg(cpu_perc, "  %s%% | ", None, 2, -1),
        Arg(wifi_essid, "%s | ", "wlan0", 1, -1),
        Arg(run_command, "%s | ", "~/scripts/bluetooth.sh", 1, -1),
        Arg(run_command, "%s%% | ", "~/scripts/battery.sh", 1, -1),
        Arg(datetime, "%s ", "%a %b %d - %H:%M", 1, -1),
    ]