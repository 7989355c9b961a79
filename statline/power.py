"""Battery components read from the Linux power-supply class in sysfs."""

from __future__ import annotations

import os
import re

from .util import read_int, read_text

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_STATE_PATTERN = re.compile(r"[a-zA-Z ]{1,12}")


def _path(root: str, bat: str, name: str) -> str:
    return os.path.join(root, bat, name)


def _pick(root: str, bat: str, first: str, second: str) -> str | None:
    """Return the path of the first readable attribute among two."""
    for name in (first, second):
        path = _path(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def _read_state(root: str, bat: str) -> str | None:
    text = read_text(_path(root, bat, "status"))
    if text is None:
        return None
    match = _STATE_PATTERN.match(text)
    return match.group(0) if match else None


def battery_perc(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Battery charge in percent."""
    capacity = read_int(_path(root, bat, "capacity"))
    if capacity is None:
        return None
    return str(capacity)


def battery_state(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Charging state as a symbol: '+', '-', 'o', or '?' when unknown."""
    state = _read_state(root, bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY) -> str | None:
    """Time left while discharging as 'Hh Mm'; empty when not discharging."""
    state = _read_state(root, bat)
    if state is None:
        return None

    charge_path = _pick(root, bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(root, bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if current_now is None or current_now == 0:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"