"""Network components: interface addresses, state and traffic speed."""

from __future__ import annotations

import os
import socket

import psutil

from .util import fmt_human, read_int, warn

NET_CLASS = "/sys/class/net"
DEFAULT_INTERVAL = 1000

_UINTMAX = 1 << 64


def _addresses():
    try:
        return psutil.net_if_addrs()
    except OSError:
        warn("getifaddrs:")
        return None


def _ip(interface: str, family: int) -> str | None:
    addrs = _addresses()
    if addrs is None:
        return None
    for addr in addrs.get(interface, ()):
        if addr.family == family:
            return addr.address
    return None


def ipv4(interface: str) -> str | None:
    """First IPv4 address of ``interface``."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """First IPv6 address of ``interface``."""
    return _ip(interface, socket.AF_INET6)


def up(interface: str) -> str | None:
    """'up' or 'down' depending on the interface flags."""
    addrs = _addresses()
    if addrs is None or not addrs.get(interface):
        return None
    try:
        stats = psutil.net_if_stats()
    except OSError:
        warn("getifaddrs:")
        return None
    entry = stats.get(interface)
    if entry is None:
        return None
    return "up" if entry.isup else "down"


class NetSpeed:
    """Bytes per second received or sent on an interface since the last call."""

    def __init__(
        self,
        direction: str,
        interval: int = DEFAULT_INTERVAL,
        sysfs_root: str = NET_CLASS,
    ) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.sysfs_root = sysfs_root
        self._bytes = 0

    def __call__(self, interface: str) -> str | None:
        old = self._bytes
        path = os.path.join(
            self.sysfs_root, interface, "statistics", f"{self.direction}_bytes"
        )
        value = read_int(path)
        if value is None:
            return None
        self._bytes = value
        if old == 0:
            return None
        delta = (value - old) % _UINTMAX
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> str | None:
    """Receive speed of ``interface``."""
    return _rx(interface)


def netspeed_tx(interface: str) -> str | None:
    """Transmit speed of ``interface``."""
    return _tx(interface)