"""Simple status components: files, commands, time, disk and user data."""

from __future__ import annotations

import os
import platform
import pwd
import socket
import subprocess
import sys
import time

from .util import fmt_human, read_int, warn

BUFSIZE = 1024
ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"


def _first_line(data: str) -> str | None:
    """Keep what a single bounded line read would, without its newline."""
    line = data[: BUFSIZE - 2]
    newline = line.find("\n")
    if newline >= 0:
        line = line[:newline]
    return line or None


def cat(path: str) -> str | None:
    """Return the first line of the file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            data = handle.readline(BUFSIZE - 2)
    except OSError:
        warn(f"fopen '{path}':")
        return None
    return _first_line(data)


def datetime(fmt: str) -> str | None:
    """Return the local time formatted with strftime ``fmt``."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= BUFSIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def _statvfs(path: str) -> os.statvfs_result | None:
    try:
        return os.statvfs(path)
    except OSError:
        warn(f"statvfs '{path}':")
        return None


def disk_free(path: str) -> str | None:
    """Free space available to unprivileged users on the filesystem."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> str | None:
    """Used space on the filesystem in percent."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> str | None:
    """Total size of the filesystem."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> str | None:
    """Used space on the filesystem."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)


def entropy(unused: str | None = None, path: str = ENTROPY_AVAIL) -> str | None:
    """Available kernel entropy; BSD systems report infinity."""
    if sys.platform.startswith(("openbsd", "freebsd")):
        return "\u221e"
    value = read_int(path)
    if value is None:
        return None
    return str(value)


def hostname(unused: str | None = None) -> str | None:
    """The host name of this machine."""
    try:
        return socket.gethostname()
    except OSError:
        warn("gethostname:")
        return None


def kernel_release(unused: str | None = None) -> str | None:
    """The kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError:
        warn("uname:")
        return None


def load_avg(unused: str | None = None) -> str | None:
    """The 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def num_files(path: str) -> str | None:
    """Number of entries in the directory ``path``."""
    try:
        entries = os.listdir(path)
    except OSError:
        warn(f"opendir '{path}':")
        return None
    return str(len(entries))


def run_command(cmd: str) -> str | None:
    """Run ``cmd`` through the shell and return the first line it prints."""
    try:
        completed = subprocess.run(cmd, shell=True, stdout=subprocess.PIPE, check=False)
    except OSError:
        warn(f"popen '{cmd}':")
        return None
    return _first_line(completed.stdout.decode("utf-8", errors="replace"))


def temp(file: str) -> str | None:
    """Temperature in degrees Celsius from a millidegree sensor file."""
    value = read_int(file)
    if value is None:
        return None
    return str(value // 1000)


def _uptime_clock() -> int:
    for name in ("CLOCK_BOOTTIME", "CLOCK_UPTIME"):
        clock = getattr(time, name, None)
        if clock is not None:
            return clock
    return time.CLOCK_MONOTONIC


def uptime(unused: str | None = None) -> str | None:
    """System uptime as hours and minutes."""
    clock = _uptime_clock()
    try:
        seconds = int(time.clock_gettime(clock))
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    hours, rest = divmod(seconds, 3600)
    return f"{hours}h {rest // 60}m"


def gid(unused: str | None = None) -> str:
    """Real group id of the current process."""
    return str(os.getgid())


def uid(unused: str | None = None) -> str:
    """Effective user id of the current process."""
    return str(os.geteuid())


def username(unused: str | None = None) -> str | None:
    """Name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': user entry not found")
        return None


__all__ = [
    "cat",
    "datetime",
    "disk_free",
    "disk_perc",
    "disk_total",
    "disk_used",
    "entropy",
    "hostname",
    "kernel_release",
    "load_avg",
    "num_files",
    "run_command",
    "temp",
    "uptime",
    "gid",
    "uid",
    "username",
    "platform",
]