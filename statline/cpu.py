"""CPU frequency and usage components."""

from __future__ import annotations

from .util import fmt_human, read_int, read_text

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


def cpu_freq(unused: str | None = None, path: str = CPU_FREQ) -> str | None:
    """Current frequency of the first CPU, from a kHz sysfs value."""
    freq = read_int(path)
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)


class CpuMeter:
    """CPU usage in percent since the previous call."""

    def __init__(self, stat_path: str = PROC_STAT) -> None:
        self.stat_path = stat_path
        self._previous = [0.0] * _FIELDS

    def _read(self) -> list[float] | None:
        text = read_text(self.stat_path)
        if text is None:
            return None
        fields = text.split()[1 : 1 + _FIELDS]
        if len(fields) != _FIELDS:
            return None
        try:
            return [float(field) for field in fields]
        except ValueError:
            return None

    def __call__(self, unused: str | None = None) -> str | None:
        current = self._read()
        if current is None:
            return None
        previous, self._previous = self._previous, current
        if previous[0] == 0:
            return None

        total = sum(previous) - sum(current)
        if total == 0:
            return None
        busy = sum(previous[i] for i in _BUSY) - sum(current[i] for i in _BUSY)
        return str(int(100 * busy / total))


_meter = CpuMeter()


def cpu_perc(unused: str | None = None) -> str | None:
    """CPU usage in percent since the previous call."""
    return _meter(unused)