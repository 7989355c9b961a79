"""RAM and swap components read from /proc/meminfo."""

from __future__ import annotations

from .util import fmt_human, read_text

MEMINFO = "/proc/meminfo"


def parse_meminfo(text: str) -> dict[str, int]:
    """Parse meminfo text into a mapping of field name to value (in kB)."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts:
            continue
        try:
            fields[name.strip()] = int(parts[0])
        except ValueError:
            continue
    return fields


def _load(path: str, *names: str) -> tuple[int, ...] | None:
    text = read_text(path)
    if text is None:
        return None
    fields = parse_meminfo(text)
    try:
        return tuple(fields[name] for name in names)
    except KeyError:
        return None


def _div_trunc(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def ram_free(unused: str | None = None, meminfo: str = MEMINFO) -> str | None:
    """Memory available for new allocations."""
    values = _load(meminfo, "MemAvailable")
    if values is None:
        return None
    (available,) = values
    return fmt_human(available * 1024, 1024)


def ram_perc(unused: str | None = None, meminfo: str = MEMINFO) -> str | None:
    """Memory in use, excluding buffers and cache, in percent."""
    values = _load(meminfo, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return str(_div_trunc(100 * ((total - free) - (buffers + cached)), total))


def ram_total(unused: str | None = None, meminfo: str = MEMINFO) -> str | None:
    """Total memory."""
    values = _load(meminfo, "MemTotal")
    if values is None:
        return None
    (total,) = values
    return fmt_human(total * 1024, 1024)


def ram_used(unused: str | None = None, meminfo: str = MEMINFO) -> str | None:
    """Memory in use, excluding buffers and cache."""
    values = _load(meminfo, "MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)


def swap_free(unused: str | None = None, meminfo: str = MEMINFO) -> str | None:
    """Free swap space."""
    values = _load(meminfo, "SwapFree")
    if values is None:
        return None
    (free,) = values
    return fmt_human(free * 1024, 1024)


def swap_perc(unused: str | None = None, meminfo: str = MEMINFO) -> str | None:
    """Swap in use, excluding swap cache, in percent."""
    values = _load(meminfo, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(_div_trunc(100 * (total - free - cached), total))


def swap_total(unused: str | None = None, meminfo: str = MEMINFO) -> str | None:
    """Total swap space."""
    values = _load(meminfo, "SwapTotal")
    if values is None:
        return None
    (total,) = values
    return fmt_human(total * 1024, 1024)


def swap_used(unused: str | None = None, meminfo: str = MEMINFO) -> str | None:
    """Swap in use, excluding swap cache."""
    values = _load(meminfo, "SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)