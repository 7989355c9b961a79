"""Shared helpers: warnings, human-readable sizes and small file readers."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def warn(message: str) -> None:
    """Print a warning to stderr.

    A message ending in ':' is followed by the description of the exception
    currently being handled, if there is one.
    """
    text = message
    if message.endswith(":"):
        exc = sys.exc_info()[1]
        if exc is not None:
            detail = getattr(exc, "strerror", None) or str(exc)
            text = f"{message} {detail}"
    print(text, file=sys.stderr)


def fmt_human(num: float, base: int) -> str:
    """Format ``num`` with a decimal (1000) or binary (1024) unit prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def read_text(path: str) -> str | None:
    """Return the whole content of ``path``, or None after warning on failure."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        warn(f"fopen '{path}':")
        return None


def read_int(path: str) -> int | None:
    """Return the leading integer of the file at ``path``, or None."""
    text = read_text(path)
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))