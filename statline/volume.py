"""Master volume from an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct

from .util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic", "cd",
    "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2", "line3",
    "dig1", "dig2", "dig3", "phin", "phout", "video", "radio", "monitor",
)

_IOC_READ = 2
_INT_SIZE = struct.calcsize("i")


def _ior(kind: str, number: int) -> int:
    return (_IOC_READ << 30) | (_INT_SIZE << 16) | (ord(kind) << 8) | number


SOUND_MIXER_READ_DEVMASK = _ior("M", 0xFE)


def _mixer_read(channel: int) -> int:
    return _ior("M", channel)


def _ioctl_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card: str) -> str | None:
    """Master volume of the mixer at ``card`` in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{card}':")
        return None

    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None

        level = None
        for channel, name in enumerate(SOUND_DEVICE_NAMES):
            if devmask & (1 << channel) and name == "vol":
                try:
                    level = _ioctl_int(fd, _mixer_read(channel))
                except OSError:
                    warn(f"ioctl 'MIXER_READ({channel})':")
                    return None
    finally:
        os.close(fd)

    if level is None:
        return None
    return str(level & 0xFF)