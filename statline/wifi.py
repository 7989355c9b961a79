"""WiFi ESSID and signal strength, queried over generic netlink (nl80211)."""

from __future__ import annotations

import socket
import struct
import sys

from .util import warn

NLMSG_HDRLEN = 16
GENL_HDRLEN = 4
NLA_HDRLEN = 4

NETLINK_GENERIC = 16
NLM_F_REQUEST = 0x1
NLM_F_DUMP = 0x300
NLMSG_DONE = 3

GENL_ID_CTRL = 0x10
CTRL_CMD_GETFAMILY = 3
CTRL_ATTR_FAMILY_ID = 1
CTRL_ATTR_FAMILY_NAME = 2

NL80211_CMD_GET_INTERFACE = 5
NL80211_CMD_GET_STATION = 17
NL80211_ATTR_IFINDEX = 3
NL80211_ATTR_STA_INFO = 21
NL80211_ATTR_SSID = 52
NL80211_STA_INFO_SIGNAL_AVG = 13

RESPONSE_SIZE = 4096

_NLMSGHDR = struct.Struct("=IHHII")
_GENLMSGHDR = struct.Struct("=BBH")
_NLATTR = struct.Struct("=HH")


def _nla_align(length: int) -> int:
    return (length + 3) & ~3


def rssi_to_perc(rssi: int) -> int:
    """Map a signal level in dBm to a quality percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def _find_attr_at(attr: int, data: bytes, start: int, end: int) -> tuple[int, int] | None:
    """Locate attribute ``attr`` in ``data[start:end]``; return (offset, length)."""
    pos = start
    while pos < end and end - pos >= NLA_HDRLEN:
        nla_len, nla_type = _NLATTR.unpack_from(data, pos)
        if nla_type == attr:
            length = max(nla_len - NLA_HDRLEN, 0)
            return pos + NLA_HDRLEN, length
        if nla_len < NLA_HDRLEN:
            return None
        pos += _nla_align(nla_len)
    return None


def find_attr(attr: int, data: bytes) -> bytes | None:
    """Return the payload of the first netlink attribute of type ``attr``."""
    found = _find_attr_at(attr, data, 0, len(data))
    if found is None:
        return None
    offset, length = found
    return bytes(data[offset : offset + length])


def _message(msg_type: int, flags: int, seq: int, cmd: int, attr_type: int, payload: bytes) -> bytes:
    attr_len = NLA_HDRLEN + len(payload)
    body = (
        _GENLMSGHDR.pack(cmd, 1, 0)
        + _NLATTR.pack(attr_len, attr_type)
        + payload
        + b"\0" * (_nla_align(len(payload)) - len(payload))
    )
    total = NLMSG_HDRLEN + len(body)
    return _NLMSGHDR.pack(total, msg_type, flags, seq, 0) + body


class _Nl80211:
    """Lazily opened generic netlink socket with the cached nl80211 family id."""

    def __init__(self) -> None:
        self.sock: socket.socket | None = None
        self.seq = 1
        self.family = 0

    def _next_seq(self) -> int:
        seq = self.seq
        self.seq += 1
        return seq

    def _open(self) -> socket.socket | None:
        if self.sock is None:
            try:
                self.sock = socket.socket(
                    socket.AF_NETLINK, socket.SOCK_RAW, NETLINK_GENERIC
                )
            except (OSError, AttributeError):
                warn("socket 'AF_NETLINK':")
                return None
        return self.sock

    def send(self, request: bytes) -> bool:
        if self.sock is None:
            warn("send 'AF_NETLINK':")
            return False
        try:
            sent = self.sock.send(request)
        except OSError:
            warn("send 'AF_NETLINK':")
            return False
        if sent != len(request):
            warn("send 'AF_NETLINK':")
            return False
        return True

    def recv(self) -> bytes | None:
        if self.sock is None:
            warn("recv 'AF_NETLINK':")
            return None
        try:
            return self.sock.recv(RESPONSE_SIZE)
        except OSError:
            warn("recv 'AF_NETLINK':")
            return None

    def family_id(self) -> int:
        if self.family:
            return self.family
        request = _message(
            GENL_ID_CTRL,
            NLM_F_REQUEST,
            self._next_seq(),
            CTRL_CMD_GETFAMILY,
            CTRL_ATTR_FAMILY_NAME,
            b"nl80211\0",
        )
        if self._open() is None:
            return 0
        if not self.send(request):
            return 0
        response = self.recv()
        if response is None or len(response) <= len(request):
            return 0
        found = _find_attr_at(CTRL_ATTR_FAMILY_ID, response, len(request), len(response))
        if found is not None:
            offset, length = found
            if length == 2 and offset + 2 <= len(response):
                (self.family,) = struct.unpack_from("=H", response, offset)
        return self.family


_client = _Nl80211()


def _ifindex(interface: str) -> int:
    try:
        return socket.if_nametoindex(interface)
    except (OSError, ValueError):
        warn("ioctl 'SIOCGIFINDEX':")
        return -1


def wifi_essid(interface: str) -> str | None:
    """ESSID of the network ``interface`` is associated with."""
    family = _client.family_id()
    index = _ifindex(interface)
    if not family:
        print("nl80211 family not found", file=sys.stderr)
        return None
    if index < 0:
        print(f"interface {interface} not found", file=sys.stderr)
        return None

    request = _message(
        family,
        NLM_F_REQUEST,
        _client._next_seq(),
        NL80211_CMD_GET_INTERFACE,
        NL80211_ATTR_IFINDEX,
        struct.pack("=I", index),
    )
    if not _client.send(request):
        return None
    response = _client.recv()
    if response is None or len(response) <= NLMSG_HDRLEN + GENL_HDRLEN:
        return None
    found = _find_attr_at(
        NL80211_ATTR_SSID, response, NLMSG_HDRLEN + GENL_HDRLEN, len(response)
    )
    if found is None:
        return None
    offset, length = found
    ssid = response[offset : offset + length].split(b"\0", 1)[0]
    return ssid.decode("utf-8", errors="replace")


def _signal_from_message(response: bytes, start: int, end: int) -> str | None:
    found = _find_attr_at(NL80211_ATTR_STA_INFO, response, start, end)
    if found is None:
        return None
    found = _find_attr_at(NL80211_STA_INFO_SIGNAL_AVG, response, found[0], end)
    if found is None or found[1] != 1:
        return None
    (rssi,) = struct.unpack_from("=b", response, found[0])
    return f"{rssi_to_perc(rssi)}%"


def wifi_perc(interface: str) -> str | None:
    """Signal quality of the station ``interface`` is connected to, e.g. '70%'."""
    family = _client.family_id()
    index = _ifindex(interface)
    if index < 0:
        print(f"interface {interface} not found", file=sys.stderr)
        return None

    request = _message(
        family,
        NLM_F_REQUEST | NLM_F_DUMP,
        _client._next_seq(),
        NL80211_CMD_GET_STATION,
        NL80211_ATTR_IFINDEX,
        struct.pack("=i", index),
    )
    if not _client.send(request):
        return None

    strength = ""
    while True:
        response = _client.recv()
        if response is None or len(response) < NLMSG_HDRLEN:
            return None
        size = len(response)
        pos = 0
        while pos != size and size - pos >= NLMSG_HDRLEN:
            nlmsg_len, nlmsg_type, _flags, _seq, _pid = _NLMSGHDR.unpack_from(response, pos)
            end = size if size - pos < nlmsg_len else pos + nlmsg_len
            if not strength and nlmsg_len > NLMSG_HDRLEN + GENL_HDRLEN:
                strength = (
                    _signal_from_message(response, pos + NLMSG_HDRLEN + GENL_HDRLEN, end)
                    or ""
                )
            if nlmsg_type == NLMSG_DONE:
                return strength or None
            if end <= pos:
                break
            pos = end