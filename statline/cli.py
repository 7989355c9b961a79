"""Command line entry point and the status bar update loop."""

from __future__ import annotations

import os
import select
import shutil
import signal
import subprocess
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from .config import CMDLEN, INTERVAL, UNKNOWN_STR, Arg, default_args
from .util import warn

VERSION = "1.1"
PROG = "statline"


class UsageError(Exception):
    """Raised for command line arguments that are not understood."""

    def __init__(self) -> None:
        super().__init__(f"usage: {PROG} [-v] [-s] [-1]")


class _Fatal(Exception):
    """An error that ends the program."""


@dataclass(frozen=True)
class Options:
    """Parsed command line options."""

    stdout: bool = False
    once: bool = False
    version: bool = False


def parse_args(argv: Sequence[str]) -> Options:
    """Parse ``-v``, ``-s`` and ``-1``; flags may be combined as in ``-s1``."""
    stdout = once = False
    remaining = list(argv)
    while remaining and remaining[0].startswith("-") and len(remaining[0]) > 1:
        arg = remaining.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                return Options(version=True)
            if flag == "1":
                once = True
                stdout = True
            elif flag == "s":
                stdout = True
            else:
                raise UsageError()
    if remaining:
        raise UsageError()
    return Options(stdout=stdout, once=once)


def _rt_signals() -> range:
    low = getattr(signal, "SIGRTMIN", None)
    high = getattr(signal, "SIGRTMAX", None)
    if low is None or high is None:
        return range(0)
    return range(int(low), int(high) + 1)


class StatusBar:
    """Holds the latest output of every entry and refreshes the ones that are due."""

    def __init__(
        self,
        args: Iterable[Arg],
        unknown_str: str = UNKNOWN_STR,
        cmdlen: int = CMDLEN,
    ) -> None:
        self.args = list(args)
        self.unknown_str = unknown_str
        self.cmdlen = cmdlen
        self.statuses = [""] * len(self.args)

    @staticmethod
    def _due(arg: Arg, iteration: int, signo: int) -> bool:
        if iteration == 0 and not signo:
            return True
        if signo and signo == signal.SIGUSR1:
            return True
        if not signo and arg.turn > 0 and iteration % arg.turn == 0:
            return True
        rtmin = getattr(signal, "SIGRTMIN", None)
        return arg.signal >= 0 and rtmin is not None and signo - int(rtmin) == arg.signal

    def update(self, iteration: int, signo: int = 0) -> None:
        """Refresh the entries due at ``iteration`` or woken by signal ``signo``."""
        for index, arg in enumerate(self.args):
            if not self._due(arg, iteration, signo):
                continue
            result = arg.func(arg.args)
            if result is None:
                result = self.unknown_str
            text = arg.fmt % result
            encoded = text.encode("utf-8")
            if len(encoded) >= self.cmdlen:
                self.statuses[index] = encoded[: self.cmdlen - 1].decode(
                    "utf-8", errors="ignore"
                )
                warn("vsnprintf: Output truncated")
                break
            self.statuses[index] = text

    def render(self) -> str:
        """The whole status line."""
        return "".join(self.statuses)


class _RootWindow:
    """Sets the root window name, which window managers show as the status."""

    def __init__(self, program: str) -> None:
        self.program = program

    @classmethod
    def open(cls) -> "_RootWindow | None":
        if not os.environ.get("DISPLAY"):
            return None
        program = shutil.which("xsetroot")
        return cls(program) if program else None

    def store(self, name: str) -> None:
        try:
            subprocess.run([self.program, "-name", name], check=True)
        except (OSError, subprocess.CalledProcessError):
            raise _Fatal("XStoreName: Allocation failed") from None


def _print_stdout(status: str) -> None:
    try:
        print(status, flush=True)
    except OSError as exc:
        raise _Fatal(f"puts: {exc.strerror or exc}") from None


class _Signals:
    """Signal flags shared between the handlers and the update loop."""

    def __init__(self) -> None:
        self.done = False
        self.upsigno = 0
        self._rt = _rt_signals()

    def _handler(self, signo: int, frame: object) -> None:
        if signo in self._rt or signo == signal.SIGUSR1:
            self.upsigno = signo
        else:
            self.done = True

    @contextmanager
    def installed(self) -> Iterator[int]:
        rfd, wfd = os.pipe()
        os.set_blocking(rfd, False)
        os.set_blocking(wfd, False)
        old_wakeup = signal.set_wakeup_fd(wfd)
        previous = {}
        for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1, *self._rt):
            try:
                previous[signo] = signal.signal(signo, self._handler)
            except (OSError, ValueError):
                continue
        try:
            yield rfd
        finally:
            for signo, handler in previous.items():
                signal.signal(signo, handler)
            signal.set_wakeup_fd(old_wakeup)
            os.close(rfd)
            os.close(wfd)

    @staticmethod
    def wait(rfd: int, timeout: float) -> bool:
        """Sleep up to ``timeout`` seconds; True if a signal cut it short."""
        ready, _, _ = select.select([rfd], [], [], timeout)
        if not ready:
            return False
        try:
            while os.read(rfd, 512):
                pass
        except BlockingIOError:
            pass
        return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the status bar; returns the process exit status."""
    try:
        options = parse_args(sys.argv[1:] if argv is None else argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    if options.version:
        print(f"{PROG}-{VERSION}", file=sys.stderr)
        return 1

    root = None
    if not options.stdout:
        root = _RootWindow.open()
        if root is None:
            print("XOpenDisplay: Failed to open display", file=sys.stderr)
            return 1
    output = root.store if root is not None else _print_stdout

    bar = StatusBar(default_args(), UNKNOWN_STR, CMDLEN)
    signals = _Signals()
    signals.done = options.once

    try:
        with signals.installed() as rfd:
            iteration = 0
            while True:
                start = time.monotonic()
                bar.update(iteration, signals.upsigno)
                iteration += 1
                output(bar.render())

                if not signals.done:
                    deadline = start + INTERVAL / 1000
                    while True:
                        remaining = deadline - time.monotonic()
                        if remaining < 0 or not signals.wait(rfd, remaining):
                            break
                        if signals.done:
                            break
                        bar.update(0, signals.upsigno)
                        output(bar.render())
                        signals.upsigno = 0
                if signals.done:
                    break
        if root is not None:
            root.store("")
    except _Fatal as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0