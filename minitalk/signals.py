"""Carrying bits between processes with the two user signals.

SIGUSR1 stands for a 0 bit and SIGUSR2 for a 1 bit. To receive signals
synchronously, block them first with :func:`block_signals`; a user signal
that arrives unblocked with no handler installed ends the process.
"""

from __future__ import annotations

import os
import signal
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import NamedTuple, Optional

from minitalk.protocol import encode_byte

BIT_DELAY = 100e-6

_SIGNALS = frozenset({signal.SIGUSR1, signal.SIGUSR2})


class SignalError(OSError):
    """A signal could not be sent or the signal mask could not be changed."""


class Received(NamedTuple):
    """A user signal taken from the pending set, with the sender's process id."""

    signum: signal.Signals
    sender: int

    @property
    def bit(self) -> int:
        return signal_to_bit(self.signum)


def bit_to_signal(bit: int) -> signal.Signals:
    """The signal that carries ``bit``."""
    if bit == 0:
        return signal.SIGUSR1
    if bit == 1:
        return signal.SIGUSR2
    raise ValueError(f"a bit must be 0 or 1, got {bit!r}")


def signal_to_bit(signum: int) -> int:
    """The bit carried by ``signum``."""
    if signum == signal.SIGUSR1:
        return 0
    if signum == signal.SIGUSR2:
        return 1
    raise ValueError(f"signal {signum} does not carry a bit")


def send_bit(pid: int, bit: int, wait: bool = True) -> Optional[Received]:
    """Send one bit to ``pid``.

    With ``wait`` set, block until a user signal arrives in reply and return it.
    """
    signum = bit_to_signal(bit)
    try:
        os.kill(pid, signum)
    except OSError as exc:
        raise SignalError(exc.errno, f"could not signal process {pid}") from exc
    if wait:
        return wait_for_signal(None)
    return None


def send_byte(pid: int, value: int) -> None:
    """Send the eight bits of a byte, waiting for a reply after each one."""
    for bit in encode_byte(value):
        send_bit(pid, bit, True)
        time.sleep(BIT_DELAY)


@contextmanager
def block_signals() -> Iterator[None]:
    """Block the user signals for the calling thread, restoring the mask on exit."""
    try:
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
    except OSError as exc:
        raise SignalError(exc.errno, "could not block user signals") from exc
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def wait_for_signal(timeout: Optional[float] = None) -> Optional[Received]:
    """Take the next pending user signal.

    Waits at most ``timeout`` seconds, or indefinitely when it is None, and
    returns None if the time runs out. The signals must be blocked.
    """
    if timeout is None:
        info = signal.sigwaitinfo(_SIGNALS)
    else:
        if timeout < 0:
            raise ValueError(f"timeout must not be negative, got {timeout}")
        info = signal.sigtimedwait(_SIGNALS, timeout)
        if info is None:
            return None
    return Received(signal.Signals(info.si_signo), info.si_pid)