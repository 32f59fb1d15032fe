"""Command that sends a message to a listening server, one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Sequence
from typing import Optional, Union

from minitalk.numeric import atoi
from minitalk.output import put_str
from minitalk.protocol import encode_message
from minitalk.signals import (
    BIT_DELAY,
    SignalError,
    block_signals,
    send_bit,
    wait_for_signal,
)

COMPLETION_TIMEOUT = 0.5
USAGE = "Usage: client [PID_SERVER] [MESSAGE]\n"


class UsageError(ValueError):
    """The command line does not name a usable server."""


def parse_pid(text: str) -> int:
    """The server's process id, read the way the command line gives it."""
    pid = atoi(text)
    if pid <= 0:
        raise UsageError("Invalid PID_SERVER")
    return pid


def send_message(pid: int, message: Union[str, bytes, bytearray]) -> bool:
    """Send a message bit by bit, waiting for an acknowledgement after each bit.

    Returns True when the server confirmed it received the whole message.
    """
    with block_signals():
        last = None
        for bit in encode_message(message):
            last = send_bit(pid, bit, True)
            time.sleep(BIT_DELAY)
        seen = {last.signum} if last is not None else set()
        # The completion signal and the final bit's acknowledgement may
        # arrive in either order; collect both so none is left pending.
        while len(seen) < 2:
            reply = wait_for_signal(COMPLETION_TIMEOUT)
            if reply is None:
                break
            seen.add(reply.signum)
    return signal.SIGUSR2 in seen


def _ignore(signum: int, frame: object) -> None:
    """Swallow a late acknowledgement."""


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send the message given on the command line to the given server."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        put_str(USAGE, sys.stderr)
        return 1
    try:
        pid = parse_pid(args[0])
    except UsageError as exc:
        put_str(f"Error: {exc}\n", sys.stderr)
        return 1
    try:
        os.kill(pid, 0)
    except OSError:
        put_str("Error: Could not send signal to PID_SERVER\n", sys.stderr)
        return 1
    for signum in (signal.SIGUSR1, signal.SIGUSR2):
        signal.signal(signum, _ignore)
    try:
        send_message(pid, os.fsencode(args[1]))
    except SignalError:
        put_str("kill error\n", sys.stderr)
        return 1
    return 0