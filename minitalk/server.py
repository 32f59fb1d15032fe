"""Server that prints the messages clients send it one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Callable, Sequence
from typing import BinaryIO, Optional

from minitalk.output import put_str
from minitalk.protocol import Decoder
from minitalk.signals import (
    BIT_DELAY,
    SignalError,
    block_signals,
    send_bit,
    signal_to_bit,
    wait_for_signal,
)

Reply = Callable[[int, int], object]


def _reply_with_signal(pid: int, bit: int) -> None:
    send_bit(pid, bit, False)


class Server:
    """Decodes bits from user signals and writes each finished message out.

    Every bit is acknowledged with a 0 bit; a finished message is announced
    to its sender with a 1 bit just before that acknowledgement.
    """

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        reply: Optional[Reply] = None,
    ) -> None:
        self._output = output
        self._reply = reply if reply is not None else _reply_with_signal
        self._decoder = Decoder()

    def _stream(self) -> BinaryIO:
        return self._output if self._output is not None else sys.stdout.buffer

    def handle_signal(self, signum: int, sender: int) -> Optional[bytes]:
        """Take one signal from ``sender``; return the message it completes, if any."""
        bit = signal_to_bit(signum)
        time.sleep(BIT_DELAY)
        message = self._decoder.feed(bit)
        if message is not None:
            out = self._stream()
            out.write(message)
            out.flush()
            self._reply(sender, 1)
        self._reply(sender, 0)
        return message

    def serve_forever(self) -> None:
        """Receive and handle user signals until the process is stopped."""
        with block_signals():
            while True:
                received = wait_for_signal(None)
                if received is not None:
                    self.handle_signal(received.signum, received.sender)


def banner(pid: int) -> str:
    """The greeting that tells clients which process id to use."""
    return f"\x1b[92mserver [PID = {pid}]\n\x1b[0m"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Announce the process id and serve until interrupted."""
    try:
        with block_signals():
            put_str(banner(os.getpid()), sys.stdout)
            sys.stdout.flush()
            Server().serve_forever()
    except SignalError:
        put_str("kill error\n", sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0