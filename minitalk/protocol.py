"""Bit-level message encoding and decoding.

A message is sent as its bytes followed by a NUL terminator. Each byte goes
out as eight bits, most significant first.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional, Union

BITS_PER_BYTE = 8
TERMINATOR = 0


def encode_byte(value: int) -> tuple[int, ...]:
    """The eight bits of a byte, most significant first.

    Values from -128 to 255 are accepted; negative values are taken in two's
    complement, as a signed character would be.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer byte value, got {type(value).__name__}")
    if not -128 <= value <= 255:
        raise ValueError(f"byte value out of range: {value}")
    value &= 0xFF
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1))


def encode_message(message: Union[str, bytes, bytearray]) -> Iterator[int]:
    """The bits of a message followed by its NUL terminator.

    Text is encoded as UTF-8. Anything after an embedded NUL is not sent.
    """
    if isinstance(message, str):
        data = message.encode("utf-8")
    elif isinstance(message, (bytes, bytearray)):
        data = bytes(message)
    else:
        raise TypeError(f"expected text or bytes, got {type(message).__name__}")
    data = data.split(bytes([TERMINATOR]), 1)[0] + bytes([TERMINATOR])
    return (bit for byte in data for bit in encode_byte(byte))


class Decoder:
    """Reassembles messages from a stream of bits."""

    def __init__(self) -> None:
        self._bits = 0
        self._data = 0
        self._buffer = bytearray()

    @property
    def bits_pending(self) -> int:
        """Bits received towards the byte being assembled."""
        return self._bits

    @property
    def pending(self) -> bytes:
        """Bytes of the message received so far."""
        return bytes(self._buffer)

    def feed(self, bit: int) -> Optional[bytes]:
        """Take one bit; return the message once its terminator completes."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._data = (self._data << 1) | int(bit)
        self._bits += 1
        if self._bits < BITS_PER_BYTE:
            return None
        byte = self._data
        self._bits = 0
        self._data = 0
        if byte != TERMINATOR:
            self._buffer.append(byte)
            return None
        message = bytes(self._buffer)
        self._buffer.clear()
        return message

    def reset(self) -> None:
        """Discard any partly received byte and message."""
        self._bits = 0
        self._data = 0
        self._buffer.clear()