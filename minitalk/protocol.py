"""Bit-level encoding used between client and server.

Each byte travels as eight bits, most significant bit first. A message ends
with a zero byte; after every bit the receiver acknowledges before the
sender moves on.
"""

from __future__ import annotations

import enum
from typing import Iterator, Optional, Tuple, Union

BITS_PER_BYTE = 8


class ServerState(enum.IntEnum):
    """Whether the server has acknowledged the last bit sent to it."""

    READY = 0
    BUSY = 1


def encode_byte(value: int) -> Tuple[int, ...]:
    """Return the eight bits of ``value``, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value!r}")
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE)))


def encode_message(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of a terminating zero byte.

    Text is encoded as UTF-8. The message stops at its first zero byte, since
    that byte marks the end on the wire.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in data + b"\0":
        yield from encode_byte(byte)


class BitDecoder:
    """Assembles incoming bits into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the completed byte after the eighth, else None."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        value = self._value
        self.reset()
        return value

    def reset(self) -> None:
        """Discard any partially received byte."""
        self._value = 0
        self._count = 0