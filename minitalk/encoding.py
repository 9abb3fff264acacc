"""Bit-level encoding of messages sent one signal per bit.

Each byte travels as eight bits, least significant first. A message ends
with a NUL byte, which tells the receiver that the message is complete.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

BITS_PER_BYTE = 8

Message = Union[str, bytes, bytearray]


def encode_byte(value: int) -> Tuple[int, ...]:
    """The eight bits of ``value``, least significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE))


def _message_bytes(message: Message) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\0" in data:
        raise ValueError("message must not contain a NUL byte")
    return data


def encode_message(message: Message) -> Tuple[int, ...]:
    """All bits of ``message`` followed by the bits of a terminating NUL.

    Text is encoded as UTF-8. A message holding a NUL byte cannot be sent
    and raises ValueError.
    """
    data = _message_bytes(message) + b"\0"
    return tuple(bit for value in data for bit in encode_byte(value))


@dataclass
class BitDecoder:
    """Collects bits, least significant first, into bytes."""

    value: int = 0
    count: int = 0

    def feed(self, bit: object) -> Optional[int]:
        """Add one bit; return the finished byte after every eighth bit."""
        if bit:
            self.value |= 1 << self.count
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        finished = self.value
        self.value = 0
        self.count = 0
        return finished