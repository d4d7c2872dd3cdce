"""Wire format: bytes sent one bit at a time as SIGUSR1 (one) or SIGUSR2 (zero)."""

from __future__ import annotations

import signal
from collections.abc import Iterator

BITS_PER_BYTE = 8
SIGNAL_ONE = signal.SIGUSR1
SIGNAL_ZERO = signal.SIGUSR2
TERMINATOR = 0


def iter_bits(value: int) -> Iterator[int]:
    """Yield the eight bits of a byte, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    for shift in range(BITS_PER_BYTE - 1, -1, -1):
        yield (value >> shift) & 1


def frame_message(text: str | bytes) -> bytes:
    """Return the bytes to transmit for *text*: its UTF-8 bytes and a NUL.

    An empty message transmits nothing at all.
    """
    payload = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if not payload:
        return b""
    return payload + bytes([TERMINATOR])


def bit_to_signal(bit: int) -> signal.Signals:
    """Map a bit to the signal that carries it."""
    if bit == 1:
        return SIGNAL_ONE
    if bit == 0:
        return SIGNAL_ZERO
    raise ValueError(f"not a bit: {bit!r}")


def signal_to_bit(signum: int) -> int:
    """Map a received signal back to the bit it carries."""
    if signum == SIGNAL_ONE:
        return 1
    if signum == SIGNAL_ZERO:
        return 0
    raise ValueError(f"signal {signum} carries no bit")


class ByteAssembler:
    """Collects bits, most significant first, into whole bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received towards the current byte."""
        return self._count

    def push(self, bit: int) -> int | None:
        """Add one bit; return the finished byte after the eighth, else None."""
        if bit not in (0, 1):
            raise ValueError(f"not a bit: {bit!r}")
        self._value = (self._value << 1) | bit
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