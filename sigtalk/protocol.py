"""Bit-level wire protocol: each byte travels as eight signals, high bit first.

SIGUSR1 carries a 1 bit and SIGUSR2 carries a 0 bit.
"""

import signal

BITS_PER_BYTE = 8


def _as_bytes(message):
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def encode_bits(message):
    """Yield the bits of a message, most significant bit of each byte first."""
    for byte in _as_bytes(message):
        for shift in range(BITS_PER_BYTE - 1, -1, -1):
            yield (byte >> shift) & 1


def signal_for_bit(bit):
    """Return the signal that carries a bit."""
    if bit not in (0, 1):
        raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def bit_for_signal(signum):
    """Return the bit a signal carries."""
    if signum == signal.SIGUSR1:
        return 1
    if signum == signal.SIGUSR2:
        return 0
    raise ValueError(f"signal {signum} carries no bit")


class BitAssembler:
    """Collect bits, most significant first, into whole bytes."""

    def __init__(self):
        self._value = 0
        self._count = 0

    @property
    def pending(self):
        """Number of bits received towards the current byte."""
        return self._count

    def feed(self, bit):
        """Add one bit; return the finished byte after every eighth bit, else None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | bit
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte