"""The one-character-at-a-time wire format carried by two user signals.

A character travels as eight bits, least significant first. A zero bit is
sent as ``SIGUSR1`` and a one bit as ``SIGUSR2``. The receiver shifts
every incoming bit in from the top of an 8-bit register.
"""

import enum
import signal


class Bit(enum.IntEnum):
    """One transmitted bit and the signal that carries it."""

    ZERO = 0
    ONE = 1

    @property
    def signal(self):
        """The signal number that carries this bit."""
        return signal.SIGUSR2 if self is Bit.ONE else signal.SIGUSR1

    @classmethod
    def from_signal(cls, signum):
        """Return the bit carried by ``signum``."""
        if signum == signal.SIGUSR1:
            return cls.ZERO
        if signum == signal.SIGUSR2:
            return cls.ONE
        raise ValueError(f"signal {signum} carries no bit")


def _byte_value(char):
    if isinstance(char, (bytes, bytearray)):
        if len(char) != 1:
            raise ValueError(f"expected a single byte, got {char!r}")
        return char[0]
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        value = ord(char)
        if value > 0xFF:
            raise ValueError(f"character {char!r} does not fit in one byte")
        return value
    if not -128 <= char <= 255:
        raise ValueError(f"value {char} does not fit in one byte")
    return char & 0xFF


def encode_char(char):
    """Return the eight bits of ``char``, least significant first.

    ``char`` may be a one-character string, a single byte, or an integer
    in the range of a signed or unsigned byte.
    """
    value = _byte_value(char)
    return [Bit((value >> shift) & 1) for shift in range(8)]


def to_binary(value):
    """Return the low eight bits of ``value`` as a string, most significant first."""
    return format(value & 0xFF, "08b")


class CharDecoder:
    """An 8-bit register that assembles characters from incoming bits."""

    def __init__(self):
        self._value = 0

    def feed(self, bit):
        """Shift ``bit`` in from the top and return the register's new value."""
        self._value >>= 1
        if Bit(bit) is Bit.ONE:
            self._value |= 0x80
        return self._value

    def value(self):
        """Return the register's current value."""
        return self._value