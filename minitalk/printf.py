"""A small printf implementation with flags, width and precision.

Supported conversions are ``c s i d u x X p %`` and the flags ``# 0 - +``
and space. A conversion whose flags contradict each other is still
rendered and written, and then :class:`FormatError` is raised. The one
exception is ``%c``, which ignores such contradictions.
"""

import operator
import re
import sys
from dataclasses import dataclass
from typing import Optional

from minitalk.numbers import atoi, itoa, itoa_base

BASE_DEC = "0123456789"
BASE_HEX = "0123456789abcdef"
BASE_HEX_UPCASE = "0123456789ABCDEF"

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_SPEC_RE = re.compile(r"([#0\- +]*)([0-9]*)(?:(\.)([0-9]*))?([csiduxXp%])")
_ZERO_FILL = str.maketrans(" -+", "000")
_MISSING = object()


class FormatError(ValueError):
    """Raised for a malformed or self-contradictory conversion."""


def _c_int(value):
    value = operator.index(value)
    return (value + 2**31) % 2**32 - 2**31


def _c_unsigned(value, bits=32):
    return operator.index(value) % 2**bits


def _as_char(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _apply_precision(text, precision, conversion):
    if conversion == "s" or precision == 0:
        return text[:precision]
    sign = "-" if text.startswith("-") else ""
    digits = text[len(sign):]
    if len(digits) >= precision:
        return text
    return sign + digits.rjust(precision, "0")


def _zero_fill(text, space):
    if "-" in text:
        return "-" + text[1:].translate(_ZERO_FILL)
    if "+" in text:
        return "+" + text[1:].translate(_ZERO_FILL)
    if space:
        return text[:1] + text[1:].translate(_ZERO_FILL)
    return text.translate(_ZERO_FILL)


@dataclass(frozen=True)
class ConversionSpec:
    """One parsed conversion: the text after a ``%`` up to its type letter."""

    conversion: str
    alternate: bool = False
    zero: bool = False
    minus: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    precision: Optional[int] = None
    source: str = ""

    @classmethod
    def parse(cls, text):
        """Parse the conversion at the start of ``text`` (just after ``%``)."""
        match = _SPEC_RE.match(text)
        if match is None:
            raise FormatError(f"invalid conversion specification: %{text[:10]!r}")
        flags, width, dot, precision, conversion = match.groups()
        return cls(
            conversion=conversion,
            alternate="#" in flags,
            zero="0" in flags,
            minus="-" in flags,
            space=" " in flags,
            plus="+" in flags,
            width=atoi(width),
            precision=atoi(precision) if dot else None,
            source=match.group(0),
        )

    def is_consistent(self):
        """Return whether the flags agree with each other and the conversion."""
        conv = self.conversion
        if self.zero and self.minus:
            return False
        if self.space and self.plus:
            return False
        if self.alternate and conv not in "xX":
            return False
        if (self.plus or self.space) and conv not in "di":
            return False
        if self.zero and conv in "csp":
            return False
        return True

    def _convert(self, value):
        conv = self.conversion
        if conv == "s":
            if value is None:
                return NULL_STRING
            if not isinstance(value, str):
                raise TypeError(f"%s needs a string, got {type(value).__name__}")
            return value
        if conv in "di":
            return itoa(_c_int(value))
        if conv == "u":
            return itoa_base(_c_unsigned(value), BASE_DEC)
        if conv == "x":
            return itoa_base(_c_unsigned(value), BASE_HEX)
        if conv == "X":
            return itoa_base(_c_unsigned(value), BASE_HEX_UPCASE)
        pointer = 0 if value is None else _c_unsigned(value, 64)
        if pointer == 0:
            return NULL_POINTER
        return "0x" + itoa_base(pointer, BASE_HEX)

    def render(self, value=None):
        """Return the text for ``value``; consistency is not checked here."""
        conv = self.conversion
        if conv == "%":
            return "%"
        if conv == "c":
            char = _as_char(value)
            return char.ljust(self.width) if self.minus else char.rjust(self.width)

        text = self._convert(value)
        valid = self.is_consistent()
        if valid and self.precision is not None:
            text = _apply_precision(text, self.precision, conv)
        if valid and self.alternate and not text.startswith("0"):
            text = ("0X" if conv == "X" else "0x") + text
        if valid and (self.space or self.plus) and not text.startswith("-"):
            text = ("+" if self.plus else " ") + text
        if self.width > len(text):
            text = text.ljust(self.width) if self.minus else text.rjust(self.width)
            if self.zero and valid and self.precision is None:
                text = _zero_fill(text, self.space)
        return text


def _pieces(fmt, args):
    values = iter(args)
    pos = 0
    while True:
        index = fmt.find("%", pos)
        if index < 0:
            if pos < len(fmt):
                yield fmt[pos:]
            return
        if index > pos:
            yield fmt[pos:index]
        spec = ConversionSpec.parse(fmt[index + 1:])
        pos = index + 1 + len(spec.source)
        if spec.conversion == "%":
            yield "%"
            continue
        value = next(values, _MISSING)
        if value is _MISSING:
            raise FormatError(f"missing argument for %{spec.source}")
        yield spec.render(value)
        if spec.conversion != "c" and not spec.is_consistent():
            raise FormatError(f"contradictory flags in %{spec.source}")


def sprintf(fmt, *args):
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt, *args, file=None):
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written. Text preceding a bad
    conversion, and a contradictory conversion itself, is written before
    :class:`FormatError` is raised.
    """
    out = sys.stdout if file is None else file
    count = 0
    for piece in _pieces(fmt, args):
        out.write(piece)
        count += len(piece)
    return count