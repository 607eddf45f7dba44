"""Integer parsing and formatting helpers with C ``int`` semantics."""

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_SPACES = frozenset(" \t\n\v\f\r")


def atoi(text):
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit. A value outside the range of a
    32-bit signed integer yields 0, as does text with no digits.
    """
    stripped = text.lstrip("".join(_SPACES))
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]

    result = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
        if (sign == 1 and result > INT_MAX) or -result < INT_MIN:
            return 0
    return sign * result


def itoa(n):
    """Return the decimal representation of the integer ``n``."""
    return str(int(n))


def itoa_base(n, base):
    """Return the non-negative integer ``n`` written with the digits of ``base``.

    ``base`` is a string whose characters are the digits, lowest first; its
    length is the radix.
    """
    radix = len(base)
    if radix < 2:
        raise ValueError("base must contain at least two digits")
    if n < 0:
        raise ValueError("itoa_base only formats non-negative numbers")
    if n == 0:
        return base[0]
    digits = []
    while n:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
    return "".join(reversed(digits))