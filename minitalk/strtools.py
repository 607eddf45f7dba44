"""String helpers with the semantics of the classic C string routines.

Search functions return an index into the string, or ``None`` when
nothing is found. A search for ``"\\0"`` in a string that does not contain
it finds the string's end, as the C routines find the terminator.
"""

from itertools import zip_longest

_NUL = "\0"


def _check_char(char, name="char"):
    if len(char) != 1:
        raise ValueError(f"{name} must be a single character, got {char!r}")


def _check_non_negative(value, name):
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text, sep):
    """Return the non-empty pieces of ``text`` between occurrences of ``sep``."""
    _check_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strtrim(text, charset):
    """Strip every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text, start, length):
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A ``start`` past the end of the text gives an empty string.
    """
    _check_non_negative(start, "start")
    _check_non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack, needle, length):
    """Return the index of ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or ``None``.

    An empty needle is found at index 0.
    """
    _check_non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strncmp(first, second, n):
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points at the first position where
    they differ (the end of a string counts as code point 0), or 0.
    """
    _check_non_negative(n, "n")
    for left, right in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if left != right or left == _NUL:
            return ord(left) - ord(right)
    return 0


def strchr(text, char):
    """Return the index of the first ``char`` in ``text``, or ``None``."""
    _check_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == _NUL else None


def strrchr(text, char):
    """Return the index of the last ``char`` in ``text``, or ``None``."""
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strlcpy(src, size):
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns ``(copied, len(src))``; ``copied`` holds at most ``size - 1``
    characters, so truncation happened when the second value is not
    smaller than ``size``.
    """
    _check_non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst, src, size):
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns ``(result, total)``. When ``size`` does not exceed ``len(dst)``
    nothing is appended and ``total`` is ``len(src) + size``; otherwise
    ``total`` is ``len(dst) + len(src)`` and ``result`` holds at most
    ``size - 1`` characters.
    """
    _check_non_negative(size, "size")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(text, func):
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text, func):
    """Call ``func(index, char)`` on every character of ``text``.

    A non-``None`` return value replaces the character; the resulting
    string is returned.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)