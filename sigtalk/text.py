"""String and byte-sequence helpers: splitting, trimming, searching, comparing."""

from itertools import islice, zip_longest


def _cstr(text):
    """Return the part of text before the first NUL, as a C string would end."""
    return text.split("\0", 1)[0]


def _as_char(c):
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c % 256)


def _check_count(n, name="n"):
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def split(text, delimiter):
    """Split text on a delimiter character, dropping empty pieces."""
    delimiter = _as_char(delimiter)
    if delimiter == "\0":
        whole = _cstr(text)
        return [whole] if whole else []
    return [word for word in _cstr(text).split(delimiter) if word]


def trim(text, charset):
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substring(text, start, length):
    """Return up to length characters of text beginning at start.

    A start beyond the end of text gives an empty string.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def find_bounded(haystack, needle, limit):
    """Find needle wholly within the first limit characters of haystack.

    Returns the index of the first match, or None. An empty needle matches
    at index 0 whatever the limit.
    """
    _check_count(limit, "limit")
    if not needle:
        return 0
    if limit == 0:
        return None
    index = _cstr(haystack)[:limit].find(needle)
    return None if index < 0 else index


def compare_n(a, b, n):
    """Compare at most n characters of two strings.

    Returns the code difference of the first differing characters, or 0 when
    they agree. The end of a string compares as a NUL character.
    """
    _check_count(n)
    pairs = zip_longest(_cstr(a), _cstr(b), fillvalue="\0")
    for x, y in islice(pairs, n):
        if x != y:
            return ord(x) - ord(y)
    return 0


def find_char(text, c):
    """Return the index of the first occurrence of c in text, or None.

    Searching for NUL finds the end of the string.
    """
    c = _as_char(c)
    text = _cstr(text)
    if c == "\0":
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def rfind_char(text, c):
    """Return the index of the last occurrence of c in text, or None.

    Searching for NUL finds the end of the string.
    """
    c = _as_char(c)
    text = _cstr(text)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def map_indexed(text, func):
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(_cstr(text)))


def iter_indexed(chars, func):
    """Call func(index, item) for every item of a mutable sequence, in place.

    When func returns a value other than None, it replaces the item.
    """
    for index, item in enumerate(chars):
        replacement = func(index, item)
        if replacement is not None:
            chars[index] = replacement


def find_byte(data, value, n):
    """Return the index of the first byte equal to value in data[:n], or None."""
    _check_count(n)
    index = bytes(data[:n]).find(value % 256)
    return None if index < 0 else index


def compare_bytes(a, b, n):
    """Compare the first n bytes of two byte sequences.

    Returns the difference of the first differing bytes, or 0.
    """
    _check_count(n)
    if len(a) < n or len(b) < n:
        raise ValueError(f"both sequences must hold at least {n} bytes")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0