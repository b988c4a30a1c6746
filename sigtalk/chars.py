"""Character classification, case mapping and integer/text conversion."""

from itertools import takewhile

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = frozenset("0123456789")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _code(c):
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def _wrap_int32(value):
    """Reduce an integer to the signed 32-bit range, wrapping around."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def is_alpha(c):
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c):
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c):
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c):
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c):
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _map_case(c, low, high, shift):
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c):
    """Map an ASCII upper-case letter to lower case; anything else unchanged."""
    return _map_case(c, "A", "Z", 32)


def to_upper(c):
    """Map an ASCII lower-case letter to upper case; anything else unchanged."""
    return _map_case(c, "a", "z", -32)


def atoi(text):
    """Parse a leading decimal integer the way C atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. The result wraps to a signed 32-bit
    integer; text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n):
    """Return the decimal text of a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)