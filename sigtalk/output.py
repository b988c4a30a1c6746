"""Writing characters, strings and numbers, and a small printf."""

import operator
import sys

_UINT32 = 2**32
_UINT64 = 2**64
_INT_MIN = -(2**31)


def _resolve(stream):
    return sys.stdout if stream is None else stream


def _as_char(c):
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) % 256)


def put_char(c, stream=None):
    """Write one character and return the number written."""
    _resolve(stream).write(_as_char(c))
    return 1


def put_str(s, stream=None):
    """Write a string."""
    _resolve(stream).write(s)


def put_endl(s, stream=None):
    """Write a string followed by a newline."""
    out = _resolve(stream)
    out.write(s)
    out.write("\n")


def put_number(n, stream=None):
    """Write an integer in decimal."""
    _resolve(stream).write(str(operator.index(n)))


def _signed32(value):
    return (operator.index(value) - _INT_MIN) % _UINT32 + _INT_MIN


def _next_arg(values, spec):
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for '%{spec}'") from None


def _convert(spec, values):
    if spec == "c":
        return _as_char(_next_arg(values, spec))
    if spec == "s":
        value = _next_arg(values, spec)
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return str(_signed32(_next_arg(values, spec)))
    if spec == "x":
        return format(operator.index(_next_arg(values, spec)) % _UINT32, "x")
    if spec == "X":
        return format(operator.index(_next_arg(values, spec)) % _UINT32, "X")
    if spec == "u":
        return str(operator.index(_next_arg(values, spec)) % _UINT32)
    if spec == "p":
        value = _next_arg(values, spec)
        address = 0 if value is None else operator.index(value) % _UINT64
        return "0x" + format(address, "x")
    return spec


def format_printf(form, *args):
    """Render a format string with %c %s %d %i %x %X %u %p conversions.

    Any other character after '%' is emitted as itself, so '%%' gives '%'.
    """
    values = iter(args)
    chars = iter(form)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def print_formatted(form, *args, stream=None):
    """Write the rendered format string and return the number of characters."""
    text = format_printf(form, *args)
    _resolve(stream).write(text)
    return len(text)