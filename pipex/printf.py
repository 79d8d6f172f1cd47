"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_INT_BITS = 32
_POINTER_BITS = 64
_UNSIGNED_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << _POINTER_BITS) - 1


def _to_unsigned(value: int) -> int:
    return int(value) & _UNSIGNED_MASK


def _to_signed(value: int) -> int:
    unsigned = _to_unsigned(value)
    if unsigned >= 1 << (_INT_BITS - 1):
        return unsigned - (1 << _INT_BITS)
    return unsigned


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec == "p":
        return _format_pointer(value)
    if spec in ("d", "i"):
        return str(_to_signed(value))
    if spec == "u":
        return str(_to_unsigned(value))
    if spec == "x":
        return f"{_to_unsigned(value):x}"
    return f"{_to_unsigned(value):X}"


_CONVERSIONS = frozenset("cspdiuxX")


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(enumerate(fmt))
    for index, ch in chars:
        if ch != "%" or index + 1 >= len(fmt):
            yield ch
            continue
        _, spec = next(chars)
        if spec not in _CONVERSIONS:
            # Any other conversion, "%%" included, yields a lone percent sign.
            yield "%"
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield _convert(spec, value)


def format_string(fmt: str, *args: Any) -> str:
    """Render *fmt* with *args* and return the resulting text."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered text to *stream* (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)