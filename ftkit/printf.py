"""A small ``printf`` supporting the ``c s p d i u x X %`` conversions.

Conversions take no flags, widths or precisions. Integer arguments wrap
to the width of the machine type the conversion names: 32 bits for
``d``, ``i``, ``u``, ``x`` and ``X``, and 64 bits for ``p``.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT32 = 2**32
_UINT64 = 2**64
_INT32_MIN = -(2**31)


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{spec} needs an integer argument, got {type(value).__name__}"
        ) from None


def _to_int32(value: int) -> int:
    return (value - _INT32_MIN) % _UINT32 + _INT32_MIN


def format_hex(number: int, digits: str) -> str:
    """Write a non-negative ``number`` in base 16 using the 16 symbols in ``digits``."""
    if len(digits) != 16:
        raise ValueError(f"expected 16 hexadecimal digits, got {len(digits)}")
    number = operator.index(number)
    if number < 0:
        raise ValueError(f"cannot write a negative number in hexadecimal: {number}")
    if number < 16:
        return digits[number]
    return format_hex(number // 16, digits) + digits[number % 16]


def format_pointer(address: Optional[int]) -> str:
    """Render an address as ``0x`` and lower-case hex, or ``(nil)`` for a null one."""
    if address is None:
        return NULL_POINTER
    value = _as_int(address, "p") % _UINT64
    if value == 0:
        return NULL_POINTER
    return "0x" + format_hex(value, LOWER_HEX)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") % 256)


def _format_string(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string argument, got {type(value).__name__}")
    return value


def _format_signed(value: Any) -> str:
    return str(_to_int32(_as_int(value, "d")))


def _format_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") % _UINT32)


def _format_lower_hex(value: Any) -> str:
    return format_hex(_as_int(value, "x") % _UINT32, LOWER_HEX)


def _format_upper_hex(value: Any) -> str:
    return format_hex(_as_int(value, "X") % _UINT32, UPPER_HEX)


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_lower_hex,
    "X": _format_upper_hex,
}

_MISSING = object()


def _render(fmt: str, args: tuple) -> Iterator[str]:
    pending = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            # A lone trailing '%' is consumed without output.
            continue
        if spec == "%":
            yield "%"
        elif spec in _CONVERTERS:
            value = next(pending, _MISSING)
            if value is _MISSING:
                raise TypeError(f"not enough arguments for format string {fmt!r}")
            yield _CONVERTERS[spec](value)
        else:
            yield "%" + spec


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)