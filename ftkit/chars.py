"""Character classification and case conversion for the ASCII range.

Every function accepts either a one-character string or an integer code
point. Predicates return ``bool``; the case converters return a value of
the same kind as their argument.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_ASCII = range(0, 128)
_PRINTABLE = range(32, 127)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _code(c) in _DIGITS


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the range 0 to 127."""
    return _code(c) in _ASCII


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return _code(c) in _PRINTABLE


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if code in _UPPER:
        code += _CASE_OFFSET
    return _convert(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if code in _LOWER:
        code -= _CASE_OFFSET
    return _convert(c, code)