"""String utilities with C-library semantics expressed in Python terms.

Positions are returned as indices (or ``None`` when nothing is found),
and functions that would fill a caller's buffer return the new string
together with the length the operation reports.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple

_WHITESPACE = frozenset(" \t\n\v\f\r")
_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``; a NUL ``c`` matches the end."""
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``; a NUL ``c`` matches the end."""
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return an equal copy of ``text``."""
    return "".join(text)


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` for each element and store any non-None result in place."""
    for index, ch in enumerate(list(chars)):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strmapi(text: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    return "".join(f(index, ch) for index, ch in enumerate(text))


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if s1 is None or s2 is None:
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` (terminator included).

    Returns the resulting string and the length the full concatenation
    would have had; if ``dst`` already fills the buffer it is returned
    unchanged together with ``size + len(src)``.
    """
    _check_size(size, "size")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` (terminator included).

    Returns the copied, possibly truncated, string and ``len(src)``.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlen(text: Optional[str]) -> int:
    """Length of ``text``; ``None`` counts as empty."""
    return 0 if text is None else len(text)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference of the first mismatch."""
    _check_size(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` wholly within the first ``length`` characters, or None."""
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end yields an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]