"""String searching, comparison, slicing and building helpers.

Strings are treated the way NUL-terminated text is: searching for ``"\\0"``
finds the end of the string, and comparisons treat the end of a string as a
NUL character.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest
from typing import Any, Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


def _as_char(c: CharLike) -> str:
    """Turn a character or an integer code into a one-character string.

    Integer codes are narrowed to a single byte.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    Searching for NUL returns the length of ``s``.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    Searching for NUL returns the length of ``s``.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when equal, otherwise the difference of the first differing
    character codes. The end of a string compares as NUL.
    """
    _check_size("n", n)
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in ``big``, matched within the first ``length`` characters.

    An empty ``little`` is found at index 0. Returns None when there is no match.
    """
    _check_size("length", length)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_size("start", start)
    _check_size("length", length)
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty words."""
    return [word for word in s.split(_as_char(sep)) if word]


def count_words(s: str, sep: CharLike) -> int:
    """Number of non-empty words in ``s`` separated by ``sep``."""
    return len(split(s, sep))


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Apply ``func(index, item)`` to every item of a mutable sequence in place.

    A return value other than None replaces the item.
    """
    if not isinstance(s, MutableSequence):
        raise TypeError(f"expected a mutable sequence, got {type(s).__name__}")
    for index, item in enumerate(list(s)):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``size`` does not exceed the length of ``dst``, ``dst`` is left alone
    and the returned length is ``len(src) + size``.
    """
    _check_size("size", size)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)