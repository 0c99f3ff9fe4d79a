"""Slash-separated path grammar shared by every platform policy.

The helpers operate on plain strings that always use ``/`` as separator and
never touch the filesystem. ``posixpath`` provides the lexical normalisation;
the remaining rules are spelled out here because ``posixpath`` treats
trailing slashes, absolute join elements and a leading ``//`` differently.
"""

from __future__ import annotations

import functools
import posixpath
import re

from .errors import PatternError

SEPARATOR = "/"


def clean(path: str) -> str:
    """Return the shortest lexically equivalent form of *path*.

    ``.`` elements are dropped, ``..`` elements consume their parent (never
    climbing above the root) and repeated slashes collapse. An empty path
    cleans to ``"."``.
    """
    cleaned = posixpath.normpath(path)
    # POSIX reserves a leading "//"; URL paths do not.
    if cleaned.startswith("//"):
        cleaned = cleaned[1:]
    return cleaned


def is_abs(path: str) -> bool:
    """Return ``True`` when *path* is rooted at ``/``."""
    return path.startswith(SEPARATOR)


def join(*elems: str) -> str:
    """Join non-empty *elems* with ``/`` and clean the result.

    Unlike :func:`posixpath.join`, a rooted element does not discard the
    elements before it. Joining only empty strings yields ``""``.
    """
    parts = [elem for elem in elems if elem]
    if not parts:
        return ""
    return clean(SEPARATOR.join(parts))


def split(path: str) -> tuple[str, str]:
    """Split *path* after its final slash into ``(directory, file)``."""
    head, sep, tail = path.rpartition(SEPARATOR)
    return head + sep, tail


def base(path: str) -> str:
    """Return the last element of *path*, ignoring trailing slashes."""
    if not path:
        return "."
    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR
    return stripped.rpartition(SEPARATOR)[2]


def dir(path: str) -> str:  # noqa: A001 - mirrors the public operation name
    """Return every element of *path* but the last, cleaned."""
    return clean(split(path)[0])


def ext(path: str) -> str:
    """Return the extension of the final element of *path*.

    The extension starts at the last dot and includes it. Names without a
    dot, or whose only dot leads the name (``.bashrc``), have none.
    """
    name = path.rpartition(SEPARATOR)[2]
    index = name.rfind(".")
    if index <= 0:
        return ""
    return name[index:]


def match(pattern: str, name: str) -> bool:
    """Return ``True`` when *name* matches the shell glob *pattern*.

    ``*`` matches any run of non-slash characters, ``?`` a single non-slash
    character, ``[...]`` a character class (``^`` negates, ``lo-hi`` ranges)
    and ``\\`` escapes the next character.

    Raises
    ------
    PatternError
        If *pattern* is malformed.
    """
    return _compile_glob(pattern).fullmatch(name) is not None


@functools.lru_cache(maxsize=256)
def _compile_glob(pattern: str) -> re.Pattern[str]:
    """Translate *pattern* to a compiled regular expression."""
    pieces: list[str] = []
    index = 0
    while index < len(pattern):
        char = pattern[index]
        index += 1
        if char == "*":
            pieces.append("[^/]*")
        elif char == "?":
            pieces.append("[^/]")
        elif char == "\\":
            if index >= len(pattern):
                raise PatternError(pattern)
            pieces.append(re.escape(pattern[index]))
            index += 1
        elif char == "[":
            piece, index = _translate_class(pattern, index)
            pieces.append(piece)
        else:
            pieces.append(re.escape(char))
    return re.compile("".join(pieces), re.DOTALL)


def _translate_class(pattern: str, index: int) -> tuple[str, int]:
    """Translate the character class opening just before *index*."""
    negated = index < len(pattern) and pattern[index] == "^"
    if negated:
        index += 1

    ranges: list[str] = []
    first = True
    while True:
        if index >= len(pattern):
            raise PatternError(pattern)
        if pattern[index] == "]" and not first:
            index += 1
            break
        lo, index = _class_char(pattern, index)
        hi = lo
        if index < len(pattern) and pattern[index] == "-":
            hi, index = _class_char(pattern, index + 1)
        # An inverted range is legal but matches nothing.
        if lo == hi:
            ranges.append(re.escape(lo))
        elif lo < hi:
            ranges.append(f"{re.escape(lo)}-{re.escape(hi)}")
        first = False

    if not ranges:
        return (".", index) if negated else ("(?!)", index)
    return f"[{'^' if negated else ''}{''.join(ranges)}]", index


def _class_char(pattern: str, index: int) -> tuple[str, int]:
    """Return the (possibly escaped) class character at *index*."""
    if index >= len(pattern) or pattern[index] in "-]":
        raise PatternError(pattern)
    if pattern[index] == "\\":
        index += 1
        if index >= len(pattern):
            raise PatternError(pattern)
    return pattern[index], index + 1


__all__ = [
    "SEPARATOR",
    "base",
    "clean",
    "dir",
    "ext",
    "is_abs",
    "join",
    "match",
    "split",
]
