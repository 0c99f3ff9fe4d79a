"""Exception hierarchy for urlpath."""

from __future__ import annotations


class URLPathError(ValueError):
    """Base class for urlpath errors."""


class ParseError(URLPathError):
    """Raised when a string cannot be interpreted as a URL-like path.

    Parameters
    ----------
    text : str
        The input that failed to parse.
    reason : str
        Short description of the syntax problem.
    """

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"cannot parse {text!r}: {reason}")
        self.text = text
        self.reason = reason


class PatternError(URLPathError):
    """Raised by :func:`urlpath.match` when a glob pattern is malformed."""

    def __init__(self, pattern: str) -> None:
        super().__init__(f"syntax error in pattern {pattern!r}")
        self.pattern = pattern


__all__ = ["ParseError", "PatternError", "URLPathError"]
