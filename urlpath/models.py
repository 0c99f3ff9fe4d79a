"""URL-like structure and the generic URL parser."""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as t
import urllib.parse

from .errors import ParseError

logger = logging.getLogger(__name__)

_CONTROL_CHAR_RE: t.Final[re.Pattern[str]] = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE: t.Final[re.Pattern[str]] = re.compile(r"%(?![0-9A-Fa-f]{2})")
_PORT_RE: t.Final[re.Pattern[str]] = re.compile(r"(?::[0-9]*)?")
_HOST_INVALID_RE: t.Final[re.Pattern[str]] = re.compile(r"[ \\^`{|}]")


@dc.dataclass(frozen=True, slots=True)
class URLParts:
    """Parsed form of a URL-like path.

    Attributes
    ----------
    scheme : str
        Lowercase scheme, empty for plain paths.
    host : str
        Authority (including any user info and port), empty when absent.
    path : str
        Path component using ``/`` separators. Never cleaned by parsing.
    """

    scheme: str = ""
    host: str = ""
    path: str = ""

    @property
    def qualified(self) -> bool:
        """Return ``True`` when a scheme or host locates the resource."""
        return bool(self.scheme or self.host)

    def with_path(self, path: str) -> URLParts:
        """Return a copy of this structure carrying *path*."""
        return dc.replace(self, path=path)

    def with_location(self, scheme: str, host: str) -> URLParts:
        """Return a copy with *scheme* and *host* replacing the current ones."""
        return dc.replace(self, scheme=scheme, host=host)


def _fail(text: str, reason: str) -> t.NoReturn:
    logger.debug("Rejecting %r: %s", text, reason)
    raise ParseError(text, reason)


def _check_authority(text: str, netloc: str) -> None:
    """Reject authorities with stray host characters or a non-numeric port."""
    hostport = netloc.rpartition("@")[2]
    if bad := _HOST_INVALID_RE.search(hostport):
        _fail(text, f"invalid character {bad.group()!r} in host name")
    if hostport.startswith("["):
        port = hostport.partition("]")[2]
    else:
        colon = hostport.rfind(":")
        port = hostport[colon:] if colon >= 0 else ""
    if not _PORT_RE.fullmatch(port):
        _fail(text, f"invalid port {port!r} after host")


def _check_first_segment(text: str, path: str) -> None:
    """Reject schemeless relative paths that look like a scheme."""
    if path.startswith("/"):
        return
    if ":" in path.partition("/")[0]:
        _fail(text, "first path segment in URL cannot contain colon")


def parse_url(text: str) -> URLParts:
    """Parse *text* as a generic URL without cleaning its path.

    Accepts ``scheme://host/path``, ``scheme:path``, ``//host/path`` and bare
    paths. Query strings and fragments are discarded.

    Raises
    ------
    ParseError
        If *text* is not syntactically valid.
    """
    if _CONTROL_CHAR_RE.search(text):
        _fail(text, "invalid control character in URL")
    if text.startswith(":"):
        _fail(text, "missing protocol scheme")
    if _BAD_ESCAPE_RE.search(text):
        _fail(text, "invalid URL escape")

    if text.startswith(" "):
        # ``urlsplit`` strips leading blanks; a scheme never starts with one.
        path = re.split(r"[?#]", text, maxsplit=1)[0]
        _check_first_segment(text, path)
        return URLParts(path=path)

    try:
        parts = urllib.parse.urlsplit(text)
    except ValueError as exc:
        logger.debug("urlsplit rejected %r: %s", text, exc)
        raise ParseError(text, str(exc)) from exc

    if parts.netloc:
        _check_authority(text, parts.netloc)
    if not parts.scheme:
        _check_first_segment(text, parts.path)
    return URLParts(scheme=parts.scheme, host=parts.netloc, path=parts.path)


__all__ = ["URLParts", "parse_url"]
