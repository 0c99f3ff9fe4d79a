"""Uniform path operations over plain paths, URLs and drive-letter paths.

``urlpath`` treats ``/home/user``, ``file:///home/user``,
``mem://host/home/user`` and (on Windows) ``C:/home/user`` alike for the usual
path manipulations: resolving against a working directory, taking the base
name, directory or extension, joining, splitting, cleaning and glob matching.
"""

from __future__ import annotations

from .errors import ParseError, PatternError, URLPathError
from .models import URLParts, parse_url
from .operations import (
    PathURL,
    abspath,
    basename,
    clean,
    dirname,
    ext,
    isabs,
    join,
    match,
    path,
    split,
)
from .platform import (
    DEFAULT_POLICY,
    PLATFORM_OVERRIDE_ENV,
    PlatformPolicy,
    PosixPolicy,
    WindowsPolicy,
    select_policy,
)

__all__ = [
    "DEFAULT_POLICY",
    "PLATFORM_OVERRIDE_ENV",
    "ParseError",
    "PathURL",
    "PatternError",
    "PlatformPolicy",
    "PosixPolicy",
    "URLParts",
    "URLPathError",
    "WindowsPolicy",
    "abspath",
    "basename",
    "clean",
    "dirname",
    "ext",
    "isabs",
    "join",
    "match",
    "parse_url",
    "path",
    "select_policy",
    "split",
]
