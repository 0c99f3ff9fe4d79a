"""Platform policies deciding how URL-like paths parse, serialise and root.

POSIX and Windows disagree on what makes a path absolute and on drive
letters, so each platform family gets one policy object. The default policy
is chosen once at import time; callers needing the other behaviour build a
:class:`~urlpath.operations.PathURL` around an explicit policy instead.
"""

from __future__ import annotations

import logging
import os
import re
import sys
import typing as t

from . import _path_utils as path_utils
from .models import URLParts, parse_url

logger = logging.getLogger(__name__)

# Set this to a ``sys.platform`` style name (for example ``win32``) to force
# the policy chosen at import time.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "URLPATH_PLATFORM_OVERRIDE"

_DRIVE_RE: t.Final[re.Pattern[str]] = re.compile(r"[A-Za-z]:")

# Schemes whose host names a share reachable as a UNC path.
_UNC_SCHEMES: t.Final[frozenset[str]] = frozenset({"", "file"})


class PlatformPolicy:
    """Behaviour shared by every platform; subclasses refine volume rules."""

    name: t.ClassVar[str] = "posix"

    def parse(self, text: str) -> URLParts:
        """Parse *text* into a :class:`URLParts` without cleaning its path."""
        return parse_url(text)

    def volume_name(self, parts: URLParts) -> str:
        """Return the drive letter volume carried by *parts*, if any."""
        return ""

    def split_volume(self, path: str) -> tuple[str, str]:
        """Return ``(volume prefix, remaining path)`` for a stored *path*."""
        return "", path

    def is_located(self, parts: URLParts) -> bool:
        """Return ``True`` when *parts* ignores any working directory."""
        return parts.qualified

    def is_abs(self, parts: URLParts) -> bool:
        """Return ``True`` when *parts* denotes an absolute location."""
        return bool(parts.scheme) or path_utils.is_abs(parts.path)

    def _local_path(self, parts: URLParts) -> str:
        return parts.path

    def to_string(self, parts: URLParts) -> str:
        """Serialise *parts* to its canonical string form."""
        local = self._local_path(parts)
        if parts.scheme:
            return f"{parts.scheme}://{parts.host}{path_utils.join('/', local)}"
        if parts.host:
            return f"//{parts.host}{path_utils.join('/', local)}"
        return path_utils.clean(local)

    def to_path(self, parts: URLParts) -> str:
        """Return the cleaned path component of *parts*.

        Hosts survive only as UNC prefixes (``//host/...``) for schemeless
        and ``file`` structures; any other scheme's host is dropped.
        """
        local = self._local_path(parts)
        if parts.host and parts.scheme in _UNC_SCHEMES:
            return f"//{parts.host}{path_utils.join('/', local)}"
        return path_utils.clean(local)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"{type(self).__name__}()"


class PosixPolicy(PlatformPolicy):
    """Rules for platforms where ``/`` alone roots a path."""

    name = "posix"


class WindowsPolicy(PlatformPolicy):
    """Rules for platforms with drive letter volumes such as ``C:``.

    A drive letter path is stored with a synthetic leading slash
    (``C:/home`` becomes ``/C:/home``) so the slash-based grammar treats it
    as rooted. The volume is read back from the first segment whenever the
    structure is serialised.
    """

    name = "windows"

    def parse(self, text: str) -> URLParts:
        """Parse *text*, treating ``\\`` as ``/`` and ``C:`` as a volume."""
        text = text.replace("\\", "/")
        if _DRIVE_RE.match(text):
            # Skip URL parsing so "C:" is not mistaken for a scheme.
            return URLParts(path=f"/{text}")
        return parse_url(text)

    def _volume(self, path: str) -> str:
        match = _DRIVE_RE.match(path, 1) if path.startswith("/") else None
        return match.group() if match else ""

    def volume_name(self, parts: URLParts) -> str:
        """Return the ``X:`` volume leading the path of *parts*."""
        return self._volume(parts.path)

    def split_volume(self, path: str) -> tuple[str, str]:
        """Split ``/C:/rest`` into ``("/C:", "/rest")``.

        A bare volume stands for its root. A drive-relative remainder
        (``/C:foo``) stays relative and is cleaned below the volume without
        gaining a leading slash.
        """
        volume = self._volume(path)
        if not volume:
            return "", path
        return f"/{volume}", path[1 + len(volume) :] or "/"

    def is_located(self, parts: URLParts) -> bool:
        """Return ``True`` for qualified structures and volume paths."""
        return parts.qualified or bool(self.volume_name(parts))

    def is_abs(self, parts: URLParts) -> bool:
        """Return ``True`` for schemes, hosts, volumes and rooted paths."""
        return self.is_located(parts) or path_utils.is_abs(parts.path)

    def _local_path(self, parts: URLParts) -> str:
        volume, rest = self.split_volume(parts.path)
        if not volume:
            return parts.path
        rest = path_utils.clean(rest)
        # The volume root prints as the bare drive letter.
        return volume[1:] if rest == "/" else volume[1:] + rest


# Map ``sys.platform`` prefixes to the policy they require. Platforms without
# an entry use POSIX rules.
_PLATFORM_POLICIES: t.Final[tuple[tuple[str, type[PlatformPolicy]], ...]] = (
    ("win", WindowsPolicy),
)


def _normalise(platform: str) -> str:
    """Fold *platform* to the trimmed lowercase form policy prefixes use."""
    return platform.strip().lower()


def _current_platform(platform: str | None = None) -> str:
    """Pick the platform name: argument, then override variable, then host."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def select_policy(platform: str | None = None) -> PlatformPolicy:
    """Return the policy for *platform* (default: current, or the override)."""
    platform_name = _current_platform(platform)
    policy_type = next(
        (
            policy
            for prefix, policy in _PLATFORM_POLICIES
            if platform_name.startswith(prefix)
        ),
        PosixPolicy,
    )
    logger.debug(
        "Using %s path policy for platform %r", policy_type.name, platform_name
    )
    return policy_type()


DEFAULT_POLICY: t.Final[PlatformPolicy] = select_policy()


__all__ = [
    "DEFAULT_POLICY",
    "PLATFORM_OVERRIDE_ENV",
    "PlatformPolicy",
    "PosixPolicy",
    "WindowsPolicy",
    "select_policy",
]
