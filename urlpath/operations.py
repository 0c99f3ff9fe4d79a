"""Public path operations over URL-like strings.

Every operation parses its input(s) through a platform policy, applies the
slash-separated path grammar to the path component and serialises the
result back through the same policy. Nothing is cached between calls.
"""

from __future__ import annotations

import typing as t

from . import _path_utils as path_utils
from .platform import DEFAULT_POLICY, PlatformPolicy

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .models import URLParts


class PathURL:
    """Path operations bound to one :class:`PlatformPolicy`."""

    def __init__(self, policy: PlatformPolicy | None = None) -> None:
        self.policy = DEFAULT_POLICY if policy is None else policy

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"PathURL({self.policy!r})"

    def _rewrite(
        self, parts: URLParts, func: t.Callable[[str], str]
    ) -> URLParts:
        """Apply *func* to the path of *parts* below any volume prefix."""
        volume, rest = self.policy.split_volume(parts.path)
        return parts.with_path(volume + func(rest))

    def abspath(self, pth: str, wd: str = "") -> str:
        """Resolve *pth* against the working directory *wd*.

        A qualified *pth* (scheme, host or, on Windows, a volume) keeps its
        own location and only gets cleaned. Otherwise it adopts the scheme and
        host of *wd*; a relative path is joined below the path of *wd* while
        a rooted one replaces it. An empty *wd* means ``/``.
        """
        parts = self.policy.parse(pth)
        wd_parts = self.policy.parse(wd or "/")

        if self.policy.is_located(parts):
            return self.policy.to_string(self._rewrite(parts, path_utils.clean))

        if path_utils.is_abs(parts.path):
            merged = parts.with_location(wd_parts.scheme, wd_parts.host).with_path(
                path_utils.clean(parts.path)
            )
        else:
            # A relative working directory is itself taken from the root.
            merged = self._rewrite(
                wd_parts, lambda rest: path_utils.join("/", rest, parts.path)
            )
        return self.policy.to_string(merged)

    def basename(self, pth: str) -> str:
        """Return the last element of the path of *pth*."""
        return path_utils.base(self.policy.parse(pth).path)

    def dirname(self, pth: str) -> str:
        """Return *pth* without its last path element."""
        parts = self.policy.parse(pth)
        return self.policy.to_string(self._rewrite(parts, path_utils.dir))

    def ext(self, pth: str) -> str:
        """Return the extension of *pth*, including its dot."""
        return path_utils.ext(self.policy.parse(pth).path)

    def clean(self, pth: str) -> str:
        """Return *pth* with ``.``, ``..`` and repeated slashes resolved."""
        parts = self.policy.parse(pth)
        return self.policy.to_string(self._rewrite(parts, path_utils.clean))

    def isabs(self, pth: str) -> bool:
        """Return ``True`` when *pth* is absolute under this policy."""
        return self.policy.is_abs(self.policy.parse(pth))

    def join(self, *elems: str) -> str:
        """Join *elems*, taking scheme, host and volume from the first one.

        Later elements contribute their path components only. At least one
        element is required.
        """
        if not elems:
            msg = "join() requires at least one element"
            raise TypeError(msg)

        first, *rest = (self.policy.parse(elem) for elem in elems)
        tail = [parts.path for parts in rest]
        joined = self._rewrite(first, lambda path: path_utils.join(path, *tail))
        return self.policy.to_string(joined)

    def split(self, pth: str) -> tuple[str, str]:
        """Split *pth* into its directory (as a URL) and final element."""
        parts = self.policy.parse(pth)
        volume, rest = self.policy.split_volume(parts.path)
        head, tail = path_utils.split(rest)
        # No slash in the remainder: the directory is the current one.
        directory = parts.with_path(volume + (head or "."))
        return self.policy.to_string(directory), tail

    def match(self, pattern: str, name: str) -> bool:
        """Return ``True`` when the canonical form of *name* matches *pattern*.

        Raises
        ------
        ParseError
            If *name* cannot be parsed.
        PatternError
            If *pattern* is malformed.
        """
        canonical = self.policy.to_string(self.policy.parse(name))
        return path_utils.match(pattern, canonical)

    def path(self, pth: str) -> str:
        """Return the cleaned path component of *pth*."""
        return self.policy.to_path(self.policy.parse(pth))


_default = PathURL()

abspath = _default.abspath
basename = _default.basename
dirname = _default.dirname
ext = _default.ext
clean = _default.clean
isabs = _default.isabs
join = _default.join
split = _default.split
match = _default.match
path = _default.path


__all__ = [
    "PathURL",
    "abspath",
    "basename",
    "clean",
    "dirname",
    "ext",
    "isabs",
    "join",
    "match",
    "path",
    "split",
]
