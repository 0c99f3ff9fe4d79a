"""Cross-operation invariants checked on both platform policies."""

from __future__ import annotations

import typing as t

import pytest

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from urlpath import PathURL

SAMPLES: t.Final[tuple[str, ...]] = (
    "",
    "/",
    ".",
    "..",
    "test.txt",
    "./test.txt",
    "../test.txt",
    "a//b/./c/..",
    "/home/user/test.txt",
    "/home/user/../test.txt",
    "/home/user/",
    "mem:///home/user/test.txt",
    "mem:///home/user/../test.txt",
    "mem:///..",
    "file:///home/user/test.txt",
    "http://localhost:8118",
    "http://localhost:8118/home/user/test.txt",
    "//127.0.0.1/home/user/test.txt",
    "file://127.0.0.1/home/user/test.txt",
)

WORKING_DIRS: t.Final[tuple[str, ...]] = (
    "",
    "/",
    "/home/user",
    "relative/dir",
    "mem:///home/user",
    "http://example.com:8888",
    "//127.0.0.1/share",
)


@pytest.mark.parametrize("pth", SAMPLES)
def test_clean_is_idempotent(any_urls: PathURL, pth: str) -> None:
    """Cleaning a cleaned path changes nothing."""
    once = any_urls.clean(pth)
    assert any_urls.clean(once) == once


@pytest.mark.parametrize("wd", WORKING_DIRS)
@pytest.mark.parametrize("pth", SAMPLES)
def test_abspath_is_absolute(any_urls: PathURL, pth: str, wd: str) -> None:
    """Resolution always produces an absolute result."""
    assert any_urls.isabs(any_urls.abspath(pth, wd))


@pytest.mark.parametrize("pth", SAMPLES)
def test_split_then_join_restores_clean_path(any_urls: PathURL, pth: str) -> None:
    """Joining the halves of a split yields the cleaned input."""
    directory, name = any_urls.split(pth)
    assert any_urls.join(directory, name) == any_urls.clean(pth)


@pytest.mark.parametrize(
    ("a", "b", "c"),
    [
        ("home", "user", "test.txt"),
        ("/home", "../user", "./test.txt"),
        ("a/b", "/c", ""),
        ("", "..", "x"),
    ],
)
def test_join_is_associative(any_urls: PathURL, a: str, b: str, c: str) -> None:
    """Nested joins of plain paths match a single join."""
    assert any_urls.join(any_urls.join(a, b), c) == any_urls.join(a, b, c)


@pytest.mark.parametrize("pth", SAMPLES)
def test_dirname_matches_split(any_urls: PathURL, pth: str) -> None:
    """The directory of a path equals the directory half of its split."""
    assert any_urls.dirname(pth) == any_urls.split(pth)[0]


def test_windows_volume_survives_round_trips(windows_urls: PathURL) -> None:
    """Join, clean and dirname never drop a drive letter."""
    joined = windows_urls.join("C:/home", "..", "..", "user")
    assert joined == "C:/user"
    assert windows_urls.clean(joined) == joined
    assert windows_urls.dirname(windows_urls.dirname(joined)) == "C:"
    assert windows_urls.abspath("../../..", joined) == "C:"
