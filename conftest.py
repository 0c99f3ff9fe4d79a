"""Global test configuration and shared fixtures."""

from __future__ import annotations

import pytest

from urlpath import PathURL, PosixPolicy, WindowsPolicy


@pytest.fixture
def posix_urls() -> PathURL:
    """Return path operations bound to POSIX rules."""
    return PathURL(PosixPolicy())


@pytest.fixture
def windows_urls() -> PathURL:
    """Return path operations bound to drive-letter (Windows) rules."""
    return PathURL(WindowsPolicy())


@pytest.fixture(params=["posix", "windows"])
def any_urls(request: pytest.FixtureRequest) -> PathURL:
    """Return path operations for each platform policy in turn."""
    policy = WindowsPolicy() if request.param == "windows" else PosixPolicy()
    return PathURL(policy)
