"""Pytest configuration. Run from the project root; pythonpath in pyproject.toml points at src."""

from collections.abc import Iterator

import pytest

from colon_whitespace_linter.infrastructure.di.container import ColonWhitespaceContainer


@pytest.fixture(autouse=True)
def _fresh_container() -> Iterator[None]:
    """The container caches the pyproject section of the cwd; never leak it between tests."""
    ColonWhitespaceContainer.reset()
    yield
    ColonWhitespaceContainer.reset()
