"""Pytest configuration and shared fixtures for mdsplit tests."""

import os
from collections.abc import Callable, Generator
from typing import Any

import pytest

from mdsplit.lib.metadata import LevelHeaderFn, heading_levels
from mdsplit.lib.text_splitter import RecursiveCharacterSplitter


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Saves current environment and restores after test.

    Yields:
        Dictionary of original environment variables

    Cleanup:
        Restores original environment after test
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def level_header_fn() -> LevelHeaderFn:
    """Level-header function mapping every non-empty heading to ``h{level}``."""
    return heading_levels()


@pytest.fixture
def make_fallback() -> Callable[..., RecursiveCharacterSplitter]:
    """Factory for fallback splitters with paragraph/line/space tiers."""

    def _make(chunk_size: int, chunk_overlap: int = 0) -> RecursiveCharacterSplitter:
        return RecursiveCharacterSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=["\n\n", "\n", " "],
        )

    return _make


# Configure pytest
def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests",
    )
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
