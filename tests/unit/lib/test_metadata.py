"""Tests for heading metadata assembly."""

from typing import Any

import pytest

from mdsplit.lib.metadata import build_header_metadata, heading_levels


@pytest.mark.unit
class TestBuildHeaderMetadata:
    """Tests for build_header_metadata()."""

    def test_without_function(self) -> None:
        """Test that no function means empty metadata."""
        assert build_header_metadata(["A", "B"], None) == {}

    def test_skips_empty_levels(self) -> None:
        """Test that levels without an active heading are omitted."""
        fn = heading_levels()
        assert build_header_metadata(["", "Install", "Linux"], fn) == {
            "h2": "Install",
            "h3": "Linux",
        }

    def test_called_for_every_level(self) -> None:
        """Test that the function sees every level, including empty ones."""
        calls: list[tuple[int, str]] = []

        def fn(level: int, text: str) -> dict[str, Any] | None:
            calls.append((level, text))
            return None

        assert build_header_metadata(["A", "", "C"], fn) == {}
        assert calls == [(1, "A"), (2, ""), (3, "C")]

    def test_deeper_level_wins_on_collision(self) -> None:
        """Test merge order when fragments share a key."""

        def fn(level: int, text: str) -> dict[str, Any]:
            return {"section": text}

        assert build_header_metadata(["A", "B"], fn) == {"section": "B"}

    def test_returns_fresh_dict(self) -> None:
        """Test that each call builds a new mapping."""
        fn = heading_levels()
        first = build_header_metadata(["A"], fn)
        second = build_header_metadata(["A"], fn)
        assert first == second
        assert first is not second


@pytest.mark.unit
class TestHeadingLevels:
    """Tests for heading_levels()."""

    def test_default_prefix(self) -> None:
        """Test the h{level} key."""
        assert heading_levels()(2, "Usage") == {"h2": "Usage"}

    def test_custom_prefix(self) -> None:
        """Test a custom key prefix."""
        assert heading_levels("header_")(1, "Intro") == {"header_1": "Intro"}

    def test_empty_text(self) -> None:
        """Test that an empty heading yields no fragment."""
        assert heading_levels()(3, "") is None
