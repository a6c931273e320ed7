"""Tests for the depth-first document walk."""

import pytest

from mdsplit.lib.walker import WalkStatus, walk
from mdsplit.parsing.nodes import Document, MarkdownNode, Paragraph, Text


def _document() -> Document:
    return Document(
        children=[
            Paragraph(children=[Text(value="a"), Text(value="b")]),
            Paragraph(children=[Text(value="c")]),
        ]
    )


def _label(node: MarkdownNode) -> str:
    return node.value if isinstance(node, Text) else node.kind.value


@pytest.mark.unit
class TestWalk:
    """Tests for walk() event order and control signals."""

    def test_enter_and_exit_order(self) -> None:
        """Test that every node gets an enter and an exit event."""
        events: list[tuple[str, bool]] = []

        def visit(node: MarkdownNode, entering: bool) -> WalkStatus:
            events.append((_label(node), entering))
            return WalkStatus.CONTINUE

        assert walk(_document(), visit) is WalkStatus.CONTINUE
        assert events == [
            ("document", True),
            ("paragraph", True),
            ("a", True),
            ("a", False),
            ("b", True),
            ("b", False),
            ("paragraph", False),
            ("paragraph", True),
            ("c", True),
            ("c", False),
            ("paragraph", False),
            ("document", False),
        ]

    def test_skip_children_still_exits(self) -> None:
        """Test that skipped nodes receive their exit event."""
        events: list[tuple[str, bool]] = []

        def visit(node: MarkdownNode, entering: bool) -> WalkStatus:
            events.append((_label(node), entering))
            if isinstance(node, Paragraph):
                return WalkStatus.SKIP_CHILDREN
            return WalkStatus.CONTINUE

        walk(_document(), visit)

        assert ("a", True) not in events
        assert events.count(("paragraph", False)) == 2

    def test_stop_aborts_walk(self) -> None:
        """Test that STOP ends the walk with no further events."""
        events: list[str] = []

        def visit(node: MarkdownNode, entering: bool) -> WalkStatus:
            if entering:
                events.append(_label(node))
            if isinstance(node, Text) and node.value == "b":
                return WalkStatus.STOP
            return WalkStatus.CONTINUE

        assert walk(_document(), visit) is WalkStatus.STOP
        assert events == ["document", "paragraph", "a", "b"]

    def test_visitor_exception_propagates(self) -> None:
        """Test that visitor errors abort the walk unchanged."""

        def visit(node: MarkdownNode, entering: bool) -> WalkStatus:
            if isinstance(node, Text):
                raise RuntimeError("boom")
            return WalkStatus.CONTINUE

        with pytest.raises(RuntimeError, match="boom"):
            walk(_document(), visit)
