"""Depth-first traversal of the document tree."""

from collections.abc import Callable
from enum import Enum

from mdsplit.parsing.nodes import MarkdownNode


class WalkStatus(str, Enum):
    """Control signal returned by a visitor.

    Attributes:
        CONTINUE: Descend into the children.
        SKIP_CHILDREN: Skip the children; the exit event is still delivered.
        STOP: Abort the whole walk without further events.
    """

    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"
    STOP = "stop"


Visitor = Callable[[MarkdownNode, bool], WalkStatus]


def walk(node: MarkdownNode, visit: Visitor) -> WalkStatus:
    """Walk ``node`` depth first, calling ``visit(node, entering)``.

    Exceptions raised by ``visit`` abort the walk and propagate unchanged.

    Args:
        node: Subtree root.
        visit: Called with ``entering=True`` before the children and
            ``entering=False`` after them.

    Returns:
        STOP if a visitor stopped the walk, CONTINUE otherwise.
    """
    status = visit(node, True)
    if status is WalkStatus.STOP:
        return status

    if status is not WalkStatus.SKIP_CHILDREN:
        for child in node.children:
            if walk(child, visit) is WalkStatus.STOP:
                return WalkStatus.STOP

    if visit(node, False) is WalkStatus.STOP:
        return WalkStatus.STOP
    return WalkStatus.CONTINUE
