"""Chunk metadata built from the active heading stack."""

from collections.abc import Callable, Sequence
from typing import Any

LevelHeaderFn = Callable[[int, str], dict[str, Any] | None]
"""Maps ``(level, heading_text)`` to a metadata fragment, or None to skip.

Called for every level of the header stack, including levels whose text is
the empty string because no heading of that level is active.
"""


def build_header_metadata(
    headers: Sequence[str], level_header_fn: LevelHeaderFn | None
) -> dict[str, Any]:
    """Merge the metadata fragments of every active heading level.

    Args:
        headers: Header stack; ``headers[0]`` is the level 1 heading text.
        level_header_fn: Fragment builder. When None the metadata is empty.

    Returns:
        A new dict. Fragments are merged from level 1 downwards, so a deeper
        level wins on key collisions.

    Example:
        >>> def fn(level, text):
        ...     return {f"h{level}": text} if text else None
        >>> build_header_metadata(["", "Install", "Linux"], fn)
        {'h2': 'Install', 'h3': 'Linux'}
    """
    if level_header_fn is None:
        return {}

    metadata: dict[str, Any] = {}
    for level, text in enumerate(headers, start=1):
        fragment = level_header_fn(level, text)
        if fragment:
            metadata.update(fragment)
    return metadata


def heading_levels(prefix: str = "h") -> LevelHeaderFn:
    """Level-header function mapping each non-empty heading to ``{prefix}{level}``.

    Example:
        >>> heading_levels()(2, "Usage")
        {'h2': 'Usage'}
    """

    def _fragment(level: int, text: str) -> dict[str, Any] | None:
        if not text:
            return None
        return {f"{prefix}{level}": text}

    return _fragment
