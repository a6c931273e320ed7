"""Separator-tiered text splitter with sliding overlap.

This is the generic, structure-agnostic splitter the markdown splitter falls
back to when one buffered structural unit is larger than the chunk budget.

Algorithm:
- Text that already fits is returned as a single piece.
- Otherwise split on the first separator that yields two or more non-empty
  pieces, falling through the tiers to a hard character cut.
- Merge pieces greedily while ``current + separator + piece`` fits.
- When a chunk closes, seed the next one with the trailing ``chunk_overlap``
  characters of the closed chunk.
- Pieces longer than ``chunk_size`` are split recursively with the
  remaining tiers.
"""

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from mdsplit.config.defaults import DEFAULT_SEPARATORS
from mdsplit.lib.errors import ConfigError
from mdsplit.lib.logging_config import get_logger
from mdsplit.models.chunk import Chunk

logger = get_logger(__name__)


@runtime_checkable
class TextSplitter(Protocol):
    """Anything that turns a text into an ordered list of chunks."""

    def split_text(self, text: str) -> list[Chunk]:
        """Split ``text`` into chunks, preserving order."""
        ...


class RecursiveCharacterSplitter:
    """Greedy splitter trying separators from most to least preferred.

    Attributes:
        chunk_size: Maximum length of a merged chunk before overlap.
        chunk_overlap: Length of the tail repeated at the start of the next
            chunk.
        separators: Split tiers, most preferred first.

    Example:
        >>> splitter = RecursiveCharacterSplitter(chunk_size=10, chunk_overlap=0)
        >>> [c.text for c in splitter.split_text("alpha beta gamma")]
        ['alpha beta', 'gamma']
    """

    def __init__(
        self,
        chunk_size: int,
        chunk_overlap: int = 0,
        separators: Sequence[str] | None = None,
        length_function: Callable[[str], int] = len,
    ) -> None:
        """Initialize the splitter.

        Args:
            chunk_size: Maximum chunk length. Must be positive.
            chunk_overlap: Overlap carried into the next chunk. Must not be
                negative.
            separators: Split tiers; defaults to paragraph, line, space.
            length_function: Measures text length; ``len`` counts characters.

        Raises:
            ConfigError: If the limits are invalid.
        """
        if chunk_size <= 0:
            raise ConfigError("chunk_size", "must be positive")
        if chunk_overlap < 0:
            raise ConfigError("chunk_overlap", "must not be negative")

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.separators = list(
            DEFAULT_SEPARATORS if separators is None else separators
        )
        self._length = length_function

    def split_text(self, text: str) -> list[Chunk]:
        """Split text into overlapping chunks.

        Args:
            text: Text to split.

        Returns:
            Chunks in document order with empty metadata.
        """
        if not text:
            return []
        pieces = self._split(text, self.separators)
        logger.debug(
            f"Split {self._length(text)}-length text into {len(pieces)} chunks"
        )
        return [Chunk(text=piece) for piece in pieces if piece]

    def _split(self, text: str, separators: Sequence[str]) -> list[str]:
        if self._length(text) <= self.chunk_size:
            return [text]

        for index, separator in enumerate(separators):
            if not separator:
                continue
            pieces = [piece for piece in text.split(separator) if piece]
            if len(pieces) >= 2:
                return self._merge(pieces, separator, separators[index + 1 :])

        return self._merge(self._hard_cut(text), "", [])

    def _hard_cut(self, text: str) -> list[str]:
        """Cut text into consecutive windows that each fit the chunk size."""
        pieces: list[str] = []
        start = 0
        while start < len(text):
            end = min(len(text), start + self.chunk_size)
            # shrink for length functions that count more than one per char
            while end > start + 1 and self._length(text[start:end]) > self.chunk_size:
                end -= 1
            pieces.append(text[start:end])
            start = end
        return pieces

    def _merge(
        self, pieces: list[str], separator: str, fallbacks: Sequence[str]
    ) -> list[str]:
        chunks: list[str] = []
        current = ""

        for piece in pieces:
            if self._length(piece) > self.chunk_size:
                if current:
                    chunks.append(current)
                    current = ""
                chunks.extend(self._split(piece, fallbacks))
                continue

            if not current:
                current = self._seed(chunks[-1], separator, piece) if chunks else piece
                continue

            candidate = f"{current}{separator}{piece}"
            if self._length(candidate) <= self.chunk_size:
                current = candidate
            else:
                chunks.append(current)
                current = self._seed(current, separator, piece)

        if current:
            chunks.append(current)
        return chunks

    def _seed(self, previous: str, separator: str, piece: str) -> str:
        """Start a chunk with the tail of the previous one, then ``piece``.

        The tail is shortened so the seeded chunk never exceeds
        ``chunk_size + chunk_overlap``.
        """
        budget = min(
            self.chunk_overlap,
            self.chunk_size + self.chunk_overlap - self._length(separator + piece),
        )
        tail = self._tail(previous, budget)
        if not tail:
            return piece
        return f"{tail}{separator}{piece}"

    def _tail(self, text: str, budget: int) -> str:
        if budget <= 0:
            return ""
        tail = text[-budget:]
        while tail and self._length(tail) > budget:
            tail = tail[1:]
        return tail
