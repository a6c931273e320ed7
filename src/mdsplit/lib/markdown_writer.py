"""Chunk accumulator driven by the markdown renderers.

The writer owns the text buffer and decides where chunk boundaries fall:

- ``append`` concatenates text until the next write would reach
  ``chunk_size``, then commits the buffer first.
- ``commit`` turns the buffer into one chunk, or into several through the
  fallback splitter when it is longer than ``chunk_size + chunk_overlap``.
- Headings always start a new chunk. The heading line is held as a pending
  title and prefixed onto the next buffer that starts after a commit, so a
  section split over several chunks keeps its heading on the first one and
  a heading with no content still becomes a chunk of its own.

Nested structures (list items) are rendered into a ``clone()`` whose chunks
are merged back into the parent buffer by the caller.
"""

from collections.abc import Callable
from typing import Any

from mdsplit.lib.logging_config import get_logger
from mdsplit.lib.metadata import LevelHeaderFn, build_header_metadata
from mdsplit.lib.text_splitter import TextSplitter
from mdsplit.models.chunk import Chunk

logger = get_logger(__name__)


class MarkdownWriter:
    """Mutable splitting state for one document walk.

    Attributes:
        chunk_size: Length at which the buffer is committed.
        chunk_overlap: Extra length tolerated before the fallback splitter
            is used on commit.
        headers: Header stack, ``headers[level - 1]`` is the active heading
            text of that level. Shared with clones.
        chunks: Chunks emitted so far, in order.
        atomic: Indices into ``chunks`` of units that must not be merged or
            re-split, such as oversized code blocks.
        ordered_list: Whether the list being rendered is ordered.
        item_counter: Number of the current ordered list item.
        indent_level: List nesting depth, 0 outside lists.
    """

    def __init__(
        self,
        chunk_size: int,
        chunk_overlap: int,
        second_splitter: TextSplitter,
        level_header_fn: LevelHeaderFn | None = None,
        length_function: Callable[[str], int] = len,
        headers: list[str] | None = None,
    ) -> None:
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.second_splitter = second_splitter
        self.level_header_fn = level_header_fn
        self.length_function = length_function
        self.headers: list[str] = [] if headers is None else headers
        self.chunks: list[Chunk] = []
        self.atomic: set[int] = set()

        self._buffer = ""
        self._title: str | None = None
        # attached: the title already starts a buffer of the current run
        # used: the title has been written into at least one chunk
        self._title_attached = False
        self._title_used = False

        self.ordered_list = False
        self.item_counter = 0
        self.indent_level = 0

        self._table_header: list[str] | None = None
        self._table_rows: list[list[str]] = []
        self._table_row: list[str] = []

    @property
    def buffer(self) -> str:
        """Text written since the last commit."""
        return self._buffer

    @property
    def limit(self) -> int:
        """Longest text emitted as a single chunk without re-splitting."""
        return self.chunk_size + self.chunk_overlap

    def metadata(self) -> dict[str, Any]:
        """Metadata of a chunk emitted under the current header stack."""
        return build_header_metadata(self.headers, self.level_header_fn)

    def append(self, text: str) -> None:
        """Write text, committing first when the chunk size would be reached."""
        if not text:
            return

        length = self.length_function
        if self._buffer and length(self._buffer) + length(text) >= self.chunk_size:
            self.commit()

        if not self._buffer and self._title and not self._title_attached:
            text = f"{self._title}{text}"
            self._title_attached = True
            self._title_used = True

        self._buffer += text

    def ensure_newline(self) -> None:
        """Terminate the buffered text with a newline if it has none."""
        if self._buffer and not self._buffer.endswith("\n"):
            self.append("\n")

    def commit(self) -> None:
        """Flush the buffer into chunks.

        A buffer longer than ``chunk_size + chunk_overlap`` is re-split by the
        fallback splitter; all pieces share one metadata snapshot. When
        nothing was emitted and the pending heading never made it into a
        chunk, the heading is emitted alone.
        """
        metadata = self.metadata()
        emitted = 0

        if self._buffer:
            if self.length_function(self._buffer) <= self.limit:
                pieces = [self._buffer]
            else:
                pieces = [c.text for c in self.second_splitter.split_text(self._buffer)]
                logger.debug(
                    f"Buffer over {self.limit}, fallback splitter "
                    f"produced {len(pieces)} chunks"
                )
            for piece in pieces:
                if not piece:
                    continue
                self.chunks.append(Chunk(text=piece, metadata=dict(metadata)))
                emitted += 1

        if not emitted and self._title and not self._title_used:
            self.chunks.append(Chunk(text=self._title, metadata=metadata))
            self._title_attached = True
            self._title_used = True

        self._buffer = ""

    def emit(self, text: str) -> None:
        """Emit ``text`` as one chunk, bypassing the buffer and size checks."""
        self.chunks.append(Chunk(text=text, metadata=self.metadata()))

    def emit_atomic(self, text: str) -> None:
        """Emit an indivisible unit whole, after any buffered content.

        A pending heading title that has not started a buffer yet is
        prefixed onto the unit. The chunk is recorded in ``atomic`` so that
        callers merging this writer's chunks keep it whole.
        """
        if self._buffer:
            self.commit()

        if self._title and not self._title_attached:
            text = f"{self._title}{text}"
            self._title_attached = True
            self._title_used = True

        self.atomic.add(len(self.chunks))
        self.emit(text)

    def exceeds_limit(self, text: str) -> bool:
        """Whether ``text`` would overflow a buffer it starts.

        Counts the pending heading title that would be prefixed onto it.
        """
        prefix = self._title if self._title and not self._title_attached else ""
        return self.length_function(f"{prefix}{text}") > self.limit

    def enter_heading(self, level: int, text: str) -> None:
        """Start a new section under a heading of ``level``.

        The header stack is resized to ``level``: entries of deeper levels
        are dropped and missing shallower levels are filled with "".
        """
        self.commit()

        self._title = f"{'#' * level} {text}\n"
        self._title_attached = False
        self._title_used = False

        del self.headers[level:]
        self.headers.extend([""] * (level - len(self.headers)))
        self.headers[level - 1] = text

    def rearm_title(self) -> None:
        """Let the next buffer started after a commit carry the heading again."""
        self._title_attached = False

    def clone(self) -> "MarkdownWriter":
        """Child writer for a nested structure.

        The child shares limits, header stack, fallback splitter and
        metadata function, and starts with an empty buffer, no pending
        heading and fresh list and table context.
        """
        child = MarkdownWriter(
            chunk_size=self.chunk_size,
            chunk_overlap=self.chunk_overlap,
            second_splitter=self.second_splitter,
            level_header_fn=self.level_header_fn,
            length_function=self.length_function,
            headers=self.headers,
        )
        child.indent_level = self.indent_level
        return child

    def reset(self) -> None:
        """Drop buffered text and emitted chunks."""
        self._buffer = ""
        self.chunks = []
        self.atomic = set()

    def add_table_cell(self, text: str) -> None:
        self._table_row.append(text)

    def end_table_header(self) -> None:
        self._table_header = self._table_row
        self._table_row = []

    def end_table_row(self) -> None:
        if self._table_header is None:
            self._table_header = self._table_row
        else:
            self._table_rows.append(self._table_row)
        self._table_row = []

    def take_table(self) -> tuple[list[str], list[list[str]]]:
        """Return the collected header and data rows and clear the table.

        When every header cell is empty and there are data rows, the first
        data row is promoted to header.
        """
        header = self._table_header or []
        rows = self._table_rows
        self._table_header = None
        self._table_rows = []
        self._table_row = []

        if rows and not any(header):
            header, rows = rows[0], rows[1:]
        return header, rows
