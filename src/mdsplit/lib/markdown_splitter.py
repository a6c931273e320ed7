"""Structure-aware markdown splitter.

Key Features:
- Headings always start a new chunk; the heading line leads the first chunk
  of its section and heading-only sections become chunks of their own
- Heading hierarchy exposed as chunk metadata through a level-header function
- Lists rendered item by item with numbering and two-space nesting indent
- Tables split per data row, each chunk repeating the table header
- Code blocks copied verbatim inside fences, opaque to structure detection
- Oversized buffers re-split by a separator-tiered fallback splitter
"""

from collections.abc import Callable

from mdsplit.config.defaults import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_SEPARATORS,
)
from mdsplit.lib.errors import ConfigError, ValidationError
from mdsplit.lib.logging_config import get_logger
from mdsplit.lib.markdown_writer import MarkdownWriter
from mdsplit.lib.metadata import LevelHeaderFn
from mdsplit.lib.renderers import MarkdownRenderer
from mdsplit.lib.text_splitter import RecursiveCharacterSplitter, TextSplitter
from mdsplit.lib.tokenization import get_length_function
from mdsplit.models.chunk import Chunk
from mdsplit.models.config import SplitterConfig
from mdsplit.parsing.markdown_it import parse_markdown
from mdsplit.parsing.nodes import Document

logger = get_logger(__name__)


class MarkdownTextSplitter:
    """Split markdown into size-bounded chunks carrying heading context.

    Attributes:
        chunk_size: Length at which a chunk is closed.
        chunk_overlap: Extra length tolerated before re-splitting, and the
            overlap used by the default fallback splitter.
        second_splitter: Splitter used for buffers longer than
            ``chunk_size + chunk_overlap``.
        level_header_fn: Builds metadata fragments from active headings.

    Example:
        >>> from mdsplit.lib.metadata import heading_levels
        >>> splitter = MarkdownTextSplitter(
        ...     chunk_size=512, chunk_overlap=64, level_header_fn=heading_levels()
        ... )
        >>> chunks = splitter.split_text("# Intro\\nHello.\\n## Usage\\nRun it.\\n")
        >>> [c.text for c in chunks]
        ['# Intro\\nHello.\\n', '## Usage\\nRun it.\\n']
        >>> chunks[1].metadata
        {'h1': 'Intro', 'h2': 'Usage'}
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        second_splitter: TextSplitter | None = None,
        level_header_fn: LevelHeaderFn | None = None,
        length_function: Callable[[str], int] = len,
    ) -> None:
        """Initialize the splitter.

        Args:
            chunk_size: Positive chunk length threshold.
            chunk_overlap: Non-negative overlap.
            second_splitter: Optional fallback splitter override. Defaults to
                a RecursiveCharacterSplitter with the same limits splitting
                on paragraph, line and word boundaries.
            level_header_fn: Optional ``(level, text) -> dict | None``.
            length_function: Measures text; ``len`` counts characters.

        Raises:
            ConfigError: If the limits are invalid.
        """
        if chunk_size <= 0:
            raise ConfigError("chunk_size", "must be positive")
        if chunk_overlap < 0:
            raise ConfigError("chunk_overlap", "must not be negative")
        if chunk_overlap >= chunk_size:
            logger.warning(
                f"chunk_overlap ({chunk_overlap}) is not smaller than "
                f"chunk_size ({chunk_size})"
            )

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.level_header_fn = level_header_fn
        self.length_function = length_function
        self.second_splitter: TextSplitter = second_splitter or (
            RecursiveCharacterSplitter(
                chunk_size=chunk_size,
                chunk_overlap=chunk_overlap,
                separators=DEFAULT_SEPARATORS,
                length_function=length_function,
            )
        )
        self._renderer = MarkdownRenderer()

    @classmethod
    def from_config(
        cls,
        config: SplitterConfig,
        level_header_fn: LevelHeaderFn | None = None,
        second_splitter: TextSplitter | None = None,
    ) -> "MarkdownTextSplitter":
        """Build a splitter from a validated SplitterConfig.

        The configured separators and length unit also apply to the default
        fallback splitter.
        """
        length_function = get_length_function(config.length_unit, config.encoding_name)
        if second_splitter is None:
            second_splitter = RecursiveCharacterSplitter(
                chunk_size=config.chunk_size,
                chunk_overlap=config.chunk_overlap,
                separators=config.separators,
                length_function=length_function,
            )
        return cls(
            chunk_size=config.chunk_size,
            chunk_overlap=config.chunk_overlap,
            second_splitter=second_splitter,
            level_header_fn=level_header_fn,
            length_function=length_function,
        )

    def split_text(self, text: str) -> list[Chunk]:
        """Parse markdown and split it into chunks.

        Args:
            text: Markdown source.

        Returns:
            Chunks in document order.

        Raises:
            ValidationError: If ``text`` is not a string.
            ParseError: If the markdown parser fails.
            RenderError: If a node cannot be rendered.
        """
        if not isinstance(text, str):
            raise ValidationError(
                field="text",
                message="Markdown input must be text",
                expected="str",
                actual=type(text).__name__,
            )
        return self.split_document(parse_markdown(text))

    def split_document(self, document: Document) -> list[Chunk]:
        """Split an already parsed document tree.

        Any error raised while rendering aborts the split; no partial
        result is returned.
        """
        writer = MarkdownWriter(
            chunk_size=self.chunk_size,
            chunk_overlap=self.chunk_overlap,
            second_splitter=self.second_splitter,
            level_header_fn=self.level_header_fn,
            length_function=self.length_function,
        )
        self._renderer.render(writer, document)
        writer.commit()

        logger.debug(
            f"Split document into {len(writer.chunks)} chunks "
            f"(chunk_size={self.chunk_size}, chunk_overlap={self.chunk_overlap})"
        )
        return writer.chunks
