"""mdsplit - structure-aware markdown splitting for indexing and retrieval.

mdsplit turns a markdown document into an ordered list of size-bounded
chunks while keeping the active heading hierarchy as per-chunk metadata.

Main features:
- Headings, lists, tables and code fences reconstructed chunk by chunk
- Table rows emitted one per chunk with the header repeated
- Separator-tiered fallback splitter with sliding overlap
- Character or tiktoken token length budgets
"""

from mdsplit.config.loader import load_splitter_config
from mdsplit.lib.errors import (
    ConfigError,
    MdSplitError,
    ParseError,
    RenderError,
    ValidationError,
)
from mdsplit.lib.markdown_splitter import MarkdownTextSplitter
from mdsplit.lib.metadata import LevelHeaderFn, heading_levels
from mdsplit.lib.text_splitter import RecursiveCharacterSplitter, TextSplitter
from mdsplit.models.chunk import Chunk
from mdsplit.models.config import LengthUnit, SplitterConfig

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Chunk",
    "ConfigError",
    "LengthUnit",
    "LevelHeaderFn",
    "MarkdownTextSplitter",
    "MdSplitError",
    "ParseError",
    "RecursiveCharacterSplitter",
    "RenderError",
    "SplitterConfig",
    "TextSplitter",
    "ValidationError",
    "heading_levels",
    "load_splitter_config",
]
