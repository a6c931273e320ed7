"""Markdown document tree consumed by the splitter.

The tree is a closed set of node classes. Parsers build it, the splitter only
reads it. Every node keeps its children in document order; leaf kinds simply
have an empty ``children`` list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class NodeKind(str, Enum):
    """Kind tag of a document node."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LIST_ITEM = "list_item"
    TABLE = "table"
    TABLE_HEADER = "table_header"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    CODE_BLOCK = "code_block"
    BLOCK_QUOTE = "block_quote"
    LINK = "link"
    AUTO_LINK = "auto_link"
    TEXT = "text"
    STRING = "string"
    EMPHASIS = "emphasis"


@dataclass
class Node:
    """Base class of all document nodes."""

    kind: ClassVar[NodeKind]

    children: list[MarkdownNode] = field(default_factory=list, kw_only=True)


@dataclass
class Document(Node):
    """Root of a parsed document."""

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT


@dataclass
class Heading(Node):
    """ATX or setext heading.

    Attributes:
        level: Heading level, 1 for ``#``.
        text: Raw heading source without the ``#`` markers, inline markup
            included.
    """

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: int
    text: str


@dataclass
class Paragraph(Node):
    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH


@dataclass
class List(Node):
    """Bullet or ordered list whose children are ListItem nodes."""

    kind: ClassVar[NodeKind] = NodeKind.LIST

    ordered: bool = False


@dataclass
class ListItem(Node):
    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM


@dataclass
class Table(Node):
    """GFM table: an optional TableHeader followed by TableRow nodes."""

    kind: ClassVar[NodeKind] = NodeKind.TABLE


@dataclass
class TableHeader(Node):
    """Header row; its children are TableCell nodes."""

    kind: ClassVar[NodeKind] = NodeKind.TABLE_HEADER


@dataclass
class TableRow(Node):
    kind: ClassVar[NodeKind] = NodeKind.TABLE_ROW


@dataclass
class TableCell(Node):
    """Table cell with its raw inline source, trimmed."""

    kind: ClassVar[NodeKind] = NodeKind.TABLE_CELL

    text: str = ""


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    Attributes:
        lines: Raw lines, newline-terminated and not HTML-escaped.
        info: Fence info string (language), empty for indented blocks.
    """

    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK

    lines: list[str] = field(default_factory=list)
    info: str = ""


@dataclass
class BlockQuote(Node):
    """Block quote with its quoted text, markers stripped."""

    kind: ClassVar[NodeKind] = NodeKind.BLOCK_QUOTE

    text: str = ""


@dataclass
class Link(Node):
    """Inline link; ``text`` is the plain text of the link label."""

    kind: ClassVar[NodeKind] = NodeKind.LINK

    text: str = ""
    destination: str = ""


@dataclass
class AutoLink(Node):
    """``<https://...>`` style link."""

    kind: ClassVar[NodeKind] = NodeKind.AUTO_LINK

    label: str = ""
    url: str = ""


@dataclass
class Text(Node):
    """Plain text run, optionally followed by a soft line break."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    value: str = ""
    soft_line_break: bool = False


@dataclass
class String(Node):
    """Text emitted verbatim (inline code, inline HTML, images)."""

    kind: ClassVar[NodeKind] = NodeKind.STRING

    value: str = ""


@dataclass
class Emphasis(Node):
    """Emphasis; level 1 is ``*em*``, level 2 is ``**strong**``."""

    kind: ClassVar[NodeKind] = NodeKind.EMPHASIS

    level: int = 1


MarkdownNode = (
    Document
    | Heading
    | Paragraph
    | List
    | ListItem
    | Table
    | TableHeader
    | TableRow
    | TableCell
    | CodeBlock
    | BlockQuote
    | Link
    | AutoLink
    | Text
    | String
    | Emphasis
)
