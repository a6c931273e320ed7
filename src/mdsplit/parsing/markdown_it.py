"""Build the splitter's document tree with markdown-it-py.

The parser runs the CommonMark preset with the GFM table rule enabled and
its token stream is converted from ``SyntaxTreeNode`` form into
``mdsplit.parsing.nodes``. Thematic breaks and empty table sections are
dropped; every other construct maps onto one of the node classes.
"""

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdsplit.lib.errors import ParseError
from mdsplit.lib.logging_config import get_logger
from mdsplit.parsing.nodes import (
    AutoLink,
    BlockQuote,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Link,
    List,
    ListItem,
    MarkdownNode,
    Paragraph,
    String,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    Text,
)

logger = get_logger(__name__)

_EMPHASIS_LEVELS = {"em": 1, "strong": 2}


def create_parser() -> MarkdownIt:
    """Return a CommonMark parser with GFM tables enabled."""
    return MarkdownIt("commonmark").enable("table")


def parse_markdown(source: str, parser: MarkdownIt | None = None) -> Document:
    """Parse markdown source into a Document tree.

    Args:
        source: Markdown text.
        parser: Optional pre-configured parser.

    Returns:
        The Document root.

    Raises:
        ParseError: If markdown-it rejects the input.
    """
    parser = parser or create_parser()
    try:
        tokens = parser.parse(source)
        root = SyntaxTreeNode(tokens)
    except Exception as exc:
        raise ParseError(str(exc)) from exc

    document = Document(children=_convert_children(root.children))
    logger.debug(f"Parsed {len(tokens)} tokens into {len(document.children)} blocks")
    return document


def _convert_children(nodes: list[SyntaxTreeNode]) -> list[MarkdownNode]:
    converted: list[MarkdownNode] = []
    for node in nodes:
        converted.extend(_convert(node, converted))
    return converted


def _convert(
    node: SyntaxTreeNode, siblings: list[MarkdownNode]
) -> list[MarkdownNode]:
    """Convert one syntax-tree node; may return zero or several nodes.

    ``siblings`` holds the already converted preceding siblings so that line
    breaks can be folded into the previous text run.
    """
    match node.type:
        case "heading":
            return [Heading(level=int(node.tag[1:]), text=_inline_source(node))]
        case "paragraph":
            return [Paragraph(children=_convert_children(_inline_children(node)))]
        case "bullet_list" | "ordered_list":
            return [
                List(
                    ordered=node.type == "ordered_list",
                    children=_convert_children(node.children),
                )
            ]
        case "list_item":
            return [ListItem(children=_convert_children(node.children))]
        case "table":
            return [Table(children=_convert_table(node))]
        case "fence" | "code_block":
            return [
                CodeBlock(
                    lines=node.content.splitlines(keepends=True),
                    info=(node.info or "").strip(),
                )
            ]
        case "blockquote":
            return [BlockQuote(text=_quoted_text(node))]
        case "html_block":
            return [String(value=node.content)]
        case "inline":
            return _convert_children(node.children)
        case "text":
            if not node.content:
                return []
            return [Text(value=node.content)]
        case "softbreak" | "hardbreak":
            previous = siblings[-1] if siblings else None
            if isinstance(previous, Text) and not previous.soft_line_break:
                previous.soft_line_break = True
                return []
            return [Text(value="", soft_line_break=True)]
        case "code_inline":
            fence = node.markup or "`"
            return [String(value=f"{fence}{node.content}{fence}")]
        case "html_inline":
            return [String(value=node.content)]
        case "image":
            return [String(value=f"![{node.content}]({node.attrs.get('src', '')})")]
        case "em" | "strong":
            return [
                Emphasis(
                    level=_EMPHASIS_LEVELS[node.type],
                    children=_convert_children(node.children),
                )
            ]
        case "link":
            href = str(node.attrs.get("href", ""))
            label = _plain_text(node)
            if node.markup == "autolink":
                return [AutoLink(label=label, url=href)]
            return [
                Link(
                    text=label,
                    destination=href,
                    children=_convert_children(node.children),
                )
            ]
        case _:
            logger.debug(f"Dropping unsupported markdown node '{node.type}'")
            return []


def _convert_table(node: SyntaxTreeNode) -> list[MarkdownNode]:
    rows: list[MarkdownNode] = []
    for section in node.children:
        for row in section.children:
            cells = [TableCell(text=_inline_source(cell)) for cell in row.children]
            if section.type == "thead":
                rows.append(TableHeader(children=cells))
            else:
                rows.append(TableRow(children=cells))
    return rows


def _inline_children(node: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    return [
        grandchild
        for child in node.children
        if child.type == "inline"
        for grandchild in child.children
    ]


def _inline_source(node: SyntaxTreeNode) -> str:
    """Raw inline source of a block (heading, table cell)."""
    parts = [child.content for child in node.children if child.type == "inline"]
    return "".join(parts).strip()


def _plain_text(node: SyntaxTreeNode) -> str:
    """Concatenated text content of every descendant, markup dropped."""
    parts: list[str] = []
    for child in node.children:
        if child.type in ("text", "code_inline"):
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append("\n")
        else:
            parts.append(_plain_text(child))
    return "".join(parts)


def _quoted_text(node: SyntaxTreeNode) -> str:
    """Inline source of every block inside a quote, one block per line."""
    lines: list[str] = []
    for child in node.walk():
        if child.type == "inline":
            lines.append(child.content)
        elif child.type in ("fence", "code_block"):
            lines.append(child.content.rstrip("\n"))
    return "\n".join(lines)
