"""Per-node rendering rules that reconstruct markdown text into a writer.

Each node kind has one rule, selected by a ``match`` over the node classes.
Rules return a WalkStatus; headings and links rebuild their text from the
node attributes and skip their inline children, lists render their items
themselves through a cloned writer.
"""

import html

from mdsplit.lib.errors import RenderError
from mdsplit.lib.logging_config import get_logger
from mdsplit.lib.markdown_writer import MarkdownWriter
from mdsplit.lib.walker import WalkStatus, walk
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

INDENT = "  "
FENCE = "```"


def format_with_indent(text: str, indent: str = INDENT) -> str:
    """Prefix every non-blank line of ``text`` with ``indent``."""
    return "".join(
        f"{indent}{line}" if line.strip() else line
        for line in text.splitlines(keepends=True)
    )


def table_row_markdown(cells: list[str]) -> str:
    """Canonical table row: ``| a | b |``."""
    return f"| {' | '.join(cells)} |"


def table_header_markdown(header: list[str]) -> str:
    """Header row followed by its ``| --- |`` separator line."""
    separator = table_row_markdown(["---"] * len(header))
    return f"{table_row_markdown(header)}\n{separator}"


def escape_code(text: str) -> str:
    """Escape ``<``, ``>``, ``&``, ``"`` and ``'`` as HTML entities."""
    return html.escape(text, quote=True)


def code_block_markdown(node: CodeBlock) -> str:
    body = "".join(escape_code(line) for line in node.lines)
    if body and not body.endswith("\n"):
        body += "\n"
    return f"{FENCE}{node.info}\n{body}{FENCE}\n"


class MarkdownRenderer:
    """Renders document nodes into a MarkdownWriter.

    Example:
        >>> from mdsplit.lib.text_splitter import RecursiveCharacterSplitter
        >>> from mdsplit.parsing.nodes import Document, Paragraph, Text
        >>> writer = MarkdownWriter(64, 0, RecursiveCharacterSplitter(64))
        >>> doc = Document(children=[Paragraph(children=[Text(value="Hi")])])
        >>> _ = MarkdownRenderer().render(writer, doc)
        >>> writer.buffer
        'Hi\\n'
    """

    def render(self, writer: MarkdownWriter, node: MarkdownNode) -> WalkStatus:
        """Walk ``node`` and render every visited node into ``writer``."""
        return walk(node, lambda n, entering: self.visit(writer, n, entering))

    def visit(
        self, writer: MarkdownWriter, node: MarkdownNode, entering: bool
    ) -> WalkStatus:
        """Apply the rendering rule of ``node`` for one enter or exit event."""
        match node:
            case Document():
                return WalkStatus.CONTINUE
            case Heading():
                if entering:
                    if node.level < 1:
                        raise RenderError(
                            node.kind.value, f"invalid heading level {node.level}"
                        )
                    writer.enter_heading(node.level, node.text)
                return WalkStatus.SKIP_CHILDREN
            case Paragraph():
                if not entering:
                    writer.append("\n")
                return WalkStatus.CONTINUE
            case List():
                if entering:
                    return self._render_list(writer, node)
                return WalkStatus.CONTINUE
            case ListItem():
                if entering:
                    if writer.ordered_list:
                        writer.item_counter += 1
                        writer.append(f"{writer.item_counter}. ")
                    else:
                        writer.append("- ")
                else:
                    writer.ensure_newline()
                return WalkStatus.CONTINUE
            case Table():
                if entering:
                    writer.commit()
                else:
                    self._emit_table(writer)
                return WalkStatus.CONTINUE
            case TableHeader():
                if not entering:
                    writer.end_table_header()
                return WalkStatus.CONTINUE
            case TableRow():
                if not entering:
                    writer.end_table_row()
                return WalkStatus.CONTINUE
            case TableCell():
                if entering:
                    writer.add_table_cell(node.text)
                return WalkStatus.SKIP_CHILDREN
            case CodeBlock():
                if entering:
                    text = code_block_markdown(node)
                    if writer.exceeds_limit(text):
                        self._emit_code_block(writer, text)
                    else:
                        writer.append(text)
                return WalkStatus.SKIP_CHILDREN
            case BlockQuote():
                if entering:
                    writer.append(f"{FENCE}\n{node.text}\n{FENCE}\n")
                return WalkStatus.SKIP_CHILDREN
            case Link():
                if entering:
                    writer.append(f"[{node.text}]({node.destination})")
                return WalkStatus.SKIP_CHILDREN
            case AutoLink():
                if entering:
                    writer.append(f"[{node.label}]({node.url})")
                return WalkStatus.CONTINUE
            case Text():
                if entering:
                    writer.append(node.value + ("\n" if node.soft_line_break else ""))
                return WalkStatus.CONTINUE
            case String():
                if entering:
                    writer.append(node.value)
                return WalkStatus.CONTINUE
            case Emphasis():
                writer.append("*" * node.level)
                return WalkStatus.CONTINUE
            case _:
                raise RenderError(type(node).__name__, "unknown node type")

    def _render_list(self, writer: MarkdownWriter, node: List) -> WalkStatus:
        """Render each item in isolation and merge it into ``writer``.

        Items of a top-level list are chunk boundaries: each one starts a
        new buffer that carries the section heading again.
        """
        child = writer.clone()
        child.ordered_list = node.ordered
        child.item_counter = 0
        child.indent_level = writer.indent_level + 1
        top_level = writer.indent_level == 0

        for index, item in enumerate(node.children):
            child.reset()
            if self.render(child, item) is WalkStatus.STOP:
                return WalkStatus.STOP
            child.commit()

            if top_level and index > 0:
                writer.commit()
                writer.rearm_title()
            self._merge_item(writer, child)

        if top_level:
            writer.commit()
            writer.rearm_title()
        return WalkStatus.SKIP_CHILDREN

    def _merge_item(self, writer: MarkdownWriter, child: MarkdownWriter) -> None:
        """Append a rendered item's chunks to ``writer``.

        Runs of regular chunks are joined with newlines and appended; atomic
        chunks are passed on whole.
        """
        pending: list[str] = []
        for index, chunk in enumerate(child.chunks):
            text = chunk.text
            if child.indent_level > 1:
                text = format_with_indent(text)

            if index in child.atomic:
                writer.append("\n".join(pending))
                pending = []
                writer.emit_atomic(text)
            else:
                pending.append(text)
        writer.append("\n".join(pending))

    def _emit_code_block(self, writer: MarkdownWriter, text: str) -> None:
        length = writer.length_function(text)
        if length > writer.limit:
            logger.warning(
                f"Emitting {length}-length code block whole; "
                f"it exceeds chunk_size + chunk_overlap ({writer.limit})"
            )
        writer.emit_atomic(text)

    def _emit_table(self, writer: MarkdownWriter) -> None:
        """Emit one chunk per data row, each repeating the table header."""
        header, rows = writer.take_table()
        if not header and not rows:
            return

        header_md = table_header_markdown(header)
        if not rows:
            writer.emit(header_md)
            return

        for row in rows:
            writer.emit(f"{header_md}\n{table_row_markdown(row)}")
        logger.debug(f"Emitted table with {len(rows)} rows as {len(rows)} chunks")
