"""Document tree model and the markdown-it-py adapter that builds it."""

from mdsplit.parsing.markdown_it import create_parser, parse_markdown
from mdsplit.parsing.nodes import MarkdownNode, NodeKind

__all__ = ["MarkdownNode", "NodeKind", "create_parser", "parse_markdown"]
