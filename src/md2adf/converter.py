#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adf/converter.py
"""Markdown syntax tree to ADF conversion.

The converter walks the top-level nodes of a :class:`MarkdownNode` tree in
source order and replays them as :class:`DocumentBuilder` calls. Support is
an allow-list: only paragraphs (holding text and links) and code blocks are
converted. Any other node kind raises :class:`UnsupportedNodeError` at once
and the whole conversion is abandoned; nothing is dropped or flattened
silently.

"""

from __future__ import annotations

import logging
from typing import Callable

from md2adf.adf.builder import DocumentBuilder, ParagraphBuilder
from md2adf.adf.nodes import AdfDocument
from md2adf.constants import MD_CODE, MD_LINK, MD_PARAGRAPH, MD_ROOT, MD_TEXT
from md2adf.exceptions import UnsupportedNodeError
from md2adf.parsers.markdown import MarkdownNode

logger = logging.getLogger(__name__)


def link_display_text(node: MarkdownNode) -> str:
    """Return the text shown for a link node.

    The first child's value is used when it is a text node. A link without
    children, or whose first child is anything else (an image, emphasis),
    falls back to its URL.

    Parameters
    ----------
    node : MarkdownNode
        A node of kind "link"

    Returns
    -------
    str
        The display text

    """
    first = node.first_child
    if first is not None and first.kind == MD_TEXT:
        return first.value or ""
    return node.url or ""


class MarkdownToAdfConverter:
    """Convert a generic Markdown syntax tree into an ADF document.

    Each call to :meth:`convert` uses a fresh :class:`DocumentBuilder`, so one
    converter instance can be shared between threads.

    Examples
    --------
    >>> from md2adf.parsers.markdown import MarkdownParser
    >>> doc = MarkdownToAdfConverter().convert(MarkdownParser().parse("Hello"))
    >>> doc.content[0].content[0].text
    'Hello'

    """

    def __init__(self) -> None:
        self._block_handlers: dict[str, Callable[[DocumentBuilder, MarkdownNode], None]] = {
            MD_PARAGRAPH: self._convert_paragraph,
            MD_CODE: self._convert_code,
        }
        self._inline_handlers: dict[str, Callable[[ParagraphBuilder, MarkdownNode], None]] = {
            MD_TEXT: self._convert_text,
            MD_LINK: self._convert_link,
        }

    def convert(self, root: MarkdownNode) -> AdfDocument:
        """Convert a parsed Markdown tree.

        Parameters
        ----------
        root : MarkdownNode
            Root node returned by the Markdown parser

        Returns
        -------
        AdfDocument
            The finished document

        Raises
        ------
        UnsupportedNodeError
            On the first node outside the supported subset

        """
        nodes = root.children if root.kind == MD_ROOT else [root]
        builder = DocumentBuilder()

        for node in nodes:
            handler = self._block_handlers.get(node.kind)
            if handler is None:
                logger.debug("Rejecting top-level node of kind '%s'", node.kind)
                raise UnsupportedNodeError(node.kind, context="document")
            handler(builder, node)

        logger.debug("Converted %d top-level block(s)", builder.block_count)
        return builder.finish()

    def _convert_paragraph(self, builder: DocumentBuilder, node: MarkdownNode) -> None:
        paragraph = builder.begin_paragraph()
        for child in node.children:
            handler = self._inline_handlers.get(child.kind)
            if handler is None:
                logger.debug("Rejecting paragraph child of kind '%s'", child.kind)
                raise UnsupportedNodeError(child.kind, context="paragraph")
            handler(paragraph, child)

    def _convert_code(self, builder: DocumentBuilder, node: MarkdownNode) -> None:
        # info string (language) is not carried over
        builder.begin_code_block().append_text(node.value or "")

    def _convert_text(self, paragraph: ParagraphBuilder, node: MarkdownNode) -> None:
        paragraph.append_text(node.value or "")

    def _convert_link(self, paragraph: ParagraphBuilder, node: MarkdownNode) -> None:
        paragraph.append_link(link_display_text(node), node.url or "")


def convert_tree(root: MarkdownNode) -> AdfDocument:
    """Convert a parsed Markdown tree with a default converter."""
    return MarkdownToAdfConverter().convert(root)


__all__ = ["MarkdownToAdfConverter", "convert_tree", "link_display_text"]
