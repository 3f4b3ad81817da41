#  Copyright (c) 2025 Tom Villani, Ph.D.
"""md2adf - convert a restricted subset of Markdown into Atlassian Document Format.

md2adf turns Markdown text into ADF JSON: a ``doc`` root holding paragraphs
and code blocks, whose content is text optionally annotated with a link mark.

The conversion is deliberately strict. Paragraphs may contain only plain text
and links; everything else Markdown can express (headings, lists, emphasis,
images, tables, block quotes, ...) raises :class:`UnsupportedNodeError`
instead of being dropped or flattened.

Pipeline
--------
1. :class:`md2adf.parsers.MarkdownParser` parses text (via mistune) into a
   generic syntax tree of :class:`MarkdownNode` values.
2. :class:`md2adf.converter.MarkdownToAdfConverter` walks that tree and drives
   a :class:`md2adf.adf.DocumentBuilder`.
3. :class:`md2adf.renderers.AdfJsonRenderer` serializes the finished
   :class:`md2adf.adf.AdfDocument` to JSON.

Examples
--------
    >>> from md2adf import from_markdown
    >>> from_markdown("[docs](https://example.com)")
    '{"type": "doc", "version": 1, "content": [{"type": "paragraph", "content": [{"type": "text", "text": "docs", "marks": [{"type": "link", "attrs": {"href": "https://example.com"}}]}]}]}'

"""

from md2adf.adf import AdfDocument, CodeBlock, DocumentBuilder, Mark, Paragraph, Text, adf_to_json, json_to_adf
from md2adf.api import from_markdown, markdown_to_adf, parse_markdown
from md2adf.converter import MarkdownToAdfConverter
from md2adf.exceptions import (
    AdfValidationError,
    BuilderFinishedError,
    InvalidOptionsError,
    Md2AdfError,
    UnsupportedNode,
    UnsupportedNodeError,
    ValidationError,
)
from md2adf.options import AdfRendererOptions, MarkdownParserOptions
from md2adf.parsers import MarkdownNode, MarkdownParser
from md2adf.renderers import AdfJsonRenderer

__version__ = "0.1.0"

__all__ = [
    "AdfDocument",
    "AdfJsonRenderer",
    "AdfRendererOptions",
    "AdfValidationError",
    "BuilderFinishedError",
    "CodeBlock",
    "DocumentBuilder",
    "InvalidOptionsError",
    "Mark",
    "MarkdownNode",
    "MarkdownParser",
    "MarkdownParserOptions",
    "MarkdownToAdfConverter",
    "Md2AdfError",
    "Paragraph",
    "Text",
    "UnsupportedNode",
    "UnsupportedNodeError",
    "ValidationError",
    "__version__",
    "adf_to_json",
    "from_markdown",
    "json_to_adf",
    "markdown_to_adf",
    "parse_markdown",
]
