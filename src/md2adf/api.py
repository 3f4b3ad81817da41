#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adf/api.py
"""Public conversion entry points.

All functions are synchronous and keep no state between calls; every call
builds its own parser, builder and document.
"""

from __future__ import annotations

from typing import Optional

from md2adf.adf.nodes import AdfDocument
from md2adf.converter import MarkdownToAdfConverter
from md2adf.options.adf import AdfRendererOptions
from md2adf.options.markdown import MarkdownParserOptions
from md2adf.parsers.markdown import MarkdownNode, MarkdownParser
from md2adf.renderers.adf_json import AdfJsonRenderer


def parse_markdown(markdown: str, *, parser_options: Optional[MarkdownParserOptions] = None) -> MarkdownNode:
    """Parse Markdown into the generic syntax tree used by the converter.

    Parameters
    ----------
    markdown : str
        Markdown source text
    parser_options : MarkdownParserOptions, optional
        Parser configuration

    Returns
    -------
    MarkdownNode
        Root of the syntax tree

    """
    return MarkdownParser(parser_options).parse(markdown)


def markdown_to_adf(markdown: str, *, parser_options: Optional[MarkdownParserOptions] = None) -> AdfDocument:
    """Convert Markdown into an ADF document value.

    Parameters
    ----------
    markdown : str
        Markdown source text
    parser_options : MarkdownParserOptions, optional
        Parser configuration

    Returns
    -------
    AdfDocument
        The converted document

    Raises
    ------
    UnsupportedNodeError
        If the input contains anything other than paragraphs of text and
        links, or code blocks
    ValidationError
        If ``markdown`` is not a string

    """
    root = parse_markdown(markdown, parser_options=parser_options)
    return MarkdownToAdfConverter().convert(root)


def from_markdown(
    markdown: str,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[AdfRendererOptions] = None,
) -> str:
    """Convert Markdown into ADF JSON text.

    Parameters
    ----------
    markdown : str
        Markdown source text
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    renderer_options : AdfRendererOptions, optional
        JSON output configuration (compact by default)

    Returns
    -------
    str
        ADF JSON text

    Raises
    ------
    UnsupportedNodeError
        On the first unsupported Markdown construct; no JSON is produced

    Examples
    --------
    >>> from_markdown("this is some paragraph")
    '{"type": "doc", "version": 1, "content": [{"type": "paragraph", "content": [{"type": "text", "text": "this is some paragraph"}]}]}'

    """
    document = markdown_to_adf(markdown, parser_options=parser_options)
    return AdfJsonRenderer(renderer_options).render_to_string(document)


__all__ = ["from_markdown", "markdown_to_adf", "parse_markdown"]
